import numpy
import pytest

from phq.core import catalog
from phq.core import dimensions
from phq.core import quantity
from phq.core import text
from phq.core import units
from phq.core import values


ONE = '1.00000000000000000'


def test_create():
    """A quantity should store its value in the standard unit."""
    speed = quantity.Quantity(2.0, catalog.Speed.FOOT_PER_SECOND)
    assert speed.value == 0.6096
    assert speed.unit is catalog.Speed.METRE_PER_SECOND
    assert speed.category is catalog.Speed
    assert speed.value_in(catalog.Speed.FOOT_PER_SECOND) == pytest.approx(2.0)
    assert speed.dimensions == dimensions.Dimensions(time=-1, length=1)
    zero = quantity.Quantity.zero(catalog.Energy)
    assert zero.value == 0.0
    assert zero.unit is catalog.Energy.JOULE


def test_compare():
    """Quantities of the same category should compare by value."""
    foot = quantity.Quantity(1.0, catalog.Length.FOOT)
    metre = quantity.Quantity(1.0, catalog.Length.METRE)
    assert foot < metre
    assert metre >= foot
    assert foot == quantity.Quantity(1.0, catalog.Length.FOOT)
    inches = quantity.Quantity(12.0, catalog.Length.INCH)
    assert inches.value == pytest.approx(foot.value)
    assert foot != quantity.Quantity(1.0, catalog.Time.SECOND)
    with pytest.raises(units.UnitConversionError):
        foot < quantity.Quantity(1.0, catalog.Time.SECOND)
    a = quantity.Quantity(values.Vector(1, 0, 0), catalog.Length.METRE)
    b = quantity.Quantity(values.Vector(0, 1, 0), catalog.Length.METRE)
    with pytest.raises(quantity.QuantityError):
        a < b


def test_arithmetic():
    """Test arithmetic between quantities and with numbers."""
    one = quantity.Quantity(1.0, catalog.Length.METRE)
    two = quantity.Quantity(2.0, catalog.Length.METRE)
    assert one + one == two
    assert two - one == one
    assert -one == quantity.Quantity(-1.0, catalog.Length.METRE)
    assert 2 * one == two
    assert one * 2 == two
    assert two / 2 == one
    assert two / one == 2.0
    mile = quantity.Quantity(1.0, catalog.Length.MILE)
    feet = quantity.Quantity(5280.0, catalog.Length.FOOT)
    assert (mile - feet).value == pytest.approx(0.0, abs=1e-9)
    second = quantity.Quantity(1.0, catalog.Time.SECOND)
    with pytest.raises(units.UnitConversionError):
        one + second
    with pytest.raises(units.UnitConversionError):
        one / second
    with pytest.raises(TypeError):
        one + 1.0
    with pytest.raises(TypeError):
        hash(one)


def test_array_values():
    """Quantities may hold arrays."""
    lengths = quantity.Quantity(numpy.array([1.0, 2.0]), catalog.Length.FOOT)
    assert numpy.array_equal(lengths.value, [0.3048, 0.6096])
    assert lengths == quantity.Quantity(
        numpy.array([0.3048, 0.6096]), catalog.Length.METRE
    )
    single = quantity.Quantity(
        numpy.ones(2, dtype=numpy.float32), catalog.Length.FOOT
    )
    assert single.value.dtype == numpy.float32


def test_tensor_values():
    """Quantities may hold vectors and tensors."""
    position = quantity.Quantity(values.Vector(1, 0, 0), catalog.Length.FOOT)
    assert position.value == values.Vector(0.3048, 0, 0)
    doubled = position + position
    assert doubled.value == values.Vector(0.6096, 0, 0)
    stress = quantity.Quantity(
        values.SymmetricDyad(1, 0, 0, 1, 0, 1), catalog.Pressure.PASCAL,
    )
    assert stress.print() == f"({ONE}, 0, 0; {ONE}, 0; {ONE}) Pa"
    assert stress.json() == (
        f'{{"value":{{"xx":{ONE},"xy":0,"xz":0,"yy":{ONE},"yz":0,"zz":{ONE}}}'
        ',"unit":"Pa"}'
    )


def test_formats():
    """Test the text formats of scalar quantities."""
    minute = quantity.Quantity(1.0, catalog.Time.MINUTE)
    assert minute.print() == '60.0000000000000000 s'
    assert minute.print(unit=catalog.Time.MINUTE) == f'{ONE} min'
    assert minute.print(precision=text.Precision.SINGLE) == '60.00000000 s'
    assert str(minute) == minute.print()
    second = quantity.Quantity(1.0, catalog.Time.SECOND)
    assert second.json() == f'{{"value":{ONE},"unit":"s"}}'
    assert second.xml() == f'<value>{ONE}</value><unit>s</unit>'
    assert second.yaml() == f'{{value:{ONE},unit:"s"}}'
    assert quantity.Quantity.zero(catalog.Speed).print() == '0 m/s'
    hours = quantity.Quantity(1.0, catalog.Time.HOUR)
    assert hours.json(unit=catalog.Time.HOUR) == f'{{"value":{ONE},"unit":"hr"}}'


def test_sequence_values():
    """Lists and tuples should behave like arrays."""
    lengths = quantity.Quantity([1.0, 2.0], catalog.Length.FOOT)
    assert isinstance(lengths.value, numpy.ndarray)
    assert numpy.array_equal((lengths + lengths).value, [0.6096, 1.2192])
    assert numpy.array_equal((lengths * 2).value, [0.6096, 1.2192])
    times = quantity.Quantity((1.0, 2.0), catalog.Time.MINUTE)
    assert numpy.array_equal(times.value, [60.0, 120.0])


def test_unsupported_values():
    """Values that are not numbers should be rejected."""
    with pytest.raises(TypeError, match="'str'"):
        quantity.Quantity('1.0', catalog.Length.FOOT)
    with pytest.raises(TypeError, match="'dict'"):
        quantity.Quantity({'x': 1.0}, catalog.Length.FOOT)
