import numpy
import pytest

from phq.core import catalog
from phq.core import text
from phq.core import units
from phq.core import values


ONE = '1.00000000000000000'
TWO = '2.00000000000000000'


def test_vector_components():
    """Test access to the components of a vector."""
    v = values.Vector(1, 2, 3)
    assert v.x == 1.0 and v.y == 2.0 and v.z == 3.0
    assert v.dtype == numpy.float64
    assert numpy.array_equal(v.components, [1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        v.components[0] = 4.0
    with pytest.raises(AttributeError):
        v.w
    single = values.Vector(*numpy.ones(3, dtype=numpy.float32))
    assert single.dtype == numpy.float32


def test_vector_errors():
    """Vectors need exactly three components."""
    with pytest.raises(TypeError):
        values.Vector(1, 2)
    with pytest.raises(ValueError):
        values.Vector.from_array([1, 2, 3, 4])


def test_vector_algebra():
    """Test the geometric operations on vectors."""
    v = values.Vector(3.0, 4.0, 0.0)
    assert v.magnitude() == 5.0
    assert v.dot(values.Vector(1.0, 1.0, 1.0)) == 7.0
    x = values.Vector(1.0, 0.0, 0.0)
    y = values.Vector(0.0, 1.0, 0.0)
    assert x.cross(y) == values.Vector(0.0, 0.0, 1.0)
    assert y.cross(x) == values.Vector(0.0, 0.0, -1.0)


def test_vector_arithmetic():
    """Test component-wise arithmetic on vectors."""
    v = values.Vector(1.0, 2.0, 3.0)
    w = values.Vector(0.5, 0.5, 0.5)
    assert v + w == values.Vector(1.5, 2.5, 3.5)
    assert v - w == values.Vector(0.5, 1.5, 2.5)
    assert -v == values.Vector(-1.0, -2.0, -3.0)
    assert 2 * v == values.Vector(2.0, 4.0, 6.0)
    assert v * 2 == values.Vector(2.0, 4.0, 6.0)
    assert v / 2 == values.Vector(0.5, 1.0, 1.5)
    assert v != values.Dyad(1, 2, 3, 0, 0, 0, 0, 0, 0)
    with pytest.raises(TypeError):
        v + 1.0
    with pytest.raises(TypeError):
        v * w


def test_vector_formats():
    """Test the text formats of vectors."""
    v = values.Vector(0, 0, 1)
    assert v.print() == f"(0, 0, {ONE})"
    assert str(v) == v.print()
    assert v.json() == f'{{"x":0,"y":0,"z":{ONE}}}'
    assert v.xml() == f"<x>0</x><y>0</y><z>{ONE}</z>"
    assert v.yaml() == f"{{x:0,y:0,z:{ONE}}}"
    assert v.print(text.Precision.SINGLE) == "(0, 0, 1.000000000)"


def test_symmetric_dyad():
    """Test the symmetric rank-2 tensor."""
    t = values.SymmetricDyad(1, 2, 3, 4, 5, 6)
    assert t.xy == t.yx == 2.0
    assert t.xz == t.zx == 3.0
    assert t.yz == t.zy == 5.0
    expected = numpy.array([[1, 2, 3], [2, 4, 5], [3, 5, 6]], dtype=float)
    assert numpy.array_equal(t.matrix(), expected)
    assert t.trace() == 11.0
    assert t.determinant() == pytest.approx(numpy.linalg.det(expected))
    product = t.dot(values.Vector(1, 0, 0))
    assert product == values.Vector(1.0, 2.0, 3.0)
    identity = values.SymmetricDyad(1, 0, 0, 1, 0, 1)
    assert identity.print() == f"({ONE}, 0, 0; {ONE}, 0; {ONE})"
    assert identity.determinant() == 1.0


def test_dyad():
    """Test the general rank-2 tensor."""
    t = values.Dyad(1, 2, 0, 0, 1, 0, 0, 0, 2)
    assert t.xy == 2.0
    assert t.yx == 0.0
    assert t.transpose() == values.Dyad(1, 0, 0, 2, 1, 0, 0, 0, 2)
    assert t.trace() == 4.0
    assert t.determinant() == 2.0
    assert t.dot(values.Vector(1, 1, 1)) == values.Vector(3.0, 1.0, 2.0)
    assert t.print() == (
        f"({ONE}, {TWO}, 0; 0, {ONE}, 0; 0, 0, {TWO})"
    )
    with pytest.raises(TypeError):
        values.Dyad(1, 2, 3)


def test_tensors():
    """All value types should convert between units."""
    kinds = {values.Vector: 3, values.SymmetricDyad: 6, values.Dyad: 9}
    for kind, size in kinds.items():
        value = kind(*([1.0] * size))
        converted = units.convert(
            value, catalog.Length.FOOT, catalog.Length.METRE,
        )
        assert isinstance(converted, kind)
        assert converted == kind(*([0.3048] * size))
