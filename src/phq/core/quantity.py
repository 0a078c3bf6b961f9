"""
Physical quantities.

A quantity pairs a value with a category of units and stores the value in the
standard unit of that category. Formatting uses the precision configured in
`phq.Environment` unless the caller gives one.
"""

import functools
import numbers
import typing

import numpy

import phq
from phq.core import dimensions
from phq.core import iterables
from phq.core import text
from phq.core import units
from phq.core import values


class QuantityError(Exception):
    """An operation between quantities is not defined."""

    def __init__(self, message: str) -> None:
        self.message = message

    def __str__(self) -> str:
        return self.message


@functools.total_ordering
class Quantity(iterables.ReprStrMixin):
    """A value with a unit category.

    The value is always stored in the standard unit of its category. It is only
    converted at construction and on access in another unit.

    Examples
    --------
    >>> speed = quantity.Quantity(2.0, catalog.Speed.FOOT_PER_SECOND)
    >>> speed.value
    0.6096
    >>> speed.value_in(catalog.Speed.FOOT_PER_SECOND)
    2.0
    >>> quantity.Quantity(1.0, catalog.Time.MINUTE).print()
    '60.0000000000000000 s'
    """

    def __init__(self, value, unit: units.Unit) -> None:
        """
        Parameters
        ----------
        value : number or array-like or `~values.Vector` or `~values.SymmetricDyad` or `~values.Dyad`
            The magnitude of this quantity, expressed in `unit`. Lists and
            tuples become numpy arrays.

        unit : `~units.Unit`
            The unit of `value`. Its category becomes the category of this
            quantity.
        """
        if isinstance(value, (list, tuple)):
            value = numpy.asarray(value)
        elif not isinstance(
            value, (numbers.Real, numpy.ndarray, values.Components)
        ):
            raise TypeError(
                f"Can't create a quantity from a value of type"
                f" {type(value).__qualname__!r}"
            ) from None
        self._category = type(unit)
        self._value = units.convert(value, unit, units.standard(self._category))

    @classmethod
    def zero(cls, category: typing.Type[units.Unit]) -> 'Quantity':
        """A scalar quantity of zero in `category`."""
        return cls(0.0, units.standard(category))

    @property
    def value(self):
        """The value of this quantity in its standard unit."""
        return self._value

    def value_in(self, unit: units.Unit):
        """The value of this quantity expressed in `unit`."""
        return units.convert(self._value, self.unit, unit)

    @property
    def category(self) -> typing.Type[units.Unit]:
        """The unit category of this quantity."""
        return self._category

    @property
    def unit(self) -> units.Unit:
        """The standard unit, in which the value is stored."""
        return units.standard(self._category)

    @property
    def dimensions(self) -> dimensions.Dimensions:
        """The dimensions of this quantity."""
        return units.related_dimensions(self._category)

    def _same_category(self, other: 'Quantity') -> None:
        if other.category is not self.category:
            raise units.UnitConversionError(other.unit, self.unit)

    def _from_standard(self, value) -> 'Quantity':
        return type(self)(value, self.unit)

    def __eq__(self, other) -> bool:
        if isinstance(other, Quantity):
            if self.category is not other.category:
                return False
            if isinstance(self._value, numpy.ndarray):
                return bool(numpy.array_equal(self._value, other._value))
            return bool(self._value == other._value)
        return NotImplemented

    def __lt__(self, other: 'Quantity') -> bool:
        if isinstance(other, Quantity):
            self._same_category(other)
            if isinstance(self._value, values.Components):
                raise QuantityError(
                    f"Can't order quantities with values of type"
                    f" {type(self._value).__qualname__!r}"
                ) from None
            return self._value < other._value
        return NotImplemented

    __hash__ = None

    def __add__(self, other: 'Quantity') -> 'Quantity':
        if isinstance(other, Quantity):
            self._same_category(other)
            return self._from_standard(self._value + other._value)
        return NotImplemented

    def __sub__(self, other: 'Quantity') -> 'Quantity':
        if isinstance(other, Quantity):
            self._same_category(other)
            return self._from_standard(self._value - other._value)
        return NotImplemented

    def __neg__(self) -> 'Quantity':
        return self._from_standard(-self._value)

    def __mul__(self, other) -> 'Quantity':
        if isinstance(other, numbers.Real):
            return self._from_standard(self._value * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        """Divide by a number, or by a scalar quantity of the same category.

        The quotient of two quantities of the same category is a plain number.
        """
        if isinstance(other, Quantity):
            self._same_category(other)
            return self._value / other._value
        if isinstance(other, numbers.Real):
            return self._from_standard(self._value / other)
        return NotImplemented

    def _render(
        self,
        form: str,
        unit: typing.Optional[units.Unit],
        precision: typing.Optional[text.Precision],
    ) -> typing.Tuple[str, units.Unit]:
        """Format the value in `unit`, defaulting to the standard unit."""
        unit = self.unit if unit is None else unit
        if precision is None:
            precision = phq.Environment().precision
        value = self.value_in(unit)
        if isinstance(value, values.Components):
            return getattr(value, form)(precision), unit
        return text.print_number(value, precision), unit

    def print(
        self,
        unit: units.Unit=None,
        precision: text.Precision=None,
    ) -> str:
        """Render this quantity as its formatted value and unit abbreviation.

        Parameters
        ----------
        unit : `~units.Unit`, optional
            The unit in which to express the value. The default is the
            standard unit.

        precision : `~text.Precision`, optional
            The precision of the printed value. The default is the precision
            configured in `phq.Environment`.
        """
        printed, unit = self._render('print', unit, precision)
        return f"{printed} {unit.abbreviation}"

    def json(
        self,
        unit: units.Unit=None,
        precision: text.Precision=None,
    ) -> str:
        printed, unit = self._render('json', unit, precision)
        return f'{{"value":{printed},"unit":"{unit.abbreviation}"}}'

    def xml(
        self,
        unit: units.Unit=None,
        precision: text.Precision=None,
    ) -> str:
        printed, unit = self._render('xml', unit, precision)
        return f"<value>{printed}</value><unit>{unit.abbreviation}</unit>"

    def yaml(
        self,
        unit: units.Unit=None,
        precision: text.Precision=None,
    ) -> str:
        printed, unit = self._render('yaml', unit, precision)
        return f'{{value:{printed},unit:"{unit.abbreviation}"}}'

    def __str__(self) -> str:
        return self.print()
