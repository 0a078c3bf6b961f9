"""
Unit categories and conversion between the units of a category.

Each category of units (e.g., length or speed) is an enumeration whose members
are the individual units and whose values are their canonical abbreviations.
Every unit converts to and from its category's standard unit through an exact
`~units.Scale`, so converting between any two units of a category passes
through the standard unit.

Use `~units.define` to create a new category. The module-level functions
operate on any registered category.
"""

import enum
import functools
import logging
import numbers
import typing

import numpy

import phq
from phq.core import aliased
from phq.core import dimensions as dimensions_
from phq.core import iterables
from phq.core import spelling
from phq.core import systems
from phq.core import values


logger = logging.getLogger(__name__)


class UnitParsingError(Exception):
    """Error when attempting to parse a string into a unit."""

    def __init__(
        self,
        string: str,
        category: str,
        suggestion: str=None,
    ) -> None:
        self.string = string
        self.category = category
        self.suggestion = suggestion

    def __str__(self) -> str:
        message = f"Could not parse '{self.string}' as a unit of {self.category}"
        if self.suggestion:
            return f"{message}. {self.suggestion}"
        return message


class UnitConversionError(Exception):
    """Unknown unit conversion."""

    def __init__(self, u0, u1) -> None:
        self._from = str(u0)
        self._to = str(u1)

    def __str__(self) -> str:
        return f"Can't convert {self._from!r} to {self._to!r}"


class UnitLookupError(KeyError):
    """The object is not a unit of any registered category."""

    def __str__(self) -> str:
        if len(self.args) > 0:
            return f"{self.args[0]!r} is not a registered unit"
        return "Unit not found"


class CategoryDefinitionError(Exception):
    """A unit category has an invalid definition."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason

    def __str__(self) -> str:
        return f"Can't define unit category {self.name!r}: {self.reason}"


class Scale(iterables.ReprStrMixin):
    """An exact conversion factor to a category's standard unit.

    A scale stores decimal constants as strings: converting a value to the
    standard unit multiplies it by each multiplier in order and then divides it
    by each divisor in order. Converting from the standard unit applies the
    inverse operations in reverse order. Constants common to the multipliers
    and divisors cancel, so a scale never performs redundant arithmetic.

    Examples
    --------
    >>> foot = units.Scale(['0.3048'])
    >>> minute = units.Scale(['60'])
    >>> (foot / minute).multipliers, (foot / minute).divisors
    (('0.3048',), ('60',))
    >>> (foot / foot).unity
    True
    """

    __slots__ = ('multipliers', 'divisors')

    def __init__(
        self,
        multipliers: typing.Iterable[str]=(),
        divisors: typing.Iterable[str]=(),
    ) -> None:
        remaining = list(divisors)
        kept = []
        for token in multipliers:
            if token in remaining:
                remaining.remove(token)
            else:
                kept.append(token)
        self.multipliers = tuple(kept)
        self.divisors = tuple(remaining)

    @property
    def unity(self) -> bool:
        """True if this scale performs no arithmetic."""
        return not self.multipliers and not self.divisors

    def __mul__(self, other: 'Scale') -> 'Scale':
        if isinstance(other, Scale):
            return Scale(
                self.multipliers + other.multipliers,
                self.divisors + other.divisors,
            )
        return NotImplemented

    def __truediv__(self, other: 'Scale') -> 'Scale':
        if isinstance(other, Scale):
            return Scale(
                self.multipliers + other.divisors,
                self.divisors + other.multipliers,
            )
        return NotImplemented

    def __pow__(self, exponent: int) -> 'Scale':
        if isinstance(exponent, numbers.Integral) and exponent >= 0:
            return Scale(
                self.multipliers * exponent,
                self.divisors * exponent,
            )
        return NotImplemented

    def __eq__(self, other) -> bool:
        if isinstance(other, Scale):
            return (
                self.multipliers == other.multipliers
                and self.divisors == other.divisors
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.multipliers, self.divisors))

    def __str__(self) -> str:
        numerator = ' * '.join(self.multipliers) or '1'
        if self.divisors:
            return f"{numerator} / ({' * '.join(self.divisors)})"
        return numerator


UNITY = Scale()
"""The scale of a standard unit."""


class Definition(typing.NamedTuple):
    """The data that defines one unit of a category."""

    name: str
    abbreviation: str
    scale: Scale
    spellings: typing.Tuple[str, ...] = ()


class Unit(enum.Enum):
    """Base class for enumerations of units in a category.

    Subclasses are created by `~units.define`. The value of each member is its
    canonical abbreviation.
    """

    @property
    def abbreviation(self) -> str:
        """The canonical abbreviation of this unit."""
        return self.value

    @property
    def scale(self) -> Scale:
        """The conversion from this unit to the standard unit."""
        return _get_category(type(self)).scales[self]

    @property
    def spellings(self) -> typing.FrozenSet[str]:
        """All strings that parse to this unit."""
        return _get_category(type(self)).spellings.alias(
            self.value,
            include=True,
        )

    @property
    def system(self) -> typing.Optional[systems.UnitSystem]:
        """The unit system for which this is the consistent unit, if any."""
        return related_unit_system(self)

    @classmethod
    def parse(cls, text: str, strict: bool=False):
        """Get the unit of this category spelled by `text`."""
        return parse(cls, text, strict=strict)

    @classmethod
    def standard(cls):
        """The standard unit of this category."""
        return standard(cls)

    @classmethod
    def consistent(cls, system: systems.UnitSystem=None):
        """The unit of this category that is consistent with `system`.

        The default system is the one configured in `phq.Environment`.
        """
        return consistent_unit(cls, system)

    @classmethod
    def dimensions(cls) -> dimensions_.Dimensions:
        """The dimensions of this category."""
        return related_dimensions(cls)

    def __str__(self) -> str:
        return self.value


class Category(iterables.ReprStrMixin):
    """The registry record of a unit category."""

    def __init__(
        self,
        units: typing.Type[Unit],
        scales: typing.Dict[Unit, Scale],
        spellings: aliased.Mapping,
        standard: Unit,
        dimensions: dimensions_.Dimensions,
        consistent: typing.Dict[systems.UnitSystem, Unit],
    ) -> None:
        self.units = units
        self.name = units.__name__
        self.scales = scales
        self.spellings = spellings
        self.standard = standard
        self.dimensions = dimensions
        self.consistent = consistent
        related = {}
        for system, unit in consistent.items():
            related.setdefault(unit, []).append(system)
        self.related = {
            unit: found[0] for unit, found in related.items() if len(found) == 1
        }
        self._checker = None

    @property
    def checker(self) -> spelling.SpellChecker:
        """A spell-checker for this category's spellings."""
        if self._checker is None:
            self._checker = spelling.SpellChecker(*self.spellings)
        return self._checker

    def __str__(self) -> str:
        return f"{self.name} [{self.dimensions}]"


_CATEGORIES: typing.Dict[typing.Type[Unit], Category] = {}


def define(
    name: str,
    units: typing.Iterable[Definition],
    standard: str,
    dimensions: dimensions_.Dimensions,
    consistent: typing.Mapping[systems.UnitSystem, str],
    module: str=None,
) -> typing.Type[Unit]:
    """Create and register a new category of units.

    Parameters
    ----------
    name : string
        The name of the new enumeration (e.g., 'Speed').

    units : iterable of `~units.Definition`
        The units in this category, in the order of enumeration. Each unit's
        abbreviation is always one of its spellings.

    standard : string
        The abbreviation of the standard unit. Its scale must be unity.

    dimensions : `~dimensions.Dimensions`
        The dimensions of every unit in this category.

    consistent : mapping
        The abbreviation of the consistent unit for every unit system.

    module : string, optional
        The module in which the new enumeration is defined.

    Returns
    -------
    subclass of `~units.Unit`
        The new enumeration.

    Raises
    ------
    CategoryDefinitionError
        The definition is incomplete or two units share a spelling or an
        abbreviation.
    """
    definitions = list(units)
    abbreviations = [d.abbreviation for d in definitions]
    repeated = [a for a in iterables.unique(*abbreviations)
                if abbreviations.count(a) > 1]
    if repeated:
        raise CategoryDefinitionError(
            name, f"repeated abbreviations {repeated}"
        ) from None
    members = [(d.name, d.abbreviation) for d in definitions]
    enumeration = Unit(name, members, module=module, qualname=name)
    try:
        spellings = aliased.Mapping({
            (d.abbreviation, *d.spellings): enumeration(d.abbreviation)
            for d in definitions
        })
    except aliased.AliasConflictError as err:
        raise CategoryDefinitionError(name, str(err)) from err
    scales = {enumeration(d.abbreviation): d.scale for d in definitions}
    std = _member(enumeration, standard, name)
    if not scales[std].unity:
        raise CategoryDefinitionError(
            name, f"the standard unit {standard!r} has scale {scales[std]}"
        ) from None
    missing = [s for s in systems.UnitSystem if s not in consistent]
    if missing:
        raise CategoryDefinitionError(
            name, f"no consistent unit for {[str(s) for s in missing]}"
        ) from None
    if not isinstance(dimensions, dimensions_.Dimensions):
        raise CategoryDefinitionError(
            name, f"{dimensions!r} is not a dimension signature"
        ) from None
    _CATEGORIES[enumeration] = Category(
        units=enumeration,
        scales=scales,
        spellings=spellings,
        standard=std,
        dimensions=dimensions,
        consistent={
            system: _member(enumeration, consistent[system], name)
            for system in systems.UnitSystem
        },
    )
    logger.debug(
        "Defined unit category %s with %d units and %d spellings",
        name, len(definitions), len(spellings),
    )
    return enumeration


def _member(enumeration: typing.Type[Unit], abbreviation: str, name: str):
    """Get the member of `enumeration` with the given abbreviation."""
    try:
        return enumeration(abbreviation)
    except ValueError:
        raise CategoryDefinitionError(
            name, f"there is no unit {abbreviation!r}"
        ) from None


def _get_category(category: typing.Type[Unit]) -> Category:
    """Get the registry record of a category."""
    try:
        return _CATEGORIES[category]
    except (KeyError, TypeError):
        raise UnitLookupError(category) from None


def _get_unit_category(unit: Unit) -> Category:
    """Get the registry record of a unit's category."""
    if isinstance(unit, Unit):
        return _get_category(type(unit))
    raise UnitLookupError(unit)


def categories() -> typing.Tuple[typing.Type[Unit], ...]:
    """All registered unit categories, in order of definition."""
    return tuple(_CATEGORIES)


def abbreviation(unit: Unit) -> str:
    """The canonical abbreviation of `unit`.

    Raises
    ------
    UnitLookupError
        `unit` is not a unit of a registered category.
    """
    _get_unit_category(unit)
    return unit.value


def parse(
    category: typing.Type[Unit],
    text: str,
    strict: bool=False,
) -> typing.Optional[Unit]:
    """Get the unit of `category` spelled by `text`.

    Parsing is an exact, case-sensitive look-up among all known spellings of
    the units in `category`.

    Parameters
    ----------
    category : subclass of `~units.Unit`
        The category of unit to find.

    text : string
        The spelling to look up.

    strict : bool, default=False
        If true, raise an exception when `text` is not a known spelling. The
        default behavior is to return ``None``.

    Returns
    -------
    unit or `None`
        The unit spelled by `text`, if any.

    Raises
    ------
    UnitParsingError
        `strict` is true and `text` is not a known spelling. The message
        suggests similar known spellings, when there are any.

    Examples
    --------
    >>> units.parse(catalog.Speed, 'ft/s')
    <Speed.FOOT_PER_SECOND: 'ft/s'>
    >>> units.parse(catalog.Speed, 'furlongs per fortnight') is None
    True
    """
    record = _get_category(category)
    if text in record.spellings:
        return record.spellings[text]
    logger.debug("No unit of %s is spelled %r", record.name, text)
    if strict:
        suggestions = record.checker.check(text, mode='suggest')
        suggestion = (
            spelling.SpellingError(text, suggestions).suggestion
            if suggestions else None
        )
        raise UnitParsingError(text, record.name, suggestion)


def standard(category: typing.Type[Unit]) -> Unit:
    """The standard unit of `category`."""
    return _get_category(category).standard


def consistent_unit(
    category: typing.Type[Unit],
    system: systems.UnitSystem=None,
) -> Unit:
    """The unit of `category` that is consistent with `system`.

    The default system is the one configured in `phq.Environment`.
    """
    if system is None:
        system = phq.Environment().system
    return _get_category(category).consistent[systems.UnitSystem(system)]


def related_unit_system(unit: Unit) -> typing.Optional[systems.UnitSystem]:
    """The unit system for which `unit` is the consistent unit.

    Returns ``None`` if `unit` is not consistent with any system, or if it is
    consistent with more than one system and therefore identifies none of them.
    """
    return _get_unit_category(unit).related.get(unit)


def related_dimensions(category: typing.Type[Unit]) -> dimensions_.Dimensions:
    """The dimensions of every unit in `category`."""
    return _get_category(category).dimensions


Operations = typing.Tuple[typing.Tuple[bool, str], ...]


def _operations(old: Unit, new: Unit) -> Operations:
    """Compute the sequence of operations that converts `old` to `new`.

    Each operation is a pair of a flag that is true for multiplication and
    false for division, and the constant to apply.
    """
    category = _get_unit_category(old)
    if _get_unit_category(new) is not category:
        raise UnitConversionError(old, new)
    if old == new:
        return ()
    s0 = category.scales[old]
    s1 = category.scales[new]
    return (
        *((True, token) for token in s0.multipliers),
        *((False, token) for token in s0.divisors),
        *((True, token) for token in reversed(s1.divisors)),
        *((False, token) for token in reversed(s1.multipliers)),
    )


@functools.lru_cache(maxsize=None)
def _constant(token: str, dtype: numpy.dtype) -> numpy.floating:
    """Cast a decimal constant to a floating-point type, once."""
    return dtype.type(token)


def _scale(value: numpy.floating, operations: Operations) -> numpy.floating:
    """Apply `operations` to a numpy scalar."""
    dtype = value.dtype
    for multiply, token in operations:
        constant = _constant(token, dtype)
        value = value * constant if multiply else value / constant
    return value


def _scale_array(array: numpy.ndarray, operations: Operations) -> numpy.ndarray:
    """Apply `operations` to a floating-point array, in place."""
    for multiply, token in operations:
        constant = _constant(token, array.dtype)
        if multiply:
            numpy.multiply(array, constant, out=array)
        else:
            numpy.divide(array, constant, out=array)
    return array


def _as_float_array(array: numpy.ndarray) -> numpy.ndarray:
    """Create a floating-point copy of `array`."""
    if numpy.issubdtype(array.dtype, numpy.floating):
        return array.copy()
    if numpy.issubdtype(array.dtype, numpy.integer):
        return array.astype(numpy.float64)
    raise TypeError(
        f"Can't convert array of type {array.dtype}"
    ) from None


def _apply(value, operations: Operations):
    """Apply `operations` to a copy of `value`."""
    if isinstance(value, values.Components):
        return type(value).from_array(
            _scale_array(_as_float_array(value.components), operations)
        )
    if isinstance(value, numpy.ndarray):
        return _scale_array(_as_float_array(value), operations)
    if isinstance(value, (list, tuple)):
        return type(value)(_apply(v, operations) for v in value)
    if isinstance(value, numpy.floating):
        return _scale(value, operations)
    if isinstance(value, numpy.integer):
        return _scale(numpy.float64(value), operations)
    if isinstance(value, numbers.Real):
        return float(_scale(numpy.float64(value), operations))
    raise TypeError(
        f"Can't convert value of type {type(value).__qualname__!r}"
    ) from None


def _apply_in_place(value, operations: Operations):
    """Apply `operations` to `value`, overwriting its contents."""
    if isinstance(value, values.Components):
        _scale_array(value._data, operations)
        return value
    if (
        isinstance(value, numpy.ndarray)
        and numpy.issubdtype(value.dtype, numpy.floating)
    ):
        _scale_array(value, operations)
        return value
    raise TypeError(
        f"Can't convert value of type {type(value).__qualname__!r} in place"
    ) from None


def convert(value, old: Unit, new: Unit):
    """Convert `value` from unit `old` to unit `new`.

    This is the dynamic form of conversion: it looks up the scales of both
    units on every call. See `~units.converter` for the static form.

    Parameters
    ----------
    value
        A Python number, a numpy floating-point or integer scalar, a numpy
        array, a list or tuple of convertible values, or an instance of
        `~values.Vector`, `~values.SymmetricDyad`, or `~values.Dyad`.

    old : `~units.Unit`
        The unit in which `value` is expressed.

    new : `~units.Unit`
        The unit to which to convert `value`. It must belong to the same
        category as `old`.

    Returns
    -------
    A new object of the same kind as `value`. Python numbers become ``float``,
    numpy scalars and arrays keep their floating-point type (integers become
    double precision), and containers keep their type. The result is an
    unmodified copy of `value` when `old` and `new` are the same unit.

    Raises
    ------
    UnitConversionError
        The units belong to different categories.

    TypeError
        The type of `value` is not convertible.

    Examples
    --------
    >>> units.convert(2.0, catalog.Speed.FOOT_PER_SECOND, catalog.Speed.METRE_PER_SECOND)
    0.6096
    """
    return _apply(value, _operations(old, new))


def convert_in_place(value, old: Unit, new: Unit):
    """Convert a floating-point array or tensor value in place.

    Returns the same object, after overwriting its contents.
    """
    return _apply_in_place(value, _operations(old, new))


class Converter(iterables.ReprStrMixin):
    """A conversion between two units, resolved once.

    Instances are callable with the same values as `~units.convert` and
    produce bit-identical results.
    """

    def __init__(self, old: Unit, new: Unit) -> None:
        self.old = old
        self.new = new
        self._operations = _operations(old, new)

    def __call__(self, value):
        """Convert `value` from `self.old` to `self.new`."""
        return _apply(value, self._operations)

    def in_place(self, value):
        """Convert `value` from `self.old` to `self.new`, in place."""
        return _apply_in_place(value, self._operations)

    def __str__(self) -> str:
        return f"'{self.old}' -> '{self.new}'"


@functools.lru_cache(maxsize=None)
def converter(old: Unit, new: Unit) -> Converter:
    """Get the cached static converter from `old` to `new`."""
    return Converter(old, new)


def static_convert(value, old: Unit, new: Unit):
    """Convert `value` from unit `old` to unit `new` with a cached converter."""
    return converter(old, new)(value)
