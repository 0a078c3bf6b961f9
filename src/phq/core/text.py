"""
Helpers for converting between text and numbers.

The number formatter mimics fixed-width engineering output: it chooses between
positional and scientific notation based on the magnitude of the value, and
prints enough digits to round-trip the value's floating-point type.
"""

import enum
import math
import re
import typing

import numpy


def lowercase(text: str) -> str:
    """Convert `text` to lower case."""
    return text.lower()


def uppercase(text: str) -> str:
    """Convert `text` to upper case."""
    return text.upper()


def snake_case(text: str) -> str:
    """Convert `text` to lower case, with spaces replaced by underscores.

    Examples
    --------
    >>> text.snake_case('Electric Current')
    'electric_current'
    """
    return text.lower().replace(' ', '_')


def replace(text: str, old: str, new: str) -> str:
    """Replace every occurrence of `old` in `text` with `new`."""
    return text.replace(old, new)


def split_by_whitespace(text: str) -> typing.List[str]:
    """Split `text` into words separated by any amount of whitespace."""
    return text.split()


class Precision(enum.Enum):
    """Floating-point precisions known to the number formatter."""

    SINGLE = 'Single'
    DOUBLE = 'Double'
    TRIPLE = 'Triple'
    QUADRUPLE = 'Quadruple'

    @property
    def abbreviation(self) -> str:
        """The canonical name of this precision."""
        return self.value

    @property
    def dtype(self) -> typing.Type[numpy.floating]:
        """The numpy type that implements this precision.

        Both triple and quadruple precision map to `numpy.longdouble`, which is
        the widest floating-point type numpy provides on most platforms.
        """
        return _PRECISION_TYPES[self]

    @classmethod
    def parse(cls, text: str) -> typing.Optional['Precision']:
        """Get the precision spelled by `text`, if any.

        Accepted spellings are the upper-case, capitalized, and lower-case forms
        of each name.
        """
        return _PRECISION_SPELLINGS.get(text)

    def __str__(self) -> str:
        return self.value


_PRECISION_TYPES = {
    Precision.SINGLE: numpy.float32,
    Precision.DOUBLE: numpy.float64,
    Precision.TRIPLE: numpy.longdouble,
    Precision.QUADRUPLE: numpy.longdouble,
}

_PRECISION_SPELLINGS = {
    spelling: precision
    for precision in Precision
    for spelling in (
        precision.value.upper(),
        precision.value,
        precision.value.lower(),
    )
}


_INTEGER = re.compile(r'[+-]?\d+')
_NUMBER = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')

_INT64 = numpy.iinfo(numpy.int64)


def parse_integer(text: str) -> typing.Optional[int]:
    """Parse `text` as a base-10 integer.

    Returns
    -------
    int or `None`
        The integer value, or ``None`` if `text` is not an integer literal or is
        outside the range of a 64-bit signed integer.
    """
    stripped = text.strip()
    if not _INTEGER.fullmatch(stripped):
        return None
    value = int(stripped)
    if _INT64.min <= value <= _INT64.max:
        return value


def parse_number(
    text: str,
    dtype: typing.Type[numpy.floating]=numpy.float64,
) -> typing.Optional[numpy.floating]:
    """Parse `text` as a floating-point number of type `dtype`.

    Parameters
    ----------
    text : string
        A decimal literal, optionally signed and with an exponent. Surrounding
        whitespace is ignored.

    dtype : numpy floating type, default=numpy.float64
        The type of the result.

    Returns
    -------
    number or `None`
        The parsed value, or ``None`` if `text` is not a decimal literal or the
        value overflows `dtype`. Infinity and NaN spellings are not accepted.
        Values that underflow silently become zero or subnormal.
    """
    stripped = text.strip()
    if not _NUMBER.fullmatch(stripped):
        return None
    with numpy.errstate(over='ignore'):
        value = numpy.dtype(dtype).type(stripped)
    if numpy.isfinite(value):
        return value


def max_digits10(dtype: typing.Type[numpy.floating]) -> int:
    """The number of decimal digits that round-trip any value of `dtype`."""
    info = numpy.finfo(dtype)
    return math.ceil((info.nmant + 1) * math.log10(2)) + 1


# (upper bound, change in fractional digits) for positional notation
_FIXED_BRACKETS = (
    (0.01, 3),
    (0.1, 2),
    (1.0, 1),
    (10.0, 0),
    (100.0, -1),
    (1000.0, -2),
    (10000.0, -3),
)


def print_number(
    value: typing.Union[float, numpy.floating],
    precision: Precision=None,
) -> str:
    """Format a number based on its magnitude.

    Exactly zero prints as ``'0'``. Values with magnitude in [0.001, 10000)
    print in positional notation and all others in scientific notation. The
    number of fractional digits starts from the maximum number of significant
    digits of the value's type (e.g., 9 for single precision) and adjusts with
    the order of magnitude so that each positional value shows roughly the same
    number of significant digits.

    Parameters
    ----------
    value : float or numpy floating-point number
        The number to format. Python numbers are treated as double precision.

    precision : `~text.Precision`, optional
        If given, cast `value` to this precision before formatting.

    Examples
    --------
    >>> text.print_number(numpy.float32(1))
    '1.000000000'
    >>> text.print_number(numpy.float32(16384))
    '1.638400000e+04'
    """
    if precision is not None:
        value = precision.dtype(value)
    elif not isinstance(value, numpy.floating):
        value = numpy.float64(value)
    if value == 0:
        return '0'
    digits = max_digits10(type(value))
    # Brackets compare in at least double precision.
    magnitude = abs(value).astype(
        numpy.promote_types(value.dtype, numpy.float64)
    )
    if numpy.isfinite(magnitude) and magnitude >= 0.001:
        for bound, change in _FIXED_BRACKETS:
            if magnitude < bound:
                return numpy.format_float_positional(
                    value,
                    precision=digits + change,
                    unique=False,
                    fractional=True,
                    trim='k',
                )
    return numpy.format_float_scientific(
        value,
        precision=digits,
        unique=False,
        trim='k',
        exp_digits=2,
    )
