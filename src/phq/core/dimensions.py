"""
The seven base physical dimensions and dimension signatures built from them.
"""

import functools
import numbers
import typing

from phq.core import iterables
from phq.core import text


_bases = [
    {'name': 'time', 'symbol': 'T', 'label': 'Time'},
    {'name': 'length', 'symbol': 'L', 'label': 'Length'},
    {'name': 'mass', 'symbol': 'M', 'label': 'Mass'},
    {'name': 'electric_current', 'symbol': 'I', 'label': 'Electric Current'},
    {'name': 'temperature', 'symbol': 'Θ', 'label': 'Temperature'},
    {'name': 'substance_amount', 'symbol': 'N', 'label': 'Substance Amount'},
    {'name': 'luminous_intensity', 'symbol': 'J', 'label': 'Luminous Intensity'},
]

BASES = iterables.Table(_bases)
"""The base dimensions, in canonical order."""

NAMES: typing.Tuple[str, ...] = BASES['name']
"""The snake-case names of the base dimensions, in canonical order."""


def _base_entry(name: str) -> typing.Dict[str, str]:
    """Look up the table entry for a base dimension by name or label."""
    key = text.snake_case(str(name))
    if key not in NAMES:
        raise KeyError(f"Unknown base dimension {name!r}") from None
    return BASES(name=key)


def _check_exponent(exponent) -> int:
    """Make sure `exponent` is an integer."""
    if isinstance(exponent, numbers.Integral) and not isinstance(exponent, bool):
        return int(exponent)
    raise TypeError(
        f"Dimension exponents must be integers, not {exponent!r}"
    ) from None


def _format_term(symbol: str, exponent: int) -> str:
    """Format a symbol raised to an integer exponent."""
    if exponent == 0:
        return ''
    if exponent == 1:
        return symbol
    if exponent > 1:
        return f"{symbol}^{exponent}"
    return f"{symbol}^({exponent})"


@functools.total_ordering
class Dimension(iterables.ReprStrMixin):
    """An integer exponent of a single base dimension."""

    __slots__ = ('_entry', '_exponent')

    def __init__(self, base: str, exponent: int=0) -> None:
        """
        Parameters
        ----------
        base : string
            The name (e.g., 'electric_current') or label (e.g., 'Electric
            Current') of the base dimension.

        exponent : int, default=0
            The integer power of the base dimension.
        """
        self._entry = _base_entry(base)
        self._exponent = _check_exponent(exponent)

    @property
    def base(self) -> str:
        """The snake-case name of the base dimension."""
        return self._entry['name']

    @property
    def symbol(self) -> str:
        """The one-character symbol of the base dimension."""
        return self._entry['symbol']

    @property
    def label(self) -> str:
        """The human-readable name of the base dimension."""
        return self._entry['label']

    @property
    def exponent(self) -> int:
        """The power of the base dimension."""
        return self._exponent

    def _key(self):
        return (NAMES.index(self.base), self._exponent)

    def __eq__(self, other) -> bool:
        if isinstance(other, Dimension):
            return self._key() == other._key()
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, Dimension):
            return self._key() < other._key()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key())

    def print(self) -> str:
        """The symbol with its exponent, or an empty string if it is zero."""
        return _format_term(self.symbol, self._exponent)

    def json(self) -> str:
        return f'{{"{self.base}":{self._exponent}}}'

    def xml(self) -> str:
        return f"<{self.base}>{self._exponent}</{self.base}>"

    def yaml(self) -> str:
        return f"{{{self.base}:{self._exponent}}}"

    def __str__(self) -> str:
        return self.print()


@functools.total_ordering
class Dimensions(iterables.MappingBase):
    """A dimension signature: one integer exponent per base dimension.

    Instances behave like read-only mappings from the base names, in canonical
    order, to their exponents. They are hashable, compare lexicographically in
    canonical order, and support multiplication, division, and integer powers.

    Examples
    --------
    >>> power = dimensions.Dimensions(time=-3, length=2, mass=1)
    >>> power.print()
    'T^(-3)·L^2·M'
    >>> power == dimensions.Dimensions(-3, 2, 1)
    True
    >>> power['length']
    2
    >>> power.time.print()
    'T^(-3)'
    """

    __slots__ = ('_exponents',)

    def __init__(self, *exponents: int, **named: int) -> None:
        """
        Parameters
        ----------
        *exponents : int
            Up to seven exponents, in canonical order.

        **named : int
            Exponents keyed by base-dimension name. A name may not also appear
            positionally.
        """
        super().__init__(NAMES)
        if len(exponents) > len(NAMES):
            raise TypeError(
                f"Expected at most {len(NAMES)} exponents"
                f" but got {len(exponents)}"
            ) from None
        values = dict.fromkeys(NAMES, 0)
        for name, exponent in zip(NAMES, exponents):
            values[name] = _check_exponent(exponent)
        for key, exponent in named.items():
            name = _base_entry(key)['name']
            if NAMES.index(name) < len(exponents):
                raise TypeError(
                    f"Got more than one exponent for {name!r}"
                ) from None
            values[name] = _check_exponent(exponent)
        self._exponents = tuple(values[name] for name in NAMES)

    def __getitem__(self, key: str) -> int:
        if key in NAMES:
            return self._exponents[NAMES.index(key)]
        raise KeyError(f"No base dimension named {key!r}") from None

    def __getattr__(self, name: str) -> Dimension:
        if name in NAMES:
            return Dimension(name, self[name])
        raise AttributeError(
            f"{self.__class__.__qualname__!r} has no attribute {name!r}"
        ) from None

    @property
    def exponents(self) -> typing.Tuple[int, ...]:
        """The exponents of all base dimensions, in canonical order."""
        return self._exponents

    def nonzero(self) -> typing.List[Dimension]:
        """The base dimensions with a nonzero exponent, in canonical order."""
        return [
            Dimension(name, exponent)
            for name, exponent in zip(NAMES, self._exponents) if exponent
        ]

    def __eq__(self, other) -> bool:
        if isinstance(other, Dimensions):
            return self._exponents == other._exponents
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, Dimensions):
            return self._exponents < other._exponents
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._exponents)

    def __mul__(self, other):
        if isinstance(other, Dimensions):
            return type(self)(
                *(a + b for a, b in zip(self._exponents, other._exponents))
            )
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Dimensions):
            return type(self)(
                *(a - b for a, b in zip(self._exponents, other._exponents))
            )
        return NotImplemented

    def __pow__(self, other):
        if isinstance(other, numbers.Integral):
            return type(self)(*(a * int(other) for a in self._exponents))
        return NotImplemented

    def print(self) -> str:
        """Render this signature as a product of powers of base symbols."""
        terms = [dimension.print() for dimension in self.nonzero()]
        return '·'.join(terms) if terms else '1'

    def json(self) -> str:
        """Render the nonzero exponents as a JSON object."""
        entries = ','.join(f'"{d.base}":{d.exponent}' for d in self.nonzero())
        return f"{{{entries}}}"

    def xml(self) -> str:
        """Render the nonzero exponents as XML elements."""
        return ''.join(d.xml() for d in self.nonzero())

    def yaml(self) -> str:
        """Render the nonzero exponents as a YAML flow mapping."""
        entries = ','.join(f"{d.base}:{d.exponent}" for d in self.nonzero())
        return f"{{{entries}}}"

    def __str__(self) -> str:
        return self.print()

    def __repr__(self) -> str:
        module = f"{self.__module__.replace('phq.', '')}."
        name = self.__class__.__qualname__
        return f"{module}{name}({self})"


DIMENSIONLESS = Dimensions()
"""The signature of a dimensionless quantity."""
