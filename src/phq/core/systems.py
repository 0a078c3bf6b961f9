"""
Systems of units.

Each unit system names a consistent set of length, mass (or force), time, and
temperature units. Unit categories use these systems to select the unit that
is consistent with a given system.
"""

import enum
import itertools
import typing


_SEPARATORS = ('·', '-', '*', ' ', ', ')


def _spellings(
    components: typing.Sequence[typing.Sequence[str]],
    *singles: str,
) -> typing.List[str]:
    """Generate accepted spellings from component alternatives.

    The result includes every combination of the full component list and of its
    first three and first two components, joined by each known separator, along
    with any additional single-component spellings.
    """
    spellings = []
    for n in (4, 3, 2):
        for parts in itertools.product(*components[:n]):
            for separator in _SEPARATORS:
                spellings.append(separator.join(parts))
    spellings.extend(singles)
    return spellings


class UnitSystem(enum.Enum):
    """The known systems of units."""

    METRE_KILOGRAM_SECOND_KELVIN = 'm·kg·s·K'
    MILLIMETRE_GRAM_SECOND_KELVIN = 'mm·g·s·K'
    FOOT_POUND_SECOND_RANKINE = 'ft·lbf·s·°R'
    INCH_POUND_SECOND_RANKINE = 'in·lbf·s·°R'

    @property
    def abbreviation(self) -> str:
        """The canonical abbreviation of this system."""
        return self.value

    @classmethod
    def parse(cls, text: str) -> typing.Optional['UnitSystem']:
        """Get the unit system spelled by `text`, if any."""
        return _SPELLINGS.get(text)

    def __str__(self) -> str:
        return self.value


STANDARD = UnitSystem.METRE_KILOGRAM_SECOND_KELVIN
"""The system in which every category's standard unit is consistent."""


_SPELLINGS = {
    spelling: system
    for system, spellings in {
        UnitSystem.METRE_KILOGRAM_SECOND_KELVIN: _spellings(
            [('m',), ('kg',), ('s',), ('K',)], 'm', 'kg',
        ),
        UnitSystem.MILLIMETRE_GRAM_SECOND_KELVIN: _spellings(
            [('mm',), ('g',), ('s',), ('K',)], 'mm', 'g',
        ),
        UnitSystem.FOOT_POUND_SECOND_RANKINE: _spellings(
            [('ft',), ('lbf', 'lb'), ('s',), ('°R', 'R')], 'ft',
        ),
        UnitSystem.INCH_POUND_SECOND_RANKINE: _spellings(
            [('in',), ('lbf', 'lb'), ('s',), ('°R', 'R')], 'in',
        ),
    }.items()
    for spelling in spellings
}
