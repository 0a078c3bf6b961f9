"""
The catalog of unit categories.

Units of derived categories are composed from a small set of components (e.g.,
lengths, times, and metric prefixes), so that their names, spellings, and
scales follow directly from those of the components.
"""

import itertools
import typing

from phq.core import iterables
from phq.core import lexicon
from phq.core import units
from phq.core.dimensions import Dimensions, DIMENSIONLESS
from phq.core.systems import UnitSystem


FOOT = '0.3048'
INCH = '0.0254'
YARD = '0.9144'
MILE = '1609.344'
POUND = '0.45359237'
GRAVITY = '9.80665'
ELEMENTARY_CHARGE = '1.602176634e-19'
AVOGADRO = '6.02214076e23'
PI = '3.14159265358979323846264338327950288'
RANKINE = '1.8'


class Component(typing.NamedTuple):
    """A named piece from which to build units."""

    name: str
    symbols: typing.Tuple[str, ...]
    scale: units.Scale = units.UNITY
    words: typing.Tuple[str, ...] = ()


def component(
    name: str,
    symbols: typing.Union[str, typing.Iterable[str]],
    multipliers: typing.Iterable[str]=(),
    divisors: typing.Iterable[str]=(),
    words: typing.Iterable[str]=(),
) -> Component:
    """Create a component from a scale given as decimal constants."""
    return Component(
        name=name,
        symbols=tuple(iterables.separate(symbols)),
        scale=units.Scale(multipliers, divisors),
        words=tuple(words),
    )


_prefixes = [
    {'symbol': 'P', 'name': 'PETA', 'factor': '1000000000000000', 'aliases': ()},
    {'symbol': 'T', 'name': 'TERA', 'factor': '1000000000000', 'aliases': ()},
    {'symbol': 'G', 'name': 'GIGA', 'factor': '1000000000', 'aliases': ()},
    {'symbol': 'M', 'name': 'MEGA', 'factor': '1000000', 'aliases': ()},
    {'symbol': 'k', 'name': 'KILO', 'factor': '1000', 'aliases': ()},
    {'symbol': 'm', 'name': 'MILLI', 'factor': '0.001', 'aliases': ()},
    {'symbol': 'μ', 'name': 'MICRO', 'factor': '0.000001', 'aliases': ('u',)},
    {'symbol': 'n', 'name': 'NANO', 'factor': '0.000000001', 'aliases': ()},
    {'symbol': 'ki', 'name': 'KIBI', 'factor': '1024', 'aliases': ()},
    {'symbol': 'Mi', 'name': 'MEBI', 'factor': '1048576', 'aliases': ()},
    {'symbol': 'Gi', 'name': 'GIBI', 'factor': '1073741824', 'aliases': ()},
    {'symbol': 'Ti', 'name': 'TEBI', 'factor': '1099511627776', 'aliases': ()},
    {'symbol': 'Pi', 'name': 'PEBI', 'factor': '1125899906842624', 'aliases': ()},
]

PREFIXES = iterables.Table(_prefixes)
"""Metric and binary order-of-magnitude prefixes."""


def prefix(symbol: str) -> Component:
    """Get the prefix component with the given symbol."""
    entry = PREFIXES(symbol=symbol)
    return component(
        entry['name'],
        (entry['symbol'], *entry['aliases']),
        [entry['factor']],
    )


def prefixed(symbol: str, base: Component) -> Component:
    """Apply a prefix to a base component (e.g., 'k' + 'W' -> 'kW')."""
    p = prefix(symbol)
    return Component(
        name=f"{p.name}{base.name}",
        symbols=tuple(a + b for a in p.symbols for b in base.symbols),
        scale=p.scale * base.scale,
    )


def square(base: Component) -> Component:
    """The second power of a component."""
    return Component(
        name=f"SQUARE_{base.name}",
        symbols=tuple(f"{s}{e}" for s in base.symbols for e in ('^2', '2')),
        scale=base.scale ** 2,
    )


def cube(base: Component) -> Component:
    """The third power of a component."""
    return Component(
        name=f"CUBIC_{base.name}",
        symbols=tuple(f"{s}{e}" for s in base.symbols for e in ('^3', '3')),
        scale=base.scale ** 3,
    )


def per(numerator: Component, denominator: Component) -> Component:
    """The quotient of two components (e.g., 'm' / 's' -> 'm/s')."""
    return Component(
        name=f"{numerator.name}_PER_{denominator.name}",
        symbols=tuple(
            f"{a}/{b}"
            for a in numerator.symbols for b in denominator.symbols
        ),
        scale=numerator.scale / denominator.scale,
    )


def per_square(numerator: Component, denominator: Component) -> Component:
    """The quotient of a component and the square of another."""
    return Component(
        name=f"{numerator.name}_PER_SQUARE_{denominator.name}",
        symbols=tuple(
            f"{a}/{b}{e}"
            for a in numerator.symbols
            for b in denominator.symbols
            for e in ('^2', '2', f"/{b}")
        ),
        scale=numerator.scale / denominator.scale ** 2,
    )


def times(first: Component, second: Component) -> Component:
    """The product of two components (e.g., 'W' * 'hr' -> 'W·hr')."""
    return Component(
        name=f"{first.name}_{second.name}",
        symbols=tuple(
            f"{a}{sep}{b}"
            for a, b, sep in itertools.product(
                first.symbols, second.symbols, ('·', '*'),
            )
        ),
        scale=first.scale * second.scale,
    )


def reciprocal(base: Component) -> Component:
    """The inverse of a component (e.g., '1/K')."""
    return Component(
        name=f"PER_{base.name}",
        symbols=tuple(f"{n}/{s}" for n in ('1', '') for s in base.symbols),
        scale=units.UNITY / base.scale,
    )


def unit(
    c: Component,
    *extra: str,
    abbreviation: str=None,
) -> units.Definition:
    """Create a unit definition from a component.

    The first symbol is the abbreviation unless `abbreviation` is given. All
    other symbols, the component's words, and `extra` are further spellings.
    """
    abbreviation = abbreviation or c.symbols[0]
    spellings = iterables.unique(*c.symbols, *c.words, *extra)
    return units.Definition(
        name=c.name,
        abbreviation=abbreviation,
        scale=c.scale,
        spellings=tuple(s for s in spellings if s != abbreviation),
    )


def _respell(
    definition: units.Definition,
    known: typing.Mapping[str, typing.Tuple[str, ...]],
    claimed: typing.Mapping[str, str],
) -> units.Definition:
    """Merge listed spellings into a definition.

    Generated spellings that the listing assigns to another unit are dropped.
    """
    spellings = iterables.unique(
        *(
            s for s in definition.spellings
            if claimed.get(s, definition.name) == definition.name
        ),
        *known.get(definition.name, ()),
    )
    return definition._replace(
        spellings=tuple(s for s in spellings if s != definition.abbreviation),
    )


def define(
    name: str,
    definitions: typing.Iterable[typing.Union[Component, units.Definition]],
    standard: str,
    dimensions: Dimensions,
    consistent: typing.Tuple[str, str, str, str],
) -> typing.Type[units.Unit]:
    """Define a unit category in this module.

    The consistent units are given in the order of `~systems.UnitSystem`. Each
    unit also accepts the spellings that `~lexicon.SPELLINGS` lists for it.
    """
    known = lexicon.SPELLINGS.get(name, {})
    claimed = {
        spelling: owner
        for owner, spellings in known.items()
        for spelling in spellings
    }
    return units.define(
        name,
        [
            _respell(
                d if isinstance(d, units.Definition) else unit(d),
                known,
                claimed,
            )
            for d in definitions
        ],
        standard=standard,
        dimensions=dimensions,
        consistent=dict(zip(UnitSystem, consistent)),
        module=__name__,
    )


# Base components

mile = component('MILE', 'mi', [MILE], words=('mile', 'miles'))
kilometre = component(
    'KILOMETRE', 'km', ['1000'],
    words=('kilometer', 'kilometers', 'kilometre', 'kilometres'),
)
yard = component('YARD', 'yd', [YARD], words=('yard', 'yards'))
metre = component(
    'METRE', 'm',
    words=('meter', 'meters', 'metre', 'metres'),
)
foot = component('FOOT', 'ft', [FOOT], words=('foot', 'feet'))
decimetre = component(
    'DECIMETRE', 'dm', ['0.1'],
    words=('decimeter', 'decimeters', 'decimetre', 'decimetres'),
)
inch = component('INCH', 'in', [INCH], words=('inch', 'inches'))
centimetre = component(
    'CENTIMETRE', 'cm', ['0.01'],
    words=('centimeter', 'centimeters', 'centimetre', 'centimetres'),
)
millimetre = component(
    'MILLIMETRE', 'mm', ['0.001'],
    words=('millimeter', 'millimeters', 'millimetre', 'millimetres'),
)
milliinch = component(
    'MILLIINCH', ('mil', 'thou', 'milin'), ['0.0000254'],
    words=(
        'mils', 'milliinch', 'milliinches', 'thous',
        'thousandth', 'thousandths',
    ),
)
micrometre = component(
    'MICROMETRE', ('μm', 'um'), ['0.000001'],
    words=(
        'micrometer', 'micrometers', 'micrometre', 'micrometres',
        'micron', 'microns',
    ),
)
microinch = component(
    'MICROINCH', ('μin', 'uin'), ['0.0000000254'],
    words=('microinch', 'microinches'),
)

LENGTHS = (
    mile, kilometre, yard, metre, foot, decimetre, inch,
    centimetre, millimetre, milliinch, micrometre, microinch,
)

nanosecond = component(
    'NANOSECOND', 'ns', ['0.000000001'],
    words=('nanosecond', 'nanoseconds'),
)
microsecond = component(
    'MICROSECOND', ('μs', 'us'), ['0.000001'],
    words=('microsecond', 'microseconds'),
)
millisecond = component(
    'MILLISECOND', 'ms', ['0.001'],
    words=('millisecond', 'milliseconds'),
)
second = component('SECOND', ('s', 'sec'), words=('second', 'seconds'))
minute = component('MINUTE', 'min', ['60'], words=('minute', 'minutes'))
hour = component('HOUR', ('hr', 'h'), ['3600'], words=('hour', 'hours'))

PERIODS = (second, minute, hour)

kilogram = component('KILOGRAM', 'kg', words=('kilogram', 'kilograms'))
gram = component('GRAM', 'g', ['0.001'], words=('gram', 'grams'))
slug = component('SLUG', 'slug', [POUND, GRAVITY], [FOOT], words=('slugs',))
slinch = component(
    'SLINCH', 'slinch', [POUND, GRAVITY], [INCH],
    words=('slinches',),
)
pound = component(
    'POUND', ('lbm', 'lb'), [POUND],
    words=('pound', 'pounds'),
)

MASSES = (kilogram, gram, slug, slinch, pound)

pound_force = component('POUND', ('lbf', 'lb'), [POUND, GRAVITY])
foot_pound = component(
    'FOOT_POUND', ('ft·lbf', 'ft*lbf', 'ft·lb', 'ft*lb'),
    [FOOT, POUND, GRAVITY],
)
inch_pound = component(
    'INCH_POUND', ('in·lbf', 'in*lbf', 'in·lb', 'in*lb'),
    [INCH, POUND, GRAVITY],
)

kelvin = component('KELVIN', ('K', '°K', 'degK'), words=('kelvin',))
celsius = component('CELSIUS', ('°C', 'C', 'degC'), words=('celsius',))
rankine = component(
    'RANKINE', ('°R', 'R', 'degR'), divisors=[RANKINE],
    words=('rankine',),
)
fahrenheit = component(
    'FAHRENHEIT', ('°F', 'F', 'degF'), divisors=[RANKINE],
    words=('fahrenheit',),
)

TEMPERATURES = (kelvin, celsius, rankine, fahrenheit)

radian = component('RADIAN', 'rad', words=('radian', 'radians'))
degree = component(
    'DEGREE', ('deg', '°'), [PI], ['180'],
    words=('degree', 'degrees'),
)
arcminute = component(
    'ARCMINUTE', ('arcmin', "'"), [PI], ['10800'],
    words=('arcminute', 'arcminutes'),
)
arcsecond = component(
    'ARCSECOND', ('arcsec', '"'), [PI], ['648000'],
    words=('arcsecond', 'arcseconds'),
)
revolution = component(
    'REVOLUTION', 'rev', ['2', PI],
    words=('revolution', 'revolutions'),
)

ANGLES = (radian, degree, revolution)

joule = component('JOULE', 'J', words=('joule', 'joules'))
watt = component('WATT', 'W', words=('watt', 'watts'))
calorie = component('CALORIE', 'cal', ['4.184'], words=('calorie', 'calories'))
electronvolt = component(
    'ELECTRONVOLT', 'eV', [ELEMENTARY_CHARGE],
    words=('electronvolt', 'electronvolts'),
)
pascal = component('PASCAL', 'Pa', words=('pascal', 'pascals'))
ampere = component('AMPERE', 'A', words=('ampere', 'amperes', 'amp', 'amps'))
coulomb = component('COULOMB', 'C', words=('coulomb', 'coulombs'))
elementary_charge = component('ELEMENTARY_CHARGE', 'e', [ELEMENTARY_CHARGE])
mole = component('MOLE', 'mol', words=('mole', 'moles'))
hertz = component('HERTZ', 'Hz', words=('hertz',))
bit = component('BIT', 'b', words=('bit', 'bits'))
byte = component('BYTE', 'B', ['8'], words=('byte', 'bytes'))

SUBMULTIPLES = ('m', 'μ', 'n')
MULTIPLES = ('k', 'M', 'G')

square_metre = square(metre)
square_millimetre = square(millimetre)
square_foot = square(foot)
square_inch = square(inch)
cubic_metre = cube(metre)

hectare = component('HECTARE', 'ha', ['10000'], words=('hectare', 'hectares'))
acre = component('ACRE', 'ac', [MILE, MILE], ['640'], words=('acre', 'acres'))
litre = component(
    'LITRE', 'L', ['0.001'],
    words=('liter', 'liters', 'litre', 'litres'),
)
millilitre = component(
    'MILLILITRE', 'mL', ['0.000001'],
    words=('milliliter', 'milliliters', 'millilitre', 'millilitres'),
)

AREAS = (
    square(mile), square(kilometre), hectare, acre, square_metre,
    square(yard), square_foot, square(decimetre), square_inch,
    square(centimetre), square_millimetre, square(milliinch),
    square(micrometre), square(microinch),
)

VOLUMES = (
    cube(mile), cube(kilometre), cubic_metre, cube(yard), cube(foot),
    cube(decimetre), litre, cube(inch), cube(centimetre), millilitre,
    cube(millimetre), cube(milliinch), cube(micrometre), cube(microinch),
)

MEMORY = (
    bit,
    byte,
    *(
        prefixed(p, base)
        for decimal in ('k', 'M', 'G', 'T', 'P')
        for base in (bit, byte)
        for p in (decimal, f"{decimal}i")
    ),
)


# Categories

Length = define(
    'Length',
    [
        unit(c, abbreviation='thou') if c is milliinch else c
        for c in LENGTHS
    ],
    standard='m',
    dimensions=Dimensions(length=1),
    consistent=('m', 'mm', 'ft', 'in'),
)

Time = define(
    'Time',
    [nanosecond, microsecond, millisecond, second, minute, hour],
    standard='s',
    dimensions=Dimensions(time=1),
    consistent=('s', 's', 's', 's'),
)

Mass = define(
    'Mass',
    MASSES,
    standard='kg',
    dimensions=Dimensions(mass=1),
    consistent=('kg', 'g', 'slug', 'slinch'),
)

MassRate = define(
    'MassRate',
    [per(m, second) for m in MASSES],
    standard='kg/s',
    dimensions=Dimensions(time=-1, mass=1),
    consistent=('kg/s', 'g/s', 'slug/s', 'slinch/s'),
)

ElectricCurrent = define(
    'ElectricCurrent',
    [
        ampere,
        *(prefixed(p, ampere) for p in ('k', 'M', 'G', 'T', 'm', 'μ', 'n')),
        *(per(elementary_charge, t) for t in PERIODS),
    ],
    standard='A',
    dimensions=Dimensions(electric_current=1),
    consistent=('A', 'A', 'A', 'A'),
)

ElectricCharge = define(
    'ElectricCharge',
    [
        coulomb,
        *(prefixed(p, coulomb) for p in ('k', 'M', 'G', 'T', 'm', 'μ', 'n')),
        unit(elementary_charge, 'elementary charge', 'elementary charges'),
        times(ampere, minute),
        times(ampere, hour),
        *(
            times(prefixed(p, ampere), t)
            for p in ('k', 'M', 'G', 'T', 'm', 'μ', 'n')
            for t in (minute, hour)
        ),
    ],
    standard='C',
    dimensions=Dimensions(time=1, electric_current=1),
    consistent=('C', 'C', 'C', 'C'),
)

TemperatureDifference = define(
    'TemperatureDifference',
    TEMPERATURES,
    standard='K',
    dimensions=Dimensions(temperature=1),
    consistent=('K', 'K', '°R', '°R'),
)

ReciprocalTemperature = define(
    'ReciprocalTemperature',
    [
        unit(reciprocal(t), abbreviation=f"/{t.symbols[0]}")
        for t in TEMPERATURES
    ],
    standard='/K',
    dimensions=Dimensions(temperature=-1),
    consistent=('/K', '/K', '/°R', '/°R'),
)

ThermalExpansion = define(
    'ThermalExpansion',
    [reciprocal(t) for t in TEMPERATURES],
    standard='1/K',
    dimensions=Dimensions(temperature=-1),
    consistent=('1/K', '1/K', '1/°R', '1/°R'),
)

Angle = define(
    'Angle',
    [radian, degree, arcminute, arcsecond, revolution],
    standard='rad',
    dimensions=DIMENSIONLESS,
    consistent=('rad', 'rad', 'rad', 'rad'),
)

SolidAngle = define(
    'SolidAngle',
    [
        unit(
            component('STERADIAN', 'sr', words=('steradian', 'steradians')),
            'rad^2', 'rad2', 'radian^2', 'radian2', 'radians^2', 'radians2',
        ),
        square(degree),
        unit(square(arcminute), 'am^2', 'am2'),
        unit(square(arcsecond), 'as', 'as^2', 'as2', 'arcs^2', 'arcs2'),
    ],
    standard='sr',
    dimensions=DIMENSIONLESS,
    consistent=('sr', 'sr', 'sr', 'sr'),
)

AngularSpeed = define(
    'AngularSpeed',
    [per(a, t) for a in ANGLES for t in PERIODS],
    standard='rad/s',
    dimensions=Dimensions(time=-1),
    consistent=('rad/s', 'rad/s', 'rad/s', 'rad/s'),
)

AngularAcceleration = define(
    'AngularAcceleration',
    [per_square(a, t) for a in ANGLES for t in PERIODS],
    standard='rad/s^2',
    dimensions=Dimensions(time=-2),
    consistent=('rad/s^2', 'rad/s^2', 'rad/s^2', 'rad/s^2'),
)

Frequency = define(
    'Frequency',
    [
        unit(hertz, '1/s', '/s'),
        *(prefixed(p, hertz) for p in ('k', 'M', 'G')),
    ],
    standard='Hz',
    dimensions=Dimensions(time=-1),
    consistent=('Hz', 'Hz', 'Hz', 'Hz'),
)

Speed = define(
    'Speed',
    [per(length, t) for t in PERIODS for length in LENGTHS],
    standard='m/s',
    dimensions=Dimensions(time=-1, length=1),
    consistent=('m/s', 'mm/s', 'ft/s', 'in/s'),
)

Acceleration = define(
    'Acceleration',
    [per_square(length, second) for length in LENGTHS],
    standard='m/s^2',
    dimensions=Dimensions(time=-2, length=1),
    consistent=('m/s^2', 'mm/s^2', 'ft/s^2', 'in/s^2'),
)

Area = define(
    'Area',
    AREAS,
    standard='m^2',
    dimensions=Dimensions(length=2),
    consistent=('m^2', 'mm^2', 'ft^2', 'in^2'),
)

Volume = define(
    'Volume',
    VOLUMES,
    standard='m^3',
    dimensions=Dimensions(length=3),
    consistent=('m^3', 'mm^3', 'ft^3', 'in^3'),
)

VolumeRate = define(
    'VolumeRate',
    [per(v, second) for v in VOLUMES],
    standard='m^3/s',
    dimensions=Dimensions(time=-1, length=3),
    consistent=('m^3/s', 'mm^3/s', 'ft^3/s', 'in^3/s'),
)

Diffusivity = define(
    'Diffusivity',
    [per(a, second) for a in AREAS],
    standard='m^2/s',
    dimensions=Dimensions(time=-1, length=2),
    consistent=('m^2/s', 'mm^2/s', 'ft^2/s', 'in^2/s'),
)

MassDensity = define(
    'MassDensity',
    [
        per(kilogram, cubic_metre),
        per(gram, cube(millimetre)),
        per(slug, cube(foot)),
        per(slinch, cube(inch)),
        per(pound, cube(foot)),
        per(pound, cube(inch)),
    ],
    standard='kg/m^3',
    dimensions=Dimensions(length=-3, mass=1),
    consistent=('kg/m^3', 'g/mm^3', 'slug/ft^3', 'slinch/in^3'),
)

nanojoule = prefixed('n', joule)
nanowatt = prefixed('n', watt)
WATTS = (watt, *(prefixed(p, watt) for p in MULTIPLES))

Energy = define(
    'Energy',
    [
        joule,
        *(prefixed(p, joule) for p in SUBMULTIPLES + MULTIPLES),
        *(times(w, t) for w in WATTS for t in (minute, hour)),
        foot_pound,
        inch_pound,
        calorie,
        *(prefixed(p, calorie) for p in SUBMULTIPLES + MULTIPLES),
        electronvolt,
        *(prefixed(p, electronvolt) for p in SUBMULTIPLES + MULTIPLES),
        component(
            'BRITISH_THERMAL_UNIT', 'BTU', ['4.1868', '453.59237'], [RANKINE],
            words=('Btu',),
        ),
    ],
    standard='J',
    dimensions=Dimensions(time=-2, length=2, mass=1),
    consistent=('J', 'nJ', 'ft·lbf', 'in·lbf'),
)

Power = define(
    'Power',
    [
        watt,
        *(prefixed(p, watt) for p in SUBMULTIPLES + MULTIPLES),
        per(foot_pound, second),
        per(inch_pound, second),
    ],
    standard='W',
    dimensions=Dimensions(time=-3, length=2, mass=1),
    consistent=('W', 'nW', 'ft·lbf/s', 'in·lbf/s'),
)

EnergyFlux = define(
    'EnergyFlux',
    [
        per(watt, square_metre),
        per(nanowatt, square_millimetre),
        per(per(foot_pound, square_foot), second),
        per(per(inch_pound, square_inch), second),
    ],
    standard='W/m^2',
    dimensions=Dimensions(time=-3, mass=1),
    consistent=('W/m^2', 'nW/mm^2', 'ft·lbf/ft^2/s', 'in·lbf/in^2/s'),
)

Pressure = define(
    'Pressure',
    [
        pascal,
        *(prefixed(p, pascal) for p in MULTIPLES),
        component('BAR', 'bar', ['100000'], words=('bars',)),
        component('ATMOSPHERE', 'atm', ['101325'], words=('atmosphere',)),
        unit(per(pound_force, square_foot), 'psf'),
        unit(per(pound_force, square_inch), 'psi'),
    ],
    standard='Pa',
    dimensions=Dimensions(time=-2, length=-1, mass=1),
    consistent=('Pa', 'Pa', 'lbf/ft^2', 'lbf/in^2'),
)

pascal_second = times(pascal, second)

DynamicViscosity = define(
    'DynamicViscosity',
    [
        pascal_second,
        *(times(prefixed(p, pascal), second) for p in MULTIPLES),
        component('POISE', 'P', ['0.1'], words=('poise',)),
        per(times(pound_force, second), square_foot),
        per(times(pound_force, second), square_inch),
    ],
    standard='Pa·s',
    dimensions=Dimensions(time=-1, length=-1, mass=1),
    consistent=('Pa·s', 'Pa·s', 'lbf·s/ft^2', 'lbf·s/in^2'),
)

HeatCapacity = define(
    'HeatCapacity',
    [
        per(joule, kelvin),
        per(nanojoule, kelvin),
        per(foot_pound, rankine),
        per(inch_pound, rankine),
    ],
    standard='J/K',
    dimensions=Dimensions(time=-2, length=2, mass=1, temperature=-1),
    consistent=('J/K', 'nJ/K', 'ft·lbf/°R', 'in·lbf/°R'),
)

SpecificEnergy = define(
    'SpecificEnergy',
    [
        per(joule, kilogram),
        per(nanojoule, gram),
        per(foot_pound, slug),
        per(inch_pound, slinch),
    ],
    standard='J/kg',
    dimensions=Dimensions(time=-2, length=2),
    consistent=('J/kg', 'nJ/g', 'ft·lbf/slug', 'in·lbf/slinch'),
)

SpecificHeatCapacity = define(
    'SpecificHeatCapacity',
    [
        per(per(joule, kilogram), kelvin),
        per(per(nanojoule, gram), kelvin),
        per(per(foot_pound, slug), rankine),
        per(per(inch_pound, slinch), rankine),
    ],
    standard='J/kg/K',
    dimensions=Dimensions(time=-2, length=2, temperature=-1),
    consistent=('J/kg/K', 'nJ/g/K', 'ft·lbf/slug/°R', 'in·lbf/slinch/°R'),
)

SpecificPower = define(
    'SpecificPower',
    [
        per(watt, kilogram),
        per(nanowatt, gram),
        per(per(foot_pound, slug), second),
        per(per(inch_pound, slinch), second),
    ],
    standard='W/kg',
    dimensions=Dimensions(time=-3, length=2),
    consistent=('W/kg', 'nW/g', 'ft·lbf/slug/s', 'in·lbf/slinch/s'),
)

ThermalConductivity = define(
    'ThermalConductivity',
    [
        per(per(watt, metre), kelvin),
        per(per(nanowatt, millimetre), kelvin),
        per(per(pound_force, second), rankine),
    ],
    standard='W/m/K',
    dimensions=Dimensions(time=-3, length=1, mass=1, temperature=-1),
    consistent=('W/m/K', 'nW/mm/K', 'lbf/s/°R', 'lbf/s/°R'),
)

TemperatureGradient = define(
    'TemperatureGradient',
    [
        per(kelvin, metre),
        per(kelvin, millimetre),
        per(celsius, metre),
        per(celsius, millimetre),
        per(rankine, foot),
        per(rankine, inch),
        per(fahrenheit, foot),
        per(fahrenheit, inch),
    ],
    standard='K/m',
    dimensions=Dimensions(length=-1, temperature=1),
    consistent=('K/m', 'K/mm', '°R/ft', '°R/in'),
)

TransportEnergyConsumption = define(
    'TransportEnergyConsumption',
    [
        per(joule, mile),
        per(joule, kilometre),
        per(joule, metre),
        per(nanojoule, millimetre),
        per(prefixed('k', joule), mile),
        *(
            per(times(w, t), length)
            for w in (watt, prefixed('k', watt))
            for length in (mile, kilometre, metre)
            for t in (minute, hour)
        ),
        per(foot_pound, foot),
        per(inch_pound, inch),
    ],
    standard='J/m',
    dimensions=Dimensions(time=-2, length=1, mass=1),
    consistent=('J/m', 'nJ/mm', 'ft·lbf/ft', 'in·lbf/in'),
)

SubstanceAmount = define(
    'SubstanceAmount',
    [
        mole,
        *(prefixed(p, mole) for p in MULTIPLES),
        component(
            'PARTICLES', 'particles', divisors=[AVOGADRO],
            words=('particle',),
        ),
    ],
    standard='mol',
    dimensions=Dimensions(substance_amount=1),
    consistent=('mol', 'mol', 'mol', 'mol'),
)

Memory = define(
    'Memory',
    MEMORY,
    standard='b',
    dimensions=DIMENSIONLESS,
    consistent=('b', 'b', 'b', 'b'),
)

MemoryRate = define(
    'MemoryRate',
    [per(m, t) for t in PERIODS for m in MEMORY],
    standard='b/s',
    dimensions=Dimensions(time=-1),
    consistent=('b/s', 'b/s', 'b/s', 'b/s'),
)
