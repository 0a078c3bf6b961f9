import numpy
import pytest

from phq.core import catalog
from phq.core import lexicon
from phq.core import units
from phq.core.dimensions import Dimensions, DIMENSIONLESS
from phq.core.systems import UnitSystem


@pytest.fixture
def categories():
    """The catalog categories with their standard units and dimensions."""
    return {
        'Length': ('m', Dimensions(length=1)),
        'Time': ('s', Dimensions(time=1)),
        'Mass': ('kg', Dimensions(mass=1)),
        'MassRate': ('kg/s', Dimensions(time=-1, mass=1)),
        'ElectricCurrent': ('A', Dimensions(electric_current=1)),
        'ElectricCharge': ('C', Dimensions(time=1, electric_current=1)),
        'TemperatureDifference': ('K', Dimensions(temperature=1)),
        'ReciprocalTemperature': ('/K', Dimensions(temperature=-1)),
        'ThermalExpansion': ('1/K', Dimensions(temperature=-1)),
        'Angle': ('rad', DIMENSIONLESS),
        'SolidAngle': ('sr', DIMENSIONLESS),
        'AngularSpeed': ('rad/s', Dimensions(time=-1)),
        'AngularAcceleration': ('rad/s^2', Dimensions(time=-2)),
        'Frequency': ('Hz', Dimensions(time=-1)),
        'Speed': ('m/s', Dimensions(time=-1, length=1)),
        'Acceleration': ('m/s^2', Dimensions(time=-2, length=1)),
        'Area': ('m^2', Dimensions(length=2)),
        'Volume': ('m^3', Dimensions(length=3)),
        'VolumeRate': ('m^3/s', Dimensions(time=-1, length=3)),
        'Diffusivity': ('m^2/s', Dimensions(time=-1, length=2)),
        'MassDensity': ('kg/m^3', Dimensions(length=-3, mass=1)),
        'Energy': ('J', Dimensions(time=-2, length=2, mass=1)),
        'Power': ('W', Dimensions(time=-3, length=2, mass=1)),
        'EnergyFlux': ('W/m^2', Dimensions(time=-3, mass=1)),
        'Pressure': ('Pa', Dimensions(time=-2, length=-1, mass=1)),
        'DynamicViscosity': ('Pa·s', Dimensions(time=-1, length=-1, mass=1)),
        'HeatCapacity': (
            'J/K', Dimensions(time=-2, length=2, mass=1, temperature=-1),
        ),
        'SpecificEnergy': ('J/kg', Dimensions(time=-2, length=2)),
        'SpecificHeatCapacity': (
            'J/kg/K', Dimensions(time=-2, length=2, temperature=-1),
        ),
        'SpecificPower': ('W/kg', Dimensions(time=-3, length=2)),
        'ThermalConductivity': (
            'W/m/K', Dimensions(time=-3, length=1, mass=1, temperature=-1),
        ),
        'TemperatureGradient': ('K/m', Dimensions(length=-1, temperature=1)),
        'TransportEnergyConsumption': (
            'J/m', Dimensions(time=-2, length=1, mass=1),
        ),
        'SubstanceAmount': ('mol', Dimensions(substance_amount=1)),
        'Memory': ('b', DIMENSIONLESS),
        'MemoryRate': ('b/s', Dimensions(time=-1)),
    }


def test_catalog_categories(categories: dict):
    """Every catalog category should be registered with its properties."""
    assert len(categories) == 36
    registered = units.categories()
    for name, (standard, expected) in categories.items():
        category = getattr(catalog, name)
        assert category in registered
        assert category.__name__ == name
        assert units.standard(category).abbreviation == standard
        assert units.standard(category).scale.unity
        assert units.related_dimensions(category) == expected
        for system in UnitSystem:
            unit = units.consistent_unit(category, system)
            assert isinstance(unit, category)


def test_round_trip(categories: dict):
    """Converting to any unit and back should recover the original value."""
    original = numpy.array([0.0, 1.0, -1.234567890123456789, 1e10, 3.5e-8])
    for name in categories:
        category = getattr(catalog, name)
        standard = units.standard(category)
        for unit in category:
            assert numpy.array_equal(
                units.convert(original, unit, unit), original
            )
            there = units.convert(original, standard, unit)
            back = units.convert(there, unit, standard)
            assert back == pytest.approx(original, rel=1e-12)


def test_parse_abbreviations(categories: dict):
    """Every unit should parse from its abbreviation and its spellings."""
    for name in categories:
        category = getattr(catalog, name)
        for unit in category:
            assert units.parse(category, units.abbreviation(unit)) is unit
            assert unit.abbreviation in unit.spellings
            for spelling in unit.spellings:
                assert units.parse(category, spelling) is unit
        assert units.parse(category, '') is None


def test_listed_spellings():
    """Every listed spelling should parse to its unit."""
    for name, listing in lexicon.SPELLINGS.items():
        category = getattr(catalog, name)
        for member, spellings in listing.items():
            unit = category[member]
            for spelling in spellings:
                assert units.parse(category, spelling) is unit, spelling
    cases = {
        (catalog.Energy, 'N·m'): catalog.Energy.JOULE,
        (catalog.Energy, 'μN·mm'): catalog.Energy.NANOJOULE,
        (catalog.Pressure, 'N/m^2'): catalog.Pressure.PASCAL,
        (catalog.Pressure, 'kN/m^2'): catalog.Pressure.KILOPASCAL,
        (catalog.DynamicViscosity, 'kg/(m·s)'): (
            catalog.DynamicViscosity.PASCAL_SECOND
        ),
        (catalog.ThermalConductivity, 'W/(m·K)'): (
            catalog.ThermalConductivity.WATT_PER_METRE_PER_KELVIN
        ),
        (catalog.ThermalConductivity, 'W/m/°C'): (
            catalog.ThermalConductivity.WATT_PER_METRE_PER_KELVIN
        ),
        (catalog.Memory, 'kilobyte'): catalog.Memory.KILOBYTE,
        (catalog.Memory, 'megabits'): catalog.Memory.MEGABIT,
        (catalog.Angle, 'am'): catalog.Angle.ARCMINUTE,
        (catalog.Angle, 'arcs'): catalog.Angle.ARCSECOND,
        (catalog.Length, 'Micrometre'): catalog.Length.MICROMETRE,
        (catalog.Area, 'milliinch^2'): catalog.Area.SQUARE_MILLIINCH,
        (catalog.SolidAngle, 'rad^2'): catalog.SolidAngle.STERADIAN,
    }
    for (category, spelling), expected in cases.items():
        assert units.parse(category, spelling) is expected


def test_prefixes():
    """Test the table of metric and binary prefixes."""
    assert catalog.PREFIXES(symbol='k')['factor'] == '1000'
    assert catalog.PREFIXES(name='MEBI')['symbol'] == 'Mi'
    micro = catalog.prefix('μ')
    assert micro.symbols == ('μ', 'u')
    assert micro.scale == units.Scale(['0.000001'])
    kilowatt = catalog.prefixed('k', catalog.watt)
    assert kilowatt.name == 'KILOWATT'
    assert kilowatt.symbols == ('kW',)


def test_builders():
    """Test the functions that compose derived units."""
    speed = catalog.per(catalog.foot, catalog.second)
    assert speed.name == 'FOOT_PER_SECOND'
    assert speed.symbols == ('ft/s', 'ft/sec')
    area = catalog.square(catalog.foot)
    assert area.name == 'SQUARE_FOOT'
    assert area.symbols == ('ft^2', 'ft2')
    assert catalog.cube(catalog.inch).scale == units.Scale([catalog.INCH] * 3)
    acceleration = catalog.per_square(catalog.metre, catalog.second)
    assert 'm/sec/sec' in acceleration.symbols
    assert catalog.times(catalog.watt, catalog.hour).symbols[:2] == (
        'W·hr', 'W*hr',
    )
    inverse = catalog.reciprocal(catalog.kelvin)
    assert inverse.symbols[0] == '1/K'
    assert inverse.scale.unity
    definition = catalog.unit(catalog.metre, 'metres')
    assert definition.abbreviation == 'm'
    assert 'm' not in definition.spellings
    assert definition.spellings.count('metres') == 1


def test_selected_conversions():
    """Test conversions between well-known units."""
    cases = {
        (catalog.Length.INCH, catalog.Length.MILLIMETRE): 25.4,
        (catalog.Length.MILLIINCH, catalog.Length.MICROMETRE): 25.4,
        (catalog.Mass.SLUG, catalog.Mass.KILOGRAM): (
            0.45359237 * 9.80665 / 0.3048
        ),
        (catalog.Area.ACRE, catalog.Area.SQUARE_METRE): 4046.8564224,
        (catalog.Area.HECTARE, catalog.Area.SQUARE_METRE): 1e4,
        (catalog.Volume.LITRE, catalog.Volume.CUBIC_CENTIMETRE): 1e3,
        (
            catalog.Energy.ELECTRONVOLT, catalog.Energy.JOULE
        ): 1.602176634e-19,
        (catalog.Energy.KILOCALORIE, catalog.Energy.JOULE): 4184.0,
        (
            catalog.ElectricCharge.AMPERE_HOUR, catalog.ElectricCharge.COULOMB
        ): 3600.0,
        (catalog.Angle.DEGREE, catalog.Angle.ARCMINUTE): 60.0,
        (catalog.Angle.ARCMINUTE, catalog.Angle.ARCSECOND): 60.0,
        (
            catalog.SubstanceAmount.MOLE, catalog.SubstanceAmount.PARTICLES
        ): 6.02214076e23,
        (catalog.Memory.MEBIBYTE, catalog.Memory.KIBIBYTE): 1024.0,
        (catalog.Memory.BYTE, catalog.Memory.BIT): 8.0,
        (
            catalog.MemoryRate.MEGABIT_PER_SECOND,
            catalog.MemoryRate.KILOBIT_PER_SECOND,
        ): 1000.0,
        (
            catalog.ReciprocalTemperature.PER_RANKINE,
            catalog.ReciprocalTemperature.PER_KELVIN,
        ): 1.8,
        (catalog.DynamicViscosity.POISE, catalog.DynamicViscosity.PASCAL_SECOND): 0.1,
        (catalog.Pressure.BAR, catalog.Pressure.KILOPASCAL): 100.0,
    }
    for (old, new), expected in cases.items():
        assert units.convert(1.0, old, new) == pytest.approx(expected)


def test_special_abbreviations():
    """Some units have abbreviations that differ from their first symbol."""
    cases = {
        catalog.Length.MILLIINCH: 'thou',
        catalog.Speed.MILLIINCH_PER_SECOND: 'mil/s',
        catalog.ReciprocalTemperature.PER_KELVIN: '/K',
        catalog.ThermalExpansion.PER_KELVIN: '1/K',
        catalog.TemperatureDifference.RANKINE: '°R',
        catalog.Energy.FOOT_POUND: 'ft·lbf',
        catalog.Pressure.POUND_PER_SQUARE_FOOT: 'lbf/ft^2',
    }
    for unit, expected in cases.items():
        assert unit.abbreviation == expected
    assert catalog.Pressure.parse('psf') is catalog.Pressure.POUND_PER_SQUARE_FOOT
    assert catalog.Mass.parse('lb') is catalog.Mass.POUND
    assert catalog.Energy.parse('ft·lb') is catalog.Energy.FOOT_POUND
