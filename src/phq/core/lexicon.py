"""
Accepted spellings of catalog units.

Each category maps the names of its units to the spellings that parse to that
unit. The catalog merges these with the symbols and words from which it builds
each unit, and a spelling listed here takes precedence over a generated one.
"""

SPELLINGS = {
    'Acceleration': {
        'MILE_PER_SQUARE_SECOND': (
            'mi/s^2', 'mi/s2', 'mi/s/s', 'mi/sec^2', 'mi/sec2', 'mi/sec/sec',
        ),
        'KILOMETRE_PER_SQUARE_SECOND': (
            'km/s^2', 'km/s2', 'km/s/s', 'km/sec^2', 'km/sec2', 'km/sec/sec',
        ),
        'YARD_PER_SQUARE_SECOND': (
            'yd/s^2', 'yd/s2', 'yd/s/s', 'yd/sec^2', 'yd/sec2', 'yd/sec/sec',
        ),
        'METRE_PER_SQUARE_SECOND': (
            'm/s^2', 'm/s2', 'm/s/s', 'm/sec^2', 'm/sec2', 'm/sec/sec',
        ),
        'FOOT_PER_SQUARE_SECOND': (
            'ft/s^2', 'ft/s2', 'ft/s/s', 'ft/sec^2', 'ft/sec2', 'ft/sec/sec',
        ),
        'DECIMETRE_PER_SQUARE_SECOND': (
            'dm/s^2', 'dm/s2', 'dm/s/s', 'dm/sec^2', 'dm/sec2', 'dm/sec/sec',
        ),
        'INCH_PER_SQUARE_SECOND': (
            'in/s^2', 'in/s2', 'in/s/s', 'in/sec^2', 'in/sec2', 'in/sec/sec',
        ),
        'CENTIMETRE_PER_SQUARE_SECOND': (
            'cm/s^2', 'cm/s2', 'cm/s/s', 'cm/sec^2', 'cm/sec2', 'cm/sec/sec',
        ),
        'MILLIMETRE_PER_SQUARE_SECOND': (
            'mm/s^2', 'mm/s2', 'mm/s/s', 'mm/sec^2', 'mm/sec2', 'mm/sec/sec',
        ),
        'MILLIINCH_PER_SQUARE_SECOND': (
            'milin/s^2', 'milin/s2', 'milin/s/s', 'milin/sec^2', 'milin/sec2',
            'milin/sec/sec', 'milliinch/s^2', 'milliinch/s2', 'milliinch/s/s',
            'milliinch/sec^2', 'milliinch/sec2', 'milliinch/sec/sec',
            'mil/s^2', 'mil/s2', 'mil/s/s', 'mil/sec^2', 'mil/sec2',
            'mil/sec/sec', 'thou/s^2', 'thou/s2', 'thou/s/s', 'thou/sec^2',
            'thou/sec2', 'thou/sec/sec',
        ),
        'MICROMETRE_PER_SQUARE_SECOND': (
            'μm/s^2', 'μm/s2', 'μm/s/s', 'μm/sec^2', 'μm/sec2',
            'μm/sec/sec', 'um/s^2', 'um/s2', 'um/s/s', 'um/sec^2', 'um/sec2',
            'um/sec/sec',
        ),
        'MICROINCH_PER_SQUARE_SECOND': (
            'μin/s^2', 'μin/s2', 'μin/s/s', 'μin/sec^2', 'μin/sec2',
            'μin/sec/sec', 'uin/s^2', 'uin/s2', 'uin/s/s', 'uin/sec^2',
            'uin/sec2', 'uin/sec/sec',
        ),
    },
    'Angle': {
        'RADIAN': (
            'rad', 'radian', 'radians',
        ),
        'DEGREE': (
            'deg', 'degree', 'degrees',
        ),
        'ARCMINUTE': (
            "'", 'am', 'arcmin', 'arcminute', 'arcminutes',
        ),
        'ARCSECOND': (
            'as', 'arcs', 'arcsec', 'arcsecond', 'arcseconds',
        ),
    },
    'AngularAcceleration': {
        'RADIAN_PER_SQUARE_SECOND': (
            'rad/s^2', 'rad/s2', 'rad/s/s', 'rad/sec^2', 'rad/sec2',
            'rad/sec/sec',
        ),
        'RADIAN_PER_SQUARE_MINUTE': (
            'rad/min^2', 'rad/min2', 'rad/min/min',
        ),
        'RADIAN_PER_SQUARE_HOUR': (
            'rad/hr^2', 'rad/hr2', 'rad/hr/hr',
        ),
        'DEGREE_PER_SQUARE_SECOND': (
            '°/s^2', '°/s2', '°/s/s', '°/sec^2', '°/sec2', '°/sec/sec',
            'deg/s^2', 'deg/s2', 'deg/s/s', 'deg/sec^2', 'deg/sec2',
            'deg/sec/sec',
        ),
        'DEGREE_PER_SQUARE_MINUTE': (
            '°/min^2', '°/min2', '°/min/min', 'deg/min^2', 'deg/min2',
            'deg/min/min',
        ),
        'DEGREE_PER_SQUARE_HOUR': (
            '°/hr^2', '°/hr2', '°/hr/hr', 'deg/hr^2', 'deg/hr2',
            'deg/hr/hr',
        ),
        'REVOLUTION_PER_SQUARE_SECOND': (
            'rev/s^2', 'rev/s2', 'rev/s/s', 'rev/sec^2', 'rev/sec2',
            'rev/sec/sec',
        ),
        'REVOLUTION_PER_SQUARE_MINUTE': (
            'rev/min^2', 'rev/min2', 'rev/min/min',
        ),
        'REVOLUTION_PER_SQUARE_HOUR': (
            'rev/hr^2', 'rev/hr2', 'rev/hr/hr',
        ),
    },
    'AngularSpeed': {
        'RADIAN_PER_SECOND': (
            'rad/s', 'rad/sec',
        ),
        'RADIAN_PER_MINUTE': (
            'rad/min',
        ),
        'RADIAN_PER_HOUR': (
            'rad/hr',
        ),
        'DEGREE_PER_SECOND': (
            '°/s', '°/sec', 'deg/s', 'deg/sec',
        ),
        'DEGREE_PER_MINUTE': (
            '°/min', 'deg/min',
        ),
        'DEGREE_PER_HOUR': (
            '°/hr', 'deg/hr',
        ),
        'REVOLUTION_PER_SECOND': (
            'rev/s', 'rev/sec',
        ),
        'REVOLUTION_PER_MINUTE': (
            'rev/min',
        ),
        'REVOLUTION_PER_HOUR': (
            'rev/hr',
        ),
    },
    'Area': {
        'SQUARE_MILE': (
            'mi^2', 'mi2',
        ),
        'SQUARE_KILOMETRE': (
            'km^2', 'km2',
        ),
        'HECTARE': (
            'ha',
        ),
        'ACRE': (
            'ac',
        ),
        'SQUARE_YARD': (
            'yd^2', 'yd2',
        ),
        'SQUARE_METRE': (
            'm^2', 'm2',
        ),
        'SQUARE_FOOT': (
            'ft^2', 'ft2',
        ),
        'SQUARE_DECIMETRE': (
            'dm^2', 'dm2',
        ),
        'SQUARE_INCH': (
            'in^2', 'in2',
        ),
        'SQUARE_CENTIMETRE': (
            'cm^2', 'cm2',
        ),
        'SQUARE_MILLIMETRE': (
            'mm^2', 'mm2',
        ),
        'SQUARE_MILLIINCH': (
            'thou^2', 'thou2', 'mil^2', 'mil2', 'millinch^2', 'millinch2',
            'milliinch^2', 'milliinch2',
        ),
        'SQUARE_MICROMETRE': (
            'μm^2', 'μm2', 'um^2', 'um2',
        ),
        'SQUARE_MICROINCH': (
            'μin^2', 'μin2', 'uin^2', 'uin2',
        ),
    },
    'Diffusivity': {
        'SQUARE_MILE_PER_SECOND': (
            'mi^2/s', 'mi^2/sec', 'mi2/s', 'mi2/sec',
        ),
        'SQUARE_KILOMETRE_PER_SECOND': (
            'km^2/s', 'km^2/sec', 'km2/s', 'km2/sec',
        ),
        'HECTARE_PER_SECOND': (
            'ha/s', 'ha/sec',
        ),
        'ACRE_PER_SECOND': (
            'ac/s', 'ac/sec',
        ),
        'SQUARE_YARD_PER_SECOND': (
            'yd^2/s', 'yd^2/sec', 'yd2/s', 'yd2/sec',
        ),
        'SQUARE_METRE_PER_SECOND': (
            'm^2/s', 'm^2/sec', 'm2/s', 'm2/sec',
        ),
        'SQUARE_FOOT_PER_SECOND': (
            'ft^2/s', 'ft^2/sec', 'ft2/s', 'ft2/sec',
        ),
        'SQUARE_DECIMETRE_PER_SECOND': (
            'dm^2/s', 'dm^2/sec', 'dm2/s', 'dm2/sec',
        ),
        'SQUARE_INCH_PER_SECOND': (
            'in^2/s', 'in^2/sec', 'in2/s', 'in2/sec',
        ),
        'SQUARE_CENTIMETRE_PER_SECOND': (
            'cm^2/s', 'cm^2/sec', 'cm2/s', 'cm2/sec',
        ),
        'SQUARE_MILLIMETRE_PER_SECOND': (
            'mm^2/s', 'mm^2/sec', 'mm2/s', 'mm2/sec',
        ),
        'SQUARE_MILLIINCH_PER_SECOND': (
            'millinch^2/s', 'millinch^2/sec', 'millinch2/s', 'millinch2/sec',
            'milliinch^2/s', 'milliinch^2/sec', 'milliinch2/s',
            'milliinch2/sec', 'mil^2/s', 'mil^2/sec', 'mil2/s', 'mil2/sec',
            'thou^2/s', 'thou^2/sec', 'thou2/s', 'thou2/sec',
        ),
        'SQUARE_MICROMETRE_PER_SECOND': (
            'μm^2/s', 'μm^2/sec', 'μm2/s', 'μm2/sec', 'um^2/s', 'um^2/sec',
            'um2/s', 'um2/sec',
        ),
        'SQUARE_MICROINCH_PER_SECOND': (
            'μin^2/s', 'μin^2/sec', 'μin2/s', 'μin2/sec', 'uin^2/s',
            'uin^2/sec', 'uin2/s', 'uin2/sec',
        ),
    },
    'DynamicViscosity': {
        'PASCAL_SECOND': (
            'Pa·s', 'Pa*s', 'N·s/m^2', 'N·s/m2', 'N*s/m^2', 'N*s/m2',
            'kg/(m·s)', 'kg/(m*s)', 'kg/m/s',
        ),
        'KILOPASCAL_SECOND': (
            'kPa·s', 'kPa*s', 'kN·s/m^2', 'kN·s/m2', 'kN*s/m^2', 'kN*s/m2',
        ),
        'MEGAPASCAL_SECOND': (
            'MPa·s', 'MPa*s', 'N·s/mm^2', 'N*s/mm2', 'MN·s/m^2', 'MN·s/m2',
            'MN*s/m^2', 'MN*s/m2',
        ),
        'GIGAPASCAL_SECOND': (
            'GPa·s', 'GPa*s', 'GN·s/m^2', 'GN·s/m2', 'GN*s/m^2', 'GN*s/m2',
            'kN·s/mm^2', 'kN·s/mm2', 'kN*s/mm^2', 'kN*s/mm2',
        ),
        'POUND_SECOND_PER_SQUARE_FOOT': (
            'lbf·s/ft^2', 'lbf·s/ft2', 'lbf*s/ft^2', 'lbf*s/ft2',
            'lb·s/ft^2', 'lb·s/ft2', 'lb*s/ft^2', 'lb*s/ft2', 'psf·s',
            'psf*s',
        ),
        'POUND_SECOND_PER_SQUARE_INCH': (
            'lbf·s/in^2', 'lbf·s/in2', 'lbf*s/in^2', 'lbf*s/in2',
            'lb·s/in^2', 'lb·s/in2', 'lb*s/in^2', 'lb*s/in2', 'psi·s',
            'psi*s',
        ),
    },
    'ElectricCharge': {
        'COULOMB': (
            'C',
        ),
        'KILOCOULOMB': (
            'kC',
        ),
        'MEGACOULOMB': (
            'MC',
        ),
        'GIGACOULOMB': (
            'GC',
        ),
        'TERACOULOMB': (
            'TC',
        ),
        'MILLICOULOMB': (
            'mC',
        ),
        'MICROCOULOMB': (
            'μC', 'uC',
        ),
        'NANOCOULOMB': (
            'nC',
        ),
        'ELEMENTARY_CHARGE': (
            'e',
        ),
        'AMPERE_MINUTE': (
            'A·min', 'A*min',
        ),
        'AMPERE_HOUR': (
            'A·hr', 'A*hr',
        ),
        'KILOAMPERE_MINUTE': (
            'kA·min', 'kA*min',
        ),
        'KILOAMPERE_HOUR': (
            'kA·hr', 'kA*hr',
        ),
        'MEGAAMPERE_MINUTE': (
            'MA·min', 'MA*min',
        ),
        'MEGAAMPERE_HOUR': (
            'MA·hr', 'MA*hr',
        ),
        'GIGAAMPERE_MINUTE': (
            'GA·min', 'GA*min',
        ),
        'GIGAAMPERE_HOUR': (
            'GA·hr', 'GA*hr',
        ),
        'TERAAMPERE_MINUTE': (
            'TA·min', 'TA*min',
        ),
        'TERAAMPERE_HOUR': (
            'TA·hr', 'TA*hr',
        ),
        'MILLIAMPERE_MINUTE': (
            'mA·min', 'mA*min',
        ),
        'MILLIAMPERE_HOUR': (
            'mA·hr', 'mA*hr',
        ),
        'MICROAMPERE_MINUTE': (
            'μA·min', 'μA*min', 'uA·min', 'uA*min',
        ),
        'MICROAMPERE_HOUR': (
            'μA·hr', 'μA*hr', 'uA·hr', 'uA*hr',
        ),
        'NANOAMPERE_MINUTE': (
            'nA·min', 'nA*min',
        ),
        'NANOAMPERE_HOUR': (
            'nA·hr', 'nA*hr',
        ),
    },
    'ElectricCurrent': {
        'AMPERE': (
            'A',
        ),
        'KILOAMPERE': (
            'kA',
        ),
        'MEGAAMPERE': (
            'MA',
        ),
        'GIGAAMPERE': (
            'GA',
        ),
        'TERAAMPERE': (
            'TA',
        ),
        'MILLIAMPERE': (
            'mA',
        ),
        'MICROAMPERE': (
            'μA', 'uA',
        ),
        'NANOAMPERE': (
            'nA',
        ),
        'ELEMENTARY_CHARGE_PER_SECOND': (
            'e/s',
        ),
        'ELEMENTARY_CHARGE_PER_MINUTE': (
            'e/min',
        ),
        'ELEMENTARY_CHARGE_PER_HOUR': (
            'e/hr',
        ),
    },
    'Energy': {
        'JOULE': (
            'J', 'N·m', 'N*m', 'kg·m^2/s^2', 'kg*m^2/s^2', 'kg·m2/s2',
            'kg*m2/s2',
        ),
        'MILLIJOULE': (
            'mJ',
        ),
        'MICROJOULE': (
            'μJ', 'uJ',
        ),
        'NANOJOULE': (
            'nJ', 'μN·mm', 'μN*mm', 'uN·mm', 'uN*mm', 'g·mm^2/s^2',
            'g*mm^2/s^2', 'g·mm2/s2', 'g*mm2/s2',
        ),
        'KILOJOULE': (
            'kJ',
        ),
        'MEGAJOULE': (
            'MJ',
        ),
        'GIGAJOULE': (
            'GJ',
        ),
        'FOOT_POUND': (
            'ft·lbf', 'ft*lbf', 'ft·lb', 'ft*lb',
        ),
        'INCH_POUND': (
            'in·lbf', 'in*lbf', 'in·lb', 'in*lb',
        ),
    },
    'EnergyFlux': {
        'WATT_PER_SQUARE_METRE': (
            'W/m^2', 'W/m2', 'J/(m^2·s)', 'J/(m^2*s)', 'J/(m2·s)',
            'J/(m2*s)', 'J/m^2/s', 'J/m2/s', 'N/(m·s)', 'N/(m*s)', 'N/m/s',
            'kg/s^3', 'kg/s3',
        ),
        'NANOWATT_PER_SQUARE_MILLIMETRE': (
            'nW/mm^2', 'nW/mm2', 'nJ/(mm^2·s)', 'nJ/(mm^2*s)', 'nJ/(mm2·s)',
            'nJ/(mm2*s)', 'nJ/mm^2/s', 'nJ/mm2/s', 'μN/(mm·s)', 'μN/(mm*s)',
            'μN/mm/s', 'uN/(mm·s)', 'uN/(mm*s)', 'uN/mm/s', 'g/s^3', 'g/s3',
        ),
        'FOOT_POUND_PER_SQUARE_FOOT_PER_SECOND': (
            'ft·lbf/(ft^2·s)', 'ft·lbf/(ft2·s)', 'ft*lbf/(ft^2*s)',
            'ft*lbf/(ft2*s)', 'ft·lbf/ft^2/s', 'ft·lbf/ft2/s',
            'ft*lbf/ft^2/s', 'ft*lbf/ft2/s', 'lbf/(ft·s)', 'lbf/(ft*s)',
            'lbf/ft/s', 'slug/s^3', 'slug/s3',
        ),
        'INCH_POUND_PER_SQUARE_INCH_PER_SECOND': (
            'in·lbf/(in^2·s)', 'in·lbf/(in2·s)', 'in*lbf/(in^2*s)',
            'in*lbf/(in2*s)', 'in·lbf/in^2/s', 'in·lbf/in2/s',
            'in*lbf/in^2/s', 'in*lbf/in2/s', 'lbf/(in·s)', 'lbf/(in*s)',
            'lbf/in/s', 'slinch/s^3', 'slinch/s3',
        ),
    },
    'Frequency': {
        'HERTZ': (
            'Hz', '1/s', '/s',
        ),
        'KILOHERTZ': (
            'kHz',
        ),
        'MEGAHERTZ': (
            'MHz',
        ),
        'GIGAHERTZ': (
            'GHz',
        ),
    },
    'HeatCapacity': {
        'JOULE_PER_KELVIN': (
            'J/K', 'N·m/K', 'N*m/K', 'kg·m^2/s^2/K', 'kg*m^2/s^2/K',
            'kg·m2/s2/K', 'kg*m2/s2/K', 'kg·m^2/(s^2·K)', 'kg*m^2/(s^2*K)',
            'kg·m2/(s2·K)', 'kg*m2/(s2*K)',
        ),
        'NANOJOULE_PER_KELVIN': (
            'nJ/K', 'μN·mm/K', 'μN*mm/K', 'uN·mm/K', 'uN*mm/K',
            'g·mm^2/s^2/K', 'g*mm^2/s^2/K', 'g·mm2/s2/K', 'g*mm2/s2/K',
            'g·mm^2/(s^2·K)', 'g*mm^2/(s^2*K)', 'g·mm2/(s2·K)',
            'g*mm2/(s2*K)',
        ),
        'FOOT_POUND_PER_RANKINE': (
            'ft·lbf/°R', 'ft·lbf/R', 'ft*lbf/°R', 'ft*lbf/R', 'ft·lb/°R',
            'ft·lb/R', 'ft*lb/°R', 'ft*lb/R',
        ),
        'INCH_POUND_PER_RANKINE': (
            'in·lbf/°R', 'in·lbf/R', 'in*lbf/°R', 'in*lbf/R', 'in·lb/°R',
            'in·lb/R', 'in*lb/°R', 'in*lb/R',
        ),
    },
    'Length': {
        'MILE': (
            'mi', 'mile', 'miles',
        ),
        'KILOMETRE': (
            'km', 'kilometer', 'kilometers', 'kilometre', 'kilometres',
        ),
        'YARD': (
            'yd', 'yard', 'yards',
        ),
        'METRE': (
            'm', 'meter', 'meters', 'metre', 'metres',
        ),
        'FOOT': (
            'ft', 'foot', 'feet',
        ),
        'DECIMETRE': (
            'dm', 'decimeter', 'decimeters', 'decimetre', 'decimetres',
        ),
        'INCH': (
            'in', 'inch', 'inches',
        ),
        'CENTIMETRE': (
            'cm', 'centimeter', 'centimeters', 'centimetre', 'centimetres',
        ),
        'MILLIMETRE': (
            'mm', 'millimeter', 'millimeters', 'millimetre', 'millimetres',
        ),
        'MILLIINCH': (
            'milin', 'milliinch', 'milliinches', 'thou', 'thous', 'thousandth',
            'thousandths', 'mil', 'mils',
        ),
        'MICROMETRE': (
            'μm', 'um', 'micrometer', 'micrometers', 'Micrometre',
            'Micrometres', 'micron', 'microns',
        ),
        'MICROINCH': (
            'μin', 'uin', 'microinch', 'microinches',
        ),
    },
    'Mass': {
        'KILOGRAM': (
            'kg',
        ),
        'GRAM': (
            'g',
        ),
        'SLUG': (
            'slug',
        ),
        'SLINCH': (
            'slinch',
        ),
        'POUND': (
            'lbm', 'lb',
        ),
    },
    'MassDensity': {
        'KILOGRAM_PER_CUBIC_METRE': (
            'kg/m^3', 'kg/m3', 'kg/m/m/m',
        ),
        'GRAM_PER_CUBIC_MILLIMETRE': (
            'g/mm^3', 'g/mm3', 'g/mm/mm/mm',
        ),
        'SLUG_PER_CUBIC_FOOT': (
            'slug/ft^3', 'slug/ft3', 'slug/ft/ft/ft',
        ),
        'SLINCH_PER_CUBIC_INCH': (
            'slinch/in^3', 'slinch/in3', 'slinch/in/in/in',
        ),
        'POUND_PER_CUBIC_FOOT': (
            'lbm/ft^3', 'lbm/ft3', 'lbm/ft/ft/ft', 'lb/ft^3', 'lb/ft3',
            'lb/ft/ft/ft',
        ),
        'POUND_PER_CUBIC_INCH': (
            'lbm/in^3', 'lbm/in3', 'lbm/in/in/in', 'lb/in^3', 'lb/in3',
            'lb/in/in/in',
        ),
    },
    'MassRate': {
        'KILOGRAM_PER_SECOND': (
            'kg/s', 'kg/sec',
        ),
        'GRAM_PER_SECOND': (
            'g/s', 'g/sec',
        ),
        'SLUG_PER_SECOND': (
            'slug/s', 'slug/sec',
        ),
        'SLINCH_PER_SECOND': (
            'slinch/s', 'slinch/sec',
        ),
        'POUND_PER_SECOND': (
            'lbm/s', 'lbm/sec', 'lb/s', 'lb/sec',
        ),
    },
    'Memory': {
        'BIT': (
            'b', 'bit', 'bits',
        ),
        'KILOBIT': (
            'kb', 'kilobit', 'kilobits',
        ),
        'MEGABIT': (
            'Mb', 'megabit', 'megabits',
        ),
        'GIGABIT': (
            'Gb', 'gigabit', 'gigabits',
        ),
        'TERABIT': (
            'Tb', 'terabit', 'terabits',
        ),
        'BYTE': (
            'B', 'byte', 'bytes',
        ),
        'KILOBYTE': (
            'kB', 'kilobyte', 'kilobytes',
        ),
        'MEGABYTE': (
            'MB', 'megabyte', 'megabytes',
        ),
        'GIGABYTE': (
            'GB', 'gigabyte', 'gigabytes',
        ),
        'TERABYTE': (
            'TB', 'terabyte', 'terabytes',
        ),
    },
    'MemoryRate': {
        'BIT_PER_SECOND': (
            'b/s',
        ),
        'KILOBIT_PER_SECOND': (
            'kb/s',
        ),
        'MEGABIT_PER_SECOND': (
            'Mb/s',
        ),
        'GIGABIT_PER_SECOND': (
            'Gb/s',
        ),
        'TERABIT_PER_SECOND': (
            'Tb/s',
        ),
        'BYTE_PER_SECOND': (
            'B/s',
        ),
        'KILOBYTE_PER_SECOND': (
            'kB/s',
        ),
        'MEGABYTE_PER_SECOND': (
            'MB/s',
        ),
        'GIGABYTE_PER_SECOND': (
            'GB/s',
        ),
        'TERABYTE_PER_SECOND': (
            'TB/s',
        ),
    },
    'Power': {
        'WATT': (
            'W', 'N·m/s', 'N*m/s', 'kg·m^2/s^3', 'kg*m^2/s^3', 'kg·m2/s3',
            'kg*m2/s3',
        ),
        'MILLIWATT': (
            'mW',
        ),
        'MICROWATT': (
            'μW', 'uW',
        ),
        'NANOWATT': (
            'nW', 'μN·mm/s', 'μN*mm/s', 'uN·mm/s', 'uN*mm/s',
            'g·mm^2/s^3', 'g*mm^2/s^3', 'g·mm2/s3', 'g*mm2/s3',
        ),
        'KILOWATT': (
            'kW',
        ),
        'MEGAWATT': (
            'MW',
        ),
        'GIGAWATT': (
            'GW',
        ),
        'FOOT_POUND_PER_SECOND': (
            'ft·lbf/s', 'ft*lbf/s', 'ft·lb/s', 'ft*lb/s',
        ),
        'INCH_POUND_PER_SECOND': (
            'in·lbf/s', 'in*lbf/s', 'in·lb/s', 'in*lb/s',
        ),
    },
    'Pressure': {
        'PASCAL': (
            'Pa', 'N/m^2', 'N/m2', 'kg/(m·s^2)', 'kg/(m·s2)', 'kg/(m*s^2)',
            'kg/(m*s2)', 'kg/m/s^2', 'kg/m/s2',
        ),
        'KILOPASCAL': (
            'kPa', 'kN/m^2', 'kN/m2',
        ),
        'MEGAPASCAL': (
            'MPa', 'N/mm^2', 'N/mm2', 'MN/m^2', 'MN/m2',
        ),
        'GIGAPASCAL': (
            'GPa', 'GN/m^2', 'GN/m2', 'kN/mm^2', 'kN/mm2',
        ),
        'BAR': (
            'bar',
        ),
        'ATMOSPHERE': (
            'atm', 'atmosphere',
        ),
        'POUND_PER_SQUARE_FOOT': (
            'lbf/ft^2', 'lbf/ft2', 'lb/ft^2', 'lb/ft2', 'psf',
        ),
        'POUND_PER_SQUARE_INCH': (
            'lbf/in^2', 'lbf/in2', 'lb/in^2', 'lb/in2', 'psi',
        ),
    },
    'ReciprocalTemperature': {
        'PER_KELVIN': (
            '1/K', '1/°K', '1/degK', '/K', '/°K', '/degK',
        ),
        'PER_CELSIUS': (
            '1/°C', '1/C', '1/degC', '/°C', '/C', '/degC',
        ),
        'PER_RANKINE': (
            '1/°R', '1/R', '1/degR', '/°R', '/R', '/degR',
        ),
        'PER_FAHRENHEIT': (
            '1/°F', '1/F', '1/degF', '/°F', '/F', '/degF',
        ),
    },
    'SolidAngle': {
        'STERADIAN': (
            'sr',
        ),
        'SQUARE_DEGREE': (
            'deg^2', 'deg2', 'degree^2', 'degree2', 'degrees^2', 'degrees2',
            '°^2', '°2',
        ),
        'SQUARE_ARCMINUTE': (
            "'^2", "'2", 'am^2', 'am2', 'arcmin^2', 'arcmin2', 'arcminute^2',
            'arcminute2', 'arcminutes^2', 'arcminutes2',
        ),
        'SQUARE_ARCSECOND': (
            'as', 'as^2', 'arcs^2', 'arcs2', 'arcsec^2', 'arcsec2',
            'arcsecond^2', 'arcsecond2', 'arcseconds^2', 'arcseconds2',
        ),
    },
    'SpecificEnergy': {
        'JOULE_PER_KILOGRAM': (
            'J/kg', 'N·m/kg', 'N*m/kg', 'm·N/kg', 'm*N/kg', 'm^2/s^2',
            'm2/s2',
        ),
        'NANOJOULE_PER_GRAM': (
            'nJ/g', 'μN·mm/g', 'μN*mm/g', 'uN·mm/g', 'uN*mm/g',
            'mm·μN/g', 'mm*μN/g', 'mm·uN/g', 'mm*uN/g', 'mm^2/s^2',
            'mm2/s2',
        ),
        'FOOT_POUND_PER_SLUG': (
            'ft·lbf/slug', 'ft*lbf/slug', 'lbf·ft/slug', 'lbf*ft/slug',
            'ft·lb/slug', 'ft*lb/slug', 'lb·ft/slug', 'lb*ft/slug',
            'ft^2/s^2', 'ft2/s2',
        ),
        'INCH_POUND_PER_SLINCH': (
            'in·lbf/slinch', 'in*lbf/slinch', 'lbf·in/slinch',
            'lbf*in/slinch', 'in·lb/slinch', 'in*lb/slinch', 'lb·in/slinch',
            'lb*in/slinch', 'in^2/s^2', 'in2/s2',
        ),
    },
    'SpecificHeatCapacity': {
        'JOULE_PER_KILOGRAM_PER_KELVIN': (
            'J/kg/K', 'J/(kg·K)', 'J/(kg*K)', 'N·m/kg/K', 'N·m/(kg·K)',
            'N*m/kg/K', 'N*m/(kg*K)', 'm·N/kg/K', 'm·N/(kg·K)', 'm*N/kg/K',
            'm*N/(kg*K)', 'm^2/s^2/K', 'm^2/(s^2·K)', 'm^2/(s^2*K)',
            'm2/s2/K', 'm2/(s2·K)', 'm2/(s2*K)',
        ),
        'NANOJOULE_PER_GRAM_PER_KELVIN': (
            'nJ/g/K', 'nJ/(g*K)', 'nJ/(g·K)', 'μN·mm/g/K', 'μN·mm/(g·K)',
            'μN*mm/g/K', 'μN*mm/(g*K)', 'uN·mm/g/K', 'uN·mm/(g·K)',
            'uN*mm/g/K', 'uN*mm/(g*K)', 'mm·μN/g/K', 'mm·μN/(g·K)',
            'mm*μN/g/K', 'mm*μN/(g*K)', 'mm·uN/g/K', 'mm·uN/(g·K)',
            'mm*uN/g/K', 'mm*uN/(g*K)', 'mm^2/s^2/K', 'mm^2/(s^2·K)',
            'mm^2/(s^2*K)', 'mm2/s2/K', 'mm2/(s2·K)', 'mm2/(s2*K)',
        ),
        'FOOT_POUND_PER_SLUG_PER_RANKINE': (
            'ft·lbf/slug/°R', 'ft·lbf/(slug·°R)', 'ft·lbf/slug/R',
            'ft·lbf/(slug·R)', 'ft*lbf/slug/°R', 'ft*lbf/(slug*°R)',
            'ft*lbf/slug/R', 'ft*lbf/(slug*R)', 'lbf·ft/slug/°R',
            'lbf·ft/(slug·°R)', 'lbf·ft/slug/R', 'lbf·ft/(slug·R)',
            'lbf*ft/slug/°R', 'lbf*ft/(slug*°R)', 'lbf*ft/slug/R',
            'lbf*ft/(slug*R)', 'ft·lb/slug/°R', 'ft·lb/(slug·°R)',
            'ft·lb/slug/R', 'ft·lb/(slug·R)', 'ft*lb/slug/°R',
            'ft*lb/(slug*°R)', 'ft*lb/slug/R', 'ft*lb/(slug*R)',
            'lb·ft/slug/°R', 'lb·ft/(slug·°R)', 'lb·ft/slug/R',
            'lb·ft/(slug·R)', 'lb*ft/slug/°R', 'lb*ft/(slug*°R)',
            'lb*ft/slug/R', 'lb*ft/(slug*R)', 'ft^2/s^2/°R',
            'ft^2/(s^2·°R)', 'ft^2/(s^2*°R)', 'ft^2/s^2/R', 'ft^2/(s^2·R)',
            'ft^2/(s^2*R)', 'ft2/s2/°R', 'ft2/(s2·°R)', 'ft2/(s2*°R)',
            'ft2/s2/R', 'ft2/(s2·R)', 'ft2/(s2*R)',
        ),
        'INCH_POUND_PER_SLINCH_PER_RANKINE': (
            'in·lbf/slug/°R', 'in·lbf/(slug·°R)', 'in·lbf/slug/R',
            'in·lbf/(slug·R)', 'in*lbf/slug/°R', 'in*lbf/(slug*°R)',
            'in*lbf/slug/R', 'in*lbf/(slug*R)', 'lbf·in/slug/°R',
            'lbf·in/(slug·°R)', 'lbf·in/slug/R', 'lbf·in/(slug·R)',
            'lbf*in/slug/°R', 'lbf*in/(slug*°R)', 'lbf*in/slug/R',
            'lbf*in/(slug*R)', 'in·lb/slug/°R', 'in·lb/(slug·°R)',
            'in·lb/slug/R', 'in·lb/(slug·R)', 'in*lb/slug/°R',
            'in*lb/(slug*°R)', 'in*lb/slug/R', 'in*lb/(slug*R)',
            'lb·in/slug/°R', 'lb·in/(slug·°R)', 'lb·in/slug/R',
            'lb·in/(slug·R)', 'lb*in/slug/°R', 'lb*in/(slug*°R)',
            'lb*in/slug/R', 'lb*in/(slug*R)', 'in^2/s^2/°R',
            'in^2/(s^2·°R)', 'in^2/(s^2*°R)', 'in^2/s^2/R', 'in^2/(s^2·R)',
            'in^2/(s^2*R)', 'in2/s2/°R', 'in2/(s2·°R)', 'in2/(s2*°R)',
            'in2/s2/R', 'in2/(s2·R)', 'in2/(s2*R)',
        ),
    },
    'SpecificPower': {
        'WATT_PER_KILOGRAM': (
            'W/kg', 'N·m/kg/s', 'N*m/kg/s', 'N·m/(kg·s)', 'N*m/(kg*s)',
            'N·m/s/kg', 'N*m/s/kg', 'N·m/(s·kg)', 'N*m/(s*kg)', 'm·N/kg/s',
            'm*N/kg/s', 'm·N/(kg·s)', 'm*N/(kg*s)', 'm·N/s/kg', 'm*N/s/kg',
            'm·N/(s·kg)', 'm*N/(s*kg)', 'm^2/s^3', 'm2/s3',
        ),
        'NANOWATT_PER_GRAM': (
            'nW/g', 'μN·mm/g/s', 'μN*mm/g/s', 'μN·mm/(g·s)',
            'μN*mm/(g*s)', 'uN·mm/g/s', 'uN*mm/g/s', 'uN·mm/(g·s)',
            'uN*mm/(g*s)', 'μN·mm/s/g', 'μN*mm/s/g', 'μN·mm/(s·g)',
            'μN*mm/(s*g)', 'uN·mm/s/g', 'uN*mm/s/g', 'uN·mm/(s·g)',
            'uN*mm/(s*g)', 'mm·μN/g/s', 'mm*μN/g/s', 'mm·μN/(g·s)',
            'mm*μN/(g*s)', 'mm·uN/g/s', 'mm*uN/g/s', 'mm·uN/(g·s)',
            'mm*uN/(g*s)', 'mm·μN/s/g', 'mm*μN/s/g', 'mm·μN/(s·g)',
            'mm*μN/(s*g)', 'mm·uN/s/g', 'mm*uN/s/g', 'mm·uN/(s·g)',
            'mm*uN/(s*g)', 'mm^2/s^3', 'mm2/s3',
        ),
        'FOOT_POUND_PER_SLUG_PER_SECOND': (
            'ft·lbf/slug/s', 'ft*lbf/slug/s', 'ft·lbf/(slug·s)',
            'ft*lbf/(slug*s)', 'ft·lbf/s/slug', 'ft*lbf/s/slug',
            'ft·lbf/(s·slug)', 'ft*lbf/(s*slug)', 'lbf·ft/slug/s',
            'lbf*ft/slug/s', 'lbf·ft/(slug·s)', 'lbf*ft/(slug*s)',
            'lbf·ft/s/slug', 'lbf*ft/s/slug', 'lbf·ft/(s·slug)',
            'lbf*ft/(s*slug)', 'ft·lb/slug/s', 'ft*lb/slug/s',
            'ft·lb/(slug·s)', 'ft*lb/(slug*s)', 'ft·lb/s/slug',
            'ft*lb/s/slug', 'ft·lb/(s·slug)', 'ft*lb/(s*slug)',
            'lb·ft/slug/s', 'lb*ft/slug/s', 'lb·ft/(slug·s)',
            'lb*ft/(slug*s)', 'lb·ft/s/slug', 'lb*ft/s/slug',
            'lb·ft/(s·slug)', 'lb*ft/(s*slug)', 'ft^2/s^3', 'ft2/s3',
        ),
        'INCH_POUND_PER_SLINCH_PER_SECOND': (
            'in·lbf/slinch/s', 'in*lbf/slinch/s', 'in·lbf/(slinch·s)',
            'in*lbf/(slinch*s)', 'in·lbf/s/slinch', 'in*lbf/s/slinch',
            'in·lbf/(s·slinch)', 'in*lbf/(s*slinch)', 'lbf·in/slinch/s',
            'lbf*in/slinch/s', 'lbf·in/(slinch·s)', 'lbf*in/(slinch*s)',
            'lbf·in/s/slinch', 'lbf*in/s/slinch', 'lbf·in/(s·slinch)',
            'lbf*in/(s*slinch)', 'in·lb/slinch/s', 'in*lb/slinch/s',
            'in·lb/(slinch·s)', 'in*lb/(slinch*s)', 'in·lb/s/slinch',
            'in*lb/s/slinch', 'in·lb/(s·slinch)', 'in*lb/(s*slinch)',
            'lb·in/slinch/s', 'lb*in/slinch/s', 'lb·in/(slinch·s)',
            'lb*in/(slinch*s)', 'lb·in/s/slinch', 'lb*in/s/slinch',
            'lb·in/(s·slinch)', 'lb*in/(s*slinch)', 'in^2/s^3', 'in2/s3',
        ),
    },
    'Speed': {
        'MILE_PER_SECOND': (
            'mi/s', 'mi/sec',
        ),
        'KILOMETRE_PER_SECOND': (
            'km/s', 'km/sec',
        ),
        'METRE_PER_SECOND': (
            'm/s', 'm/sec',
        ),
        'YARD_PER_SECOND': (
            'yd/s', 'yd/sec',
        ),
        'FOOT_PER_SECOND': (
            'ft/s', 'ft/sec',
        ),
        'DECIMETRE_PER_SECOND': (
            'dm/s', 'dm/sec',
        ),
        'INCH_PER_SECOND': (
            'in/s', 'in/sec',
        ),
        'CENTIMETRE_PER_SECOND': (
            'cm/s', 'cm/sec',
        ),
        'MILLIMETRE_PER_SECOND': (
            'mm/s', 'mm/sec',
        ),
        'MILLIINCH_PER_SECOND': (
            'milin/s', 'milin/sec', 'milliinch/s', 'milliinch/sec', 'mil/s',
            'mil/sec', 'thou/s', 'thou/sec',
        ),
        'MICROMETRE_PER_SECOND': (
            'μm/s', 'μm/sec', 'um/s', 'um/sec',
        ),
        'MICROINCH_PER_SECOND': (
            'μin/s', 'μin/sec', 'uin/s', 'uin/sec',
        ),
    },
    'SubstanceAmount': {
        'MOLE': (
            'mol',
        ),
        'KILOMOLE': (
            'kmol',
        ),
        'MEGAMOLE': (
            'Mmol',
        ),
        'GIGAMOLE': (
            'Gmol',
        ),
        'PARTICLES': (
            'particles',
        ),
    },
    'TemperatureDifference': {
        'KELVIN': (
            'K', '°K', 'degK',
        ),
        'CELSIUS': (
            '°C', 'C', 'degC',
        ),
        'RANKINE': (
            '°R', 'R', 'degR',
        ),
        'FAHRENHEIT': (
            '°F', 'F', 'degF',
        ),
    },
    'TemperatureGradient': {
        'KELVIN_PER_METRE': (
            'K/m', '°K/m', 'degK/m',
        ),
        'CELSIUS_PER_METRE': (
            '°C/m', 'C/m', 'degC/m',
        ),
        'KELVIN_PER_MILLIMETRE': (
            'K/mm', '°K/mm', 'degK/mm',
        ),
        'CELSIUS_PER_MILLIMETRE': (
            '°C/mm', 'C/mm', 'degC/mm',
        ),
        'RANKINE_PER_FOOT': (
            '°R/ft', 'R/ft', 'degR/ft',
        ),
        'FAHRENHEIT_PER_FOOT': (
            '°F/ft', 'F/ft', 'degF/ft',
        ),
        'RANKINE_PER_INCH': (
            '°R/in', 'R/in', 'degR/in',
        ),
        'FAHRENHEIT_PER_INCH': (
            '°F/in', 'F/in', 'degF/in',
        ),
    },
    'ThermalConductivity': {
        'WATT_PER_METRE_PER_KELVIN': (
            'W/m/K', 'W/m/°K', 'W/m/degK', 'W/m/°C', 'W/m/degC', 'W/m/C',
            'W/(m·K)', 'W/(m·°K)', 'W/(m·degK)', 'W/(m·°C)',
            'W/(m·degC)', 'W/(m·C)', 'W/(m*K)', 'W/(m*°K)', 'W/(m*degK)',
            'W/(m*°C)', 'W/(m*degC)', 'W/(m*C)', 'kg*m/s/K', 'kg*m/s/°K',
            'kg*m/s/degK', 'kg*m/s/C', 'kg*m/s/°C', 'kg*m/s/degC',
            'kg·m/s/K', 'kg·m/s/°K', 'kg·m/s/degK', 'kg·m/s/C',
            'kg·m/s/°C', 'kg·m/s/degC', 'kg·m/(s·K)', 'kg·m/(s·°K)',
            'kg·m/(s·degK)', 'kg·m/(s·C)', 'kg·m/(s·°C)',
            'kg·m/(s·degC)', 'kg*m/(s*K)', 'kg*m/(s*°K)', 'kg*m/(s*degK)',
            'kg*m/(s*C)', 'kg*m/(s*°C)', 'kg*m/(s*degC)',
        ),
        'NANOWATT_PER_MILLIMETRE_PER_KELVIN': (
            'nW/mm/K', 'nW/mm/°K', 'nW/mm/degK', 'nW/mm/°C', 'nW/mm/degC',
            'nW/mm/C', 'nW/(mm·K)', 'nW/(mm·°K)', 'nW/(mm·degK)',
            'nW/(mm·°C)', 'nW/(mm·degC)', 'nW/(mm·C)', 'nW/(mm*K)',
            'nW/(mm*°K)', 'nW/(mm*degK)', 'nW/(mm*°C)', 'nW/(mm*degC)',
            'nW/(mm*C)', 'g·mm/s/K', 'g·mm/s/°K', 'g·mm/s/degK',
            'g·mm/s/C', 'g·mm/s/°C', 'g·mm/s/degC', 'g*mm/s/K',
            'g*mm/s/°K', 'g*mm/s/degK', 'g*mm/s/C', 'g*mm/s/°C',
            'g*mm/s/degC', 'g·mm/(s·K)', 'g·mm/(s·°K)', 'g·mm/(s·degK)',
            'g·mm/(s·C)', 'g·mm/(s·°C)', 'g·mm/(s·degC)', 'g*mm/(s*K)',
            'g*mm/(s*°K)', 'g*mm/(s*degK)', 'g*mm/(s*C)', 'g*mm/(s*°C)',
            'g*mm/(s*degC)',
        ),
        'POUND_PER_SECOND_PER_RANKINE': (
            'lbf/s/°R', 'lbf/s/R', 'lbf/s/degR', 'lbf/s/°F', 'lbf/s/F',
            'lbf/s/degF', 'lbf/(s·°R)', 'lbf/(s·R)', 'lbf/(s·degR)',
            'lbf/(s·°F)', 'lbf/(s·F)', 'lbf/(s·degF)', 'lbf/(s*°R)',
            'lbf/(s*R)', 'lbf/(s*degR)', 'lbf/(s*°F)', 'lbf/(s*F)',
            'lbf/(s*degF)', 'lb/s/°R', 'lb/s/R', 'lb/s/degR', 'lb/s/°F',
            'lb/s/F', 'lb/s/degF', 'lb/(s·°R)', 'lb/(s·R)', 'lb/(s·degR)',
            'lb/(s·°F)', 'lb/(s·F)', 'lb/(s·degF)', 'lb/(s*°R)',
            'lb/(s*R)', 'lb/(s*degR)', 'lb/(s*°F)', 'lb/(s*F)', 'lb/(s*degF)',
        ),
    },
    'ThermalExpansion': {
        'PER_KELVIN': (
            '1/K', '1/°K', '1/degK', '/K', '/°K', '/degK',
        ),
        'PER_CELSIUS': (
            '1/°C', '1/C', '1/degC', '/°C', '/C', '/degC',
        ),
        'PER_RANKINE': (
            '1/°R', '1/R', '1/degR', '/°R', '/R', '/degR',
        ),
        'PER_FAHRENHEIT': (
            '1/°F', '1/F', '1/degF', '/°F', '/F', '/degF',
        ),
    },
    'TransportEnergyConsumption': {
        'JOULE_PER_MILE': (
            'J/mi',
        ),
        'JOULE_PER_KILOMETRE': (
            'J/km',
        ),
        'JOULE_PER_METRE': (
            'J/m',
        ),
        'NANOJOULE_PER_MILLIMETRE': (
            'nJ/mm',
        ),
        'KILOJOULE_PER_MILE': (
            'kJ/mi',
        ),
        'WATT_MINUTE_PER_MILE': (
            'W·min/mi', 'W*min/mi',
        ),
        'WATT_HOUR_PER_MILE': (
            'W·hr/mi', 'W*hr/mi',
        ),
        'WATT_MINUTE_PER_KILOMETRE': (
            'W·min/km', 'W*min/km',
        ),
        'WATT_HOUR_PER_KILOMETRE': (
            'W·hr/km', 'W*hr/km',
        ),
        'WATT_MINUTE_PER_METRE': (
            'W·min/m', 'W*min/m',
        ),
        'WATT_HOUR_PER_METRE': (
            'W·hr/m', 'W*hr/m',
        ),
        'KILOWATT_MINUTE_PER_MILE': (
            'kW·min/mi', 'kW*min/mi',
        ),
        'KILOWATT_HOUR_PER_MILE': (
            'kW·hr/mi', 'kW*hr/mi',
        ),
        'KILOWATT_MINUTE_PER_KILOMETRE': (
            'kW·min/km', 'kW*min/km',
        ),
        'KILOWATT_HOUR_PER_KILOMETRE': (
            'kW·hr/km', 'kW*hr/km',
        ),
        'KILOWATT_MINUTE_PER_METRE': (
            'kW·min/m', 'kW*min/m',
        ),
        'KILOWATT_HOUR_PER_METRE': (
            'kW·hr/m', 'kW*hr/m',
        ),
        'FOOT_POUND_PER_FOOT': (
            'ft·lbf/ft', 'ft·lb/ft',
        ),
        'INCH_POUND_PER_INCH': (
            'in·lbf/in', 'in·lb/in',
        ),
    },
    'Volume': {
        'CUBIC_MILE': (
            'mi^3', 'mi3',
        ),
        'CUBIC_KILOMETRE': (
            'km^3', 'km3',
        ),
        'CUBIC_YARD': (
            'yd^3', 'yd3',
        ),
        'CUBIC_METRE': (
            'm^3', 'm3',
        ),
        'CUBIC_FOOT': (
            'ft^3', 'ft3',
        ),
        'CUBIC_DECIMETRE': (
            'dm^3', 'dm3',
        ),
        'LITRE': (
            'L',
        ),
        'CUBIC_INCH': (
            'in^3', 'in3',
        ),
        'CUBIC_CENTIMETRE': (
            'cm^3', 'cm3',
        ),
        'MILLILITRE': (
            'mL',
        ),
        'CUBIC_MILLIMETRE': (
            'mm^3', 'mm3',
        ),
        'CUBIC_MILLIINCH': (
            'thou^3', 'thou3', 'mil^3', 'mil3', 'millinch^3', 'millinch3',
            'milliinch^3', 'milliinch3',
        ),
        'CUBIC_MICROMETRE': (
            'μm^3', 'μm3', 'um^3', 'um3',
        ),
        'CUBIC_MICROINCH': (
            'μin^3', 'μin3', 'uin^3', 'uin3',
        ),
    },
    'VolumeRate': {
        'CUBIC_MILE_PER_SECOND': (
            'mi^3/s', 'mi^3/sec', 'mi3/s', 'mi3/sec',
        ),
        'CUBIC_KILOMETRE_PER_SECOND': (
            'km^3/s', 'km^3/sec', 'km3/s', 'km3/sec',
        ),
        'CUBIC_METRE_PER_SECOND': (
            'm^3/s', 'm^3/sec', 'm3/s', 'm3/sec',
        ),
        'CUBIC_YARD_PER_SECOND': (
            'yd^3/s', 'yd^3/sec', 'yd3/s', 'yd3/sec',
        ),
        'CUBIC_FOOT_PER_SECOND': (
            'ft^3/s', 'ft^3/sec', 'ft3/s', 'ft3/sec',
        ),
        'CUBIC_DECIMETRE_PER_SECOND': (
            'dm^3/s', 'dm^3/sec', 'dm3/s', 'dm3/sec',
        ),
        'LITRE_PER_SECOND': (
            'L/s', 'L/sec',
        ),
        'CUBIC_INCH_PER_SECOND': (
            'in^3/s', 'in^3/sec', 'in3/s', 'in3/sec',
        ),
        'CUBIC_CENTIMETRE_PER_SECOND': (
            'cm^3/s', 'cm^3/sec', 'cm3/s', 'cm3/sec',
        ),
        'MILLILITRE_PER_SECOND': (
            'mL/s', 'mL/sec',
        ),
        'CUBIC_MILLIMETRE_PER_SECOND': (
            'mm^3/s', 'mm^3/sec', 'mm3/s', 'mm3/sec',
        ),
        'CUBIC_MILLIINCH_PER_SECOND': (
            'millinch^3/s', 'millinch^3/sec', 'millinch3/s', 'millinch3/sec',
            'milliinch^3/s', 'milliinch^3/sec', 'milliinch3/s',
            'milliinch3/sec', 'mil^3/s', 'mil^3/sec', 'mil3/s', 'mil3/sec',
            'thou^3/s', 'thou^3/sec', 'thou3/s', 'thou3/sec',
        ),
        'CUBIC_MICROMETRE_PER_SECOND': (
            'μm^3/s', 'μm^3/sec', 'μm3/s', 'μm3/sec', 'um^3/s', 'um^3/sec',
            'um3/s', 'um3/sec',
        ),
        'CUBIC_MICROINCH_PER_SECOND': (
            'μin^3/s', 'μin^3/sec', 'μin3/s', 'μin3/sec', 'uin^3/s',
            'uin^3/sec', 'uin3/s', 'uin3/sec',
        ),
    },
}
