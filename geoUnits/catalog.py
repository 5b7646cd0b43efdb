"""
Unit catalog.

Every unit is declared once, relative to the coherent SI base unit of its
dimension. Conversions between any two units are derived by the registry.

The dimensionless base unit 'unitless' is one full revolution, so angles
are fractions of a turn (1 rad == 1/(2π) unitless).
"""
import math
from . import dimension as dim
from .conversions import registry
from .quantity import Quantity
from .units import addUnitAccessors


__all__ = ['Scalar', 'Length', 'Mass', 'Time', 'Current', 'Temperature',
           'Amount', 'Luminosity', 'Area', 'Volume', 'Velocity',
           'Acceleration', 'Force', 'Energy', 'Power', 'Pressure',
           'Frequency', 'Density', 'MassFlow', 'KINDS', 'SI_PREFIXES',
           'BINARY_PREFIXES', 'define_prefixed']


# SI prefixes: (name, symbol, factor)
QUECTO = ('quecto', 'q', 1e-30)
RONTO = ('ronto', 'r', 1e-27)
YOCTO = ('yocto', 'y', 1e-24)
ZEPTO = ('zepto', 'z', 1e-21)
ATTO = ('atto', 'a', 1e-18)
FEMTO = ('femto', 'f', 1e-15)
PICO = ('pico', 'p', 1e-12)
NANO = ('nano', 'n', 1e-9)
MICRO = ('micro', 'µ', 1e-6)
MILLI = ('milli', 'm', 1e-3)
CENTI = ('centi', 'c', 1e-2)
DECI = ('deci', 'd', 1e-1)
DECA = ('deca', 'da', 1e1)
HECTO = ('hecto', 'h', 1e2)
KILO = ('kilo', 'k', 1e3)
MEGA = ('mega', 'M', 1e6)
GIGA = ('giga', 'G', 1e9)
TERA = ('tera', 'T', 1e12)
PETA = ('peta', 'P', 1e15)
EXA = ('exa', 'E', 1e18)
ZETTA = ('zetta', 'Z', 1e21)
YOTTA = ('yotta', 'Y', 1e24)
RONNA = ('ronna', 'R', 1e27)
QUETTA = ('quetta', 'Q', 1e30)

SI_PREFIXES = (QUECTO, RONTO, YOCTO, ZEPTO, ATTO, FEMTO, PICO, NANO, MICRO,
               MILLI, CENTI, DECI, DECA, HECTO, KILO, MEGA, GIGA, TERA, PETA,
               EXA, ZETTA, YOTTA, RONNA, QUETTA)

# Binary prefixes for information units
KIBI = ('kibi', 'Ki', 2**10)
MEBI = ('mebi', 'Mi', 2**20)
GIBI = ('gibi', 'Gi', 2**30)
TEBI = ('tebi', 'Ti', 2**40)
PEBI = ('pebi', 'Pi', 2**50)
EXBI = ('exbi', 'Ei', 2**60)
ZEBI = ('zebi', 'Zi', 2**70)
YOBI = ('yobi', 'Yi', 2**80)

BINARY_PREFIXES = (KIBI, MEBI, GIBI, TEBI, PEBI, EXBI, ZEBI, YOBI)

# Exact definitions shared by several tables
_INCH = 0.0254
_FOOT = 0.3048
_MILE = 1609.344
_POUND = 0.45359237
_G0 = 9.80665
_LBF = _POUND * _G0
_BTU = 1055.056
_TURN = 2 * math.pi


def define_prefixed(name, abbreviation, dimension, prefixes=SI_PREFIXES,
                    scale=1.0, plural=None):
    """
    Register the prefixed variants of a unit.

    Args:
        name (str): Unit name, e.g. 'meter'.
        abbreviation (str): Unit symbol, e.g. 'm'.
        dimension (DimensionVector): Dimension of the unit.
        prefixes (tuple): (name, symbol, factor) prefixes to apply.
        scale (float): Scale of the unprefixed unit onto the base unit.
        plural (str): Plural of the unprefixed unit.
    """
    plural = plural or f'{name}s'
    for prefix, symbol, factor in prefixes:
        aliases = ()
        if symbol == 'µ':
            aliases = (f'u{abbreviation}',)
        registry.define(f'{prefix}{name}', f'{symbol}{abbreviation}',
                        dimension, scale=factor * scale,
                        plural=f'{prefix}{plural}', aliases=aliases)


# Dimensionless
registry.define('unitless', '', dim.DIMENSIONLESS, base=True,
                plural='unitless')
registry.define('percent', '%', dim.DIMENSIONLESS, scale=1e-2,
                plural='percent')
registry.define('promille', '‰', dim.DIMENSIONLESS, scale=1e-3,
                plural='promille')
registry.define('part per million', 'ppm', dim.DIMENSIONLESS, scale=1e-6,
                plural='parts per million')
registry.define('part per billion', 'ppb', dim.DIMENSIONLESS, scale=1e-9,
                plural='parts per billion')
registry.define('revolution', 'rev', dim.DIMENSIONLESS, aliases=('turn',))
registry.define('radian', 'rad', dim.DIMENSIONLESS, scale=1 / _TURN)
registry.define('degree', '°', dim.DIMENSIONLESS, scale=1 / 360,
                aliases=('deg',))
registry.define('gradian', 'gon', dim.DIMENSIONLESS, scale=1 / 400,
                aliases=('grad',))
registry.define('arcminute', '′', dim.DIMENSIONLESS, scale=1 / 21600,
                aliases=('arcmin',))
registry.define('arcsecond', '″', dim.DIMENSIONLESS, scale=1 / 1296000,
                aliases=('arcsec',))
registry.define('bit', 'bit', dim.DIMENSIONLESS)
registry.define('nibble', 'nibble', dim.DIMENSIONLESS, scale=4)
registry.define('byte', 'B', dim.DIMENSIONLESS, scale=8)
define_prefixed('byte', 'B', dim.DIMENSIONLESS,
                prefixes=(KILO, MEGA, GIGA, TERA, PETA, EXA, ZETTA, YOTTA),
                scale=8)
define_prefixed('byte', 'B', dim.DIMENSIONLESS, prefixes=BINARY_PREFIXES,
                scale=8)

# Length
registry.define('meter', 'm', dim.LENGTH, base=True, aliases=('metre',))
define_prefixed('meter', 'm', dim.LENGTH)
registry.define('inch', 'in', dim.LENGTH, scale=_INCH, plural='inches')
registry.define('foot', 'ft', dim.LENGTH, scale=_FOOT, plural='feet')
registry.define('yard', 'yd', dim.LENGTH, scale=0.9144)
registry.define('mile', 'mi', dim.LENGTH, scale=_MILE)
registry.define('nautical mile', 'nmi', dim.LENGTH, scale=1852.0)
registry.define('angstrom', 'Å', dim.LENGTH, scale=1e-10)
registry.define('astronomical unit', 'au', dim.LENGTH, scale=149597870700.0)
registry.define('light year', 'ly', dim.LENGTH, scale=9460730472580800.0)

# Mass
registry.define('kilogram', 'kg', dim.MASS, base=True)
define_prefixed('gram', 'g', dim.MASS, scale=1e-3,
                prefixes=tuple(p for p in SI_PREFIXES if p is not KILO))
registry.define('gram', 'g', dim.MASS, scale=1e-3)
registry.define('pound', 'lb', dim.MASS, scale=_POUND, aliases=('lbm',))
registry.define('ounce', 'oz', dim.MASS, scale=_POUND / 16)
registry.define('tonne', 't', dim.MASS, scale=1000.0)
registry.define('slug', 'slug', dim.MASS, scale=_LBF / _FOOT)

# Time
registry.define('second', 's', dim.TIME, base=True, aliases=('sec',))
define_prefixed('second', 's', dim.TIME)
registry.define('minute', 'min', dim.TIME, scale=60.0)
registry.define('hour', 'h', dim.TIME, scale=3600.0, aliases=('hr',))
registry.define('day', 'd', dim.TIME, scale=86400.0)
registry.define('week', 'wk', dim.TIME, scale=604800.0)
registry.define('year', 'yr', dim.TIME, scale=365.25 * 86400.0)

# Current
registry.define('ampere', 'A', dim.CURRENT, base=True, aliases=('amp',))
define_prefixed('ampere', 'A', dim.CURRENT)

# Temperature
registry.define('kelvin', 'K', dim.TEMPERATURE, base=True,
                aliases=('degK',))
define_prefixed('kelvin', 'K', dim.TEMPERATURE, prefixes=(MICRO, MILLI))
registry.define('celsius', '°C', dim.TEMPERATURE, offset=273.15,
                plural='celsius', aliases=('degC',))
registry.define('fahrenheit', '°F', dim.TEMPERATURE, scale=5 / 9,
                offset=459.67 * 5 / 9, plural='fahrenheit',
                aliases=('degF',))
registry.define('rankine', '°R', dim.TEMPERATURE, scale=5 / 9,
                plural='rankine', aliases=('degR',))

# Amount of substance
registry.define('mole', 'mol', dim.AMOUNT, base=True)
define_prefixed('mole', 'mol', dim.AMOUNT)
registry.define('pound mole', 'lbmol', dim.AMOUNT, scale=1000 * _POUND)

# Luminous intensity
registry.define('candela', 'cd', dim.LUMINOSITY, base=True)
define_prefixed('candela', 'cd', dim.LUMINOSITY)

# Area
registry.define('square meter', 'm²', dim.AREA, base=True,
                aliases=('m**2', 'm^2'))
registry.define('square millimeter', 'mm²', dim.AREA, scale=1e-6,
                aliases=('mm**2',))
registry.define('square centimeter', 'cm²', dim.AREA, scale=1e-4,
                aliases=('cm**2',))
registry.define('square kilometer', 'km²', dim.AREA, scale=1e6,
                aliases=('km**2',))
registry.define('hectare', 'ha', dim.AREA, scale=1e4)
registry.define('square inch', 'in²', dim.AREA, scale=_INCH**2,
                plural='square inches', aliases=('in**2', 'in^2'))
registry.define('square foot', 'ft²', dim.AREA, scale=_FOOT**2,
                plural='square feet', aliases=('ft**2', 'ft^2'))
registry.define('square yard', 'yd²', dim.AREA, scale=0.9144**2,
                aliases=('yd**2',))
registry.define('square mile', 'mi²', dim.AREA, scale=_MILE**2,
                aliases=('mi**2',))
registry.define('acre', 'ac', dim.AREA, scale=4046.8564224)

# Volume
registry.define('cubic meter', 'm³', dim.VOLUME, base=True,
                aliases=('m**3', 'm^3'))
registry.define('cubic millimeter', 'mm³', dim.VOLUME, scale=1e-9,
                aliases=('mm**3',))
registry.define('cubic centimeter', 'cm³', dim.VOLUME, scale=1e-6,
                aliases=('cm**3', 'cc'))
registry.define('liter', 'L', dim.VOLUME, scale=1e-3, aliases=('litre',))
registry.define('milliliter', 'mL', dim.VOLUME, scale=1e-6)
registry.define('cubic inch', 'in³', dim.VOLUME, scale=_INCH**3,
                plural='cubic inches', aliases=('in**3', 'in^3'))
registry.define('cubic foot', 'ft³', dim.VOLUME, scale=_FOOT**3,
                plural='cubic feet', aliases=('ft**3', 'ft^3'))
registry.define('gallon', 'gal', dim.VOLUME, scale=231 * _INCH**3)

# Velocity
registry.define('meter per second', 'm/s', dim.VELOCITY, base=True,
                plural='meters per second')
registry.define('kilometer per hour', 'km/h', dim.VELOCITY, scale=1 / 3.6,
                plural='kilometers per hour', aliases=('kph',))
registry.define('mile per hour', 'mph', dim.VELOCITY, scale=_MILE / 3600,
                plural='miles per hour', aliases=('mi/h',))
registry.define('foot per second', 'ft/s', dim.VELOCITY, scale=_FOOT,
                plural='feet per second', aliases=('fps',))
registry.define('knot', 'kn', dim.VELOCITY, scale=1852 / 3600)

# Acceleration
registry.define('meter per second squared', 'm/s²', dim.ACCELERATION,
                base=True, plural='meters per second squared',
                aliases=('m/s**2',))
registry.define('foot per second squared', 'ft/s²', dim.ACCELERATION,
                scale=_FOOT, plural='feet per second squared',
                aliases=('ft/s**2',))
registry.define('standard gravity', 'g0', dim.ACCELERATION, scale=_G0,
                plural='standard gravities', aliases=('g_0',))

# Force
registry.define('newton', 'N', dim.FORCE, base=True)
define_prefixed('newton', 'N', dim.FORCE)
registry.define('pound force', 'lbf', dim.FORCE, scale=_LBF,
                plural='pounds force')
registry.define('kilogram force', 'kgf', dim.FORCE, scale=_G0,
                plural='kilograms force')
registry.define('dyne', 'dyn', dim.FORCE, scale=1e-5)

# Energy
registry.define('joule', 'J', dim.ENERGY, base=True)
define_prefixed('joule', 'J', dim.ENERGY)
registry.define('calorie', 'cal', dim.ENERGY, scale=4.184)
registry.define('kilocalorie', 'kcal', dim.ENERGY, scale=4184.0)
registry.define('british thermal unit', 'Btu', dim.ENERGY, scale=_BTU,
                aliases=('BTU',))
registry.define('watt hour', 'Wh', dim.ENERGY, scale=3600.0,
                plural='watt hours')
registry.define('kilowatt hour', 'kWh', dim.ENERGY, scale=3.6e6,
                plural='kilowatt hours')
registry.define('electronvolt', 'eV', dim.ENERGY, scale=1.602176634e-19)
registry.define('foot pound force', 'ft·lbf', dim.ENERGY,
                scale=_FOOT * _LBF, plural='foot pounds force',
                aliases=('ft*lbf',))

# Power
registry.define('watt', 'W', dim.POWER, base=True)
define_prefixed('watt', 'W', dim.POWER)
registry.define('horsepower', 'hp', dim.POWER, scale=550 * _FOOT * _LBF,
                plural='horsepower')
registry.define('btu per second', 'Btu/s', dim.POWER, scale=_BTU,
                plural='btus per second')
registry.define('btu per hour', 'Btu/h', dim.POWER, scale=_BTU / 3600,
                plural='btus per hour', aliases=('Btu/hr',))

# Pressure
registry.define('pascal', 'Pa', dim.PRESSURE, base=True)
define_prefixed('pascal', 'Pa', dim.PRESSURE)
registry.define('bar', 'bar', dim.PRESSURE, scale=1e5)
registry.define('millibar', 'mbar', dim.PRESSURE, scale=1e2)
registry.define('atmosphere', 'atm', dim.PRESSURE, scale=101325.0)
registry.define('pound per square inch', 'psi', dim.PRESSURE,
                scale=_LBF / _INCH**2, plural='pounds per square inch')
registry.define('torr', 'Torr', dim.PRESSURE, scale=101325 / 760)
registry.define('millimeter of mercury', 'mmHg', dim.PRESSURE,
                scale=133.322387415, plural='millimeters of mercury')

# Frequency
registry.define('hertz', 'Hz', dim.FREQUENCY, base=True, plural='hertz')
define_prefixed('hertz', 'Hz', dim.FREQUENCY, plural='hertz')
registry.define('revolution per minute', 'rpm', dim.FREQUENCY,
                scale=1 / 60, plural='revolutions per minute')
registry.define('radian per second', 'rad/s', dim.FREQUENCY,
                scale=1 / _TURN, plural='radians per second')

# Density
registry.define('kilogram per cubic meter', 'kg/m³', dim.DENSITY, base=True,
                plural='kilograms per cubic meter', aliases=('kg/m**3',))
registry.define('gram per cubic centimeter', 'g/cm³', dim.DENSITY,
                scale=1000.0, plural='grams per cubic centimeter',
                aliases=('g/cm**3',))
registry.define('pound per cubic foot', 'lb/ft³', dim.DENSITY,
                scale=_POUND / _FOOT**3, plural='pounds per cubic foot',
                aliases=('lb/ft**3',))
registry.define('pound per cubic inch', 'lb/in³', dim.DENSITY,
                scale=_POUND / _INCH**3, plural='pounds per cubic inch',
                aliases=('lb/in**3',))

# Mass flow
registry.define('kilogram per second', 'kg/s', dim.MASSFLOW, base=True,
                plural='kilograms per second')
registry.define('kilogram per hour', 'kg/h', dim.MASSFLOW, scale=1 / 3600,
                plural='kilograms per hour')
registry.define('pound per second', 'lb/s', dim.MASSFLOW, scale=_POUND,
                plural='pounds per second')
registry.define('pound per hour', 'lb/h', dim.MASSFLOW, scale=_POUND / 3600,
                plural='pounds per hour')


# Quantity kinds
@addUnitAccessors
class Scalar(Quantity):
    """Dimensionless quantity: ratios, angles and information."""
    __slots__ = ()
    _kind_dimension = dim.DIMENSIONLESS


@addUnitAccessors
class Length(Quantity):
    __slots__ = ()
    _kind_dimension = dim.LENGTH


@addUnitAccessors
class Mass(Quantity):
    __slots__ = ()
    _kind_dimension = dim.MASS


@addUnitAccessors
class Time(Quantity):
    __slots__ = ()
    _kind_dimension = dim.TIME


@addUnitAccessors
class Current(Quantity):
    __slots__ = ()
    _kind_dimension = dim.CURRENT


@addUnitAccessors
class Temperature(Quantity):
    """
    Absolute temperature, stored in kelvin.

    Differences of temperatures are also tagged as temperatures. Use
    conversions.convert_interval to express a difference in another unit.
    """
    __slots__ = ()
    _kind_dimension = dim.TEMPERATURE


@addUnitAccessors
class Amount(Quantity):
    __slots__ = ()
    _kind_dimension = dim.AMOUNT


@addUnitAccessors
class Luminosity(Quantity):
    __slots__ = ()
    _kind_dimension = dim.LUMINOSITY


@addUnitAccessors
class Area(Quantity):
    __slots__ = ()
    _kind_dimension = dim.AREA


@addUnitAccessors
class Volume(Quantity):
    __slots__ = ()
    _kind_dimension = dim.VOLUME


@addUnitAccessors
class Velocity(Quantity):
    __slots__ = ()
    _kind_dimension = dim.VELOCITY


@addUnitAccessors
class Acceleration(Quantity):
    __slots__ = ()
    _kind_dimension = dim.ACCELERATION


@addUnitAccessors
class Force(Quantity):
    __slots__ = ()
    _kind_dimension = dim.FORCE


@addUnitAccessors
class Energy(Quantity):
    __slots__ = ()
    _kind_dimension = dim.ENERGY


@addUnitAccessors
class Power(Quantity):
    __slots__ = ()
    _kind_dimension = dim.POWER


@addUnitAccessors
class Pressure(Quantity):
    __slots__ = ()
    _kind_dimension = dim.PRESSURE


@addUnitAccessors
class Frequency(Quantity):
    __slots__ = ()
    _kind_dimension = dim.FREQUENCY


@addUnitAccessors
class Density(Quantity):
    __slots__ = ()
    _kind_dimension = dim.DENSITY


@addUnitAccessors
class MassFlow(Quantity):
    __slots__ = ()
    _kind_dimension = dim.MASSFLOW


KINDS = (Scalar, Length, Mass, Time, Current, Temperature, Amount,
         Luminosity, Area, Volume, Velocity, Acceleration, Force, Energy,
         Power, Pressure, Frequency, Density, MassFlow)
