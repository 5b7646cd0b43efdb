"""
Interoperability with pint.

pint and geoUnits share the coherent SI base units (m, kg, s, A, K, mol,
cd), so a geoUnits base value is a pint magnitude in pint's base units.
pint treats the radian as its dimensionless unit while the geoUnits
dimensionless base is one revolution, so angular units are not exchanged
through this module.
"""
import math
import pint
from .conversions import registry as default_registry
from .dimension import BASIS, DimensionVector
from .errors import UnitDefinitionError
from .logger import logger
from .quantity import Quantity
from .unit import Unit


# pint base dimension -> DimensionVector symbol
PINT_DIMENSIONS = {
    '[length]': 'L',
    '[mass]': 'M',
    '[time]': 'T',
    '[current]': 'I',
    '[temperature]': 'TH',
    '[substance]': 'N',
    '[luminosity]': 'J',
}

# DimensionVector symbol -> pint base unit
PINT_BASE_UNITS = {
    'L': 'meter',
    'M': 'kilogram',
    'T': 'second',
    'I': 'ampere',
    'TH': 'kelvin',
    'N': 'mole',
    'J': 'candela',
}


class PintHandler:
    """Class for handling conversions using the pint library."""

    def __init__(self, ureg=None):
        self.ureg = ureg or pint.UnitRegistry()
        self.Q_ = self.ureg.Quantity

    def dimension(self, dimensionality):
        """
        Convert a pint dimensionality into a DimensionVector.

        Raises:
            UnitDefinitionError: For pint dimensions outside the seven SI
                                 base dimensions or non-integer exponents.
        """
        exponents = {}
        for name, exponent in dimensionality.items():
            if name not in PINT_DIMENSIONS:
                raise UnitDefinitionError(
                    f"pint dimension '{name}' has no geoUnits counterpart")
            if exponent != int(exponent):
                raise UnitDefinitionError(
                    f"pint dimension '{name}' has non-integer exponent "
                    f"{exponent}")
            exponents[PINT_DIMENSIONS[name]] = int(exponent)
        return DimensionVector.from_mapping(exponents)

    def require_not_angular(self, pint_unit):
        """
        Reject pint units built on the radian.

        pint takes the radian as its dimensionless unit while geoUnits
        measures angles in revolutions, so angular magnitudes would be off
        by a factor 2π.

        Raises:
            UnitDefinitionError: If the root units of pint_unit contain
                                 the radian.
        """
        _, root = self.ureg.get_root_units(pint_unit, check_nonmult=False)
        if 'radian' in root._units:
            raise UnitDefinitionError(
                f"pint unit '{pint_unit}' is angular, angles are not "
                "exchanged with pint")
        return pint_unit

    def base_units(self, dimension):
        """pint unit made of the base units matching ``dimension``."""
        units = self.ureg.dimensionless
        for symbol, exponent in zip(BASIS, dimension):
            if exponent:
                unit = self.ureg.Unit(PINT_BASE_UNITS[symbol])
                units = units * unit**exponent
        return units

    def unit_from_pint(self, definition, name=None, abbreviation=None):
        """
        Derive a Unit descriptor from a pint unit.

        The scale and offset are read by converting 0 and 1 of the pint unit
        into pint base units.

        Args:
            definition (str): pint unit expression, e.g. 'degF' or 'mile'.
            name (str): Unit name (defaults to pint's name).
            abbreviation (str): Unit symbol (defaults to pint's symbol).

        Returns:
            Unit
        """
        try:
            pint_unit = self.ureg.Unit(definition)
        except (pint.errors.PintError, ValueError, AttributeError) as e:
            raise UnitDefinitionError(f"pint cannot parse '{definition}': "
                                      f"{e}") from e

        self.require_not_angular(pint_unit)
        dimension = self.dimension(pint_unit.dimensionality)
        zero = self.Q_(0.0, pint_unit).to_base_units().magnitude
        one = self.Q_(1.0, pint_unit).to_base_units().magnitude
        scale = one - zero
        offset = zero

        if math.isclose(offset, 0.0, abs_tol=1e-12):
            offset = 0.0

        name = name or str(pint_unit)
        if abbreviation is None:
            abbreviation = f'{pint_unit:~}'

        logger.debug(f"pint unit '{definition}' -> scale={scale} "
                     f"offset={offset} dimension={dimension}")
        return Unit(name, abbreviation, dimension, scale=scale, offset=offset)

    def to_pint(self, quantity, unit=None):
        """
        Convert a Quantity into a pint Quantity.

        Args:
            quantity (Quantity): The quantity to convert.
            unit (str): Optional pint unit for the result.

        Returns:
            pint.Quantity
        """
        result = self.Q_(quantity.value, self.base_units(quantity.dimension))
        if unit is not None:
            unit = self.require_not_angular(self.ureg.Unit(unit))
            result = result.to(unit)
        return result

    def from_pint(self, pint_quantity):
        """Convert a pint Quantity into a Quantity of the matching kind."""
        self.require_not_angular(pint_quantity.units)
        dimension = self.dimension(pint_quantity.dimensionality)
        value = pint_quantity.to_base_units().magnitude
        return Quantity.from_base(value, dimension)


# Create an instance of PintHandler
pint_handler = PintHandler()


def unit_from_pint(definition, name=None, abbreviation=None, ureg=None,
                   registry=None):
    """
    Derive a Unit descriptor from a pint unit expression.

    Args:
        definition (str): pint unit expression.
        name (str): Unit name.
        abbreviation (str): Unit symbol.
        ureg (pint.UnitRegistry): pint registry (default shared registry).
        registry (UnitRegistry): If given, the unit is also registered.

    Returns:
        Unit
    """
    handler = pint_handler if ureg is None else PintHandler(ureg)
    unit = handler.unit_from_pint(definition, name, abbreviation)
    if registry is not None:
        unit = registry.register(unit)
    return unit


def to_pint(quantity, unit=None):
    return pint_handler.to_pint(quantity, unit)


def from_pint(pint_quantity):
    return pint_handler.from_pint(pint_quantity)


# geoUnits unit name -> pint expression of the same unit
PINT_EQUIVALENTS = {
    'kilometer': 'kilometer',
    'inch': 'inch',
    'foot': 'foot',
    'yard': 'yard',
    'mile': 'mile',
    'nautical mile': 'nautical_mile',
    'angstrom': 'angstrom',
    'astronomical unit': 'astronomical_unit',
    'light year': 'light_year',
    'gram': 'gram',
    'pound': 'pound',
    'ounce': 'ounce',
    'tonne': 'metric_ton',
    'slug': 'slug',
    'minute': 'minute',
    'hour': 'hour',
    'day': 'day',
    'week': 'week',
    'year': 'year',
    'milliampere': 'milliampere',
    'celsius': 'degC',
    'fahrenheit': 'degF',
    'rankine': 'degR',
    'hectare': 'hectare',
    'square inch': 'inch**2',
    'liter': 'liter',
    'gallon': 'gallon',
    'cubic foot': 'foot**3',
    'kilometer per hour': 'kilometer/hour',
    'mile per hour': 'mile/hour',
    'knot': 'knot',
    'standard gravity': 'standard_gravity',
    'pound force': 'force_pound',
    'kilogram force': 'force_kilogram',
    'dyne': 'dyne',
    'calorie': 'calorie',
    'british thermal unit': 'Btu',
    'kilowatt hour': 'kilowatt_hour',
    'electronvolt': 'electron_volt',
    'horsepower': 'horsepower',
    'kilopascal': 'kilopascal',
    'bar': 'bar',
    'atmosphere': 'atmosphere',
    'pound per square inch': 'psi',
    'torr': 'torr',
    'millimeter of mercury': 'mmHg',
    'kilohertz': 'kilohertz',
    'pound per cubic foot': 'pound/foot**3',
    'pound per second': 'pound/second',
}


def check_catalog(registry=default_registry, equivalents=None, rel_tol=1e-9):
    """
    Compare registered units against their pint equivalents.

    Args:
        registry (UnitRegistry): Registry to check.
        equivalents (dict): {unit name: pint expression}, defaults to
                            PINT_EQUIVALENTS.
        rel_tol (float): Relative tolerance on scale and offset.

    Returns:
        list: (unit name, geoUnits (scale, offset), pint (scale, offset))
              for every disagreement.
    """
    equivalents = PINT_EQUIVALENTS if equivalents is None else equivalents

    mismatches = []
    for name, expression in equivalents.items():
        unit = registry[name]
        reference = pint_handler.unit_from_pint(expression)
        agree = (reference.dimension == unit.dimension
                 and math.isclose(unit.scale, reference.scale,
                                  rel_tol=rel_tol)
                 and math.isclose(unit.offset, reference.offset,
                                  rel_tol=rel_tol, abs_tol=1e-12))
        if not agree:
            logger.warn(f"Unit '{name}' disagrees with pint '{expression}': "
                        f"({unit.scale}, {unit.offset}) vs "
                        f"({reference.scale}, {reference.offset})")
            mismatches.append((name, (unit.scale, unit.offset),
                               (reference.scale, reference.offset)))
    return mismatches
