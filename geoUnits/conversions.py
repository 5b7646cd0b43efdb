"""
Conversion engine.

Every unit is registered against the base unit of its dimension, so any
unit-to-unit conversion is derived from two hops through the base:

    convert(U1, U2, x) = from_base(U2, to_base(U1, x))

No pairwise conversions are ever declared or stored.
"""
from rich.console import Console
from rich.table import Table
from .dimension import DimensionVector
from .errors import DimensionMismatch, UnitDefinitionError, UnknownUnitError
from .logger import logger
from .unit import Unit


class UnitRegistry:
    """
    Registry of unit descriptors keyed by dimension.

    Units can be looked up by name, abbreviation, plural or alias. Each
    dimension holds exactly one base unit (scale=1, offset=0).
    """

    def __init__(self, name='default'):
        self.name = name
        self._units = {}
        self._lookup = {}
        self._by_dimension = {}
        self._base_units = {}
        self._dimension_names = {}

    def define(self, name, abbreviation, dimension, scale=1.0, offset=0.0,
               base=False, plural=None, aliases=()):
        """Create a Unit from its fields and register it."""
        return self.register(Unit(name, abbreviation, dimension,
                                  scale=scale, offset=offset, base=base,
                                  plural=plural, aliases=aliases))

    def register(self, unit):
        """
        Register a unit descriptor.

        Re-registering an identical descriptor is a no-op. Registering a
        different descriptor under an existing name, or a second base unit
        for a dimension, raises UnitDefinitionError.

        Args:
            unit (Unit): The unit descriptor.

        Returns:
            Unit: The registered unit.
        """
        if not isinstance(unit, Unit):
            raise UnitDefinitionError(f"Expected a Unit descriptor, got "
                                      f"{type(unit).__name__}")

        existing = self._units.get(unit.name)
        if existing is not None:
            if existing == unit:
                return existing
            logger.error(f"Unit '{unit.name}' is already registered in "
                         f"'{self.name}' as {existing!r}")
            raise UnitDefinitionError(
                f"Conflicting definition for unit '{unit.name}'")

        base = self._base_units.get(unit.dimension)
        if unit.is_base and base is not None:
            logger.error(f"Dimension {unit.dimension} already has base unit "
                         f"'{base.name}', cannot register '{unit.name}' as a "
                         "second base unit")
            raise UnitDefinitionError(
                f"Duplicate base unit '{unit.name}' for dimension "
                f"{unit.dimension}")

        for key in unit.keys:
            other = self._lookup.get(key)
            if other is not None and other.name != unit.name:
                logger.error(f"Unit key '{key}' of '{unit.name}' already "
                             f"refers to '{other.name}'")
                raise UnitDefinitionError(
                    f"Unit key '{key}' is already registered")

        self._units[unit.name] = unit
        for key in unit.keys:
            self._lookup[key] = unit
        self._by_dimension.setdefault(unit.dimension, []).append(unit)
        if unit.is_base:
            self._base_units[unit.dimension] = unit

        logger.debug(f"Registered unit '{unit.name}' ({unit.abbreviation}) "
                     f"scale={unit.scale} offset={unit.offset} "
                     f"dimension={unit.dimension}")
        return unit

    def name_dimension(self, name, dimension):
        """Attach a kind name (e.g. 'LENGTH') to a dimension."""
        self._dimension_names[name.upper()] = dimension

    def dimension(self, name):
        """Look up a dimension by kind name, e.g. 'LENGTH'."""
        if isinstance(name, DimensionVector):
            return name
        try:
            return self._dimension_names[name.upper()]
        except KeyError:
            raise UnknownUnitError(
                f"Unknown quantity kind '{name}'. Known kinds are: "
                f"{sorted(self._dimension_names)}") from None

    def kind_of(self, dimension):
        """Return the first kind name attached to a dimension."""
        for name, dim in self._dimension_names.items():
            if dim == dimension:
                return name
        raise UnknownUnitError(f"No quantity kind is named for dimension "
                               f"{dimension}")

    @property
    def kinds(self):
        return dict(self._dimension_names)

    def get(self, key, default=None):
        if isinstance(key, Unit):
            return key
        return self._lookup.get(key, default)

    def __getitem__(self, key):
        unit = self.get(key)
        if unit is None:
            raise UnknownUnitError(f"Unit '{key}' is not registered in "
                                   f"'{self.name}'")
        return unit

    def __contains__(self, key):
        if isinstance(key, Unit):
            return self._units.get(key.name) == key
        return key in self._lookup

    def __iter__(self):
        return iter(self._units.values())

    def __len__(self):
        return len(self._units)

    def units_of(self, dimension):
        """List the units registered for a dimension, base unit first."""
        units = self._by_dimension.get(self.dimension(dimension), [])
        return sorted(units, key=lambda u: not u.is_base)

    def get_base(self, dimension, default=None):
        return self._base_units.get(dimension, default)

    def base_unit(self, dimension):
        dimension = self.dimension(dimension)
        try:
            return self._base_units[dimension]
        except KeyError:
            raise UnknownUnitError(f"No base unit registered for dimension "
                                   f"{dimension}") from None

    @property
    def dimensions(self):
        return list(self._by_dimension)

    def to_base(self, unit, raw):
        return to_base(self[unit], raw)

    def from_base(self, unit, base_value):
        return from_base(self[unit], base_value)

    def convert(self, value, from_unit, to_unit):
        return convert(self[from_unit], self[to_unit], value)

    def conversion_matrix(self, dimension):
        return conversion_matrix(self.units_of(dimension))

    def __str__(self):
        return self._make_table()

    def _make_table(self):
        """
        Create a formatted table of the registered units using rich.

        Returns:
            str: The rendered table.
        """
        table = Table(title=f"Unit Registry: {self.name}")
        table.add_column("Unit", style="bold")
        table.add_column("Symbol")
        table.add_column("Dimension")
        table.add_column("Scale", justify="right")
        table.add_column("Offset", justify="right")

        for dimension, units in self._by_dimension.items():
            for unit in sorted(units, key=lambda u: not u.is_base):
                table.add_row(unit.name, unit.abbreviation, str(dimension),
                              f"{unit.scale:.10g}", f"{unit.offset:.10g}")

        console = Console()
        with console.capture() as capture:
            console.print(table)
        return capture.get()


def to_base(unit, raw):
    """
    Convert a raw value expressed in ``unit`` to its dimension's base unit.

    Args:
        unit (Unit): Source unit.
        raw: Value in the source unit (number or numpy array).

    Returns:
        The value in the base unit.
    """
    return unit.to_base(raw)


def from_base(unit, base_value):
    """
    Convert a base-unit value to ``unit``.

    Args:
        unit (Unit): Target unit.
        base_value: Value in the base unit (number or numpy array).

    Returns:
        The value in the target unit.
    """
    return unit.from_base(base_value)


def convert(from_unit, to_unit, value):
    """
    Convert a value between two units of the same dimension.

    The conversion always goes through the base unit.

    Raises:
        DimensionMismatch: If the units have different dimensions.
    """
    if from_unit.dimension != to_unit.dimension:
        raise DimensionMismatch('convert', from_unit.dimension,
                                to_unit.dimension)
    if from_unit == to_unit:
        return value
    return from_base(to_unit, to_base(from_unit, value))


def convert_interval(from_unit, to_unit, delta):
    """
    Convert a difference between two values of the same dimension.

    Offsets cancel in a difference, so only the scales apply. Use this for
    temperature differences (10 °C difference == 18 °F difference).
    """
    if from_unit.dimension != to_unit.dimension:
        raise DimensionMismatch('convert_interval', from_unit.dimension,
                                to_unit.dimension)
    return delta * from_unit.scale / to_unit.scale


def conversion_matrix(units):
    """
    Derive every ordered conversion among ``units``.

    Each entry maps (from_name, to_name) to the affine pair (a, b) such that
    to_value = a * from_value + b. The pairs are derived from each unit's
    (scale, offset) relative to the base; nothing pairwise is declared.

    Args:
        units (list): Units sharing one dimension.

    Returns:
        dict: {(from_name, to_name): (a, b)} for every ordered pair of
              distinct units.
    """
    units = list(units)
    dimensions = {unit.dimension for unit in units}
    if len(dimensions) > 1:
        raise DimensionMismatch('conversion_matrix', *list(dimensions)[:2])

    matrix = {}
    for src in units:
        for dst in units:
            if src.name == dst.name:
                continue
            a = src.scale / dst.scale
            b = (src.offset - dst.offset) / dst.scale
            matrix[(src.name, dst.name)] = (a, b)
    return matrix


# Registry shared by the package catalog and Quantity kinds
registry = UnitRegistry('SI')
