import math
from dataclasses import dataclass, field
from numbers import Real
from .dimension import DimensionVector
from .errors import UnitDefinitionError


@dataclass(frozen=True)
class Unit:
    """
    Static unit descriptor.

    A unit is an affine map onto the base unit of its dimension:

        base = raw * scale + offset

    The base unit of a dimension is flagged with base=True and must have
    scale=1 and offset=0. Every unit is declared relative to the base unit,
    never relative to a sibling.

    Args:
        name (str): Unit name, e.g. 'kilometer'.
        abbreviation (str): Unit symbol, e.g. 'km'.
        dimension (DimensionVector): Dimension of the unit.
        scale (float): Multiplier onto the base unit, must be > 0.
        offset (float): Additive term onto the base unit (default 0).
        base (bool): Designates the base unit of the dimension.
        plural (str): Plural name, defaults to name + 's'.
        aliases (tuple): Extra lookup keys, e.g. ('degC',).
    """
    name: str
    abbreviation: str
    dimension: DimensionVector
    scale: float = 1.0
    offset: float = 0.0
    base: bool = False
    plural: str = field(default=None, compare=False)
    aliases: tuple = field(default=(), compare=False)

    def __post_init__(self):
        if not isinstance(self.dimension, DimensionVector):
            raise UnitDefinitionError(
                f"Unit '{self.name}' dimension must be a DimensionVector, "
                f"got {type(self.dimension).__name__}")

        if (not isinstance(self.scale, Real) or not math.isfinite(self.scale)
                or self.scale <= 0):
            raise UnitDefinitionError(
                f"Unit '{self.name}' scale must be a finite number > 0, "
                f"got {self.scale!r}")

        if not isinstance(self.offset, Real) or not math.isfinite(self.offset):
            raise UnitDefinitionError(
                f"Unit '{self.name}' offset must be a finite number, "
                f"got {self.offset!r}")

        if self.base and not self.is_identity:
            raise UnitDefinitionError(
                f"Base unit '{self.name}' must have scale=1 and offset=0, "
                f"got scale={self.scale} offset={self.offset}")

        if self.plural is None:
            object.__setattr__(self, 'plural', f'{self.name}s')
        object.__setattr__(self, 'aliases', tuple(self.aliases))

    @property
    def is_base(self):
        return self.base

    @property
    def is_identity(self):
        """True if values in this unit equal base unit values."""
        return self.scale == 1 and self.offset == 0

    @property
    def is_affine(self):
        """True if the conversion onto the base unit carries an offset."""
        return self.offset != 0

    @property
    def keys(self):
        """All lookup keys: name, abbreviation, plural and aliases."""
        keys = [self.name, self.abbreviation, self.plural, *self.aliases]
        return [key for key in dict.fromkeys(keys) if key]

    @property
    def attribute_name(self):
        """Identifier form of the name used for generated accessors."""
        return _identifier(self.name)

    def to_base(self, raw):
        """Convert a raw value in this unit to the base unit."""
        if self.is_identity:
            return raw
        if self.offset == 0:
            return raw * self.scale
        return raw * self.scale + self.offset

    def from_base(self, base_value):
        """Convert a base unit value to this unit."""
        if self.is_identity:
            return base_value
        if self.offset == 0:
            return base_value / self.scale
        return (base_value - self.offset) / self.scale

    def __str__(self):
        return self.abbreviation or self.name


def _identifier(name):
    chars = [c if c.isalnum() else '_' for c in name.lower()]
    ident = ''.join(chars).strip('_')
    while '__' in ident:
        ident = ident.replace('__', '_')
    return ident
