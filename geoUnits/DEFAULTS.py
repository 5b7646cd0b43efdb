from dataclasses import dataclass
from typing import Literal


@dataclass
class UnitSettings:
    """Default settings for geoUnits calculations."""
    input_units: Literal['SI', 'ENGLISH', 'MIXED'] = 'SI'
    output_units: Literal['SI', 'ENGLISH', 'MIXED'] = 'SI'
    # 'permissive': transcendental functions accept any dimension and keep
    # the tag. 'strict': only dimensionless quantities are accepted.
    transcendental_policy: Literal['permissive', 'strict'] = 'permissive'
    # Relative tolerance used by Quantity.isclose
    rel_tol: float = 1e-9


# Create the default instance
DEFAULTS = UnitSettings()
