# __init__.py

from geoUnits.logger import logger
from geoUnits.DEFAULTS import DEFAULTS
from geoUnits.errors import (GeoUnitsError, DimensionMismatch,
                             UnitDefinitionError, UnknownUnitError)
from geoUnits.dimension import DimensionVector
from geoUnits.unit import Unit
from geoUnits.conversions import (UnitRegistry, registry, convert,
                                  convert_interval, conversion_matrix)
from geoUnits.quantity import Quantity, quantity_kind
from geoUnits.units import (units, parse_units, toBase, fromBase,
                            make_quantity, inputParser, output_converter,
                            addUnitAccessors)
from geoUnits.catalog import *
from geoUnits.utils import load_catalog, yaml_loader, yaml_writer

from . import dimension
from . import catalog
