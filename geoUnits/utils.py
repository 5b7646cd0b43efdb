import numpy as np
import yaml
from .conversions import registry as default_registry
from .dimension import DimensionVector
from .errors import UnitDefinitionError
from .logger import logger
from .quantity import _KINDS
from .unit import Unit
from .units import addUnitAccessors


def yaml_loader(yaml_path):
    """
    Load and parse a YAML file.

    Args:
        yaml_path (str): Path to the YAML file

    Returns:
        dict: Parsed YAML content
    """
    try:
        with open(yaml_path, 'r') as file:
            return yaml.safe_load(file)
    except yaml.YAMLError as e:
        logger.critical(f"Error parsing YAML file: {e}")
    except FileNotFoundError:
        logger.critical(f"Could not find file: {yaml_path}",
                        error=FileNotFoundError)


def parse_dimension(value, registry=default_registry):
    """
    Parse a dimension entry of a unit catalog.

    Args:
        value: Kind name ('LENGTH') or exponent mapping ({'L': 1, 'T': -1}).

    Returns:
        DimensionVector
    """
    if isinstance(value, DimensionVector):
        return value
    if isinstance(value, str):
        return registry.dimension(value)
    if isinstance(value, dict):
        return DimensionVector.from_mapping(value)
    raise UnitDefinitionError(f"Cannot parse dimension from {value!r}")


def _unit_from_entry(entry, path, registry):
    try:
        name = entry['name']
        dimension = entry['dimension']
    except KeyError as e:
        logger.critical(f"Unit entry {entry!r} in '{path}' is missing "
                        f"key {e}", error=UnitDefinitionError)

    return Unit(name,
                entry.get('abbreviation', ''),
                parse_dimension(dimension, registry),
                scale=entry.get('scale', 1.0),
                offset=entry.get('offset', 0.0),
                base=entry.get('base', False),
                plural=entry.get('plural'),
                aliases=entry.get('aliases', ()))


def _refresh_accessors(units, registry):
    for dimension in {unit.dimension for unit in units}:
        kind = _KINDS.get(dimension)
        if kind is not None and kind.registry is registry:
            addUnitAccessors(kind)


def load_catalog(path, registry=default_registry):
    """
    Register the units listed in a YAML catalog.

    The file holds a 'units' list, each entry with 'name', 'abbreviation',
    'dimension' and optional 'scale', 'offset', 'base', 'plural' and
    'aliases':

        units:
          - name: furlong
            abbreviation: fur
            dimension: LENGTH
            scale: 201.168

    Every entry is validated before any unit is registered, so an invalid
    descriptor leaves the registry untouched. Quantity kinds of the
    registered dimensions receive the new unit accessors, also when a
    registry conflict stops the loading part way.

    Args:
        path (str): Path to the YAML catalog.
        registry (UnitRegistry): Registry to add the units to.

    Returns:
        list: The registered Unit descriptors.
    """
    config = yaml_loader(path) or {}
    entries = config.get('units', [])

    descriptors = [_unit_from_entry(entry, path, registry)
                   for entry in entries]

    units = []
    try:
        for unit in descriptors:
            units.append(registry.register(unit))
    finally:
        _refresh_accessors(units, registry)

    logger.info(f"Loaded {len(units)} units from '{path}'")
    return units


def dump_catalog(registry=default_registry):
    """
    Describe every registered unit as plain data.

    Returns:
        dict: {'units': [...]} in the layout read by load_catalog.
    """
    units = []
    for unit in registry:
        entry = {'name': unit.name,
                 'abbreviation': unit.abbreviation,
                 'dimension': unit.dimension.as_dict(),
                 'scale': unit.scale,
                 'offset': unit.offset}
        if unit.is_base:
            entry['base'] = True
        if unit.plural != f'{unit.name}s':
            entry['plural'] = unit.plural
        if unit.aliases:
            entry['aliases'] = unit.aliases
        units.append(entry)
    return {'units': units}


class CleanDumper(yaml.SafeDumper):
    """Custom YAML dumper that creates cleaner output"""

    def represent_tuple(self, data):
        # Convert tuples to lists for cleaner output
        return self.represent_list(list(data))

    def represent_numpy_array(self, data):
        return self.represent_list(data.tolist())

    def represent_numpy_float(self, data):
        return self.represent_float(float(data))

    def represent_numpy_int(self, data):
        return self.represent_int(int(data))

    def represent_dimension(self, data):
        return self.represent_dict(data.as_dict())


# Register the custom representers
CleanDumper.add_representer(tuple, CleanDumper.represent_tuple)
CleanDumper.add_representer(np.ndarray, CleanDumper.represent_numpy_array)
CleanDumper.add_representer(np.float64, CleanDumper.represent_numpy_float)
CleanDumper.add_representer(np.int64, CleanDumper.represent_numpy_int)
CleanDumper.add_representer(DimensionVector, CleanDumper.represent_dimension)


def yaml_writer(yaml_path, config):
    """
    Write a configuration dictionary to a YAML file with clean formatting.

    Args:
        yaml_path (str): Path to the YAML file.
        config (dict): Configuration dictionary.
    """
    with open(yaml_path, 'w') as file:
        yaml.dump(config, file, Dumper=CleanDumper, default_flow_style=False,
                  allow_unicode=True, sort_keys=False)
