import math
import numpy as np
import pytest
import yaml
import geoUnits as gu
from geoUnits import dimension as dim
from geoUnits.conversions import UnitRegistry
from geoUnits.errors import UnitDefinitionError
from geoUnits.utils import dump_catalog, load_catalog, yaml_loader, yaml_writer


CATALOG = """
units:
  - name: furlong
    abbreviation: fur
    dimension: LENGTH
    scale: 201.168
  - name: fortnight
    abbreviation: ftn
    dimension: {T: 1}
    scale: 1209600
"""


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / 'units.yaml'
    path.write_text(CATALOG, encoding='utf-8')
    return path


@pytest.fixture
def local_registry():
    registry = UnitRegistry('test')
    registry.define('meter', 'm', dim.LENGTH, base=True)
    registry.define('foot', 'ft', dim.LENGTH, scale=0.3048, plural='feet')
    registry.define('kelvin', 'K', dim.TEMPERATURE, base=True)
    registry.define('celsius', '°C', dim.TEMPERATURE, offset=273.15,
                    plural='celsius', aliases=('degC',))
    return registry


def test_load_catalog_into_default_registry(catalog_file):
    units = load_catalog(catalog_file)
    assert [unit.name for unit in units] == ['furlong', 'fortnight']

    assert gu.registry['fur'].dimension == dim.LENGTH
    assert math.isclose(gu.Length.from_furlong(1).as_foot(), 660.0)
    assert math.isclose(gu.Time.from_fortnight(1).as_day(), 14.0)

    # Loading the same catalog twice is a no-op
    assert load_catalog(catalog_file) == units


def test_load_catalog_missing_key(tmp_path):
    path = tmp_path / 'broken.yaml'
    path.write_text('units:\n  - name: smoot\n    abbreviation: smoot\n',
                    encoding='utf-8')
    with pytest.raises(UnitDefinitionError):
        load_catalog(path, UnitRegistry('test'))


def test_load_catalog_conflict(tmp_path, local_registry):
    path = tmp_path / 'conflict.yaml'
    path.write_text('units:\n  - name: foot\n    abbreviation: ft\n'
                    '    dimension: {L: 1}\n    scale: 0.3\n',
                    encoding='utf-8')
    with pytest.raises(UnitDefinitionError):
        load_catalog(path, local_registry)


def test_yaml_loader_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        yaml_loader(tmp_path / 'missing.yaml')

    path = tmp_path / 'bad.yaml'
    path.write_text('units: [unclosed\n', encoding='utf-8')
    with pytest.raises(RuntimeError):
        yaml_loader(path)


def test_dump_and_reload(tmp_path, local_registry):
    config = dump_catalog(local_registry)
    entries = {entry['name']: entry for entry in config['units']}
    assert entries['meter']['base'] is True
    assert entries['meter']['dimension'] == {'L': 1}
    assert entries['foot']['plural'] == 'feet'
    assert entries['celsius']['aliases'] == ('degC',)
    assert 'plural' not in entries['kelvin']

    path = tmp_path / 'dump.yaml'
    yaml_writer(path, config)
    text = path.read_text(encoding='utf-8')
    # Unicode symbols are written as-is and tuples as plain lists
    assert '°C' in text
    assert '!!python' not in text

    restored = UnitRegistry('restored')
    load_catalog(path, restored)
    assert len(restored) == len(local_registry)
    for unit in local_registry:
        assert restored[unit.name] == unit
    assert restored['degC'].name == 'celsius'
    assert math.isclose(restored.convert(100, '°C', 'K'), 373.15)


def test_clean_dumper(tmp_path):
    path = tmp_path / 'values.yaml'
    yaml_writer(path, {'dimension': dim.VELOCITY,
                       'values': np.array([1.0, 2.0]),
                       'scale': np.float64(0.5),
                       'count': np.int64(3),
                       'pair': (1, 2)})
    data = yaml.safe_load(path.read_text(encoding='utf-8'))
    assert data == {'dimension': {'L': 1, 'T': -1}, 'values': [1.0, 2.0],
                    'scale': 0.5, 'count': 3, 'pair': [1, 2]}


def test_invalid_entry_registers_nothing(tmp_path):
    path = tmp_path / 'invalid.yaml'
    path.write_text('units:\n'
                    '  - name: rod\n    abbreviation: rd\n'
                    '    dimension: LENGTH\n    scale: 5.0292\n'
                    '  - name: negative\n    abbreviation: neg\n'
                    '    dimension: LENGTH\n    scale: -1\n',
                    encoding='utf-8')
    with pytest.raises(UnitDefinitionError):
        load_catalog(path)
    assert 'rod' not in gu.registry
    assert not hasattr(gu.Length, 'from_rod')


def test_conflict_keeps_accessors_in_sync(tmp_path):
    path = tmp_path / 'partial.yaml'
    path.write_text('units:\n'
                    '  - name: chain\n    abbreviation: ch\n'
                    '    dimension: LENGTH\n    scale: 20.1168\n'
                    '  - name: foot\n    abbreviation: ft\n'
                    '    dimension: LENGTH\n    scale: 0.3\n',
                    encoding='utf-8')
    with pytest.raises(UnitDefinitionError):
        load_catalog(path)
    # Units registered before the conflict carry their accessors
    assert 'chain' in gu.registry
    assert math.isclose(gu.Length.from_chain(1).as_foot(), 66.0)
