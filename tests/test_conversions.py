import math
import pytest
import geoUnits as gu
from geoUnits import dimension as dim
from geoUnits.conversions import (UnitRegistry, convert, convert_interval,
                                  conversion_matrix)
from geoUnits.errors import (DimensionMismatch, UnitDefinitionError,
                             UnknownUnitError)
from geoUnits.unit import Unit


ROUND_TRIP_VALUES = [0, 1, -1, 1e12, 1e-9]


@pytest.fixture
def local_registry():
    """Small registry independent of the package catalog."""
    registry = UnitRegistry('test')
    registry.define('meter', 'm', dim.LENGTH, base=True)
    registry.define('kilometer', 'km', dim.LENGTH, scale=1000.0)
    registry.define('foot', 'ft', dim.LENGTH, scale=0.3048, plural='feet')
    registry.define('kelvin', 'K', dim.TEMPERATURE, base=True)
    registry.define('celsius', '°C', dim.TEMPERATURE, offset=273.15,
                    plural='celsius', aliases=('degC',))
    return registry


def test_unit_validation():
    with pytest.raises(UnitDefinitionError):
        Unit('bad', 'b', dim.LENGTH, scale=0)
    with pytest.raises(UnitDefinitionError):
        Unit('bad', 'b', dim.LENGTH, scale=-2.0)
    with pytest.raises(UnitDefinitionError):
        Unit('bad', 'b', dim.LENGTH, scale=float('inf'))
    with pytest.raises(UnitDefinitionError):
        Unit('bad', 'b', dim.LENGTH, offset=float('nan'))
    with pytest.raises(UnitDefinitionError):
        Unit('bad', 'b', dim.LENGTH, scale=2.0, base=True)
    with pytest.raises(UnitDefinitionError):
        Unit('bad', 'b', (1, 0, 0, 0, 0, 0, 0))


def test_unit_defaults():
    unit = Unit('furlong', 'fur', dim.LENGTH, scale=201.168)
    assert unit.plural == 'furlongs'
    assert not unit.is_base
    assert not unit.is_affine
    assert unit.attribute_name == 'furlong'
    assert Unit('square foot', 'ft²', dim.AREA).attribute_name == 'square_foot'


def test_lookup(local_registry):
    km = local_registry['km']
    assert local_registry['kilometer'] is km
    assert local_registry['kilometers'] is km
    assert local_registry['feet'].name == 'foot'
    assert local_registry['degC'].name == 'celsius'
    assert 'km' in local_registry
    assert 'furlong' not in local_registry
    assert len(local_registry) == 5
    with pytest.raises(UnknownUnitError):
        local_registry['furlong']


def test_units_of_base_first(local_registry):
    names = [unit.name for unit in local_registry.units_of(dim.LENGTH)]
    assert names[0] == 'meter'
    assert set(names) == {'meter', 'kilometer', 'foot'}
    assert local_registry.base_unit(dim.TEMPERATURE).name == 'kelvin'


def test_conflicting_registration(local_registry):
    # Identical re-registration is a no-op
    local_registry.define('kilometer', 'km', dim.LENGTH, scale=1000.0)

    with pytest.raises(UnitDefinitionError):
        local_registry.define('kilometer', 'km', dim.LENGTH, scale=999.0)
    with pytest.raises(UnitDefinitionError):
        local_registry.define('centimeter', 'km', dim.LENGTH, scale=0.01)
    with pytest.raises(UnitDefinitionError):
        local_registry.define('metre', 'mt', dim.LENGTH, base=True)


def test_convert_through_base(local_registry):
    assert local_registry.convert(2.5, 'km', 'm') == 2500.0
    assert math.isclose(local_registry.convert(1, 'km', 'ft'),
                        3280.839895013123, rel_tol=1e-12)
    assert math.isclose(local_registry.convert(25, '°C', 'K'), 298.15)
    with pytest.raises(DimensionMismatch):
        local_registry.convert(1, 'km', 'K')


def test_temperature_affine():
    assert gu.registry.to_base('°C', 0) == 273.15
    assert gu.registry.from_base('celsius', 273.15) == 0
    assert math.isclose(gu.registry.to_base('°F', 32), 273.15)
    assert math.isclose(gu.registry.convert(100, '°C', '°F'), 212.0)
    assert math.isclose(gu.registry.convert(-40, '°C', '°F'), -40.0)
    assert math.isclose(gu.registry.convert(491.67, '°R', 'K'), 273.15)
    assert math.isclose(gu.registry.convert(0, '°F', '°C'), -160 / 9)


def test_convert_interval():
    celsius = gu.registry['°C']
    fahrenheit = gu.registry['°F']
    assert math.isclose(convert_interval(celsius, fahrenheit, 10), 18.0)
    assert math.isclose(convert_interval(fahrenheit, gu.registry['K'], 9),
                        5.0)
    with pytest.raises(DimensionMismatch):
        convert_interval(celsius, gu.registry['m'], 1)


@pytest.mark.parametrize('x', ROUND_TRIP_VALUES)
def test_round_trip_every_unit(x):
    for unit in gu.registry:
        back = unit.from_base(unit.to_base(x))
        # Offsets limit the absolute precision near zero
        abs_tol = 1e-12 * abs(unit.offset) / unit.scale
        assert math.isclose(back, x, rel_tol=1e-9, abs_tol=abs_tol), unit.name


@pytest.mark.parametrize('dimension', [dim.LENGTH, dim.TEMPERATURE,
                                       dim.PRESSURE, dim.ENERGY,
                                       dim.DIMENSIONLESS])
def test_transitivity(dimension):
    units = gu.registry.units_of(dimension)[:8]
    for u1 in units:
        for u2 in units:
            for u3 in units:
                x = 12.5
                direct = convert(u1, u3, x)
                chained = convert(u2, u3, convert(u1, u2, x))
                # Offsets of the hop units limit the absolute precision
                offset = max(abs(u.offset) for u in (u1, u2, u3))
                abs_tol = 1e-9 + 1e-12 * offset / u3.scale
                assert math.isclose(direct, chained, rel_tol=1e-9,
                                    abs_tol=abs_tol), (u1.name, u2.name,
                                                       u3.name)


def test_conversion_matrix():
    units = gu.registry.units_of(dim.TEMPERATURE)
    matrix = conversion_matrix(units)
    n = len(units)
    assert len(matrix) == n * (n - 1)

    a, b = matrix[('celsius', 'fahrenheit')]
    assert math.isclose(a, 1.8)
    assert math.isclose(b, 32.0)

    for (src, dst), (a, b) in matrix.items():
        expected = gu.registry.convert(37.0, src, dst)
        assert math.isclose(a * 37.0 + b, expected, rel_tol=1e-9)


def test_conversion_matrix_rejects_mixed_dimensions():
    with pytest.raises(DimensionMismatch):
        conversion_matrix([gu.registry['m'], gu.registry['s']])


def test_registry_table(local_registry):
    table = str(local_registry)
    assert 'kilometer' in table
    assert 'celsius' in table
