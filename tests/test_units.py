import math
import numpy as np
import pytest
import geoUnits as gu
from geoUnits.errors import DimensionMismatch, UnknownUnitError
from geoUnits.units import UnitSystem, units


@pytest.fixture
def unit_system():
    """Restore the SI input/output systems after the test."""
    yield units
    units.input = 'SI'
    units.output = 'SI'


def test_parse_numbers_in_input_system(unit_system):
    assert gu.parse_units(2.0, 'LENGTH') == 2.0
    assert gu.parse_units(None, 'LENGTH') is None

    unit_system.input = 'english'
    assert unit_system.input == 'ENGLISH'
    assert math.isclose(gu.parse_units(10, 'LENGTH'), 0.254)
    assert math.isclose(gu.parse_units(14.695948775513449, 'PRESSURE'),
                        101325.0)

    unit_system.input = 'MIXED'
    assert math.isclose(gu.parse_units(25, 'TEMPERATURE'), 298.15)
    assert math.isclose(gu.parse_units(60, gu.Frequency), 1.0)


def test_parse_value_unit_pairs():
    assert math.isclose(gu.parse_units((5, 'km'), 'LENGTH'), 5000.0)
    assert math.isclose(gu.parse_units([25, '°C'], 'temperature'), 298.15)
    assert math.isclose(gu.parse_units((1, 'bar'), gu.Pressure), 1e5)

    values = gu.parse_units(([1, 2, 3], 'ft'), 'LENGTH')
    assert isinstance(values, np.ndarray)
    assert np.allclose(values, [0.3048, 0.6096, 0.9144])

    with pytest.raises(DimensionMismatch):
        gu.parse_units((5, 'kg'), 'LENGTH')
    with pytest.raises(UnknownUnitError):
        gu.parse_units((5, 'parsec'), 'LENGTH')
    with pytest.raises(ValueError):
        gu.parse_units(({'a': 1}, 'm'), 'LENGTH')


def test_parse_sequences_and_quantities():
    assert gu.parse_units([3.0], 'LENGTH') == 3.0

    values = gu.parse_units([1.0, (1, 'km'), gu.Length(2.0)], 'LENGTH')
    assert np.allclose(values, [1.0, 1000.0, 2.0])

    assert gu.parse_units(gu.Length.from_foot(1), 'LENGTH') == 0.3048
    with pytest.raises(DimensionMismatch):
        gu.parse_units(gu.Time(1.0), 'LENGTH')

    # Unknown input types are passed through
    marker = object()
    assert gu.parse_units(marker, 'LENGTH') is marker


def test_parse_unknown_kind():
    with pytest.raises(UnknownUnitError):
        gu.parse_units(1.0, 'VISCOSITY')


def test_from_base_output_system(unit_system):
    assert gu.fromBase(300.0, 'TEMPERATURE') == 300.0

    unit_system.output = 'MIXED'
    assert math.isclose(gu.fromBase(373.15, 'TEMPERATURE'), 100.0)
    assert math.isclose(gu.fromBase(gu.Pressure(2e5), gu.Pressure), 2.0)
    with pytest.raises(DimensionMismatch):
        gu.fromBase(gu.Length(1.0), 'PRESSURE')

    assert math.isclose(gu.toBase(1.0, 'LENGTH'), 1.0)


def test_make_quantity(unit_system):
    length = gu.make_quantity((2.5, 'km'), 'LENGTH')
    assert isinstance(length, gu.Length)
    assert length.value == 2500.0

    unit_system.input = 'ENGLISH'
    temperature = gu.make_quantity(491.67, gu.Temperature)
    assert isinstance(temperature, gu.Temperature)
    assert math.isclose(temperature.value, 273.15)


def test_invalid_unit_system(unit_system):
    with pytest.raises(ValueError):
        unit_system.input = 'IMPERIAL'
    with pytest.raises(ValueError):
        UnitSystem('SI', 'metric')
    assert unit_system.input == 'SI'


def test_unit_system_table():
    system = UnitSystem('SI', 'ENGLISH')
    table = str(system)
    assert 'Input Unit: SI' in table
    assert 'Output Unit: ENGLISH' in table
    assert 'psi' in table
    assert repr(system) == "UnitSystem(input='SI', output='ENGLISH')"
    assert system.SI_units['PRESSURE'] == 'Pa'
    assert system.output_units['LENGTH'] == 'in'


def test_every_system_unit_matches_its_kind():
    for system in ('SI', 'ENGLISH', 'MIXED'):
        for kind, unit in UnitSystem(system).input_units.items():
            assert gu.registry[unit].dimension == \
                gu.registry.dimension(kind), (system, kind)


def test_input_parser(unit_system):

    @gu.inputParser
    def travel_time(distance: 'LENGTH', speed: gu.Velocity, label=None):
        return distance / speed, label

    assert travel_time(100.0, 10.0) == (10.0, None)
    time, label = travel_time((1, 'km'), (36, 'km/h'), label='walk')
    assert math.isclose(time, 100.0)
    assert label == 'walk'

    time, _ = travel_time(distance=gu.Length(50.0), speed=5.0)
    assert time == 10.0

    unit_system.input = 'ENGLISH'
    time, _ = travel_time(12.0, 1.0)
    assert math.isclose(time, 1.0)

    with pytest.raises(TypeError):
        travel_time(1.0, 2.0, 3.0, 4.0)
    with pytest.raises(TypeError):
        travel_time(1.0, velocity=2.0)


def test_output_converter(unit_system):

    @gu.output_converter('PRESSURE')
    def pressure():
        return 101325.0

    assert pressure() == 101325.0
    unit_system.output = 'ENGLISH'
    assert math.isclose(pressure(), 14.695948775513449)


def test_generated_accessors():
    assert math.isclose(gu.Length.from_mile(1).as_kilometer(), 1.609344)
    assert math.isclose(gu.Pressure.from_bar(1).as_pound_per_square_inch(),
                        14.503773773020923)
    assert math.isclose(gu.Energy.from_kilowatt_hour(1).as_megajoule(), 3.6)
    assert math.isclose(gu.Scalar.from_percent(50).as_degree(), 180.0)
    assert math.isclose(gu.Frequency.from_revolution_per_minute(60).value,
                        1.0)
    assert gu.Length.from_kilometer.__doc__ == \
        'Create a Length from kilometers.'
    assert not hasattr(gu.Length, 'from_second')


def test_accessors_reapplied():
    assert gu.addUnitAccessors(gu.Length) is gu.Length
    assert gu.Length.from_meter(2.0) == gu.Length(2.0)
