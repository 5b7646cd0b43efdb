import math
import numpy as np
import pytest
import geoUnits as gu
from geoUnits import dimension as dim
from geoUnits.DEFAULTS import DEFAULTS
from geoUnits.errors import DimensionMismatch


@pytest.fixture
def strict_policy():
    """Switch transcendental functions to dimensionless-only."""
    DEFAULTS.transcendental_policy = 'strict'
    yield
    DEFAULTS.transcendental_policy = 'permissive'


def test_rounding_keeps_dimension():
    length = gu.Length(2.5)
    assert length.floor() == gu.Length(2.0)
    assert length.ceil() == gu.Length(3.0)
    assert length.round() == gu.Length(3.0)
    assert gu.Length(-2.5).round() == gu.Length(-3.0)
    assert gu.Length(-2.7).trunc() == gu.Length(-2.0)
    assert math.isclose(gu.Length(-2.75).fract().value, -0.75)
    for result in (length.floor(), length.ceil(), length.round(),
                   length.trunc(), length.fract()):
        assert isinstance(result, gu.Length)


def test_rounding_integers_unchanged():
    length = gu.Length(7)
    assert length.floor() is length
    assert length.round().value == 7
    assert isinstance(length.round().value, int)
    assert length.fract().value == 0


def test_signed_helpers():
    assert gu.Length(-3.0).abs() == gu.Length(3.0)
    assert abs(gu.Length(-3.0)) == gu.Length(3.0)
    assert gu.Length(-3.0).signum() == gu.Length(-1.0)
    assert gu.Length(0).signum().value == 0
    assert gu.Length(5).signum().value == 1
    assert gu.Length(5.0).abs_sub(gu.Length(2.0)) == gu.Length(3.0)
    assert gu.Length(2.0).abs_sub(gu.Length(5.0)) == gu.Length(0.0)
    assert gu.Length(2.0).is_positive()
    assert gu.Length(-2.0).is_negative()
    assert gu.Length(2.0).max(gu.Length(3.0)) == gu.Length(3.0)
    assert gu.Length(2.0).min(gu.Length(3.0)) == gu.Length(2.0)
    assert gu.Length(9.0).clamp(gu.Length(0.0), gu.Length(5.0)) == \
        gu.Length(5.0)
    with pytest.raises(DimensionMismatch):
        gu.Length(2.0).max(gu.Time(3.0))


def test_float_classification():
    assert gu.Length.nan().is_nan()
    assert gu.Length.infinity().is_infinite()
    assert not gu.Length.infinity().is_finite()
    assert gu.Length(1.0).is_normal()
    assert not gu.Length(0.0).is_normal()
    assert gu.Length.neg_zero().is_sign_negative()
    assert gu.Length(0.0).is_sign_positive()
    assert gu.Length.neg_infinity().value == -math.inf


def test_special_values_carry_dimension():
    assert gu.Length.epsilon().value == np.finfo(np.float64).eps
    assert gu.Pressure.max_value().dimension == dim.PRESSURE
    assert gu.Length.min_positive_value().value > 0
    assert gu.Length.min_value().value < 0
    assert gu.Length(1.0).nan().dimension == dim.LENGTH


def test_constants():
    assert gu.Scalar.pi().value == math.pi
    assert gu.Scalar.tau().value == 2 * math.pi
    assert gu.Scalar.e().value == math.e
    assert math.isclose(gu.Scalar.frac_pi_2().value, math.pi / 2)
    assert math.isclose(gu.Scalar.frac_1_sqrt_2().value, math.sqrt(0.5))
    assert math.isclose(gu.Scalar.ln_10().value, math.log(10))
    assert math.isclose(gu.Scalar.log2_e().value, 1 / math.log(2))
    assert gu.Length.pi().dimension == dim.LENGTH


def test_roots_and_powers():
    side = gu.Area(9.0).sqrt()
    assert isinstance(side, gu.Length)
    assert side.value == 3.0

    edge = gu.Volume(27.0).cbrt()
    assert isinstance(edge, gu.Length)
    assert math.isclose(edge.value, 3.0)

    inverse = gu.Time(4.0).recip()
    assert isinstance(inverse, gu.Frequency)
    assert inverse.value == 0.25

    assert gu.Length(2.0).powi(3) == gu.Volume(8.0)
    assert gu.Area(4.0).powf(0.5) == gu.Length(2.0)
    with pytest.raises(TypeError):
        gu.Length(2.0).powi(1.5)

    hyp = gu.Length(3.0).hypot(gu.Length(4.0))
    assert hyp == gu.Length(5.0)

    with pytest.raises(ZeroDivisionError):
        gu.Time(0).recip()
    assert gu.Time(0.0).recip().value == math.inf


def test_transcendental_permissive_keeps_tag():
    result = gu.Length(0.5).sin()
    assert isinstance(result, gu.Length)
    assert math.isclose(result.value, math.sin(0.5))

    assert math.isclose(gu.Length(1.0).exp().value, math.e)
    assert math.isclose(gu.Length(100.0).log10().value, 2.0)
    assert math.isclose(gu.Length(8.0).log(2).value, 3.0)
    assert math.isnan(gu.Length(-1.0).ln().value)


def test_transcendental_strict(strict_policy):
    with pytest.raises(DimensionMismatch):
        gu.Length(0.5).sin()
    with pytest.raises(DimensionMismatch):
        gu.Length(1.0).exp()

    angle = gu.Scalar.from_unit('rad', math.pi / 2)
    result = angle.asin()
    assert isinstance(result, gu.Scalar)

    assert math.isclose(gu.Scalar(1.0).exp().value, math.e)
    assert math.isclose(gu.Scalar(0.0).cos().value, 1.0)

    # atan2 of two lengths is a dimensionless angle
    theta = gu.Length(1.0).atan2(gu.Length(1.0))
    assert isinstance(theta, gu.Scalar)
    assert math.isclose(theta.value, math.pi / 4)


def test_hyperbolic_and_logs():
    x = gu.Scalar(0.5)
    assert math.isclose(x.sinh().value, math.sinh(0.5))
    assert math.isclose(x.cosh().value, math.cosh(0.5))
    assert math.isclose(x.tanh().value, math.tanh(0.5))
    assert math.isclose(x.asinh().value, math.asinh(0.5))
    assert math.isclose(x.atanh().value, math.atanh(0.5))
    assert math.isclose(gu.Scalar(2.0).acosh().value, math.acosh(2.0))
    assert math.isclose(x.exp2().value, 2 ** 0.5)
    assert math.isclose(x.exp_m1().value, math.expm1(0.5))
    assert math.isclose(x.ln_1p().value, math.log1p(0.5))
    assert math.isclose(gu.Scalar(8.0).log2().value, 3.0)
    assert gu.Scalar(0.0).ln().value == -math.inf


def test_array_helpers():
    lengths = gu.Length(np.array([-1.5, 0.2, 2.5]))
    assert np.array_equal(lengths.round().value, [-2.0, 0.0, 3.0])
    assert np.array_equal(lengths.abs().value, [1.5, 0.2, 2.5])
    assert lengths.is_finite().all()
