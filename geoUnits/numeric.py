"""
Numeric extensions for Quantity.

Pass-through operations applied to the underlying base-unit value:

* rounding and sign helpers keep the dimension tag,
* sqrt/cbrt/recip/powi/powf change it like the matching power,
* transcendental functions follow DEFAULTS.transcendental_policy:
  'permissive' keeps the tag unchecked (a quantity is a tagged number),
  'strict' only accepts dimensionless quantities.
"""
import functools
import math
from fractions import Fraction
from numbers import Integral
import numpy as np
from .DEFAULTS import DEFAULTS
from .arithmetic import (div_values, is_integer_value, power_dimension,
                         require_same_dimension, _scalar)
from .dimension import DIMENSIONLESS
from .errors import DimensionMismatch


_FLOAT_INFO = np.finfo(np.float64)


class dimensionmethod:
    """
    Method usable on a quantity kind or on a quantity instance.

    Called on a class (Length.zero()) the kind's dimension is used, called
    on an instance (q.zero()) the instance's dimension is used. The wrapped
    function receives (cls, dimension, *args).
    """

    def __init__(self, func):
        self.func = func
        functools.update_wrapper(self, func)

    def __get__(self, obj, cls):
        if obj is None:
            dimension = cls.kind_dimension()
        else:
            dimension = obj.dimension
            cls = type(obj)
        return functools.partial(self.func, cls, dimension)


def _is_python_int(value):
    return isinstance(value, Integral) and not isinstance(value, np.generic)


def _predicate(value):
    result = _scalar(value)
    if isinstance(result, np.bool_):
        return bool(result)
    return result


def transcendental(func):
    """
    Apply the transcendental policy before calling ``func``.

    In strict mode a non-dimensionless quantity raises DimensionMismatch and
    the result is tagged dimensionless.
    """
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        if DEFAULTS.transcendental_policy == 'strict':
            if not self.dimension.is_dimensionless():
                raise DimensionMismatch(func.__name__, self.dimension)
            return self._new(func(self, *args, **kwargs), DIMENSIONLESS)
        return self._new(func(self, *args, **kwargs), self.dimension)
    return wrapper


class NumericExtensions:
    """
    Mixin providing numeric helpers.

    Relies on the host class for ``value``, ``dimension``, ``_new(value,
    dimension)`` and ``_coerce(other)`` returning (value, dimension).
    """
    __slots__ = ()

    # Rounding, dimension preserving
    def floor(self):
        if is_integer_value(self.value):
            return self
        return self._new(_scalar(np.floor(self.value)), self.dimension)

    def ceil(self):
        if is_integer_value(self.value):
            return self
        return self._new(_scalar(np.ceil(self.value)), self.dimension)

    def round(self):
        """Round half away from zero."""
        if is_integer_value(self.value):
            return self
        value = self.value
        truncated = np.trunc(value)
        rounded = np.where(np.abs(value - truncated) >= 0.5,
                           truncated + np.sign(value), truncated)
        return self._new(_scalar(rounded), self.dimension)

    def trunc(self):
        if is_integer_value(self.value):
            return self
        return self._new(_scalar(np.trunc(self.value)), self.dimension)

    def fract(self):
        if is_integer_value(self.value):
            return self._new(self.value * 0, self.dimension)
        return self._new(_scalar(self.value - np.trunc(self.value)),
                         self.dimension)

    # Signed helpers
    def abs(self):
        return self._new(abs(self.value), self.dimension)

    def signum(self):
        if _is_python_int(self.value):
            return self._new((self.value > 0) - (self.value < 0),
                             self.dimension)
        return self._new(_scalar(np.sign(self.value)), self.dimension)

    def abs_sub(self, other):
        """Positive difference: max(self - other, 0)."""
        value, dimension = self._coerce(other)
        require_same_dimension('abs_sub', self.dimension, dimension)
        return self._new(_scalar(np.maximum(self.value - value, 0)),
                         self.dimension)

    def is_positive(self):
        return _predicate(self.value > 0)

    def is_negative(self):
        return _predicate(self.value < 0)

    def max(self, other):
        value, dimension = self._coerce(other)
        require_same_dimension('max', self.dimension, dimension)
        return self._new(_scalar(np.fmax(self.value, value)), self.dimension)

    def min(self, other):
        value, dimension = self._coerce(other)
        require_same_dimension('min', self.dimension, dimension)
        return self._new(_scalar(np.fmin(self.value, value)), self.dimension)

    def clamp(self, lower, upper):
        return self.max(lower).min(upper)

    # Float classification
    def is_nan(self):
        return _predicate(np.isnan(self.value))

    def is_infinite(self):
        return _predicate(np.isinf(self.value))

    def is_finite(self):
        return _predicate(np.isfinite(self.value))

    def is_normal(self):
        value = np.asarray(self.value, dtype=np.float64)
        return _predicate(np.isfinite(value)
                          & (np.abs(value) >= _FLOAT_INFO.tiny))

    def is_sign_positive(self):
        return _predicate(~np.signbit(self.value))

    def is_sign_negative(self):
        return _predicate(np.signbit(self.value))

    # Powers and roots, dimension changing
    def recip(self):
        return self._new(div_values(1, self.value), self.dimension.inverse())

    def powi(self, n):
        if not isinstance(n, Integral):
            raise TypeError(f"powi expects an integer exponent, got {n!r}")
        return self ** int(n)

    def powf(self, n):
        return self ** n

    def sqrt(self):
        with np.errstate(invalid='ignore'):
            value = _scalar(np.sqrt(self.value))
        return self._new(value, power_dimension(self.dimension,
                                                Fraction(1, 2)))

    def cbrt(self):
        return self._new(_scalar(np.cbrt(self.value)),
                         power_dimension(self.dimension, Fraction(1, 3)))

    def hypot(self, other):
        value, dimension = self._coerce(other)
        require_same_dimension('hypot', self.dimension, dimension)
        return self._new(_scalar(np.hypot(self.value, value)),
                         self.dimension)

    # Transcendental functions
    @transcendental
    def sin(self):
        return _scalar(np.sin(self.value))

    @transcendental
    def cos(self):
        return _scalar(np.cos(self.value))

    @transcendental
    def tan(self):
        return _scalar(np.tan(self.value))

    @transcendental
    def asin(self):
        with np.errstate(invalid='ignore'):
            return _scalar(np.arcsin(self.value))

    @transcendental
    def acos(self):
        with np.errstate(invalid='ignore'):
            return _scalar(np.arccos(self.value))

    @transcendental
    def atan(self):
        return _scalar(np.arctan(self.value))

    def atan2(self, other):
        """Four quadrant arctangent of self / other (same dimension)."""
        value, dimension = self._coerce(other)
        require_same_dimension('atan2', self.dimension, dimension)
        result = _scalar(np.arctan2(self.value, value))
        if DEFAULTS.transcendental_policy == 'strict':
            return self._new(result, DIMENSIONLESS)
        return self._new(result, self.dimension)

    @transcendental
    def sinh(self):
        return _scalar(np.sinh(self.value))

    @transcendental
    def cosh(self):
        return _scalar(np.cosh(self.value))

    @transcendental
    def tanh(self):
        return _scalar(np.tanh(self.value))

    @transcendental
    def asinh(self):
        return _scalar(np.arcsinh(self.value))

    @transcendental
    def acosh(self):
        with np.errstate(invalid='ignore'):
            return _scalar(np.arccosh(self.value))

    @transcendental
    def atanh(self):
        with np.errstate(divide='ignore', invalid='ignore'):
            return _scalar(np.arctanh(self.value))

    @transcendental
    def exp(self):
        with np.errstate(over='ignore'):
            return _scalar(np.exp(self.value))

    @transcendental
    def exp2(self):
        with np.errstate(over='ignore'):
            return _scalar(np.exp2(self.value))

    @transcendental
    def exp_m1(self):
        with np.errstate(over='ignore'):
            return _scalar(np.expm1(self.value))

    @transcendental
    def ln(self):
        with np.errstate(divide='ignore', invalid='ignore'):
            return _scalar(np.log(self.value))

    @transcendental
    def ln_1p(self):
        with np.errstate(divide='ignore', invalid='ignore'):
            return _scalar(np.log1p(self.value))

    @transcendental
    def log(self, base):
        if isinstance(base, NumericExtensions):
            base = base.value
        with np.errstate(divide='ignore', invalid='ignore'):
            return _scalar(np.log(self.value) / np.log(base))

    @transcendental
    def log2(self):
        with np.errstate(divide='ignore', invalid='ignore'):
            return _scalar(np.log2(self.value))

    @transcendental
    def log10(self):
        with np.errstate(divide='ignore', invalid='ignore'):
            return _scalar(np.log10(self.value))

    # Special values, tagged with the kind's dimension
    @dimensionmethod
    def nan(cls, dimension):
        return cls._new_kind(math.nan, dimension)

    @dimensionmethod
    def infinity(cls, dimension):
        return cls._new_kind(math.inf, dimension)

    @dimensionmethod
    def neg_infinity(cls, dimension):
        return cls._new_kind(-math.inf, dimension)

    @dimensionmethod
    def neg_zero(cls, dimension):
        return cls._new_kind(-0.0, dimension)

    @dimensionmethod
    def epsilon(cls, dimension):
        return cls._new_kind(float(_FLOAT_INFO.eps), dimension)

    @dimensionmethod
    def max_value(cls, dimension):
        return cls._new_kind(float(_FLOAT_INFO.max), dimension)

    @dimensionmethod
    def min_value(cls, dimension):
        return cls._new_kind(float(_FLOAT_INFO.min), dimension)

    @dimensionmethod
    def min_positive_value(cls, dimension):
        return cls._new_kind(float(_FLOAT_INFO.tiny), dimension)

    # Float constants
    @dimensionmethod
    def pi(cls, dimension):
        return cls._new_kind(math.pi, dimension)

    @dimensionmethod
    def tau(cls, dimension):
        return cls._new_kind(math.tau, dimension)

    @dimensionmethod
    def e(cls, dimension):
        return cls._new_kind(math.e, dimension)

    @dimensionmethod
    def frac_pi_2(cls, dimension):
        return cls._new_kind(math.pi / 2, dimension)

    @dimensionmethod
    def frac_pi_3(cls, dimension):
        return cls._new_kind(math.pi / 3, dimension)

    @dimensionmethod
    def frac_pi_4(cls, dimension):
        return cls._new_kind(math.pi / 4, dimension)

    @dimensionmethod
    def frac_pi_6(cls, dimension):
        return cls._new_kind(math.pi / 6, dimension)

    @dimensionmethod
    def frac_pi_8(cls, dimension):
        return cls._new_kind(math.pi / 8, dimension)

    @dimensionmethod
    def frac_1_pi(cls, dimension):
        return cls._new_kind(1 / math.pi, dimension)

    @dimensionmethod
    def frac_2_pi(cls, dimension):
        return cls._new_kind(2 / math.pi, dimension)

    @dimensionmethod
    def frac_2_sqrt_pi(cls, dimension):
        return cls._new_kind(2 / math.sqrt(math.pi), dimension)

    @dimensionmethod
    def sqrt_2(cls, dimension):
        return cls._new_kind(math.sqrt(2), dimension)

    @dimensionmethod
    def frac_1_sqrt_2(cls, dimension):
        return cls._new_kind(1 / math.sqrt(2), dimension)

    @dimensionmethod
    def ln_2(cls, dimension):
        return cls._new_kind(math.log(2), dimension)

    @dimensionmethod
    def ln_10(cls, dimension):
        return cls._new_kind(math.log(10), dimension)

    @dimensionmethod
    def log2_e(cls, dimension):
        return cls._new_kind(math.log2(math.e), dimension)

    @dimensionmethod
    def log10_e(cls, dimension):
        return cls._new_kind(math.log10(math.e), dimension)
