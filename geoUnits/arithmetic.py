"""
Value and dimension rules for Quantity arithmetic.

Values are combined with the host numeric type's own operators so Python
ints, floats, numpy scalars and numpy arrays keep their native promotion
and overflow behaviour. Two rules are enforced on top of that:

* Float division by zero follows IEEE 754 (±inf / nan) instead of raising.
* Integer division or remainder by zero always raises ZeroDivisionError,
  numpy integers included (numpy would otherwise warn and return 0).
"""
import math
from numbers import Integral
import numpy as np
from . import dimension as dim
from .errors import DimensionMismatch
from .logger import logger


def is_integer_value(value):
    """True for Python/numpy integers and integer numpy arrays."""
    if isinstance(value, np.ndarray):
        return value.dtype.kind in 'iub'
    return isinstance(value, Integral)


def has_zero(value):
    if isinstance(value, np.ndarray):
        return bool(np.any(value == 0))
    return value == 0


def _is_numpy(value):
    return isinstance(value, (np.ndarray, np.generic))


def _scalar(value):
    # Collapse 0-d arrays produced by numpy back to scalars
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return value[()]
    return value


def require_same_dimension(operation, left, right):
    """
    Check that two dimensions are identical.

    Raises:
        DimensionMismatch: If the dimensions differ.
    """
    if left != right:
        raise DimensionMismatch(operation, left, right)
    return left


# Dimension rules
def multiply_dimensions(left, right):
    return dim.add(left, right)


def divide_dimensions(left, right):
    return dim.sub(left, right)


def power_dimension(dimension, exponent):
    """
    Dimension of ``q ** exponent``.

    Integer exponents scale the exponent vector. A real exponent is
    accepted when it maps every component to an integer (area ** 0.5 is a
    length). Otherwise the dimension is returned unchanged and unchecked,
    as a fractional power of a non-root dimension has no meaningful tag.
    """
    if isinstance(exponent, np.ndarray):
        if exponent.ndim != 0:
            raise TypeError("Quantity exponents must be scalars, got an "
                            f"array of shape {exponent.shape}")
        exponent = exponent[()]

    if isinstance(exponent, Integral) and not isinstance(exponent, bool):
        return dim.scale(dimension, int(exponent))

    if dimension.is_dimensionless():
        return dimension

    scaled = dim.scale_fractional(dimension, exponent)
    if scaled is None:
        logger.debug(f"Exponent {exponent} applied to dimension {dimension} "
                     "does not yield integer exponents, dimension tag is "
                     "left unchanged")
        return dimension
    return scaled


# Value rules
def add_values(left, right):
    return left + right


def sub_values(left, right):
    return left - right


def mul_values(left, right):
    return left * right


def div_values(numerator, denominator):
    """
    True division with IEEE float semantics and faulting integer zero.

    Raises:
        ZeroDivisionError: If both operands are integers and the
                           denominator is zero.
    """
    if (is_integer_value(numerator) and is_integer_value(denominator)
            and has_zero(denominator)):
        raise ZeroDivisionError("integer division by zero")

    try:
        with np.errstate(divide='ignore', invalid='ignore'):
            return numerator / denominator
    except ZeroDivisionError:
        # Python floats raise, fall back to IEEE results
        with np.errstate(divide='ignore', invalid='ignore'):
            return _scalar(np.true_divide(numerator, denominator))


def floordiv_values(numerator, denominator):
    """Floor division with the same zero handling as div_values."""
    if (is_integer_value(numerator) and is_integer_value(denominator)
            and has_zero(denominator)):
        raise ZeroDivisionError("integer division by zero")

    try:
        with np.errstate(divide='ignore', invalid='ignore'):
            return numerator // denominator
    except ZeroDivisionError:
        with np.errstate(divide='ignore', invalid='ignore'):
            return _scalar(np.floor_divide(numerator, denominator))


def rem_values(dividend, divisor):
    """
    Remainder taking the sign of the dividend.

    Integers use truncating division (-7 rem 3 == -1), floats use fmod.
    Float remainder by zero is nan; integer remainder by zero raises.
    """
    if is_integer_value(dividend) and is_integer_value(divisor):
        if has_zero(divisor):
            raise ZeroDivisionError("integer remainder by zero")
        if isinstance(dividend, int) and isinstance(divisor, int):
            remainder = abs(dividend) % abs(divisor)
            return -remainder if dividend < 0 else remainder
        return _scalar(np.fmod(dividend, divisor))

    if not (_is_numpy(dividend) or _is_numpy(divisor)) and divisor != 0:
        return math.fmod(dividend, divisor)

    with np.errstate(divide='ignore', invalid='ignore'):
        return _scalar(np.fmod(dividend, divisor))


def pow_values(base, exponent):
    """Power with IEEE results for a float zero raised to a negative power."""
    try:
        return base ** exponent
    except ZeroDivisionError:
        if is_integer_value(base) and is_integer_value(exponent):
            raise
        with np.errstate(divide='ignore', invalid='ignore'):
            return _scalar(np.float_power(base, exponent))


def mul_add_values(value, multiplier, addend):
    """Compute value * multiplier + addend."""
    return value * multiplier + addend
