"""
Dimension vectors over the seven SI base dimensions.

A dimension is an immutable tuple of integer exponents, one per basis
dimension, in the order (L, M, T, I, TH, N, J). Multiplying quantities adds
exponent vectors, dividing subtracts them and integer powers scale them.
"""
import math
from numbers import Integral


# Basis symbols and the matching lowercase keyword names
BASIS = ('L', 'M', 'T', 'I', 'TH', 'N', 'J')
BASIS_NAMES = ('length', 'mass', 'time', 'current', 'temperature',
               'amount', 'luminosity')

_SUPERSCRIPTS = str.maketrans('-0123456789', '⁻⁰¹²³⁴⁵⁶⁷⁸⁹')


class DimensionVector:
    """
    Immutable integer exponent vector over the SI basis.

    Instances compare and hash component-wise, so they can be used as
    dictionary keys by the unit registry.
    """
    __slots__ = ['_exponents']

    def __init__(self, L=0, M=0, T=0, I=0, TH=0, N=0, J=0):
        exponents = (L, M, T, I, TH, N, J)
        for symbol, exp in zip(BASIS, exponents):
            if isinstance(exp, bool) or not isinstance(exp, Integral):
                raise TypeError(f"Dimension exponent '{symbol}' must be an "
                                f"integer, got {exp!r}")
        object.__setattr__(self, '_exponents',
                           tuple(int(exp) for exp in exponents))

    @classmethod
    def from_mapping(cls, mapping):
        """
        Create a DimensionVector from a mapping of basis symbols or names to
        exponents, e.g. {'L': 1, 'T': -2} or {'length': 1, 'time': -2}.
        """
        kwargs = {}
        for key, exp in dict(mapping).items():
            if key in BASIS:
                symbol = key
            elif key in BASIS_NAMES:
                symbol = BASIS[BASIS_NAMES.index(key)]
            else:
                raise KeyError(f"Unknown basis dimension '{key}', valid "
                               f"entries are {BASIS} or {BASIS_NAMES}")
            kwargs[symbol] = kwargs.get(symbol, 0) + exp
        return cls(**kwargs)

    @classmethod
    def from_tuple(cls, exponents):
        exponents = tuple(exponents)
        if len(exponents) != len(BASIS):
            raise ValueError(f"Expected {len(BASIS)} exponents, got "
                             f"{len(exponents)}")
        return cls(*exponents)

    @property
    def exponents(self):
        return self._exponents

    def as_dict(self):
        """Return the non-zero exponents keyed by basis symbol."""
        return {symbol: exp for symbol, exp in zip(BASIS, self._exponents)
                if exp != 0}

    def is_dimensionless(self):
        return not any(self._exponents)

    # Algebra
    def __mul__(self, other):
        if not isinstance(other, DimensionVector):
            return NotImplemented
        return add(self, other)

    def __truediv__(self, other):
        if not isinstance(other, DimensionVector):
            return NotImplemented
        return sub(self, other)

    def __pow__(self, n):
        return scale(self, n)

    def squared(self):
        return scale(self, 2)

    def cubed(self):
        return scale(self, 3)

    def inverse(self):
        return scale(self, -1)

    # Value semantics
    def __setattr__(self, name, value):
        raise AttributeError("DimensionVector is immutable")

    def __eq__(self, other):
        if not isinstance(other, DimensionVector):
            return NotImplemented
        return self._exponents == other._exponents

    def __hash__(self):
        return hash(self._exponents)

    def __iter__(self):
        return iter(self._exponents)

    def __len__(self):
        return len(self._exponents)

    def __getitem__(self, key):
        if isinstance(key, str):
            return self._exponents[BASIS.index(key)]
        return self._exponents[key]

    def __reduce__(self):
        return (DimensionVector, self._exponents)

    def __repr__(self):
        args = ', '.join(f'{symbol}={exp}' for symbol, exp
                         in self.as_dict().items())
        return f'DimensionVector({args})'

    def __str__(self):
        if self.is_dimensionless():
            return 'dimensionless'

        parts = []
        for symbol, exp in self.as_dict().items():
            if exp == 1:
                parts.append(symbol)
            else:
                parts.append(f'{symbol}{str(exp).translate(_SUPERSCRIPTS)}')
        return '·'.join(parts)


def add(a, b):
    """Componentwise sum of two dimension vectors."""
    return DimensionVector(*(x + y for x, y in zip(a.exponents, b.exponents)))


def sub(a, b):
    """Componentwise difference of two dimension vectors."""
    return DimensionVector(*(x - y for x, y in zip(a.exponents, b.exponents)))


def scale(a, n):
    """Multiply every exponent of ``a`` by the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise TypeError(f"Dimensions can only be raised to integer powers, "
                        f"got {n!r}")
    return DimensionVector(*(x * n for x in a.exponents))


def scale_fractional(a, exponent):
    """
    Scale ``a`` by a real exponent.

    Returns the scaled vector when every resulting exponent is integral
    (sqrt of an area is a length) and None otherwise.
    """
    if not math.isfinite(exponent):
        return None

    scaled = []
    for exp in a.exponents:
        value = exp * exponent
        if value != int(value):
            return None
        scaled.append(int(value))
    return DimensionVector(*scaled)


# Base dimensions
DIMENSIONLESS = DimensionVector()
LENGTH = DimensionVector(L=1)
MASS = DimensionVector(M=1)
TIME = DimensionVector(T=1)
CURRENT = DimensionVector(I=1)
TEMPERATURE = DimensionVector(TH=1)
AMOUNT = DimensionVector(N=1)
LUMINOSITY = DimensionVector(J=1)

# Derived dimensions
AREA = LENGTH.squared()
VOLUME = LENGTH.cubed()
FREQUENCY = TIME.inverse()
VELOCITY = LENGTH / TIME
ACCELERATION = VELOCITY / TIME
FORCE = MASS * ACCELERATION
PRESSURE = FORCE / AREA
ENERGY = FORCE * LENGTH
POWER = ENERGY / TIME
DENSITY = MASS / VOLUME
MASSFLOW = MASS / TIME
