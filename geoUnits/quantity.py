"""
Quantity: a numeric value tagged with its dimension.

The stored value is always the magnitude in the base unit of the dimension.
Unit-specific views are computed on demand by ``to``. Quantities are
immutable; every operation returns a new Quantity.

Quantity kinds (Length, Area, ...) are subclasses bound to one dimension.
Arithmetic results are returned as the first kind registered for the
resulting dimension, or as a plain Quantity if there is none.
"""
import operator
from numbers import Number
import numpy as np
from .DEFAULTS import DEFAULTS
from .arithmetic import (add_values, div_values, floordiv_values,
                         mul_add_values, mul_values, multiply_dimensions,
                         divide_dimensions, pow_values, power_dimension,
                         rem_values, require_same_dimension, sub_values,
                         _scalar)
from .conversions import registry as default_registry
from .dimension import DIMENSIONLESS, DimensionVector
from .errors import DimensionMismatch
from .numeric import NumericExtensions, dimensionmethod
from .unitSystems import unitSystems


# First kind registered for each dimension
_KINDS = {}


def _is_operand(other):
    return isinstance(other, (Quantity, Number, np.ndarray, np.generic))


def _make(value, dimension):
    cls = _KINDS.get(dimension, Quantity)
    obj = object.__new__(cls)
    object.__setattr__(obj, '_value', value)
    object.__setattr__(obj, '_dimension', dimension)
    return obj


class Quantity(NumericExtensions):
    """
    Numeric value stored in base units and tagged with a DimensionVector.

    Args:
        value: Magnitude in the base unit (int, float, numpy scalar or
               array; lists and tuples are converted to numpy arrays).
        dimension (DimensionVector or str): Dimension tag or kind name.
                  Defaults to the kind's dimension, or dimensionless.
    """
    __slots__ = ['_value', '_dimension']

    # Set on kinds
    _kind_dimension = None
    kind_name = None
    registry = default_registry

    # numpy defers binary operators to Quantity
    __array_ufunc__ = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        dimension = cls.__dict__.get('_kind_dimension')
        if dimension is None:
            return
        if cls.__dict__.get('kind_name') is None:
            cls.kind_name = cls.__name__.upper()
        _KINDS.setdefault(dimension, cls)
        cls.registry.name_dimension(cls.kind_name, dimension)

    def __new__(cls, value=None, dimension=None):
        # Quantity(v, LENGTH) builds the kind bound to that dimension
        if cls is Quantity:
            if dimension is None:
                dimension = DIMENSIONLESS
            elif not isinstance(dimension, DimensionVector):
                dimension = cls.registry.dimension(dimension)
            cls = _KINDS.get(dimension, Quantity)
        return object.__new__(cls)

    def __init__(self, value, dimension=None):
        kind_dimension = type(self)._kind_dimension
        if dimension is None:
            dimension = (kind_dimension if kind_dimension is not None
                         else DIMENSIONLESS)
        elif not isinstance(dimension, DimensionVector):
            dimension = self.registry.dimension(dimension)

        if kind_dimension is not None and dimension != kind_dimension:
            raise DimensionMismatch(type(self).__name__, kind_dimension,
                                    dimension)

        if isinstance(value, Quantity):
            raise TypeError("Quantity value must be a number or array, "
                            "use Quantity.from_base or .to to rewrap")
        if isinstance(value, (list, tuple)):
            value = np.asarray(value)

        object.__setattr__(self, '_value', value)
        object.__setattr__(self, '_dimension', dimension)

    # Construction
    @classmethod
    def kind_dimension(cls):
        if cls._kind_dimension is None:
            return DIMENSIONLESS
        return cls._kind_dimension

    @classmethod
    def _new_kind(cls, value, dimension):
        return _make(value, dimension)

    def _new(self, value, dimension):
        return _make(value, dimension)

    @classmethod
    def from_base(cls, value, dimension=None):
        """Create a quantity from a value already in base units."""
        quantity = cls(value, dimension)
        return _make(quantity._value, quantity._dimension)

    @classmethod
    def from_unit(cls, unit, value):
        """
        Create a quantity from a value expressed in ``unit``.

        Args:
            unit (Unit or str): Unit descriptor, name or abbreviation.
            value: Value in that unit.
        """
        unit = cls.registry[unit]
        if cls._kind_dimension is not None:
            require_same_dimension('from_unit', cls._kind_dimension,
                                   unit.dimension)
        if isinstance(value, (list, tuple)):
            value = np.asarray(value)
        return _make(unit.to_base(value), unit.dimension)

    # Accessors
    @property
    def value(self):
        """Magnitude in the base unit."""
        return self._value

    @property
    def dimension(self):
        return self._dimension

    def to_base(self):
        return self._value

    def to(self, unit):
        """
        Value of this quantity expressed in ``unit``.

        Raises:
            DimensionMismatch: If the unit has a different dimension.
        """
        unit = self.registry[unit]
        require_same_dimension('to', self._dimension, unit.dimension)
        return unit.from_base(self._value)

    def in_system(self, system='SI'):
        """
        Express the quantity in a named unit system.

        Returns:
            tuple: (value, unit abbreviation)
        """
        kind = self.kind_name or self.registry.kind_of(self._dimension)
        unit = unitSystems[system.upper()].units[kind]
        return self.to(unit), unit

    def _coerce(self, other):
        if isinstance(other, Quantity):
            return other._value, other._dimension
        return other, DIMENSIONLESS

    # Identities
    @dimensionmethod
    def zero(cls, dimension):
        """Additive identity carrying the dimension tag."""
        return _make(0, dimension)

    @dimensionmethod
    def one(cls, dimension):
        """Value one carrying the dimension tag."""
        return _make(1, dimension)

    def is_zero(self):
        return _scalar(self._value == 0)

    def is_one(self):
        return _scalar(self._value == 1)

    def isclose(self, other, rel_tol=None, abs_tol=0.0):
        """Compare two quantities of the same dimension with a tolerance."""
        value, dimension = self._coerce(other)
        if dimension != self._dimension:
            return False
        rel_tol = DEFAULTS.rel_tol if rel_tol is None else rel_tol
        return bool(np.all(np.isclose(self._value, value, rtol=rel_tol,
                                      atol=abs_tol)))

    # Additive operations, same dimension only
    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        value, dimension = self._coerce(other)
        require_same_dimension('add', self._dimension, dimension)
        return _make(add_values(self._value, value), self._dimension)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        value, dimension = self._coerce(other)
        require_same_dimension('add', dimension, self._dimension)
        return _make(add_values(value, self._value), self._dimension)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        value, dimension = self._coerce(other)
        require_same_dimension('sub', self._dimension, dimension)
        return _make(sub_values(self._value, value), self._dimension)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        value, dimension = self._coerce(other)
        require_same_dimension('sub', dimension, self._dimension)
        return _make(sub_values(value, self._value), self._dimension)

    def __mod__(self, other):
        if not _is_operand(other):
            return NotImplemented
        if isinstance(other, Quantity):
            require_same_dimension('rem', self._dimension, other._dimension)
            other = other._value
        return _make(rem_values(self._value, other), self._dimension)

    def __rmod__(self, other):
        if not _is_operand(other):
            return NotImplemented
        require_same_dimension('rem', DIMENSIONLESS, self._dimension)
        return _make(rem_values(other, self._value), DIMENSIONLESS)

    # Multiplicative operations, dimensions combine
    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        value, dimension = self._coerce(other)
        return _make(mul_values(self._value, value),
                     multiply_dimensions(self._dimension, dimension))

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        value, dimension = self._coerce(other)
        return _make(mul_values(value, self._value),
                     multiply_dimensions(dimension, self._dimension))

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        value, dimension = self._coerce(other)
        return _make(div_values(self._value, value),
                     divide_dimensions(self._dimension, dimension))

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        value, dimension = self._coerce(other)
        return _make(div_values(value, self._value),
                     divide_dimensions(dimension, self._dimension))

    def __floordiv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        value, dimension = self._coerce(other)
        return _make(floordiv_values(self._value, value),
                     divide_dimensions(self._dimension, dimension))

    def __rfloordiv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        value, dimension = self._coerce(other)
        return _make(floordiv_values(value, self._value),
                     divide_dimensions(dimension, self._dimension))

    def __pow__(self, exponent):
        if not _is_operand(exponent):
            return NotImplemented
        if isinstance(exponent, Quantity):
            require_same_dimension('pow', DIMENSIONLESS, exponent._dimension)
            exponent = exponent._value
        return _make(pow_values(self._value, exponent),
                     power_dimension(self._dimension, exponent))

    def __rpow__(self, base):
        if not _is_operand(base):
            return NotImplemented
        require_same_dimension('pow', DIMENSIONLESS, self._dimension)
        return _make(pow_values(base, self._value), DIMENSIONLESS)

    def __neg__(self):
        return _make(-self._value, self._dimension)

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()

    # Fused multiply-add
    def mul_add(self, a, b):
        """
        Compute self * a + b where a and b share this quantity's dimension.

        The result keeps this quantity's dimension.
        """
        require_same_dimension('mul_add', self._dimension, a.dimension)
        require_same_dimension('mul_add', self._dimension, b.dimension)
        return _make(mul_add_values(self._value, a.value, b.value),
                     self._dimension)

    def mul_add_scalar(self, a, b):
        """Compute self * a + b with raw numbers a and b."""
        return _make(mul_add_values(self._value, a, b), self._dimension)

    def mul_add_mixed(self, multiplier, addend):
        """Compute self * multiplier + addend for a raw multiplier."""
        require_same_dimension('mul_add', self._dimension, addend.dimension)
        return _make(mul_add_values(self._value, multiplier, addend.value),
                     self._dimension)

    def mul_add_dimensional(self, multiplier, addend):
        """
        Compute self * multiplier + addend across dimensions.

        The addend must already carry the product dimension.

        Raises:
            DimensionMismatch: If addend's dimension differs from
                               self.dimension * multiplier.dimension.
        """
        product = multiply_dimensions(self._dimension, multiplier.dimension)
        require_same_dimension('mul_add', product, addend.dimension)
        return _make(mul_add_values(self._value, multiplier.value,
                                    addend.value), product)

    # Comparisons, same dimension only
    def _compare(self, other, op, name):
        if not _is_operand(other):
            return NotImplemented
        value, dimension = self._coerce(other)
        require_same_dimension(name, self._dimension, dimension)
        result = _scalar(op(self._value, value))
        if isinstance(result, np.bool_):
            return bool(result)
        return result

    def __lt__(self, other):
        return self._compare(other, operator.lt, 'lt')

    def __le__(self, other):
        return self._compare(other, operator.le, 'le')

    def __gt__(self, other):
        return self._compare(other, operator.gt, 'gt')

    def __ge__(self, other):
        return self._compare(other, operator.ge, 'ge')

    def __eq__(self, other):
        if not _is_operand(other):
            return NotImplemented
        value, dimension = self._coerce(other)
        if dimension != self._dimension:
            return False
        result = _scalar(self._value == value)
        if isinstance(result, np.bool_):
            return bool(result)
        return result

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        if isinstance(result, np.ndarray):
            return ~result
        return not result

    def __hash__(self):
        # Dimensionless quantities compare equal to plain numbers
        if self._dimension.is_dimensionless():
            return hash(self._value)
        return hash((self._value, self._dimension))

    # Conversions to plain numbers, dimensionless only
    def __float__(self):
        require_same_dimension('float', DIMENSIONLESS, self._dimension)
        return float(self._value)

    def __int__(self):
        require_same_dimension('int', DIMENSIONLESS, self._dimension)
        return int(self._value)

    def __bool__(self):
        return bool(self._value)

    # Array values
    def __len__(self):
        return len(self._value)

    def __getitem__(self, key):
        return _make(self._value[key], self._dimension)

    # Immutability
    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self):
        return self

    def __reduce__(self):
        return (_make, (self._value, self._dimension))

    # Display
    def _unit_label(self):
        base = self.registry.get_base(self._dimension)
        if base is not None:
            return base.abbreviation
        return f'[{self._dimension}]'

    def __repr__(self):
        if self._kind_dimension is not None:
            return f'{type(self).__name__}({self._value!r})'
        return f'Quantity({self._value!r}, {self._dimension!r})'

    def __str__(self):
        label = self._unit_label()
        return f'{self._value} {label}'.rstrip()

    def __format__(self, spec):
        label = self._unit_label()
        return f'{format(self._value, spec)} {label}'.rstrip()


def quantity_kind(name, dimension, kind_name=None):
    """
    Create a Quantity subclass bound to ``dimension``.

    Args:
        name (str): Class name, e.g. 'Density'.
        dimension (DimensionVector): Dimension of the kind.
        kind_name (str): Kind name used in unit systems (default name.upper()).
    """
    namespace = {'__slots__': (), '_kind_dimension': dimension,
                 'kind_name': kind_name or name.upper()}
    return type(name, (Quantity,), namespace)
