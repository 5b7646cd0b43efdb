from dataclasses import dataclass
import inspect
from functools import wraps
import numpy as np
from rich.console import Console
from rich.table import Table
from .DEFAULTS import DEFAULTS
from .conversions import registry
from .arithmetic import require_same_dimension
from .errors import DimensionMismatch, UnknownUnitError
from .logger import logger
from .quantity import Quantity
from .unitSystems import unitSystems


@dataclass
class UnitSystem:
    """
    Units Class for selecting the input and output unit systems.

    Plain numbers passed into geoUnits helpers are read in the input system
    and base values are reported in the output system.
    """
    __slots__ = ['_input', '_output']

    def __init__(self, input: str = 'SI', output: str = 'SI'):
        self.input = input
        self.output = output

    @property
    def input(self) -> str:
        """Get the current input unit system."""
        return self._input

    @input.setter
    def input(self, value: str):
        """Set the input unit system."""
        self._input = _system_name(value)

    @property
    def output(self) -> str:
        """Get the current output unit system."""
        return self._output

    @output.setter
    def output(self, value: str):
        """Set the output unit system."""
        self._output = _system_name(value)

    @property
    def input_units(self):
        """Get the units for the current input unit system."""
        return unitSystems[self._input].units

    @property
    def output_units(self):
        """Get the units for the current output unit system."""
        return unitSystems[self._output].units

    @property
    def SI_units(self):
        """Get SI Units."""
        return unitSystems['SI'].units

    def __str__(self):
        return self._make_table()

    def __repr__(self):
        return f"UnitSystem(input='{self._input}', output='{self._output}')"

    def _make_table(self):
        """
        Create a formatted table representation of the UnitSystem using rich.

        Returns:
            str: The formatted string representation of the UnitSystem.
        """
        table = Table()
        table.add_column("Quantity", style="bold")
        table.add_column(f"Input Unit: {self._input}")
        table.add_column(f"Output Unit: {self._output}")

        for kind in sorted(self.input_units.keys()):
            table.add_row(kind, self.input_units[kind],
                          self.output_units[kind])

        console = Console()
        with console.capture() as capture:
            console.print(table)
        return capture.get()


def _system_name(name):
    name = name.upper()
    if name not in unitSystems:
        logger.critical(f"Unknown unit system '{name}'. Available systems "
                        f"are: {list(unitSystems)}", error=ValueError)
    return name


# Initialize UnitSystem
units = UnitSystem(DEFAULTS.input_units, DEFAULTS.output_units)


def _kind_name(kind):
    # Accept 'LENGTH' or a Quantity kind such as Length
    if isinstance(kind, type) and issubclass(kind, Quantity):
        if kind.kind_name is None:
            raise UnknownUnitError(f"{kind.__name__} is not a quantity kind")
        return kind.kind_name
    return kind.upper()


_NUMERIC_TYPES = (float, int, np.integer, np.floating)


def parse_units(input_value, kind):
    """
    Parse and convert input values to base units.

    Accepted inputs:
        * None, returned as-is
        * a number, read in the current input unit system
        * a (value, unit) pair, value may be a number or a sequence
        * a Quantity of the matching dimension
        * a sequence of any of the above, returned as a numpy array

    Args:
        input_value: The value to convert.
        kind (str or type): Quantity kind, e.g. 'LENGTH' or Length.

    Returns:
        The value in base units.

    Raises:
        DimensionMismatch: If a unit or Quantity has the wrong dimension.
        ValueError: If a two element sequence is not (value, unit).
    """
    if input_value is None:
        return None

    kind = _kind_name(kind)
    dimension = registry.dimension(kind)

    if isinstance(input_value, Quantity):
        if input_value.dimension != dimension:
            raise DimensionMismatch('parse_units', dimension,
                                    input_value.dimension)
        return input_value.value

    if isinstance(input_value, _NUMERIC_TYPES):
        input_unit = units.input_units.get(kind)
        if input_unit is None:
            # Kinds outside the unit systems are read in base units
            return input_value
        return registry.to_base(input_unit, input_value)

    if isinstance(input_value, (tuple, list, np.ndarray)):
        if len(input_value) == 1:
            return parse_units(input_value[0], kind)

        if len(input_value) == 2 and isinstance(input_value[1], str):
            value, unit = input_value
            unit = registry[unit]
            if unit.dimension != dimension:
                raise DimensionMismatch('parse_units', dimension,
                                        unit.dimension)
            if isinstance(value, _NUMERIC_TYPES):
                return unit.to_base(value)
            elif isinstance(value, (list, tuple, np.ndarray)):
                return unit.to_base(np.asarray(value))
            logger.critical("Two-element sequence must be (numeric_value, "
                            f"unit_string), got {input_value!r}",
                            error=ValueError)

        return np.array([parse_units(v, kind) for v in input_value])

    # If none of the above cases match, return as-is
    return input_value


def toBase(value, kind):
    """
    Convert a given value from input units to base units.

    Args:
        value: The value to convert (see parse_units).
        kind (str): The quantity kind (e.g., 'TEMPERATURE').

    Returns:
        The value converted to base units.
    """
    return parse_units(value, kind)


def fromBase(value, kind):
    """
    Convert a base unit value to the current output units.

    Args:
        value: Base unit value or Quantity.
        kind (str): The quantity kind (e.g., 'TEMPERATURE').

    Returns:
        The value converted to the output units.
    """
    kind = _kind_name(kind)
    if isinstance(value, Quantity):
        require_same_dimension('fromBase', registry.dimension(kind),
                               value.dimension)
        value = value.value

    output_unit = units.output_units.get(kind)
    if output_unit is None:
        return value
    return registry.from_base(output_unit, value)


def make_quantity(value, kind):
    """Build a Quantity of ``kind`` from any input accepted by parse_units."""
    kind = _kind_name(kind)
    return Quantity.from_base(parse_units(value, kind),
                              registry.dimension(kind))


def _annotated_kind(annotation):
    if annotation is inspect.Parameter.empty:
        return None
    if isinstance(annotation, type) and issubclass(annotation, Quantity):
        return annotation.kind_name
    if isinstance(annotation, str) and annotation.upper() in registry.kinds:
        return annotation.upper()
    return None


def inputParser(func):
    """
    Decorator to check function annotations and convert to base units.

    Arguments annotated with a kind name ('LENGTH') or a Quantity kind
    (Length) are parsed with parse_units. Arguments with no kind annotation
    are passed as-is.
    """
    sig = inspect.signature(func)
    kinds = {name: _annotated_kind(param.annotation)
             for name, param in sig.parameters.items()}

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            bound = sig.bind(*args, **kwargs)
        except TypeError as e:
            logger.error(f"Invalid arguments for '{func.__qualname__}': {e}")
            logger.info(f"Valid argument names are: "
                        f"{list(sig.parameters)}")
            raise

        for name, val in bound.arguments.items():
            kind = kinds.get(name)
            if kind is None or val is None:
                continue
            bound.arguments[name] = parse_units(val, kind)

        return func(*bound.args, **bound.kwargs)

    return wrapper


def output_converter(kind):
    """
    A decorator that converts the output of a function from base units to
    the current output unit system.

    Args:
        kind (str): The quantity kind (must be defined in unitSystems.py).

    Returns:
        function: A wrapper function that applies the conversion.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            output = func(*args, **kwargs)
            return fromBase(output, kind)

        return wrapper

    return decorator


def addUnitAccessors(cls):
    """
    Decorator to add per-unit constructors and views to a Quantity kind.

    For every unit registered for the kind's dimension two attributes are
    generated from the unit name, e.g. for 'kilometer':

        Length.from_kilometer(2.5)   -> Length(2500.0)
        length.as_kilometer()        -> 2.5

    The decorator can be applied again after new units are registered.

    Args:
        cls (class): The Quantity kind to decorate.

    Returns:
        class: The decorated class.
    """
    if cls.kind_name is None:
        logger.warn(f"The class {cls.__name__} is not a quantity kind, no "
                    "unit accessors added")
        return cls

    for unit in cls.registry.units_of(cls.kind_dimension()):
        attr = unit.attribute_name
        from_name = f'from_{attr}'
        as_name = f'as_{attr}'

        # Never shadow a hand written attribute
        existing = [getattr(cls, name, None) for name in (from_name, as_name)]
        if any(item is not None and not getattr(item, '_unit_accessor', False)
               for item in existing):
            logger.debug(f"Skipping accessors for unit '{unit.name}' on "
                         f"{cls.__name__}, name is taken")
            continue

        def from_unit(klass, value, unit=unit):
            return klass.from_unit(unit, value)

        def as_unit(self, unit=unit):
            return self.to(unit)

        from_unit.__name__ = from_name
        from_unit.__doc__ = f"Create a {cls.__name__} from {unit.plural}."
        from_unit._unit_accessor = True
        as_unit.__name__ = as_name
        as_unit.__doc__ = f"Value in {unit.plural}."
        as_unit._unit_accessor = True

        setattr(cls, from_name, classmethod(from_unit))
        setattr(cls, as_name, as_unit)

    return cls
