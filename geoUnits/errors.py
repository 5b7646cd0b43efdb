"""Exceptions raised by geoUnits."""


class GeoUnitsError(Exception):
    """Base class for all geoUnits errors."""


class DimensionMismatch(GeoUnitsError, TypeError):
    """Raised when an operation combines incompatible dimensions."""

    def __init__(self, operation, left, right=None):
        self.operation = operation
        self.left = left
        self.right = right
        if right is None:
            msg = f"'{operation}' is not defined for dimension {left}"
        else:
            msg = (f"Cannot apply '{operation}' to dimensions {left} "
                   f"and {right}")
        super().__init__(msg)


class UnitDefinitionError(GeoUnitsError, ValueError):
    """Raised for invalid unit descriptors or conflicting registrations."""


class UnknownUnitError(GeoUnitsError, KeyError):
    """Raised when a unit name or abbreviation is not registered."""

    def __str__(self):
        # KeyError quotes its argument, keep the plain message instead
        return str(self.args[0]) if self.args else ''
