"""Exception hierarchy for the ray tracing core.

Failures are surfaced synchronously to the caller of the failing operation.
Nothing in the core retries.

Hierarchy:
    CoalError
        DegenerateGeometryError (also a ValueError)
            SingularMatrixError
        UnknownVariantError (also a ValueError)
        SerializationError (also a ValueError)

Material field validation does not raise: an out-of-range assignment is
logged and ignored, see src.coal.materials.material.
"""


class CoalError(Exception):
    """Base class for all errors raised by the ray tracing core."""


class DegenerateGeometryError(CoalError, ValueError):
    """Raised when geometry would otherwise produce NaN or Inf silently.

    Examples are normalizing a zero-length vector or mapping through a
    singular transform.
    """


class SingularMatrixError(DegenerateGeometryError):
    """Raised when inverting a rank-deficient matrix."""


class UnknownVariantError(CoalError, ValueError):
    """Raised when a serialized record names an unregistered shape or pattern."""


class SerializationError(CoalError, ValueError):
    """Raised when a serialized record is missing fields or is mis-shaped."""
