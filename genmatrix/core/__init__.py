"""
Core infrastructure for genmatrix.

Shared abstractions used by the dense Matrix implementation.

Key components:
    protocols: Element protocol (capability set for matrix elements)
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Tolerance tiers for approximate comparison
"""

from genmatrix.core.protocols import Element, ElementFactory, REQUIRED_OPERATIONS
from genmatrix.core.tolerances import (
    ToleranceTier,
    EXACT,
    FP64,
    FP32,
    select_tolerance,
)
from genmatrix.core.exceptions import (
    GenMatrixError,
    ValidationError,
    ShapeError,
    InvalidDimensionError,
    IndexOutOfBoundsError,
    DimensionMismatchError,
)

__all__ = [
    # Protocols
    "Element",
    "ElementFactory",
    "REQUIRED_OPERATIONS",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP32",
    "select_tolerance",
    # Exceptions
    "GenMatrixError",
    "ValidationError",
    "ShapeError",
    "InvalidDimensionError",
    "IndexOutOfBoundsError",
    "DimensionMismatchError",
]
