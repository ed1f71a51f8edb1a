"""
genmatrix: generic dense matrices for Python.

A single immutable Matrix type over any element type that supports
addition, subtraction, multiplication and a default value: int, float,
complex, fractions.Fraction, decimal.Decimal, numpy scalars, or your own.

Submodules:
    core: exceptions, element protocol, validators, tolerance tiers
    dense: the Matrix implementation
"""

__version__ = "0.1.0"

from genmatrix.dense import Matrix
from genmatrix.core import (
    Element,
    ToleranceTier,
    EXACT,
    FP64,
    FP32,
    GenMatrixError,
    ValidationError,
    ShapeError,
    InvalidDimensionError,
    IndexOutOfBoundsError,
    DimensionMismatchError,
)

__all__ = [
    "__version__",
    "Matrix",
    "Element",
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP32",
    "GenMatrixError",
    "ValidationError",
    "ShapeError",
    "InvalidDimensionError",
    "IndexOutOfBoundsError",
    "DimensionMismatchError",
]
