"""
Tolerance tiers for approximate matrix comparison.

Defines precision expectations for floating-point element types:
- EXACT: no slack, equivalent to element-wise ==
- FP64: double precision accumulated rounding
- FP32: relaxed for single-precision element types (e.g. numpy.float32)

Used by Matrix.allclose (via within_tolerance) and by the test suite.
"""

import decimal
import numbers
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='No tolerance; integer and rational element types',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, rounding from summed products',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision element types',
)


def select_tolerance(element_type: object) -> ToleranceTier:
    """
    Select appropriate tolerance tier for a matrix element type.

    Rationals, integers and Decimal compare exactly, as do types that
    are not numbers.Number (user-defined elements need not support abs)
    and factories that are not classes. numpy floating types narrower
    than 64 bits get FP32; other numbers get FP64.
    """
    if not isinstance(element_type, type):
        return EXACT
    if not issubclass(element_type, numbers.Number):
        return EXACT
    if issubclass(element_type, (numbers.Rational, decimal.Decimal)):
        return EXACT
    if issubclass(element_type, np.floating) and np.finfo(element_type).bits < 64:
        return FP32
    return FP64


def within_tolerance(a: object, b: object, tier: ToleranceTier) -> bool:
    """
    Check |a - b| <= atol + rtol * |b|.

    A tier with zero rtol and atol falls back to ==. Decimal operands get
    the tolerances as Decimal, since Decimal refuses to mix with float.
    """
    if tier.rtol == 0.0 and tier.atol == 0.0:
        return a == b
    rtol, atol = tier.rtol, tier.atol
    if isinstance(b, decimal.Decimal) or isinstance(a, decimal.Decimal):
        rtol, atol = decimal.Decimal(repr(rtol)), decimal.Decimal(repr(atol))
    return abs(a - b) <= atol + rtol * abs(b)
