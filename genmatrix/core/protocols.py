"""
Core protocols for genmatrix.

A Matrix never inspects its elements beyond a small capability set:
addition, subtraction and multiplication closed over the element type,
a value copy, and a default value. We use Protocol (structural typing)
rather than ABC (nominal typing) so int, float, Fraction, Decimal,
complex and numpy scalars all qualify without registration.

Design Principles:
    - Minimal contracts: prescribe only what the arithmetic needs
    - Copy comes from the copy module, default from the element type's
      zero-argument constructor, so neither appears in the protocol
"""

from typing import Any, Callable, Protocol, runtime_checkable

# Dunder methods every element must provide
REQUIRED_OPERATIONS = ('__add__', '__sub__', '__mul__')


@runtime_checkable
class Element(Protocol):
    """
    Capability set required of matrix elements.

    Each operation is expected to return a value of the same type
    (T op T -> T). That closure is a convention, not something
    checked at runtime: the Matrix layer passes whatever the element
    arithmetic returns straight through.
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...


# Zero-argument callable producing the element type's default value.
# Built-in numeric types are their own factories: int() == 0, float() == 0.0.
ElementFactory = Callable[[], Any]
