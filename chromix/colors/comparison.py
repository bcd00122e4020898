"""
Equality and ordering for Colors.

Equality is exact: all four channels, alpha included, must match, and a
Color never equals a non-Color.

Ordering compares brightness only, the V component of HSV. This is a
total preorder rather than a total order: ``Color(255, 0, 0)`` and
``Color(255, 255, 255)`` share V = 1, so neither is less than the other
and each is ``<=`` the other, although they are not equal.
"""
import operator
from typing import Callable

from ..errors import InvalidOperand
from .color import Color


def equals(lhs: object, rhs: object) -> bool:
    if not isinstance(lhs, Color) or not isinstance(rhs, Color):
        return False
    return lhs.value == rhs.value


def _brightness(color: object, operation: str) -> float:
    if not isinstance(color, Color):
        raise InvalidOperand(operation, color)
    _, _, v, _ = color.to_hsv()
    return v


def _ordering(op: Callable[[float, float], bool], operation: str):
    def compare(lhs: object, rhs: object) -> bool:
        return op(_brightness(lhs, operation), _brightness(rhs, operation))
    compare.__name__ = operation
    return compare


less_than = _ordering(operator.lt, "less_than")
less_or_equal = _ordering(operator.le, "less_or_equal")
greater_than = _ordering(operator.gt, "greater_than")
greater_or_equal = _ordering(operator.ge, "greater_or_equal")


# -----------------------
# Operator overloads
# -----------------------
def _eq(self, other):
    return equals(self, other)


def _ne(self, other):
    return not equals(self, other)


def _rich(compare):
    # Ordering against a non-Color is unsupported; Python raises TypeError.
    def operation(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return compare(self, other)
    return operation


Color.__eq__ = _eq  # type: ignore[method-assign,assignment]
Color.__ne__ = _ne  # type: ignore[method-assign,assignment]
Color.__lt__ = _rich(less_than)  # type: ignore[attr-defined]
Color.__le__ = _rich(less_or_equal)  # type: ignore[attr-defined]
Color.__gt__ = _rich(greater_than)  # type: ignore[attr-defined]
Color.__ge__ = _rich(greater_or_equal)  # type: ignore[attr-defined]
