import numpy as np
from typing import Callable

from .color import Color
from .operands import as_operand

ChannelOp = Callable[[np.ndarray, np.ndarray], np.ndarray]


def _safe_divide(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Channel-wise division; a channel whose divisor is exactly 0 yields 0."""
    return np.divide(a, b, out=np.zeros_like(a), where=b != 0)


def operate(lhs: object, rhs: object, op: ChannelOp, operation: str) -> Color:
    """
    Apply ``op`` channel-wise to two operands and build a new Color.

    Each operand is a Color or a real number. The raw per-channel results,
    alpha included, go through the Color constructor, which clamps and rounds.
    """
    a = np.array(as_operand(lhs, operation).channels(), dtype=float)
    b = np.array(as_operand(rhs, operation).channels(), dtype=float)

    with np.errstate(over="ignore", invalid="ignore"):
        result = op(a, b)

    return Color(*result.tolist())


def add(lhs: object, rhs: object) -> Color:
    return operate(lhs, rhs, np.add, "add")


def sub(lhs: object, rhs: object) -> Color:
    return operate(lhs, rhs, np.subtract, "subtract")


def mul(lhs: object, rhs: object) -> Color:
    return operate(lhs, rhs, np.multiply, "multiply")


def div(lhs: object, rhs: object) -> Color:
    return operate(lhs, rhs, _safe_divide, "divide")


# -----------------------
# Operator overloads
# -----------------------
def _binary(fn: Callable[[object, object], Color]):
    def operation(self, other):
        return fn(self, other)
    return operation


def _reflected(fn: Callable[[object, object], Color]):
    # other <op> self: operands keep their written order
    def operation(self, other):
        return fn(other, self)
    return operation


Color.__add__ = _binary(add)  # type: ignore[attr-defined]
Color.__sub__ = _binary(sub)  # type: ignore[attr-defined]
Color.__mul__ = _binary(mul)  # type: ignore[attr-defined]
Color.__truediv__ = _binary(div)  # type: ignore[attr-defined]
Color.__radd__ = _reflected(add)  # type: ignore[attr-defined]
Color.__rsub__ = _reflected(sub)  # type: ignore[attr-defined]
Color.__rmul__ = _reflected(mul)  # type: ignore[attr-defined]
Color.__rtruediv__ = _reflected(div)  # type: ignore[attr-defined]
