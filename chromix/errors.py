"""Exceptions raised by chromix."""


class ColorError(Exception):
    """Base class for chromix errors."""


class InvalidOperand(ColorError, TypeError):
    """An arithmetic operand is neither a Color nor a real number."""

    def __init__(self, operation: str, operand: object) -> None:
        self.operation = operation
        self.operand = operand
        super().__init__(
            f"Attempt to {operation} {operand!r} with a Color "
            f"(a {type(operand).__name__} value)"
        )


class InvalidArgument(ColorError, ValueError):
    """A channel argument is outside the domain the operation accepts."""
