"""Errors raised while parsing, building and evaluating expressions."""
from typing import Optional


class InvalidExpression(ValueError):
    """
    Raised on malformed syntax.

    Unbalanced parentheses, unrecognized characters and premature end of
    the token stream all end up here.
    """

    def __init__(self, message: str, position: Optional[int] = None):
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)
        self.position = position


class StackUnderflow(InvalidExpression):
    """Raised when an operator finds fewer than two operands on the stack."""


class DivisionByZero(ZeroDivisionError):
    """Raised when a `/` node has a right operand equal to zero."""
