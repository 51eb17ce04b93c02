"""Split expression text into typed tokens."""
from enum import Enum
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field

from expression_tree.common.errors import InvalidExpression


DIGITS = "0123456789"
OPERATORS = "+-/*"
WHITESPACE = " \t\r\n"


class TokenKind(Enum):
    INTEGER = "integer"
    OPERATOR = "operator"
    LPAREN = "("
    RPAREN = ")"


class Token(BaseModel):
    """A single lexical item of an infix or postfix expression."""

    model_config = ConfigDict(frozen=True)

    kind: TokenKind = Field(..., description="Lexical category of the token")
    text: str = Field(..., min_length=1, description="Source text of the token")
    position: int = Field(default=0, ge=0, description="Offset of the first character in the source")


def tokenize(text: str) -> Iterator[Token]:
    """
    Lazily split an expression into tokens.

    Whitespace separates tokens and is otherwise ignored. An integer literal
    is the maximal run of consecutive digits, so "12 3" gives two literals
    while "123" gives one.

    Examples:
        - "(12+3)" -> LPAREN, INTEGER "12", OPERATOR "+", INTEGER "3", RPAREN
        - "12 3 +" -> INTEGER "12", INTEGER "3", OPERATOR "+"

    :param str text: Expression text

    :return: Iterator over tokens, in source order
    :rtype: Iterator[Token]
    :raises InvalidExpression: On the first character outside the alphabet
    """
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char in DIGITS:
            start = i
            while i < length and text[i] in DIGITS:
                i += 1
            yield Token(kind=TokenKind.INTEGER, text=text[start:i], position=start)
            continue

        if char in OPERATORS:
            yield Token(kind=TokenKind.OPERATOR, text=char, position=i)
        elif char == "(":
            yield Token(kind=TokenKind.LPAREN, text=char, position=i)
        elif char == ")":
            yield Token(kind=TokenKind.RPAREN, text=char, position=i)
        elif char not in WHITESPACE:
            raise InvalidExpression(f"Invalid character {char!r} in expression", position=i)
        i += 1
