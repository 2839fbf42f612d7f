"""Token kinds and the token value type shared by lexer, parser and evaluator."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenType(enum.Enum):
    """Kinds of lexical tokens."""

    NUMBER = enum.auto()
    OPERATOR = enum.auto()  # + - * / ^
    FUNCTION = enum.auto()  # sin, cos, !, unary_minus
    CONSTANT = enum.auto()  # PI
    VARIABLE = enum.auto()
    LEFT_BRACKET = enum.auto()  # ( [ {
    RIGHT_BRACKET = enum.auto()  # ) ] }
    COMMA = enum.auto()


@dataclass(frozen=True)
class Token:
    """A single token: its kind, its text and, for numbers, its value."""

    type: TokenType
    lexeme: str
    value: float = 0.0

    @classmethod
    def number(cls, value: float) -> Token:
        """Build a numeric token with an empty lexeme."""
        return cls(TokenType.NUMBER, "", float(value))