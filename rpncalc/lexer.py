"""Turns expression text into a list of tokens."""

from __future__ import annotations

import re

from .errors import CalcSyntaxError
from .tokens import Token, TokenType

_TOKEN_RE = re.compile(
    r"""
      (?P<space>[\x20\t\n\v\f\r]+)
    | (?P<number>[0-9]+(?:\.[0-9]*)?)
    | (?P<ident>[A-Za-z_][A-Za-z0-9_]*)
    | (?P<op>[-+*/^!])
    | (?P<left>[(\[{])
    | (?P<right>[)\]}])
    | (?P<comma>,)
    """,
    re.VERBOSE | re.ASCII,
)

_CONSTANTS = frozenset({"PI"})
_FUNCTIONS = frozenset({"sin", "cos"})
_UNARY_CONTEXT = frozenset(
    {TokenType.OPERATOR, TokenType.LEFT_BRACKET, TokenType.FUNCTION}
)


def _identifier(lexeme: str) -> Token:
    if lexeme in _CONSTANTS:
        return Token(TokenType.CONSTANT, lexeme)
    if lexeme in _FUNCTIONS:
        return Token(TokenType.FUNCTION, lexeme)
    return Token(TokenType.VARIABLE, lexeme)


def _operator(op: str, previous: Token | None) -> Token:
    if op == "-" and (previous is None or previous.type in _UNARY_CONTEXT):
        return Token(TokenType.FUNCTION, "unary_minus")
    if op == "!":
        return Token(TokenType.FUNCTION, "!")
    return Token(TokenType.OPERATOR, op)


class Lexer:
    """Splits an arithmetic expression into tokens."""

    def tokenize(self, text: str) -> list[Token]:
        """Return the tokens of ``text``; raise CalcSyntaxError on a bad character."""
        tokens: list[Token] = []
        pos = 0
        while pos < len(text):
            match = _TOKEN_RE.match(text, pos)
            if match is None:
                raise CalcSyntaxError(f"Unexpected character: {text[pos]}")
            pos = match.end()
            kind, lexeme = match.lastgroup, match.group()
            if kind == "space":
                continue
            if kind == "number":
                tokens.append(Token.number(float(lexeme)))
            elif kind == "ident":
                tokens.append(_identifier(lexeme))
            elif kind == "op":
                tokens.append(_operator(lexeme, tokens[-1] if tokens else None))
            elif kind == "left":
                tokens.append(Token(TokenType.LEFT_BRACKET, lexeme))
            elif kind == "right":
                tokens.append(Token(TokenType.RIGHT_BRACKET, lexeme))
            else:
                tokens.append(Token(TokenType.COMMA, lexeme))
        return tokens