"""Shunting-yard conversion of infix tokens to reverse Polish notation."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import CalcSyntaxError
from .tokens import Token, TokenType

_PRECEDENCE = {
    "unary_minus": 6,
    "!": 5,
    "sin": 5,
    "cos": 5,
    "^": 4,
    "*": 3,
    "/": 3,
    "+": 2,
    "-": 2,
}

_MATCHING = {")": "(", "]": "[", "}": "{"}
_OPERANDS = frozenset({TokenType.NUMBER, TokenType.CONSTANT, TokenType.VARIABLE})
_CALLABLES = frozenset({TokenType.OPERATOR, TokenType.FUNCTION})


def _precedence(token: Token) -> int:
    if token.type is TokenType.FUNCTION:
        return _PRECEDENCE[token.lexeme]
    return _PRECEDENCE.get(token.lexeme, 0)


def _is_left_associative(token: Token) -> bool:
    return token.lexeme not in ("^", "!")


class Parser:
    """Converts infix token lists to RPN order."""

    def parse_to_rpn(self, tokens: Iterable[Token]) -> list[Token]:
        """Return ``tokens`` in RPN order; raise CalcSyntaxError on bad structure."""
        output: list[Token] = []
        stack: list[Token] = []

        for token in tokens:
            if token.type in _OPERANDS:
                output.append(token)
            elif token.type in (TokenType.FUNCTION, TokenType.LEFT_BRACKET):
                stack.append(token)
            elif token.type is TokenType.OPERATOR:
                self._push_operator(token, stack, output)
            elif token.type is TokenType.RIGHT_BRACKET:
                self._close_bracket(token, stack, output)
            elif token.type is TokenType.COMMA:
                raise CalcSyntaxError("Comma not supported")
            else:
                raise CalcSyntaxError("Unknown token type")

        while stack:
            top = stack.pop()
            if top.type is TokenType.LEFT_BRACKET:
                raise CalcSyntaxError("Mismatched brackets")
            output.append(top)
        return output

    @staticmethod
    def _push_operator(token: Token, stack: list[Token], output: list[Token]) -> None:
        prec = _precedence(token)
        while stack:
            top = stack[-1]
            if top.type not in _CALLABLES:
                break
            top_prec = _precedence(top)
            if top_prec > prec or (top_prec == prec and _is_left_associative(token)):
                output.append(stack.pop())
            else:
                break
        stack.append(token)

    @staticmethod
    def _close_bracket(token: Token, stack: list[Token], output: list[Token]) -> None:
        opening = _MATCHING[token.lexeme]
        while stack:
            top = stack.pop()
            if top.type is TokenType.LEFT_BRACKET and top.lexeme == opening:
                break
            output.append(top)
        else:
            raise CalcSyntaxError("Mismatched brackets")

        if stack and stack[-1].type is TokenType.FUNCTION:
            output.append(stack.pop())