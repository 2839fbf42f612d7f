"""Evaluation of token lists in reverse Polish notation."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterable

from .errors import CalcRuntimeError, MathError
from .tokens import Token, TokenType

_CONSTANTS = {"PI": math.pi}


def _divide(left: float, right: float) -> float:
    if right == 0:
        raise MathError("Division by zero")
    return left / right


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value == math.floor(value) and value % 2 == 1


def _power(base: float, exponent: float) -> float:
    """Raise ``base`` to ``exponent`` with IEEE results instead of exceptions."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0 and _is_odd_integer(exponent)
        return -math.inf if negative else math.inf
    except ValueError:
        if base == 0:
            negative = math.copysign(1.0, base) < 0 and _is_odd_integer(exponent)
            return -math.inf if negative else math.inf
        return math.nan


def _safe(function: Callable[[float], float]) -> Callable[[float], float]:
    def apply(arg: float) -> float:
        try:
            return function(arg)
        except ValueError:
            return math.nan

    return apply


def _factorial(arg: float) -> float:
    if math.isnan(arg) or arg < 0 or math.floor(arg) != arg:
        raise MathError("Factorial requires non-negative integer")
    if math.isinf(arg):
        return math.inf
    try:
        return float(math.factorial(int(arg)))
    except OverflowError:
        return math.inf


_BINARY: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "^": _power,
}

_UNARY: dict[str, Callable[[float], float]] = {
    "sin": _safe(math.sin),
    "cos": _safe(math.cos),
    "!": _factorial,
    "unary_minus": operator.neg,
}


class Evaluator:
    """Computes the value of an RPN token sequence, with named variables."""

    def __init__(self) -> None:
        self._variables: dict[str, float] = {}

    def set_variable(self, name: str, value: float) -> None:
        """Bind ``name`` to ``value`` for later evaluations."""
        self._variables[name] = float(value)

    def evaluate_rpn(self, rpn_tokens: Iterable[Token]) -> float:
        """Evaluate ``rpn_tokens`` and return the single resulting value."""
        stack: list[float] = []
        for token in rpn_tokens:
            if token.type is TokenType.NUMBER:
                stack.append(token.value)
            elif token.type is TokenType.CONSTANT:
                try:
                    stack.append(_CONSTANTS[token.lexeme])
                except KeyError:
                    raise CalcRuntimeError(f"Unknown constant: {token.lexeme}") from None
            elif token.type is TokenType.VARIABLE:
                try:
                    stack.append(self._variables[token.lexeme])
                except KeyError:
                    raise CalcRuntimeError(f"Undefined variable: {token.lexeme}") from None
            elif token.type is TokenType.OPERATOR:
                self._apply_operator(token, stack)
            elif token.type is TokenType.FUNCTION:
                self._apply_function(token, stack)
            else:
                raise CalcRuntimeError("Unexpected token in RPN")

        if len(stack) != 1:
            raise CalcRuntimeError("Invalid expression: too many operands left")
        return stack[0]

    @staticmethod
    def _apply_operator(token: Token, stack: list[float]) -> None:
        if len(stack) < 2:
            raise CalcRuntimeError(f"Not enough operands for operator {token.lexeme}")
        right = stack.pop()
        left = stack.pop()
        function = _BINARY.get(token.lexeme[:1])
        if function is None:
            raise CalcRuntimeError(f"Unknown operator: {token.lexeme}")
        stack.append(function(left, right))

    @staticmethod
    def _apply_function(token: Token, stack: list[float]) -> None:
        if not stack:
            raise CalcRuntimeError(f"Not enough operands for function {token.lexeme}")
        arg = stack.pop()
        function = _UNARY.get(token.lexeme)
        if function is None:
            raise CalcRuntimeError(f"Unknown function: {token.lexeme}")
        stack.append(function(arg))