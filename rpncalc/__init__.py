"""Infix expression calculator built on reverse Polish notation."""

__version__ = "0.1.0"
__all__ = ["errors", "tokens", "lexer", "parser", "evaluator", "cli"]