"""Command-line entry point: evaluate one expression and print the result."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .errors import CalcError
from .evaluator import Evaluator
from .lexer import Lexer
from .parser import Parser


def _assignment(text: str) -> tuple[str, float]:
    name, sep, value = text.partition("=")
    name = name.strip()
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    try:
        return name, float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number for {name}: {value!r}") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="RPN Calculator")
    parser.add_argument("expression", help="Mathematical expression")
    parser.add_argument(
        "--var",
        "-v",
        dest="variables",
        type=_assignment,
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Set variables (e.g., x=3.14)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        tokens = Lexer().tokenize(args.expression)
        rpn = Parser().parse_to_rpn(tokens)
        evaluator = Evaluator()
        for name, value in dict(args.variables).items():
            evaluator.set_variable(name, value)
        result = evaluator.evaluate_rpn(rpn)
    except CalcError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(f"Result: {result:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())