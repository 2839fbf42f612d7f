# rpncalc

A small calculator for mathematical expressions. The input is split into
tokens by `rpncalc.lexer.Lexer`. `rpncalc.parser.Parser` then converts the
tokens to reverse Polish notation with the shunting-yard algorithm.
Finally `rpncalc.evaluator.Evaluator` evaluates them on an operand stack.

## Supported syntax

- Numbers: `42`, `3.14`
- Binary operators: `+`, `-`, `*`, `/`, `^`. The `^` operator is
  right-associative, so `2 ^ 3 ^ 2` is `2 ^ (3 ^ 2)`.
- Unary minus: `-5`, `--5`, `2 * -3`
- Postfix factorial: `5!`. The argument must be a non-negative integer.
- Functions: `sin(...)`, `cos(...)`
- Constant: `PI`
- Variables: any other identifier, such as `x` or `rate_1`
- Brackets: `( )`, `[ ]`, `{ }`. Each closing bracket must match the
  bracket that opened it.

The lexer accepts commas, but the parser rejects them, because no function
takes more than one argument.

## Command line

```
rpncalc "2 + sin(x) / {3 + cos(x)} * PI" --var x=3.14159
rpncalc "x * y" -v x=3 -v y=4
```

- `--var` / `-v NAME=VALUE` sets a variable. You can give it more than once.
  If you give the same name twice, the later value wins.
- On success the program prints `Result: <value>` and exits with status 0.
  The value uses Python's `g` format, which keeps six significant digits.
- On a calculator error it writes `Error: <message>` to standard error and
  exits with status 1.

An expression that starts with a letter after a dash, such as `-x`, is read
as an option. Put `--` before it: `rpncalc -v x=2 -- "-x"`.

## Library use

```python
from rpncalc.lexer import Lexer
from rpncalc.parser import Parser
from rpncalc.evaluator import Evaluator

tokens = Lexer().tokenize("(a + b) * c")
rpn = Parser().parse_to_rpn(tokens)

evaluator = Evaluator()
evaluator.set_variable("a", 2)
evaluator.set_variable("b", 3)
evaluator.set_variable("c", 4)
print(evaluator.evaluate_rpn(rpn))  # 20.0
```

Tokens are frozen `rpncalc.tokens.Token` dataclasses. Each token has a
`type` (a `TokenType`), a `lexeme` and a `value`. `Token.number(value)`
builds a numeric token.

Errors are raised as subclasses of `rpncalc.errors.CalcError`:

- `CalcSyntaxError`: an unexpected character, mismatched brackets, or a comma
- `MathError`: division by zero, or a factorial of a negative or
  non-integer value
- `CalcRuntimeError`: an undefined variable, or an expression with too few
  or too many operands

## Limitations

rpncalc evaluates one expression per call. It has no interactive prompt.
It does not remember variables between command-line runs. It does not
support user-defined functions or functions with more than one argument.

## Tests

```
pip install -e .[test]
pytest
```