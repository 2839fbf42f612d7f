import pytest

from rpncalc.errors import CalcSyntaxError
from rpncalc.lexer import Lexer
from rpncalc.tokens import TokenType


@pytest.fixture
def lexer():
    return Lexer()


def test_numbers(lexer):
    tokens = lexer.tokenize("3.14 42")
    assert len(tokens) == 2
    assert tokens[0].type is TokenType.NUMBER
    assert tokens[0].value == 3.14
    assert tokens[1].type is TokenType.NUMBER
    assert tokens[1].value == 42


def test_operators(lexer):
    tokens = lexer.tokenize("+ - * / ^")
    assert [t.lexeme for t in tokens] == ["+", "unary_minus", "*", "/", "^"]


def test_functions_and_constants(lexer):
    tokens = lexer.tokenize("sin cos PI x !")
    assert [(t.type, t.lexeme) for t in tokens] == [
        (TokenType.FUNCTION, "sin"),
        (TokenType.FUNCTION, "cos"),
        (TokenType.CONSTANT, "PI"),
        (TokenType.VARIABLE, "x"),
        (TokenType.FUNCTION, "!"),
    ]


def test_brackets(lexer):
    tokens = lexer.tokenize("( ) [ ] { }")
    assert [t.lexeme for t in tokens] == ["(", ")", "[", "]", "{", "}"]
    assert tokens[0].type is TokenType.LEFT_BRACKET
    assert tokens[1].type is TokenType.RIGHT_BRACKET
    assert tokens[4].type is TokenType.LEFT_BRACKET
    assert tokens[5].type is TokenType.RIGHT_BRACKET


def test_invalid_character(lexer):
    with pytest.raises(CalcSyntaxError):
        lexer.tokenize("3 @ 4")


def test_binary_minus_after_operand(lexer):
    tokens = lexer.tokenize("5 - 3")
    assert tokens[1].type is TokenType.OPERATOR
    assert tokens[1].lexeme == "-"


def test_minus_after_bracket_is_unary(lexer):
    tokens = lexer.tokenize("(-5)")
    assert tokens[1].type is TokenType.FUNCTION
    assert tokens[1].lexeme == "unary_minus"


def test_comma_token(lexer):
    tokens = lexer.tokenize("2, 3")
    assert tokens[1].type is TokenType.COMMA
    assert tokens[1].lexeme == ","


def test_second_decimal_point_is_rejected(lexer):
    with pytest.raises(CalcSyntaxError):
        lexer.tokenize("1.2.3")


def test_identifier_with_digits_and_underscore(lexer):
    tokens = lexer.tokenize("_x1")
    assert [(t.type, t.lexeme) for t in tokens] == [(TokenType.VARIABLE, "_x1")]


def test_empty_input(lexer):
    assert lexer.tokenize("   ") == []


def test_lexer_is_reusable(lexer):
    lexer.tokenize("1 + 2")
    tokens = lexer.tokenize("-5")
    assert [t.lexeme for t in tokens] == ["unary_minus", ""]