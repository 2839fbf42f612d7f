import pytest

from rpncalc.errors import CalcError, CalcRuntimeError, CalcSyntaxError, MathError


@pytest.mark.parametrize(
    ("cls", "prefix"),
    [
        (CalcSyntaxError, "Syntax error: "),
        (MathError, "Math error: "),
        (CalcRuntimeError, "Runtime error: "),
    ],
)
def test_message_is_prefixed(cls, prefix):
    err = cls("Division by zero")
    assert str(err) == prefix + "Division by zero"


@pytest.mark.parametrize(
    ("cls", "expected"),
    [
        (CalcSyntaxError, "Syntax error: Mismatched brackets"),
        (MathError, "Math error: Mismatched brackets"),
        (CalcRuntimeError, "Runtime error: Mismatched brackets"),
    ],
)
def test_subclasses_are_caught_as_calc_error(cls, expected):
    with pytest.raises(CalcError) as excinfo:
        raise cls("Mismatched brackets")
    assert str(excinfo.value) == expected
    assert type(excinfo.value) is cls


def test_base_error_keeps_message_unchanged():
    assert str(CalcError("Invalid expression")) == "Invalid expression"


def test_specific_errors_are_distinct():
    err = MathError("Factorial requires non-negative integer")
    assert not isinstance(err, CalcSyntaxError)
    assert not isinstance(err, CalcRuntimeError)
    assert str(err) == "Math error: Factorial requires non-negative integer"