"""Exception hierarchy for the calculator."""


class CalcError(Exception):
    """Base class for every error the calculator reports."""


class CalcSyntaxError(CalcError):
    """The expression text or its bracket structure is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Syntax error: {message}")


class MathError(CalcError):
    """A mathematically undefined operation was requested."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Math error: {message}")


class CalcRuntimeError(CalcError):
    """Evaluation failed for a reason other than syntax or mathematics."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Runtime error: {message}")