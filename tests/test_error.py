from __future__ import annotations

from TreeCalculator import error as E


def test_invalid_expression_message_and_detail() -> None:
    error = E.InvalidExpression("abc")
    assert str(error) == "The entered expression is invalid: abc"
    assert error.detail == "abc"
    assert error.code == "3001"
    assert isinstance(error, E.MathError)


def test_divide_by_zero_message() -> None:
    error = E.DivideByZero(equation="1 / 0")
    assert str(error) == "Cannot divide by zero"
    assert error.code == "3003"
    assert error.equation == "1 / 0"


def test_every_raised_code_has_a_message() -> None:
    for code in ("2001", "3001", "3003", "3026", "4002", "4501", "9999"):
        assert code in E.ERROR_MESSAGES
        assert code[0] in E.Error_Dictionary
