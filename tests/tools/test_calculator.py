"""Tests for the calculator tool."""

import math
from unittest.mock import patch

import pytest

from agentchat.tools import calculator
from agentchat.tools.calculator import (
    Calculation,
    CalculatorError,
    calculator_handler,
    create_calculator_tool,
    evaluate,
    fold,
    format_number,
    parse_number,
    tokenize,
)


def test_evaluate_basic_operations() -> None:
    """Test each operator on its own."""
    assert str(evaluate("2 + 2")) == "2 + 2 = 4"
    assert str(evaluate("5 - 3")) == "5 - 3 = 2"
    assert str(evaluate("4 * 3")) == "4 * 3 = 12"
    assert str(evaluate("10 / 4")) == "10 / 4 = 2.5"


def test_evaluate_is_left_to_right() -> None:
    """Operators have no precedence."""
    assert str(evaluate("2 + 2 * 3")) == "2 + 2 * 3 = 12"
    assert str(evaluate("10 - 4 / 2")) == "10 - 4 / 2 = 3"
    assert evaluate("1 + 2 - 3 * 4 / 5").value == pytest.approx(0.0)
    assert evaluate("2 * 3 + 4 * 5").value == 50


def test_evaluate_constants() -> None:
    """Test pi and e substitution, case insensitive."""
    assert evaluate("pi * 2").value == pytest.approx(2 * math.pi)
    assert evaluate("e + 1").value == pytest.approx(math.e + 1)
    assert evaluate("PI - Pi").value == 0
    assert evaluate("E * 1").value == pytest.approx(math.e)


def test_evaluate_keeps_original_expression() -> None:
    """The success string echoes the input untouched."""
    assert str(evaluate("pi * 2")) == f"pi * 2 = {2 * math.pi!r}"
    assert str(evaluate("  3   +  4 ")) == "  3   +  4  = 7"


def test_evaluate_negative_and_decimal_numbers() -> None:
    assert str(evaluate("-5 + 3")) == "-5 + 3 = -2"
    assert str(evaluate("0.1 * 3")) == f"0.1 * 3 = {0.1 * 3!r}"
    assert str(evaluate(".5 + .5")) == ".5 + .5 = 1"
    assert str(evaluate("1e3 / 10")) == "1e3 / 10 = 100"


def test_evaluate_numeric_prefix() -> None:
    """Segments parse up to their first non-numeric character."""
    assert str(evaluate("3abc + 1")) == "3abc + 1 = 4"
    assert str(evaluate("2.5kg * 2")) == "2.5kg * 2 = 5"


def test_evaluate_too_few_tokens() -> None:
    message = "Please provide at least two numbers to perform a calculation."
    assert str(evaluate("5")) == message
    assert str(evaluate("")) == message
    assert str(evaluate("   ")) == message


def test_evaluate_must_start_with_number() -> None:
    assert str(evaluate("+ 2 3")) == "Expression must start with a number."
    assert str(evaluate("* 2")) == "Expression must start with a number."


def test_evaluate_missing_operand() -> None:
    assert str(evaluate("2 +")) == 'Expected a number after operator "+".'
    assert str(evaluate("2 + 3 /")) == 'Expected a number after operator "/".'
    assert str(evaluate("2 + * 3")) == 'Expected a number after operator "+".'


def test_evaluate_adjacent_numbers() -> None:
    """A number where an operator belongs is reported against that number."""
    calculation = evaluate("2 3")
    assert not calculation.ok
    assert calculation.error == 'Expected a number after operator "3".'
    assert str(evaluate("2 3 4")) == 'Unsupported operator "3".'


def test_evaluate_invalid_token() -> None:
    assert str(evaluate("2 + foo")) == 'Invalid token "foo" in expression.'
    assert str(evaluate("2 ^ 3")) == 'Invalid token "^" in expression.'
    assert str(evaluate("(2 + 3)")) == 'Invalid token "(2" in expression.'
    assert str(evaluate("sqrt(16) + 1")) == 'Invalid token "sqrt(16)" in expression.'


def test_evaluate_invalid_token_is_first_problem() -> None:
    """Tokenizing fails before structure is checked."""
    assert str(evaluate("+ foo")) == 'Invalid token "foo" in expression.'


def test_evaluate_division_by_zero() -> None:
    """Division by zero follows floating-point rules instead of failing."""
    assert str(evaluate("1 / 0")) == "1 / 0 = Infinity"
    assert str(evaluate("-1 / 0")) == "-1 / 0 = -Infinity"
    assert str(evaluate("1 / -0")) == "1 / -0 = -Infinity"
    nan = evaluate("0 / 0")
    assert nan.ok
    assert math.isnan(nan.value)
    assert str(nan) == "0 / 0 = NaN"


def test_evaluate_is_repeatable() -> None:
    for expression in ("2 + 2 * 3", "2 + foo", "pi / 3"):
        assert str(evaluate(expression)) == str(evaluate(expression))


def test_unsupported_operator() -> None:
    """An operator without an operation is rejected."""
    with patch.dict(calculator._OPERATIONS, clear=False) as operations:
        del operations["*"]
        assert str(evaluate("2 * 3")) == 'Unsupported operator "*".'


def test_unexpected_error_is_reported() -> None:
    """Errors raised by an operation are turned into a message."""
    def broken(left: float, right: float) -> float:
        raise ArithmeticError("boom")

    with patch.dict(calculator._OPERATIONS, {"+": broken}):
        calculation = evaluate("1 + 2")

    assert not calculation.ok
    assert str(calculation) == 'Error evaluating expression "1 + 2": boom'


def test_tokenize() -> None:
    assert tokenize("1 + 2.5") == [1.0, "+", 2.5]
    assert tokenize("pi") == [math.pi]
    with pytest.raises(CalculatorError, match='Invalid token "x"'):
        tokenize("1 + x")


def test_fold() -> None:
    assert fold([1.0, "+", 2.0, "*", 3.0]) == 9.0
    with pytest.raises(CalculatorError, match="at least two numbers"):
        fold([1.0])


def test_parse_number() -> None:
    assert parse_number("42") == 42.0
    assert parse_number("+7") == 7.0
    assert parse_number("3.") == 3.0
    assert parse_number("1e") == 1.0
    assert parse_number("1e-2x") == 0.01
    assert parse_number("abc") is None
    assert parse_number(".") is None
    assert parse_number("Infinity") is None
    assert parse_number("1e400") is None
    assert parse_number("-1e400") is None


def test_evaluate_overflowing_literal() -> None:
    """Literals too large for a float are rejected like any other non-number."""
    assert str(evaluate("1e400 - 1e400")) == 'Invalid token "1e400" in expression.'
    assert str(evaluate("1e308 * 10")) == "1e308 * 10 = Infinity"


def test_format_number() -> None:
    assert format_number(4.0) == "4"
    assert format_number(-0.0) == "0"
    assert format_number(2.5) == "2.5"
    assert format_number(1e21) == "1e+21"
    assert format_number(math.inf) == "Infinity"
    assert format_number(-math.inf) == "-Infinity"
    assert format_number(math.nan) == "NaN"
    assert format_number(0.1 + 0.2) == "0.30000000000000004"
    assert format_number(-123.456) == "-123.456"
    assert format_number(1e20) == "100000000000000000000"
    assert format_number(1.5e21) == "1.5e+21"
    assert format_number(1e-5) == "0.00001"
    assert format_number(1e-6) == "0.000001"
    assert format_number(1.5e-6) == "0.0000015"
    assert format_number(1e-7) == "1e-7"
    assert format_number(1.5e-10) == "1.5e-10"
    assert format_number(-2.5e-8) == "-2.5e-8"


def test_evaluate_small_results() -> None:
    assert str(evaluate("1 / 100000")) == "1 / 100000 = 0.00001"
    assert str(evaluate("1 / 10000000")) == "1 / 10000000 = 1e-7"


def test_calculation_rendering() -> None:
    assert str(Calculation("1 + 1", value=2.0)) == "1 + 1 = 2"
    assert Calculation("1 + 1", value=2.0).ok
    failed = Calculation("x", error="Invalid token \"x\" in expression.")
    assert not failed.ok
    assert str(failed) == 'Invalid token "x" in expression.'


def test_create_calculator_tool() -> None:
    """Test creating the calculator tool definition."""
    tool = create_calculator_tool()

    assert tool.name == "calculate"
    assert "mathematical expression" in tool.description.lower()
    assert "expression" in tool.parameters
    assert tool.parameters["expression"].type == "string"
    assert tool.parameters["expression"].required is True


@pytest.mark.asyncio
async def test_calculator_handler() -> None:
    """The handler returns text for both outcomes."""
    assert await calculator_handler({"expression": "2 + 2"}) == "2 + 2 = 4"
    assert await calculator_handler({"expression": "5"}) == (
        "Please provide at least two numbers to perform a calculation."
    )
