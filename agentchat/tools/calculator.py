"""Calculator tool for the chat agent.

This module evaluates space-delimited arithmetic expressions. Operators are
applied strictly left to right, there is no precedence and there are no
parentheses. The words ``pi`` and ``e`` stand for the matching constants.

Public Interface:
    - evaluate(): Evaluate an expression into a Calculation
    - create_calculator_tool(): Create the calculator tool definition
    - calculator_handler(): Handle calculator tool calls

Examples:
    >>> str(evaluate("2 + 2"))
    '2 + 2 = 4'
    >>> str(evaluate("2 + 2 * 3"))
    '2 + 2 * 3 = 12'
    >>> str(evaluate("2 +"))
    'Expected a number after operator "+".'
"""

import logging
import math
import operator
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Any, Callable, Final, List, Optional, Union

from agentchat.types import Tool, ToolParameter

logger = logging.getLogger(__name__)

OPERATORS: Final = ("+", "-", "*", "/")

CONSTANTS: Final[Dict[str, str]] = {
    "pi": repr(math.pi),
    "e": repr(math.e),
}

# Longest decimal literal at the start of a segment, e.g. "3" in "3abc"
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

Token = Union[float, str]


class CalculatorError(Exception):
    """Raised when an expression cannot be evaluated."""
    pass


def _divide(left: float, right: float) -> float:
    # IEEE-754 division, Python raises where JavaScript returns Infinity/NaN
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


_OPERATIONS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


@dataclass(frozen=True)
class Calculation:
    """Outcome of evaluating one expression.

    Attributes:
        expression: The expression exactly as it was given
        value: The computed value, None when evaluation failed
        error: The failure message, None when evaluation succeeded
    """
    expression: str
    value: Optional[float] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        if self.error is not None:
            return self.error
        return f"{self.expression} = {format_number(self.value)}"


def format_number(value: float) -> str:
    """Render a number the way a calculator display shows it.

    Uses the shortest round-tripping digits. Values from 1e-6 up to 1e21
    are written in fixed notation, so integral values drop the fractional
    part. Everything else uses an exponent without zero padding
    (``1e-7``, ``1.5e+21``). Infinities and NaN are spelled out as
    ``Infinity``, ``-Infinity`` and ``NaN``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    padded = "".join(str(d) for d in digit_tuple)
    digits = padded.rstrip("0")
    exponent += len(padded) - len(digits)
    # Position of the decimal point relative to the first digit
    point = len(digits) + exponent

    if len(digits) <= point <= 21:
        body = digits + "0" * (point - len(digits))
    elif 0 < point <= 21:
        body = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        power = point - 1
        body = f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"
    return sign + body


def parse_number(segment: str) -> Optional[float]:
    """Parse the numeric prefix of a segment.

    Parsing stops at the first character that cannot continue a decimal
    literal, so ``"3abc"`` gives 3.0. Returns None if there is no prefix
    or the literal overflows to infinity (``"1e400"``).
    """
    match = _NUMBER_PREFIX.match(segment)
    if match is None:
        return None
    number = float(match.group())
    if math.isinf(number):
        return None
    return number


def tokenize(expression: str) -> List[Token]:
    """Split an expression into numbers and operator symbols.

    Raises:
        CalculatorError: If a segment is neither an operator nor a number
    """
    segments = [CONSTANTS.get(part.lower(), part) for part in expression.split()]

    tokens: List[Token] = []
    for segment in segments:
        if segment in OPERATORS:
            tokens.append(segment)
            continue
        number = parse_number(segment)
        if number is None:
            raise CalculatorError(f'Invalid token "{segment}" in expression.')
        tokens.append(number)
    return tokens


def _is_number(token: Optional[Token]) -> bool:
    return isinstance(token, float)


def fold(tokens: List[Token]) -> float:
    """Apply the operators of a token sequence from left to right.

    Raises:
        CalculatorError: If the sequence is not ``number (operator number)+``
    """
    if len(tokens) < 2:
        raise CalculatorError("Please provide at least two numbers to perform a calculation.")
    if not _is_number(tokens[0]):
        raise CalculatorError("Expression must start with a number.")

    accumulator = tokens[0]
    for i in range(1, len(tokens), 2):
        symbol = tokens[i]
        operand = tokens[i + 1] if i + 1 < len(tokens) else None
        # A number can sit where an operator belongs, e.g. "2 3 4"
        label = format_number(symbol) if _is_number(symbol) else symbol
        if not _is_number(operand):
            raise CalculatorError(f'Expected a number after operator "{label}".')
        operation = _OPERATIONS.get(symbol)
        if operation is None:
            raise CalculatorError(f'Unsupported operator "{label}".')
        accumulator = operation(accumulator, operand)
    return accumulator


def evaluate(expression: str) -> Calculation:
    """Evaluate an expression without ever raising.

    Args:
        expression: Numbers and operators separated by whitespace

    Returns:
        A Calculation holding either the value or the failure message
    """
    try:
        return Calculation(expression, value=fold(tokenize(expression)))
    except CalculatorError as e:
        return Calculation(expression, error=str(e))
    except Exception as e:
        logger.error("Error evaluating expression", extra={
            "expression": expression,
            "error": str(e)
        }, exc_info=True)
        return Calculation(expression, error=f'Error evaluating expression "{expression}": {e}')


def create_calculator_tool() -> Tool:
    """Create a calculator tool definition."""
    return Tool(
        name="calculate",
        description=(
            "Evaluate a mathematical expression and return the result. "
            "Supports basic arithmetic, advanced math functions, and complex expressions."
        ),
        parameters={
            "expression": ToolParameter(
                type="string",
                description=(
                    "The mathematical expression to evaluate "
                    "(e.g., '2 + 2', 'sqrt(16)', 'sin(45)')"
                ),
                required=True
            )
        }
    )


async def calculator_handler(params: Dict[str, Any]) -> str:
    """Handle calculator tool execution.

    Args:
        params: Dictionary containing:
            - expression: Expression to evaluate

    Returns:
        ``"<expression> = <value>"`` or the reason the expression was rejected
    """
    return str(evaluate(params["expression"]))
