"""
Calculator Engine for PadCalc
Interprets button tokens and keeps the operand/operation state behind the display
"""
import logging
import math
from dataclasses import dataclass
from typing import Optional, Protocol, Union

import config
from display_format import format_result, parse_operand
from tokens import (
    Backspace, Clear, Digit, Evaluate, Operation, OperatorToken, Point,
    Token, parse_token,
)

logger = logging.getLogger(__name__)


class CalculatorError(Exception):
    """Base class for errors the engine recovers from by resetting."""

    message = "Error"


class DivisionByZeroError(CalculatorError):
    message = config.DIVISION_BY_ZERO_MESSAGE


class NonFiniteResultError(CalculatorError):
    message = config.OUT_OF_RANGE_MESSAGE


class DisplaySink(Protocol):
    def show(self, text: str) -> None: ...


class Notifier(Protocol):
    def alert(self, message: str) -> None: ...


class _NullDisplay:
    def show(self, text):
        pass


class _LogNotifier:
    def alert(self, message):
        logger.warning(message)


@dataclass(frozen=True)
class EngineState:
    current_operand: str = "0"
    previous_operand: Optional[str] = None
    operation: Optional[Operation] = None
    reset_on_next_digit: bool = False


def apply_operation(a: float, b: float, operation: Operation) -> float:
    if operation is Operation.ADD:
        return a + b
    if operation is Operation.SUBTRACT:
        return a - b
    if operation is Operation.MULTIPLY:
        return a * b
    if operation is Operation.DIVIDE:
        try:
            return a / b
        except ZeroDivisionError:
            raise DivisionByZeroError() from None
    raise ValueError(f"Unsupported operation: {operation!r}")


class Calculator:
    def __init__(self, display: Optional[DisplaySink] = None,
                 notifier: Optional[Notifier] = None,
                 max_digits: int = config.MAX_DIGITS):
        self.display = display or _NullDisplay()
        self.notifier = notifier or _LogNotifier()
        self.max_digits = max_digits
        self.clear_all()

    @property
    def state(self) -> EngineState:
        return EngineState(self._current, self._previous, self._operation,
                           self._reset_on_next_digit)

    @property
    def current_operand(self) -> str:
        return self._current

    def handle_input(self, token: Union[Token, str]) -> str:
        """Process one token and push the resulting display text to the sink.

        Raw button text is classified first; text that is not a token raises
        UnknownTokenError before any state changes.
        """
        if isinstance(token, str):
            token = parse_token(token)
        logger.debug("token %r", token)

        if isinstance(token, Digit):
            self.append_number(token.value)
        elif isinstance(token, Point):
            self.append_point()
        elif isinstance(token, Backspace):
            self.delete_last()
        elif isinstance(token, Clear):
            self.clear_all()
        elif isinstance(token, Evaluate):
            self.evaluate()
        elif isinstance(token, OperatorToken):
            self.set_operation(token.operation)
        else:
            raise TypeError(f"Not a calculator token: {token!r}")

        self.display.show(self._current)
        return self._current

    def _at_capacity(self):
        return len(self._current) >= self.max_digits and not self._reset_on_next_digit

    def append_number(self, digit: str):
        """Append a digit, replacing a lone zero or a finished operand"""
        if self._at_capacity():
            return
        if self._current == "0" or self._reset_on_next_digit:
            self._current = digit
            self._reset_on_next_digit = False
        else:
            self._current += digit

    def append_point(self):
        """Add a decimal point if the operand doesn't have one yet"""
        if self._at_capacity():
            return
        if self._reset_on_next_digit:
            self._current = "0."
            self._reset_on_next_digit = False
            return
        if "." not in self._current:
            self._current += "."

    def delete_last(self):
        """Remove the last character (backspace)"""
        self._current = self._current[:-1] or "0"

    def clear_all(self):
        """Reset every field to its initial value"""
        self._current = "0"
        self._previous = None
        self._operation = None
        self._reset_on_next_digit = False

    def set_operation(self, operation: Operation):
        """Queue an operation, resolving a pending one first (chained calculation)"""
        if self._operation is not None:
            self.evaluate()
        self._previous = self._current
        self._operation = operation
        self._reset_on_next_digit = True

    def evaluate(self):
        """Evaluate the pending operation into the current operand"""
        if self._operation is None or self._reset_on_next_digit:
            return

        try:
            result = self._compute()
        except CalculatorError as e:
            logger.warning("%s (%s %s %s)", type(e).__name__, self._previous,
                           self._operation.value, self._current)
            self.notifier.alert(e.message)
            self.clear_all()
            return

        self._current = format_result(result, self.max_digits)
        self._operation = None
        self._reset_on_next_digit = True

    def _compute(self) -> float:
        if self._operation is Operation.DIVIDE and self._current == "0":
            raise DivisionByZeroError()

        a = parse_operand(self._previous)
        b = parse_operand(self._current)
        result = apply_operation(a, b, self._operation)
        if not math.isfinite(result):
            raise NonFiniteResultError()
        return result
