"""
Input tokens for PadCalc
Classifies button text and key presses into the tokens the engine understands
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Operation(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"


@dataclass(frozen=True)
class Digit:
    value: str

    def __post_init__(self):
        if len(self.value) != 1 or self.value not in "0123456789":
            raise UnknownTokenError(self.value)


@dataclass(frozen=True)
class Point:
    pass


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Evaluate:
    pass


@dataclass(frozen=True)
class OperatorToken:
    operation: Operation


Token = Union[Digit, Point, Backspace, Clear, Evaluate, OperatorToken]


class UnknownTokenError(ValueError):
    """Raised for text that is neither a digit, a command nor an operator."""

    def __init__(self, text):
        super().__init__(f"Unknown calculator token: {text!r}")
        self.text = text


OPERATOR_ALIASES = {
    "+": Operation.ADD,
    "-": Operation.SUBTRACT,
    "−": Operation.SUBTRACT,
    "×": Operation.MULTIPLY,
    "x": Operation.MULTIPLY,
    "X": Operation.MULTIPLY,
    "*": Operation.MULTIPLY,
    "÷": Operation.DIVIDE,
    "/": Operation.DIVIDE,
}

# Button layout shared by the desktop window and the web page
KEYPAD_ROWS = [
    ["CE", "C", "÷", "×"],
    ["7", "8", "9", "-"],
    ["4", "5", "6", "+"],
    ["1", "2", "3", "="],
    ["0", "."],
]


def parse_token(text: str) -> Token:
    """Classify raw button text. First match wins."""
    if len(text) == 1 and text in "0123456789":
        return Digit(text)
    if text == ".":
        return Point()
    if text == "C":
        return Backspace()
    if text == "CE":
        return Clear()
    if text == "=":
        return Evaluate()
    try:
        return OperatorToken(OPERATOR_ALIASES[text])
    except KeyError:
        raise UnknownTokenError(text) from None


def token_for_key(char: str, keysym: str = "") -> Optional[Token]:
    """Map a keyboard event to a token, or None when the key is not used."""
    if keysym in ("Return", "KP_Enter"):
        return Evaluate()
    if keysym == "BackSpace":
        return Backspace()
    if keysym in ("Escape", "Delete"):
        return Clear()
    if char in ("\r", "\n"):
        return Evaluate()
    if len(char) == 1 and char in "0123456789.=+-*/":
        return parse_token(char)
    return None
