"""
Tests for button and keyboard token classification
"""
import pytest

from tokens import (
    KEYPAD_ROWS, Backspace, Clear, Digit, Evaluate, Operation, OperatorToken, Point,
    UnknownTokenError, parse_token, token_for_key,
)


@pytest.mark.parametrize("digit", list("0123456789"))
def test_digits(digit):
    assert parse_token(digit) == Digit(digit)


@pytest.mark.parametrize("text,expected", [
    (".", Point()),
    ("C", Backspace()),
    ("CE", Clear()),
    ("=", Evaluate()),
    ("+", OperatorToken(Operation.ADD)),
    ("-", OperatorToken(Operation.SUBTRACT)),
    ("−", OperatorToken(Operation.SUBTRACT)),
    ("×", OperatorToken(Operation.MULTIPLY)),
    ("x", OperatorToken(Operation.MULTIPLY)),
    ("*", OperatorToken(Operation.MULTIPLY)),
    ("÷", OperatorToken(Operation.DIVIDE)),
    ("/", OperatorToken(Operation.DIVIDE)),
])
def test_commands_and_operators(text, expected):
    assert parse_token(text) == expected


@pytest.mark.parametrize("text", ["", "12", "%", "MR", "c", "ce", " 1"])
def test_unknown_text(text):
    with pytest.raises(UnknownTokenError) as excinfo:
        parse_token(text)
    assert excinfo.value.text == text
    assert isinstance(excinfo.value, ValueError)


def test_digit_must_be_single_character():
    with pytest.raises(UnknownTokenError):
        Digit("12")


def test_every_keypad_button_is_a_token():
    for row in KEYPAD_ROWS:
        for text in row:
            parse_token(text)


@pytest.mark.parametrize("char,keysym,expected", [
    ("7", "7", Digit("7")),
    (".", "period", Point()),
    ("+", "plus", OperatorToken(Operation.ADD)),
    ("-", "minus", OperatorToken(Operation.SUBTRACT)),
    ("*", "asterisk", OperatorToken(Operation.MULTIPLY)),
    ("/", "slash", OperatorToken(Operation.DIVIDE)),
    ("=", "equal", Evaluate()),
    ("\r", "Return", Evaluate()),
    ("\r", "KP_Enter", Evaluate()),
    ("\x08", "BackSpace", Backspace()),
    ("\x1b", "Escape", Clear()),
    ("\x7f", "Delete", Clear()),
])
def test_keyboard_mapping(char, keysym, expected):
    assert token_for_key(char, keysym) == expected


@pytest.mark.parametrize("char,keysym", [
    ("a", "a"),
    ("", "Shift_L"),
    ("%", "percent"),
])
def test_unmapped_keys(char, keysym):
    assert token_for_key(char, keysym) is None
