"""
Tests for the Tk collaborators that don't need a running display
"""
import pytest

pytest.importorskip("tkinter")

import config
import gui
from calculator import Calculator


class FakeLabel:
    def __init__(self):
        self.text = None

    def config(self, **kw):
        self.text = kw["text"]


def test_label_display_receives_engine_output():
    label = FakeLabel()
    calc = Calculator(display=gui.LabelDisplay(label))
    calc.handle_input("4")
    calc.handle_input("2")
    assert label.text == "42"


def test_messagebox_notifier(monkeypatch):
    shown = []
    monkeypatch.setattr(gui.messagebox, "showerror",
                        lambda title, message, parent=None: shown.append((title, message)))
    calc = Calculator(notifier=gui.MessageBoxNotifier(root=None))
    for token in ["9", "÷", "0", "="]:
        calc.handle_input(token)
    assert shown == [(config.APP_NAME, config.DIVISION_BY_ZERO_MESSAGE)]


@pytest.mark.parametrize("text,kind", [
    ("=", "equals"),
    ("+", "operator"),
    ("÷", "operator"),
    ("CE", "danger"),
    ("C", "normal"),
    ("7", "normal"),
])
def test_button_kind(text, kind):
    assert gui.PadCalcGUI._button_kind(text) == kind
