"""
GUI for PadCalc
Tkinter-based keypad and display around the calculator engine
"""
import tkinter as tk
from tkinter import messagebox

import config
from calculator import Calculator
from tokens import KEYPAD_ROWS, Evaluate, OperatorToken, parse_token, token_for_key


class LabelDisplay:
    """Display sink that writes the engine output into a Tk label"""

    def __init__(self, label):
        self.label = label

    def show(self, text):
        self.label.config(text=str(text))


class MessageBoxNotifier:
    """Blocking error popup, shown before the engine resets"""

    def __init__(self, root):
        self.root = root

    def alert(self, message):
        messagebox.showerror(config.APP_NAME, message, parent=self.root)


class PadCalcGUI:
    def __init__(self, root, dark_mode=None):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")

        self.dark_mode = config.DARK_MODE if dark_mode is None else dark_mode
        self.T = config.get_theme(self.dark_mode)
        self.root.configure(bg=self.T["bg"])

        self.create_widgets()
        self.calculator = Calculator(
            display=LabelDisplay(self.display),
            notifier=MessageBoxNotifier(self.root),
        )

        self.root.bind('<Key>', self.on_key_press)

    def _neu_btn(self, parent, text, command=None, kind="normal", **kw):
        """Create a neumorphic styled flat button."""
        T = self.T
        if kind == "equals":
            bg, fg, abg = T["equals_bg"], T["equals_fg"], T["bg_dark"]
        elif kind == "operator":
            bg, fg, abg = T["btn_bg"], T["operator_fg"], T["bg_dark"]
        elif kind == "danger":
            bg, fg, abg = T["danger"], "#FFFFFF", T["bg_dark"]
        else:
            bg, fg, abg = T["btn_bg"], T["btn_fg"], T["bg_dark"]
        return tk.Button(
            parent, text=text, command=command,
            font=kw.pop("font", config.BUTTON_FONT),
            bg=bg, fg=fg,
            activebackground=abg, activeforeground=fg,
            relief=tk.FLAT, bd=0, cursor="hand2",
            highlightthickness=1,
            highlightbackground=T["shadow_dark"],
            highlightcolor=T["shadow_lite"],
            **kw
        )

    @staticmethod
    def _button_kind(text):
        token = parse_token(text)
        if isinstance(token, Evaluate):
            return "equals"
        if isinstance(token, OperatorToken):
            return "operator"
        if text == "CE":
            return "danger"
        return "normal"

    def create_widgets(self):
        """Create display and keypad"""
        T = self.T

        # Display
        self.display_frame = tk.Frame(self.root, bg=T["display_bg"])
        self.display_frame.pack(fill=tk.X, padx=8, pady=(8, 4))
        self.display = tk.Label(
            self.display_frame, text="0", anchor="e",
            font=config.DISPLAY_FONT,
            bg=T["display_bg"], fg=T["display_fg"],
            padx=10, pady=14,
        )
        self.display.pack(fill=tk.X)

        # Keypad
        self.keypad_frame = tk.Frame(self.root, bg=T["bg"])
        self.keypad_frame.pack(fill=tk.BOTH, expand=True, padx=8, pady=(4, 8))
        self.buttons = {}

        for r, row in enumerate(KEYPAD_ROWS):
            for c, text in enumerate(row):
                btn = self._neu_btn(
                    self.keypad_frame, text,
                    command=lambda t=text: self.calculator_button_click(t),
                    kind=self._button_kind(text),
                )
                if text == "=":
                    # equals spans the last two rows
                    btn.grid(row=r, column=c, rowspan=2, sticky="nsew", padx=2, pady=2)
                elif text == "0":
                    btn.grid(row=r, column=c, columnspan=2, sticky="nsew", padx=2, pady=2)
                elif text == ".":
                    btn.grid(row=r, column=2, sticky="nsew", padx=2, pady=2)
                else:
                    btn.grid(row=r, column=c, sticky="nsew", padx=2, pady=2)
                self.buttons[text] = btn

        for r in range(len(KEYPAD_ROWS)):
            self.keypad_frame.rowconfigure(r, weight=1)
        for c in range(4):
            self.keypad_frame.columnconfigure(c, weight=1)

    def calculator_button_click(self, button):
        """Handle calculator button clicks"""
        self.calculator.handle_input(button)

    def on_key_press(self, event):
        """Handle keyboard input"""
        token = token_for_key(event.char, event.keysym)
        if token is None:
            return
        self.calculator.handle_input(token)

