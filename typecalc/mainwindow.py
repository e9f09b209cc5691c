"""Tk window for the calculator and the command that starts it."""

from __future__ import annotations

import argparse
import tkinter as tk
from tkinter import ttk
from typing import Callable

from typecalc.controller import CalculatorView, Controller
from typecalc.numtypes import ControlKey, ControllerType, Operation, number_type

CONTROLLER_LABELS = ("double", "float", "uint8_t", "int", "int64_t", "size_t", "Rational")

_LABEL_TYPES = {
    "double": ControllerType.DOUBLE,
    "float": ControllerType.FLOAT,
    "uint8_t": ControllerType.UINT8_T,
    "int": ControllerType.INT,
    "int64_t": ControllerType.INT64_T,
    "size_t": ControllerType.SIZE_T,
    "Rational": ControllerType.RATIONAL,
}

_KEYPAD = (
    (("MC", ControlKey.MEM_CLEAR), ("MR", ControlKey.MEM_LOAD),
     ("MS", ControlKey.MEM_SAVE), ("xʸ", Operation.POWER)),
    (("7", 7), ("8", 8), ("9", 9), ("÷", Operation.DIVISION)),
    (("4", 4), ("5", 5), ("6", 6), ("×", Operation.MULTIPLICATION)),
    (("1", 1), ("2", 2), ("3", 3), ("−", Operation.SUBTRACTION)),
    (("0", 0), (".", ControlKey.EXTRA_KEY), ("±", ControlKey.PLUS_MINUS),
     ("+", Operation.ADDITION)),
    (("C", ControlKey.CLEAR), ("⌫", ControlKey.BACKSPACE), ("=", ControlKey.EQUALS)),
)


def controller_type_for_label(label: str) -> ControllerType:
    """Map a type label from the selector to its controller type; unknown labels give double."""
    return _LABEL_TYPES.get(label, ControllerType.DOUBLE)


class MainWindow(CalculatorView):
    """Calculator view that mirrors its state into Tk widgets when given a root.

    With ``root`` set to None the window keeps its state without any widgets.
    Key presses are reported through the ``on_digit``, ``on_operation``,
    ``on_control`` and ``on_controller`` callbacks.
    """

    def __init__(self, root: tk.Misc | None = None) -> None:
        super().__init__()
        self.on_digit: Callable[[int], None] | None = None
        self.on_operation: Callable[[Operation], None] | None = None
        self.on_control: Callable[[ControlKey], None] | None = None
        self.on_controller: Callable[[ControllerType], None] | None = None
        self._result: tk.Label | None = None
        self._formula: tk.Label | None = None
        self._memory: tk.Label | None = None
        self._extra: tk.Button | None = None
        self._selector: ttk.Combobox | None = None
        self._default_fg = ""
        if root is not None:
            self._build(root)

    def _build(self, root: tk.Misc) -> None:
        frame = tk.Frame(root, padx=6, pady=6)
        frame.pack(fill=tk.BOTH, expand=True)

        self._selector = ttk.Combobox(frame, values=CONTROLLER_LABELS, state="readonly")
        self._selector.current(0)
        self._selector.bind(
            "<<ComboboxSelected>>",
            lambda _event: self._controller_changed(self._selector.get()),
        )
        self._selector.grid(row=0, column=0, columnspan=4, sticky="ew")

        self._memory = tk.Label(frame, anchor="w")
        self._memory.grid(row=1, column=0, sticky="w")
        self._formula = tk.Label(frame, anchor="e")
        self._formula.grid(row=1, column=1, columnspan=3, sticky="e")
        self._result = tk.Label(frame, anchor="e", font=("TkDefaultFont", 18))
        self._result.grid(row=2, column=0, columnspan=4, sticky="ew")
        self._default_fg = self._result.cget("fg")

        for row, keys in enumerate(_KEYPAD, start=3):
            for column, (text, key) in enumerate(keys):
                button = tk.Button(
                    frame, text=text, width=4, command=lambda k=key: self._key_clicked(k)
                )
                button.grid(row=row, column=column, sticky="nsew")
                if key is ControlKey.EXTRA_KEY:
                    self._extra = button

        self._refresh()

    def _refresh(self) -> None:
        self._show_result()
        if self._formula is not None:
            self._formula.configure(text=self.formula_text)
        if self._memory is not None:
            self._memory.configure(text=self.mem_text)
        self._show_extra()

    def _show_result(self) -> None:
        if self._result is not None:
            self._result.configure(
                text=self.input_text, fg="red" if self.error else self._default_fg
            )

    def _show_extra(self) -> None:
        if self._extra is None:
            return
        if self.extra_key is None:
            self._extra.grid_remove()
        else:
            self._extra.configure(text=self.extra_key)
            self._extra.grid()

    def set_input_text(self, text: str) -> None:
        super().set_input_text(text)
        self._show_result()

    def set_error_text(self, text: str) -> None:
        super().set_error_text(text)
        self._show_result()

    def set_formula_text(self, text: str) -> None:
        super().set_formula_text(text)
        if self._formula is not None:
            self._formula.configure(text=text)

    def set_mem_text(self, text: str) -> None:
        super().set_mem_text(text)
        if self._memory is not None:
            self._memory.configure(text=text)

    def set_extra_key(self, key: str | None) -> None:
        super().set_extra_key(key)
        self._show_extra()

    def _key_clicked(self, key) -> None:
        if isinstance(key, Operation):
            if self.on_operation is not None:
                self.on_operation(key)
        elif isinstance(key, ControlKey):
            if self.on_control is not None:
                self.on_control(key)
        elif self.on_digit is not None:
            self.on_digit(key)

    def _controller_changed(self, label: str) -> None:
        if self.on_controller is not None:
            self.on_controller(controller_type_for_label(label))


def _attach(window: MainWindow, controller: Controller) -> None:
    window.on_digit = controller.press_digit
    window.on_operation = controller.press_operation
    window.on_control = controller.press_control
    controller.bind(window)


def main(argv: list[str] | None = None) -> int:
    """Open the calculator window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="typecalc", description="Typed calculator.")
    parser.add_argument("--type", choices=CONTROLLER_LABELS, default="double",
                        help="number type to start with")
    args = parser.parse_args(argv)

    root = tk.Tk()
    root.title("Calculator")
    window = MainWindow(root)
    controllers = {kind: Controller(number_type(kind)) for kind in ControllerType}
    window.on_controller = lambda kind: _attach(window, controllers[kind])

    if window._selector is not None:
        window._selector.set(args.type)
    _attach(window, controllers[controller_type_for_label(args.type)])
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())