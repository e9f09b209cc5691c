"""Keypad logic that drives a calculator and keeps a view up to date."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from typecalc.calculator import Calculator, CalculatorError
from typecalc.numtypes import ControlKey, NumberType, Operation

_OPERATIONS: dict[Operation, tuple[Callable[[Calculator, object], None], str]] = {
    Operation.ADDITION: (Calculator.add, " + "),
    Operation.SUBTRACTION: (Calculator.sub, " − "),
    Operation.MULTIPLICATION: (Calculator.mul, " × "),
    Operation.DIVISION: (Calculator.div, " ÷ "),
    Operation.POWER: (Calculator.pow, " ^ "),
}


@dataclass
class CalculatorView:
    """Display state of a calculator: input line, formula, memory mark, extra key."""

    input_text: str = ""
    formula_text: str = ""
    mem_text: str = ""
    extra_key: str | None = None
    error: bool = False

    def set_input_text(self, text: str) -> None:
        self.input_text = text
        self.error = False

    def set_error_text(self, text: str) -> None:
        self.input_text = text
        self.error = True

    def set_formula_text(self, text: str) -> None:
        self.formula_text = text

    def set_mem_text(self, text: str) -> None:
        self.mem_text = text

    def set_extra_key(self, key: str | None) -> None:
        self.extra_key = key


class Controller:
    """Turns key presses into calculator operations for one kind of number."""

    def __init__(self, number_type: NumberType) -> None:
        self.number_type = number_type
        self._calculator = Calculator(number_type)
        self._operation: Callable[[Calculator, object], None] | None = None
        self._operation_name = ""
        self._active = number_type.coerce(0)
        self._input = ""
        self._mem = None
        self._input_as_number = True
        self._view: CalculatorView | None = None
        self._text = ""
        self._formula = ""
        self._mem_text = ""

    def bind(self, view: CalculatorView | None) -> None:
        """Attach a view and show the current state on it."""
        self._view = view
        if view is None:
            return
        view.set_input_text(self._text)
        view.set_formula_text(self._formula)
        view.set_mem_text(self._mem_text)
        view.set_extra_key(self.number_type.extra_key())

    def press_digit(self, digit: int) -> None:
        if not 0 <= digit <= 9:
            raise ValueError(f"not a digit: {digit!r}")
        self._add_char(str(digit))

    def press_operation(self, operation: Operation) -> None:
        action, label = _OPERATIONS[operation]
        self._calculator.set(self._active)
        self._operation_name = label
        self._operation = action
        self._input = ""
        self._set_formula(self.number_type.format(self._calculator.number) + label)

    def press_control(self, key: ControlKey) -> None:
        kind = self.number_type
        if key is ControlKey.EQUALS:
            if self._operation is None or not self._input_as_number:
                return
            formula = (
                kind.format(self._calculator.number)
                + self._operation_name
                + kind.format(self._active)
                + " = "
            )
            try:
                self._operation(self._calculator, self._active)
            except CalculatorError as error:
                if self._view is not None:
                    self._view.set_error_text(str(error))
                return
            self._set_formula(formula)
            self._set_input_as_number(self._calculator.number)
            self._operation = None
        elif key is ControlKey.CLEAR:
            self._set_input_as_number(kind.coerce(0))
            self._set_formula("")
            self._operation = None
        elif key is ControlKey.MEM_SAVE:
            self._mem = self._active
            self._set_mem("M")
        elif key is ControlKey.MEM_LOAD:
            if self._mem is not None:
                self._set_input_as_number(self._mem)
        elif key is ControlKey.MEM_CLEAR:
            self._mem = None
            self._set_mem("")
        elif key is ControlKey.PLUS_MINUS:
            self._active = kind.coerce(-self._active)
            self._set_input_as_number(self._active)
        elif key is ControlKey.BACKSPACE:
            if self._input:
                self._set_input_as_string(self._input[:-1])
        elif key is ControlKey.EXTRA_KEY:
            extra = kind.extra_key()
            if extra is not None and extra not in self._input:
                self._add_char(extra)

    def _read(self, text: str):
        try:
            return self.number_type.parse(text)
        except ValueError:
            # Partial input such as "3/" or an emptied line reads as zero.
            return self.number_type.coerce(0)

    def _set_input_as_string(self, text: str) -> None:
        self._input_as_number = False
        self._input = text
        self._active = self._read(text)
        self._update_input(text)

    def _set_input_as_number(self, number) -> None:
        self._input_as_number = True
        self._input = ""
        self._active = number
        self._update_input(self.number_type.format(number))

    def _add_char(self, char: str) -> None:
        self._set_input_as_string(self._input + char)

    def _update_input(self, text: str) -> None:
        if self._view is not None:
            self._view.set_input_text(text)
        self._text = text

    def _set_formula(self, text: str) -> None:
        if self._view is not None:
            self._view.set_formula_text(text)
        self._formula = text

    def _set_mem(self, text: str) -> None:
        if self._view is not None:
            self._view.set_mem_text(text)
        self._mem_text = text