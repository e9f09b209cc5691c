import pytest

from typecalc.controller import CalculatorView, Controller
from typecalc.numtypes import ControlKey, NumberType, Operation


def make(kind):
    controller = Controller(kind)
    view = CalculatorView()
    controller.bind(view)
    return controller, view


def type_number(controller, text):
    negative = text.startswith("-")
    for ch in text.lstrip("-"):
        if ch in "./":
            controller.press_control(ControlKey.EXTRA_KEY)
        elif ch != " ":
            controller.press_digit(int(ch))
    if negative:
        controller.press_control(ControlKey.PLUS_MINUS)


@pytest.mark.parametrize(
    "kind, key",
    [(NumberType.DOUBLE, "."), (NumberType.FLOAT, "."), (NumberType.RATIONAL, "/"),
     (NumberType.INT, None), (NumberType.UINT8, None), (NumberType.SIZE_T, None)],
)
def test_bind_shows_extra_key(kind, key):
    _, view = make(kind)
    assert view.extra_key == key
    assert view.input_text == ""
    assert view.formula_text == ""


def test_digits_build_input():
    controller, view = make(NumberType.INT)
    controller.press_digit(1)
    controller.press_digit(2)
    assert view.input_text == "12"


def test_invalid_digit_rejected():
    controller, _ = make(NumberType.INT)
    with pytest.raises(ValueError):
        controller.press_digit(10)


def test_operation_shows_formula():
    controller, view = make(NumberType.INT)
    type_number(controller, "12")
    controller.press_operation(Operation.ADDITION)
    assert view.formula_text == "12 + "


@pytest.mark.parametrize(
    "kind, lhs, op, rhs, formula, result",
    [
        (NumberType.INT64, "8764861823467", Operation.DIVISION, "-357",
         "8764861823467 ÷ -357 = ", "-24551433679"),
        (NumberType.DOUBLE, "-15.04", Operation.MULTIPLICATION, "-875.3",
         "-15.04 × -875.3 = ", "13164.5"),
        (NumberType.RATIONAL, "5 / 17", Operation.POWER, "-1",
         "5/17 ^ -1 = ", "17/5"),
    ],
)
def test_equals_with_negated_operand(kind, lhs, op, rhs, formula, result):
    controller, view = make(kind)
    controller.press_control(ControlKey.CLEAR)
    type_number(controller, lhs)
    controller.press_operation(op)
    type_number(controller, rhs)
    controller.press_control(ControlKey.EQUALS)
    assert view.formula_text == formula
    assert view.input_text == result
    assert view.error is False


def test_equals_ignored_while_input_is_typed():
    controller, view = make(NumberType.INT)
    type_number(controller, "1000")
    controller.press_operation(Operation.SUBTRACTION)
    type_number(controller, "8000")
    controller.press_control(ControlKey.EQUALS)
    assert view.formula_text == "1000 − "
    assert view.input_text == "8000"


def test_equals_without_operation_does_nothing():
    controller, view = make(NumberType.INT)
    type_number(controller, "-5")
    controller.press_control(ControlKey.EQUALS)
    assert view.formula_text == ""
    assert view.input_text == "-5"


@pytest.mark.parametrize(
    "kind, lhs, op, rhs, message",
    [
        (NumberType.INT, "-214", Operation.DIVISION, "-0", "Division by zero"),
        (NumberType.RATIONAL, "2/4", Operation.DIVISION, "-0", "Division by zero"),
        (NumberType.INT, "-0", Operation.POWER, "-0", "Zero power to zero"),
        (NumberType.RATIONAL, "-0", Operation.POWER, "-0", "Zero power to zero"),
        (NumberType.INT, "-21412", Operation.POWER, "-15", "Integer negative power"),
        (NumberType.RATIONAL, "1 / 2", Operation.POWER, "-2 / 3",
         "Fractional power is not supported"),
    ],
)
def test_errors_shown_and_cleared(kind, lhs, op, rhs, message):
    controller, view = make(kind)
    type_number(controller, lhs)
    controller.press_operation(op)
    type_number(controller, rhs)
    controller.press_control(ControlKey.EQUALS)
    assert view.input_text == message
    assert view.error is True
    controller.press_control(ControlKey.CLEAR)
    assert view.error is False
    assert view.input_text == "0"
    assert view.formula_text == ""


def test_memory_keys():
    controller, view = make(NumberType.INT)
    type_number(controller, "42")
    controller.press_control(ControlKey.MEM_SAVE)
    assert view.mem_text == "M"
    controller.press_control(ControlKey.CLEAR)
    controller.press_control(ControlKey.MEM_LOAD)
    assert view.input_text == "42"
    controller.press_control(ControlKey.MEM_CLEAR)
    assert view.mem_text == ""
    controller.press_control(ControlKey.CLEAR)
    controller.press_control(ControlKey.MEM_LOAD)
    assert view.input_text == "0"


def test_loaded_memory_allows_equals():
    controller, view = make(NumberType.INT)
    type_number(controller, "3")
    controller.press_control(ControlKey.MEM_SAVE)
    controller.press_operation(Operation.MULTIPLICATION)
    controller.press_control(ControlKey.MEM_LOAD)
    controller.press_control(ControlKey.EQUALS)
    assert view.formula_text == "3 × 3 = "
    assert view.input_text == "9"


def test_backspace():
    controller, view = make(NumberType.INT)
    type_number(controller, "123")
    controller.press_control(ControlKey.BACKSPACE)
    assert view.input_text == "12"
    controller.press_control(ControlKey.BACKSPACE)
    controller.press_control(ControlKey.BACKSPACE)
    assert view.input_text == ""
    controller.press_control(ControlKey.BACKSPACE)
    assert view.input_text == ""


def test_backspace_to_empty_uint8():
    controller, view = make(NumberType.UINT8)
    type_number(controller, "7")
    controller.press_control(ControlKey.BACKSPACE)
    assert view.input_text == ""
    controller.press_control(ControlKey.PLUS_MINUS)
    assert view.input_text == "0"


def test_extra_key_added_once_for_double():
    controller, view = make(NumberType.DOUBLE)
    controller.press_digit(1)
    controller.press_control(ControlKey.EXTRA_KEY)
    controller.press_control(ControlKey.EXTRA_KEY)
    controller.press_digit(5)
    assert view.input_text == "1.5"


def test_extra_key_ignored_for_integers():
    controller, view = make(NumberType.INT)
    controller.press_digit(1)
    controller.press_control(ControlKey.EXTRA_KEY)
    assert view.input_text == "1"


def test_rational_partial_input():
    controller, view = make(NumberType.RATIONAL)
    controller.press_digit(1)
    controller.press_control(ControlKey.EXTRA_KEY)
    assert view.input_text == "1/"
    controller.press_digit(2)
    assert view.input_text == "1/2"


def test_plus_minus_wraps_unsigned():
    controller, view = make(NumberType.UINT8)
    type_number(controller, "5")
    controller.press_control(ControlKey.PLUS_MINUS)
    assert view.input_text == "251"


def test_plus_minus_twice_restores():
    controller, view = make(NumberType.RATIONAL)
    type_number(controller, "3/4")
    controller.press_control(ControlKey.PLUS_MINUS)
    assert view.input_text == "-3/4"
    controller.press_control(ControlKey.PLUS_MINUS)
    assert view.input_text == "3/4"


def test_typing_after_result_starts_fresh():
    controller, view = make(NumberType.INT)
    type_number(controller, "-2")
    controller.press_operation(Operation.ADDITION)
    type_number(controller, "-2")
    controller.press_control(ControlKey.EQUALS)
    assert view.input_text == "-4"
    controller.press_digit(3)
    assert view.input_text == "3"


def test_rebind_reveals_state():
    controller = Controller(NumberType.INT)
    type_number(controller, "12")
    controller.press_operation(Operation.SUBTRACTION)
    controller.press_control(ControlKey.MEM_SAVE)
    view = CalculatorView()
    controller.bind(view)
    assert view.input_text == "12"
    assert view.formula_text == "12 − "
    assert view.mem_text == "M"


def test_unbound_view_keeps_old_state():
    controller, view = make(NumberType.INT)
    controller.bind(None)
    controller.press_digit(8)
    assert view.input_text == ""
    controller.bind(view)
    assert view.input_text == "8"