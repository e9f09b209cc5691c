# typecalc

A small desktop calculator that does its arithmetic in the number type you
pick: `double`, `float`, `uint8_t`, `int`, `int64_t`, `size_t` or `Rational`.
Integer types wrap and divide the way fixed-width machine integers do.
Floating types behave like single or double precision. `Rational` keeps exact
fractions such as `16183175/4446618`.

## Installing

```
pip install .
```

The window uses tkinter from the standard library. It needs no other package.

## Running

```
typecalc
typecalc --type Rational
```

`--type` picks the number type to start with. The default is `double`. You can
also change the type from the drop-down list in the window. Each type keeps
its own state.

The keypad has:

- the digits, and `+ − × ÷ xʸ` for the operations;
- `=` to finish, `C` to clear, `⌫` to delete one character and `±` to change the sign;
- `MS`, `MR` and `MC` to save, recall and clear the memory;
- an extra key. It shows `.` for the floating types and `/` for `Rational`. It is hidden for the integer types.

The line above the input shows the formula, for example `12 + -5 = `. A small
`M` marks a saved memory value.

`=` only acts when the second operand was last set as a whole number: by `±`,
`MR`, `C` or a previous result. Right after you type digits it does nothing.

Errors appear in red in place of the result:

- `Division by zero`: integer or rational division by zero. Floating division by zero gives an infinity or NaN instead.
- `Zero power to zero`: `0 ^ 0` in any type.
- `Integer negative power`: a negative exponent in a signed integer type.
- `Fractional power is not supported`: a rational exponent that is not a whole number.

## Using it as a library

Exact fractions and integer powers, from `typecalc.rational`:

```python
from typecalc.rational import Rational, integer_pow, rational_pow

half = Rational.parse("2/4")          # normalised to 1/2
assert half == Rational(1, 2)
assert str(Rational(3, -6)) == "-1/2"
assert integer_pow(2, 10) == 1024
assert rational_pow(Rational(6, 5), Rational(3, 1)) == Rational(216, 125)
```

Number kinds and their text forms are in `typecalc.numtypes`. `NumberType` has
the methods `coerce`, `parse`, `format` and `extra_key`.
`number_type(ControllerType.…)` maps a controller type to its number kind.

A `Calculator` for one number type reports failures with `CalculatorError`:

```python
from typecalc.calculator import Calculator, CalculatorError
from typecalc.numtypes import ControllerType, number_type
from typecalc.rational import Rational

calc = Calculator(number_type(ControllerType.RATIONAL))
calc.set(Rational(15, 8))
try:
    calc.div(Rational(0, 1))
except CalculatorError as error:
    print(error)                       # Division by zero
```

A `Controller` runs the keypad logic without a window. `CalculatorView` is a
dataclass that holds the display state: `input_text`, `formula_text`,
`mem_text`, `extra_key` and `error`. You can use it as it is, or subclass it
and override its `set_…` methods:

```python
from typecalc.controller import CalculatorView, Controller
from typecalc.numtypes import ControlKey, ControllerType, Operation, number_type

view = CalculatorView()
controller = Controller(number_type(ControllerType.INT))
controller.bind(view)
for digit in (1, 2):
    controller.press_digit(digit)
controller.press_operation(Operation.ADDITION)
controller.press_digit(5)
controller.press_control(ControlKey.PLUS_MINUS)
controller.press_control(ControlKey.EQUALS)
assert view.formula_text == "12 + -5 = "
assert view.input_text == "7"
```

`typecalc.mainwindow.MainWindow` is a `CalculatorView` that also draws itself
in Tk widgets when you give it a root window. With `None` it only keeps state.
`controller_type_for_label` turns a drop-down label into a `ControllerType`.

## Tests

```
pip install .[test]
pytest
```