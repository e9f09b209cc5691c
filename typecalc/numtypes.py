"""Keys, number kinds and their text forms."""

from __future__ import annotations

import enum
import math
import re
import struct

from typecalc.rational import Rational


class Operation(enum.Enum):
    ADDITION = enum.auto()
    SUBTRACTION = enum.auto()
    MULTIPLICATION = enum.auto()
    DIVISION = enum.auto()
    POWER = enum.auto()


class ControlKey(enum.Enum):
    EQUALS = enum.auto()
    CLEAR = enum.auto()
    MEM_SAVE = enum.auto()
    MEM_LOAD = enum.auto()
    MEM_CLEAR = enum.auto()
    PLUS_MINUS = enum.auto()
    BACKSPACE = enum.auto()
    EXTRA_KEY = enum.auto()


class ControllerType(enum.Enum):
    UINT8_T = enum.auto()
    INT = enum.auto()
    INT64_T = enum.auto()
    SIZE_T = enum.auto()
    DOUBLE = enum.auto()
    FLOAT = enum.auto()
    RATIONAL = enum.auto()


_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class NumberType(enum.Enum):
    """A kind of number the calculator can work in."""

    UINT8 = "uint8_t"
    INT = "int"
    INT64 = "int64_t"
    SIZE_T = "size_t"
    DOUBLE = "double"
    FLOAT = "float"
    RATIONAL = "Rational"

    @property
    def is_integral(self) -> bool:
        return self in _INT_LAYOUT

    @property
    def is_floating(self) -> bool:
        return self in (NumberType.DOUBLE, NumberType.FLOAT)

    @property
    def modulus(self) -> int | None:
        """Size of the value range of an integral type, else None."""
        layout = _INT_LAYOUT.get(self)
        return 1 << layout[0] if layout else None

    def _wrap(self, value: int) -> int:
        bits, signed = _INT_LAYOUT[self]
        value %= 1 << bits
        if signed and value >= 1 << (bits - 1):
            value -= 1 << bits
        return value

    def coerce(self, value):
        """Convert ``value`` into this type, wrapping or rounding as it would."""
        if self.is_integral:
            if isinstance(value, Rational) or not isinstance(value, (int, float)):
                raise TypeError(f"cannot convert {value!r} to {self.value}")
            return self._wrap(int(value))
        if self.is_floating:
            result = float(value)
            return _to_float32(result) if self is NumberType.FLOAT else result
        if isinstance(value, Rational):
            return value
        if isinstance(value, int):
            return Rational(value)
        raise TypeError(f"cannot convert {value!r} to Rational")

    def parse(self, text: str):
        """Read a number from the start of ``text``; unreadable text gives zero."""
        if self is NumberType.RATIONAL:
            return Rational.parse(text)
        if self is NumberType.UINT8:
            head = _INT_PREFIX.match(text)
            if head is None:
                raise ValueError(f"invalid number: {text!r}")
            value = int(head.group(1))
            if not -(1 << 31) <= value < (1 << 31):
                raise ValueError(f"number out of range: {text!r}")
            return self._wrap(value)
        if self.is_integral:
            head = _INT_PREFIX.match(text)
            if head is None:
                return 0
            value = int(head.group(1))
            bits, signed = _INT_LAYOUT[self]
            if signed:
                low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
                return min(max(value, low), high)
            if abs(value) >= 1 << bits:
                return (1 << bits) - 1
            return self._wrap(value)
        head = _FLOAT_PREFIX.match(text)
        if head is None:
            return 0.0
        return self.coerce(float(head.group(1)))

    def format(self, value) -> str:
        """Render ``value`` the way the display shows it."""
        if self.is_integral:
            return str(int(value))
        if self is NumberType.RATIONAL:
            return str(value)
        text = f"{value:.6g}"
        if self is NumberType.DOUBLE and "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    def extra_key(self) -> str | None:
        """Label of the extra input key, or None when there is none."""
        if self is NumberType.RATIONAL:
            return "/"
        if self.is_floating:
            return "."
        return None


_INT_LAYOUT = {
    NumberType.UINT8: (8, False),
    NumberType.INT: (32, True),
    NumberType.INT64: (64, True),
    NumberType.SIZE_T: (64, False),
}

_BY_CONTROLLER = {
    ControllerType.UINT8_T: NumberType.UINT8,
    ControllerType.INT: NumberType.INT,
    ControllerType.INT64_T: NumberType.INT64,
    ControllerType.SIZE_T: NumberType.SIZE_T,
    ControllerType.DOUBLE: NumberType.DOUBLE,
    ControllerType.FLOAT: NumberType.FLOAT,
    ControllerType.RATIONAL: NumberType.RATIONAL,
}


def number_type(controller_type: ControllerType) -> NumberType:
    """Return the number kind a controller type works in."""
    return _BY_CONTROLLER[controller_type]