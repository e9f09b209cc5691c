"""A single-register calculator over one kind of number."""

from __future__ import annotations

import math

from typecalc.numtypes import NumberType
from typecalc.rational import Rational, integer_pow, rational_pow


class CalculatorError(Exception):
    """An operation the calculator refuses to perform."""


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and int(value) % 2 == 1


def _float_pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0 and _is_odd_integer(exponent)
        return -math.inf if negative else math.inf
    except ValueError:
        if base == 0:
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan


def _float_div(lhs: float, rhs: float) -> float:
    if rhs == 0:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


class Calculator:
    """Holds a current number and an optional memory cell."""

    def __init__(self, number_type: NumberType) -> None:
        self.number_type = number_type
        self.number = number_type.coerce(0)
        self._mem = None

    def set(self, value) -> None:
        self.number = self.number_type.coerce(value)

    def save(self) -> None:
        self._mem = self.number

    def load(self) -> None:
        if self._mem is not None:
            self.number = self._mem

    def clear_mem(self) -> None:
        self._mem = None

    @property
    def has_mem(self) -> bool:
        return self._mem is not None

    def add(self, value) -> None:
        self.number = self.number_type.coerce(self.number + self.number_type.coerce(value))

    def sub(self, value) -> None:
        self.number = self.number_type.coerce(self.number - self.number_type.coerce(value))

    def mul(self, value) -> None:
        self.number = self.number_type.coerce(self.number * self.number_type.coerce(value))

    def div(self, value) -> None:
        kind = self.number_type
        divisor = kind.coerce(value)
        if kind.is_floating:
            self.number = kind.coerce(_float_div(self.number, divisor))
            return
        if divisor == 0:
            raise CalculatorError("Division by zero")
        if kind is NumberType.RATIONAL:
            self.number = self.number / divisor
            return
        quotient = abs(self.number) // abs(divisor)
        if (self.number < 0) != (divisor < 0):
            quotient = -quotient
        self.number = kind.coerce(quotient)

    def pow(self, exponent) -> None:
        kind = self.number_type
        if kind is NumberType.RATIONAL and isinstance(exponent, Rational):
            power = exponent
        else:
            power = exponent if kind.is_integral and isinstance(exponent, Rational) else kind.coerce(exponent)
        if self.number == 0 and power == 0:
            raise CalculatorError("Zero power to zero")
        if kind.is_floating:
            self.number = kind.coerce(_float_pow(self.number, power))
        elif kind.is_integral:
            if power < 0:
                raise CalculatorError("Integer negative power")
            if isinstance(power, Rational):
                raise CalculatorError("Fractional power is not supported")
            self.number = kind.coerce(pow(self.number, power, kind.modulus))
        else:
            if power.denominator != 1:
                raise CalculatorError("Fractional power is not supported")
            self.number = rational_pow(self.number, power)


__all__ = ["Calculator", "CalculatorError", "integer_pow"]