"""Exact fractions of integers and integer powers."""

from __future__ import annotations

import functools
import math
import re

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@functools.total_ordering
class Rational:
    """A fraction kept in lowest terms with a positive denominator."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        if denominator == 0:
            raise ValueError("Denominator cannot be zero")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = math.gcd(numerator, denominator)
        self._numerator = numerator // divisor
        self._denominator = denominator // divisor

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def inv(self) -> Rational:
        """Return the reciprocal."""
        if self._numerator == 0:
            raise ValueError("Cannot invert zero")
        return Rational(self._denominator, self._numerator)

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Read ``n`` or ``n/d`` from the start of ``text``.

        Text without a leading integer reads as zero; a missing or zero
        denominator after ``/`` raises ValueError.
        """
        head = _INT_PREFIX.match(text)
        if head is None:
            return cls()
        numerator = int(head.group(1))
        rest = text[head.end():]
        if not rest.startswith("/"):
            return cls(numerator)
        tail = _INT_PREFIX.match(rest, 1)
        denominator = int(tail.group(1)) if tail else 0
        return cls(numerator, denominator)

    @staticmethod
    def _coerce(value: object) -> Rational | None:
        if isinstance(value, Rational):
            return value
        if isinstance(value, int):
            return Rational(value)
        return None

    def __pos__(self) -> Rational:
        return self

    def __neg__(self) -> Rational:
        return Rational(-self._numerator, self._denominator)

    def __add__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator + rhs._numerator * self._denominator,
            self._denominator * rhs._denominator,
        )

    __radd__ = __add__

    def __sub__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self + (-rhs)

    def __rsub__(self, other: object) -> Rational:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._numerator, self._denominator * rhs._denominator
        )

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._numerator == 0:
            raise ZeroDivisionError("Division by zero")
        return Rational(
            self._numerator * rhs._denominator, self._denominator * rhs._numerator
        )

    def __rtruediv__(self, other: object) -> Rational:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return (self._numerator, self._denominator) == (rhs._numerator, rhs._denominator)

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._numerator * rhs._denominator < rhs._numerator * self._denominator

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __float__(self) -> float:
        return self._numerator / self._denominator

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"


def integer_pow(base, exponent: int):
    """Raise ``base`` to an integer power by repeated squaring.

    A negative exponent yields the reciprocal; for plain integers that
    reciprocal truncates toward zero.
    """
    result = 1
    negative = exponent < 0
    exponent = abs(exponent)
    while exponent > 0:
        if exponent & 1:
            result = result * base
        exponent >>= 1
        if exponent:
            base = base * base
    if not negative:
        return result
    if isinstance(result, int):
        if result == 0:
            raise ZeroDivisionError("Division by zero")
        return 0 if abs(result) > 1 else result
    return 1 / result


def rational_pow(lhs: Rational, rhs: Rational) -> Rational:
    """Raise a fraction to a whole-number fractional exponent."""
    rhs = Rational._coerce(rhs)
    if rhs is None or rhs.denominator != 1:
        raise ValueError("Fractional power is not supported")
    exponent = rhs.numerator
    if exponent >= 0:
        return Rational(
            integer_pow(lhs.numerator, exponent), integer_pow(lhs.denominator, exponent)
        )
    return Rational(
        integer_pow(lhs.denominator, -exponent), integer_pow(lhs.numerator, -exponent)
    )