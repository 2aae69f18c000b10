from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from .common import *
from .intmath import int_pow, isqrt_ceil, isqrt_floor


def _trunc_div(a: int, b: int) -> int:
    # Quotient rounded toward zero, as integer division does in two's complement hardware.
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class Interval:
    # Inclusive bounds. `infimum > supremum` means the interval is empty; [1,0] is the canonical empty value.
    infimum: int
    supremum: int

    @staticmethod
    def empty() -> Interval:
        return Interval(1, 0)

    @staticmethod
    def from_value(value: int) -> Interval:
        return Interval(value, value)

    @staticmethod
    def abstract(values: Iterable[int]) -> Interval:
        values = list(values)
        if not values:
            return Interval.empty()
        return Interval(min(values), max(values))

    def copy(self) -> Interval:
        return Interval(self.infimum, self.supremum)

    def __str__(self) -> str:
        return f"[{self.infimum},{self.supremum}]"

    def __contains__(self, value: int) -> bool:
        return self.contains(value)

    def __add__(self, other: Interval) -> Interval:
        return self.add(other)

    def __sub__(self, other: Interval) -> Interval:
        return self.sub(other)

    def __neg__(self) -> Interval:
        return self.neg()

    ### predicates

    def is_empty(self) -> bool:
        return self.infimum > self.supremum

    # Both `is_positive` and `is_negative` include zero, so [0,0] is both.
    def is_positive(self) -> bool:
        return self.infimum >= 0 and self.supremum >= 0

    def is_negative(self) -> bool:
        return self.infimum <= 0 and self.supremum <= 0

    def is_symmetric(self) -> bool:
        return self.infimum == -self.supremum

    def contains(self, value: int) -> bool:
        return self.infimum <= value <= self.supremum

    def size(self) -> int:
        return 0 if self.is_empty() else self.supremum - self.infimum + 1

    def clamp(self, lo: int, hi: int) -> Interval:
        # Emptiness of the result is not checked.
        return Interval(max(self.infimum, lo), min(self.supremum, hi))

    ### arithmetic

    def add(self, other: Interval) -> Interval:
        return Interval(self.infimum + other.infimum, self.supremum + other.supremum)

    def sub(self, other: Interval) -> Interval:
        return Interval(self.infimum - other.supremum, self.supremum - other.infimum)

    def neg(self) -> Interval:
        return Interval(-self.supremum, -self.infimum)

    def mul(self, other: Interval, x_kind: ArithKind, y_kind: ArithKind) -> Interval:
        """Untruncated product, bounded according to the signedness of each operand."""
        check_arith_kind(x_kind)
        check_arith_kind(y_kind)
        xl, xh = self.infimum, self.supremum
        yl, yh = other.infimum, other.supremum

        match (x_kind.is_signed_family, y_kind.is_signed_family):
            case (False, False):
                return Interval(xl * yl, xh * yh)
            case (False, True):
                return Interval(min(xh * yl, xl * yl), max(xh * yh, xl * yh))
            case (True, False):
                return Interval(min(xl * yh, xl * yl), max(xh * yh, xh * yl))
            case _:
                corners = (xl * yl, xl * yh, xh * yl, xh * yh)
                return Interval(min(corners), max(corners))

    def div(self, other: Interval, x_kind: ArithKind, y_kind: ArithKind) -> Interval:
        """Quotient only; the remainder is not tracked."""
        if other.contains(0):
            raise IntervalDivisionByZero(f"Divisor interval {other} contains zero.")
        if other.is_empty():
            raise EmptyIntervalError("Divisor interval is empty.")
        check_arith_kind(x_kind)
        check_arith_kind(y_kind)
        xl, xh = self.infimum, self.supremum
        yl, yh = other.infimum, other.supremum

        match (x_kind.is_signed_family, y_kind.is_signed_family):
            case (False, False):
                return Interval(_trunc_div(xl, yh), _trunc_div(xh, yl))
            case (True, True):
                corners = (_trunc_div(xl, yl), _trunc_div(xl, yh), _trunc_div(xh, yl), _trunc_div(xh, yh))
                return Interval(min(corners), max(corners))
            case _:
                raise UnsupportedArithKindError(
                    f"Division of {x_kind.name} by {y_kind.name} operands is not supported."
                )

    def mod(self, other: Interval, x_kind: ArithKind) -> Interval:
        check_arith_kind(x_kind, ArithKind.UNSIGNED, ArithKind.SIGNED)
        divisor_magnitude = max(other.supremum, -other.infimum) - 1

        if x_kind is ArithKind.UNSIGNED:
            return Interval(0, max(self.supremum, divisor_magnitude))
        else:
            bound = max(max(self.supremum, -self.infimum), divisor_magnitude)
            return Interval(-bound, bound)

    def exp_integer(self, n: int) -> Interval:
        """Bounds of `x ** n` for a non-negative integer exponent `n`."""
        if n < 0:
            raise IntervalDomainError(f"Negative exponent {n} in interval power.")
        odd = n % 2 == 1

        if odd or self.infimum >= 0:
            return Interval(int_pow(self.infimum, n), int_pow(self.supremum, n))
        elif self.supremum <= 0:
            return Interval(int_pow(self.supremum, n), int_pow(self.infimum, n))
        else:
            # TODO: even power of an interval straddling zero needs an agreed envelope, e.g. [0, max(xl**n, xh**n)].
            raise IntervalNotImplementedError(f"Even power {n} of interval {self} straddling zero.")

    def sqrt(self) -> Interval:
        if self.infimum >= 0 and self.supremum >= 0:
            return Interval(isqrt_floor(self.infimum), isqrt_ceil(self.supremum))
        raise IntervalDomainError(f"Cannot compute square root of interval {self} with negative values.")

    def abs(self) -> Interval:
        return Interval(0, max(abs(self.supremum), abs(self.infimum)))

    def max(self, other: Interval) -> Interval:
        return Interval(max(self.infimum, other.infimum), max(self.supremum, other.supremum))

    def min(self, other: Interval) -> Interval:
        return Interval(min(self.infimum, other.infimum), min(self.supremum, other.supremum))

    ### hull operators

    # Selection, bitwise operators and union all over-approximate to the convex hull of both operands.
    def hull(self, other: Interval) -> Interval:
        return Interval(min(self.infimum, other.infimum), max(self.supremum, other.supremum))

    def mux(self, other: Interval) -> Interval:
        return self.hull(other)

    def bitwise_and(self, other: Interval) -> Interval:
        return self.hull(other)

    def bitwise_or(self, other: Interval) -> Interval:
        return self.hull(other)

    def bitwise_xor(self, other: Interval) -> Interval:
        return self.hull(other)

    def union(self, other: Interval) -> Interval:
        return self.hull(other)

    def bitwise_not(self) -> Interval:
        raise IntervalNotImplementedError("Bitwise NOT of an interval is not implemented.")

    ### set operators

    def relational(self, other: Interval) -> Interval:
        # The outcome of a comparison is unknown, so it may be either 0 or 1.
        if self.is_empty() or other.is_empty():
            raise EmptyIntervalError("Relational operator applied to an empty interval.")
        return Interval(0, 1)

    def intersect(self, other: Interval) -> Interval:
        if self.is_empty() or other.is_empty():
            return Interval.empty()
        if self.supremum < other.infimum or other.supremum < self.infimum:
            return Interval.empty()
        return Interval(max(self.infimum, other.infimum), min(self.supremum, other.supremum))


def format_interval(interval: Interval) -> str:
    return str(interval)


def print_interval(interval: Interval, file: TextIO | None = None) -> None:
    (file if file is not None else sys.stdout).write(format_interval(interval))
