from dataclasses import dataclass
from enum import Enum, unique
from typing import Any


@unique
class ArithKind(Enum):
    UNSIGNED = 1
    SIGNED = 2
    # Signed, but the caller asserts the value is >= 0.
    SIGNED_POSITIVE = 3
    # Signed, but the caller asserts the value is <= 0.
    SIGNED_NEGATIVE = 4

    @property
    def is_signed_family(self) -> bool:
        return self is not ArithKind.UNSIGNED


@dataclass(frozen=True)
class BitwidthParams:
    min_bitwidth: int = 1
    max_bitwidth: int = 32

    def __post_init__(self) -> None:
        if not 1 <= self.min_bitwidth <= self.max_bitwidth:
            raise BitwidthRangeError(f"Invalid bitwidth range [{self.min_bitwidth},{self.max_bitwidth}].")


class IntervalError(Exception):
    pass


class BitwidthRangeError(IntervalError, ValueError):
    pass


class IntervalDivisionByZero(IntervalError, ZeroDivisionError):
    pass


class IntervalDomainError(IntervalError, ValueError):
    pass


class UnsupportedArithKindError(IntervalError, TypeError):
    pass


class EmptyIntervalError(IntervalError, ValueError):
    pass


class IntervalNotImplementedError(IntervalError, NotImplementedError):
    pass


def check_arith_kind(kind: Any, *allowed: ArithKind) -> ArithKind:
    """
    Validate an arithmetic kind argument.

    Args:
        kind: The value passed by the caller.
        allowed: The accepted kinds. When empty, any `ArithKind` is accepted.

    Returns:
        The validated kind.

    Raises:
        UnsupportedArithKindError: If `kind` is not an `ArithKind` or is not one of `allowed`.
    """
    if not isinstance(kind, ArithKind):
        raise UnsupportedArithKindError(f"Expected an ArithKind, got {kind!r}.")
    if allowed and kind not in allowed:
        names = ", ".join(k.name for k in allowed)
        raise UnsupportedArithKindError(f"Arithmetic kind {kind.name} is not supported here (expected {names}).")
    return kind
