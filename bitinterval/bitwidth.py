from .common import *
from .interval import Interval
from .intmath import ceil_log2, int_pow

DEFAULT_BITWIDTH_PARAMS = BitwidthParams()


def _check_bitwidth(bitwidth: int, params: BitwidthParams) -> None:
    if not params.min_bitwidth <= bitwidth <= params.max_bitwidth:
        raise BitwidthRangeError(
            f"Bitwidth {bitwidth} is outside the supported range "
            f"[{params.min_bitwidth},{params.max_bitwidth}]."
        )


def universe(bitwidth: int, kind: ArithKind, params: BitwidthParams = DEFAULT_BITWIDTH_PARAMS) -> Interval:
    return bitwidth_to_interval(bitwidth, kind, params)


def bitwidth_to_interval(bitwidth: int, kind: ArithKind, params: BitwidthParams = DEFAULT_BITWIDTH_PARAMS) -> Interval:
    """
    Convert the bitwidth of an integer to the interval of values it can hold.

    An n-bit unsigned integer maps to [0, 2**n - 1] and an n-bit two's complement
    integer to [-2**(n-1), 2**(n-1) - 1].
    """
    _check_bitwidth(bitwidth, params)
    check_arith_kind(kind)
    if kind is ArithKind.UNSIGNED:
        return Interval(0, int_pow(2, bitwidth) - 1)
    else:
        half = int_pow(2, bitwidth - 1)
        return Interval(-half, half - 1)


def interval_to_bitwidth(interval: Interval, kind: ArithKind) -> int:
    if interval.is_empty():
        raise EmptyIntervalError("Unable to compute the bitwidth of an empty interval.")
    check_arith_kind(kind, ArithKind.UNSIGNED, ArithKind.SIGNED)
    # Signed intervals use the same count as unsigned ones: the sign bit is not added.
    return ceil_log2(interval.supremum - interval.infimum + 1)


def to_balanced(interval: Interval, kind: ArithKind) -> Interval:
    check_arith_kind(kind, ArithKind.UNSIGNED, ArithKind.SIGNED)
    if kind is ArithKind.UNSIGNED:
        if not interval.is_positive():
            raise IntervalDomainError(f"Cannot balance interval {interval} with negative values as unsigned.")
        return Interval(0, int_pow(2, ceil_log2(interval.supremum)) - 1)
    else:
        magnitude = max(
            int_pow(2, ceil_log2(abs(interval.supremum))),
            int_pow(2, ceil_log2(abs(interval.infimum))),
        )
        bound = int_pow(2, ceil_log2(magnitude))
        return Interval(-bound, bound - 1)


def is_balanced(interval: Interval, kind: ArithKind) -> bool:
    check_arith_kind(kind, ArithKind.UNSIGNED, ArithKind.SIGNED)
    bound = int_pow(2, interval_to_bitwidth(interval, kind))
    if kind is ArithKind.UNSIGNED:
        return interval == Interval(0, bound - 1)
    else:
        # Lower bound uses the full bitwidth as exponent, not bitwidth - 1.
        return interval == Interval(-bound, bound - 1)
