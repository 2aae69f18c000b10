from loguru import logger

from .bitwidth import bitwidth_to_interval, interval_to_bitwidth, is_balanced, to_balanced, universe
from .common import (
    ArithKind,
    BitwidthParams,
    BitwidthRangeError,
    EmptyIntervalError,
    IntervalDivisionByZero,
    IntervalDomainError,
    IntervalError,
    IntervalNotImplementedError,
    UnsupportedArithKindError,
)
from .interval import Interval, format_interval, print_interval

# Library code stays silent unless the application enables it.
logger.disable("bitinterval")

__all__ = [
    "ArithKind",
    "BitwidthParams",
    "Interval",
    "format_interval",
    "print_interval",
    "universe",
    "bitwidth_to_interval",
    "interval_to_bitwidth",
    "to_balanced",
    "is_balanced",
    "IntervalError",
    "BitwidthRangeError",
    "IntervalDivisionByZero",
    "IntervalDomainError",
    "UnsupportedArithKindError",
    "EmptyIntervalError",
    "IntervalNotImplementedError",
]
