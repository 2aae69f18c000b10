import math

from .common import IntervalDomainError


def ceil_log2(value: int) -> int:
    # Smallest `k` such that `2 ** k >= value`.
    if value < 0:
        raise IntervalDomainError(f"Binary logarithm of negative value {value} is undefined.")
    if value == 0:
        raise IntervalDomainError("Binary logarithm of zero is minus infinity.")
    k = 0
    limit = 1
    while limit < value:
        k += 1
        limit *= 2
    return k


def int_pow(base: int, exponent: int) -> int:
    if exponent < 0:
        raise IntervalDomainError(f"Negative exponent {exponent} in integer power.")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def isqrt_floor(value: int) -> int:
    if value < 0:
        raise IntervalDomainError(f"Square root of negative value {value}.")
    return math.isqrt(value)


def isqrt_ceil(value: int) -> int:
    root = isqrt_floor(value)
    return root if root * root == value else root + 1
