import pytest

from bitinterval.common import IntervalDomainError
from bitinterval.intmath import *


@pytest.mark.parametrize(
    "value, log",
    [(1, 0), (2, 1), (3, 2), (4, 2), (5, 3), (72, 7), (1024, 10), (1025, 11), (2**31, 31)],
)
def test_ceil_log2(value: int, log: int) -> None:
    assert ceil_log2(value) == log


@pytest.mark.parametrize("value", [0, -1, -72])
def test_ceil_log2_rejects_non_positive(value: int) -> None:
    with pytest.raises(IntervalDomainError):
        ceil_log2(value)


def test_int_pow() -> None:
    assert int_pow(2, 10) == 1024
    assert int_pow(-3, 3) == -27
    assert int_pow(7, 0) == 1
    assert int_pow(0, 0) == 1
    assert int_pow(2, 40) == 1099511627776

    with pytest.raises(IntervalDomainError):
        int_pow(2, -1)


def test_integer_square_roots() -> None:
    assert isqrt_floor(15) == 3
    assert isqrt_ceil(244) == 16
    assert isqrt_floor(16) == isqrt_ceil(16) == 4
    assert isqrt_ceil(0) == 0
    assert isqrt_ceil(2**62 + 1) == 2**31 + 1

    with pytest.raises(IntervalDomainError):
        isqrt_floor(-4)
