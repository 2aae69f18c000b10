from hypothesis import given
from hypothesis import strategies as st

from bitinterval.bitwidth import bitwidth_to_interval, interval_to_bitwidth
from bitinterval.common import ArithKind
from bitinterval.interval import Interval

from .conftest import *


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@given(any_intervals)
def test_intersection_with_empty_is_empty(x: Interval) -> None:
    assert x.intersect(Interval.empty()).is_empty()
    assert Interval.empty().intersect(x).is_empty()


@given(intervals(), intervals())
def test_intersection_bounds(x: Interval, y: Interval) -> None:
    result = x.intersect(y)
    disjoint = x.supremum < y.infimum or y.supremum < x.infimum
    assert result.is_empty() == disjoint
    if disjoint:
        assert result == Interval.empty()
    else:
        assert result == Interval(max(x.infimum, y.infimum), min(x.supremum, y.supremum))


@given(intervals(), intervals(), intervals())
def test_add_is_commutative_and_associative(x: Interval, y: Interval, z: Interval) -> None:
    assert x + y == y + x
    assert (x + y) + z == x + (y + z)


@given(intervals())
def test_self_subtraction_is_not_zero(x: Interval) -> None:
    assert x - x == Interval(x.infimum - x.supremum, x.supremum - x.infimum)


@given(BOUNDS)
def test_from_value_contains_only_the_value(v: int) -> None:
    point = Interval.from_value(v)
    assert point.contains(v)
    assert not point.contains(v + 1)


@given(st.integers(min_value=1, max_value=32))
def test_unsigned_bitwidth_round_trip(n: int) -> None:
    assert interval_to_bitwidth(bitwidth_to_interval(n, ArithKind.UNSIGNED), ArithKind.UNSIGNED) == n


@given(intervals(), intervals(), st.data())
def test_signed_operators_contain_concrete_results(x: Interval, y: Interval, data: st.DataObject) -> None:
    a = data.draw(st.integers(x.infimum, x.supremum))
    b = data.draw(st.integers(y.infimum, y.supremum))
    signed = ArithKind.SIGNED

    assert a + b in x + y
    assert a - b in x - y
    assert a * b in x.mul(y, signed, signed)
    assert abs(a) in x.abs()
    assert a in x.hull(y) and b in x.hull(y)
    assert max(a, b) in x.max(y)
    assert min(a, b) in x.min(y)
    if not y.contains(0):
        assert _trunc_div(a, b) in x.div(y, signed, signed)


@given(intervals(), intervals(), st.data())
def test_intersection_keeps_common_values(x: Interval, y: Interval, data: st.DataObject) -> None:
    a = data.draw(st.integers(x.infimum, x.supremum))
    assert (a in x.intersect(y)) == (a in y)
