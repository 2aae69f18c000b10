import numpy as np
import pandas as pd
import pytest
from hypothesis import strategies as st

from bitinterval.interval import Interval

BOUNDS = st.integers(min_value=-(2**20), max_value=2**20)


@st.composite
def intervals(draw: st.DrawFn) -> Interval:
    lo = draw(BOUNDS)
    hi = draw(BOUNDS)
    return Interval(min(lo, hi), max(lo, hi))


# Bounds drawn independently, so the interval may be inverted (empty).
any_intervals = st.builds(Interval, BOUNDS, BOUNDS)


@pytest.fixture
def sample_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "small": pd.Series([0, 3, 200], dtype=np.int64),
            "negative": pd.Series([-64, 7, 0], dtype=np.int64),
            "big": pd.Series([0, 70000, 5], dtype=np.int64),
            "real": pd.Series([0.5, 1.0, 2.0], dtype=np.float64),
            "flag": pd.Series([True, False, True], dtype=bool),
            "label": pd.Series(["x", "y", "z"], dtype=object),
        }
    )
