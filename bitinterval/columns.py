import numpy as np
import numpy.typing as npt
import pandas as pd
from loguru import logger
from pandas.api.types import is_bool_dtype, is_integer_dtype

from .bitwidth import interval_to_bitwidth
from .common import *
from .interval import Interval

_UNSIGNED_DTYPES = (np.uint8, np.uint16, np.uint32, np.uint64)
_SIGNED_DTYPES = (np.int8, np.int16, np.int32, np.int64)

DESCRIPTION_COLUMNS = ["column", "infimum", "supremum", "kind", "bitwidth", "dtype"]


def _is_integer_column(series: pd.Series) -> bool:
    # Pandas reports booleans as integers in some versions, we never treat them as such.
    return is_integer_dtype(series.dtype) and not is_bool_dtype(series.dtype)


def _default_kind(interval: Interval) -> ArithKind:
    return ArithKind.UNSIGNED if interval.is_positive() else ArithKind.SIGNED


def column_interval(series: pd.Series) -> Interval:
    if not _is_integer_column(series):
        raise TypeError(f"Column '{series.name}' of dtype {series.dtype} is not an integer column.")
    values = series.dropna()
    if len(values) == 0:
        return Interval.empty()
    return Interval(int(values.min()), int(values.max()))


def dtype_interval(dtype: npt.DTypeLike) -> Interval:
    info = np.iinfo(dtype)
    return Interval(int(info.min), int(info.max))


def smallest_dtype(interval: Interval, kind: ArithKind) -> np.dtype:
    if interval.is_empty():
        raise EmptyIntervalError("An empty interval has no smallest dtype.")
    check_arith_kind(kind)
    candidates = _SIGNED_DTYPES if kind.is_signed_family else _UNSIGNED_DTYPES
    for dtype in candidates:
        if dtype_interval(dtype).intersect(interval) == interval:
            return np.dtype(dtype)
    raise BitwidthRangeError(f"No {kind.name.lower()} integer dtype can hold interval {interval}.")


def describe_columns(df: pd.DataFrame, kind: ArithKind | None = None) -> pd.DataFrame:
    """
    Summarize the value intervals and safe bitwidths of the integer columns of a DataFrame.

    Args:
        df: The data to inspect. Non-integer and all-null columns are skipped.
        kind: Arithmetic kind to assume for every column. When `None`, positive columns are
            treated as unsigned and the others as signed.

    Returns:
        A DataFrame indexed by column name, with the columns `infimum`, `supremum`, `kind`,
        `bitwidth` and `dtype`.
    """
    rows = []
    for column in df.columns:
        series = df[column]
        if not _is_integer_column(series):
            logger.debug(f"Skipping column `{column}` of dtype {series.dtype}.")
            continue

        interval = column_interval(series)
        if interval.is_empty():
            logger.debug(f"Skipping column `{column}` with no values.")
            continue

        column_kind = kind if kind is not None else _default_kind(interval)
        bitwidth_kind = ArithKind.SIGNED if column_kind.is_signed_family else ArithKind.UNSIGNED
        row = {
            "column": column,
            "infimum": interval.infimum,
            "supremum": interval.supremum,
            "kind": column_kind.name,
            "bitwidth": interval_to_bitwidth(interval, bitwidth_kind),
            "dtype": str(smallest_dtype(interval, column_kind)),
        }
        logger.debug(f"Column `{column}`: {interval} ({column_kind.name}) fits {row['dtype']}.")
        rows.append(row)

    return pd.DataFrame(rows, columns=DESCRIPTION_COLUMNS).set_index("column")


def downcast_columns(df: pd.DataFrame) -> pd.DataFrame:
    result = df.copy()
    for column in df.columns:
        series = df[column]
        # Numpy integer dtypes can't hold missing values.
        if not _is_integer_column(series) or series.isna().any():
            continue

        interval = column_interval(series)
        if interval.is_empty():
            continue

        dtype = smallest_dtype(interval, _default_kind(interval))
        if dtype != series.dtype:
            logger.debug(f"Downcasting column `{column}` from {series.dtype} to {dtype}.")
            result[column] = series.astype(dtype)
    return result
