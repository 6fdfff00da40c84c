"""This module resolves the numeric kind of every value that `numround` can
round.

It exposes a single public-facing function, `resolve_kind()`, which takes a
python scalar, numpy scalar, numpy array, pandas series or plain sequence and
returns the `numpy.dtype` that its arithmetic will be carried out in.  Only a
closed set of fixed-width kinds is recognized (see `supported_kinds`) -
everything else is rejected with a `TypeError`, and python integers that
exceed 64-bit range are rejected with an `OverflowError`.

`is_float_kind()` and `is_integer_kind()` classify the result.
"""
from __future__ import annotations

import numpy as np
import pandas as pd

from numround.error import error_trace
from numround.util.type_hints import dtype_like, numeric


#############################
####    Lookup Tables    ####
#############################


supported_kinds = (
    # float
    np.dtype(np.float32),
    np.dtype(np.float64),

    # signed
    np.dtype(np.int8),
    np.dtype(np.int16),
    np.dtype(np.int32),
    np.dtype(np.int64),

    # unsigned
    np.dtype(np.uint8),
    np.dtype(np.uint16),
    np.dtype(np.uint32),
    np.dtype(np.uint64)
)


nullable_aliases = {  # pandas extension dtypes -> backing numpy kind
    pd.Int8Dtype(): np.dtype(np.int8),
    pd.Int16Dtype(): np.dtype(np.int16),
    pd.Int32Dtype(): np.dtype(np.int32),
    pd.Int64Dtype(): np.dtype(np.int64),
    pd.UInt8Dtype(): np.dtype(np.uint8),
    pd.UInt16Dtype(): np.dtype(np.uint16),
    pd.UInt32Dtype(): np.dtype(np.uint32),
    pd.UInt64Dtype(): np.dtype(np.uint64),
    pd.Float32Dtype(): np.dtype(np.float32),
    pd.Float64Dtype(): np.dtype(np.float64)
}


######################
####    PUBLIC    ####
######################


def resolve_kind(val: numeric) -> np.dtype:
    """Get the numeric kind that `val` will be rounded in.

    Parameters
    ----------
    val (int | float | np.number | np.ndarray | pd.Series | list | tuple):
        The value to inspect.  Python floats resolve to `float64`.  Python
        integers resolve to `int64`, or `uint64` if they only fit there.
        Containers resolve to the dtype of their elements, and nullable
        pandas series resolve to the numpy dtype that backs them.

    Returns
    -------
    np.dtype:
        One of the dtypes listed in `supported_kinds`.

    Raises
    ------
    TypeError:
        If `val` is not one of the supported numeric kinds.  Booleans are
        never considered numeric.
    OverflowError:
        If `val` is a python integer outside the range of both `int64` and
        `uint64`.
    """
    # numpy scalars (before python scalars - np.float64 subclasses float)
    if isinstance(val, np.generic):
        return _check_dtype(val.dtype)

    # python scalars
    if isinstance(val, bool):
        raise TypeError(
            f"[{error_trace()}] booleans cannot be rounded, not {repr(val)}"
        )
    if isinstance(val, int):
        return _python_int_kind(val)
    if isinstance(val, float):
        return np.dtype(np.float64)

    # pandas series
    if isinstance(val, pd.Series):
        if val.dtype in nullable_aliases:
            return nullable_aliases[val.dtype]
        if isinstance(val.dtype, np.dtype):
            return _check_dtype(val.dtype)
        raise TypeError(
            f"[{error_trace()}] series must have a numeric dtype, not "
            f"{val.dtype}"
        )

    # numpy arrays and plain sequences
    if isinstance(val, np.ndarray):
        return _check_dtype(val.dtype)
    if isinstance(val, (list, tuple)):
        return _check_dtype(np.asarray(val).dtype)

    raise TypeError(
        f"[{error_trace()}] `val` must be a real number or an array of real "
        f"numbers, not {type(val)}"
    )


def is_float_kind(dtype: dtype_like) -> bool:
    """Return `True` if `dtype` is a floating point kind."""
    return np.dtype(dtype).kind == "f"


def is_integer_kind(dtype: dtype_like) -> bool:
    """Return `True` if `dtype` is a signed or unsigned integer kind."""
    return np.dtype(dtype).kind in "iu"


#######################
####    PRIVATE    ####
#######################


def _check_dtype(dtype: np.dtype) -> np.dtype:
    if dtype not in supported_kinds:
        raise TypeError(
            f"[{error_trace(stack_index=2)}] `val` must have one of the "
            f"following dtypes: {[str(d) for d in supported_kinds]}, not "
            f"{dtype}"
        )
    return np.dtype(dtype)


def _python_int_kind(val: int) -> np.dtype:
    int64 = np.iinfo(np.int64)
    if int64.min <= val <= int64.max:
        return np.dtype(np.int64)
    if 0 <= val <= np.iinfo(np.uint64).max:
        return np.dtype(np.uint64)
    raise OverflowError(
        f"[{error_trace(stack_index=2)}] python integer {val} exceeds 64-bit "
        f"range"
    )
