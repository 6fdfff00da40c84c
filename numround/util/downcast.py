"""Narrowing of exact integer results back into a fixed-width integer kind.

Integer rounding in `numround` is carried out on arbitrary-precision python
integers, so the rounded result can land outside the range of the input's own
kind (i.e. `round_zeros(np.int8(127), 1)` is 130).  `narrow_integer()` brings
such results back into range the same way a saturating float-to-integer
conversion does: by clamping them to the nearest bound of the kind.
"""
from __future__ import annotations
import warnings

import numpy as np
import pandas as pd

from numround.error import error_trace, shorten_list, user_stacklevel
from numround.util.type_hints import array_like, dtype_like


def integral_range(dtype: dtype_like) -> tuple[int, int]:
    """Get the integral range of a given integer dtype."""
    dtype = np.dtype(dtype)
    if not pd.api.types.is_integer_dtype(dtype):
        raise TypeError(
            f"[{error_trace()}] `dtype` must be an integer kind, not {dtype}"
        )

    bit_size = 8 * dtype.itemsize
    if pd.api.types.is_unsigned_integer_dtype(dtype):
        return (0, 2**bit_size - 1)
    return (-2**(bit_size - 1), 2**(bit_size - 1) - 1)


def narrow_integer(
    values: int | array_like,
    dtype: dtype_like,
    errors: str = "ignore"
) -> np.ndarray:
    """Convert exact integer results into an array of the given integer
    `dtype`, saturating any that fall outside its range.

    Parameters
    ----------
    values (int | array_like):
        Python integers (or an object array of them) to narrow.
    dtype (dtype_like):
        The integer kind to narrow to.
    errors (str):
        What to do when a value is out of range.  `'ignore'` clamps it to
        the nearest bound silently, `'warn'` clamps it and issues a
        `RuntimeWarning`, and `'raise'` raises an `OverflowError` instead.
        Defaults to `'ignore'`.

    Returns
    -------
    np.ndarray:
        An array of `dtype` with the same shape as `values`.

    Raises
    ------
    OverflowError:
        If `errors='raise'` and any of `values` exceed the range of `dtype`.
    """
    dtype = np.dtype(dtype)
    values = np.asarray(values, dtype=object)
    lower, upper = integral_range(dtype)

    overflow = np.asarray((values < lower) | (values > upper), dtype=bool)
    if overflow.any():
        if errors != "ignore":
            err_msg = (f"[{error_trace()}] values exceed {dtype} range at "
                       f"index {shorten_list(np.flatnonzero(overflow))}")
            if errors == "raise":
                raise OverflowError(err_msg)
            warnings.warn(err_msg, RuntimeWarning,
                          stacklevel=user_stacklevel())

        # saturate at the bounds of `dtype`
        values = np.asarray(
            np.minimum(np.maximum(values, lower), upper),
            dtype=object
        )

    return values.astype(dtype)
