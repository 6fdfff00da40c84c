"""This module describes a `NumericWrapper` object, which unwraps any value
accepted by `numround` into a plain numpy array of its numeric kind, and
rewraps rounded results into the same container they came from.
"""
from __future__ import annotations

import numpy as np
import pandas as pd

from numround.check import resolve_kind
from numround.util.type_hints import numeric


class NumericWrapper:
    """A uniform view over a numeric scalar, array, or series.

    Parameters
    ----------
    val (int | float | np.number | np.ndarray | pd.Series | list | tuple):
        The value to wrap.  It is never modified.

    Attributes
    ----------
    array (np.ndarray):
        The values of `val` as an array of its resolved kind.  Scalars become
        0-dimensional arrays.  Missing values in nullable series are filled
        with zero.
    dtype (np.dtype):
        The resolved kind of `val`.
    mask (np.ndarray | None):
        A boolean mask marking the missing values of a nullable series, or
        `None` if `val` cannot hold missing values.
    """

    def __init__(self, val: numeric):
        self.original = val
        self.dtype = resolve_kind(val)
        self.mask = None

        if isinstance(val, pd.Series):
            if isinstance(val.dtype, pd.api.extensions.ExtensionDtype):
                self.mask = val.isna().to_numpy()
                self.array = val.to_numpy(dtype=self.dtype, na_value=0)
            else:
                self.array = val.to_numpy()
        else:
            self.array = np.asarray(val, dtype=self.dtype)

    @property
    def is_scalar(self) -> bool:
        """`True` if the wrapped value is a python or numpy scalar."""
        return not isinstance(
            self.original,
            (np.ndarray, pd.Series, list, tuple)
        )

    def rewrap(self, result: np.number | np.ndarray) -> numeric:
        """Convert a result computed on `self.array` back into the container
        type of the original value.
        """
        result = np.asarray(result, dtype=self.dtype)
        val = self.original

        # pandas series
        if isinstance(val, pd.Series):
            if self.mask is not None:
                result = pd.array(result, dtype=val.dtype)
                result[self.mask] = pd.NA
            return pd.Series(result, index=val.index, name=val.name)

        # numpy arrays and sequences
        if not self.is_scalar:
            return result

        # scalars (numpy before python - np.float64 subclasses float)
        result = result[()]
        if isinstance(val, np.generic):
            return result
        if isinstance(val, float):
            return float(result)
        return int(result)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({repr(self.original)})"
