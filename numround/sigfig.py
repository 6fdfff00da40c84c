"""Rounding to a fixed number of significant figures.

The number of significant figures in a value is counted from its most
significant non-zero digit, regardless of where the decimal point falls.
Rounding to `n` significant figures is therefore equivalent to rounding to
`digit_count(val) - n` zeros, where `digit_count()` locates the most
significant digit.  If that difference is negative, the rounding lands to the
right of the decimal point.

Zero has no most significant digit, so it is returned unchanged by every
entry point.  The same goes for NaN and infinities.
"""
from __future__ import annotations

import numpy as np

from numround import arguments
from numround.check import is_integer_kind
from numround.error import error_trace, shorten_list
from numround.scale import apply_zeros
from numround.util.type_hints import numeric
from numround.util.wrapper import NumericWrapper


# 10**20 exceeds the uint64 maximum, so every integer kind is covered
powers_of_ten = np.array([10**i for i in range(21)], dtype=object)


######################
####    PUBLIC    ####
######################


def digit_count(val: numeric) -> int | np.ndarray:
    """Count the digits in the integer part of `val`, as `ceil(log10(|val|))`.

    Values in (1, 10] have a digit count of 1, values in (10, 100] have 2, and
    so on.  Exact powers of ten fall on the lower bracket (`digit_count(100)
    == 2`), and values at or below 1 have counts of 0 or less
    (`digit_count(0.05) == -1`).

    Parameters
    ----------
    val (int | float | np.number | np.ndarray | pd.Series | list | tuple):
        The value to inspect.  Sign is ignored.

    Returns
    -------
    int | np.ndarray:
        A python integer if `val` is scalar, otherwise an `int64` array with
        the same shape as `val`.

    Raises
    ------
    ValueError:
        If any element of `val` is zero, missing, NaN, or infinite, for which
        the digit count is undefined.

    Notes
    -----
    Floats are counted using a double precision logarithm, which can
    misclassify values within a few ulps of a power of ten.  Integers are
    counted exactly, by comparison against a table of powers of ten.
    """
    wrapped = NumericWrapper(val)
    flat = np.ravel(wrapped.array)

    undefined = _undefined(flat, wrapped.mask)
    if undefined.any():
        raise ValueError(
            f"[{error_trace()}] digit count is undefined for zero, missing, "
            f"or non-finite values at index "
            f"{shorten_list(np.flatnonzero(undefined))}"
        )

    result = _count_digits(flat).reshape(wrapped.array.shape)
    if wrapped.is_scalar:
        return int(result[()])
    return result


def scale_sig_figs(
    val: numeric,
    sig_figs: int,
    rule: str = "half_up",
    errors: str = "ignore"
) -> numeric:
    """Round a number or array of numbers to the given number of significant
    figures using the specified rounding rule.

    Parameters
    ----------
    val (int | float | np.number | np.ndarray | pd.Series | list | tuple):
        The value to round.  May be any supported kind.
    sig_figs (int):
        The number of significant figures to keep.  If this exceeds the
        number of digits in the integer part of `val`, rounding takes place
        to the right of the decimal point.  At 0, values are rounded at their
        own digit count, i.e. to the nearest multiple of 1000 for 123.
    rule (str):
        One of ('half_up', 'ceiling', 'floor').  Defaults to 'half_up'.
    errors (str):
        One of ('ignore', 'warn', 'raise').  Determines whether results that
        overflow their kind are reported.  Defaults to 'ignore'.

    Returns
    -------
    int | float | np.number | np.ndarray | pd.Series:
        The rounded value, in the same kind and container as `val`.  Zero,
        NaN, infinite, and missing values are returned as-is.
    """
    sig_figs = arguments.precision(sig_figs, name="sig_figs")
    rule = arguments.rule(rule)
    errors = arguments.errors(errors)

    wrapped = NumericWrapper(val)
    flat = np.ravel(wrapped.array)
    result = flat.copy()

    with np.errstate(all=errors):
        # each element is shifted by its own digit count
        positions = np.flatnonzero(~_undefined(flat, wrapped.mask))
        zeros = _count_digits(flat[positions]) - sig_figs

        # elements at the same magnitude share a scale factor
        for count in np.unique(zeros):
            index = positions[zeros == count]
            result[index] = apply_zeros(
                flat[index],
                int(count),
                rule=rule,
                errors=errors
            )

    return wrapped.rewrap(result.reshape(wrapped.array.shape))


def round_sf(val: numeric, sig_figs: int, errors: str = "ignore") -> numeric:
    """Round to the given number of significant figures, with ties away from
    zero.

    >>> round_sf(123456.0, 4)
    123500.0
    >>> round_sf(123.456, 2)
    120.0
    >>> round_sf(np.int64(-123456), 2)
    -120000
    """
    return scale_sig_figs(val, sig_figs, rule="half_up", errors=errors)


def ceil_sf(val: numeric, sig_figs: int, errors: str = "ignore") -> numeric:
    """Round up to the given number of significant figures.

    >>> ceil_sf(123.456, 2)
    130.0
    """
    return scale_sig_figs(val, sig_figs, rule="ceiling", errors=errors)


def floor_sf(val: numeric, sig_figs: int, errors: str = "ignore") -> numeric:
    """Round down to the given number of significant figures."""
    return scale_sig_figs(val, sig_figs, rule="floor", errors=errors)


#######################
####    PRIVATE    ####
#######################


def _undefined(flat: np.ndarray, mask: np.ndarray | None) -> np.ndarray:
    """Flag the elements of `flat` that have no most significant digit."""
    result = (flat == 0) | ~np.isfinite(flat)
    if mask is not None:
        result |= np.ravel(mask)
    return result


def _count_digits(flat: np.ndarray) -> np.ndarray:
    """Compute `ceil(log10(|x|))` for every (non-zero, finite) element of a
    1D array.
    """
    if is_integer_kind(flat.dtype):
        # number of powers of ten strictly below |x|
        magnitude = np.abs(flat.astype(object))
        counts = np.searchsorted(powers_of_ten, magnitude, side="left")
        return np.asarray(counts, dtype=np.int64)

    magnitude = np.abs(flat.astype(np.float64))
    return np.ceil(np.log10(magnitude)).astype(np.int64)
