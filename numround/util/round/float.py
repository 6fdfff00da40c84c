"""Implements a single function `round_float`, which performs customizable
rounding on floating point numbers and arrays.
"""
from __future__ import annotations

import numpy as np

from numround.error import error_trace


def _round_half_up(val: np.ndarray) -> np.ndarray:
    # trunc() is exact, so `val - result` is exact as well
    result = np.trunc(val)
    with np.errstate(invalid="ignore"):  # inf - inf
        remainder = np.abs(val - result)
    return result + (remainder >= 0.5) * np.sign(val)


float_rounding_rules = {
    "floor": np.floor,  # toward -infinity
    "ceiling": np.ceil,  # toward +infinity
    "half_up": _round_half_up  # half away from 0
}


def power_of_ten(exponent: int, dtype: np.dtype) -> np.floating:
    """Compute `10**exponent` as a scalar of the given float `dtype`.

    The power is always computed in double precision and then cast, so a
    `float32` scale matches the `float64` one up to the final rounding step.
    Exponents large enough to overflow (or underflow) produce `inf` (or `0`).
    """
    exponent = max(min(exponent, 400), -400)  # float64 saturates well before
    return np.dtype(dtype).type(np.float64(10.0) ** exponent)


def round_float(
    val: float | np.ndarray,
    rule: str = "half_up",
    decimals: int = 0
) -> float | np.ndarray:
    """Round a float or array of floats according to the specified `rule`.

    Parameters
    ----------
    val (float | np.ndarray):
        The value to be rounded.  Can be vectorized.  Arithmetic is carried
        out in the precision of `val` itself, so `float32` inputs are never
        promoted.
    rule (str):
        A string specifying the rounding strategy to use.  Must be one of
        ('floor', 'ceiling', 'half_up'), where `floor`/`ceiling` round toward
        -/+ infinity and `half_up` rounds to nearest with ties away from zero.
        Defaults to 'half_up'.
    decimals (int):
        The number of decimals to round to.  Positive numbers count to the
        right of the decimal point, and negative values count to the left.
        0 represents rounding in the ones place of `val`.  This follows the
        convention set out in `numpy.around`.  Defaults to 0.

    Returns
    -------
    float | np.ndarray:
        The result of rounding `val` according to the given rule.  `val`
        itself is never modified.

    Raises
    ------
    ValueError:
        If `rule` is not one of the accepted rounding rules ('floor',
        'ceiling', 'half_up').

    Notes
    -----
    Positive `decimals` scale by multiplication first (`rule(val * 10**n) /
    10**n`), while negative `decimals` scale by division first
    (`rule(val / 10**n) * 10**n`).  In both cases the scale factor is an
    exact integer whenever it is representable, which keeps results like
    `round_float(123.456, decimals=2) == 123.46` free of representation
    error in the scale itself.
    """
    # select rounding strategy
    try:
        round_func = float_rounding_rules[rule]
    except KeyError as err:
        err_msg = (f"[{error_trace()}] `rule` must be one of "
                   f"{tuple(float_rounding_rules)}, not {repr(rule)}")
        raise ValueError(err_msg) from err

    dtype = np.asarray(val).dtype

    # case 1: decimal places (multiply, round, divide)
    if decimals > 0:
        scale_factor = power_of_ten(decimals, dtype)
        return round_func(val * scale_factor) / scale_factor

    # case 2: zeros (divide, round, multiply)
    if decimals < 0:
        scale_factor = power_of_ten(-decimals, dtype)
        return round_func(val / scale_factor) * scale_factor

    # case 3: units
    return round_func(val)
