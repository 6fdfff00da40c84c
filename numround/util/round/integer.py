"""Implements a single function `round_div`, which mimics the integer division
operator `//`, but with customizable rounding behavior.
"""
from __future__ import annotations

import numpy as np

from numround.error import error_trace


# NOTE: `half_up` assumes an even denominator, which holds for every power of
# ten except 10**0.  Callers skip division by 1 entirely.


def _opposite_signs(n, d):
    result = (n < 0) ^ (d < 0)
    if isinstance(n, np.ndarray) and n.dtype == object:
        # keep `d // 2 - result` out of int64 for denominators past 10**18
        return np.asarray(result, dtype=object)
    return result


integer_rounding_bias = {
    "floor":        lambda n, d: 0,
    "ceiling":      lambda n, d: d - 1,
    "half_up":      lambda n, d: d // 2 - _opposite_signs(n, d)
}


def round_div(
    numerator: int | np.ndarray,
    denominator: int | np.ndarray,
    rule: str = "floor"
) -> int | np.ndarray:
    """Vectorized integer division with customizable rounding behavior.

    Unlike other approaches, this function does not perform float conversion
    at any point.  Instead, it replicates each rounding rule by adding a
    simple integer bias at each index, before applying the `//` operator.  This
    allows it to retain full integer precision for arbitrary choices of
    `numerator` and `denominator`, provided they are python integers (or
    arrays with `dtype=object` that hold them).

    Parameters
    ----------
    numerator (int | np.ndarray):
        Integer numerator.  Can be vectorized, with arbitrary dimensions.
    denominator (int | np.ndarray):
        Integer denominator.  Can be vectorized, with arbitrary dimensions.
    rule (str):
        A string specifying the rounding strategy to use.  Must be one of
        ('floor', 'ceiling', 'half_up'), where `floor`/`ceiling` round toward
        -/+ infinity and `half_up` rounds to nearest with ties away from zero.
        Defaults to 'floor', which matches the behavior of the base `//`
        operator.

    Returns
    -------
    int | np.ndarray:
        The result of integer division with the specified rounding rule.  If
        either of the numeric inputs are vectorized, the result will be too.

    Raises
    ------
    ValueError:
        If `rule` is not one of the accepted rounding rules ('floor',
        'ceiling', 'half_up').
    """
    try:
        bias = integer_rounding_bias[rule](numerator, denominator)
    except KeyError as err:
        err_msg = (f"[{error_trace()}] `rule` must be one of "
                   f"{tuple(integer_rounding_bias)}, not {repr(rule)}")
        raise ValueError(err_msg) from err

    # keep object arrays in python integer arithmetic
    if (
        isinstance(numerator, np.ndarray) and numerator.dtype == object and
        isinstance(bias, np.ndarray)
    ):
        bias = bias.astype(object)

    return (numerator + bias) // denominator
