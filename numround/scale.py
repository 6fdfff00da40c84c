"""Rounding to a fixed number of decimal places or zeros.

Two precision interpretations are implemented here, each with three public
entry points (one per rounding rule):

decimal places
    `round()`, `ceil()`, `floor()` - the number of digits kept to the right
    of the decimal point.  Only defined for floating point values.

zeros
    `round_zeros()`, `ceil_zeros()`, `floor_zeros()` - the power of ten at
    or above the units digit to round to, so `zeros=2` rounds to the nearest
    hundred.  Defined for every supported kind.

`scale_decimals()` and `scale_zeros()` expose the same operations with the
rule as an argument.  Every function returns a result of the same kind (and
container) as its input, and none of them modify their input.
"""
from __future__ import annotations

import numpy as np

from numround import arguments
from numround.check import is_float_kind
from numround.error import error_trace
from numround.util.downcast import narrow_integer
from numround.util.round import round_div, round_float
from numround.util.type_hints import numeric
from numround.util.wrapper import NumericWrapper


#######################
####    GENERIC    ####
#######################


def scale_decimals(
    val: numeric,
    decimals: int = 0,
    rule: str = "half_up",
    errors: str = "ignore"
) -> numeric:
    """Round a float or array of floats to the given number of decimal places
    using the specified rounding rule.

    Parameters
    ----------
    val (float | np.floating | np.ndarray | pd.Series | list | tuple):
        The value to round.  Must be a `float32` or `float64` kind.
    decimals (int):
        The number of digits to keep to the right of the decimal point.  A
        negative count is equivalent to `scale_zeros()` with `zeros=-decimals`.
        Defaults to 0.
    rule (str):
        One of ('half_up', 'ceiling', 'floor').  Defaults to 'half_up'.
    errors (str):
        One of ('ignore', 'warn', 'raise').  Determines whether float overflow
        (from very large `decimals`) is reported.  Defaults to 'ignore'.

    Returns
    -------
    float | np.floating | np.ndarray | pd.Series:
        The rounded value, in the same kind and container as `val`.

    Raises
    ------
    TypeError:
        If `val` is not a floating point kind.
    """
    decimals = arguments.precision(decimals, name="decimals")
    rule = arguments.rule(rule)
    errors = arguments.errors(errors)

    wrapped = NumericWrapper(val)
    if not is_float_kind(wrapped.dtype):
        raise TypeError(
            f"[{error_trace()}] decimal places are only defined for floating "
            f"point values, not {wrapped.dtype}"
        )

    with np.errstate(all=errors):
        result = round_float(wrapped.array, rule=rule, decimals=decimals)
    return wrapped.rewrap(result)


def scale_zeros(
    val: numeric,
    zeros: int = 0,
    rule: str = "half_up",
    errors: str = "ignore"
) -> numeric:
    """Round a number or array of numbers to the given number of zeros using
    the specified rounding rule.

    Parameters
    ----------
    val (int | float | np.number | np.ndarray | pd.Series | list | tuple):
        The value to round.  May be any supported kind.
    zeros (int):
        The power of ten to round to.  0 rounds to the nearest unit, 1 to the
        nearest ten, and so on.  A negative count rounds to the right of the
        decimal point, which leaves integers unchanged.  Defaults to 0.
    rule (str):
        One of ('half_up', 'ceiling', 'floor').  Defaults to 'half_up'.
    errors (str):
        One of ('ignore', 'warn', 'raise').  Determines whether results that
        overflow their kind are reported.  Defaults to 'ignore', in which case
        integer results saturate silently.

    Returns
    -------
    int | float | np.number | np.ndarray | pd.Series:
        The rounded value, in the same kind and container as `val`.

    Raises
    ------
    OverflowError:
        If `errors='raise'` and an integer result exceeds the range of its
        kind.
    FloatingPointError:
        If `errors='raise'` and a float computation overflows.
    """
    zeros = arguments.precision(zeros, name="zeros")
    rule = arguments.rule(rule)
    errors = arguments.errors(errors)

    wrapped = NumericWrapper(val)
    with np.errstate(all=errors):
        result = apply_zeros(wrapped.array, zeros, rule=rule, errors=errors)
    return wrapped.rewrap(result)


def apply_zeros(
    array: np.ndarray,
    zeros: int,
    rule: str,
    errors: str
) -> np.ndarray:
    """Round an already-validated array of any supported kind to `zeros`."""
    if is_float_kind(array.dtype):
        return round_float(array, rule=rule, decimals=-zeros)

    # integers have nothing right of the decimal point
    if zeros <= 0:
        return array.copy()

    # exact division in python integers, then narrow back into range
    scale_factor = 10**zeros
    exact = round_div(array.astype(object), scale_factor, rule=rule)
    return narrow_integer(exact * scale_factor, array.dtype, errors=errors)


##############################
####    DECIMAL PLACES    ####
##############################


def round(val: numeric, decimals: int = 0, errors: str = "ignore") -> numeric:
    """Round to the given number of decimal places, with ties away from zero.

    >>> round(123.456, 2)
    123.46
    >>> round(-123.456, 1)
    -123.5
    """
    return scale_decimals(val, decimals, rule="half_up", errors=errors)


def ceil(val: numeric, decimals: int = 0, errors: str = "ignore") -> numeric:
    """Round up to the given number of decimal places.

    >>> ceil(123.454, 2)
    123.46
    """
    return scale_decimals(val, decimals, rule="ceiling", errors=errors)


def floor(val: numeric, decimals: int = 0, errors: str = "ignore") -> numeric:
    """Round down to the given number of decimal places."""
    return scale_decimals(val, decimals, rule="floor", errors=errors)


#####################
####    ZEROS    ####
#####################


def round_zeros(
    val: numeric,
    zeros: int = 0,
    errors: str = "ignore"
) -> numeric:
    """Round to the given number of zeros, with ties away from zero.

    >>> round_zeros(123.456, 1)
    120.0
    >>> round_zeros(np.int32(123), 2)
    100
    """
    return scale_zeros(val, zeros, rule="half_up", errors=errors)


def ceil_zeros(
    val: numeric,
    zeros: int = 0,
    errors: str = "ignore"
) -> numeric:
    """Round up to the given number of zeros.

    >>> ceil_zeros(np.int32(-12645), 3)
    -12000
    """
    return scale_zeros(val, zeros, rule="ceiling", errors=errors)


def floor_zeros(
    val: numeric,
    zeros: int = 0,
    errors: str = "ignore"
) -> numeric:
    """Round down to the given number of zeros."""
    return scale_zeros(val, zeros, rule="floor", errors=errors)
