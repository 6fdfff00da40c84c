"""Validation for the non-numeric arguments of every public `numround`
operation.

Each function accepts a raw argument, checks it, and returns a normalized
version of it.  These run before any arithmetic is done, so a bad rule or
precision is always reported as a `TypeError` or `ValueError` rather than
surfacing as a numeric degeneracy.

Constants
---------
valid_rules
    The rounding rules accepted by the `scale_*` operations.
valid_errors
    The accepted values of the `errors` argument.
"""
from __future__ import annotations

import numpy as np

from numround.error import error_trace


valid_rules = ("half_up", "ceiling", "floor")


valid_errors = ("ignore", "warn", "raise")


def rule(val: str) -> str:
    """The rounding rule to apply at the target digit.

    Parameters
    ----------
    val : str
        A string specifying the rounding rule to use.

    Returns
    -------
    str
        `val`, once it has been validated.

    Raises
    ------
    TypeError
        If ``val`` is not a string.
    ValueError
        If ``val`` does not correspond to one of the recognized rounding rules.

    Notes
    -----
    The available options for this argument are as follows:

        *   ``"half_up"`` - round to nearest with ties away from zero.  This
            is the rule used by `round()`, `round_zeros()` and `round_sf()`.
        *   ``"ceiling"`` - round toward positive infinity.  This is the rule
            used by `ceil()`, `ceil_zeros()` and `ceil_sf()`.
        *   ``"floor"`` - round toward negative infinity.  This is the rule
            used by `floor()`, `floor_zeros()` and `floor_sf()`.

    Examples
    --------
    .. doctest::

        >>> numround.scale_decimals([-1.5, -0.5, 0.2, 1.7], 0, rule="floor")
        array([-2., -1.,  0.,  1.])
        >>> numround.scale_decimals([-1.5, -0.5, 0.2, 1.7], 0, rule="ceiling")
        array([-1., -0.,  1.,  2.])
        >>> numround.scale_decimals([-1.5, -0.5, 0.2, 1.7], 0, rule="half_up")
        array([-2., -1.,  0.,  2.])

    """
    if not isinstance(val, str):
        raise TypeError(f"[{error_trace()}] `rule` must be a string, not "
                        f"{repr(val)}")
    if val not in valid_rules:
        raise ValueError(f"[{error_trace()}] `rule` must be one of "
                         f"{valid_rules}, not {repr(val)}")
    return val


def precision(val: int, name: str = "decimals") -> int:
    """Ensure that a precision count (`decimals`, `zeros` or `sig_figs`) is
    integer-like, and convert it to a python integer.
    """
    if isinstance(val, (bool, np.bool_)) or not isinstance(
        val, (int, np.integer)
    ):
        raise TypeError(f"[{error_trace()}] `{name}` must be an integer, "
                        f"not {repr(val)}")
    return int(val)


def errors(val: str) -> str:
    """How numeric degeneracies are reported.

    ``"ignore"`` (the default everywhere) keeps them silent: integer results
    that overflow their kind saturate at its bounds, and float results
    overflow to infinity or become NaN.  ``"warn"`` produces the same results
    but issues a ``RuntimeWarning`` for each, and ``"raise"`` raises an
    ``OverflowError`` (integers) or ``FloatingPointError`` (floats) instead.
    """
    if val not in valid_errors:
        raise ValueError(f"[{error_trace()}] `errors` must be one of "
                         f"{valid_errors}, not {repr(val)}")
    return val
