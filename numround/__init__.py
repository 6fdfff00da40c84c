"""Rounding of fixed-width numerics to a number of decimal places, zeros, or
significant figures.

Modules
-------
scale
    Rounding to decimal places (`round`, `ceil`, `floor`) and to zeros
    (`round_zeros`, `ceil_zeros`, `floor_zeros`).

sigfig
    Rounding to significant figures (`round_sf`, `ceil_sf`, `floor_sf`) and
    the `digit_count` it is built on.

check
    Resolution of the numeric kind of an input.

arguments
    Validation for rules, precisions, and error handling flags.

Constants
---------
valid_rules
    A tuple listing the various rounding rules that are accepted by this
    package.
supported_kinds
    A tuple listing the numpy dtypes that can be rounded.
"""
from .arguments import valid_errors, valid_rules
from .check import resolve_kind, supported_kinds
from .scale import (
    ceil, ceil_zeros, floor, floor_zeros, round, round_zeros, scale_decimals,
    scale_zeros
)
from .sigfig import (
    ceil_sf, digit_count, floor_sf, round_sf, scale_sig_figs
)
from .util.downcast import integral_range
from .util.round import round_div, round_float
