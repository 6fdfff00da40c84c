"""This package contains the rounding rules that `numround` applies at the
units digit, for both floating point and integer values.
"""
from .float import float_rounding_rules, round_float
from .integer import integer_rounding_bias, round_div
