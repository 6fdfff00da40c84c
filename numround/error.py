"""This module contains utility functions to help format errors and warnings
raised by `numround` internals.

Every validation error and overflow diagnostic in `numround` is prefixed with
the trace returned by `error_trace()`, i.e. `[numround.arguments.rule] ...`.
Warnings are issued with the stack level returned by `user_stacklevel()`, so
that they are attributed to the line that called into `numround` rather than
to `numround` itself.
"""
from __future__ import annotations
import inspect

import numpy as np

from numround.util.type_hints import list_like


def _is_internal(frame) -> bool:
    name = frame.f_globals.get("__name__", "")
    return name == "numround" or name.startswith("numround.")


def error_trace(stack_index: int = 1, include_module: bool = True) -> str:
    """Get a dotted path to the function (or method) `stack_index` frames
    above this one.

    With the default `stack_index=1`, this names the function that called
    `error_trace()`.  Private helpers that raise on behalf of a public
    function can pass `stack_index=2` to name their caller instead.
    """
    frame = inspect.currentframe()
    try:
        for _ in range(stack_index):
            if frame is None:
                return ""
            frame = frame.f_back
        if frame is None:
            return ""

        name = []
        if include_module:
            name.append(frame.f_globals.get("__name__", "__main__"))
        if "self" in frame.f_locals:  # bound methods
            name.append(type(frame.f_locals["self"]).__name__)
        if frame.f_code.co_name != "<module>":
            name.append(frame.f_code.co_name)
        return ".".join(name)
    finally:
        del frame  # avoid reference cycles through the frame stack


def user_stacklevel() -> int:
    """Get the `stacklevel` argument that attributes a warning issued by the
    calling function to the first frame outside of `numround`.

    The level is counted from the function that calls `warnings.warn()`, so
    it adapts to however many `numround` frames sit between that function and
    the user's code (e.g. `round_zeros()` -> `scale_zeros()` ->
    `apply_zeros()` -> `narrow_integer()`).
    """
    frame = inspect.currentframe().f_back
    level = 1
    try:
        while frame is not None and _is_internal(frame):
            frame = frame.f_back
            level += 1
        return level
    finally:
        del frame


def shorten_list(seq: list_like, max_length: int = 5) -> str:
    """Format a sequence of indices for use in an error message, abridging it
    to its first `max_length` elements if it is too long.

    numpy arrays and scalars are converted to their python equivalents first,
    so `np.flatnonzero(mask)` renders as `[1, 4]` rather than
    `[np.int64(1), np.int64(4)]`.
    """
    items = np.asarray(seq).ravel().tolist()
    if len(items) <= max_length:
        return str(items)
    shortened = ", ".join(str(i) for i in items[:max_length])
    return f"[{shortened}, ...] ({len(items)})"
