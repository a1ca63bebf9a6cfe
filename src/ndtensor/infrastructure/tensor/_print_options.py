"""
Process-wide display options for `str(tensor)`.

Defaults are read once from the environment:

- ``NDTENSOR_PRINT_PRECISION``  digits after the decimal point (default 2)
- ``NDTENSOR_PRINT_WIDTH``      minimum field width per element (default 6)

Invalid environment values fall back to the defaults with a
``RuntimeWarning``. At runtime the options can be changed globally with
`set_print_options` or temporarily with the `print_options` context manager.
"""

from __future__ import annotations

import os
import warnings
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, Optional

DEFAULT_PRECISION = 2
DEFAULT_WIDTH = 6


@dataclass(frozen=True)
class PrintOptions:
    """
    Formatting parameters for tensor display.

    Attributes
    ----------
    precision : int
        Digits after the decimal point for floating element types.
    width : int
        Minimum field width of each rendered element.
    """

    precision: int = DEFAULT_PRECISION
    width: int = DEFAULT_WIDTH


def _read_env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    if raw == "":
        return default
    try:
        value = int(raw)
        if value < 0:
            raise ValueError(raw)
    except ValueError:
        warnings.warn(
            f"Ignoring invalid {name}={raw!r}; expected a non-negative integer. "
            f"Using default {default}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return default
    return value


def options_from_env() -> PrintOptions:
    """
    Build print options from ``NDTENSOR_PRINT_*`` environment variables.
    """
    return PrintOptions(
        precision=_read_env_int("NDTENSOR_PRINT_PRECISION", DEFAULT_PRECISION),
        width=_read_env_int("NDTENSOR_PRINT_WIDTH", DEFAULT_WIDTH),
    )


_current: PrintOptions = options_from_env()


def get_print_options() -> PrintOptions:
    return _current


def set_print_options(
    precision: Optional[int] = None, width: Optional[int] = None
) -> PrintOptions:
    """
    Update the global print options; omitted fields are left unchanged.

    Returns
    -------
    PrintOptions
        The options that were active *before* the call, so callers can
        restore them.

    Raises
    ------
    ValueError
        If `precision` or `width` is negative.
    """
    global _current

    if precision is not None and precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    if width is not None and width < 0:
        raise ValueError(f"width must be non-negative, got {width}")

    previous = _current
    changes = {}
    if precision is not None:
        changes["precision"] = int(precision)
    if width is not None:
        changes["width"] = int(width)
    _current = replace(_current, **changes)
    return previous


@contextmanager
def print_options(
    precision: Optional[int] = None, width: Optional[int] = None
) -> Iterator[PrintOptions]:
    """
    Temporarily override print options inside a ``with`` block.
    """
    global _current

    previous = set_print_options(precision=precision, width=width)
    try:
        yield _current
    finally:
        _current = previous
