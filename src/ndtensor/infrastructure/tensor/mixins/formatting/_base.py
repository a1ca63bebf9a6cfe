"""
Display formatting for tensors.

`str(tensor)` renders a bracketed, row-major layout nested to the tensor's
rank. With the default options a 2x2 float tensor prints as::

    [[  1.00   3.00]
     [  2.00   2.00]]

Blocks of rank >= 3 are separated by blank lines, mirroring NumPy. Element
precision and field width come from the process-wide print options.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, Callable, Sequence

from .....domain._numeric import NumericType
from ..._print_options import PrintOptions, get_print_options
from ..._shape_math import product


def element_formatter(
    dtype: NumericType, options: PrintOptions
) -> Callable[[Any], str]:
    """
    Build the per-element formatter for a dtype and set of options.
    """
    width, precision = options.width, options.precision

    def fmt(v: Any) -> str:
        if dtype.is_float:
            return f"{v:{width}.{precision}f}"
        if isinstance(v, Integral):
            return f"{int(v):{width}d}"
        return f"{str(v):>{width}}"

    return fmt


def render(
    values: Sequence[Any],
    shape: Sequence[int],
    fmt: Callable[[Any], str],
    depth: int = 0,
) -> str:
    """
    Render a row-major buffer as nested brackets.
    """
    if len(shape) == 1:
        return "[" + " ".join(fmt(v) for v in values) + "]"

    step = product(shape[1:])
    blocks = [
        render(values[i * step : (i + 1) * step], shape[1:], fmt, depth + 1)
        for i in range(shape[0])
    ]
    sep = "\n" * (len(shape) - 1) + " " * (depth + 1)
    return "[" + sep.join(blocks) + "]"


class TensorMixinFormatting:
    """
    Mixin providing ``__str__`` and ``__repr__``.
    """

    def __str__(self) -> str:
        data = self._live("__str__")
        fmt = element_formatter(self.dtype, get_print_options())
        return render(data, self.shape, fmt)

    def __repr__(self) -> str:
        if self._data is None:
            return "Tensor(<consumed>)"
        return f"Tensor(shape={self.shape}, dtype={self.dtype.name})"
