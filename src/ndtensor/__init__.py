"""
ndtensor: a generic N-dimensional tensor with row-major storage, wildcard
reshaping, NumPy-style advanced slicing and rank-general axis swapping.

Quick example::

    from ndtensor import Tensor, AxisIndex, ELLIPSIS

    t = Tensor.range(24).reshaped([2, 3, 4])
    t.slice([ELLIPSIS, AxisIndex.slice(1, 3)]).shape   # (2, 3, 2)
    t[-1].shape                                        # (3, 4)
"""

from .domain import (
    ELLIPSIS,
    FULL,
    NEW_AXIS,
    AxisIndex,
    AxisIndexKind,
    ConsumedTensorError,
    IndexOutOfRangeError,
    InvalidAxisError,
    ITensor,
    MultipleEllipsisError,
    NumericType,
    ShapeMismatchError,
    TensorError,
    TooManyIndicesError,
    as_axis_index,
    numeric_type,
    register_numeric_type,
)
from .domain._numeric import decimal, float32, float64, fraction, int64
from .infrastructure import (
    PrintOptions,
    Tensor,
    dot,
    get_print_options,
    print_options,
    set_print_options,
)

__version__ = "0.1.0"

__all__ = [
    "ELLIPSIS",
    "FULL",
    "NEW_AXIS",
    "AxisIndex",
    "AxisIndexKind",
    "ConsumedTensorError",
    "IndexOutOfRangeError",
    "InvalidAxisError",
    "ITensor",
    "MultipleEllipsisError",
    "NumericType",
    "ShapeMismatchError",
    "TensorError",
    "TooManyIndicesError",
    "as_axis_index",
    "numeric_type",
    "register_numeric_type",
    "decimal",
    "float32",
    "float64",
    "fraction",
    "int64",
    "PrintOptions",
    "Tensor",
    "dot",
    "get_print_options",
    "print_options",
    "set_print_options",
]
