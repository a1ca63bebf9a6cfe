"""
Backend-agnostic contracts for ndtensor: errors, slicing requests, element
types and the tensor protocol.
"""

from ._axis_index import (
    ELLIPSIS,
    FULL,
    NEW_AXIS,
    AxisIndex,
    AxisIndexKind,
    as_axis_index,
)
from ._errors import (
    ConsumedTensorError,
    IndexOutOfRangeError,
    InvalidAxisError,
    MultipleEllipsisError,
    ShapeMismatchError,
    TensorError,
    TooManyIndicesError,
)
from ._numeric import Numeric, NumericType, numeric_type, register_numeric_type
from ._tensor import ITensor

__all__ = [
    AxisIndex.__name__,
    AxisIndexKind.__name__,
    "ELLIPSIS",
    "FULL",
    "NEW_AXIS",
    as_axis_index.__name__,
    ConsumedTensorError.__name__,
    IndexOutOfRangeError.__name__,
    InvalidAxisError.__name__,
    MultipleEllipsisError.__name__,
    ShapeMismatchError.__name__,
    TensorError.__name__,
    TooManyIndicesError.__name__,
    Numeric.__name__,
    NumericType.__name__,
    numeric_type.__name__,
    register_numeric_type.__name__,
    ITensor.__name__,
]
