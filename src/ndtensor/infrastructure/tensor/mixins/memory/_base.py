"""
Tensor memory operations: cloning and NumPy interop.

This module defines `TensorMixinMemory`, which provides:

- `clone`       : deep copy of the buffer and shape into a new tensor
- `to_numpy`    : materialize the tensor as a fresh ``numpy.ndarray``
- `from_numpy`  : build a tensor by copying an array-like

Design notes
------------
- NumPy is only used at this interop boundary; tensors store their elements
  in a plain Python list so they stay generic over the element type.
- Both directions always copy, preserving the no-aliasing guarantee between
  tensors and external buffers.
"""

from __future__ import annotations

import warnings
from typing import Any, Optional

import numpy as np

from .....domain._numeric import (
    DTypeLike,
    NumericType,
    float32,
    float64,
    int64,
    numeric_type,
)
from .....domain._tensor import ITensor

_FROM_NUMPY_KIND: dict[str, NumericType] = {
    "f": float64,
    "i": int64,
    "u": int64,
}


def _infer_numeric_type(arr: np.ndarray) -> NumericType:
    """
    Map a NumPy dtype onto a registered `NumericType`.

    Unregistered dtypes fall back to a descriptor built from the array's own
    zero and one, with a ``RuntimeWarning``.
    """
    if arr.dtype == np.float32:
        return float32
    known = _FROM_NUMPY_KIND.get(arr.dtype.kind)
    if known is not None:
        return known

    warnings.warn(
        f"No registered tensor dtype for NumPy dtype {arr.dtype}; "
        "elements are copied as Python objects.",
        RuntimeWarning,
        stacklevel=3,
    )
    return NumericType(
        name=str(arr.dtype),
        zero=np.zeros((), dtype=arr.dtype).item(),
        one=np.ones((), dtype=arr.dtype).item(),
        numpy_dtype=None if arr.dtype == object else str(arr.dtype),
        is_float=False,
    )


class TensorMixinMemory:
    """
    Mixin providing copy and NumPy-conversion operations.

    Notes
    -----
    The host class must provide `.shape`, `.dtype`, `._live(op)` and
    `._wrap(buffer, shape, dtype)`.
    """

    def clone(self) -> "ITensor":
        """
        Return a deep copy with its own buffer.
        """
        data = self._live("clone")
        return self.__class__._wrap(list(data), self.shape, self.dtype)

    def to_numpy(self) -> np.ndarray:
        """
        Materialize the tensor as a new NumPy array.

        Returns
        -------
        np.ndarray
            C-contiguous array of shape ``self.shape``. Its dtype is the
            element type's ``numpy_dtype`` or, when that is ``None``,
            ``object``.
        """
        data = self._live("to_numpy")
        np_dtype = self.dtype.numpy_dtype or object
        return np.array(data, dtype=np_dtype).reshape(self.shape)

    @classmethod
    def from_numpy(cls, arr: Any, dtype: Optional[DTypeLike] = None) -> "ITensor":
        """
        Build a tensor by copying an array-like.

        Parameters
        ----------
        arr : array-like
            Source data. A 0-d input becomes a tensor of shape ``(1,)``.
        dtype : Optional[DTypeLike]
            Element type of the result. Inferred from the array when omitted
            (``float32`` / ``float64`` / ``int64``).

        Returns
        -------
        Tensor
            New tensor owning a Python-list copy of the data.
        """
        arr = np.asarray(arr)
        nt = numeric_type(dtype) if dtype is not None else _infer_numeric_type(arr)
        if dtype is not None and nt.numpy_dtype is not None:
            arr = arr.astype(nt.numpy_dtype)
        shape = arr.shape if arr.ndim > 0 else (1,)
        data = arr.reshape(-1).tolist()
        return cls._wrap(data, tuple(int(d) for d in shape), nt)
