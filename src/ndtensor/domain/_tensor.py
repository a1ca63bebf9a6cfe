"""
Tensor interface definitions.

This module defines the domain-level interface for tensor-like objects using
structural typing. The interface captures the read-only contract that
collaborators (arithmetic, equality, display, dot product, concatenation)
consume: shape, strides, flat data access, slicing and reshaping.

Notes
-----
The accessors `data()`, `strides()`, `size()` and `ndim()` are methods rather
than properties: strides are derived on demand from the shape and never
stored, and `data()` returns a fresh read-only view.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from ._axis_index import AxisIndex
from ._numeric import NumericType


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor interface.

    An `ITensor` is a dense, row-major, N-dimensional array of rank >= 1.
    Its flat buffer always holds exactly `product(shape)` elements.
    """

    # ---------------------------------------------------------------------
    # Introspection
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor.

        Returns
        -------
        tuple[int, ...]
            Non-negative extent of each axis; at least one entry.
        """
        ...

    @property
    def dtype(self) -> NumericType:
        """
        Return the element-type descriptor of the tensor.
        """
        ...

    def data(self) -> tuple[Any, ...]:
        """
        Return the flat element buffer in row-major order.

        Returns
        -------
        tuple[Any, ...]
            Read-only snapshot of the elements (last axis varies fastest).
        """
        ...

    def strides(self) -> tuple[int, ...]:
        """
        Return the row-major element strides for each axis.
        """
        ...

    def size(self) -> int:
        """
        Return the total number of elements.
        """
        ...

    def ndim(self) -> int:
        """
        Return the number of axes (the rank).
        """
        ...

    # ---------------------------------------------------------------------
    # Structural operations
    # ---------------------------------------------------------------------
    def slice(self, indices: Sequence[AxisIndex]) -> "ITensor":
        """
        Return a copy of a sub-tensor selected by a slicing request.

        Parameters
        ----------
        indices : Sequence[AxisIndex | int | slice | None | Ellipsis]
            Per-axis request; see :class:`AxisIndex`.
        """
        ...

    def reshaped(self, shape: Sequence[int]) -> "ITensor":
        """
        Move this tensor's buffer into a new tensor of the given shape.

        At most one entry of `shape` may be ``-1``; its size is inferred.
        """
        ...

    def flatten(self) -> "ITensor":
        """
        Move this tensor's buffer into a new 1-D tensor.
        """
        ...

    def swapaxes(self, axis1: int, axis2: int) -> "ITensor":
        """
        Return a copy with two axes exchanged.
        """
        ...

    def transpose(self) -> "ITensor":
        """
        Return the transpose of a 2-D tensor.
        """
        ...


__all__ = [ITensor.__name__]
