"""
Tensor shape, indexing, and structural ops mixin.

This module defines `TensorShapeAndIndexingMixin`, a cohesive mixin that
implements shape-transforming and indexing-related Tensor methods on top of
the pure engines in this package:

- `slice` / `__getitem__`   via `resolve_axis_indices` + `slice_data`
- `reshaped` / `flatten`    via `normalize_reshape` (buffer is moved)
- `swapaxes` / `transpose`  via `swap_axes_data`
- `concat`                  structural join along an existing axis
- `__setitem__`             single-element write with per-axis bounds checks

Design notes
------------
- This mixin is intended to be inherited by the concrete `Tensor` class.
- To avoid circular imports, the implementation does not import `Tensor`
  directly; instead it constructs new tensors via `self.__class__` (instance
  methods) or `first.__class__` (staticmethods).
- Slicing and axis swapping always return *copies*; reshaping moves the
  buffer and marks the receiver consumed.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, Sequence

from ...domain._errors import (
    InvalidAxisError,
    ShapeMismatchError,
    TooManyIndicesError,
)
from ...domain._numeric import Numeric
from ...domain._tensor import ITensor
from ._axis_permute import normalize_axis, swap_axes_data
from ._axis_resolver import resolve_axis_indices
from ._shape_math import (
    normalize_reshape,
    product,
    ravel,
    resolve_signed_axis,
    strides,
    unravel,
)
from ._slice_engine import slice_data


def _is_int(k: Any) -> bool:
    return isinstance(k, Integral) and not isinstance(k, bool)


class TensorShapeAndIndexingMixin(ITensor):
    """
    Shape and indexing operations for the concrete Tensor implementation.

    Notes
    -----
    - Methods assume the host class provides:
        - `.shape`, `.dtype`
        - `._live(op)` returning the owned buffer (raises once consumed)
        - `._move_out(op)` returning the buffer and marking self consumed
        - `._wrap(buffer, shape, dtype)` constructing without validation
    - New tensors are constructed via the host class (e.g., `self.__class__`).
    """

    # ----------------------------
    # Slicing
    # ----------------------------
    def slice(self, indices: Sequence[Any]) -> "ITensor":
        """
        Take a sub-tensor described by a slicing request and return a copy.

        Parameters
        ----------
        indices : Sequence[AxisIndex | int | slice | None | Ellipsis]
            One entry per consumed axis, plus any number of NewAxis and at
            most one Ellipsis. Missing trailing axes are kept whole.

        Returns
        -------
        Tensor
            Newly allocated tensor. Axes selected with a single index are
            dropped; NewAxis entries insert length-1 axes.

        Raises
        ------
        MultipleEllipsisError
            If more than one Ellipsis is given.
        TooManyIndicesError
            If more axes are consumed than the tensor has.
        IndexOutOfRangeError
            If an index or range endpoint falls outside its axis.

        Examples
        --------
        For ``t`` of shape ``(2, 3, 4)``:

        - ``t.slice([ELLIPSIS, AxisIndex.slice(1, 3)])`` -> shape ``(2, 3, 2)``
        - ``t.slice([AxisIndex.index(-1)])`` -> shape ``(3, 4)``
        - ``t.slice([FULL, AxisIndex.slice_from(1), AxisIndex.index(1)])``
          -> shape ``(2, 2)``
        """
        data = self._live("slice")
        resolved, insertions = resolve_axis_indices(len(self.shape), indices)
        buf, out_shape = slice_data(data, self.shape, resolved, insertions)

        TensorClass = self.__class__
        flat = TensorClass._wrap(buf, (len(buf),), self.dtype)
        return flat.reshaped(out_shape)

    def __getitem__(self, key: Any) -> Any:
        """
        NumPy-style indexing.

        A tuple of exactly `ndim` integers reads a single element and returns
        the scalar. Any other key (slices, ``...``, ``None``, `AxisIndex`
        values, fewer integers) is routed through :meth:`slice` and returns a
        new Tensor.
        """
        key_t = key if isinstance(key, tuple) else (key,)
        if len(key_t) == len(self.shape) and all(_is_int(k) for k in key_t):
            return self._live("__getitem__")[self._element_offset(key_t)]
        return self.slice(key_t)

    def __setitem__(self, key: Any, value: Numeric) -> None:
        """
        Write a single element addressed by a full multi-index.

        Raises
        ------
        TooManyIndicesError
            If more integers than axes are given.
        InvalidAxisError
            If fewer integers than axes are given.
        TypeError
            If the key contains anything other than integers.
        IndexOutOfRangeError
            If an index falls outside its axis.
        """
        key_t = key if isinstance(key, tuple) else (key,)
        if not all(_is_int(k) for k in key_t):
            raise TypeError(
                "Tensor item assignment requires integer indices for every axis"
            )
        ndim = len(self.shape)
        if len(key_t) > ndim:
            raise TooManyIndicesError(len(key_t), ndim)
        if len(key_t) < ndim:
            raise InvalidAxisError(
                f"Item assignment needs {ndim} indices, got {len(key_t)}", ndim=ndim
            )
        data = self._live("__setitem__")
        data[self._element_offset(key_t)] = value

    def _element_offset(self, multi_index: Sequence[int]) -> int:
        """Bounds-check every axis, then ravel to a flat offset."""
        shape = self.shape
        resolved = [
            resolve_signed_axis(shape[axis], int(i), axis=axis)
            for axis, i in enumerate(multi_index)
        ]
        return ravel(resolved, shape)

    def unravel_index(self, index: int) -> tuple[int, ...]:
        """
        Convert a row-major flat index into per-axis indices.
        """
        return unravel(index, self.shape)

    def ravel_index(self, multi_index: Sequence[int]) -> int:
        """
        Convert per-axis indices into a row-major flat index.
        """
        return ravel(multi_index, self.shape)

    def strides(self) -> tuple[int, ...]:
        return strides(self.shape)

    # ----------------------------
    # Reshaping (buffer moves)
    # ----------------------------
    def reshaped(self, shape: Sequence[int]) -> "ITensor":
        """
        Move this tensor's buffer into a tensor of a new shape.

        Parameters
        ----------
        shape : Sequence[int]
            Requested shape; at most one entry may be ``-1`` (inferred).

        Returns
        -------
        Tensor
            Tensor owning the same buffer with the concrete shape.

        Raises
        ------
        ShapeMismatchError
            If the request is invalid. Validation happens before the move,
            so a failed reshape leaves the receiver usable.

        Notes
        -----
        After a successful call the receiver is consumed; further use raises
        `ConsumedTensorError`.
        """
        self._live("reshaped")
        concrete = normalize_reshape(len(self._data), shape)
        dtype = self.dtype
        data = self._move_out("reshaped")
        return self.__class__._wrap(data, concrete, dtype)

    def flatten(self) -> "ITensor":
        """
        Move this tensor's buffer into a 1-D tensor of the same size.

        The receiver is consumed.
        """
        dtype = self.dtype
        data = self._move_out("flatten")
        return self.__class__._wrap(data, (len(data),), dtype)

    # ----------------------------
    # Axis permutation
    # ----------------------------
    def swapaxes(self, axis1: int, axis2: int) -> "ITensor":
        """
        Return a copy with `axis1` and `axis2` exchanged.

        Works for any rank. Negative axes count from the end.

        Raises
        ------
        InvalidAxisError
            If an axis is out of range or the two axes are equal.
        """
        data = self._live("swapaxes")
        buf, new_shape = swap_axes_data(data, self.shape, axis1, axis2)
        return self.__class__._wrap(buf, new_shape, self.dtype)

    def transpose(self) -> "ITensor":
        """
        2D transpose: out[i, j] = self[j, i].

        Raises
        ------
        InvalidAxisError
            If the tensor is not 2-D.
        """
        if len(self.shape) != 2:
            raise InvalidAxisError(
                f"transpose requires a 2D tensor, got shape={self.shape}",
                ndim=len(self.shape),
            )
        return self.swapaxes(0, 1)

    @property
    def T(self) -> "ITensor":
        """
        Convenience property for 2D transpose.
        """
        return self.transpose()

    # ----------------------------
    # Concatenation
    # ----------------------------
    @staticmethod
    def concat(tensors: Sequence["ITensor"], axis: int = 0) -> "ITensor":
        """
        Concatenate a sequence of tensors along an existing axis.

        Requirements
        ------------
        - `tensors` must be non-empty
        - all tensors must have the same rank
        - shapes must match on all dimensions except `axis`

        Parameters
        ----------
        tensors : Sequence[Tensor]
            Input tensors to concatenate.
        axis : int, optional
            Axis along which to concatenate. Supports negative axes.
            Defaults to 0.

        Returns
        -------
        Tensor
            Newly allocated tensor with the dtype of ``tensors[0]``.

        Raises
        ------
        ShapeMismatchError
            If the sequence is empty or shapes are incompatible.
        InvalidAxisError
            If `axis` is out of range.
        """
        if len(tensors) == 0:
            raise ShapeMismatchError("Tensor.concat() requires a non-empty sequence")

        first = tensors[0]
        TensorClass = first.__class__
        ref_shape = first.shape
        ndim = len(ref_shape)
        axis = normalize_axis(axis, ndim)

        for i, t in enumerate(tensors):
            if len(t.shape) != ndim:
                raise ShapeMismatchError(
                    f"Tensor.concat() requires all tensors to have same ndim; "
                    f"expected {ndim}, got {len(t.shape)} at index {i}",
                    expected=ref_shape,
                    actual=t.shape,
                )
            for d in range(ndim):
                if d != axis and t.shape[d] != ref_shape[d]:
                    raise ShapeMismatchError(
                        "Tensor.concat() shape mismatch on non-concat dimension: "
                        f"dim={d}, expected {ref_shape[d]}, got {t.shape[d]} at index {i}",
                        expected=ref_shape,
                        actual=t.shape,
                    )

        # Each input contributes a contiguous run of `shape[axis] * inner`
        # elements per outer block.
        outer = product(ref_shape[:axis])
        inner = product(ref_shape[axis + 1 :])
        buffers = [t._live("concat") for t in tensors]
        runs = [t.shape[axis] * inner for t in tensors]

        out: list[Any] = []
        for o in range(outer):
            for buf, run in zip(buffers, runs):
                out.extend(buf[o * run : (o + 1) * run])

        out_shape = list(ref_shape)
        out_shape[axis] = sum(t.shape[axis] for t in tensors)
        return TensorClass._wrap(out, tuple(out_shape), first.dtype)
