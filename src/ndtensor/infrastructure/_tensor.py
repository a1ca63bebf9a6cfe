"""
Concrete Tensor implementation.

This module provides the concrete `Tensor` that satisfies the domain-level
`ITensor` protocol. A tensor owns:

- a flat Python list of elements in row-major order, and
- a shape tuple of rank >= 1 whose product equals the buffer length.

Strides are derived from the shape on demand and never stored. The element
type is described by a `NumericType` (`dtype`) providing zero and one, so the
factories work for floats, ints, `Fraction`, `Decimal` or any registered
type.

Design notes
------------
- Slicing, axis swapping, arithmetic, dot and concat always allocate a new
  buffer. `flatten` and `reshaped` *move* the buffer into the returned tensor
  and leave the receiver consumed; using a consumed tensor raises
  `ConsumedTensorError`. No two live tensors ever share a buffer.
- `data()` returns a tuple snapshot, so callers cannot mutate the buffer
  behind the tensor's back. `__setitem__` is the only public write path.
- Behaviour is assembled from mixins in `infrastructure.tensor`; this class
  adds construction, factories and introspection.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from typing_extensions import Self

from ..domain._errors import ConsumedTensorError, ShapeMismatchError
from ..domain._numeric import DTypeLike, Numeric, NumericType, numeric_type
from .tensor import _TensorAllMixin
from .tensor._shape_math import product


class Tensor(_TensorAllMixin):
    """
    Dense, row-major, N-dimensional tensor generic over its element type.

    Parameters
    ----------
    data : Optional[Iterable[Any]], optional
        Elements in row-major order. The tensor takes its own copy.
        Defaults to no elements.
    shape : Optional[Sequence[int]], optional
        Shape of the tensor. Defaults to ``(len(data),)``.
    dtype : DTypeLike, optional
        Element type descriptor, a registered name, or a Python type.
        Defaults to ``float64``.

    Raises
    ------
    ShapeMismatchError
        If `shape` is empty, has negative entries, or its product differs
        from the number of elements.

    Examples
    --------
    >>> t = Tensor([1.0, 3.0, 2.0, 2.0]).reshaped([2, 2])
    >>> print(t)
    [[  1.00   3.00]
     [  2.00   2.00]]
    """

    def __init__(
        self,
        data: Optional[Iterable[Any]] = None,
        shape: Optional[Sequence[int]] = None,
        dtype: DTypeLike = None,
    ) -> None:
        buf = [] if data is None else list(data)
        if shape is None:
            shape = (len(buf),)
        shape = tuple(int(d) for d in shape)

        if len(shape) == 0:
            raise ShapeMismatchError(
                "Tensors have rank >= 1; use shape (1,) for a single element",
                actual=shape,
            )
        if any(d < 0 for d in shape):
            raise ShapeMismatchError(f"Negative dimension in shape {shape}", actual=shape)
        if product(shape) != len(buf):
            raise ShapeMismatchError(
                f"Data of length {len(buf)} does not fit shape {shape}",
                expected=(product(shape),),
                actual=(len(buf),),
            )

        self._data: Optional[list[Any]] = buf
        self._shape: tuple[int, ...] = shape
        self._dtype: NumericType = numeric_type(dtype)

    @classmethod
    def _wrap(
        cls, buffer: list[Any], shape: tuple[int, ...], dtype: NumericType
    ) -> Self:
        """
        Construct a tensor around an already validated buffer.

        This bypasses `__init__` (no copy, no checks). Callers guarantee that
        ``len(buffer) == product(shape)`` and that nobody else holds
        `buffer`.
        """
        obj = cls.__new__(cls)  # bypass __init__
        obj._data = buffer
        obj._shape = shape
        obj._dtype = dtype
        return obj

    def _live(self, op: str) -> list[Any]:
        """Return the owned buffer, or raise if it was moved out."""
        if self._data is None:
            raise ConsumedTensorError(op)
        return self._data

    def _move_out(self, op: str) -> list[Any]:
        """Hand the buffer to the caller and mark this tensor consumed."""
        data = self._live(op)
        self._data = None
        return data

    # ----------------------------
    # Factories
    # ----------------------------
    @classmethod
    def empty(cls, dtype: DTypeLike = None) -> Self:
        """
        Tensor with no elements and shape ``(0,)``.
        """
        return cls._wrap([], (0,), numeric_type(dtype))

    @classmethod
    def new(cls, data: Iterable[Any], dtype: DTypeLike = None) -> Self:
        """
        1-D tensor of shape ``(len(data),)``.

        A list passed in is taken over as the buffer without copying; the
        caller must not keep using it.
        """
        buf = data if isinstance(data, list) else list(data)
        return cls._wrap(buf, (len(buf),), numeric_type(dtype))

    @classmethod
    def range(cls, n: int, dtype: DTypeLike = None) -> Self:
        """
        1-D tensor ``[0, 1, ..., n - 1]``.

        Values are produced by repeatedly adding ``dtype.one`` to
        ``dtype.zero``; no integer casts are involved, so any element type
        with zero, one and ``+`` works.

        Raises
        ------
        ShapeMismatchError
            If `n` is negative.
        """
        if n < 0:
            raise ShapeMismatchError(
                f"Tensor.range() requires n >= 0, got {n}", actual=(n,)
            )
        nt = numeric_type(dtype)
        data = []
        v = nt.zero
        for _ in range(n):
            data.append(v)
            v = v + nt.one
        return cls._wrap(data, (n,), nt)

    @classmethod
    def filled(
        cls, shape: Sequence[int], v: Numeric, dtype: DTypeLike = None
    ) -> Self:
        """
        Tensor of `shape` with every element equal to `v`.
        """
        return cls([v] * product(shape), shape=shape, dtype=dtype)

    @classmethod
    def zeros(cls, shape: Sequence[int], dtype: DTypeLike = None) -> Self:
        nt = numeric_type(dtype)
        return cls.filled(shape, nt.zero, dtype=nt)

    @classmethod
    def ones(cls, shape: Sequence[int], dtype: DTypeLike = None) -> Self:
        nt = numeric_type(dtype)
        return cls.filled(shape, nt.one, dtype=nt)

    @classmethod
    def eye(cls, n: int, dtype: DTypeLike = None) -> Self:
        """
        ``n x n`` identity matrix.
        """
        nt = numeric_type(dtype)
        t = cls.zeros((n, n), dtype=nt)
        for k in range(n):
            t._set2d(k, k, nt.one)
        return t

    def _set2d(self, row: int, col: int, v: Numeric) -> None:
        # rank-2 addressing only; used while building before hand-off
        self._data[row * self._shape[1] + col] = v

    # ----------------------------
    # Introspection
    # ----------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        self._live("shape")
        return self._shape

    @property
    def dtype(self) -> NumericType:
        return self._dtype

    def data(self) -> tuple[Any, ...]:
        """
        Return a read-only snapshot of the row-major element buffer.
        """
        return tuple(self._live("data"))

    def size(self) -> int:
        """
        Return the number of elements.
        """
        return len(self._live("size"))

    def ndim(self) -> int:
        """
        Return the number of axes.
        """
        return len(self.shape)

    def __len__(self) -> int:
        return self.shape[0]

    def tolist(self) -> list[Any]:
        """
        Return the elements as nested Python lists following the shape.
        """
        data = self._live("tolist")

        def nest(values: Sequence[Any], shape: Sequence[int]) -> list[Any]:
            if len(shape) == 1:
                return list(values)
            step = product(shape[1:])
            return [
                nest(values[i * step : (i + 1) * step], shape[1:])
                for i in range(shape[0])
            ]

        return nest(data, self._shape)
