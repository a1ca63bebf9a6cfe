"""
Shape-, axis- and index-related exceptions for ndtensor.

This module defines the error taxonomy raised by tensor construction,
reshaping, slicing and axis permutation. Every failure in the core is a
contract violation detected by a precondition check: the offending call
fails immediately and no partially built tensor is ever handed back.

Each error derives from `TensorError` *and* from the closest builtin
exception (`ValueError`, `IndexError`, `RuntimeError`), so callers may catch
either the library-specific type or the idiomatic Python one.
"""

from __future__ import annotations

from typing import Optional, Sequence


class TensorError(Exception):
    """
    Base class for all errors raised by ndtensor.
    """


class ShapeMismatchError(TensorError, ValueError):
    """
    Raised when a requested shape is incompatible with the tensor data.

    Typical triggers are a reshape whose total element count differs from the
    current size, more than one wildcard axis in a reshape request, a data
    buffer whose length disagrees with the declared shape, or binary
    operations between tensors of different shapes.

    Attributes
    ----------
    expected : Optional[tuple[int, ...]]
        The shape (or size, as a 1-tuple) the operation required, if known.
    actual : Optional[tuple[int, ...]]
        The shape (or size, as a 1-tuple) that was supplied, if known.
    """

    def __init__(
        self,
        message: str,
        expected: Optional[Sequence[int]] = None,
        actual: Optional[Sequence[int]] = None,
    ) -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        message : str
            Human-readable description of the mismatch.
        expected : Optional[Sequence[int]]
            Expected shape, if meaningful for the failing operation.
        actual : Optional[Sequence[int]]
            Supplied shape, if meaningful for the failing operation.
        """
        super().__init__(message)
        self.expected = None if expected is None else tuple(expected)
        self.actual = None if actual is None else tuple(actual)


class InvalidAxisError(TensorError, ValueError):
    """
    Raised when an axis argument is not valid for the tensor's rank.

    This covers axes outside `[0, ndim)`, swapping an axis with itself, and
    rank-restricted operations (e.g. `transpose`) called on the wrong rank.

    Attributes
    ----------
    axis : Optional[int]
        The offending axis, if a single axis is at fault.
    ndim : Optional[int]
        Rank of the tensor the axis was checked against.
    """

    def __init__(
        self, message: str, axis: Optional[int] = None, ndim: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.axis = axis
        self.ndim = ndim


class MultipleEllipsisError(TensorError, IndexError):
    """
    Raised when a slicing request contains more than one Ellipsis.
    """

    def __init__(self, count: int) -> None:
        super().__init__(
            f"At most one Ellipsis may be used in a slice, got {count}."
        )
        self.count = count


class TooManyIndicesError(TensorError, IndexError):
    """
    Raised when a slicing request consumes more axes than the tensor has.

    Attributes
    ----------
    consumed : int
        Number of axis-consuming entries supplied (everything except
        Ellipsis and NewAxis).
    ndim : int
        Rank of the tensor being sliced.
    """

    def __init__(self, consumed: int, ndim: int) -> None:
        super().__init__(
            f"Too many indices for tensor: tensor is {ndim}-dimensional, "
            f"but {consumed} were indexed."
        )
        self.consumed = consumed
        self.ndim = ndim


class IndexOutOfRangeError(TensorError, IndexError):
    """
    Raised when a resolved index or range endpoint falls outside its axis.

    The check is applied *after* negative-index resolution, so `index` holds
    the value the caller supplied and the message reports both.

    Attributes
    ----------
    index : int
        The index as supplied by the caller (possibly negative).
    size : int
        Extent of the axis the index was checked against.
    axis : Optional[int]
        Axis position, when known.
    """

    def __init__(self, index: int, size: int, axis: Optional[int] = None) -> None:
        where = "" if axis is None else f" for axis {axis}"
        super().__init__(f"Index {index} is out of bounds{where} with size {size}.")
        self.index = index
        self.size = size
        self.axis = axis


class ConsumedTensorError(TensorError, RuntimeError):
    """
    Raised when a tensor is used after `flatten()` or `reshaped()` took
    ownership of its buffer.
    """

    def __init__(self, op: str) -> None:
        super().__init__(
            f"Cannot call {op}() on a tensor whose data was moved by "
            "flatten() or reshaped(); use the returned tensor instead."
        )
        self.op = op
