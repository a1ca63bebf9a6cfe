"""
Row-major shape arithmetic.

Pure functions over plain shape/stride tuples:

- `product`            total element count of a shape
- `strides`            row-major strides (last axis varies fastest)
- `unravel`, `ravel`   flat index <-> multi-index conversion
- `resolve_signed_axis` negative-from-end index resolution with bounds check
- `normalize_reshape`  resolve a single ``-1`` wildcard in a reshape request

None of these functions know about `Tensor`; the facade and the slicing and
permutation engines call them with the values they own.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ...domain._errors import (
    IndexOutOfRangeError,
    InvalidAxisError,
    ShapeMismatchError,
)

WILDCARD = -1
"""Reshape marker for an axis whose extent is inferred."""


def product(shape: Sequence[int]) -> int:
    """
    Multiply all dimension sizes together.

    An empty shape has product 1; the shape ``(0,)`` (empty tensor) has
    product 0.
    """
    n = 1
    for d in shape:
        n *= d
    return n


def strides(shape: Sequence[int]) -> tuple[int, ...]:
    """
    Compute row-major strides for `shape`.

    Returns
    -------
    tuple[int, ...]
        Same length as `shape`; ``out[-1] == 1`` and
        ``out[i] == out[i + 1] * shape[i + 1]``.
    """
    ss = [1] * len(shape)
    for i in range(len(shape) - 2, -1, -1):
        ss[i] = ss[i + 1] * shape[i + 1]
    return tuple(ss)


def unravel(flat_index: int, shape: Sequence[int]) -> tuple[int, ...]:
    """
    Convert a row-major flat index into a per-axis multi-index.

    Raises
    ------
    IndexOutOfRangeError
        If `flat_index` is outside ``[0, product(shape))``.
    """
    size = product(shape)
    if flat_index < 0 or flat_index >= size:
        raise IndexOutOfRangeError(flat_index, size)

    out = []
    rem = flat_index
    for s in strides(shape):
        out.append(rem // s)
        rem %= s
    return tuple(out)


def ravel(multi_index: Sequence[int], shape: Sequence[int]) -> int:
    """
    Convert a per-axis multi-index into a row-major flat index.

    No per-axis bounds check is performed here; callers exposing raw
    indexing (``Tensor.__getitem__``) validate each axis first.

    Raises
    ------
    InvalidAxisError
        If the multi-index length does not equal the rank.
    """
    if len(multi_index) != len(shape):
        raise InvalidAxisError(
            f"Multi-index of length {len(multi_index)} does not match rank {len(shape)}",
            ndim=len(shape),
        )
    return sum(i * s for i, s in zip(multi_index, strides(shape)))


def resolve_signed_axis(
    size: int,
    signed_index: int,
    *,
    allow_end: bool = False,
    axis: Optional[int] = None,
) -> int:
    """
    Resolve a possibly negative index against an axis of length `size`.

    Parameters
    ----------
    size : int
        Extent of the axis.
    signed_index : int
        Index as supplied by the caller; negative values count from the end.
    allow_end : bool, optional
        If True, `size` itself is accepted (half-open range endpoints).
        Defaults to False.
    axis : Optional[int], optional
        Axis position, only used in the error message.

    Returns
    -------
    int
        The resolved index in ``[0, size)`` (``[0, size]`` with `allow_end`).

    Raises
    ------
    IndexOutOfRangeError
        If the resolved index is out of bounds. Values are never clamped.
    """
    resolved = size + signed_index if signed_index < 0 else signed_index
    upper = size + 1 if allow_end else size
    if resolved < 0 or resolved >= upper:
        raise IndexOutOfRangeError(signed_index, size, axis)
    return resolved


def normalize_reshape(
    current_size: int, requested: Sequence[int]
) -> tuple[int, ...]:
    """
    Turn a reshape request that may contain one wildcard into a concrete shape.

    Parameters
    ----------
    current_size : int
        Number of elements of the tensor being reshaped.
    requested : Sequence[int]
        Requested shape. At most one entry may be ``-1``.

    Returns
    -------
    tuple[int, ...]
        Concrete shape whose product equals `current_size`.

    Raises
    ------
    ShapeMismatchError
        If more than one wildcard is given, a size is negative, the explicit
        axes do not divide `current_size`, or the totals differ.
    """
    requested = tuple(int(d) for d in requested)
    if len(requested) == 0:
        raise ShapeMismatchError("Reshape requires at least one axis", actual=requested)

    wildcards = [i for i, d in enumerate(requested) if d == WILDCARD]
    if len(wildcards) > 1:
        raise ShapeMismatchError(
            f"Can only specify one axis as -1, got shape {requested}",
            actual=requested,
        )
    for d in requested:
        if d < 0 and d != WILDCARD:
            raise ShapeMismatchError(
                f"Invalid axis size {d} in shape {requested}", actual=requested
            )

    if not wildcards:
        if product(requested) != current_size:
            raise ShapeMismatchError(
                f"Cannot reshape tensor of size {current_size} into shape {requested}",
                expected=(current_size,),
                actual=requested,
            )
        return requested

    known = product(d for i, d in enumerate(requested) if i != wildcards[0])
    if known == 0 or current_size % known != 0:
        raise ShapeMismatchError(
            f"Cannot reshape tensor of size {current_size} into shape {requested}",
            expected=(current_size,),
            actual=requested,
        )

    shape = list(requested)
    shape[wildcards[0]] = current_size // known
    return tuple(shape)
