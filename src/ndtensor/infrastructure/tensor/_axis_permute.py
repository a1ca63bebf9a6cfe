"""
Rank-general axis swapping on row-major buffers.

`swap_axes_data` re-derives the permuted shape and copies every element to
its permuted position. The result is always a fresh buffer; no view is
produced, so source and result never share storage.
"""

from __future__ import annotations

from typing import Any, Sequence

from ...domain._errors import InvalidAxisError
from ._shape_math import strides


def normalize_axis(axis: int, ndim: int) -> int:
    """
    Resolve a possibly negative axis against `ndim`.

    Raises
    ------
    InvalidAxisError
        If the axis is outside ``[-ndim, ndim)``.
    """
    resolved = axis + ndim if axis < 0 else axis
    if resolved < 0 or resolved >= ndim:
        raise InvalidAxisError(
            f"axis {axis} is out of bounds for tensor of dimension {ndim}",
            axis=axis,
            ndim=ndim,
        )
    return resolved


def swap_axes_data(
    data: Sequence[Any], shape: Sequence[int], axis1: int, axis2: int
) -> tuple[list[Any], tuple[int, ...]]:
    """
    Exchange two axes of a row-major buffer.

    Parameters
    ----------
    data : Sequence[Any]
        Source buffer in row-major order.
    shape : Sequence[int]
        Source shape.
    axis1, axis2 : int
        Distinct axes to exchange. Negative values count from the end.

    Returns
    -------
    tuple[list[Any], tuple[int, ...]]
        The rearranged buffer and the permuted shape.

    Raises
    ------
    InvalidAxisError
        If either axis is out of range or both name the same axis.
    """
    ndim = len(shape)
    a1 = normalize_axis(axis1, ndim)
    a2 = normalize_axis(axis2, ndim)
    if a1 == a2:
        raise InvalidAxisError(
            f"swapaxes requires two distinct axes, got {axis1} and {axis2}",
            axis=axis1,
            ndim=ndim,
        )

    new_shape = list(shape)
    new_shape[a1], new_shape[a2] = new_shape[a2], new_shape[a1]

    src_strides = strides(shape)
    dst_strides = strides(new_shape)

    out: list[Any] = [None] * len(data)
    for i, v in enumerate(data):
        # unravel against the source shape, swap, ravel against the new shape
        rem = i
        ii = []
        for s in src_strides:
            ii.append(rem // s)
            rem %= s
        ii[a1], ii[a2] = ii[a2], ii[a1]
        out[sum(j * s for j, s in zip(ii, dst_strides))] = v

    return out, tuple(new_shape)
