"""
Strided copy of a sub-tensor selected by resolved per-axis requests.

`slice_data` is the engine behind ``Tensor.slice``. Given the source buffer,
its shape and the output of `resolve_axis_indices`, it:

1. converts every per-axis request into a concrete half-open range,
2. allocates a contiguous result buffer,
3. fills it with a single odometer-style pass over the source (innermost
   axis fastest, carry into slower axes on overflow), and
4. builds the output shape from the kept axes and the new-axis insertions.

The copy is iterative; its state is one cursor per axis plus a running flat
source offset, so stack depth does not grow with rank.
"""

from __future__ import annotations

from typing import Any, Sequence

from ...domain._axis_index import AxisIndex, AxisIndexKind
from ...domain._errors import IndexOutOfRangeError
from ._shape_math import product, resolve_signed_axis, strides


def axis_range(axis: int, dim: int, request: AxisIndex) -> tuple[int, int, bool]:
    """
    Convert one resolved request into ``(start, end, keep)`` for an axis.

    Parameters
    ----------
    axis : int
        Axis position (for error messages).
    dim : int
        Extent of the axis.
    request : AxisIndex
        Resolved request; never Ellipsis or NewAxis.

    Returns
    -------
    tuple[int, int, bool]
        Half-open range and whether the axis survives in the output shape.

    Raises
    ------
    IndexOutOfRangeError
        If an index or endpoint lies outside the axis after negative
        resolution, or if a range starts after it ends.
    """
    k = request.kind
    if k is AxisIndexKind.FULL:
        return 0, dim, True
    if k is AxisIndexKind.INDEX:
        i = resolve_signed_axis(dim, request.start, axis=axis)
        return i, i + 1, False
    if k is AxisIndexKind.SLICE:
        st = resolve_signed_axis(dim, request.start, allow_end=True, axis=axis)
        en = resolve_signed_axis(dim, request.end, allow_end=True, axis=axis)
    elif k is AxisIndexKind.SLICE_FROM:
        st = resolve_signed_axis(dim, request.start, allow_end=True, axis=axis)
        en = dim
    elif k is AxisIndexKind.SLICE_TO:
        st = 0
        en = resolve_signed_axis(dim, request.end, allow_end=True, axis=axis)
    else:
        raise ValueError(f"Unresolved slicing request {request!r} for axis {axis}")

    if st > en:
        raise IndexOutOfRangeError(request.start, dim, axis)
    return st, en, True


def slice_data(
    data: Sequence[Any],
    shape: Sequence[int],
    resolved_axes: Sequence[AxisIndex],
    insertions: Sequence[int],
) -> tuple[list[Any], tuple[int, ...]]:
    """
    Copy the selected elements of a row-major buffer into a new buffer.

    Parameters
    ----------
    data : Sequence[Any]
        Source buffer in row-major order.
    shape : Sequence[int]
        Source shape.
    resolved_axes : Sequence[AxisIndex]
        One request per source axis (``len == len(shape)``).
    insertions : Sequence[int]
        New-axis counts (``len == len(shape) + 1``).

    Returns
    -------
    tuple[list[Any], tuple[int, ...]]
        The contiguous result buffer and the result shape.

    Notes
    -----
    If every axis is dropped by ``INDEX`` and nothing is inserted, the result
    shape is ``(1,)``; rank-0 tensors are not modeled.
    """
    n = len(shape)
    starts: list[int] = []
    ends: list[int] = []
    dims: list[int] = []
    out_shape: list[int] = [1] * insertions[0]

    for axis, request in enumerate(resolved_axes):
        st, en, keep = axis_range(axis, shape[axis], request)
        starts.append(st)
        ends.append(en)
        dims.append(en - st)
        if keep:
            out_shape.append(en - st)
        out_shape.extend([1] * insertions[axis + 1])

    if not out_shape:
        out_shape = [1]

    total = product(dims)
    out: list[Any] = [None] * total
    if total == 0:
        return out, tuple(out_shape)

    ss = strides(shape)
    cursor = list(starts)
    offset = sum(s * i for s, i in zip(ss, starts))

    for dst in range(total):
        out[dst] = data[offset]

        # advance the odometer: bump the fastest axis, carry on overflow
        c = n - 1
        cursor[c] += 1
        offset += ss[c]
        while c > 0 and cursor[c] >= ends[c]:
            cursor[c] = starts[c]
            offset -= dims[c] * ss[c]
            c -= 1
            cursor[c] += 1
            offset += ss[c]

    return out, tuple(out_shape)
