"""
Expansion of slicing requests into per-axis operations.

`resolve_axis_indices` turns a caller-supplied slicing request, which may
contain one Ellipsis and any number of NewAxis entries, into:

- ``resolved_axes``: exactly one `AxisIndex` per *source* axis, never
  containing Ellipsis or NewAxis, and
- ``insertions``: ``rank + 1`` counters, where ``insertions[k]`` is the number
  of length-1 axes to insert before source axis ``k`` in the result
  (``insertions[rank]`` counts trailing insertions).

Example
-------
For a rank-2 tensor, ``[NEW_AXIS, ELLIPSIS, NEW_AXIS]`` resolves to
``([FULL, FULL], [1, 0, 1])``, i.e. an output of shape ``(1, d0, d1, 1)``.
"""

from __future__ import annotations

from typing import Any, Sequence

from ...domain._axis_index import FULL, AxisIndex, AxisIndexKind, as_axis_index
from ...domain._errors import MultipleEllipsisError, TooManyIndicesError


def resolve_axis_indices(
    rank: int, indices: Sequence[Any]
) -> tuple[list[AxisIndex], list[int]]:
    """
    Resolve a slicing request against a tensor of the given rank.

    Parameters
    ----------
    rank : int
        Number of axes of the tensor being sliced.
    indices : Sequence[Any]
        Slicing request. Entries are `AxisIndex` values or Python indexing
        natives accepted by `as_axis_index`.

    Returns
    -------
    tuple[list[AxisIndex], list[int]]
        ``(resolved_axes, insertions)`` with lengths ``rank`` and ``rank + 1``.

    Raises
    ------
    MultipleEllipsisError
        If more than one Ellipsis is present.
    TooManyIndicesError
        If more axis-consuming entries are given than the tensor has axes.
    """
    request = [as_axis_index(i) for i in indices]

    n_ellipsis = sum(1 for a in request if a.kind is AxisIndexKind.ELLIPSIS)
    if n_ellipsis > 1:
        raise MultipleEllipsisError(n_ellipsis)

    consumed = sum(1 for a in request if a.consumes_axis)
    if consumed > rank:
        raise TooManyIndicesError(consumed, rank)

    resolved: list[AxisIndex] = []
    # insertions[-1] is the slot in front of the next source axis to be filled
    insertions: list[int] = [0]

    for a in request:
        if a.kind is AxisIndexKind.ELLIPSIS:
            for _ in range(rank - consumed):
                resolved.append(FULL)
                insertions.append(0)
        elif a.kind is AxisIndexKind.NEW_AXIS:
            insertions[-1] += 1
        else:
            resolved.append(a)
            insertions.append(0)

    # implicit trailing ellipsis
    while len(resolved) < rank:
        resolved.append(FULL)
        insertions.append(0)

    return resolved, insertions
