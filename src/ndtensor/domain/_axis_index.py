"""
Slicing request values for advanced tensor indexing.

This module defines :class:`AxisIndex`, the tagged value used to describe
how a single position of a slicing request acts on a tensor:

- ``FULL``        keep the axis as-is
- ``ELLIPSIS``    expand to ``FULL`` for every axis not otherwise mentioned
- ``NEW_AXIS``    insert a length-1 axis (does not consume a source axis)
- ``INDEX``       pick one element and drop the axis
- ``SLICE``       half-open ``[start, end)``
- ``SLICE_FROM``  ``[start, dim)``
- ``SLICE_TO``    ``[0, end)``

All integer payloads are signed: negative values count from the end of the
axis. Instances are immutable and hashable.

The module also provides :func:`as_axis_index`, which converts the Python
indexing natives (``...``, ``None``, ``int``, unit-step ``slice``) into
``AxisIndex`` values so ``Tensor.__getitem__`` can reuse the same machinery.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Any, Optional


class AxisIndexKind(Enum):
    """
    Enumeration of the slicing request variants.
    """

    FULL = "full"
    ELLIPSIS = "ellipsis"
    NEW_AXIS = "new_axis"
    INDEX = "index"
    SLICE = "slice"
    SLICE_FROM = "slice_from"
    SLICE_TO = "slice_to"


@dataclass(frozen=True)
class AxisIndex:
    """
    One entry of a slicing request.

    Prefer the classmethod constructors (`AxisIndex.index(-1)`,
    `AxisIndex.slice(1, 3)`, ...) over the raw dataclass constructor; they
    guarantee that only the payload fields meaningful for the kind are set.

    Attributes
    ----------
    kind : AxisIndexKind
        Which variant this entry is.
    start : Optional[int]
        Signed start position (``INDEX``, ``SLICE``, ``SLICE_FROM``).
    end : Optional[int]
        Signed exclusive end position (``SLICE``, ``SLICE_TO``).
    """

    kind: AxisIndexKind
    start: Optional[int] = None
    end: Optional[int] = None

    @classmethod
    def full(cls) -> "AxisIndex":
        return cls(AxisIndexKind.FULL)

    @classmethod
    def ellipsis(cls) -> "AxisIndex":
        return cls(AxisIndexKind.ELLIPSIS)

    @classmethod
    def new_axis(cls) -> "AxisIndex":
        return cls(AxisIndexKind.NEW_AXIS)

    @classmethod
    def index(cls, i: int) -> "AxisIndex":
        """Select element `i` of the axis and drop the axis."""
        return cls(AxisIndexKind.INDEX, start=int(i))

    @classmethod
    def slice(cls, start: int, end: int) -> "AxisIndex":
        """Half-open range ``[start, end)``; ``slice(2, 5)`` picks 2, 3 and 4."""
        return cls(AxisIndexKind.SLICE, start=int(start), end=int(end))

    @classmethod
    def slice_from(cls, start: int) -> "AxisIndex":
        return cls(AxisIndexKind.SLICE_FROM, start=int(start))

    @classmethod
    def slice_to(cls, end: int) -> "AxisIndex":
        return cls(AxisIndexKind.SLICE_TO, end=int(end))

    @property
    def consumes_axis(self) -> bool:
        """
        Whether this entry is matched against a source axis.

        Everything except ``ELLIPSIS`` and ``NEW_AXIS`` consumes an axis.
        """
        return self.kind not in (AxisIndexKind.ELLIPSIS, AxisIndexKind.NEW_AXIS)

    def __repr__(self) -> str:
        k = self.kind
        if k is AxisIndexKind.INDEX:
            return f"AxisIndex.index({self.start})"
        if k is AxisIndexKind.SLICE:
            return f"AxisIndex.slice({self.start}, {self.end})"
        if k is AxisIndexKind.SLICE_FROM:
            return f"AxisIndex.slice_from({self.start})"
        if k is AxisIndexKind.SLICE_TO:
            return f"AxisIndex.slice_to({self.end})"
        return f"AxisIndex.{k.value}()"


FULL = AxisIndex.full()
ELLIPSIS = AxisIndex.ellipsis()
NEW_AXIS = AxisIndex.new_axis()


def as_axis_index(obj: Any) -> AxisIndex:
    """
    Convert a Python indexing object into an :class:`AxisIndex`.

    Parameters
    ----------
    obj : Any
        One of: an ``AxisIndex`` (returned unchanged), ``...`` (Ellipsis),
        ``None`` (new axis), an ``int`` (single index), or a ``slice`` whose
        step is ``None`` or ``1``.

    Returns
    -------
    AxisIndex
        The equivalent slicing request entry.

    Raises
    ------
    ValueError
        If a ``slice`` has a step other than 1.
    TypeError
        If `obj` is not a supported indexing object.

    Notes
    -----
    ``bool`` is rejected explicitly: ``True``/``False`` are ints in Python but
    mean masking in NumPy, which is not supported here.
    """
    if isinstance(obj, AxisIndex):
        return obj
    if obj is Ellipsis:
        return ELLIPSIS
    if obj is None:
        return NEW_AXIS
    if isinstance(obj, bool):
        raise TypeError("Boolean indices are not supported")
    if isinstance(obj, Integral):
        return AxisIndex.index(obj)
    if isinstance(obj, slice):
        if obj.step not in (None, 1):
            raise ValueError(f"Only unit-step slices are supported, got step={obj.step}")
        if obj.start is None and obj.stop is None:
            return FULL
        if obj.stop is None:
            return AxisIndex.slice_from(obj.start)
        if obj.start is None:
            return AxisIndex.slice_to(obj.stop)
        return AxisIndex.slice(obj.start, obj.stop)
    raise TypeError(f"Unsupported index type: {type(obj).__name__}")
