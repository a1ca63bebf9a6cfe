"""
Dot-product mixin for tensors.

Supported operand ranks:

==========  ==========  ============
left        right       result shape
==========  ==========  ============
``(n,)``    ``(n,)``    ``(1,)``
``(m, n)``  ``(n,)``    ``(m,)``
``(m, n)``  ``(n, p)``  ``(m, p)``
==========  ==========  ============

Accumulation starts from the left operand's ``dtype.zero`` and uses only
``+`` and ``*``, so any element type with those operators works.
"""

from __future__ import annotations

from typing import Any

from .....domain._errors import InvalidAxisError, ShapeMismatchError
from .....domain._tensor import ITensor


class TensorMixinLinalg:
    """
    Mixin providing `dot` and the ``@`` operator.

    Notes
    -----
    The host class must provide `.shape`, `.dtype`, `._live(op)` and
    `._wrap(buffer, shape, dtype)`.
    """

    def dot(self, other: "ITensor") -> "ITensor":
        """
        Dot product of vectors, matrix-vector or matrix-matrix product.

        Parameters
        ----------
        other : Tensor
            Right-hand operand.

        Returns
        -------
        Tensor
            See the module table for the result shape.

        Raises
        ------
        ShapeMismatchError
            If the contracted dimensions differ.
        InvalidAxisError
            If the operand ranks are not one of the supported combinations.
        """
        if not isinstance(other, TensorMixinLinalg):
            raise TypeError(f"dot expects a Tensor, got {type(other).__name__}")

        a = self._live("dot")
        b = other._live("dot")
        sa, sb = self.shape, other.shape
        zero = self.dtype.zero
        TensorClass = self.__class__

        if len(sa) == 1 and len(sb) == 1:
            _check_inner(sa[0], sb[0], sa, sb)
            acc = zero
            for x, y in zip(a, b):
                acc = acc + x * y
            return TensorClass._wrap([acc], (1,), self.dtype)

        if len(sa) == 2 and len(sb) == 1:
            m, n = sa
            _check_inner(n, sb[0], sa, sb)
            out = []
            for i in range(m):
                acc = zero
                row = i * n
                for k in range(n):
                    acc = acc + a[row + k] * b[k]
                out.append(acc)
            return TensorClass._wrap(out, (m,), self.dtype)

        if len(sa) == 2 and len(sb) == 2:
            m, n = sa
            n2, p = sb
            _check_inner(n, n2, sa, sb)
            out = []
            for i in range(m):
                row = i * n
                for j in range(p):
                    acc = zero
                    for k in range(n):
                        acc = acc + a[row + k] * b[k * p + j]
                    out.append(acc)
            return TensorClass._wrap(out, (m, p), self.dtype)

        raise InvalidAxisError(
            f"dot supports 1D.1D, 2D.1D and 2D.2D operands, got shapes {sa} and {sb}"
        )

    def __matmul__(self, other: Any) -> "ITensor":
        if not isinstance(other, TensorMixinLinalg):
            return NotImplemented
        return self.dot(other)


def _check_inner(n_left: int, n_right: int, sa: tuple, sb: tuple) -> None:
    if n_left != n_right:
        raise ShapeMismatchError(
            f"dot: shapes {sa} and {sb} not aligned ({n_left} != {n_right})",
            expected=sa,
            actual=sb,
        )


def dot(a: "ITensor", b: "ITensor") -> "ITensor":
    """
    Functional form of :meth:`TensorMixinLinalg.dot`.
    """
    return a.dot(b)
