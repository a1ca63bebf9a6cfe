"""
Arithmetic mixin defining elementwise Tensor operators.

This module declares :class:`TensorMixinArithmetic`, which implements
elementwise ``+``, ``-``, ``*``, ``/`` (and their reflected forms plus unary
negation) on top of the core tensor contract: `shape`, `dtype` and the flat
row-major buffer.

Semantics
---------
- Tensor (op) Tensor requires identical shapes; broadcasting is not
  supported and a mismatch raises `ShapeMismatchError`.
- Tensor (op) scalar and scalar (op) Tensor apply the scalar to every
  element. Scalars are any `numbers.Number` (including NumPy scalars).
- Results are always new tensors; operands are never modified.
"""

from __future__ import annotations

import operator
from numbers import Integral, Number, Real
from typing import Any, Callable, Union

from .....domain._errors import ShapeMismatchError
from .....domain._numeric import NumericType, float64, int64, numeric_type
from .....domain._tensor import ITensor

Operand = Union["ITensor", Number]


def _result_dtype(a: NumericType, b: NumericType, true_div: bool) -> NumericType:
    """
    Pick the element type of a binary result.

    Equal dtypes are preserved. ``int64`` yields to any other type; otherwise
    the side that renders as floating point wins. True division of ``int64``
    yields ``float64``.
    """
    if a == b:
        out = a
    elif a is int64:
        out = b
    elif b is int64:
        out = a
    elif b.is_float and not a.is_float:
        out = b
    else:
        out = a
    if true_div and out is int64:
        return float64
    return out


def _scalar_dtype(value: Number, fallback: NumericType) -> NumericType:
    """
    Element type of a scalar operand.

    Registered Python types resolve directly; other real non-integral
    scalars (e.g. NumPy floats) count as ``float64``. Anything else takes
    `fallback`.
    """
    try:
        return numeric_type(type(value))
    except TypeError:
        pass
    if isinstance(value, Real) and not isinstance(value, Integral):
        return float64
    return fallback


class TensorMixinArithmetic:
    """
    Mixin providing elementwise arithmetic operators for tensors.

    Notes
    -----
    - The host class must provide `.shape`, `.dtype`, `._live(op)` and
      `._wrap(buffer, shape, dtype)`.
    - Element values only need to implement the Python operator being used.
    """

    def _binary_op(
        self,
        other: Any,
        fn: Callable[[Any, Any], Any],
        name: str,
        reflected: bool = False,
    ) -> "ITensor":
        TensorClass = self.__class__
        a = self._live(name)
        true_div = fn is operator.truediv

        if isinstance(other, TensorMixinArithmetic):
            if other.shape != self.shape:
                raise ShapeMismatchError(
                    f"{name} requires matching shapes (no broadcasting); "
                    f"got {self.shape} and {other.shape}",
                    expected=self.shape,
                    actual=other.shape,
                )
            b = other._live(name)
            dtype = _result_dtype(self.dtype, other.dtype, true_div)
            out = [fn(x, y) for x, y in zip(a, b)]
            return TensorClass._wrap(out, self.shape, dtype)

        if not isinstance(other, Number):
            return NotImplemented

        scalar_dtype = _scalar_dtype(other, self.dtype)
        dtype = _result_dtype(self.dtype, scalar_dtype, true_div)
        if reflected:
            out = [fn(other, x) for x in a]
        else:
            out = [fn(x, other) for x in a]
        return TensorClass._wrap(out, self.shape, dtype)

    # ----------------------------
    # Addition
    # ----------------------------
    def __add__(self, other: Operand) -> "ITensor":
        """
        Elementwise addition.
        """
        return self._binary_op(other, operator.add, "add")

    def __radd__(self, other: Number) -> "ITensor":
        return self._binary_op(other, operator.add, "add", reflected=True)

    # ----------------------------
    # Subtraction
    # ----------------------------
    def __sub__(self, other: Operand) -> "ITensor":
        """
        Elementwise subtraction.
        """
        return self._binary_op(other, operator.sub, "sub")

    def __rsub__(self, other: Number) -> "ITensor":
        """
        Right-hand subtraction to support ``scalar - Tensor``.
        """
        return self._binary_op(other, operator.sub, "sub", reflected=True)

    # ----------------------------
    # Multiplication
    # ----------------------------
    def __mul__(self, other: Operand) -> "ITensor":
        """
        Elementwise (Hadamard) multiplication.
        """
        return self._binary_op(other, operator.mul, "mul")

    def __rmul__(self, other: Number) -> "ITensor":
        return self._binary_op(other, operator.mul, "mul", reflected=True)

    # ----------------------------
    # True division
    # ----------------------------
    def __truediv__(self, other: Operand) -> "ITensor":
        """
        Elementwise true division.

        Notes
        -----
        Division by a zero element follows the element type: Python floats
        and ints raise ``ZeroDivisionError``.
        """
        return self._binary_op(other, operator.truediv, "div")

    def __rtruediv__(self, other: Number) -> "ITensor":
        """
        Right-hand true division to support ``scalar / Tensor``.
        """
        return self._binary_op(other, operator.truediv, "div", reflected=True)

    def __neg__(self) -> "ITensor":
        a = self._live("neg")
        return self.__class__._wrap([-x for x in a], self.shape, self.dtype)
