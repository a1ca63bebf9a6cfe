"""
Equality mixin for tensors.

Two tensors are equal when they have the same shape and the same elements
in row-major order. The element type descriptor does not take part in the
comparison, so ``Tensor([1, 2], dtype=int) == Tensor([1.0, 2.0])`` holds.

Tensors are mutable through ``__setitem__`` and therefore unhashable.
"""

from __future__ import annotations

import math
from typing import Any


class TensorMixinComparison:
    """
    Mixin providing ``==``, ``!=`` and tolerance-based `allclose`.

    Notes
    -----
    The host class must provide `.shape` and `._live(op)`.
    """

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: Any) -> bool:
        """
        Structural equality.

        Returns
        -------
        bool
            True when shapes match and all elements compare equal.
            Comparing with a non-tensor returns ``NotImplemented``.
        """
        if not isinstance(other, TensorMixinComparison):
            return NotImplemented
        if self.shape != other.shape:
            return False
        a = self._live("__eq__")
        b = other._live("__eq__")
        return all(x == y for x, y in zip(a, b))

    def __ne__(self, other: Any) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def allclose(self, other: Any, rtol: float = 1e-5, atol: float = 1e-8) -> bool:
        """
        Elementwise closeness test with NumPy's tolerance formula.

        ``|a - b| <= atol + rtol * |b|`` must hold for every element pair.

        Parameters
        ----------
        other : Tensor
            Tensor to compare against. Shapes must match exactly.
        rtol : float, optional
            Relative tolerance. Defaults to 1e-5.
        atol : float, optional
            Absolute tolerance. Defaults to 1e-8.

        Returns
        -------
        bool
            False on shape mismatch, otherwise whether all pairs are close.
        """
        if not isinstance(other, TensorMixinComparison):
            raise TypeError(f"allclose expects a Tensor, got {type(other).__name__}")
        if self.shape != other.shape:
            return False
        a = self._live("allclose")
        b = other._live("allclose")
        for x, y in zip(a, b):
            x, y = float(x), float(y)
            if x == y:
                continue
            if not (math.isfinite(x) and math.isfinite(y)):
                return False
            if abs(x - y) > atol + rtol * abs(y):
                return False
        return True
