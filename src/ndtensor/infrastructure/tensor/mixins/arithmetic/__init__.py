"""
Arithmetic mixin for Tensor operations.

Elementwise operators layered over the core tensor contract:

- addition           (``__add__`` / ``__radd__``)
- subtraction        (``__sub__`` / ``__rsub__``)
- multiplication     (``__mul__`` / ``__rmul__``)
- true division      (``__truediv__`` / ``__rtruediv__``)
- negation           (``__neg__``)

Public API
----------
Only the mixin class is exported:

- ``TensorMixinArithmetic``
"""

from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
]
