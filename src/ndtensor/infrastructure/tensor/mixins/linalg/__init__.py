"""
Linear-algebra mixin (dot product and ``@``).

Public API
----------
- ``TensorMixinLinalg``
- ``dot``
"""

from ._base import TensorMixinLinalg, dot

__all__ = [
    TensorMixinLinalg.__name__,
    dot.__name__,
]
