"""
Comparison mixin for Tensor equality.

Public API
----------
- ``TensorMixinComparison``
"""

from ._base import TensorMixinComparison

__all__ = [
    TensorMixinComparison.__name__,
]
