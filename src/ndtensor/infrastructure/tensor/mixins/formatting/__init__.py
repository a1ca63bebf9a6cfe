"""
Display formatting mixin.

Public API
----------
- ``TensorMixinFormatting``
"""

from ._base import TensorMixinFormatting

__all__ = [
    TensorMixinFormatting.__name__,
]
