"""
Tensor memory operations for ndtensor.

- `clone`       : deep copy of tensor storage
- `to_numpy`    : materialize tensor data as a NumPy ndarray
- `from_numpy`  : copy data from NumPy into a new tensor

Public API
----------
Only `TensorMixinMemory` is re-exported as part of the public interface.
"""

from ._base import TensorMixinMemory

__all__ = [
    TensorMixinMemory.__name__,
]
