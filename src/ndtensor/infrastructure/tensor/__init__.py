from ._shape_and_indexing import TensorShapeAndIndexingMixin
from .mixins import (
    TensorMixinArithmetic,
    TensorMixinComparison,
    TensorMixinFormatting,
    TensorMixinLinalg,
    TensorMixinMemory,
)


class _TensorAllMixin(
    TensorShapeAndIndexingMixin,
    TensorMixinArithmetic,
    TensorMixinComparison,
    TensorMixinLinalg,
    TensorMixinMemory,
    TensorMixinFormatting,
):
    pass


__all__ = [_TensorAllMixin.__name__]
