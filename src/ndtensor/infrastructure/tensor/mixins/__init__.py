from .arithmetic import TensorMixinArithmetic
from .comparison import TensorMixinComparison
from .formatting import TensorMixinFormatting
from .linalg import TensorMixinLinalg, dot
from .memory import TensorMixinMemory

__all__ = [
    TensorMixinArithmetic.__name__,
    TensorMixinComparison.__name__,
    TensorMixinFormatting.__name__,
    TensorMixinLinalg.__name__,
    TensorMixinMemory.__name__,
    dot.__name__,
]
