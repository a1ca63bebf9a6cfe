from ._tensor import Tensor
from .tensor._print_options import (
    PrintOptions,
    get_print_options,
    print_options,
    set_print_options,
)
from .tensor.mixins import dot

__all__ = [
    Tensor.__name__,
    PrintOptions.__name__,
    get_print_options.__name__,
    print_options.__name__,
    set_print_options.__name__,
    dot.__name__,
]
