"""
Element-type capability for generic tensors.

A tensor is generic over its element type. The core only needs three things
from that type: a zero, a one, and addition. This module captures them:

- :class:`Numeric` is a structural Protocol for element values (anything with
  ``__add__``; arithmetic collaborators additionally use ``-``, ``*``, ``/``).
- :class:`NumericType` is the *descriptor* a tensor carries as its ``dtype``:
  it names the type and supplies the additive and multiplicative identities.

Factories such as ``Tensor.range`` build values by repeated addition of
``one`` starting from ``zero``, so any type with those identities works,
including ``fractions.Fraction`` or ``decimal.Decimal``.

The domain layer does not import NumPy; ``numpy_dtype`` is stored as a plain
string and only interpreted by the infrastructure layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class Numeric(Protocol):
    """
    Structural interface for tensor element values.

    Only addition is required by the core (construction via `range`,
    accumulation in `dot`). Elementwise arithmetic relies on the remaining
    dunder methods when those operators are used.
    """

    def __add__(self, other: Any) -> Any: ...


@dataclass(frozen=True)
class NumericType:
    """
    Descriptor for a tensor element type.

    Attributes
    ----------
    name : str
        Canonical name (e.g. ``"float64"``), used in ``repr`` and lookups.
    zero : Any
        Additive identity.
    one : Any
        Multiplicative identity.
    numpy_dtype : Optional[str]
        NumPy dtype name used by ``to_numpy()``; ``None`` lets NumPy infer
        (object arrays for exotic element types).
    is_float : bool
        Whether values are rendered with fixed precision by ``str(tensor)``.
    """

    name: str
    zero: Any
    one: Any
    numpy_dtype: Optional[str] = None
    is_float: bool = True

    def __repr__(self) -> str:
        return f"NumericType('{self.name}')"


float64 = NumericType("float64", 0.0, 1.0, numpy_dtype="float64", is_float=True)
float32 = NumericType("float32", 0.0, 1.0, numpy_dtype="float32", is_float=True)
int64 = NumericType("int64", 0, 1, numpy_dtype="int64", is_float=False)
fraction = NumericType("fraction", Fraction(0), Fraction(1), is_float=False)
decimal = NumericType("decimal", Decimal(0), Decimal(1), is_float=True)

_REGISTRY: dict[str, NumericType] = {
    t.name: t for t in (float64, float32, int64, fraction, decimal)
}
_PY_TYPES: dict[type, NumericType] = {
    float: float64,
    int: int64,
    Fraction: fraction,
    Decimal: decimal,
}

DTypeLike = Union[NumericType, str, type, None]


def numeric_type(dtype: DTypeLike = None) -> NumericType:
    """
    Resolve a dtype-like value into a :class:`NumericType`.

    Parameters
    ----------
    dtype : DTypeLike
        ``None`` (defaults to ``float64``), a ``NumericType``, a registered
        name such as ``"int64"``, or a Python type (``float``, ``int``,
        ``Fraction``, ``Decimal``).

    Returns
    -------
    NumericType
        The resolved descriptor.

    Raises
    ------
    TypeError
        If `dtype` cannot be resolved.
    """
    if dtype is None:
        return float64
    if isinstance(dtype, NumericType):
        return dtype
    if isinstance(dtype, str):
        try:
            return _REGISTRY[dtype]
        except KeyError:
            raise TypeError(
                f"Unknown dtype name {dtype!r}; expected one of {sorted(_REGISTRY)}"
            ) from None
    if isinstance(dtype, type) and dtype in _PY_TYPES:
        return _PY_TYPES[dtype]
    raise TypeError(f"Cannot interpret {dtype!r} as a tensor dtype")


def register_numeric_type(t: NumericType) -> NumericType:
    """
    Register a custom element type so it can be looked up by name.

    Returns the registered descriptor, allowing use as an expression.
    """
    _REGISTRY[t.name] = t
    return t
