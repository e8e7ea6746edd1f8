"""Width tables for the scalar types a chromosome can hold.

Python integers are unbounded, so every integer chromosome is bound to a numpy
integer dtype which fixes its native bit width and two's-complement window.
The helpers below are the single place where that window is enforced; the
mutation operators work on plain Python ints and call :meth:`IntegerKind.wrap`
or :meth:`IntegerKind.clamp` to fold results back into the dtype.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Union

import numpy as np

__all__ = [
    "IntegerKind",
    "FloatKind",
    "NumericKind",
    "integer_kind",
    "float_kind",
    "kind_of",
    "resolve_dtype",
    "is_raw_integer",
    "is_raw_bool",
    "is_raw_float",
    "like",
]


@dataclass(frozen=True)
class IntegerKind:
    """Native-width description of a numpy integer dtype."""

    dtype: np.dtype
    bits: int
    signed: bool
    min: int
    max: int

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def unsigned_dtype(self) -> np.dtype:
        return np.dtype(f"u{self.dtype.itemsize}")

    def wrap(self, value: int) -> int:
        """Reduce ``value`` modulo ``2**bits`` into the dtype's window."""

        value = int(value) & self.mask
        if self.signed and value > self.max:
            value -= 1 << self.bits
        return value

    def clamp(self, value: int) -> int:
        return min(max(int(value), self.min), self.max)

    def cast(self, value: int) -> np.generic:
        return self.dtype.type(self.wrap(value))


@dataclass(frozen=True)
class FloatKind:
    """Native-width description of a numpy floating dtype."""

    dtype: np.dtype
    bits: int
    min: float
    max: float

    def clamp(self, value: float) -> float:
        return min(max(float(value), self.min), self.max)

    def cast(self, value: float) -> np.generic:
        return self.dtype.type(value)


NumericKind = Union[IntegerKind, FloatKind]


@lru_cache(maxsize=None)
def integer_kind(dtype: Any) -> IntegerKind:
    resolved = np.dtype(dtype)
    if resolved.kind not in "iu":
        raise TypeError(f"'{resolved}' is not an integer dtype")
    info = np.iinfo(resolved)
    return IntegerKind(
        dtype=resolved,
        bits=int(info.bits),
        signed=resolved.kind == "i",
        min=int(info.min),
        max=int(info.max),
    )


@lru_cache(maxsize=None)
def float_kind(dtype: Any) -> FloatKind:
    resolved = np.dtype(dtype)
    if resolved.kind != "f":
        raise TypeError(f"'{resolved}' is not a floating dtype")
    info = np.finfo(resolved)
    return FloatKind(
        dtype=resolved,
        bits=int(info.bits),
        min=float(info.min),
        max=float(info.max),
    )


def is_raw_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def is_raw_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not is_raw_bool(value)


def is_raw_float(value: Any) -> bool:
    return isinstance(value, (float, np.floating))


def resolve_dtype(value: Any, dtype: Any = None) -> np.dtype:
    """Pick the dtype for ``value``: explicit, then the numpy scalar's own, then the default."""

    if dtype is not None:
        return np.dtype(dtype)
    if isinstance(value, np.generic):
        return value.dtype
    if is_raw_bool(value):
        return np.dtype(bool)
    if is_raw_integer(value):
        return np.dtype(np.int64)
    if is_raw_float(value):
        return np.dtype(np.float64)
    raise TypeError(f"cannot infer a numeric dtype for {type(value).__name__}")


def kind_of(value: Any, dtype: Any = None) -> NumericKind:
    resolved = resolve_dtype(value, dtype)
    if resolved.kind in "iu":
        return integer_kind(resolved)
    if resolved.kind == "f":
        return float_kind(resolved)
    raise TypeError(f"unsupported dtype '{resolved}'")


def like(original: Any, value: Any, kind: NumericKind | None = None) -> Any:
    """Return ``value`` in the same flavour as ``original``.

    numpy scalars stay numpy scalars of their dtype (or of ``kind`` when given),
    Python numbers stay Python numbers.
    """

    if isinstance(original, np.generic):
        if kind is not None:
            return kind.cast(value)
        return original.dtype.type(value)
    if is_raw_bool(original):
        return bool(value)
    if is_raw_integer(original):
        return int(value)
    return float(value)
