"""Clamped uniform random-walk mutation for integers and floats.

The new value is drawn from a window of width ``rate * (max - min)`` around the
(clamped) current value. Near a bound the window slides inwards instead of
shrinking, so it keeps its full width whenever ``[min, max]`` allows it. With
``rate == 1.0`` any value in ``[min, max]`` can be drawn.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from ..numeric import FloatKind, IntegerKind, NumericKind, kind_of
from .base import Chromosome, validate_rate

__all__ = [
    "uniform_int_window",
    "uniform_int",
    "uniform_float_window",
    "uniform_float",
    "uniform_step",
    "UniformCh",
]


def _check_bounds(minimum: Any, maximum: Any) -> None:
    if minimum > maximum:
        raise ValueError(f"invalid bounds: min ({minimum}) is greater than max ({maximum})")


def uniform_int_window(value: int, minimum: int, maximum: int, rate: float) -> tuple[int, int]:
    """Inclusive ``(low, high)`` window for an integer uniform walk."""

    rate = validate_rate(rate)
    low, high = int(minimum), int(maximum)
    _check_bounds(low, high)

    # Half-up rounding: a width of 2.5 becomes 3.
    width = min(math.floor((high - low) * rate + 0.5), high - low)
    half_low = width // 2
    half_high = width // 2 + width % 2

    value = min(max(int(value), low), high)

    if value - low <= half_low:
        return low, min(low + width, high)
    if high - value <= half_high:
        return max(high - width, low), high
    return max(value - half_low, low), min(value + half_high, high)


def uniform_int(
    value: int,
    minimum: int,
    maximum: int,
    rate: float,
    rng: np.random.Generator,
    kind: IntegerKind | None = None,
) -> int:
    low, high = uniform_int_window(value, minimum, maximum, rate)
    dtype = kind.dtype if kind is not None else np.int64
    return int(rng.integers(low, high, endpoint=True, dtype=dtype))


def uniform_float_window(
    value: float, minimum: float, maximum: float, rate: float
) -> tuple[float, float]:
    """Half-open ``[low, high)`` window for a floating-point uniform walk."""

    rate = validate_rate(rate)
    low, high = float(minimum), float(maximum)
    _check_bounds(low, high)

    width = (high - low) * rate
    half = width / 2.0

    value = min(max(float(value), low), high)

    if value - low < half:
        return low, low + width
    if high - value < half:
        return high - width, high
    return max(value - half, low), min(value + half, high)


def uniform_float(
    value: float, minimum: float, maximum: float, rate: float, rng: np.random.Generator
) -> float:
    low, high = uniform_float_window(value, minimum, maximum, rate)
    drawn = float(rng.uniform(low, high))
    # Rounding in ``low + u * (high - low)`` may land on ``high``.
    return min(drawn, high)


def uniform_step(
    value: Any,
    minimum: Any,
    maximum: Any,
    kind: NumericKind,
    rate: float,
    rng: np.random.Generator,
) -> int | float:
    """Dispatch to the integer or floating walk according to ``kind``."""

    if isinstance(kind, IntegerKind):
        return uniform_int(value, minimum, maximum, rate, rng, kind)
    if isinstance(kind, FloatKind):
        return uniform_float(value, minimum, maximum, rate, rng)
    raise TypeError(f"unsupported kind {kind!r}")


class UniformCh(Chromosome):
    """A bounded scalar leaf mutated by a uniform random walk within ``[min, max]``."""

    def __init__(self, value: Any, min: Any, max: Any, dtype: Any = None) -> None:
        self.kind = kind_of(value, dtype)
        self.value = self.kind.cast(value)
        if isinstance(self.kind, IntegerKind):
            self.min, self.max = int(min), int(max)
        else:
            self.min, self.max = float(min), float(max)

    def mutate(self, rate: float, rng: np.random.Generator) -> None:
        stepped = uniform_step(self.value, self.min, self.max, self.kind, rate, rng)
        self.value = self.kind.cast(stepped)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UniformCh):
            return (
                self.kind == other.kind
                and self.value == other.value
                and (self.min, self.max) == (other.min, other.max)
            )
        return NotImplemented

    def __repr__(self) -> str:
        return (
            f"UniformCh({self.value!r}, min={self.min!r}, max={self.max!r}, "
            f"dtype={self.kind.dtype.name})"
        )
