"""Fixed-bit-width mutation.

Only the ``bits`` least significant bits of the value take part. For signed
dtypes the value is read as a ``bits``-wide two's-complement integer embedded
in the wider native type, so ``FixedBitsCh(value, bits=7, dtype=np.int8)``
mutates like a theoretical ``int7``.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ..numeric import IntegerKind, integer_kind, resolve_dtype
from .base import Chromosome, bernoulli, validate_rate
from .bits import flip_mask

__all__ = ["validate_bits", "signed_window", "flip_fixed_bits", "FixedBitsCh"]


def validate_bits(bits: int, kind: IntegerKind) -> int:
    bits = int(bits)
    if not 1 <= bits <= kind.bits:
        raise ValueError(
            f"bits must be within [1, {kind.bits}] for {kind.dtype.name} (got {bits})"
        )
    return bits


def signed_window(bits: int) -> tuple[int, int]:
    """Representable range of a ``bits``-wide two's-complement integer."""

    depth = 1 << (bits - 1)
    return -depth, depth - 1


def flip_fixed_bits(
    value: int, bits: int, kind: IntegerKind, rate: float, rng: np.random.Generator
) -> int:
    rate = validate_rate(rate)
    bits = validate_bits(bits, kind)
    value = int(value)

    if not kind.signed:
        return kind.wrap((value & kind.mask) ^ flip_mask(bits, rate, rng))

    if bits != kind.bits:
        low, high = signed_window(bits)
        value = min(max(value, low), high)

    # Magnitude bits; the sign bit is handled separately below.
    value ^= flip_mask(bits - 1, rate, rng)

    if bernoulli(rng, rate / 2.0):
        sign = 1 << (bits - 1)
        if bits == kind.bits:
            value = kind.wrap(value ^ sign)
        elif value < 0:
            value += sign
        else:
            value -= sign
    return value


class FixedBitsCh(Chromosome):
    """An integer leaf where only the low ``bits`` bits are mutated."""

    def __init__(self, value: Any = 0, bits: int = 8, dtype: Any = None) -> None:
        self.kind = integer_kind(resolve_dtype(value, dtype))
        self.bits = validate_bits(bits, self.kind)
        self.value = self.kind.cast(value)

    def mutate(self, rate: float, rng: np.random.Generator) -> None:
        mutated = flip_fixed_bits(int(self.value), self.bits, self.kind, rate, rng)
        self.value = self.kind.cast(mutated)

    def __int__(self) -> int:
        return int(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedBitsCh):
            return (
                self.kind == other.kind
                and self.bits == other.bits
                and int(self.value) == int(other.value)
            )
        return NotImplemented

    def __repr__(self) -> str:
        return (
            f"FixedBitsCh({int(self.value)}, bits={self.bits}, "
            f"dtype={self.kind.dtype.name})"
        )
