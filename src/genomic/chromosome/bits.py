"""Bit-flip mutation over the full native width of an integer."""

from __future__ import annotations

from typing import Any

import numpy as np

from ..numeric import IntegerKind, integer_kind, resolve_dtype
from .base import Chromosome, validate_rate

__all__ = ["flip_mask", "flip_bits", "BitsCh"]


def flip_mask(bits: int, rate: float, rng: np.random.Generator) -> int:
    """Draw a mask where each of the low ``bits`` positions is set with probability ``rate / 2``."""

    if bits <= 0:
        return 0
    flips = np.flatnonzero(rng.random(bits) < rate / 2.0)
    mask = 0
    for bit in flips:
        mask |= 1 << int(bit)
    return mask


def flip_bits(value: int, kind: IntegerKind, rate: float, rng: np.random.Generator) -> int:
    """Flip every bit of ``value`` independently with probability ``rate / 2``.

    With ``rate == 1.0`` each bit becomes a fair coin, so the result is uniform
    over the whole dtype. Signed values are flipped in their two's-complement
    representation and folded back into ``[kind.min, kind.max]``.
    """

    rate = validate_rate(rate)
    unsigned = int(value) & kind.mask
    unsigned ^= flip_mask(kind.bits, rate, rng)
    return kind.wrap(unsigned)


class BitsCh(Chromosome):
    """An integer leaf mutated by independent bit flips."""

    def __init__(self, value: Any = 0, dtype: Any = None) -> None:
        self.kind = integer_kind(resolve_dtype(value, dtype))
        self.value = self.kind.cast(value)

    def mutate(self, rate: float, rng: np.random.Generator) -> None:
        self.value = self.kind.cast(flip_bits(int(self.value), self.kind, rate, rng))

    def __int__(self) -> int:
        return int(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BitsCh):
            return self.kind == other.kind and int(self.value) == int(other.value)
        return NotImplemented

    def __repr__(self) -> str:
        return f"BitsCh({int(self.value)}, dtype={self.kind.dtype.name})"
