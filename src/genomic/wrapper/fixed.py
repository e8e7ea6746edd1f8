"""Fixed-bit-width wrapper for integers stored in slots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..chromosome.fixed import flip_fixed_bits
from ..numeric import integer_kind, resolve_dtype
from ..slots import slots_of
from .base import store, swap_slots

if TYPE_CHECKING:
    from ..traverse.crossover import Crossover
    from ..traverse.mutator import Mutator

__all__ = ["FixedBits"]


@dataclass(frozen=True)
class FixedBits:
    """Mutate only the ``bits`` least significant bits of an integer.

    Signed values are read as ``bits``-wide two's-complement integers. For
    unsigned dtypes a width larger than the dtype is capped to the dtype.
    """

    bits: int
    dtype: Any = None

    def mutate_with(self, target: Any, mutator: "Mutator") -> None:
        for entry in slots_of(target):
            value = entry.get()
            kind = integer_kind(resolve_dtype(value, self.dtype))
            bits = self.bits if kind.signed else min(self.bits, kind.bits)
            flipped = flip_fixed_bits(int(value), bits, kind, mutator.rate, mutator.rng)
            entry.set(store(value, flipped, kind))

    def crossover_with(self, left: Any, right: Any, crossover: "Crossover") -> None:
        swap_slots(left, right, crossover)
