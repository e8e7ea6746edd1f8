"""Permutation mutation: reorder values instead of perturbing them."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from ..slots import slots_of

if TYPE_CHECKING:
    from ..traverse.mutator import Mutator

__all__ = ["Reorder"]


class Reorder(Enum):
    """Treat a collection as a multiset whose mutation is a series of transpositions.

    The target can be a list, a dict (its values are reordered across its keys)
    or an iterable of slots. Values are only moved, never changed, so the
    multiset of values is preserved.
    """

    SWAP = "swap"

    def mutate_with(self, target: Any, mutator: "Mutator") -> None:
        entries = slots_of(target)
        length = len(entries)
        if length < 2:
            return

        rate = mutator.rate
        swaps = int((length - 1) * rate)
        if rate > 0.0 and swaps == 0:
            swaps = 1

        rng = mutator.rng
        for _ in range(swaps):
            first = int(rng.integers(length))
            second = int(rng.integers(length - 1))
            if second >= first:
                second += 1
            entries[first].swap(entries[second])

    def size_hint(self, target: Any) -> int:
        return len(slots_of(target))
