"""Wrapper capability: mutation/crossover semantics supplied from outside a value.

Sometimes a field should mutate differently from what its stored type
suggests (a bounded float, a list that is really a permutation) without
changing how it is stored. A wrapper carries those semantics and is applied
explicitly from a genome implementation::

    mutator.wrap(Uniform(0.0, math.tau), slot(self, "angle"))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np

from ..numeric import IntegerKind, NumericKind
from ..slots import slots_of

if TYPE_CHECKING:
    from ..traverse.crossover import Crossover
    from ..traverse.mutator import Mutator

__all__ = ["MutationWrapper", "CrossoverWrapper", "swap_slots", "store"]


@runtime_checkable
class MutationWrapper(Protocol):
    def mutate_with(self, target: Any, mutator: "Mutator") -> None:
        ...


@runtime_checkable
class CrossoverWrapper(Protocol):
    def crossover_with(self, left: Any, right: Any, crossover: "Crossover") -> None:
        ...


def swap_slots(left: Any, right: Any, crossover: "Crossover") -> None:
    """Pair the slots of ``left`` and ``right`` by position and swap each pair on demand."""

    for left_slot, right_slot in zip(slots_of(left), slots_of(right)):
        if crossover.should_swap():
            left_slot.swap(right_slot)


def store(original: Any, value: Any, kind: NumericKind) -> Any:
    """Convert a mutated ``value`` to what should be written back over ``original``."""

    if isinstance(original, np.generic):
        return kind.cast(value)
    if isinstance(kind, IntegerKind):
        return int(value)
    return float(value)
