"""Windowed uniform-walk wrapper for scalars stored in slots."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..chromosome.uniform import uniform_step
from ..numeric import IntegerKind, NumericKind, kind_of
from ..slots import slots_of
from .base import store, swap_slots

if TYPE_CHECKING:
    from ..traverse.crossover import Crossover
    from ..traverse.mutator import Mutator

__all__ = ["Uniform"]


@dataclass(frozen=True)
class Uniform:
    """Mutate scalars by a uniform random walk within ``[min, max]``.

    The bounds live in the wrapper, not in the stored value, so one field can
    be walked with different bounds at different call sites. The target is a
    :class:`~genomic.slots.Slot`, a list, or the values of a dict.

    Example::

        class Rotation:
            def mutate(self, mutator):
                turn = Uniform(0.0, math.tau)
                mutator.wrap(turn, slot(self, "r")).wrap(turn, slot(self, "s"))
    """

    min: Any
    max: Any
    dtype: Any = None

    def kind_for(self, value: Any) -> NumericKind:
        return kind_of(value, self.dtype)

    def bounds_for(self, kind: NumericKind) -> tuple[Any, Any]:
        """Bounds in the arithmetic of ``kind``; float bounds shrink inwards for integers."""

        if isinstance(kind, IntegerKind):
            return math.ceil(self.min), math.floor(self.max)
        return float(self.min), float(self.max)

    def mutate_with(self, target: Any, mutator: "Mutator") -> None:
        for entry in slots_of(target):
            value = entry.get()
            kind = self.kind_for(value)
            low, high = self.bounds_for(kind)
            stepped = uniform_step(value, low, high, kind, mutator.rate, mutator.rng)
            entry.set(store(value, stepped, kind))

    def crossover_with(self, left: Any, right: Any, crossover: "Crossover") -> None:
        swap_slots(left, right, crossover)

    @classmethod
    def from_range(cls, bounds: range) -> "Uniform":
        """Build from an inclusive-looking ``range(min, max + 1)``."""

        if bounds.step != 1 or len(bounds) == 0:
            raise ValueError("expected a non-empty range with step 1")
        return cls(bounds.start, bounds.stop - 1)
