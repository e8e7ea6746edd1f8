"""Crossover session threaded through two parallel genome traversals."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator

import numpy as np

from ..chromosome.base import Chromosome
from ..genome import crossover_genome
from .state import CrossoverMethod, CrossoverState, FixedState, state_for

if TYPE_CHECKING:
    from ..wrapper.base import CrossoverWrapper

__all__ = ["Crossover"]


class Crossover:
    """Carries the RNG stream and the swap-decision state through one crossover call.

    Each leaf pair visited consumes one decision from the state; the pair is
    exchanged when the decision is ``True``.
    """

    def __init__(self, rng: np.random.Generator, state: CrossoverState) -> None:
        self._rng = rng
        self._state = state

    @classmethod
    def for_method(
        cls, method: CrossoverMethod, length: int, rng: np.random.Generator
    ) -> "Crossover":
        return cls(rng, state_for(method, length))

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    @property
    def state(self) -> CrossoverState:
        return self._state

    def should_swap(self) -> bool:
        return self._state.next_swap(self._rng)

    def chromosome(self, left: Chromosome, right: Chromosome) -> "Crossover":
        if self.should_swap():
            left.swap(right)
        return self

    def genome(self, left: Any, right: Any) -> "Crossover":
        crossover_genome(left, right, self)
        return self

    def iter(self, lefts: Iterable[Any], rights: Iterable[Any]) -> "Crossover":
        """Pair sub-genomes by position; the longer side's extra items are left untouched."""

        for left, right in zip(lefts, rights):
            crossover_genome(left, right, self)
        return self

    def wrap(self, wrapper: "CrossoverWrapper", left: Any, right: Any) -> "Crossover":
        wrapper.crossover_with(left, right, self)
        return self

    @contextmanager
    def grouped(self) -> Iterator["Crossover"]:
        """Scope whose leaves are all swapped, or all kept, as a single unit.

        The decision is drawn from this session when the scope opens, so the
        enclosing bookkeeping advances by exactly one step whatever happens
        inside. The nested session shares the RNG stream.
        """

        nested = Crossover(self._rng, FixedState(self.should_swap()))
        yield nested

    def group(self, callback: Callable[["Crossover"], Any]) -> "Crossover":
        with self.grouped() as grouped:
            callback(grouped)
        return self

    def __repr__(self) -> str:
        return f"Crossover(state={self._state!r})"
