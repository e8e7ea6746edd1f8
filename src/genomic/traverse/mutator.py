"""Mutation session threaded through a genome traversal."""

from __future__ import annotations

import math
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator

import numpy as np

from ..chromosome.base import Chromosome, validate_rate
from ..genome import mutate_genome

if TYPE_CHECKING:
    from ..wrapper.base import MutationWrapper

__all__ = ["Mutator"]


class Mutator:
    """Carries the mutation rate and the RNG stream through one mutate call.

    Every chaining method returns the session so that genome implementations
    can read like a declaration::

        mutator.chromosome(self.left).genome(self.children)
    """

    def __init__(self, rate: float, rng: np.random.Generator) -> None:
        self._rate = validate_rate(rate)
        self._rng = rng

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    def chromosome(self, chromosome: Chromosome) -> "Mutator":
        chromosome.mutate(self._rate, self._rng)
        return self

    def genome(self, genome: Any) -> "Mutator":
        mutate_genome(genome, self)
        return self

    def iter(self, genomes: Iterable[Any]) -> "Mutator":
        for genome in genomes:
            mutate_genome(genome, self)
        return self

    def wrap(self, wrapper: "MutationWrapper", target: Any) -> "Mutator":
        """Mutate ``target`` with the semantics of ``wrapper`` instead of its own."""

        wrapper.mutate_with(target, self)
        return self

    @contextmanager
    def scaled(self, factor: float) -> Iterator["Mutator"]:
        """Scope in which the rate is multiplied by ``factor`` (clamped to ``[0, 1]``)."""

        factor = float(factor)
        if math.isnan(factor):
            raise ValueError("rate factor must be a number")
        previous = self._rate
        self._rate = min(max(previous * factor, 0.0), 1.0)
        try:
            yield self
        finally:
            self._rate = previous

    def multiply_rate(self, factor: float, callback: Callable[["Mutator"], Any]) -> "Mutator":
        with self.scaled(factor) as scaled:
            callback(scaled)
        return self

    @contextmanager
    def grouped(self) -> Iterator["Mutator"]:
        """Counterpart of :meth:`Crossover.grouped`.

        Mutation needs no coordination between leaves, so the scope is the
        session itself. Whatever is mutated inside should count as one unit in
        the genome's ``size_hint``.
        """

        yield self

    def group(self, callback: Callable[["Mutator"], Any]) -> "Mutator":
        with self.grouped() as grouped:
            callback(grouped)
        return self

    def __repr__(self) -> str:
        return f"Mutator(rate={self._rate})"
