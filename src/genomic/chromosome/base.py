"""Chromosome contract shared by every scalar leaf."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

import numpy as np

__all__ = [
    "Chromosome",
    "BoolCh",
    "UnitCh",
    "validate_rate",
    "bernoulli",
    "flip_bool",
]


def validate_rate(rate: float) -> float:
    """Return ``rate`` as a float, rejecting anything outside ``[0, 1]``."""

    rate = float(rate)
    if math.isnan(rate) or not 0.0 <= rate <= 1.0:
        raise ValueError(f"rate must be within [0, 1] (got {rate})")
    return rate


def bernoulli(rng: np.random.Generator, probability: float) -> bool:
    return bool(rng.random() < probability)


def flip_bool(value: bool, rate: float, rng: np.random.Generator) -> bool:
    rate = validate_rate(rate)
    if bernoulli(rng, rate / 2.0):
        return not value
    return bool(value)


class Chromosome(ABC):
    """A single mutable scalar unit of genetic encoding.

    ``mutate`` perturbs the chromosome in place. A ``rate`` of ``1.0`` means the
    chromosome should take a fully random value, ``0.0`` means it must not
    change.
    """

    @abstractmethod
    def mutate(self, rate: float, rng: np.random.Generator) -> None:
        ...

    def swap(self, other: "Chromosome") -> None:
        """Exchange the whole state of two leaves of the same type."""

        if type(self) is not type(other):
            raise TypeError(
                f"cannot swap {type(self).__name__} with {type(other).__name__}"
            )
        self.__dict__, other.__dict__ = other.__dict__, self.__dict__

    def size_hint(self) -> int:
        return 1


class BoolCh(Chromosome):
    """A boolean flipped with probability ``rate / 2``."""

    def __init__(self, value: bool = False) -> None:
        self.value = bool(value)

    def mutate(self, rate: float, rng: np.random.Generator) -> None:
        self.value = flip_bool(self.value, rate, rng)

    def __bool__(self) -> bool:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoolCh):
            return self.value == other.value
        return NotImplemented

    def __repr__(self) -> str:
        return f"BoolCh({self.value!r})"


class UnitCh(Chromosome):
    """Placeholder leaf that never changes."""

    def mutate(self, rate: float, rng: np.random.Generator) -> None:
        validate_rate(rate)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitCh)

    def __repr__(self) -> str:
        return "UnitCh()"
