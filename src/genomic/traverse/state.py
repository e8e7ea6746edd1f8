"""Crossover methods and the swap-decision state machines behind them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Union

import numpy as np

from ..chromosome.base import bernoulli, validate_rate

__all__ = [
    "CrossoverMethod",
    "UniformState",
    "KPointState",
    "FixedState",
    "CrossoverState",
    "state_for",
]

_METHODS = ("uniform", "k_point")


@dataclass(frozen=True)
class CrossoverMethod:
    """How the chromosomes of two individuals are mixed.

    ``uniform``
        Each leaf pair is swapped independently with probability ``rate / 2``;
        a rate of ``1.0`` swaps half of the chromosomes on average.
    ``k_point``
        The leaf sequence is cut at roughly ``k`` points and every other
        segment is swapped.
    """

    method: Literal["uniform", "k_point"]
    rate: float = 0.0
    k: int = 0

    def __post_init__(self) -> None:
        if self.method not in _METHODS:
            raise ValueError(f"unsupported crossover method '{self.method}'")
        if self.method == "uniform":
            object.__setattr__(self, "rate", validate_rate(self.rate))
        if int(self.k) < 0:
            raise ValueError(f"k must be non-negative (got {self.k})")
        object.__setattr__(self, "k", int(self.k))

    @classmethod
    def uniform(cls, rate: float) -> "CrossoverMethod":
        return cls("uniform", rate=rate)

    @classmethod
    def k_point(cls, k: int) -> "CrossoverMethod":
        return cls("k_point", k=k)

    @classmethod
    def from_config(cls, config: Mapping[str, Any] | None) -> "CrossoverMethod":
        cfg = dict(config or {})
        method = str(cfg.get("method", "uniform")).lower()
        if method in {"kpoint", "k-point"}:
            method = "k_point"
        if method == "uniform":
            return cls.uniform(float(cfg.get("rate", 1.0)))
        if method == "k_point":
            return cls.k_point(int(cfg.get("k", 1)))
        raise ValueError(f"unsupported crossover method '{method}'")

    def to_dict(self) -> dict[str, Any]:
        if self.method == "uniform":
            return {"method": self.method, "rate": self.rate}
        return {"method": self.method, "k": self.k}


@dataclass
class UniformState:
    rate: float

    def next_swap(self, rng: np.random.Generator) -> bool:
        return bernoulli(rng, self.rate / 2.0)


@dataclass
class KPointState:
    """Single-pass approximation of k-point crossover.

    Each visited leaf may open a new segment with probability
    ``(desired - swapped) / (length - count)``; a leaf is swapped while an odd
    number of segments has been opened. The probability reaches 1 when the
    remaining leaves are exactly enough for the missing transitions, which
    pushes the count towards ``desired``. Exactly ``desired`` transitions are
    not guaranteed.
    """

    length: int
    desired: int
    count: int = 0
    swapped: int = 0

    def next_swap(self, rng: np.random.Generator) -> bool:
        if self.count < self.length:
            remaining = self.length - self.count
            probability = min(max(self.desired - self.swapped, 0) / remaining, 1.0)
            if bernoulli(rng, probability):
                self.swapped += 1
            self.count += 1
        return self.swapped % 2 == 1


@dataclass(frozen=True)
class FixedState:
    """Decision shared by every leaf of a group."""

    outcome: bool

    def next_swap(self, rng: np.random.Generator) -> bool:
        return self.outcome


CrossoverState = Union[UniformState, KPointState, FixedState]


def state_for(method: CrossoverMethod, length: int) -> CrossoverState:
    if method.method == "uniform":
        return UniformState(method.rate)
    return KPointState(length=int(length), desired=method.k)
