"""Traversal sessions used by genome implementations."""

from .crossover import Crossover
from .mutator import Mutator
from .state import (
    CrossoverMethod,
    CrossoverState,
    FixedState,
    KPointState,
    UniformState,
    state_for,
)

__all__ = [
    "Crossover",
    "CrossoverMethod",
    "CrossoverState",
    "FixedState",
    "KPointState",
    "Mutator",
    "UniformState",
    "state_for",
]
