"""Defaults shared by the configuration layer and the operations."""

from __future__ import annotations

from typing import Final

__all__ = [
    "DEFAULT_CROSSOVER_METHOD",
    "DEFAULT_CROSSOVER_RATE",
    "DEFAULT_K_POINTS",
    "DEFAULT_MUTATION_RATE",
    "DEFAULT_RANDOM_SEED",
    "LOG_FILE_NAME",
]


DEFAULT_CROSSOVER_METHOD: Final[str] = "uniform"

DEFAULT_CROSSOVER_RATE: Final[float] = 1.0
"""Uniform crossover rate; 1.0 swaps each leaf pair with probability 1/2."""

DEFAULT_K_POINTS: Final[int] = 1

DEFAULT_MUTATION_RATE: Final[float] = 0.01

DEFAULT_RANDOM_SEED: Final[int] = 42

LOG_FILE_NAME: Final[str] = "genomic.log"

