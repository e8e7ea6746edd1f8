"""Deterministic RNG stream management.

Every operation in :mod:`genomic` draws from an explicit
:class:`numpy.random.Generator`. The helpers here build those streams from
seeds, derive independent child streams and record the seed in use.
"""

from __future__ import annotations

import hashlib
import json
import logging
from typing import Any, Dict, List, Optional, Union

import numpy as np

__all__ = [
    "MAX_SEED_VALUE",
    "RngLike",
    "as_generator",
    "hash_seed_from_config",
    "normalize_seed",
    "register_seed_logging",
    "rng_factory",
    "spawn_rngs",
]

# Seeds are normalised into [0, 2**32 - 1]
MAX_SEED_VALUE = 2**32

RngLike = Union[np.random.Generator, int, None]


def normalize_seed(seed: int) -> int:
    return abs(int(seed)) % MAX_SEED_VALUE


def rng_factory(seed: Optional[int] = None) -> np.random.Generator:
    """Return an isolated generator; ``None`` gives a non-deterministic stream."""

    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(normalize_seed(seed))


def as_generator(rng: RngLike) -> np.random.Generator:
    """Accept a generator, an integer seed or ``None`` and return a generator.

    A generator is returned as is, so the caller's stream keeps advancing.
    """

    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None or isinstance(rng, (int, np.integer)):
        return rng_factory(None if rng is None else int(rng))
    raise TypeError(f"expected a numpy Generator, an int seed or None (got {type(rng).__name__})")


def spawn_rngs(rng: np.random.Generator, n: int) -> List[np.random.Generator]:
    """Derive ``n`` child streams independent of each other and of ``rng``."""

    if n < 0:
        raise ValueError(f"cannot spawn a negative number of streams (got {n})")
    return list(rng.spawn(n))


def hash_seed_from_config(config: Dict[str, Any]) -> int:
    """Derive a 32-bit seed from the SHA-256 of the key-sorted JSON of ``config``."""

    config_str = json.dumps(config, sort_keys=True, default=str)
    hasher = hashlib.sha256(config_str.encode("utf-8"))
    return int(hasher.hexdigest(), 16) % MAX_SEED_VALUE


def register_seed_logging(logger: logging.Logger, seed: int) -> None:
    logger.info("Using random seed: %s", seed, extra={"seed": seed})
