"""Shared helpers."""

from .seed import (
    MAX_SEED_VALUE,
    RngLike,
    as_generator,
    hash_seed_from_config,
    normalize_seed,
    register_seed_logging,
    rng_factory,
    spawn_rngs,
)

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
