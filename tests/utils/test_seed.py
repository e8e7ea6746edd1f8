from __future__ import annotations

import logging

import numpy as np
import pytest

from genomic.utils import seed as seed_utils


def test_rng_factory_is_repeatable_and_normalises_seeds() -> None:
    a = seed_utils.rng_factory(123).integers(0, 1_000_000, size=5)
    b = seed_utils.rng_factory(123).integers(0, 1_000_000, size=5)
    assert a.tolist() == b.tolist()

    big = seed_utils.rng_factory(123 + seed_utils.MAX_SEED_VALUE).integers(0, 1_000_000, size=5)
    assert big.tolist() == a.tolist()
    assert seed_utils.normalize_seed(-5) == 5


def test_as_generator_passes_generators_through() -> None:
    rng = np.random.default_rng(0)
    assert seed_utils.as_generator(rng) is rng
    assert isinstance(seed_utils.as_generator(None), np.random.Generator)
    assert isinstance(seed_utils.as_generator(np.int32(4)), np.random.Generator)
    with pytest.raises(TypeError):
        seed_utils.as_generator("seed")


def test_spawn_rngs_gives_distinct_streams() -> None:
    first, second = seed_utils.spawn_rngs(np.random.default_rng(8), 2)
    assert first.random() != second.random()

    again = seed_utils.spawn_rngs(np.random.default_rng(8), 2)
    replay = seed_utils.spawn_rngs(np.random.default_rng(8), 2)
    assert again[0].random() == replay[0].random()
    with pytest.raises(ValueError):
        seed_utils.spawn_rngs(np.random.default_rng(8), -1)


def test_hash_seed_from_config_is_order_independent() -> None:
    a = seed_utils.hash_seed_from_config({"rate": 0.1, "method": "uniform"})
    b = seed_utils.hash_seed_from_config({"method": "uniform", "rate": 0.1})
    assert a == b
    assert 0 <= a < seed_utils.MAX_SEED_VALUE
    assert a != seed_utils.hash_seed_from_config({"method": "k_point"})


def test_register_seed_logging(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("genomic.tests.seed")
    with caplog.at_level(logging.INFO, logger="genomic.tests.seed"):
        seed_utils.register_seed_logging(logger, 42)
    assert caplog.records[-1].seed == 42
    assert "42" in caplog.records[-1].getMessage()
