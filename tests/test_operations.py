from __future__ import annotations

import logging
from collections import Counter

import numpy as np
import pytest

import genomic
from genomic import CrossoverMethod, UniformCh, crossover, mutate, reproduce, reproduce_from_config
from genomic.config.schemas import CrossoverConfig, ReproductionConfig
from genomic.utils.seed import hash_seed_from_config


def _leaves(individual: list[UniformCh]) -> list[int]:
    return [int(ch.value) for ch in individual]


def _population(start: int) -> list[UniformCh]:
    return [UniformCh(start + i, 0, 100) for i in range(10)]


def test_mutate_accepts_seeds_and_generators() -> None:
    first, second = _population(0), _population(0)
    mutate(first, 0.5, 11)
    mutate(second, 0.5, np.random.default_rng(11))
    assert _leaves(first) == _leaves(second)


def test_mutate_rejects_invalid_rate() -> None:
    with pytest.raises(ValueError):
        mutate(_population(0), 1.2, 0)


def test_uniform_zero_rate_crossover_keeps_parents(rng: np.random.Generator) -> None:
    left, right = _population(0), _population(50)
    crossover(left, right, CrossoverMethod.uniform(0.0), rng)
    assert _leaves(left) == list(range(10))
    assert _leaves(right) == list(range(50, 60))


def test_crossover_is_a_positional_exchange(rng: np.random.Generator) -> None:
    left, right = _population(0), _population(50)
    crossover(left, right, CrossoverMethod.uniform(1.0), rng)
    for i, (a, b) in enumerate(zip(_leaves(left), _leaves(right))):
        assert {a, b} == {i, 50 + i}


def test_size_mismatch_is_only_a_warning(
    rng: np.random.Generator, caplog: pytest.LogCaptureFixture
) -> None:
    left, right = _population(0), _population(50)[:4]
    with caplog.at_level(logging.WARNING, logger="genomic.operations"):
        crossover(left, right, CrossoverMethod.k_point(2), rng)
    assert any("differ in size" in record.getMessage() for record in caplog.records)
    assert _leaves(left)[4:] == list(range(4, 10))


def test_kpoint_progress_is_logged(
    rng: np.random.Generator, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.DEBUG, logger="genomic.operations"):
        crossover(_population(0), _population(50), CrossoverMethod.k_point(3), rng)
    assert any("transitions" in record.getMessage() for record in caplog.records)


def test_reproduce_preserves_the_parent_multiset_before_mutation(rng: np.random.Generator) -> None:
    left, right = _population(0), _population(50)
    first, second = reproduce(left, right, CrossoverMethod.k_point(2), 0.0, rng)
    assert Counter(_leaves(first) + _leaves(second)) == Counter(_leaves(left) + _leaves(right))
    assert _leaves(left) == list(range(10))
    assert first is not left and second is not right


def test_reproduce_is_reproducible_from_a_seed() -> None:
    runs = [
        reproduce(_population(0), _population(50), CrossoverMethod.uniform(1.0), 0.3, 99)
        for _ in range(2)
    ]
    assert [_leaves(c) for c in runs[0]] == [_leaves(c) for c in runs[1]]


def test_reproduce_children_get_independent_streams() -> None:
    left = [UniformCh(50, 0, 100) for _ in range(30)]
    first, second = reproduce(left, left, CrossoverMethod.uniform(0.0), 1.0, 5)
    assert _leaves(first) != _leaves(second)


def test_reproduce_from_config_uses_the_config_seed() -> None:
    config = ReproductionConfig(
        crossover=CrossoverConfig(method="k_point", k=1), mutation_rate=0.2, seed=3
    )
    a = reproduce_from_config(_population(0), _population(50), config)
    b = reproduce_from_config(_population(0), _population(50), config)
    assert [_leaves(c) for c in a] == [_leaves(c) for c in b]


def test_reproduce_from_config_hashes_a_seed_from_config_and_settings(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("GENOMIC_RANDOM_SEED", "17")
    genomic.config.reset_settings_cache()
    config = ReproductionConfig(mutation_rate=0.5)
    payload = config.model_dump(mode="json")
    payload["random_seed"] = 17
    expected_seed = hash_seed_from_config(payload)

    with caplog.at_level(logging.INFO, logger="genomic.operations"):
        a = reproduce_from_config(_population(0), _population(50), config)
    b = reproduce(
        _population(0), _population(50), CrossoverMethod.uniform(1.0), 0.5, expected_seed
    )
    assert [_leaves(c) for c in a] == [_leaves(c) for c in b]
    assert any(getattr(r, "seed", None) == expected_seed for r in caplog.records)


def test_configs_without_seed_draw_distinct_streams() -> None:
    first = reproduce_from_config(
        _population(0), _population(50), ReproductionConfig(mutation_rate=0.5)
    )
    second = reproduce_from_config(
        _population(0), _population(50), ReproductionConfig(mutation_rate=0.6)
    )
    assert [_leaves(c) for c in first] != [_leaves(c) for c in second]


def test_package_exports_version() -> None:
    assert genomic.__version__ == "0.1.0"
