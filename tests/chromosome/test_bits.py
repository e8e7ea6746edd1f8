from __future__ import annotations

import numpy as np
import pytest

from genomic.chromosome import BitsCh, BoolCh, UnitCh, flip_bits, flip_mask, validate_rate
from genomic.numeric import integer_kind


def test_rate_zero_leaves_bits_unchanged(rng: np.random.Generator) -> None:
    for dtype in (np.int8, np.uint16, np.int32, np.uint64):
        chromosome = BitsCh(5, dtype=dtype)
        for _ in range(50):
            chromosome.mutate(0.0, rng)
        assert int(chromosome) == 5


def test_full_rate_covers_the_whole_uint8_domain(rng: np.random.Generator) -> None:
    kind = integer_kind(np.uint8)
    seen = {flip_bits(0, kind, 1.0, rng) for _ in range(5000)}
    assert seen == set(range(256))


def test_signed_flip_stays_within_dtype(rng: np.random.Generator) -> None:
    kind = integer_kind(np.int8)
    values = [flip_bits(-128, kind, 1.0, rng) for _ in range(2000)]
    assert min(values) >= -128
    assert max(values) <= 127
    assert any(v < 0 for v in values) and any(v > 0 for v in values)


def test_mutated_value_keeps_its_dtype(rng: np.random.Generator) -> None:
    chromosome = BitsCh(3, dtype=np.int16)
    chromosome.mutate(1.0, rng)
    assert isinstance(chromosome.value, np.int16)


def test_python_int_defaults_to_int64() -> None:
    assert BitsCh(7).kind.dtype == np.dtype(np.int64)


def test_flip_mask_probability_matches_half_rate(rng: np.random.Generator) -> None:
    ones = sum(bin(flip_mask(64, 0.5, rng)).count("1") for _ in range(400))
    # Each bit flips with probability 0.25.
    assert 0.2 < ones / (64 * 400) < 0.3


@pytest.mark.parametrize("rate", [-0.1, 1.5, float("nan")])
def test_rate_outside_unit_interval_is_rejected(rate: float, rng: np.random.Generator) -> None:
    with pytest.raises(ValueError):
        validate_rate(rate)
    with pytest.raises(ValueError):
        BitsCh(1).mutate(rate, rng)


def test_swap_exchanges_state_and_rejects_other_types() -> None:
    left, right = BitsCh(1, dtype=np.int8), BitsCh(2, dtype=np.int8)
    left.swap(right)
    assert (int(left), int(right)) == (2, 1)
    with pytest.raises(TypeError):
        left.swap(BoolCh(True))


def test_bool_and_unit_chromosomes(rng: np.random.Generator) -> None:
    flag = BoolCh(True)
    flag.mutate(0.0, rng)
    assert flag.value is True

    flips = 0
    for _ in range(1000):
        before = flag.value
        flag.mutate(1.0, rng)
        flips += flag.value != before
    assert 400 < flips < 600

    unit = UnitCh()
    unit.mutate(1.0, rng)
    assert unit == UnitCh()
    assert unit.size_hint() == 1
