from __future__ import annotations

import numpy as np

from genomic.traverse import Crossover, FixedState, Mutator
from genomic.wrapper import FixedBits, slot


def test_fixed_bits_wrapper_covers_signed_window(rng: np.random.Generator) -> None:
    holder = {"gene": 0}
    mutator = Mutator(1.0, rng)
    seen = set()
    for _ in range(500):
        mutator.wrap(FixedBits(3), slot(holder, "gene"))
        seen.add(holder["gene"])
    assert seen == set(range(-4, 4))
    assert isinstance(holder["gene"], int)


def test_unsigned_width_is_capped_to_the_dtype(rng: np.random.Generator) -> None:
    genes = [np.uint8(0)] * 4
    mutator = Mutator(1.0, rng)
    for _ in range(100):
        mutator.wrap(FixedBits(64), genes)
        assert all(isinstance(g, np.uint8) for g in genes)


def test_explicit_dtype_is_used_for_python_ints(rng: np.random.Generator) -> None:
    genes = [0, 0, 0]
    for _ in range(100):
        Mutator(1.0, rng).wrap(FixedBits(2, dtype=np.uint8), genes)
        assert all(0 <= g <= 3 for g in genes)


def test_rate_zero_keeps_value(rng: np.random.Generator) -> None:
    genes = [5, -2]
    Mutator(0.0, rng).wrap(FixedBits(4), genes)
    assert genes == [5, -2]


def test_fixed_bits_crossover_swaps_slots(rng: np.random.Generator) -> None:
    left, right = [1, 2], [3, 4]
    Crossover(rng, FixedState(True)).wrap(FixedBits(4), left, right)
    assert (left, right) == ([3, 4], [1, 2])


def test_single_bit_wrapper_toggles_between_zero_and_minus_one(
    rng: np.random.Generator,
) -> None:
    holder = {"gene": 0}
    mutator = Mutator(1.0, rng)
    seen = set()
    for _ in range(200):
        mutator.wrap(FixedBits(1), slot(holder, "gene"))
        seen.add(holder["gene"])
    assert seen == {-1, 0}
