"""Composable mutation and crossover for evolutionary-algorithm individuals.

An individual is built from leaf chromosomes (:class:`BitsCh`,
:class:`FixedBitsCh`, :class:`UniformCh`, ...) nested in lists, tuples,
dicts, dataclasses or user types implementing :class:`Genome`. The top-level
operations walk that structure with a :class:`Mutator` or :class:`Crossover`
session::

    import numpy as np
    import genomic

    rng = np.random.default_rng(7)
    parent_a = [genomic.UniformCh(0, -10, 10) for _ in range(8)]
    parent_b = [genomic.UniformCh(5, -10, 10) for _ in range(8)]
    child_a, child_b = genomic.reproduce(
        parent_a, parent_b, genomic.CrossoverMethod.k_point(2), 0.1, rng
    )
"""

from .chromosome import (
    BitsCh,
    BoolCh,
    Chromosome,
    FixedBitsCh,
    UniformCh,
    UnitCh,
    flip_bits,
    flip_fixed_bits,
    uniform_float,
    uniform_int,
)
from .genome import Genome, crossover_genome, mutate_genome, size_hint
from .operations import crossover, mutate, reproduce, reproduce_from_config
from .slots import Slot, slot, slots_of
from .traverse import Crossover, CrossoverMethod, Mutator
from .wrapper import CrossoverWrapper, FixedBits, MutationWrapper, Reorder, Uniform

__version__ = "0.1.0"

__all__ = [
    "BitsCh",
    "BoolCh",
    "Chromosome",
    "Crossover",
    "CrossoverMethod",
    "CrossoverWrapper",
    "FixedBits",
    "FixedBitsCh",
    "Genome",
    "MutationWrapper",
    "Mutator",
    "Reorder",
    "Slot",
    "Uniform",
    "UniformCh",
    "UnitCh",
    "__version__",
    "crossover",
    "crossover_genome",
    "flip_bits",
    "flip_fixed_bits",
    "mutate",
    "mutate_genome",
    "reproduce",
    "reproduce_from_config",
    "size_hint",
    "slot",
    "slots_of",
    "uniform_float",
    "uniform_int",
]
