"""Genome capability and the built-in container adapters.

A genome is any tree of chromosomes. User types take part by implementing the
:class:`Genome` protocol, i.e. by walking their own fields with the
:class:`~genomic.traverse.Mutator` and :class:`~genomic.traverse.Crossover`
sessions. The usual Python containers are handled here directly:

* :class:`~genomic.chromosome.Chromosome` leaves count for one unit;
* lists (any mutable sequence), tuples, dicts and dataclass instances are
  walked in order and sum the ``size_hint`` of their members;
* integer or bool ``numpy`` arrays count one bit-flip chromosome per element;
* plain ints and bools stored *inside* a mutable container or dataclass field
  are bit-flip chromosomes of their (inferred) dtype, rewritten in their slot.

Neither operation may add or remove members, otherwise ``size_hint`` no longer
describes the traversal and k-point crossover loses its guarantees.
"""

from __future__ import annotations

import dataclasses
from collections.abc import MutableMapping, MutableSequence
from functools import singledispatch
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np

from .chromosome.base import Chromosome, flip_bool
from .chromosome.bits import flip_bits
from .numeric import (
    integer_kind,
    is_raw_bool,
    is_raw_float,
    is_raw_integer,
    like,
    resolve_dtype,
)
from .slots import Slot

if TYPE_CHECKING:
    from .traverse.crossover import Crossover
    from .traverse.mutator import Mutator

__all__ = [
    "Genome",
    "mutate_genome",
    "crossover_genome",
    "size_hint",
    "is_scalar",
]


@runtime_checkable
class Genome(Protocol):
    """Protocol for user-defined individuals.

    ``mutate`` and ``crossover`` should visit the same members in the same
    order, and ``size_hint`` should return how many chromosome units they
    visit (a group counts as one).
    """

    def mutate(self, mutator: "Mutator") -> None:
        ...

    def crossover(self, other: Any, crossover: "Crossover") -> None:
        ...

    def size_hint(self) -> int:
        ...


def is_scalar(value: Any) -> bool:
    return is_raw_bool(value) or is_raw_integer(value) or is_raw_float(value)


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _genome_fields(value: Any) -> list[dataclasses.Field]:
    return [f for f in dataclasses.fields(value) if f.metadata.get("genome", True)]


def _unsupported(value: Any) -> TypeError:
    return TypeError(f"{type(value).__name__} is not a genome")


# Mutation ------------------------------------------------------------------


def _mutate_slot(target: Slot, mutator: "Mutator") -> None:
    value = target.get()
    if is_raw_bool(value):
        target.set(like(value, flip_bool(bool(value), mutator.rate, mutator.rng)))
    elif is_raw_integer(value):
        kind = integer_kind(resolve_dtype(value))
        target.set(like(value, flip_bits(int(value), kind, mutator.rate, mutator.rng), kind))
    elif is_raw_float(value):
        raise TypeError(
            "floating point values have no bit-flip encoding; "
            "use UniformCh or the Uniform wrapper"
        )
    else:
        mutate_genome(value, mutator)


@singledispatch
def mutate_genome(genome: Any, mutator: "Mutator") -> None:
    """Mutate ``genome`` in place with the session ``mutator``."""

    if isinstance(genome, Genome):
        genome.mutate(mutator)
    elif _is_dataclass_instance(genome):
        for f in _genome_fields(genome):
            _mutate_slot(Slot.attr(genome, f.name), mutator)
    elif is_scalar(genome):
        raise TypeError(
            "a bare scalar cannot be mutated in place; "
            "store it in a list, dict or dataclass field, or use a Chromosome"
        )
    else:
        raise _unsupported(genome)


@mutate_genome.register(Chromosome)
def _(genome: Chromosome, mutator: "Mutator") -> None:
    mutator.chromosome(genome)


@mutate_genome.register(MutableSequence)
def _(genome: MutableSequence, mutator: "Mutator") -> None:
    for index in range(len(genome)):
        _mutate_slot(Slot.item(genome, index), mutator)


@mutate_genome.register(tuple)
def _(genome: tuple, mutator: "Mutator") -> None:
    for member in genome:
        if is_scalar(member):
            raise TypeError("tuple members must be mutable genomes, not bare scalars")
        mutate_genome(member, mutator)


@mutate_genome.register(MutableMapping)
def _(genome: MutableMapping, mutator: "Mutator") -> None:
    for key in list(genome):
        _mutate_slot(Slot.item(genome, key), mutator)


@mutate_genome.register(np.ndarray)
def _(genome: np.ndarray, mutator: "Mutator") -> None:
    if genome.size == 0:
        return
    probability = mutator.rate / 2.0
    if genome.dtype == np.bool_:
        flips = mutator.rng.random(genome.shape) < probability
        np.logical_xor(genome, flips, out=genome)
        return
    if genome.dtype.kind not in "iu":
        raise TypeError(f"arrays of dtype '{genome.dtype}' have no bit-flip encoding")

    kind = integer_kind(genome.dtype)
    flips = mutator.rng.random(genome.shape + (kind.bits,)) < probability
    weights = np.left_shift(np.uint64(1), np.arange(kind.bits, dtype=np.uint64))
    masks = (flips * weights).sum(axis=-1, dtype=np.uint64).astype(kind.unsigned_dtype)
    view = genome.view(kind.unsigned_dtype)
    np.bitwise_xor(view, masks, out=view)


# Crossover -----------------------------------------------------------------


def _crossover_slots(left: Slot, right: Slot, crossover: "Crossover") -> None:
    left_value, right_value = left.get(), right.get()
    left_scalar, right_scalar = is_scalar(left_value), is_scalar(right_value)
    if left_scalar and right_scalar:
        if crossover.should_swap():
            left.swap(right)
    elif left_scalar or right_scalar:
        raise TypeError(
            f"cannot cross {type(left_value).__name__} with {type(right_value).__name__}"
        )
    else:
        crossover_genome(left_value, right_value, crossover)


@singledispatch
def crossover_genome(left: Any, right: Any, crossover: "Crossover") -> None:
    """Exchange chromosomes between ``left`` and ``right`` in place."""

    if isinstance(left, Genome):
        left.crossover(right, crossover)
    elif _is_dataclass_instance(left):
        for f in _genome_fields(left):
            _crossover_slots(Slot.attr(left, f.name), Slot.attr(right, f.name), crossover)
    else:
        raise _unsupported(left)


@crossover_genome.register(Chromosome)
def _(left: Chromosome, right: Any, crossover: "Crossover") -> None:
    crossover.chromosome(left, right)


@crossover_genome.register(MutableSequence)
def _(left: MutableSequence, right: Any, crossover: "Crossover") -> None:
    for index in range(min(len(left), len(right))):
        _crossover_slots(Slot.item(left, index), Slot.item(right, index), crossover)


@crossover_genome.register(tuple)
def _(left: tuple, right: Any, crossover: "Crossover") -> None:
    for left_member, right_member in zip(left, right):
        if is_scalar(left_member) or is_scalar(right_member):
            raise TypeError("tuple members must be mutable genomes, not bare scalars")
        crossover_genome(left_member, right_member, crossover)


@crossover_genome.register(MutableMapping)
def _(left: MutableMapping, right: Any, crossover: "Crossover") -> None:
    for key in list(left):
        if key in right:
            _crossover_slots(Slot.item(left, key), Slot.item(right, key), crossover)


@crossover_genome.register(np.ndarray)
def _(left: np.ndarray, right: Any, crossover: "Crossover") -> None:
    if not isinstance(right, np.ndarray) or left.shape != right.shape:
        raise ValueError("array genomes must share the same shape")
    decisions = np.fromiter(
        (crossover.should_swap() for _ in range(left.size)), dtype=bool, count=left.size
    ).reshape(left.shape)
    if decisions.any():
        held = left[decisions]
        left[decisions] = right[decisions]
        right[decisions] = held


# Size ----------------------------------------------------------------------


@singledispatch
def size_hint(genome: Any) -> int:
    """Number of independent chromosome units in ``genome``."""

    if isinstance(genome, Genome):
        return int(genome.size_hint())
    if _is_dataclass_instance(genome):
        return sum(size_hint(getattr(genome, f.name)) for f in _genome_fields(genome))
    if is_scalar(genome):
        return 1
    raise _unsupported(genome)


@size_hint.register(Chromosome)
def _(genome: Chromosome) -> int:
    return genome.size_hint()


@size_hint.register(MutableSequence)
def _(genome: MutableSequence) -> int:
    return sum(size_hint(member) for member in genome)


@size_hint.register(tuple)
def _(genome: tuple) -> int:
    return sum(size_hint(member) for member in genome)


@size_hint.register(MutableMapping)
def _(genome: MutableMapping) -> int:
    return sum(size_hint(member) for member in genome.values())


@size_hint.register(np.ndarray)
def _(genome: np.ndarray) -> int:
    return int(genome.size)
