"""Top-level entry points: mutate, cross over and reproduce individuals."""

from __future__ import annotations

import copy
import logging
from typing import Any, Tuple, TypeVar

from .config.schemas import ReproductionConfig
from .config.settings import get_settings
from .genome import size_hint
from .traverse.crossover import Crossover
from .traverse.mutator import Mutator
from .traverse.state import CrossoverMethod, KPointState
from .utils.seed import (
    RngLike,
    as_generator,
    hash_seed_from_config,
    register_seed_logging,
    rng_factory,
    spawn_rngs,
)

__all__ = ["mutate", "crossover", "reproduce", "reproduce_from_config"]

logger = logging.getLogger(__name__)

G = TypeVar("G")


def mutate(individual: Any, rate: float, rng: RngLike = None) -> None:
    """Mutate ``individual`` in place.

    Parameters
    ----------
    individual:
        Any genome: a chromosome, a container of genomes or an object
        implementing :class:`~genomic.genome.Genome`.
    rate:
        Mutation rate in ``[0, 1]``; ``0`` leaves every value unchanged.
    rng:
        A ``numpy.random.Generator``, an integer seed or ``None``.
    """

    mutator = Mutator(rate, as_generator(rng))
    logger.debug("Mutating %s with rate %.4f", type(individual).__name__, mutator.rate)
    mutator.genome(individual)


def crossover(left: Any, right: Any, method: CrossoverMethod, rng: RngLike = None) -> None:
    """Exchange chromosomes between ``left`` and ``right`` in place.

    Both individuals should report the same :func:`~genomic.genome.size_hint`.
    A mismatch is logged and the traversal still runs, pairing leaves by
    position; the result is then unspecified.
    """

    length = size_hint(left)
    other = size_hint(right)
    if length != other:
        logger.warning(
            "Crossover partners differ in size (%d vs %d); results are unspecified",
            length,
            other,
            extra={"left_size": length, "right_size": other},
        )

    session = Crossover.for_method(method, length, as_generator(rng))
    logger.debug("Crossing over %d units with %s", length, method)
    session.genome(left, right)

    state = session.state
    if isinstance(state, KPointState):
        logger.debug(
            "K-point crossover reached %d of %d transitions", state.swapped, state.desired
        )


def reproduce(
    left: G,
    right: G,
    method: CrossoverMethod,
    mutation_rate: float,
    rng: RngLike = None,
) -> Tuple[G, G]:
    """Create two children from two parents.

    The parents are deep-copied and left untouched. The copies are crossed
    over with ``rng``; each child is then mutated with its own stream spawned
    from ``rng``, so one child's mutation never shifts the other's.
    """

    generator = as_generator(rng)
    first = copy.deepcopy(left)
    second = copy.deepcopy(right)

    crossover(first, second, method, generator)

    first_rng, second_rng = spawn_rngs(generator, 2)
    mutate(first, mutation_rate, first_rng)
    mutate(second, mutation_rate, second_rng)
    return first, second


def reproduce_from_config(
    left: G, right: G, config: ReproductionConfig, rng: RngLike = None
) -> Tuple[G, G]:
    """:func:`reproduce` driven by a :class:`~genomic.config.ReproductionConfig`.

    Without ``rng`` the stream is seeded from ``config.seed``. A config without
    a seed gets one hashed from its own contents and ``Settings.random_seed``,
    so distinct configurations draw distinct streams.
    """

    if rng is None:
        seed = config.seed
        if seed is None:
            payload = config.model_dump(mode="json")
            payload["random_seed"] = get_settings().random_seed
            seed = hash_seed_from_config(payload)
        register_seed_logging(logger, seed)
        rng = rng_factory(seed)
    return reproduce(left, right, config.crossover.to_method(), config.mutation_rate, rng)
