"""Adapters that override how a value is mutated or crossed over."""

from ..slots import Slot, slot, slots_of
from .base import CrossoverWrapper, MutationWrapper, store, swap_slots
from .fixed import FixedBits
from .reorder import Reorder
from .uniform import Uniform

__all__ = [
    "CrossoverWrapper",
    "FixedBits",
    "MutationWrapper",
    "Reorder",
    "Slot",
    "Uniform",
    "slot",
    "slots_of",
    "store",
    "swap_slots",
]
