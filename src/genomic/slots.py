"""Mutable references into containers and objects.

A :class:`Slot` names one storage location (an item of a mapping/sequence or an
attribute of an object) so that immutable scalars stored there can be replaced
in place by mutation and exchanged by crossover.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any, Iterable

__all__ = ["Slot", "slot", "slots_of"]


@dataclass(frozen=True)
class Slot:
    owner: Any
    key: Any
    attribute: bool = False

    @classmethod
    def item(cls, owner: Any, key: Any) -> "Slot":
        return cls(owner, key, attribute=False)

    @classmethod
    def attr(cls, owner: Any, name: str) -> "Slot":
        return cls(owner, name, attribute=True)

    def get(self) -> Any:
        if self.attribute:
            return getattr(self.owner, self.key)
        return self.owner[self.key]

    def set(self, value: Any) -> None:
        if self.attribute:
            # Frozen dataclasses are genomes too; their fields are still slots.
            object.__setattr__(self.owner, self.key, value)
        else:
            self.owner[self.key] = value

    def swap(self, other: "Slot") -> None:
        mine, theirs = self.get(), other.get()
        self.set(theirs)
        other.set(mine)


def slot(owner: Any, key: Any) -> Slot:
    """Build a slot, using item access for mappings and sequences, attributes otherwise."""

    if isinstance(owner, (Mapping, Sequence)) and not isinstance(owner, (str, bytes)):
        return Slot.item(owner, key)
    if not isinstance(key, str):
        raise TypeError(f"attribute slots need a string name (got {key!r})")
    return Slot.attr(owner, key)


def slots_of(target: Any) -> list[Slot]:
    """Expand a list, the values of a dict, or an iterable of slots into slots."""

    if isinstance(target, MutableMapping):
        return [Slot.item(target, key) for key in list(target)]
    if isinstance(target, Slot):
        return [target]
    if isinstance(target, MutableSequence):
        if target and all(isinstance(entry, Slot) for entry in target):
            return list(target)
        return [Slot.item(target, index) for index in range(len(target))]
    collected = list(_as_iterable(target))
    for entry in collected:
        if not isinstance(entry, Slot):
            raise TypeError(
                f"expected a list, a dict or an iterable of Slot (got {type(entry).__name__})"
            )
    return collected


def _as_iterable(target: Any) -> Iterable[Any]:
    if isinstance(target, (str, bytes)) or not isinstance(target, Iterable):
        raise TypeError(f"cannot take slots of {type(target).__name__}")
    return target
