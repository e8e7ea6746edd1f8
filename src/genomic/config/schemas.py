"""Pydantic schemas for reproduction configuration files.

A YAML file such as::

    crossover:
      method: k_point
      k: 2
    mutation_rate: 0.05
    seed: 7

validates against :class:`ReproductionConfig`.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from ..traverse.state import CrossoverMethod
from .constants import (
    DEFAULT_CROSSOVER_METHOD,
    DEFAULT_CROSSOVER_RATE,
    DEFAULT_K_POINTS,
    DEFAULT_MUTATION_RATE,
)

__all__ = ["CrossoverConfig", "ReproductionConfig"]


class CrossoverConfig(BaseModel):
    """Crossover method selection.

    Attributes
    ----------
    method : {"uniform", "k_point"}
        Swap-decision policy. ``"kpoint"`` and ``"k-point"`` are accepted.
    rate : float
        Uniform crossover rate in [0, 1]; ignored by ``k_point``.
    k : int
        Desired number of transition points; ignored by ``uniform``.
    """

    method: Literal["uniform", "k_point"] = Field(
        default=DEFAULT_CROSSOVER_METHOD, description="Swap-decision policy"
    )
    rate: float = Field(default=DEFAULT_CROSSOVER_RATE, ge=0, le=1, description="Uniform rate")
    k: int = Field(default=DEFAULT_K_POINTS, ge=0, description="Desired transition points")

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, v: Any) -> Any:
        if isinstance(v, str):
            lowered = v.strip().lower()
            if lowered in {"kpoint", "k-point"}:
                return "k_point"
            return lowered
        return v

    def to_method(self) -> CrossoverMethod:
        if self.method == "uniform":
            return CrossoverMethod.uniform(self.rate)
        return CrossoverMethod.k_point(self.k)


class ReproductionConfig(BaseModel):
    """Parameters of one :func:`genomic.reproduce` call."""

    crossover: CrossoverConfig = Field(default_factory=CrossoverConfig)
    mutation_rate: float = Field(
        default=DEFAULT_MUTATION_RATE, ge=0, le=1, description="Per-child mutation rate"
    )
    seed: int | None = Field(default=None, ge=0, description="Seed of the reproduction stream")
