"""Scalar mutation operators and the leaf chromosome types built on them."""

from .base import BoolCh, Chromosome, UnitCh, bernoulli, flip_bool, validate_rate
from .bits import BitsCh, flip_bits, flip_mask
from .fixed import FixedBitsCh, flip_fixed_bits, signed_window, validate_bits
from .uniform import (
    UniformCh,
    uniform_float,
    uniform_float_window,
    uniform_int,
    uniform_int_window,
    uniform_step,
)

__all__ = [
    "Chromosome",
    "BitsCh",
    "BoolCh",
    "FixedBitsCh",
    "UniformCh",
    "UnitCh",
    "bernoulli",
    "flip_bits",
    "flip_bool",
    "flip_fixed_bits",
    "flip_mask",
    "signed_window",
    "uniform_float",
    "uniform_float_window",
    "uniform_int",
    "uniform_int_window",
    "uniform_step",
    "validate_bits",
    "validate_rate",
]
