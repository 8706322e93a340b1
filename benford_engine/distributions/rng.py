"""Randomness source resolution for sampling."""

from __future__ import annotations

import numbers
from typing import Union

import numpy as np
from numpy.random import PCG64, Generator

RandomSource = Union[Generator, int, None]

# Process-wide fallback. numpy bit generators guard each draw with a lock, so
# concurrent callers sharing it see a consistent state; pass a seed or a
# Generator for a reproducible stream.
_DEFAULT_RNG: Generator = np.random.default_rng()


def default_rng() -> Generator:
    return _DEFAULT_RNG


def seed_default_rng(seed: int) -> None:
    """Reset the process-wide generator to a fixed seed."""
    global _DEFAULT_RNG
    _DEFAULT_RNG = Generator(PCG64(seed))


def resolve_rng(rng: RandomSource = None, fallback: Generator | None = None) -> Generator:
    """Turn a Generator, an int seed or ``None`` into a Generator.

    ``None`` selects ``fallback`` when given, else the process-wide generator.
    """
    if rng is None:
        return fallback if fallback is not None else _DEFAULT_RNG
    if isinstance(rng, Generator):
        return rng
    if isinstance(rng, numbers.Integral) and not isinstance(rng, bool):
        return Generator(PCG64(int(rng)))
    raise TypeError(f"rng must be a numpy Generator, an int seed or None, got {type(rng).__name__}")


__all__ = ["RandomSource", "default_rng", "resolve_rng", "seed_default_rng"]
