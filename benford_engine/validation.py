"""Precondition checks shared by the model, the builder and the statistics."""

from __future__ import annotations

import numbers
from typing import Sequence

from benford_engine.exceptions import DistributionLengthError, InvalidBaseError

MIN_BASE = 3


def validate_base(base: int) -> int:
    """Return ``base`` as an int, raising when it is not an integer >= 3.

    Base 2 has a single non-zero digit, so its leading-digit distribution is degenerate.
    """
    if isinstance(base, bool) or not isinstance(base, numbers.Integral):
        raise InvalidBaseError(f"base must be an integer, got {base!r}")
    if base < MIN_BASE:
        raise InvalidBaseError(f"base must be >= {MIN_BASE}, got {base}")
    return int(base)


def ensure_same_length(ideal: Sequence[float], realized: Sequence[float]) -> None:
    """Raise when an ideal PDF and a realized distribution have different lengths."""
    if len(ideal) != len(realized):
        raise DistributionLengthError(
            f"length mismatch: ideal PDF has {len(ideal)} bins, realized distribution has {len(realized)}"
        )


__all__ = ["MIN_BASE", "ensure_same_length", "validate_base"]
