"""Empirical first-digit distributions built from raw samples."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

import numpy as np
import pandas as pd

from benford_engine.digits.extract import lead_digits
from benford_engine.exceptions import NoValidSamplesError
from benford_engine.utils.logging import get_logger
from benford_engine.validation import validate_base

log = get_logger(__name__, component="empirical")


@dataclass(frozen=True)
class EmpiricalDistribution:
    """Relative frequency of each leading digit ``1..base-1`` in a batch of samples.

    ``frequencies[i]`` and ``counts[i]`` describe digit ``i + 1``.
    """

    base: int
    frequencies: Tuple[float, ...]
    counts: Tuple[int, ...]
    n_samples: int

    def __len__(self) -> int:
        return len(self.frequencies)

    def frequency(self, digit: int) -> float:
        """Relative frequency of ``digit``; zero outside ``1..base-1``."""
        if digit < 1 or digit > self.base - 1:
            return 0.0
        return self.frequencies[digit - 1]

    def domain(self) -> list[int]:
        return list(range(1, self.base))

    def as_dict(self) -> Dict[int, float]:
        return {digit: freq for digit, freq in zip(self.domain(), self.frequencies)}

    def to_array(self) -> np.ndarray:
        return np.asarray(self.frequencies, dtype=float)


def _valid_mask(values: np.ndarray) -> np.ndarray:
    # inf has no leading digit either, so it is dropped together with 0 and NaN
    return np.isfinite(values) & (values != 0.0)


def build_distribution(samples: Iterable[float], base: int) -> Tuple[EmpiricalDistribution, int]:
    """Tally leading digits of ``samples`` and normalize to relative frequencies.

    Zeros and NaNs carry no leading digit and are dropped silently. Returns the
    distribution together with the number of samples that were kept.

    Raises:
        InvalidBaseError: ``base`` is not an integer >= 3.
        NoValidSamplesError: nothing is left after filtering.
    """
    base = validate_base(base)
    values = np.asarray(samples if isinstance(samples, np.ndarray) else list(samples), dtype=float).ravel()
    valid = values[_valid_mask(values)]
    n_valid = int(valid.size)
    dropped = int(values.size) - n_valid
    if n_valid == 0:
        raise NoValidSamplesError(
            f"no valid samples: all {values.size} values were zero, NaN or non-finite"
        )

    digits = lead_digits(valid, base)
    counts = np.bincount(digits, minlength=base)[1:base]
    freqs = counts / n_valid
    log.debug(
        "Built lead digit distribution",
        extra={"base": base, "n_samples": n_valid, "dropped": dropped},
    )
    dist = EmpiricalDistribution(
        base=base,
        frequencies=tuple(float(f) for f in freqs),
        counts=tuple(int(c) for c in counts),
        n_samples=n_valid,
    )
    return dist, n_valid


def build_distribution_from_strings(tokens: Iterable[str], base: int) -> Tuple[EmpiricalDistribution, int]:
    """Parse text tokens as floats and delegate to :func:`build_distribution`.

    Tokens that fail to parse are dropped exactly like zeros and NaNs.
    """
    raw = pd.Series(list(tokens), dtype=object)
    parsed = pd.to_numeric(raw.astype(str).str.strip(), errors="coerce")
    missing = int(parsed.isna().sum())
    if missing:
        log.debug("Tokens parsed to NaN or failed to parse", extra={"base": base, "dropped": missing})
    return build_distribution(parsed.to_numpy(dtype=float), base)


__all__ = ["EmpiricalDistribution", "build_distribution", "build_distribution_from_strings"]
