"""Benford's first-digit distribution in an arbitrary base."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.random import Generator

from benford_engine.distributions.rng import RandomSource, resolve_rng
from benford_engine.interfaces.distribution import DigitDistribution, DistributionMetadata
from benford_engine.stats import goodness_of_fit
from benford_engine.validation import validate_base


class BenfordDistribution(DigitDistribution):
    """Benford's law for leading digits written in ``base``.

    ``P(d) = log(1 + 1/d) / log(base)`` for ``d`` in ``1..base-1``. The model is
    immutable; ``rng`` is only consulted by the sampling methods.
    """

    def __init__(self, base: int = 10, rng: Generator | None = None) -> None:
        self._base = validate_base(base)
        self._rng = rng
        self._log_base = math.log(self._base)
        self._pdf = tuple(self._mass(d) for d in range(1, self._base))
        self._cdf = tuple(np.cumsum(self._pdf).tolist())
        self.metadata = DistributionMetadata(name="benford", base=self._base)

    @property
    def base(self) -> int:
        return self._base

    def __repr__(self) -> str:
        return f"BenfordDistribution(base={self._base})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BenfordDistribution):
            return NotImplemented
        return self._base == other._base

    def __hash__(self) -> int:
        return hash(("benford", self._base))

    def _mass(self, digit: int) -> float:
        return math.log1p(1.0 / digit) / self._log_base

    def prob(self, digit: int) -> float:
        """Probability that the leading digit equals ``digit``; zero outside ``1..base-1``."""
        if digit < 1 or digit > self._base - 1:
            return 0.0
        return self._pdf[digit - 1]

    def log_prob(self, digit: int) -> float:
        if digit < 1 or digit > self._base - 1:
            return float("-inf")
        p = self.prob(digit)
        if p == 0.0:
            return float("-inf")
        return math.log(p)

    def cdf(self, digit: int) -> float:
        if digit < 1:
            return 0.0
        if digit >= self._base - 1:
            return 1.0
        return math.fsum(self.prob(i) for i in range(1, digit + 1))

    def full_pdf(self) -> list[float]:
        return list(self._pdf)

    def full_cdf(self) -> list[float]:
        return list(self._cdf)

    def domain(self) -> list[int]:
        return list(range(1, self._base))

    def mean(self) -> float:
        return math.fsum(d * p for d, p in zip(self.domain(), self._pdf))

    def variance(self) -> float:
        mu = self.mean()
        return math.fsum((d - mu) ** 2 * p for d, p in zip(self.domain(), self._pdf))

    def sample(self, rng: RandomSource = None) -> int:
        """Draw one digit by inverse CDF.

        ``rng`` may be a numpy Generator or an int seed; when omitted the generator
        given at construction is used, else the process-wide one.
        """
        p = resolve_rng(rng, self._rng).random()
        for digit, cumulative in zip(self.domain(), self._cdf):
            if p < cumulative:
                return digit
        return self._base - 1

    def sample_many(self, size: int, rng: RandomSource = None) -> np.ndarray:
        """Draw ``size`` digits with the same inverse-CDF rule as :meth:`sample`."""
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        p = resolve_rng(rng, self._rng).random(size)
        # side="right" finds the first bin whose cumulative value exceeds p
        idx = np.searchsorted(np.asarray(self._cdf), p, side="right")
        return np.minimum(idx, self._base - 2).astype(np.int64) + 1

    def chi_square_pvalue(self, realized: Sequence[float], n_samples: int) -> float:
        return goodness_of_fit.chi_square_pvalue(self, realized, n_samples)

    def cho_gaines_stat(self, n_samples: int, realized: Sequence[float]) -> float:
        return goodness_of_fit.cho_gaines(self.full_pdf(), realized, n_samples)

    def leemis_stat(self, n_samples: int, realized: Sequence[float]) -> float:
        return goodness_of_fit.leemis(self.full_pdf(), realized, n_samples)


__all__ = ["BenfordDistribution"]
