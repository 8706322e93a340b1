"""Distribution interface for discrete digit models."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class DistributionMetadata:
    name: str
    base: int
    num_parameters: int = 1


class DigitDistribution(ABC):
    """Base class for distributions whose support is a finite set of digits.

    Positions in :meth:`full_pdf`, :meth:`full_cdf` and :meth:`domain` are aligned,
    which is what the goodness-of-fit statistics rely on.
    """

    metadata: DistributionMetadata

    @abstractmethod
    def prob(self, digit: int) -> float:
        """Probability mass at ``digit``; zero outside the domain."""

    @abstractmethod
    def log_prob(self, digit: int) -> float:
        """Natural log of :meth:`prob`; ``-inf`` outside the domain."""

    @abstractmethod
    def cdf(self, digit: int) -> float:
        """Cumulative probability up to and including ``digit``."""

    @abstractmethod
    def full_pdf(self) -> list[float]:
        """PDF over :meth:`domain`."""

    @abstractmethod
    def full_cdf(self) -> list[float]:
        """Running sum of :meth:`full_pdf`."""

    @abstractmethod
    def domain(self) -> list[int]:
        """Ordered digits with non-zero probability."""

    @abstractmethod
    def sample(self, rng=None) -> int:
        """Draw a single digit."""

    @abstractmethod
    def sample_many(self, size: int, rng=None) -> np.ndarray:
        """Draw ``size`` digits as an int array."""

    def num_parameters(self) -> int:
        return self.metadata.num_parameters
