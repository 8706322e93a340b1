"""Result models for goodness-of-fit evaluations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional

StatisticKind = Literal["chi_square", "chi_square_pvalue", "cho_gaines", "leemis"]


@dataclass(frozen=True)
class GoodnessOfFitResult:
    statistic: StatisticKind
    value: float
    base: int
    n_samples: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "statistic": self.statistic,
            "value": self.value,
            "base": self.base,
            "n_samples": self.n_samples,
        }


@dataclass
class FitReport:
    """All statistics from one comparison of an empirical distribution to a model."""

    base: int
    n_samples: int
    ideal: List[float]
    realized: List[float]
    results: Dict[str, GoodnessOfFitResult] = field(default_factory=dict)
    critical_values: Dict[str, float] = field(default_factory=dict)
    significance: Optional[float] = None

    def value(self, statistic: StatisticKind) -> float:
        return self.results[statistic].value

    def exceeds_critical(self, statistic: StatisticKind) -> Optional[bool]:
        """Whether ``statistic`` is above its critical value; ``None`` when none is known."""
        critical = self.critical_values.get(statistic)
        if critical is None:
            return None
        return self.value(statistic) > critical

    def to_dict(self) -> dict:
        return {
            "base": self.base,
            "n_samples": self.n_samples,
            "ideal": list(self.ideal),
            "realized": list(self.realized),
            "statistics": {name: res.value for name, res in self.results.items()},
            "critical_values": dict(self.critical_values),
            "significance": self.significance,
        }


__all__ = ["FitReport", "GoodnessOfFitResult", "StatisticKind"]
