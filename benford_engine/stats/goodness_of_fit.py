"""Goodness-of-fit statistics comparing realized digit frequencies to an ideal PDF.

Every function takes the ideal PDF and the realized distribution as aligned
sequences of relative frequencies (index ``i`` is digit ``i + 1``). A length
mismatch is a programming error and raises :class:`DistributionLengthError`.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Sequence

import numpy as np
from scipy.stats import chi2

from benford_engine.exceptions import DistributionLengthError
from benford_engine.models import FitReport, GoodnessOfFitResult
from benford_engine.stats.critical_values import critical_values
from benford_engine.utils.logging import get_logger
from benford_engine.validation import ensure_same_length

if TYPE_CHECKING:
    from benford_engine.digits.empirical import EmpiricalDistribution
    from benford_engine.interfaces.distribution import DigitDistribution

log = get_logger(__name__, component="goodness_of_fit")


def _aligned(ideal: Sequence[float], realized: Sequence[float]) -> tuple[np.ndarray, np.ndarray]:
    ensure_same_length(ideal, realized)
    return np.asarray(ideal, dtype=float), np.asarray(realized, dtype=float)


def chi_square(ideal: Sequence[float], realized: Sequence[float]) -> float:
    """Pearson distance ``sum((realized - ideal)**2 / ideal)`` over all bins.

    Operates on relative frequencies, so it is independent of sample size; lower
    means a closer fit.
    """
    exp, obs = _aligned(ideal, realized)
    return float(np.sum((obs - exp) ** 2 / exp))


def cho_gaines(ideal: Sequence[float], realized: Sequence[float], n_samples: int) -> float:
    """Cho-Gaines distance ``sqrt(n * sum((realized - ideal)**2))``."""
    exp, obs = _aligned(ideal, realized)
    return math.sqrt(n_samples * float(np.sum((obs - exp) ** 2)))


def leemis(ideal: Sequence[float], realized: Sequence[float], n_samples: int) -> float:
    """Leemis statistic ``sqrt(n) * max|realized - ideal|``."""
    exp, obs = _aligned(ideal, realized)
    return math.sqrt(n_samples) * float(np.max(np.abs(obs - exp)))


def chi_square_pvalue(model: "DigitDistribution", realized: Sequence[float], n_samples: int) -> float:
    """P-value of Pearson's test of ``realized`` against ``model``.

    The statistic on counts is ``n_samples * chi_square(...)``, referred to a
    chi-square distribution with ``len(domain) - 1`` degrees of freedom.
    """
    ideal = model.full_pdf()
    if len(realized) != len(ideal):
        raise DistributionLengthError(
            f"distribution has unexpected length {len(realized)}, expected {len(ideal)}"
        )
    statistic = n_samples * chi_square(ideal, realized)
    return float(chi2.sf(statistic, df=len(ideal) - 1))


def evaluate(
    model: "DigitDistribution",
    empirical: "EmpiricalDistribution",
    significance: float = 0.05,
) -> FitReport:
    """Compute every statistic for ``empirical`` against ``model``.

    Critical values are attached only where published ones exist (base 10).
    """
    base = model.metadata.base
    if empirical.base != base:
        raise DistributionLengthError(
            f"base mismatch: model base {base}, empirical distribution base {empirical.base}"
        )
    ideal = model.full_pdf()
    realized = list(empirical.frequencies)
    n = empirical.n_samples

    results = {
        "chi_square": GoodnessOfFitResult("chi_square", chi_square(ideal, realized), base),
        "chi_square_pvalue": GoodnessOfFitResult(
            "chi_square_pvalue", chi_square_pvalue(model, realized, n), base, n
        ),
        "cho_gaines": GoodnessOfFitResult("cho_gaines", cho_gaines(ideal, realized, n), base, n),
        "leemis": GoodnessOfFitResult("leemis", leemis(ideal, realized, n), base, n),
    }
    report = FitReport(
        base=base,
        n_samples=n,
        ideal=ideal,
        realized=realized,
        results=results,
        critical_values=critical_values(base, significance),
        significance=significance,
    )
    log.info(
        "Evaluated goodness of fit",
        extra={"base": base, "n_samples": n, "statistic": report.to_dict()["statistics"]},
    )
    return report


__all__ = ["chi_square", "chi_square_pvalue", "cho_gaines", "evaluate", "leemis"]
