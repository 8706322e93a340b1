"""Benford's law in an arbitrary base: model, digit extraction and fit statistics."""

from benford_engine.digits.empirical import (
    EmpiricalDistribution,
    build_distribution,
    build_distribution_from_strings,
)
from benford_engine.digits.extract import lead_digit, lead_digits
from benford_engine.distributions.benford import BenfordDistribution
from benford_engine.models import FitReport, GoodnessOfFitResult
from benford_engine.stats.goodness_of_fit import chi_square, chi_square_pvalue, cho_gaines, evaluate, leemis

__version__ = "0.1.0"

__all__ = [
    "BenfordDistribution",
    "EmpiricalDistribution",
    "FitReport",
    "GoodnessOfFitResult",
    "build_distribution",
    "build_distribution_from_strings",
    "chi_square",
    "chi_square_pvalue",
    "cho_gaines",
    "evaluate",
    "lead_digit",
    "lead_digits",
    "leemis",
]
