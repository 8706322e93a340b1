"""Digit extraction and empirical first-digit distributions."""

from benford_engine.digits.empirical import (
    EmpiricalDistribution,
    build_distribution,
    build_distribution_from_strings,
)
from benford_engine.digits.extract import lead_digit, lead_digits

__all__ = [
    "EmpiricalDistribution",
    "build_distribution",
    "build_distribution_from_strings",
    "lead_digit",
    "lead_digits",
]
