"""Published critical values for Benford-specific statistics.

Only base 10 has published values (Morrow, 2014). They are calibration constants
for decimal data and do not carry over to other bases. The often-quoted
Cho-Gaines value 1.569 is the 1% entry; the 5% value is 1.330.
"""

from __future__ import annotations

from typing import Dict

from benford_engine.exceptions import ConfigValidationError

# significance level -> critical value
CHO_GAINES_BASE10: Dict[float, float] = {0.10: 1.212, 0.05: 1.330, 0.01: 1.569}
LEEMIS_BASE10: Dict[float, float] = {0.10: 0.851, 0.05: 0.967, 0.01: 1.212}

_TABLES = {"cho_gaines": CHO_GAINES_BASE10, "leemis": LEEMIS_BASE10}


def critical_values(base: int, significance: float = 0.05) -> Dict[str, float]:
    """Critical values keyed by statistic name; empty for any base other than 10."""
    if base != 10:
        return {}
    if significance not in CHO_GAINES_BASE10:
        allowed = ", ".join(str(s) for s in sorted(CHO_GAINES_BASE10))
        raise ConfigValidationError(f"significance must be one of {allowed}, got {significance}")
    return {name: table[significance] for name, table in _TABLES.items()}


__all__ = ["CHO_GAINES_BASE10", "LEEMIS_BASE10", "critical_values"]
