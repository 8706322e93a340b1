"""Leading significant digit extraction in an arbitrary base."""

from __future__ import annotations

from typing import Iterable

import numpy as np


def lead_digit(n: float, base: int) -> int:
    """Return the first significant digit of ``n`` written in ``base``.

    Sign is ignored. Values below one are scaled up by ``base`` until they reach
    ``[1, base)``; the integer part is then divided down to a single digit.

    ``n`` must be finite and non-zero; callers filter zeros and NaNs first.
    Scaling is repeated float multiplication, so rounding can leave the scaled
    value just below an integer digit, which then loses one: ``0.0003`` in base
    10 scales to ``2.9999999999999996`` and yields 2. This affects ordinary
    fractions as well as exact powers of ``base`` and extreme magnitudes.
    """
    if n < 0:
        n = -n
    while n < 1:
        n = base * n
    resid = int(n)
    while resid >= base:
        resid //= base
    return resid


def lead_digits(values: Iterable[float], base: int) -> np.ndarray:
    """Vector form of :func:`lead_digit` for already-filtered values."""
    return np.fromiter((lead_digit(float(v), base) for v in values), dtype=np.int64)


__all__ = ["lead_digit", "lead_digits"]
