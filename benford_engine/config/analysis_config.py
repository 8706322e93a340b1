"""Analysis configuration schema and validation."""

from __future__ import annotations

import numbers
from dataclasses import asdict, dataclass, fields
from typing import Any, Optional

from benford_engine.exceptions import ConfigValidationError, InvalidBaseError
from benford_engine.stats.critical_values import CHO_GAINES_BASE10
from benford_engine.validation import validate_base


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(slots=True)
class AnalysisConfig:
    base: int = 10
    seed: Optional[int] = None
    sample_size: int = 10_000
    significance: float = 0.05

    def __post_init__(self) -> None:
        try:
            validate_base(self.base)
        except InvalidBaseError as exc:
            raise ConfigValidationError(str(exc)) from exc
        if not _is_int(self.sample_size):
            raise ConfigValidationError(f"sample_size must be an integer, got {self.sample_size!r}")
        if self.sample_size <= 0:
            raise ConfigValidationError("sample_size must be > 0")
        if self.seed is not None and not _is_int(self.seed):
            raise ConfigValidationError(f"seed must be an integer, got {self.seed!r}")
        if self.seed is not None and self.seed < 0:
            raise ConfigValidationError("seed must be non-negative when set")
        if isinstance(self.significance, bool) or not isinstance(self.significance, numbers.Real):
            raise ConfigValidationError(f"significance must be a number, got {self.significance!r}")
        if self.significance not in CHO_GAINES_BASE10:
            allowed = ", ".join(str(s) for s in sorted(CHO_GAINES_BASE10))
            raise ConfigValidationError(f"significance must be one of {allowed}")

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigValidationError(f"unknown config keys: {sorted(unknown)}")
        return cls(**data)

    def to_dict(self) -> dict:
        return asdict(self)


__all__ = ["AnalysisConfig"]
