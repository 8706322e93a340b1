"""CLI validation helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from benford_engine.config.analysis_config import AnalysisConfig
from benford_engine.config.loader import load_config_with_precedence


def resolve_analysis_config(config: Optional[Path], **cli_values: Any) -> AnalysisConfig:
    """Build an AnalysisConfig from defaults, an optional file and CLI flags."""
    merged = load_config_with_precedence(
        config,
        cli_values=cli_values,
        defaults=AnalysisConfig().to_dict(),
    )
    return AnalysisConfig.from_dict(merged)


__all__ = ["resolve_analysis_config"]
