"""Analyze CLI command: test numeric text data against Benford's law."""

from __future__ import annotations

import json
import re
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from benford_engine.cli.render import render_report
from benford_engine.cli.validation import resolve_analysis_config
from benford_engine.digits.empirical import build_distribution_from_strings
from benford_engine.distributions.benford import BenfordDistribution
from benford_engine.exceptions import ConfigValidationError
from benford_engine.stats.goodness_of_fit import evaluate
from benford_engine.utils.logging import get_logger

console = Console()
log = get_logger(__name__, component="cli_analyze")

_SEPARATORS = re.compile(r"[\s,;]+")


def split_tokens(text: str) -> list[str]:
    """Split raw text on whitespace, commas and semicolons."""
    return [tok for tok in _SEPARATORS.split(text) if tok]


def _read_text(path: Optional[Path]) -> str:
    if path is None or str(path) == "-":
        return sys.stdin.read()
    if not path.exists():
        raise ConfigValidationError(f"Input file not found: {path}")
    return path.read_text()


def analyze(
    path: Optional[Path] = typer.Argument(None, help="Text file of numbers; '-' or omitted reads stdin"),
    base: Optional[int] = typer.Option(None, "--base", help="Numeric base (>= 3)"),
    significance: Optional[float] = typer.Option(None, "--significance", help="0.10, 0.05 or 0.01"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON instead of tables"),
) -> None:
    """Compare the leading digits of the input numbers with Benford's law."""
    cfg = resolve_analysis_config(config, base=base, significance=significance)
    tokens = split_tokens(_read_text(path))
    empirical, n_valid = build_distribution_from_strings(tokens, cfg.base)
    log.info(
        "Parsed input tokens",
        extra={"base": cfg.base, "n_samples": n_valid, "dropped": len(tokens) - n_valid},
    )
    report = evaluate(BenfordDistribution(cfg.base), empirical, significance=cfg.significance)

    if json_output:
        payload = report.to_dict()
        payload["dropped"] = len(tokens) - n_valid
        typer.echo(json.dumps(payload))
        return
    render_report(console, report, title="Observed leading digits")
    console.print(f"Used {n_valid} of {len(tokens)} tokens")


__all__ = ["analyze", "split_tokens"]
