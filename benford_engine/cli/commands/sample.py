"""Sample CLI command: draw digits from the model and test them against it."""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from benford_engine.cli.render import render_report
from benford_engine.cli.validation import resolve_analysis_config
from benford_engine.digits.empirical import build_distribution
from benford_engine.distributions.benford import BenfordDistribution
from benford_engine.stats.goodness_of_fit import evaluate
from benford_engine.utils.logging import get_logger

console = Console()
log = get_logger(__name__, component="cli_sample")


def sample(
    base: Optional[int] = typer.Option(None, "--base", help="Numeric base (>= 3)"),
    size: Optional[int] = typer.Option(None, "--size", help="Number of digits to draw"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    significance: Optional[float] = typer.Option(None, "--significance", help="0.10, 0.05 or 0.01"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON instead of tables"),
) -> None:
    """Draw digits by inverse CDF and report how well they fit the model."""
    cfg = resolve_analysis_config(config, base=base, sample_size=size, seed=seed, significance=significance)
    model = BenfordDistribution(cfg.base)

    start = time.perf_counter()
    draws = model.sample_many(cfg.sample_size, rng=cfg.seed)
    empirical, _ = build_distribution(draws, cfg.base)
    report = evaluate(model, empirical, significance=cfg.significance)
    log.info(
        "Sampled digits",
        extra={
            "base": cfg.base,
            "n_samples": cfg.sample_size,
            "duration_ms": round((time.perf_counter() - start) * 1000, 3),
        },
    )

    if json_output:
        typer.echo(json.dumps({"config": cfg.to_dict(), "report": report.to_dict()}))
        return
    render_report(console, report, title="Sampled digits")


__all__ = ["sample"]
