"""Table CLI command: print the Benford PDF and CDF for a base."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from benford_engine.cli.render import render_model
from benford_engine.cli.validation import resolve_analysis_config
from benford_engine.distributions.benford import BenfordDistribution

console = Console()


def table(
    base: Optional[int] = typer.Option(None, "--base", help="Numeric base (>= 3)"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
) -> None:
    """Show the ideal leading-digit distribution."""
    cfg = resolve_analysis_config(config, base=base)
    model = BenfordDistribution(cfg.base)
    if json_output:
        payload = {"base": model.base, "domain": model.domain(), "pdf": model.full_pdf(), "cdf": model.full_cdf()}
        typer.echo(json.dumps(payload))
        return
    render_model(console, model)


__all__ = ["table"]
