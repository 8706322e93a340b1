"""Rich rendering for model tables and fit reports."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from benford_engine.distributions.benford import BenfordDistribution
from benford_engine.models import FitReport

_LABELS = {
    "chi_square": "Chi-square distance",
    "chi_square_pvalue": "Chi-square p-value",
    "cho_gaines": "Cho-Gaines",
    "leemis": "Leemis",
}


def render_model(console: Console, model: BenfordDistribution) -> None:
    table = Table(title=f"Benford distribution (base {model.base})")
    table.add_column("Digit", justify="right")
    table.add_column("P(d)", justify="right")
    table.add_column("CDF", justify="right")
    for digit, p, c in zip(model.domain(), model.full_pdf(), model.full_cdf()):
        table.add_row(str(digit), f"{p:.6f}", f"{c:.6f}")
    console.print(table)


def render_report(console: Console, report: FitReport, title: str) -> None:
    digits = Table(title=f"{title} (base {report.base}, n={report.n_samples})")
    digits.add_column("Digit", justify="right")
    digits.add_column("Observed", justify="right")
    digits.add_column("Expected", justify="right")
    digits.add_column("Deviation", justify="right")
    for idx, (obs, exp) in enumerate(zip(report.realized, report.ideal), start=1):
        digits.add_row(str(idx), f"{obs:.6f}", f"{exp:.6f}", f"{obs - exp:+.6f}")
    console.print(digits)

    stats = Table(title="Goodness of fit")
    stats.add_column("Statistic")
    stats.add_column("Value", justify="right")
    stats.add_column("Critical", justify="right")
    for name, result in report.results.items():
        critical = report.critical_values.get(name)
        verdict = ""
        if critical is not None:
            verdict = f"{critical:.3f} ({'reject' if result.value > critical else 'ok'})"
        stats.add_row(_LABELS[name], f"{result.value:.6g}", verdict)
    console.print(stats)
    if not report.critical_values:
        console.print("[dim]Critical values are published for base 10 only.[/dim]")


__all__ = ["render_model", "render_report"]
