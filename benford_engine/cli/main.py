"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import typer

from benford_engine.cli.commands.analyze import analyze
from benford_engine.cli.commands.sample import sample
from benford_engine.cli.commands.table import table
from benford_engine.exceptions import (
    ConfigError,
    InsufficientDataError,
    PreconditionError,
)
from benford_engine.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Benford's law toolkit", no_args_is_help=True)


app.command()(table)
app.command()(sample)
app.command()(analyze)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli")
    try:
        app()
    except ConfigError as exc:
        log.error(str(exc))
        sys.exit(1)
    except InsufficientDataError as exc:
        log.error(f"Data validation failed: {exc}")
        sys.exit(2)
    except PreconditionError as exc:
        log.error(f"Invalid arguments: {exc}")
        sys.exit(3)
    except KeyboardInterrupt:
        log.info("Interrupted")
        sys.exit(130)
    except Exception:
        log.exception("Unhandled exception")
        sys.exit(255)


if __name__ == "__main__":
    sys.exit(main())
