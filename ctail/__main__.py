"""Command-line interface entrypoint for ctail."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from . import __version__
from .config import get_config
from .core.constants import CAPACITY_LIMIT
from .core.errors import AllocationError, TruncationWarning
from .core.tail import tail_stream

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: str) -> None:
    """Send ctail log records to stderr at ``level``."""
    logger = logging.getLogger("ctail")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False


def _report_truncation(warning: TruncationWarning) -> None:
    click.echo(f"Warning: {warning}", err=True)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-n",
    "--lines",
    type=click.IntRange(0, CAPACITY_LIMIT),
    default=None,
    help="Print the last N lines (default: 10).",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Diagnostic log level written to stderr.",
)
@click.argument("file", default="-", type=click.Path(dir_okay=False, allow_dash=True))
@click.version_option(__version__, prog_name="ctail")
def cli(lines: Optional[int], log_level: Optional[str], file: str) -> None:
    """Print the last 10 lines of FILE to standard output.

    With no FILE, or when FILE is -, read standard input. Use -- before a
    FILE whose name starts with a dash.
    """
    config = get_config()
    setup_logging(log_level or config.logging.log_level)

    if lines is None:
        lines = config.tail.default_lines
    if lines == 0:
        return

    try:
        source = click.open_file(file, "rb")
    except OSError:
        click.echo(f'Error: Could not open file "{file}"', err=True)
        sys.exit(1)

    sink = sys.stdout.buffer
    try:
        with source:
            tail_stream(
                source,
                sink,
                lines,
                line_length_limit=config.tail.line_length_limit,
                chunk_size=config.tail.chunk_size,
                on_truncate=_report_truncation,
            )
    except (AllocationError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    finally:
        sink.flush()


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
