"""CLI helper utilities shared across commands."""

import logging
import sys

import click

from ..config import resolve
from ..exceptions import BuildError
from ..models import Config

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Route library logging to stderr; DEBUG with --verbose, else WARNING."""
    root = logging.getLogger("stylepipe")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def load_config_or_exit(ctx) -> Config:
    """Load the project config, exiting with an error message on failure.

    Raises:
        SystemExit: If the config cannot be loaded
    """
    try:
        return resolve(ctx.config_path, ctx.root)
    except BuildError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
