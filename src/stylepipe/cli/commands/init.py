"""Init command - create a starter stylepipe.json file."""

import sys

import click

from ...config import default_config_data
from ...context import pass_context
from ...home import save_json


@click.command()
@click.option("--force", is_flag=True, help="Overwrite existing file")
@pass_context
def init(ctx, force):
    """Create a starter stylepipe.json with the default task."""
    path = ctx.config_path or ctx.root / "stylepipe.json"

    if path.exists() and not force:
        click.echo(
            f"Error: {path} already exists. Use --force to overwrite.",
            err=True,
        )
        sys.exit(1)

    save_json(path, default_config_data())
    click.echo(f"Created {path}")
