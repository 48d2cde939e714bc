"""List command - show configured tasks."""

import click

from ...context import pass_context
from ..helpers import load_config_or_exit


@click.command("list")
@pass_context
def list_tasks(ctx):
    """List tasks and their stage chains."""
    config = load_config_or_exit(ctx)

    if not config.tasks:
        click.echo("No tasks defined")
        return

    for task in config.tasks:
        chain = " -> ".join(step.type for step in task.stages)
        click.echo(f"{task.name}: {chain}")
