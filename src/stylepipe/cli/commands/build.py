"""Build command - run a task's pipeline and write its artifacts."""

import sys

import click

from ...config import DEFAULT_TASK
from ...context import pass_context
from ...exceptions import BuildError
from ...service import run_task
from ..helpers import load_config_or_exit


@click.command()
@click.argument("task", default=DEFAULT_TASK)
@pass_context
def build(ctx, task):
    """Build TASK (default: 'default').

    Reads the task's sources, runs them through its stages in order and
    writes the artifacts. Nothing is written if any stage fails.

    Examples:
        stylepipe build              # Build the default task
        stylepipe build docs         # Build the 'docs' task
        stylepipe -v build           # Log every stage to stderr
    """
    config = load_config_or_exit(ctx)

    try:
        written = run_task(config, task, ctx.root)
    except KeyError:
        click.echo(f"Error: Task not found: {task}", err=True)
        sys.exit(1)
    except BuildError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for path in written:
        click.echo(f"Wrote {path} ({path.stat().st_size} bytes)")
