"""Explain command - show the resolved plan for a task."""

import json
import sys

import click

from ...config import DEFAULT_TASK
from ...context import pass_context
from ...exceptions import BuildError
from ...service import explain_task
from ..helpers import load_config_or_exit


def _format_text(plan) -> str:
    lines = [f"Task: {plan.task}", "Sources:"]
    lines.extend(f"  {src}" for src in plan.sources)
    lines.append("Stages:")
    for index, stage in enumerate(plan.stages, start=1):
        options = ", ".join(
            f"{k}={json.dumps(v)}" for k, v in stage.items() if k != "type"
        )
        lines.append(f"  {index}. {stage['type']}" + (f" ({options})" if options else ""))
    lines.append(f"Destination: {plan.destination}")
    return "\n".join(lines)


@click.command()
@click.argument("task", default=DEFAULT_TASK)
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
@pass_context
def explain(ctx, task, output_format):
    """Show the resolved plan for TASK without executing it."""
    config = load_config_or_exit(ctx)

    try:
        plan = explain_task(config, task, ctx.root)
    except KeyError:
        click.echo(f"Error: Task not found: {task}", err=True)
        sys.exit(1)
    except BuildError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps(plan.model_dump(), indent=2))
    else:
        click.echo(_format_text(plan))
