"""stylepipe CLI main entry point with global options."""

import click

from ..config import DEFAULT_TASK
from ..context import StylepipeContext, resolve_project
from .helpers import configure_logging


@click.group(invoke_without_command=True)
@click.option(
    "--config", "config_option", type=click.Path(),
    help="Path to stylepipe.json (default: discovered in project root)",
)
@click.option(
    "-C", "--directory", type=click.Path(file_okay=False),
    help="Project root (default: current directory)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log each stage to stderr")
@click.version_option(package_name="stylepipe")
@click.pass_context
def cli(ctx, config_option, directory, verbose):
    """stylepipe - compile, minify and bundle stylesheets.

    Running without a command builds the default task.
    """
    ctx.ensure_object(StylepipeContext)

    paths = resolve_project(directory, config_option)
    ctx.obj.root = paths.root
    ctx.obj.config_path = paths.config_path
    ctx.obj.verbose = verbose
    configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        ctx.invoke(build, task=DEFAULT_TASK)


# Register commands at module level so tests can import cli with commands attached
from .commands.build import build
from .commands.explain import explain
from .commands.init import init
from .commands.list import list_tasks

cli.add_command(build)
cli.add_command(explain)
cli.add_command(init)
cli.add_command(list_tasks)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
