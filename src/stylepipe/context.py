"""stylepipe context for passing state between commands."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click


@dataclass(frozen=True)
class ProjectPaths:
    """Resolved project root and explicit config path (if any)."""

    root: Path
    config_path: Optional[Path]


def resolve_project(
    directory: Optional[str], config_option: Optional[str]
) -> ProjectPaths:
    """Resolve the project root and config path.

    Resolution order for the root:
    1. -C/--directory CLI flag
    2. Current working directory

    A relative --config path is taken relative to the root.
    """
    root = Path(directory).expanduser().resolve() if directory else Path.cwd()

    config_path = None
    if config_option:
        config_path = Path(config_option).expanduser()
        if not config_path.is_absolute():
            config_path = root / config_path

    return ProjectPaths(root=root, config_path=config_path)


class StylepipeContext:
    def __init__(self):
        self.root = None
        self.config_path = None
        self.verbose = False


pass_context = click.make_pass_decorator(StylepipeContext, ensure=True)
