"""Mixin helper sets available to the compile stage.

A helper set is a directory of SCSS partials added to the compiler's search
path, so sources can ``@import "vendor";`` and ``@include`` its mixins.
Bundled sets live under ``stylepipe/scss/<name>/``; any other entry is
treated as a directory path relative to the project root.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Iterable, List, Optional

from stylepipe.exceptions import ConfigError

BUILTIN_HELPERS = ("reset", "vendor")


def builtin_helper_dir(name: str) -> Path:
    """Locate a bundled helper set under the stylepipe package."""
    pkg = resources.files("stylepipe").joinpath("scss").joinpath(name)
    # Bundled sets ship as plain directories, so the traversable is a real path
    return Path(str(pkg))


def resolve_helpers(names: Iterable[str], root: Optional[Path] = None) -> List[Path]:
    """Map helper set names (or directory paths) to search directories.

    Raises:
        ConfigError: If a name is neither a bundled set nor a directory
    """
    dirs: List[Path] = []
    for name in names:
        if name in BUILTIN_HELPERS:
            dirs.append(builtin_helper_dir(name))
            continue

        candidate = Path(name).expanduser()
        if not candidate.is_absolute() and root is not None:
            candidate = root / candidate
        if not candidate.is_dir():
            raise ConfigError(
                f"Unknown helper set '{name}' "
                f"(built-in: {', '.join(BUILTIN_HELPERS)})"
            )
        dirs.append(candidate)
    return dirs


__all__ = ["BUILTIN_HELPERS", "builtin_helper_dir", "resolve_helpers"]
