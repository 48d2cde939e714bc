"""Source pattern expansion and path resolution for tasks."""

from __future__ import annotations

import glob
from pathlib import Path
from typing import Iterable, List

from stylepipe.exceptions import BuildIOError

_GLOB_CHARS = frozenset("*?[")


def resolve_path(path: str, root: Path) -> Path:
    """Resolve ``path`` relative to ``root`` unless it is absolute."""

    path_obj = Path(path).expanduser()
    if path_obj.is_absolute():
        return path_obj
    return root / path_obj


def is_pattern(entry: str) -> bool:
    return any(ch in _GLOB_CHARS for ch in entry)


def expand_sources(entries: Iterable[str], root: Path) -> List[Path]:
    """Expand source entries into an ordered, de-duplicated path list.

    Glob patterns expand to their sorted matches; entry order is preserved.
    Plain paths are kept verbatim so a missing file surfaces as a read error
    from the pipeline.

    Raises:
        BuildIOError: If a glob pattern matches nothing
    """
    result: List[Path] = []
    seen = set()

    for entry in entries:
        if is_pattern(entry):
            pattern = str(resolve_path(entry, root))
            matches = sorted(
                Path(m) for m in glob.glob(pattern, recursive=True)
                if Path(m).is_file()
            )
            if not matches:
                raise BuildIOError(entry, "No source files match pattern")
            candidates = matches
        else:
            candidates = [resolve_path(entry, root)]

        for candidate in candidates:
            key = candidate.resolve()
            if key in seen:
                continue
            seen.add(key)
            result.append(candidate)

    return result


__all__ = ["expand_sources", "is_pattern", "resolve_path"]
