"""Compile stage: SCSS -> CSS via libsass."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import sass

from stylepipe.exceptions import CompilationError

from .base import Asset, FileStage
from .helpers import resolve_helpers

log = logging.getLogger(__name__)

# libsass reports locations as "on line 3:7 of path/to/file.scss"
_LOCATION_RE = re.compile(r"on line (\d+)(?::(\d+))? of (.+?)\s*$", re.MULTILINE)
_STRING_INPUT = "stdin"


class _CssImporter:
    """libsass importer that inlines ``@import "file.css"`` contents.

    Returns None for anything that is not a local ``.css`` path so libsass
    falls back to its own resolution. Missing ``.css`` files are recorded in
    ``unresolved`` rather than raised, since exceptions cannot cross the
    compiler boundary cleanly.
    """

    def __init__(self, search_dirs: Sequence[Path]) -> None:
        self.search_dirs = list(search_dirs)
        self.unresolved: List[str] = []

    def __call__(self, path: str, prev: str):
        if not path.endswith(".css") or "//" in path:
            return None

        bases: List[Path] = []
        if prev and prev != _STRING_INPUT:
            bases.append(Path(prev).parent)
        bases.extend(self.search_dirs)

        for base in bases:
            candidate = base / path
            if candidate.is_file():
                try:
                    text = candidate.read_text(encoding="utf-8")
                except (OSError, UnicodeDecodeError):
                    break
                log.debug("Inlining CSS import %s", candidate)
                return [(str(candidate.resolve()), text)]

        self.unresolved.append(path)
        return None


def _find_line(source: str, needle: str) -> Optional[int]:
    for lineno, line in enumerate(source.splitlines(), start=1):
        if "@import" in line and needle in line:
            return lineno
    return None


def _to_compilation_error(exc: sass.CompileError, path: Optional[Path]) -> CompilationError:
    """Translate a libsass error message into a CompilationError."""
    text = str(exc).strip()
    first = text.splitlines()[0] if text else "Compilation failed"
    message = first[len("Error: "):] if first.startswith("Error: ") else first

    filename = str(path) if path else None
    line = column = None
    m = _LOCATION_RE.search(text)
    if m:
        line = int(m.group(1))
        column = int(m.group(2)) if m.group(2) else None
        if m.group(3) != _STRING_INPUT:
            filename = m.group(3)
    return CompilationError(message, filename=filename, line=line, column=column)


class CompileStage(FileStage):
    """Compile SCSS into flat CSS.

    Resolves nesting, variables, mixins and ``@import`` directives. Imports
    are searched in the importing file's directory, the source's directory,
    ``include_paths`` and finally the helper sets named in ``use``.
    """

    name = "compile"

    def __init__(
        self,
        use: Iterable[str] = (),
        compress: bool = False,
        include_css: bool = False,
        include_paths: Iterable[Path | str] = (),
        root: Optional[Path] = None,
    ) -> None:
        self.use = tuple(use)
        self.compress = compress
        self.include_css = include_css
        self.include_paths = tuple(Path(p) for p in include_paths)
        self.helper_dirs = tuple(resolve_helpers(self.use, root))

    @property
    def output_style(self) -> str:
        return "compressed" if self.compress else "expanded"

    def describe(self) -> dict:
        return {
            "use": list(self.use),
            "compress": self.compress,
            "include css": self.include_css,
            "include_paths": [str(p) for p in self.include_paths],
        }

    def search_dirs(self, path: Optional[Path]) -> List[Path]:
        dirs: List[Path] = []
        if path is not None:
            dirs.append(path.parent)
        dirs.extend(self.include_paths)
        dirs.extend(self.helper_dirs)
        return dirs

    def transform(self, data: bytes, path: Path | None = None) -> bytes:
        filename = str(path) if path else None
        try:
            source = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CompilationError(f"Source is not valid UTF-8: {e.reason}", filename=filename)

        search = self.search_dirs(path)
        options = {
            "string": source,
            "output_style": self.output_style,
            "include_paths": [str(d) for d in search],
        }
        importer = None
        if self.include_css:
            importer = _CssImporter(search)
            options["importers"] = [(0, importer)]

        try:
            css = sass.compile(**options)
        except sass.CompileError as e:
            raise _to_compilation_error(e, path)

        if importer is not None and importer.unresolved:
            missing = importer.unresolved[0]
            raise CompilationError(
                f"File to import not found or unreadable: {missing}",
                filename=filename,
                line=_find_line(source, missing),
            )

        log.debug("Compiled %s: %d -> %d bytes", filename or "<string>", len(data), len(css))
        return css.encode("utf-8")

    def apply(self, assets: Sequence[Asset]) -> List[Asset]:
        # Compiled assets take the .css extension
        return [
            Asset(
                path=asset.path.with_suffix(".css"),
                contents=self.transform(asset.contents, asset.path),
            )
            for asset in assets
        ]


__all__ = ["CompileStage"]
