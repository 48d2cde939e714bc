"""Pipeline stages and the factory that builds them from task steps."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from stylepipe.models import CompileStep, ConcatStep, MinifyStep, Step

from .base import Asset, FileStage, Stage
from .compile import CompileStage
from .concat import ConcatStage
from .helpers import BUILTIN_HELPERS, resolve_helpers
from .minify import KeepSpecialComments, MinifyStage


def build_stage(step: Step, root: Optional[Path] = None) -> Stage:
    """Instantiate the runtime stage for a configured step.

    Relative paths in the step resolve against ``root``.
    """
    if isinstance(step, CompileStep):
        include_paths = [
            p if Path(p).is_absolute() or root is None else root / p
            for p in step.include_paths
        ]
        return CompileStage(
            use=step.use,
            compress=step.compress,
            include_css=step.include_css,
            include_paths=include_paths,
            root=root,
        )
    if isinstance(step, MinifyStep):
        return MinifyStage(keep_special_comments=step.keep_special_comments)
    if isinstance(step, ConcatStep):
        return ConcatStage(filename=step.filename, separator=step.separator)
    raise TypeError(f"Unsupported step: {step!r}")


def build_stages(steps: Iterable[Step], root: Optional[Path] = None) -> List[Stage]:
    return [build_stage(step, root) for step in steps]


__all__ = [
    "Asset",
    "BUILTIN_HELPERS",
    "CompileStage",
    "ConcatStage",
    "FileStage",
    "KeepSpecialComments",
    "MinifyStage",
    "Stage",
    "build_stage",
    "build_stages",
    "resolve_helpers",
]
