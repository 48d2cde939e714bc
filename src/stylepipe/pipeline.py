"""Pipeline runner: read sources, fold them through stages, write artifacts.

A run is strictly linear: every source is read once, the asset list passes
through each stage in order (the output of stage *i* is the only input of
stage *i+1*), and only after the last stage succeeds are the artifacts
written. Any stage failure propagates immediately and nothing is written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from stylepipe.drivers import read_source, write_artifacts
from stylepipe.exceptions import BuildIOError
from stylepipe.stages import Asset, Stage

log = logging.getLogger(__name__)

SourceArg = Union[Path, str, Sequence[Union[Path, str]]]


def _as_paths(sources: SourceArg) -> List[Path]:
    if isinstance(sources, (str, Path)):
        return [Path(sources)]
    return [Path(s) for s in sources]


@dataclass(frozen=True, init=False)
class Pipeline:
    """Ordered stages plus the directory artifacts are written to."""

    stages: Tuple[Stage, ...]
    destination: Path

    def __init__(self, stages: Sequence[Stage], destination: Path | str) -> None:
        stages = tuple(stages)
        if not stages:
            raise ValueError("Pipeline requires at least one stage")
        object.__setattr__(self, "stages", stages)
        object.__setattr__(self, "destination", Path(destination))

    @property
    def stage_names(self) -> List[str]:
        return [stage.name for stage in self.stages]

    def process(self, assets: Sequence[Asset]) -> List[Asset]:
        """Fold assets through every stage without touching the filesystem."""

        current = list(assets)
        for stage in self.stages:
            before = sum(a.size for a in current)
            current = stage.apply(current)
            log.debug(
                "Stage %s: %d asset(s), %d -> %d bytes",
                stage.name,
                len(current),
                before,
                sum(a.size for a in current),
            )
        return current

    def run(self, sources: SourceArg) -> List[Path]:
        """Build ``sources`` and write the resulting artifacts.

        Returns:
            Paths of the written artifacts

        Raises:
            BuildError: On the first failing read, stage, or write
        """
        paths = _as_paths(sources)
        if not paths:
            raise BuildIOError(str(self.destination), "No source files given")

        assets = [Asset(path=p, contents=read_source(p)) for p in paths]
        log.debug("Read %d source(s)", len(assets))

        results = self.process(assets)

        names = [asset.name for asset in results]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise BuildIOError(
                str(self.destination),
                f"Multiple artifacts named {', '.join(duplicates)}; add a concat stage",
            )

        return write_artifacts(
            [(asset.name, asset.contents) for asset in results],
            self.destination,
        )


def run(
    sources: SourceArg, stages: Sequence[Stage], destination: Path | str
) -> List[Path]:
    """Run ``stages`` over ``sources`` and write the result into ``destination``."""

    return Pipeline(stages, destination).run(sources)


__all__ = ["Pipeline", "run"]
