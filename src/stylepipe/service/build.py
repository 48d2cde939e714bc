"""Service layer: build and run a configured task."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from stylepipe.config import config_root, expand_sources, resolve_path
from stylepipe.models import Config, Task
from stylepipe.pipeline import Pipeline
from stylepipe.stages import build_stages

log = logging.getLogger(__name__)


def build_pipeline(task: Task, root: Path) -> Pipeline:
    """Create the runtime pipeline for ``task`` with paths rooted at ``root``."""

    stages = build_stages(task.stages, root)
    return Pipeline(stages, resolve_path(task.destination, root))


def run_task(
    config: Config, task_name: str, root: Optional[Path] = None
) -> List[Path]:
    """Run a named task and return the written artifact paths.

    Raises:
        KeyError: If the task does not exist
        BuildError: If any source, stage, or write fails
    """
    task = config.get_task(task_name)
    if not task:
        raise KeyError(task_name)

    base = config_root(config, root)
    pipeline = build_pipeline(task, base)
    sources = expand_sources(task.sources, base)

    log.info(
        "Running task %s: %s -> %s",
        task.name,
        " | ".join(pipeline.stage_names),
        pipeline.destination,
    )
    return pipeline.run(sources)


__all__ = ["build_pipeline", "run_task"]
