"""Service layer: explain task (resolve plan without execution)."""

from pathlib import Path
from typing import Any, Dict, Optional

from stylepipe.config import config_root, expand_sources
from stylepipe.models import BuildPlan, Config

from .build import build_pipeline


def explain_task(
    config: Config, task_name: str, root: Optional[Path] = None
) -> BuildPlan:
    """
    Build a resolved plan for a task without executing it.

    Args:
        config: The project configuration
        task_name: Name of the task to explain
        root: Project root used when the config has no backing file

    Returns:
        BuildPlan with expanded sources, destination and stage options

    Raises:
        KeyError: If task not found
        BuildError: If a helper set or source pattern cannot be resolved
    """
    task = config.get_task(task_name)
    if not task:
        raise KeyError(task_name)

    base = config_root(config, root)
    pipeline = build_pipeline(task, base)

    stages = []
    for stage in pipeline.stages:
        stage_info: Dict[str, Any] = {"type": stage.name}
        stage_info.update(stage.describe())
        stages.append(stage_info)

    return BuildPlan(
        task=task.name,
        sources=[str(p) for p in expand_sources(task.sources, base)],
        destination=str(pipeline.destination),
        stages=stages,
    )


__all__ = ["explain_task"]
