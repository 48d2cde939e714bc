"""Service layer: turn configured tasks into pipelines and plans."""

from .build import build_pipeline, run_task
from .explain import explain_task

__all__ = ["build_pipeline", "explain_task", "run_task"]
