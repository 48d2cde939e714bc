"""Plan models for explain outputs."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel


class BuildPlan(BaseModel):
    """Result of explaining a task (resolved plan without execution)."""

    task: str
    sources: List[str]
    destination: str
    stages: List[Dict[str, Any]]


__all__ = ["BuildPlan"]
