"""Root configuration model for stylepipe.json."""

from __future__ import annotations

from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from .pipeline import Task


class Config(BaseModel):
    """Root stylepipe.json configuration."""

    model_config = ConfigDict(extra="forbid")

    version: str
    name: str
    tasks: List[Task] = Field(default_factory=list)

    # Set by the loader, never read from JSON
    _config_path: Path | None = PrivateAttr(default=None)

    @field_validator("tasks")
    @classmethod
    def names_unique(cls, v: List[Task]) -> List[Task]:
        """Ensure task names are unique."""

        names = [t.name for t in v]
        if len(names) != len(set(names)):
            raise ValueError("Duplicate task names are not allowed")
        return v

    @property
    def config_path(self) -> Path | None:
        """File this config was loaded from, or None for the built-in default."""

        return self._config_path

    def bind_path(self, path: Path) -> "Config":
        self._config_path = Path(path)
        return self

    def get_task(self, name: str) -> Task | None:
        """Get task by name, or None if not found."""

        return next((t for t in self.tasks if t.name == name), None)

    def has_task(self, name: str) -> bool:
        """Check if task exists."""

        return any(t.name == name for t in self.tasks)

    def task_names(self) -> List[str]:
        return [t.name for t in self.tasks]


__all__ = ["Config"]
