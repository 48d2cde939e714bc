"""Pydantic models for stylepipe.json configuration."""

from .config import Config
from .pipeline import CompileStep, ConcatStep, MinifyStep, Step, Task
from .plans import BuildPlan

__all__ = [
    "BuildPlan",
    "CompileStep",
    "ConcatStep",
    "Config",
    "MinifyStep",
    "Step",
    "Task",
]
