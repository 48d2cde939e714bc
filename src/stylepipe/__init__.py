"""stylepipe: compile -> minify -> concat stylesheet build pipelines."""

from .exceptions import (
    BuildError,
    BuildIOError,
    CompilationError,
    ConfigError,
    MinifyError,
)
from .pipeline import Pipeline, run
from .stages import Asset, CompileStage, ConcatStage, MinifyStage, Stage

__all__ = [
    "__version__",
    "Asset",
    "BuildError",
    "BuildIOError",
    "CompilationError",
    "CompileStage",
    "ConcatStage",
    "ConfigError",
    "MinifyError",
    "MinifyStage",
    "Pipeline",
    "Stage",
    "run",
]

__version__ = "0.1.0"
