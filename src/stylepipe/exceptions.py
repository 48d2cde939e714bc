"""stylepipe exceptions."""

from dataclasses import dataclass
from typing import Optional


class BuildError(Exception):
    """Base class for every failure that aborts a build."""


@dataclass
class CompilationError(BuildError):
    """Stylesheet source could not be compiled."""

    message: str
    filename: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    def __str__(self) -> str:
        if self.filename and self.line:
            loc = f"{self.filename}:{self.line}"
            if self.column:
                loc += f":{self.column}"
            return f"{loc}: {self.message}"
        if self.filename:
            return f"{self.filename}: {self.message}"
        return self.message


class MinifyError(BuildError):
    """Intermediate CSS is malformed."""


@dataclass
class BuildIOError(BuildError):
    """A source could not be read or an artifact could not be written."""

    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


class ConfigError(BuildError):
    """Task configuration is missing, unreadable, or invalid."""


__all__ = [
    "BuildError",
    "BuildIOError",
    "CompilationError",
    "ConfigError",
    "MinifyError",
]
