"""Drivers for filesystem access."""

from .file import read_source, write_artifacts

__all__ = ["read_source", "write_artifacts"]
