"""Config layer facade: loading, defaults, and path resolution."""

from stylepipe.models import Config

from .core import config_root, default_config, load, resolve
from .defaults import DEFAULT_TASK, default_config_data
from .sources import expand_sources, is_pattern, resolve_path

__all__ = [
    "Config",
    "DEFAULT_TASK",
    "config_root",
    "default_config",
    "default_config_data",
    "expand_sources",
    "is_pattern",
    "load",
    "resolve",
    "resolve_path",
]
