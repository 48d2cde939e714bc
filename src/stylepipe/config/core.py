"""Config loading helpers.

Configs are loaded fresh on every invocation; nothing is cached at module
level.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from stylepipe.exceptions import ConfigError
from stylepipe.home import load_json, resolve_config_path
from stylepipe.models import Config

from .defaults import default_config_data

log = logging.getLogger(__name__)


def default_config() -> Config:
    """Return the built-in default config (no backing file)."""

    return Config.model_validate(default_config_data())


def load(path: Path | str) -> Config:
    """Load and validate the config file at ``path``.

    Raises:
        ConfigError: If the file is unreadable, not JSON, or invalid
    """
    target = Path(path)
    try:
        data = load_json(target)
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {target}")
    except OSError as e:
        raise ConfigError(f"Cannot read config {target}: {e}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {target}: {e}")

    try:
        config_obj = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {target}:\n{e}")

    config_obj.bind_path(target)
    log.debug("Loaded config %s (%d tasks)", target, len(config_obj.tasks))
    return config_obj


def resolve(
    path: Path | str | None = None, root: Optional[Path] = None
) -> Config:
    """Load the config for a project, falling back to the built-in default."""

    resolved = resolve_config_path(
        Path(path) if path is not None else None, root
    )
    if resolved is None:
        log.debug("No config file found, using built-in default")
        return default_config()
    return load(resolved)


def config_root(config_obj: Config, root: Optional[Path] = None) -> Path:
    """Directory that relative task paths resolve against."""

    if config_obj.config_path is not None:
        return config_obj.config_path.resolve().parent
    return (root or Path.cwd()).resolve()


__all__ = ["config_root", "default_config", "load", "resolve"]
