"""Home layer: path resolution and file I/O (no Pydantic dependencies)."""

import json
from pathlib import Path
from typing import Any, Dict, Optional

CONFIG_NAMES = (".stylepipe.json", "stylepipe.json")


def resolve_config_path(
    cli_path: Optional[Path] = None, root: Optional[Path] = None
) -> Optional[Path]:
    """
    Resolve stylepipe.json config file path with precedence:
    1. CLI --config path
    2. Project root: .stylepipe.json or stylepipe.json (prefer .stylepipe.json)

    Returns None when no file exists; callers fall back to the built-in
    default task.
    """
    if cli_path:
        return cli_path

    base = root or Path.cwd()
    for name in CONFIG_NAMES:
        p = base / name
        if p.exists():
            return p

    return None


def load_json(path: Path) -> Dict[str, Any]:
    """Load and parse JSON file."""
    return json.loads(path.read_text(encoding="utf-8"))


def save_json(path: Path, data: Dict[str, Any]) -> None:
    """Save data to JSON file with pretty formatting."""
    path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
    )
