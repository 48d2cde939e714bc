"""Built-in default configuration.

Used when no stylepipe.json is found: compiles ``style/index.scss`` with the
vendor helpers into a single minified ``style.css`` at the project root.
"""

from __future__ import annotations

from typing import Any, Dict

DEFAULT_TASK = "default"


def default_config_data() -> Dict[str, Any]:
    """Return a fresh copy of the default config document."""

    return {
        "version": "1",
        "name": "stylepipe",
        "tasks": [
            {
                "name": DEFAULT_TASK,
                "sources": ["style/index.scss"],
                "destination": ".",
                "stages": [
                    {
                        "type": "compile",
                        "use": ["vendor"],
                        "compress": True,
                        "include css": True,
                    },
                    {"type": "minify", "keepSpecialComments": 0},
                    {"type": "concat", "filename": "style.css"},
                ],
            }
        ],
    }


__all__ = ["DEFAULT_TASK", "default_config_data"]
