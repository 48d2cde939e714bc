"""Concat stage: join assets under a single output filename."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath
from typing import List, Sequence

from stylepipe.exceptions import ConfigError

from .base import Asset, Stage

log = logging.getLogger(__name__)


class ConcatStage(Stage):
    """Concatenate every incoming asset, in order, into ``filename``.

    Assets are joined with ``separator`` (empty by default, so outputs are
    byte-adjacent). A single asset is simply renamed.
    """

    name = "concat"

    def __init__(self, filename: str, separator: str | bytes = b"") -> None:
        pure = PurePath(filename)
        if not filename or pure.name != filename or filename in (".", ".."):
            raise ConfigError(f"Concat filename must be a bare file name: {filename!r}")
        self.filename = filename
        if isinstance(separator, str):
            separator = separator.encode("utf-8")
        self.separator = separator

    def describe(self) -> dict:
        return {
            "filename": self.filename,
            "separator": self.separator.decode("utf-8", "replace"),
        }

    def apply(self, assets: Sequence[Asset]) -> List[Asset]:
        contents = self.separator.join(asset.contents for asset in assets)
        log.debug("Concatenated %d asset(s) into %s", len(assets), self.filename)
        return [Asset(path=Path(self.filename), contents=contents)]


__all__ = ["ConcatStage"]
