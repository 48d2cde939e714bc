"""Stage protocol and the asset value passed between stages."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Sequence


@dataclass(frozen=True)
class Asset:
    """A file flowing through the pipeline.

    ``path`` is where the content originally came from (or, after a rename,
    the file name it will be written under); ``contents`` is the current
    byte payload. Stages never mutate an asset, they return new ones.
    """

    path: Path
    contents: bytes

    def with_contents(self, contents: bytes) -> Asset:
        return replace(self, contents=contents)

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def size(self) -> int:
        return len(self.contents)


class Stage:
    """One named, stateless transformation step."""

    name: str = "stage"

    def apply(self, assets: Sequence[Asset]) -> List[Asset]:
        raise NotImplementedError

    def describe(self) -> dict:
        """Options shown by ``stylepipe explain``."""
        return {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.describe()!r})"


class FileStage(Stage):
    """Stage that transforms each asset independently."""

    def transform(self, data: bytes, path: Path | None = None) -> bytes:
        raise NotImplementedError

    def apply(self, assets: Sequence[Asset]) -> List[Asset]:
        return [
            asset.with_contents(self.transform(asset.contents, asset.path))
            for asset in assets
        ]


__all__ = ["Asset", "FileStage", "Stage"]
