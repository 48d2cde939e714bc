"""File driver: read sources and write build artifacts."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import List, Sequence, Tuple

from stylepipe.exceptions import BuildIOError

log = logging.getLogger(__name__)


def read_source(path: Path) -> bytes:
    """Read a source file and return its contents as bytes.

    Raises:
        BuildIOError: If the file is missing or unreadable
    """
    try:
        return Path(path).read_bytes()
    except FileNotFoundError:
        raise BuildIOError(str(path), "Source file not found")
    except IsADirectoryError:
        raise BuildIOError(str(path), "Source is a directory")
    except OSError as e:
        raise BuildIOError(str(path), e.strerror or str(e))


def _target_mode(target: Path) -> int:
    """Permission bits an artifact at ``target`` should carry.

    An existing target keeps its mode; a new one gets ``0o666`` minus the
    process umask, like a plain ``open(..., "w")``.
    """
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _stage_temp(target: Path, data: bytes) -> Path:
    """Write ``data`` to a temporary file next to ``target``.

    mkstemp creates the file as 0600, so the mode is reset before returning.
    """

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_name, _target_mode(target))
    except OSError:
        os.unlink(tmp_name)
        raise
    return Path(tmp_name)


def write_artifacts(
    artifacts: Sequence[Tuple[Path, bytes]], destination: Path
) -> List[Path]:
    """Write every artifact into ``destination``, all or nothing.

    Each artifact is first written to a temporary file in the destination
    directory. Only when every temporary file is in place are they moved over
    their targets with ``os.replace``; on failure the temporaries are removed
    and existing targets are left untouched.

    Args:
        artifacts: (file name, bytes) pairs; names are relative to destination
        destination: Existing directory to write into

    Returns:
        Paths of the written artifacts, in input order

    Raises:
        BuildIOError: If destination is missing or a write fails
    """
    dest = Path(destination)
    if not dest.is_dir():
        raise BuildIOError(str(dest), "Destination directory does not exist")

    staged: List[Tuple[Path, Path]] = []
    try:
        for name, data in artifacts:
            target = dest / name
            staged.append((_stage_temp(target, data), target))
    except OSError as e:
        for tmp, _ in staged:
            tmp.unlink(missing_ok=True)
        raise BuildIOError(str(dest), e.strerror or str(e))

    written: List[Path] = []
    for index, (tmp, target) in enumerate(staged):
        try:
            os.replace(tmp, target)
        except OSError as e:
            for leftover, _ in staged[index:]:
                leftover.unlink(missing_ok=True)
            raise BuildIOError(str(target), e.strerror or str(e))
        log.info("Wrote %s (%d bytes)", target, target.stat().st_size)
        written.append(target)
    return written


__all__ = ["read_source", "write_artifacts"]
