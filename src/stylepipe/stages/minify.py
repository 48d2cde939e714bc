"""Minify stage: whitespace and comment removal via rcssmin."""

from __future__ import annotations

import enum
import logging
from pathlib import Path

import rcssmin

from stylepipe.exceptions import MinifyError

from .base import FileStage

log = logging.getLogger(__name__)


class KeepSpecialComments(enum.IntEnum):
    """Retention policy for ``/*! ... */`` comments."""

    NONE = 0
    FIRST = 1
    ALL = 2


def _string_end(css: str, start: int) -> int:
    """Index just past the quoted string opened at ``start``."""
    quote = css[start]
    j = start + 1
    n = len(css)
    while j < n and css[j] != quote:
        j += 2 if css[j] == "\\" else 1
    if j >= n:
        raise MinifyError("Unterminated string")
    return j + 1


def _comment_end(css: str, start: int) -> int:
    end = css.find("*/", start + 2)
    if end < 0:
        raise MinifyError("Unterminated comment")
    return end + 2


def check_balanced(css: str) -> None:
    """Raise MinifyError if braces are unbalanced outside strings and comments.

    Backslash escapes (``.icon-\\{``) are skipped wherever they appear.
    """
    depth = 0
    i = 0
    n = len(css)
    while i < n:
        ch = css[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "/" and css.startswith("/*", i):
            i = _comment_end(css, i)
            continue
        if ch in "\"'":
            i = _string_end(css, i)
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth < 0:
                raise MinifyError(f"Unexpected '}}' at offset {i}")
        i += 1
    if depth:
        raise MinifyError(f"{depth} unclosed block(s)")


def keep_first_special(css: str) -> str:
    """Drop every ``/*! ... */`` comment after the first one.

    Strings and escapes are copied as-is, so comment-like text inside
    ``content: "/*! x */"`` is never touched.
    """
    out = []
    seen = False
    i = 0
    n = len(css)
    while i < n:
        ch = css[i]
        if ch == "\\":
            out.append(css[i:i + 2])
            i += 2
        elif ch == "/" and css.startswith("/*", i):
            end = _comment_end(css, i)
            special = css.startswith("/*!", i)
            if not (special and seen):
                out.append(css[i:end])
            seen = seen or special
            i = end
        elif ch in "\"'":
            end = _string_end(css, i)
            out.append(css[i:end])
            i = end
        else:
            out.append(ch)
            i += 1
    return "".join(out)


class MinifyStage(FileStage):
    """Strip insignificant whitespace and comments.

    Never changes selectors or declarations; ``keep_special_comments``
    decides which ``/*! ... */`` comments survive.
    """

    name = "minify"

    def __init__(self, keep_special_comments: int = KeepSpecialComments.NONE) -> None:
        self.keep_special_comments = KeepSpecialComments(keep_special_comments)

    def describe(self) -> dict:
        return {"keepSpecialComments": int(self.keep_special_comments)}

    def minify(self, css: str) -> str:
        check_balanced(css)
        policy = self.keep_special_comments
        out = rcssmin.cssmin(css, keep_bang_comments=policy != KeepSpecialComments.NONE)

        if policy == KeepSpecialComments.FIRST:
            out = keep_first_special(out)
        return out.strip()

    def transform(self, data: bytes, path: Path | None = None) -> bytes:
        try:
            css = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MinifyError(f"{path or '<input>'}: not valid UTF-8 ({e.reason})")

        try:
            out = self.minify(css)
        except MinifyError as e:
            if path is None:
                raise
            raise MinifyError(f"{path}: {e}")

        log.debug("Minified %s: %d -> %d bytes", path or "<input>", len(data), len(out))
        return out.encode("utf-8")


__all__ = ["KeepSpecialComments", "MinifyStage", "check_balanced", "keep_first_special"]
