"""Heading anchors and link-target helpers."""

from __future__ import annotations

import posixpath
import re
from typing import Dict, Optional, Tuple
from urllib.parse import unquote

SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")
INLINE_LINK_TEXT = re.compile(r"!?\[([^\]]*)\]\([^)]*\)")
SLUG_STRIP_PATTERN = re.compile(r"[^\w\- ]", re.UNICODE)


def slugify(title: str) -> str:
    """Render a heading title the way GitHub renders its anchor."""
    text = INLINE_LINK_TEXT.sub(r"\1", title)
    text = re.sub(r"<[^>]+>", "", text)
    text = SLUG_STRIP_PATTERN.sub("", text.strip().lower())
    return text.replace(" ", "-")


class SlugCounter:
    """Assigns unique anchors within one document (`a`, `a-1`, `a-2`)."""

    def __init__(self) -> None:
        self._seen: Dict[str, int] = {}

    def unique(self, title: str) -> str:
        base = slugify(title)
        count = self._seen.get(base)
        if count is None:
            self._seen[base] = 0
            return base
        count += 1
        self._seen[base] = count
        candidate = f"{base}-{count}"
        self._seen.setdefault(candidate, 0)
        return candidate


def classify_target(target: str) -> Tuple[str, Optional[str], Optional[str]]:
    """Split a link target into (kind, path, fragment)."""
    if target.startswith("#"):
        return "anchor", None, unquote(target[1:])
    if target.lower().startswith("mailto:"):
        return "mailto", None, None
    if SCHEME_PATTERN.match(target) or target.startswith("//"):
        return "external", None, None
    path, _, fragment = target.partition("#")
    path = path.split("?", 1)[0]
    return "relative", unquote(path), unquote(fragment) if fragment else None


def resolve_relative(source_path: str, link_path: str) -> Optional[str]:
    """Resolve `link_path` against the directory of `source_path`.

    Both paths are corpus-relative POSIX paths. Paths starting with `/` are
    taken from the corpus root. Returns None when the result escapes the root.
    """
    if link_path.startswith("/"):
        joined = link_path.lstrip("/")
    else:
        joined = posixpath.join(posixpath.dirname(source_path), link_path)
    normalized = posixpath.normpath(joined) if joined else "."
    if normalized == ".." or normalized.startswith("../"):
        return None
    return normalized
