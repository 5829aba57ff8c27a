"""Shared helpers for corpus checks."""

from __future__ import annotations

import posixpath
from typing import Callable, List

from doctrine.config import settings
from doctrine.models.corpus import Corpus
from doctrine.models.document import GuideDocument
from doctrine.models.report import Finding

Check = Callable[[Corpus], List[Finding]]


def _under(path: str, directory: str) -> bool:
    directory = posixpath.normpath(directory)
    return path.startswith(directory.rstrip("/") + "/")


def is_framework_guide(document: GuideDocument) -> bool:
    """True for documents in the frameworks directory other than the index."""
    if document.path == posixpath.normpath(settings.frameworks_index):
        return False
    return _under(document.path, settings.frameworks_dir)


def is_language_guide(path: str) -> bool:
    return _under(path, settings.languages_dir)


def error(code: str, path: str, message: str, line: int | None = None) -> Finding:
    return Finding(code=code, severity="error", path=path, line=line, message=message)


def warning(code: str, path: str, message: str, line: int | None = None) -> Finding:
    return Finding(code=code, severity="warning", path=path, line=line, message=message)
