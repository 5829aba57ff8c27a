"""Document-level checks: readability and titles."""

from __future__ import annotations

from typing import List

from doctrine.checks.base import error
from doctrine.models.corpus import Corpus
from doctrine.models.report import Finding


def check_unreadable(corpus: Corpus) -> List[Finding]:
    return [
        error("unreadable-document", path, "file is not valid UTF-8")
        for path in corpus.unreadable
    ]


def check_titles(corpus: Corpus) -> List[Finding]:
    return [
        error("missing-title", document.path, "document has no level-1 heading")
        for document in corpus.documents.values()
        if not document.title
    ]
