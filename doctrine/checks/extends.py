"""Framework guides must extend an existing language guide."""

from __future__ import annotations

from typing import List

from doctrine.checks.base import error, is_framework_guide, is_language_guide
from doctrine.models.corpus import Corpus
from doctrine.models.report import Finding


def check_extends(corpus: Corpus) -> List[Finding]:
    findings: List[Finding] = []
    for document in corpus.documents.values():
        if not is_framework_guide(document):
            continue
        link = document.extends
        if link is None:
            findings.append(
                error(
                    "missing-extends",
                    document.path,
                    "framework guide does not declare the language guide it extends",
                )
            )
            continue
        if link.kind != "relative" or link.resolved is None:
            findings.append(
                error(
                    "invalid-extends",
                    document.path,
                    f"extends link '{link.target}' is not a corpus-relative link",
                    link.line,
                )
            )
        elif link.resolved not in corpus.documents:
            findings.append(
                error(
                    "invalid-extends",
                    document.path,
                    f"extended guide {link.resolved} does not exist",
                    link.line,
                )
            )
        elif not is_language_guide(link.resolved):
            findings.append(
                error(
                    "invalid-extends",
                    document.path,
                    f"extended guide {link.resolved} is not a language guide",
                    link.line,
                )
            )
    return findings
