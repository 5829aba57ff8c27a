"""Footnote reference and definition checks."""

from __future__ import annotations

from collections import Counter
from typing import List

from doctrine.checks.base import error, warning
from doctrine.models.corpus import Corpus
from doctrine.models.report import Finding


def check_footnotes(corpus: Corpus) -> List[Finding]:
    """Labels are unique, every reference is defined, every definition used."""
    findings: List[Finding] = []
    for document in corpus.documents.values():
        counts = Counter(footnote.label for footnote in document.footnotes)
        defined = set(counts)
        referenced = {ref.label for ref in document.footnote_refs}

        reported = set()
        for footnote in document.footnotes:
            if counts[footnote.label] > 1 and footnote.label in reported:
                findings.append(
                    error(
                        "duplicate-footnote",
                        document.path,
                        f"footnote [^{footnote.label}] is defined more than once",
                        footnote.line,
                    )
                )
            reported.add(footnote.label)
            if footnote.label not in referenced and counts[footnote.label] == 1:
                findings.append(
                    warning(
                        "unused-footnote",
                        document.path,
                        f"footnote [^{footnote.label}] is never referenced",
                        footnote.line,
                    )
                )

        for ref in document.footnote_refs:
            if ref.label not in defined:
                findings.append(
                    error(
                        "undefined-footnote",
                        document.path,
                        f"footnote [^{ref.label}] has no definition",
                        ref.line,
                    )
                )
    return findings
