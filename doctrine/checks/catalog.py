"""Consistency between the frameworks index and the guides."""

from __future__ import annotations

import posixpath
from typing import List

from doctrine.checks.base import error, is_framework_guide, warning
from doctrine.config import settings
from doctrine.models.corpus import Corpus
from doctrine.models.report import Finding


def check_catalog(corpus: Corpus) -> List[Finding]:
    findings: List[Finding] = []
    guides = [doc for doc in corpus.documents.values() if is_framework_guide(doc)]
    catalog = corpus.catalog
    if catalog is None:
        index_path = posixpath.normpath(settings.frameworks_index)
        # An undecodable index is already reported as unreadable-document.
        if guides and index_path not in corpus.unreadable:
            findings.append(
                warning("catalog-missing", index_path, "frameworks index not found")
            )
        return findings

    for entry in catalog.entries:
        if entry.guide is None:
            findings.append(
                error(
                    "catalog-broken-entry",
                    catalog.path,
                    f"entry '{entry.framework}' has no guide link",
                    entry.line,
                )
            )
        elif not corpus.exists(entry.guide):
            findings.append(
                error(
                    "catalog-broken-entry",
                    catalog.path,
                    f"entry '{entry.framework}' links to missing guide {entry.guide}",
                    entry.line,
                )
            )
        if entry.language_target and (
            entry.language_guide is None or not corpus.exists(entry.language_guide)
        ):
            findings.append(
                error(
                    "catalog-broken-entry",
                    catalog.path,
                    f"entry '{entry.framework}' links to missing language guide "
                    f"{entry.language_guide or entry.language_target}",
                    entry.line,
                )
            )

    for document in guides:
        entry = catalog.by_guide(document.path)
        if entry is None:
            findings.append(
                warning(
                    "catalog-unlisted-guide",
                    document.path,
                    f"guide is not listed in {catalog.path}",
                )
            )
            continue
        extended = document.extends.resolved if document.extends else None
        if entry.language_guide and extended and entry.language_guide != extended:
            findings.append(
                warning(
                    "catalog-language-mismatch",
                    document.path,
                    f"catalog lists {entry.language_guide} but the guide extends {extended}",
                    document.extends.line,
                )
            )
    return findings
