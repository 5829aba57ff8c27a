"""Relative link and anchor resolution checks."""

from __future__ import annotations

import logging
from typing import List, Optional

from doctrine.checks.base import error, warning
from doctrine.config import settings
from doctrine.models.corpus import Corpus
from doctrine.models.document import GuideDocument
from doctrine.models.reference import CrossLink
from doctrine.models.report import Finding

logger = logging.getLogger(__name__)

GITHUB_ANCHOR_PREFIX = "user-content-"


def normalize_fragment(fragment: str) -> str:
    fragment = fragment.lower()
    if fragment.startswith(GITHUB_ANCHOR_PREFIX):
        fragment = fragment[len(GITHUB_ANCHOR_PREFIX):]
    return fragment


def _anchor_finding(
    document: GuideDocument, link: CrossLink, target: Optional[GuideDocument]
) -> Optional[Finding]:
    if target is None or not link.fragment:
        return None
    if normalize_fragment(link.fragment) in target.anchors:
        return None
    return error(
        "broken-anchor",
        document.path,
        f"anchor '#{link.fragment}' not found in {target.path}",
        link.line,
    )


def check_links(corpus: Corpus) -> List[Finding]:
    """Every relative link must resolve to an existing file inside the root."""
    findings: List[Finding] = []
    for document in corpus.documents.values():
        for link in document.links:
            if link.kind == "anchor":
                if settings.check_anchors:
                    finding = _anchor_finding(document, link, document)
                    if finding:
                        findings.append(finding)
                continue
            if not link.is_relative:
                continue
            if link.resolved is None:
                findings.append(
                    warning(
                        "link-outside-root",
                        document.path,
                        f"link '{link.target}' points outside the corpus root",
                        link.line,
                    )
                )
                continue
            if not corpus.exists(link.resolved):
                findings.append(
                    error(
                        "broken-link",
                        document.path,
                        f"link '{link.target}' does not resolve ({link.resolved} missing)",
                        link.line,
                    )
                )
                continue
            if settings.check_anchors:
                finding = _anchor_finding(document, link, corpus.get(link.resolved))
                if finding:
                    findings.append(finding)
    logger.debug("Link check produced %s findings", len(findings))
    return findings
