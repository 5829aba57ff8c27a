"""Typed models shared across the application."""

from .catalog import Catalog, CatalogEntry
from .corpus import Corpus
from .document import DocumentSummary, GuideDocument, Section
from .reference import CrossLink, Footnote, FootnoteRef, LinkKind
from .report import CheckReport, CheckVerdict, Finding, Severity

__all__ = [
    "Catalog",
    "CatalogEntry",
    "CheckReport",
    "CheckVerdict",
    "Corpus",
    "CrossLink",
    "DocumentSummary",
    "Finding",
    "Footnote",
    "FootnoteRef",
    "GuideDocument",
    "LinkKind",
    "Section",
    "Severity",
]
