"""Corpus discovery and Markdown parsing."""

from .catalog import load_catalog, parse_catalog
from .corpus import load_corpus
from .parse_markdown import load_document, parse_document
from .scan_guides import discover_guides

__all__ = [
    "discover_guides",
    "load_catalog",
    "load_corpus",
    "load_document",
    "parse_catalog",
    "parse_document",
]
