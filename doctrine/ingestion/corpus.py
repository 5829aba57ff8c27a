"""Load every guide and the catalog into a single corpus."""

from __future__ import annotations

import logging
import posixpath
from pathlib import Path
from typing import Optional

from doctrine.config import settings
from doctrine.ingestion.catalog import load_catalog
from doctrine.ingestion.parse_markdown import load_document
from doctrine.ingestion.scan_guides import discover_guides, normalize_guide_path
from doctrine.models.corpus import Corpus

logger = logging.getLogger(__name__)


def load_corpus(root: Optional[Path] = None) -> Corpus:
    """Parse the corpus below `root` (defaults to the configured root)."""
    root_path = root or settings.corpus_root_path
    corpus = Corpus(root=root_path)
    for file_path in discover_guides(root_path):
        try:
            document = load_document(file_path, root_path)
        except UnicodeDecodeError as exc:
            path = normalize_guide_path(file_path, root_path)
            logger.error("Cannot decode %s as UTF-8: %s", path, exc)
            corpus.unreadable.append(path)
            continue
        except ValueError as exc:
            logger.error("Skipping %s: %s", file_path, exc)
            continue
        corpus.documents[document.path] = document

    try:
        corpus.catalog = load_catalog(root_path)
    except UnicodeDecodeError as exc:
        index_path = posixpath.normpath(settings.frameworks_index)
        logger.error("Cannot decode frameworks index %s as UTF-8: %s", index_path, exc)
        if index_path not in corpus.unreadable:
            corpus.unreadable.append(index_path)
    logger.info(
        "Loaded %s documents from %s (%s unreadable)",
        len(corpus.documents),
        root_path,
        len(corpus.unreadable),
    )
    return corpus
