"""Scan the corpus directory and collect guide metadata."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from doctrine.config import settings
from doctrine.models.document import GuideDocument

logger = logging.getLogger(__name__)


def normalize_guide_path(path: Path, root: Path) -> str:
    """Corpus-relative POSIX path used as the document identifier."""
    return path.relative_to(root).as_posix()


def is_excluded(path: Path, root: Path, excluded: Iterable[str]) -> bool:
    parts = path.relative_to(root).parts[:-1]
    excluded_set = set(excluded)
    return any(part in excluded_set for part in parts)


def discover_guides(root: Optional[Path] = None) -> List[Path]:
    """Return every Markdown file below the corpus root."""
    root_path = root or settings.corpus_root_path
    if not root_path.exists():
        logger.warning("Corpus root %s does not exist", root_path)
        return []

    guides = [
        path
        for path in sorted(root_path.rglob("*.md"))
        if path.is_file() and not is_excluded(path, root_path, settings.exclude_dirs)
    ]
    logger.info("Discovered %s Markdown documents under %s", len(guides), root_path)
    return guides


def export_metadata(documents: Iterable[GuideDocument], output_path: Path) -> int:
    """Persist document summaries as JSON lines."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with output_path.open("w", encoding="utf-8") as handle:
        for count, document in enumerate(documents, start=1):
            handle.write(json.dumps(document.summary().model_dump()) + "\n")
    logger.info("Wrote %s document metadata rows to %s", count, output_path)
    return count


def main() -> None:
    """CLI entry point."""
    from doctrine.ingestion.corpus import load_corpus

    logging.basicConfig(level=settings.log_level)
    corpus = load_corpus()
    if not corpus.documents:
        logger.error("No guides found at %s", settings.corpus_root)
        return
    export_metadata(corpus.documents.values(), settings.metadata_path_obj)


if __name__ == "__main__":
    main()
