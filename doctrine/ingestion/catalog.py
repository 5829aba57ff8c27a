"""Parse the frameworks index table into a catalog."""

from __future__ import annotations

import logging
import posixpath
import re
from pathlib import Path
from typing import List, Optional, Tuple

from doctrine.config import settings
from doctrine.ingestion.parse_markdown import LINK_PATTERN, iter_prose_lines
from doctrine.models.catalog import Catalog, CatalogEntry
from doctrine.utils.slugs import classify_target, resolve_relative

logger = logging.getLogger(__name__)

SEPARATOR_CELL = re.compile(r"^:?-+:?$")


def split_row(line: str) -> List[str]:
    stripped = line.strip()
    if stripped.startswith("|"):
        stripped = stripped[1:]
    if stripped.endswith("|") and not stripped.endswith("\\|"):
        stripped = stripped[:-1]
    cells = re.split(r"(?<!\\)\|", stripped)
    return [cell.strip().replace("\\|", "|") for cell in cells]


def is_separator(cells: List[str]) -> bool:
    return bool(cells) and all(SEPARATOR_CELL.match(cell.replace(" ", "")) for cell in cells)


def find_columns(header: List[str]) -> Tuple[Optional[int], Optional[int], Optional[int]]:
    """Locate the framework, guide and language columns of a header row."""
    framework = guide = language = None
    for index, cell in enumerate(header):
        name = cell.lower()
        if framework is None and "framework" in name and "guide" not in name:
            framework = index
        elif language is None and "language" in name:
            language = index
        elif guide is None and "guide" in name:
            guide = index
    return framework, guide, language


def cell_text(cell: str) -> str:
    return LINK_PATTERN.sub(lambda m: m.group("text"), cell).strip()


def cell_target(cell: str, index_path: str) -> Tuple[Optional[str], Optional[str]]:
    """Return (raw target, corpus-relative path) of the first relative link in a cell."""
    for match in LINK_PATTERN.finditer(cell):
        target = match.group("target").strip("<>")
        kind, path, _ = classify_target(target)
        if kind == "relative" and path:
            return target, resolve_relative(index_path, path)
    return None, None


def parse_catalog(text: str, index_path: str) -> Catalog:
    """Parse the first table with a framework column in `text`."""
    lines = list(iter_prose_lines(text.splitlines()))
    entries: List[CatalogEntry] = []
    columns: Optional[Tuple[Optional[int], Optional[int], Optional[int]]] = None
    previous: Optional[List[str]] = None

    for number, line in lines:
        if not line.strip().startswith("|"):
            if columns is not None:
                break
            previous = None
            continue
        cells = split_row(line)
        if columns is None:
            if previous is not None and is_separator(cells):
                found = find_columns(previous)
                if found[0] is not None:
                    columns = found
                    continue
            previous = cells
            continue

        framework_col, guide_col, language_col = columns

        def cell(index: Optional[int]) -> str:
            if index is None or index >= len(cells):
                return ""
            return cells[index]

        guide_target, guide = cell_target(cell(guide_col), index_path)
        language_target, language_guide = cell_target(cell(language_col), index_path)
        if guide is None and guide_col is None:
            guide_target, guide = cell_target(cell(framework_col), index_path)
        entries.append(
            CatalogEntry(
                framework=cell_text(cell(framework_col)),
                guide=guide,
                guide_target=guide_target,
                language_guide=language_guide,
                language_target=language_target,
                line=number,
            )
        )

    if columns is None:
        logger.warning("No frameworks table found in %s", index_path)
    return Catalog(path=index_path, entries=entries)


def load_catalog(root: Optional[Path] = None) -> Optional[Catalog]:
    """Read the frameworks index below `root`, or None when it is absent."""
    root_path = root or settings.corpus_root_path
    index_path = posixpath.normpath(settings.frameworks_index)
    index_file = root_path / index_path
    if not index_file.is_file():
        logger.warning("Frameworks index %s does not exist", index_file)
        return None
    catalog = parse_catalog(index_file.read_text(encoding="utf-8"), index_path)
    logger.info("Loaded %s catalog entries from %s", len(catalog.entries), index_file)
    return catalog
