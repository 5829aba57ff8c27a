"""Parse guide Markdown into structured documents.

Only the structure the checks need is extracted: headings, inline and
reference-style links, footnotes and the preamble metadata lines
(`**Framework:** Axum`, `> **Extends:** [Rust](../languages/rust.md)`).
Fenced code blocks and inline code spans are ignored, so the illustrative
samples in the guides never produce links or headings.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from doctrine.models.document import GuideDocument, Section
from doctrine.models.reference import CrossLink, Footnote, FootnoteRef
from doctrine.utils.slugs import SlugCounter, classify_target, resolve_relative

logger = logging.getLogger(__name__)

FENCE_PATTERN = re.compile(r"^(?P<indent> *)(?P<fence>`{3,}|~{3,})")
LIST_ITEM_PATTERN = re.compile(r"^ *(?:[-*+]|\d{1,9}[.)]) {1,4}\S")
HEADING_PATTERN = re.compile(r"^\s{0,3}(#{1,6})\s+(.*?)(?:\s+#+)?\s*$")
FOOTNOTE_DEF_PATTERN = re.compile(r"^\s{0,3}\[\^([^\]\s]+)\]:\s*(.*)$")
FOOTNOTE_REF_PATTERN = re.compile(r"\[\^([^\]\s]+)\]")
REFERENCE_DEF_PATTERN = re.compile(r"^\s{0,3}\[([^\]^][^\]]*)\]:\s*(<[^>]*>|\S+)")
LINK_PATTERN = re.compile(
    r"(?P<bang>!?)\[(?P<text>(?:[^\[\]]|\[[^\]]*\])*)\]"
    r"\(\s*(?P<target><[^>]*>|[^)\s]+)"
    r"(?:\s+(?:\"[^\"]*\"|'[^']*'|\([^)]*\)))?\s*\)"
)
CODE_SPAN_PATTERN = re.compile(r"(`+)(?:.+?)\1")
META_PATTERN = re.compile(r"^(?:>\s*)?\*\*(?P<key>[A-Za-z][\w /-]*?):?\*\*:?\s*(?P<value>.*)$")
EXTENDS_PATTERN = re.compile(r"^(?:>\s*)?(?:\*\*)?extends\b", re.IGNORECASE)
URL_PATTERN = re.compile(r"https?://[^\s)>\]]+")
TITLE_SUFFIX_PATTERN = re.compile(r"\s+(?:style\s+guide|guide|conventions)\s*$", re.IGNORECASE)
VERSION_KEYS = ("version", "framework version", "target version")


def iter_prose_lines(lines: List[str]) -> Iterator[Tuple[int, str]]:
    """Yield (1-based line number, text) for lines outside fenced code.

    A fence may be indented up to three columns past the content offset of
    the enclosing list item, so samples nested under `1. Step:` are code too.
    """
    fence: Optional[str] = None
    fence_indent = 0
    list_offset: Optional[int] = None
    for number, line in enumerate(lines, start=1):
        expanded = line.expandtabs(4)
        match = FENCE_PATTERN.match(expanded)
        if fence is None:
            if expanded.strip():
                indent = len(expanded) - len(expanded.lstrip())
                item = LIST_ITEM_PATTERN.match(expanded)
                if item:
                    list_offset = item.end() - 1
                elif list_offset is not None and indent < list_offset:
                    list_offset = None
            if match:
                limit = 3 if list_offset is None else list_offset + 3
                if len(match.group("indent")) <= limit:
                    fence = match.group("fence")
                    fence_indent = len(match.group("indent"))
                    continue
            yield number, line
        elif (
            match
            and match.group("fence")[0] == fence[0]
            and len(match.group("fence")) >= len(fence)
            and len(match.group("indent")) <= fence_indent + 3
            and not expanded[match.end():].strip()
        ):
            fence = None


def strip_code_spans(line: str) -> str:
    return CODE_SPAN_PATTERN.sub(" ", line)


def _make_link(
    source_path: str, text: str, target: str, line: int, is_image: bool = False
) -> CrossLink:
    if target.startswith("<") and target.endswith(">"):
        target = target[1:-1].strip()
    kind, path, fragment = classify_target(target)
    resolved = None
    if kind == "relative":
        resolved = resolve_relative(source_path, path) if path else source_path
    return CrossLink(
        text=text.strip(),
        target=target,
        line=line,
        kind=kind,
        path=path,
        fragment=fragment,
        is_image=is_image,
        resolved=resolved,
    )


def extract_links(source_path: str, text: str, line: int) -> List[CrossLink]:
    """Return every inline link and image on one (code-free) line."""
    return [
        _make_link(
            source_path,
            match.group("text"),
            match.group("target"),
            line,
            is_image=bool(match.group("bang")),
        )
        for match in LINK_PATTERN.finditer(text)
    ]


def framework_from_title(title: Optional[str]) -> Optional[str]:
    if not title:
        return None
    name = TITLE_SUFFIX_PATTERN.sub("", title).strip()
    return name or None


def _lookup(metadata: Dict[str, str], *keys: str) -> Optional[str]:
    lowered = {key.lower(): value for key, value in metadata.items()}
    for key in keys:
        value = lowered.get(key)
        if value:
            return value
    return None


def parse_document(text: str, path: str) -> GuideDocument:
    """Parse Markdown `text` for the corpus-relative `path`."""
    lines = text.splitlines()
    slugs = SlugCounter()
    sections: List[Section] = []
    links: List[CrossLink] = []
    refs: List[FootnoteRef] = []
    footnotes: List[Footnote] = []
    metadata: Dict[str, str] = {}
    extends: Optional[CrossLink] = None
    title: Optional[str] = None
    in_preamble = True

    for number, raw in iter_prose_lines(lines):
        heading = HEADING_PATTERN.match(raw)
        if heading:
            level = len(heading.group(1))
            heading_title = heading.group(2).strip()
            if level == 1 and title is None:
                title = heading_title
            if level >= 2:
                in_preamble = False
            sections.append(
                Section(
                    level=level,
                    title=heading_title,
                    anchor=slugs.unique(heading_title),
                    line=number,
                )
            )
            heading_text = strip_code_spans(heading_title)
            links.extend(extract_links(path, heading_text, number))
            for match in FOOTNOTE_REF_PATTERN.finditer(heading_text):
                refs.append(FootnoteRef(label=match.group(1), line=number))
            continue

        line = strip_code_spans(raw)

        definition = FOOTNOTE_DEF_PATTERN.match(line)
        if definition:
            body = definition.group(2).strip()
            body_links = extract_links(path, body, number)
            links.extend(body_links)
            url_match = URL_PATTERN.search(body)
            url = url_match.group(0) if url_match else None
            if url is None and body_links:
                url = body_links[0].target
            footnotes.append(
                Footnote(label=definition.group(1), text=body, url=url, line=number)
            )
            continue

        reference = REFERENCE_DEF_PATTERN.match(line)
        if reference:
            links.append(_make_link(path, reference.group(1), reference.group(2), number))
            continue

        for match in FOOTNOTE_REF_PATTERN.finditer(line):
            refs.append(FootnoteRef(label=match.group(1), line=number))

        line_links = extract_links(path, line, number)
        links.extend(line_links)

        if in_preamble:
            meta = META_PATTERN.match(line.strip())
            if meta:
                value = LINK_PATTERN.sub(lambda m: m.group("text"), meta.group("value"))
                metadata[meta.group("key").strip()] = value.strip()
            if extends is None and line_links and EXTENDS_PATTERN.match(line.strip()):
                extends = line_links[0]

    framework = _lookup(metadata, "framework") or framework_from_title(title)
    return GuideDocument(
        path=path,
        title=title,
        framework=framework,
        framework_version=_lookup(metadata, *VERSION_KEYS),
        extends=extends,
        metadata=metadata,
        sections=sections,
        links=links,
        footnote_refs=refs,
        footnotes=footnotes,
        line_count=len(lines),
    )


def relative_path(file_path: Path, root: Path) -> str:
    """Corpus-relative path of `file_path`, without following symlinks."""
    absolute = Path(os.path.abspath(file_path))
    try:
        return absolute.relative_to(os.path.abspath(root)).as_posix()
    except ValueError as exc:
        raise ValueError(f"{file_path} is outside the corpus root {root}") from exc


def load_document(file_path: Path, root: Path) -> GuideDocument:
    """Read and parse one guide file below `root`."""
    path = relative_path(file_path, root)
    text = file_path.read_text(encoding="utf-8")
    document = parse_document(text, path)
    logger.debug(
        "Parsed %s: %s sections, %s links, %s footnotes",
        path,
        len(document.sections),
        len(document.links),
        len(document.footnotes),
    )
    return document
