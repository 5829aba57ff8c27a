"""Document-level data models."""

from __future__ import annotations

from typing import Dict, List, Optional, Set

from pydantic import BaseModel, Field

from .reference import CrossLink, Footnote, FootnoteRef


class Section(BaseModel):
    """A heading and the anchor it renders to."""

    level: int
    title: str
    anchor: str
    line: int


class DocumentSummary(BaseModel):
    """Compact metadata row for listings and JSONL export."""

    path: str
    title: Optional[str] = None
    framework: Optional[str] = None
    framework_version: Optional[str] = None
    extends: Optional[str] = None
    section_count: int = 0
    link_count: int = 0
    footnote_count: int = 0


class GuideDocument(BaseModel):
    """A parsed style-guide document."""

    path: str
    title: Optional[str] = None
    framework: Optional[str] = None
    framework_version: Optional[str] = None
    extends: Optional[CrossLink] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    sections: List[Section] = Field(default_factory=list)
    links: List[CrossLink] = Field(default_factory=list)
    footnote_refs: List[FootnoteRef] = Field(default_factory=list)
    footnotes: List[Footnote] = Field(default_factory=list)
    line_count: int = 0

    @property
    def anchors(self) -> Set[str]:
        return {section.anchor for section in self.sections}

    def summary(self) -> DocumentSummary:
        return DocumentSummary(
            path=self.path,
            title=self.title,
            framework=self.framework,
            framework_version=self.framework_version,
            extends=self.extends.resolved if self.extends else None,
            section_count=len(self.sections),
            link_count=len(self.links),
            footnote_count=len(self.footnotes),
        )
