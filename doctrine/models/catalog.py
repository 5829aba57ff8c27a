"""Models for the frameworks index table."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class CatalogEntry(BaseModel):
    """One row of the frameworks table."""

    framework: str
    guide: Optional[str] = None
    guide_target: Optional[str] = None
    language_guide: Optional[str] = None
    language_target: Optional[str] = None
    line: int


class Catalog(BaseModel):
    """The frameworks index: framework name to guide and language guide."""

    path: str
    entries: List[CatalogEntry] = Field(default_factory=list)

    def by_guide(self, guide_path: str) -> Optional[CatalogEntry]:
        for entry in self.entries:
            if entry.guide == guide_path:
                return entry
        return None
