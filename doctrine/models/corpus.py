"""The loaded corpus: every parsed document plus the catalog."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .catalog import Catalog
from .document import GuideDocument


class Corpus(BaseModel):
    """All documents below one corpus root."""

    root: Path
    documents: Dict[str, GuideDocument] = Field(default_factory=dict)
    catalog: Optional[Catalog] = None
    unreadable: List[str] = Field(default_factory=list)

    def get(self, path: str) -> Optional[GuideDocument]:
        return self.documents.get(path)

    def exists(self, path: str) -> bool:
        """True when `path` names any file or directory below the root."""
        return (self.root / path).exists()
