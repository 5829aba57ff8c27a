"""Link and footnote models extracted from guide documents."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel

LinkKind = Literal["external", "anchor", "relative", "mailto"]


class CrossLink(BaseModel):
    """A link found in document prose."""

    text: str
    target: str
    line: int
    kind: LinkKind
    path: Optional[str] = None
    fragment: Optional[str] = None
    is_image: bool = False
    resolved: Optional[str] = None

    @property
    def is_relative(self) -> bool:
        return self.kind == "relative"


class Footnote(BaseModel):
    """A footnote definition (`[^label]: text`)."""

    label: str
    text: str
    url: Optional[str] = None
    line: int


class FootnoteRef(BaseModel):
    """A footnote reference (`[^label]`) in prose."""

    label: str
    line: int
