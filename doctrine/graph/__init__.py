"""Cross-reference graph and outline helpers."""

from .cross_refs import CrossRefGraph, build_graph
from .outline import render_outline

__all__ = ["CrossRefGraph", "build_graph", "render_outline"]
