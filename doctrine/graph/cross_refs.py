"""Cross-reference graph between corpus documents."""

from __future__ import annotations

import logging
import posixpath
from collections import defaultdict
from typing import Dict, Iterable, List, Set, Tuple

from doctrine.config import settings
from doctrine.models.corpus import Corpus

logger = logging.getLogger(__name__)

INDEX_NAMES = {"README.md", "index.md"}


class CrossRefGraph:
    """Directed graph of document-to-document links."""

    def __init__(self, nodes: Iterable[str]) -> None:
        self.nodes: Set[str] = set(nodes)
        self._outgoing: Dict[str, Set[str]] = defaultdict(set)
        self._incoming: Dict[str, Set[str]] = defaultdict(set)

    def add_edge(self, source: str, target: str) -> None:
        if source == target or target not in self.nodes:
            return
        self._outgoing[source].add(target)
        self._incoming[target].add(source)

    def outgoing(self, path: str) -> List[str]:
        return sorted(self._outgoing.get(path, ()))

    def incoming(self, path: str) -> List[str]:
        """Documents linking to `path` (its backlinks)."""
        return sorted(self._incoming.get(path, ()))

    def edges(self) -> List[Tuple[str, str]]:
        return sorted(
            (source, target)
            for source, targets in self._outgoing.items()
            for target in targets
        )

    def orphans(self) -> List[str]:
        """Documents nothing links to, ignoring index pages."""
        index_path = posixpath.normpath(settings.frameworks_index)
        return sorted(
            node
            for node in self.nodes
            if not self._incoming.get(node)
            and node != index_path
            and posixpath.basename(node) not in INDEX_NAMES
        )


def build_graph(corpus: Corpus) -> CrossRefGraph:
    """Build the link graph from every resolved relative link."""
    graph = CrossRefGraph(corpus.documents)
    for document in corpus.documents.values():
        for link in document.links:
            if link.is_relative and link.resolved:
                graph.add_edge(document.path, link.resolved)
    if corpus.catalog is not None:
        for entry in corpus.catalog.entries:
            for target in (entry.guide, entry.language_guide):
                if target:
                    graph.add_edge(corpus.catalog.path, target)
    logger.debug("Built cross-reference graph with %s edges", len(graph.edges()))
    return graph
