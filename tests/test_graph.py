from doctrine.graph.cross_refs import CrossRefGraph, build_graph
from doctrine.graph.outline import render_outline
from doctrine.ingestion.corpus import load_corpus
from doctrine.ingestion.parse_markdown import parse_document

from tests.conftest import write_file


def test_cross_reference_edges(configured):
    graph = build_graph(load_corpus(configured))
    assert graph.outgoing("frameworks/fastapi.md") == [
        "frameworks/axum.md",
        "languages/python.md",
    ]
    assert graph.incoming("frameworks/axum.md") == [
        "frameworks/README.md",
        "frameworks/fastapi.md",
    ]
    assert graph.incoming("languages/python.md") == [
        "frameworks/README.md",
        "frameworks/fastapi.md",
    ]
    assert ("README.md", "frameworks/README.md") in graph.edges()


def test_orphans_ignore_index_pages(configured):
    write_file(configured, "languages/go.md", "# Go\n\n[self](#go) [me](go.md)\n")
    graph = build_graph(load_corpus(configured))
    assert graph.orphans() == ["languages/go.md"]
    assert graph.outgoing("languages/go.md") == []


def test_edges_skip_missing_targets():
    graph = CrossRefGraph(["a.md", "b.md"])
    graph.add_edge("a.md", "b.md")
    graph.add_edge("a.md", "missing.md")
    graph.add_edge("b.md", "b.md")
    assert graph.edges() == [("a.md", "b.md")]
    assert graph.orphans() == ["a.md"]


def test_render_outline():
    text = (
        "# Guide\n\n## Setup\n\n### Install Steps\n\n#### Deep\n\n"
        "## Setup\n\n## `async` Views\n"
    )
    doc = parse_document(text, "g.md")
    assert render_outline(doc) == (
        "- [Setup](#setup)\n"
        "  - [Install Steps](#install-steps)\n"
        "- [Setup](#setup-1)\n"
        "- [`async` Views](#async-views)"
    )
    assert render_outline(doc, max_level=2).count("\n") == 2
