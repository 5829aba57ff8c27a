import json

from doctrine.ingestion.corpus import load_corpus
from doctrine.ingestion.scan_guides import discover_guides, export_metadata

from tests.conftest import write_file


def test_discover_guides_skips_excluded_dirs(corpus_root):
    write_file(corpus_root, "node_modules/pkg/README.md", "# Vendored\n")
    write_file(corpus_root, "languages/notes.txt", "not markdown")
    found = [p.relative_to(corpus_root).as_posix() for p in discover_guides(corpus_root)]
    assert found == [
        "README.md",
        "frameworks/README.md",
        "frameworks/axum.md",
        "frameworks/fastapi.md",
        "languages/python.md",
        "languages/rust.md",
    ]


def test_discover_guides_missing_root(tmp_path):
    assert discover_guides(tmp_path / "missing") == []


def test_load_corpus_records_unreadable_files(corpus_root):
    (corpus_root / "languages" / "broken.md").write_bytes(b"# Bad\n\xff\xfe\n")
    corpus = load_corpus(corpus_root)
    assert corpus.unreadable == ["languages/broken.md"]
    assert "languages/broken.md" not in corpus.documents
    assert len(corpus.documents) == 6
    assert corpus.catalog is not None


def test_export_metadata(corpus_root, tmp_path):
    corpus = load_corpus(corpus_root)
    output = tmp_path / "out" / "docs.jsonl"
    count = export_metadata(corpus.documents.values(), output)
    rows = [json.loads(line) for line in output.read_text(encoding="utf-8").splitlines()]
    assert count == len(rows) == 6
    axum = next(row for row in rows if row["path"] == "frameworks/axum.md")
    assert axum["framework"] == "Axum"
    assert axum["extends"] == "languages/rust.md"
    assert axum["footnote_count"] == 1


def test_symlinked_guide_keeps_its_own_path(corpus_root):
    link = corpus_root / "frameworks" / "rust-link.md"
    link.symlink_to(corpus_root / "languages" / "rust.md")
    corpus = load_corpus(corpus_root)
    assert "frameworks/rust-link.md" in corpus.documents
    assert "languages/rust.md" in corpus.documents
    assert corpus.documents["frameworks/rust-link.md"].title == "Rust Style Guide"


def test_symlink_to_file_outside_root_loads(corpus_root, tmp_path):
    shared = tmp_path / "shared.md"
    shared.write_text("# Shared\n\nSee [python](python.md).\n", encoding="utf-8")
    (corpus_root / "languages" / "shared.md").symlink_to(shared)
    corpus = load_corpus(corpus_root)
    document = corpus.documents["languages/shared.md"]
    assert document.links[0].resolved == "languages/python.md"
