"""FastAPI application entry point."""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse

from doctrine.checks.runner import run_checks
from doctrine.graph.cross_refs import build_graph
from doctrine.graph.outline import render_outline
from doctrine.ingestion.corpus import load_corpus
from doctrine.models.catalog import Catalog
from doctrine.models.corpus import Corpus
from doctrine.models.document import DocumentSummary, GuideDocument
from doctrine.models.report import CheckVerdict

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Doctrine",
    description="Read-only access to the Doctrine style-guide corpus",
    version="0.1.0",
)


def _get_document(corpus: Corpus, doc_path: str) -> GuideDocument:
    document = corpus.get(doc_path)
    if document is None:
        raise HTTPException(status_code=404, detail=f"Unknown document {doc_path}")
    return document


@app.get("/health")
def health() -> dict[str, str]:
    """Simple readiness probe."""
    return {"status": "ok"}


@app.get("/documents", response_model=List[DocumentSummary])
def list_documents() -> List[DocumentSummary]:
    corpus = load_corpus()
    return [corpus.documents[path].summary() for path in sorted(corpus.documents)]


@app.get("/documents/{doc_path:path}/outline", response_class=PlainTextResponse)
def document_outline(doc_path: str, max_level: int = 3) -> str:
    """Table of contents for one guide as Markdown."""
    return render_outline(_get_document(load_corpus(), doc_path), max_level=max_level)


@app.get("/documents/{doc_path:path}/backlinks", response_model=List[str])
def document_backlinks(doc_path: str) -> List[str]:
    corpus = load_corpus()
    _get_document(corpus, doc_path)
    return build_graph(corpus).incoming(doc_path)


@app.get("/documents/{doc_path:path}", response_model=GuideDocument)
def get_document(doc_path: str) -> GuideDocument:
    return _get_document(load_corpus(), doc_path)


@app.get("/catalog", response_model=Catalog)
def get_catalog() -> Catalog:
    corpus = load_corpus()
    if corpus.catalog is None:
        raise HTTPException(status_code=404, detail="Frameworks index not found.")
    return corpus.catalog


@app.get("/check", response_model=CheckVerdict)
def check(strict: bool = False) -> CheckVerdict:
    """Run every check; `passed` treats warnings as failures when strict."""
    verdict = CheckVerdict.from_report(run_checks(load_corpus()), strict=strict)
    if not verdict.passed:
        logger.info(
            "Check found %s errors and %s warnings", verdict.error_count, verdict.warning_count
        )
    return verdict
