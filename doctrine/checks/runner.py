"""Run every corpus check and write the report."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from doctrine.checks.base import Check
from doctrine.checks.catalog import check_catalog
from doctrine.checks.documents import check_titles, check_unreadable
from doctrine.checks.extends import check_extends
from doctrine.checks.footnotes import check_footnotes
from doctrine.checks.links import check_links
from doctrine.config import settings
from doctrine.ingestion.corpus import load_corpus
from doctrine.models.corpus import Corpus
from doctrine.models.report import CheckReport, Finding

logger = logging.getLogger(__name__)

DEFAULT_CHECKS: List[Check] = [
    check_unreadable,
    check_titles,
    check_links,
    check_footnotes,
    check_extends,
    check_catalog,
]


def run_checks(corpus: Corpus, checks: Optional[Sequence[Check]] = None) -> CheckReport:
    """Apply `checks` (all of them by default) and collect the findings."""
    findings: List[Finding] = []
    for check in DEFAULT_CHECKS if checks is None else checks:
        found = check(corpus)
        logger.debug("%s: %s findings", check.__name__, len(found))
        findings.extend(found)
    findings.sort(key=lambda f: (f.path, f.line or 0, f.code))
    return CheckReport(
        root=str(corpus.root),
        documents_checked=len(corpus.documents) + len(corpus.unreadable),
        findings=findings,
    )


def write_report(report: CheckReport, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(report.model_dump_json(indent=2), encoding="utf-8")
    logger.info("Wrote report with %s findings to %s", len(report.findings), output_path)


def log_findings(report: CheckReport) -> None:
    for finding in report.findings:
        level = logging.ERROR if finding.severity == "error" else logging.WARNING
        logger.log(level, "%s [%s] %s", finding.location(), finding.code, finding.message)
    logger.info(
        "Checked %s documents: %s errors, %s warnings",
        report.documents_checked,
        report.error_count,
        report.warning_count,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Check a Doctrine style-guide corpus.")
    parser.add_argument("--root", type=Path, default=None, help="corpus root directory")
    parser.add_argument(
        "--strict", action="store_true", default=None, help="fail on warnings too"
    )
    parser.add_argument("--report", type=Path, default=None, help="JSON report path")
    parser.add_argument(
        "--no-anchors", action="store_true", help="skip heading anchor checks"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    root = args.root or settings.corpus_root_path
    if not root.exists():
        logger.error("Corpus root %s does not exist", root)
        return 2

    check_anchors = settings.check_anchors
    if args.no_anchors:
        settings.check_anchors = False
    try:
        report = run_checks(load_corpus(root))
    finally:
        settings.check_anchors = check_anchors
    log_findings(report)
    write_report(report, args.report or settings.report_path_obj)
    strict = settings.strict if args.strict is None else args.strict
    return report.exit_code(strict=strict)


if __name__ == "__main__":
    raise SystemExit(main())
