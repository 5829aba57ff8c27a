"""Check findings and the aggregate report."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, computed_field

Severity = Literal["error", "warning"]


class Finding(BaseModel):
    """A single problem found in the corpus."""

    code: str
    severity: Severity
    path: str
    line: Optional[int] = None
    message: str

    def location(self) -> str:
        if self.line:
            return f"{self.path}:{self.line}"
        return self.path


class CheckReport(BaseModel):
    """Outcome of running every check over a corpus."""

    root: str
    documents_checked: int
    findings: List[Finding] = Field(default_factory=list)

    @computed_field
    @property
    def error_count(self) -> int:
        return sum(1 for finding in self.findings if finding.severity == "error")

    @computed_field
    @property
    def warning_count(self) -> int:
        return sum(1 for finding in self.findings if finding.severity == "warning")

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    def exit_code(self, strict: bool = False) -> int:
        if self.has_errors:
            return 1
        if strict and self.warning_count:
            return 1
        return 0


class CheckVerdict(CheckReport):
    """A report plus whether it passes under the requested strictness."""

    strict: bool = False
    passed: bool = True

    @classmethod
    def from_report(cls, report: CheckReport, strict: bool = False) -> "CheckVerdict":
        return cls(
            root=report.root,
            documents_checked=report.documents_checked,
            findings=report.findings,
            strict=strict,
            passed=report.exit_code(strict=strict) == 0,
        )
