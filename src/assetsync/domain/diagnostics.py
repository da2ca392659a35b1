"""Diagnostics attached to a single resource instance."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    severity: Severity
    summary: str
    detail: str = ""

    def __str__(self) -> str:
        if not self.detail:
            return f"{self.severity}: {self.summary}"
        return f"{self.severity}: {self.summary} {self.detail}"


class Diagnostics(list[Diagnostic]):
    """Ordered diagnostics of one operation; any error entry is fatal for the instance."""

    def has_error(self) -> bool:
        return any(diagnostic.severity is Severity.ERROR for diagnostic in self)

    def errors(self) -> list[Diagnostic]:
        return [diagnostic for diagnostic in self if diagnostic.severity is Severity.ERROR]

    def add_error(self, summary: str, detail: str = "") -> None:
        self.append(Diagnostic(Severity.ERROR, summary, detail))

    def add_warning(self, summary: str, detail: str = "") -> None:
        self.append(Diagnostic(Severity.WARNING, summary, detail))

    def add_exception(self, exc: Exception) -> None:
        summary = getattr(exc, "summary", None) or type(exc).__name__
        self.add_error(str(summary), str(exc))
