# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the prlint package."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .languages import ANALYZED_LANGUAGES, LanguageClass
from .severity import Severity


class SourceFile(BaseModel):
    """A changed file supplied by the caller; read-only to the engine."""

    model_config = ConfigDict(frozen=True)

    path: str
    content: bytes = b""

    @field_validator("content", mode="before")
    @classmethod
    def _coerce_content(cls, value: object) -> object:
        """Accept text content by encoding it as UTF-8."""
        if isinstance(value, str):
            return value.encode("utf-8")
        return value


class ExitCategory(str, Enum):
    """Interpretation of a tool exit status under its exit-code policy."""

    SUCCESS = "success"
    DIAGNOSTIC = "diagnostic"
    TOOL_FAILURE = "tool_failure"
    UNKNOWN = "unknown"


class ToolStatus(str, Enum):
    """How a tool's contribution to a run was obtained."""

    COMPLETED = "completed"
    UNAVAILABLE = "unavailable"
    FAILED = "failed"
    UNPARSEABLE = "unparseable"


class ToolInvocation(BaseModel):
    """Concrete plan for running one analyzer over one language's files."""

    model_config = ConfigDict(frozen=True)

    tool: str
    language: LanguageClass
    files: tuple[Path, ...]
    config_path: Path
    timeout: float | None = None
    command: tuple[str, ...] = Field(default_factory=tuple)
    cwd: Path


class RawToolOutput(BaseModel):
    """Captured process output, consumed immediately by a parser."""

    tool: str
    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0

    @property
    def combined(self) -> str:
        """Return stdout followed by stderr, mirroring a combined output stream."""
        if not self.stderr:
            return self.stdout
        if not self.stdout:
            return self.stderr
        return f"{self.stdout}\n{self.stderr}"


class Issue(BaseModel):
    """Canonical review finding produced by every tool parser."""

    model_config = ConfigDict(frozen=True)

    path: str
    line: int = 0
    column: int = 0
    severity: Severity
    title: str
    description: str
    suggestion: str = ""
    source: str

    @field_validator("severity", mode="before")
    @classmethod
    def _lower_severity(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, Severity):
            return value.strip().lower()
        return value


class ToolReport(BaseModel):
    """Per-tool record of how its contribution was obtained or why it degraded."""

    model_config = ConfigDict(frozen=True)

    tool: str
    language: LanguageClass
    status: ToolStatus
    exit_code: int | None = None
    exit_category: ExitCategory | None = None
    issue_count: int = 0
    detail: str = ""

    @property
    def degraded(self) -> bool:
        """Return ``True`` when the tool contributed nothing because of a failure."""
        return self.status is not ToolStatus.COMPLETED


class AnalysisResult(BaseModel):
    """Aggregate result of one analysis run."""

    model_config = ConfigDict(frozen=True)

    issues: tuple[Issue, ...] = Field(default_factory=tuple)
    missing_languages: tuple[LanguageClass, ...] = Field(default_factory=tuple)
    reports: tuple[ToolReport, ...] = Field(default_factory=tuple)

    @property
    def issue_count(self) -> int:
        """Return the combined number of issues across every tool."""
        return len(self.issues)

    @property
    def advisories(self) -> tuple[str, ...]:
        """Return human hints about missing languages and degraded tools."""
        hints: list[str] = []
        if set(self.missing_languages) >= set(ANALYZED_LANGUAGES):
            names = " or ".join(language.display_name for language in ANALYZED_LANGUAGES)
            hints.append(f"Add either a {names} file to your PR")
        else:
            hints.extend(
                f"Add a {language.display_name} code file to your PR" for language in self.missing_languages
            )
        for report in self.reports:
            if report.degraded:
                hints.append(f"{report.tool} ({report.language.display_name}) {report.status.value}: {report.detail}")
        return tuple(hints)

    def has_errors(self) -> bool:
        """Return ``True`` when any issue carries ``error`` severity."""
        return any(issue.severity is Severity.ERROR for issue in self.issues)


__all__ = [
    "AnalysisResult",
    "ExitCategory",
    "Issue",
    "RawToolOutput",
    "SourceFile",
    "ToolInvocation",
    "ToolReport",
    "ToolStatus",
]
