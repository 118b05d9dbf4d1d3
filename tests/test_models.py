# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the canonical data models and severity helpers."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from prlint.languages import LanguageClass, detect_language, detect_languages
from prlint.models import AnalysisResult, Issue, RawToolOutput, SourceFile, ToolReport, ToolStatus
from prlint.severity import Severity, normalize_severity, severity_from_code, severity_from_level


def _issue(severity: str = "warning") -> Issue:
    return Issue(path="a.go", severity=severity, title="T", description="D", source="GolangCILint")


def test_issue_severity_is_lower_cased() -> None:
    assert _issue("ERROR").severity is Severity.ERROR


def test_issue_rejects_unknown_severity() -> None:
    with pytest.raises(ValidationError):
        _issue("critical")


def test_issue_is_immutable() -> None:
    issue = _issue()

    with pytest.raises(ValidationError):
        issue.line = 3  # type: ignore[misc]


def test_source_file_accepts_text_content() -> None:
    assert SourceFile(path="a.py", content="é").content == "é".encode()


def test_combined_output_orders_stdout_first() -> None:
    assert RawToolOutput(tool="t", stdout="out", stderr="err").combined == "out\nerr"
    assert RawToolOutput(tool="t", stderr="err").combined == "err"


def test_advisories_for_partial_coverage_and_degraded_tools() -> None:
    result = AnalysisResult(
        issues=(_issue("error"),),
        missing_languages=(LanguageClass.JAVA,),
        reports=(
            ToolReport(tool="golangci-lint", language=LanguageClass.GO, status=ToolStatus.COMPLETED),
            ToolReport(
                tool="flake8",
                language=LanguageClass.PYTHON,
                status=ToolStatus.UNAVAILABLE,
                detail="flake8 is not installed",
            ),
        ),
    )

    assert result.issue_count == 1
    assert result.has_errors()
    assert result.advisories == (
        "Add a Java code file to your PR",
        "flake8 (Python) unavailable: flake8 is not installed",
    )


def test_detect_language_by_suffix() -> None:
    assert detect_language("pkg/server.go") is LanguageClass.GO
    assert detect_language("web/index.ts") is LanguageClass.TYPESCRIPT
    assert detect_language("tool.py") is LanguageClass.PYTHON
    assert detect_language("Main.java") is LanguageClass.JAVA
    assert detect_language("script.js") is LanguageClass.UNKNOWN
    assert detect_languages(["a.go", "b.txt", "c.go"]) == {LanguageClass.GO}


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("Error", Severity.ERROR),
        (" warning ", Severity.WARNING),
        ("warn", Severity.WARNING),
        ("note", Severity.INFO),
        ("", Severity.WARNING),
        (None, Severity.WARNING),
        ("mystery", Severity.WARNING),
    ],
)
def test_normalize_severity(label: object, expected: Severity) -> None:
    assert normalize_severity(label) is expected


def test_numeric_and_code_severities() -> None:
    assert severity_from_level(2) is Severity.ERROR
    assert severity_from_level(1) is Severity.WARNING
    assert severity_from_level(0) is Severity.INFO
    assert severity_from_level(True) is Severity.INFO
    assert severity_from_code("F401") is Severity.ERROR
    assert severity_from_code("W605") is Severity.WARNING
    assert severity_from_code("N802") is Severity.INFO
    assert severity_from_code(None) is Severity.INFO
