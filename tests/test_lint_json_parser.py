# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the JSON linter parsers (golangci-lint, ESLint, flake8)."""

from __future__ import annotations

import json

from prlint.constants import JSON_SUGGESTION
from prlint.models import RawToolOutput
from prlint.parsers import JsonParser, ParseContext, normalize_output, parse_lint_issues
from prlint.parsers.base import coerce_int
from prlint.severity import Severity


def _context(source: str = "GolangCILint", tool: str = "golangci-lint") -> ParseContext:
    return ParseContext(tool=tool, source=source)


def test_ignored_file_sentinel_yields_no_issues() -> None:
    payload = {
        "Issues": [
            {
                "FromLinter": "x",
                "Text": "File ignored because no matching configuration was supplied.",
                "Severity": "warning",
                "Pos": {"Filename": "a.go", "Line": 1, "Column": 1},
            }
        ]
    }

    assert list(parse_lint_issues(payload, _context())) == []


def test_golangci_issue_maps_every_field() -> None:
    payload = {
        "Issues": [
            {
                "FromLinter": "errcheck",
                "Text": "Error return value is not checked",
                "Severity": "Error",
                "Pos": {"Filename": "main.go", "Line": 12, "Column": 5},
            }
        ]
    }

    (issue,) = parse_lint_issues(payload, _context())

    assert issue.path == "main.go"
    assert issue.line == 12
    assert issue.column == 5
    assert issue.severity is Severity.ERROR
    assert issue.title == "GolangCILint Issue: Error return value is not checked"
    assert issue.description == "Error return value is not checked"
    assert issue.suggestion == JSON_SUGGESTION
    assert issue.source == "GolangCILint"


def test_missing_or_unknown_severity_defaults_to_warning() -> None:
    payload = {
        "Issues": [
            {"Text": "a", "Pos": {"Filename": "a.go", "Line": 1}},
            {"Text": "b", "Severity": "", "Pos": {"Filename": "a.go", "Line": 2}},
            {"Text": "c", "Severity": "bogus", "Pos": {"Filename": "a.go", "Line": 3}},
        ]
    }

    issues = parse_lint_issues(payload, _context())

    assert [issue.severity for issue in issues] == [Severity.WARNING] * 3


def test_issues_preserve_tool_order_and_duplicates() -> None:
    entry = {"Text": "dup", "Severity": "warning", "Pos": {"Filename": "a.go", "Line": 1}}
    payload = {"Issues": [entry, {"Text": "other", "Pos": {"Filename": "b.go", "Line": 9}}, entry]}

    issues = parse_lint_issues(payload, _context())

    assert [issue.description for issue in issues] == ["dup", "other", "dup"]


def test_null_issue_list_means_clean_run() -> None:
    assert list(parse_lint_issues({"Issues": None, "Report": {}}, _context())) == []


def test_eslint_native_report() -> None:
    payload = [
        {
            "filePath": "/tmp/ws/app.ts",
            "messages": [
                {"ruleId": "no-console", "severity": 1, "message": "Unexpected console statement.", "line": 3, "column": 1},
                {"ruleId": None, "severity": 2, "message": "Parsing error: Unexpected token", "line": 7, "column": 4},
            ],
        },
        {"filePath": "/tmp/ws/clean.ts", "messages": []},
    ]

    issues = parse_lint_issues(payload, _context(source="ESLint", tool="eslint"))

    assert [(issue.path, issue.line, issue.severity) for issue in issues] == [
        ("/tmp/ws/app.ts", 3, Severity.WARNING),
        ("/tmp/ws/app.ts", 7, Severity.ERROR),
    ]
    assert issues[0].title == "ESLint Issue: Unexpected console statement."


def test_flake8_json_mapping() -> None:
    payload = {
        "./app.py": [
            {"code": "E501", "filename": "./app.py", "line_number": 4, "column_number": 121, "text": "line too long"},
            {"code": "W291", "filename": "./app.py", "line_number": 5, "column_number": 9, "text": "trailing whitespace"},
            {"code": "C901", "filename": "./app.py", "line_number": 8, "column_number": 1, "text": "too complex"},
        ],
        "./empty.py": [],
    }

    issues = parse_lint_issues(payload, _context(source="Flake8", tool="flake8"))

    assert [issue.severity for issue in issues] == [Severity.ERROR, Severity.WARNING, Severity.INFO]
    assert issues[0].description == "E501 line too long"
    assert issues[0].column == 121


def test_paths_are_resolved_through_context() -> None:
    context = ParseContext(tool="golangci-lint", source="GolangCILint", resolve_path=lambda path: f"repo/{path}")
    payload = {"Issues": [{"Text": "x", "Pos": {"Filename": "a.go", "Line": 1}}]}

    (issue,) = parse_lint_issues(payload, context)

    assert issue.path == "repo/a.go"


def test_json_parser_handles_noisy_output() -> None:
    body = json.dumps({"Issues": [{"Text": "unused variable", "Severity": "warning", "Pos": {"Filename": "a.go", "Line": 2}}]})
    output = RawToolOutput(tool="golangci-lint", stdout=f"level=info msg=start\n{body}\n", exit_code=1)

    issues = JsonParser(parse_lint_issues).parse(output, context=_context())

    assert len(issues) == 1
    assert issues[0].description == "unused variable"


def test_json_parser_empty_output_is_clean() -> None:
    output = RawToolOutput(tool="flake8", stdout="   \n")

    assert JsonParser(parse_lint_issues).parse(output, context=_context(source="Flake8", tool="flake8")) == ()


def test_normalize_output_absorbs_parse_failures() -> None:
    output = RawToolOutput(tool="eslint", stdout="Oops! Something went wrong")

    normalized = normalize_output(JsonParser(parse_lint_issues), output, _context(source="ESLint", tool="eslint"))

    assert normalized.issues == ()
    assert normalized.error is not None
    assert normalized.error.tool == "eslint"


def test_non_finite_positions_fall_back_to_zero() -> None:
    payload = json.loads('{"Issues": [{"Text": "x", "Pos": {"Filename": "a.go", "Line": NaN, "Column": Infinity}}]}')

    (issue,) = parse_lint_issues(payload, _context())

    assert (issue.line, issue.column) == (0, 0)
    assert coerce_int(float("-inf"), default=7) == 7


def test_transform_value_errors_become_parse_errors() -> None:
    def explode(payload, context):
        raise ValueError("bad record")

    output = RawToolOutput(tool="golangci-lint", stdout='{"Issues": []}')

    normalized = normalize_output(JsonParser(explode), output, _context())

    assert normalized.issues == ()
    assert normalized.error is not None
    assert "bad record" in normalized.error.reason
