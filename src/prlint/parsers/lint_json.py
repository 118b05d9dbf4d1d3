# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsers for linters reporting JSON (golangci-lint, ESLint, flake8)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

from ..constants import IGNORED_FILE_SENTINEL, JSON_SUGGESTION
from ..models import Issue
from ..severity import Severity, normalize_severity, severity_from_code, severity_from_level
from .base import JsonValue, ParseContext, coerce_int, coerce_str, iter_dicts


def parse_lint_issues(payload: JsonValue, context: ParseContext) -> Sequence[Issue]:
    """Reconcile the JSON shapes emitted by the supported linters into issues.

    Recognised shapes, checked in order:

    * ``{"Issues": [{"Text", "Severity", "Pos": {...}}]}`` (golangci-lint report)
    * a bare list of golangci-lint issue objects
    * ``[{"filePath", "messages": [...]}]`` (ESLint ``--format json``)
    * ``{"path.py": [{"code", "line_number", ...}]}`` (flake8 ``--format=json``)

    Entries whose text is the "file ignored" sentinel are dropped.

    Args:
        payload: Decoded JSON payload.
        context: Tool and path-resolution details for the run.

    Returns:
        Sequence[Issue]: Issues in the order the tool reported them.
    """

    if isinstance(payload, Mapping):
        if "Issues" in payload or "issues" in payload:
            return _golangci_issues(iter_dicts(payload.get("Issues", payload.get("issues"))), context)
        return list(_flake8_issues(payload, context))
    records = list(iter_dicts(payload))
    if any("messages" in record for record in records):
        return list(_eslint_issues(records, context))
    return _golangci_issues(records, context)


def _golangci_issues(entries: Iterable[Mapping[str, JsonValue]], context: ParseContext) -> list[Issue]:
    issues: list[Issue] = []
    for entry in entries:
        issue = _golangci_issue(entry, context)
        if issue is not None:
            issues.append(issue)
    return issues


def _build_issue(
    context: ParseContext,
    *,
    path: str,
    line: int,
    column: int,
    severity: Severity,
    text: str,
) -> Issue | None:
    text = text.strip()
    if not text or text == IGNORED_FILE_SENTINEL:
        return None
    return Issue(
        path=context.resolve_path(path),
        line=line,
        column=column,
        severity=severity,
        title=f"{context.source} Issue: {text}",
        description=text,
        suggestion=JSON_SUGGESTION,
        source=context.source,
    )


def _golangci_issue(entry: Mapping[str, JsonValue], context: ParseContext) -> Issue | None:
    position = entry.get("Pos") or entry.get("position")
    pos = position if isinstance(position, Mapping) else {}
    return _build_issue(
        context,
        path=coerce_str(pos.get("Filename", pos.get("filename"))),
        line=coerce_int(pos.get("Line", pos.get("line"))),
        column=coerce_int(pos.get("Column", pos.get("column"))),
        severity=normalize_severity(entry.get("Severity", entry.get("severity"))),
        text=coerce_str(entry.get("Text", entry.get("text"))),
    )


def _eslint_issues(records: Sequence[Mapping[str, JsonValue]], context: ParseContext) -> Iterator[Issue]:
    for record in records:
        path = coerce_str(record.get("filePath") or record.get("filename"))
        for message in iter_dicts(record.get("messages")):
            issue = _build_issue(
                context,
                path=path,
                line=coerce_int(message.get("line")),
                column=coerce_int(message.get("column")),
                severity=severity_from_level(message.get("severity")),
                text=coerce_str(message.get("message")),
            )
            if issue is not None:
                yield issue


def _flake8_issues(payload: Mapping[str, JsonValue], context: ParseContext) -> Iterator[Issue]:
    for path, entries in payload.items():
        for entry in iter_dicts(entries):
            code = coerce_str(entry.get("code"))
            text = coerce_str(entry.get("text"))
            issue = _build_issue(
                context,
                path=coerce_str(entry.get("filename")) or str(path),
                line=coerce_int(entry.get("line_number")),
                column=coerce_int(entry.get("column_number")),
                severity=severity_from_code(code),
                text=f"{code} {text}" if code else text,
            )
            if issue is not None:
                yield issue


__all__ = ["parse_lint_issues"]
