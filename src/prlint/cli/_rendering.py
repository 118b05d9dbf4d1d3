# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render analysis results for the terminal or as JSON."""

from __future__ import annotations

import json
from typing import Any

import typer
from rich.table import Table

from ..config import OutputConfig
from ..logging import fail, ok, section, warn
from ..models import AnalysisResult
from ..runtime.console import get_console_manager
from ..severity import Severity

_SEVERITY_STYLES = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
}


def result_payload(result: AnalysisResult) -> dict[str, Any]:
    """Return a JSON-serialisable document describing *result*."""

    payload = result.model_dump(mode="json")
    payload["issue_count"] = result.issue_count
    payload["advisories"] = list(result.advisories)
    return payload


def render_json(result: AnalysisResult) -> None:
    typer.echo(json.dumps(result_payload(result), indent=2))


def render_text(result: AnalysisResult, output: OutputConfig) -> None:
    """Print an issue table, the advisories and a one-line summary.

    Args:
        result: Analysis result to display.
        output: Emoji and colour preferences.
    """

    if result.issues:
        section("Issues", use_color=output.color)
        table = Table(show_lines=False)
        for column in ("Path", "Line", "Col", "Severity", "Source", "Message"):
            table.add_column(column)
        for issue in result.issues:
            style = _SEVERITY_STYLES.get(issue.severity) if output.color else None
            table.add_row(
                issue.path,
                str(issue.line),
                str(issue.column),
                issue.severity.value,
                issue.source,
                issue.description,
                style=style,
            )
        console = get_console_manager().get(color=output.color, emoji=output.emoji)
        console.print(table)

    for advisory in result.advisories:
        warn(advisory, use_emoji=output.emoji, use_color=output.color)

    if not result.issues:
        ok("No issues found", use_emoji=output.emoji, use_color=output.color)
    elif result.has_errors():
        fail(f"{result.issue_count} issue(s) found", use_emoji=output.emoji, use_color=output.color)
    else:
        warn(f"{result.issue_count} issue(s) found", use_emoji=output.emoji, use_color=output.color)


__all__ = ["render_json", "render_text", "result_payload"]
