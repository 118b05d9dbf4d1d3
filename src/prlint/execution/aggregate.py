# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Combine per-tool outcomes into the final analysis result."""

from __future__ import annotations

from collections.abc import Iterable

from ..languages import LanguageClass
from ..models import AnalysisResult
from .runner import ToolOutcome


def aggregate(outcomes: Iterable[ToolOutcome], missing_languages: Iterable[LanguageClass]) -> AnalysisResult:
    """Concatenate tool issues in invocation order.

    Issues are never sorted or de-duplicated; a finding reported twice by a
    tool appears twice.

    Args:
        outcomes: Outcomes produced by the tool runner, in any order.
        missing_languages: Analyzed languages with no staged file.

    Returns:
        AnalysisResult: Combined issues, missing languages and per-tool reports.
    """

    ordered = sorted(outcomes, key=lambda outcome: outcome.order)
    return AnalysisResult(
        issues=tuple(issue for outcome in ordered for issue in outcome.issues),
        missing_languages=tuple(missing_languages),
        reports=tuple(outcome.report for outcome in ordered),
    )


__all__ = ["aggregate"]
