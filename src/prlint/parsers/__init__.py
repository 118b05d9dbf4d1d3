# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Output normalizers turning raw tool output into canonical issues."""

from __future__ import annotations

from .base import (
    JsonParser,
    JsonPayloadScanner,
    NormalizedOutput,
    ParseContext,
    Parser,
    ScanState,
    extract_json_payload,
    iter_json_candidates,
    load_json_payload,
    normalize_output,
)
from .checkstyle import CheckstyleParser, locate_checkstyle_document, rule_name
from .lint_json import parse_lint_issues

__all__ = [
    "CheckstyleParser",
    "JsonParser",
    "JsonPayloadScanner",
    "NormalizedOutput",
    "ParseContext",
    "Parser",
    "ScanState",
    "extract_json_payload",
    "iter_json_candidates",
    "load_json_payload",
    "locate_checkstyle_document",
    "normalize_output",
    "parse_lint_issues",
    "rule_name",
]
