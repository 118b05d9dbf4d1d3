# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across prlint modules."""

from __future__ import annotations

from typing import Final

WORKSPACE_PREFIX: Final[str] = "prlint-review-"

LANGUAGE_EXTENSIONS: Final[dict[str, str]] = {
    "go": ".go",
    "typescript": ".ts",
    "python": ".py",
    "java": ".java",
}

LANGUAGE_DISPLAY_NAMES: Final[dict[str, str]] = {
    "go": "Go",
    "typescript": "TypeScript",
    "python": "Python",
    "java": "Java",
}

IGNORED_FILE_SENTINEL: Final[str] = "File ignored because no matching configuration was supplied."

DEFAULT_TOOL_TIMEOUT_S: Final[float] = 300.0
CANCEL_POLL_INTERVAL_S: Final[float] = 0.1

JSON_SUGGESTION: Final[str] = "Consider fixing this issue based on the linter's feedback."
CHECKSTYLE_SUGGESTION: Final[str] = "Fix according to Checkstyle rule."

__all__ = [
    "CANCEL_POLL_INTERVAL_S",
    "CHECKSTYLE_SUGGESTION",
    "DEFAULT_TOOL_TIMEOUT_S",
    "IGNORED_FILE_SENTINEL",
    "JSON_SUGGESTION",
    "LANGUAGE_DISPLAY_NAMES",
    "LANGUAGE_EXTENSIONS",
    "WORKSPACE_PREFIX",
]
