# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels normalising different tool vocabularies."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


DEFAULT_SEVERITY: Final[Severity] = Severity.WARNING

# Labels emitted by the supported tools that do not match a level verbatim.
SEVERITY_ALIASES: Final[dict[str, Severity]] = {
    "note": Severity.INFO,
    "notice": Severity.INFO,
    "information": Severity.INFO,
    "ignore": Severity.INFO,
    "warn": Severity.WARNING,
    "err": Severity.ERROR,
    "fatal": Severity.ERROR,
}

_ESLINT_LEVELS: Final[dict[int, Severity]] = {
    1: Severity.WARNING,
    2: Severity.ERROR,
}


def normalize_severity(
    label: object,
    *,
    default: Severity = DEFAULT_SEVERITY,
    aliases: Mapping[str, Severity] | None = None,
) -> Severity:
    """Return the :class:`Severity` for *label* after lower-casing it.

    Args:
        label: Raw severity value reported by a tool.
        default: Severity used for blank or unrecognised labels.
        aliases: Optional override for :data:`SEVERITY_ALIASES`.

    Returns:
        Severity: Canonical severity level.
    """

    if isinstance(label, Severity):
        return label
    if not isinstance(label, str):
        return default
    lowered = label.strip().lower()
    if not lowered:
        return default
    try:
        return Severity(lowered)
    except ValueError:
        return (aliases if aliases is not None else SEVERITY_ALIASES).get(lowered, default)


def severity_from_level(level: object) -> Severity:
    """Map ESLint numeric levels (1 warning, 2 error) onto :class:`Severity`."""

    if isinstance(level, bool) or not isinstance(level, int):
        return Severity.INFO
    return _ESLINT_LEVELS.get(level, Severity.INFO)


def severity_from_code(code: str | None, default: Severity = Severity.INFO) -> Severity:
    """Infer severity from conventional code prefixes (e.g. E, W)."""

    if not code:
        return default
    head = code[0].upper()
    if head in {"E", "F"}:
        return Severity.ERROR
    if head == "W":
        return Severity.WARNING
    return default


__all__ = [
    "DEFAULT_SEVERITY",
    "SEVERITY_ALIASES",
    "Severity",
    "normalize_severity",
    "severity_from_code",
    "severity_from_level",
]
