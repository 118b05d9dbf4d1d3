# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Language detection utilities for selecting relevant toolchains."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .constants import LANGUAGE_DISPLAY_NAMES, LANGUAGE_EXTENSIONS


class LanguageClass(str, Enum):
    """Source languages routed to an analyzer; declaration order is invocation order."""

    GO = "go"
    TYPESCRIPT = "typescript"
    PYTHON = "python"
    JAVA = "java"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        """Return the human readable language name."""

        return LANGUAGE_DISPLAY_NAMES.get(self.value, self.value)


ANALYZED_LANGUAGES: tuple[LanguageClass, ...] = tuple(
    language for language in LanguageClass if language is not LanguageClass.UNKNOWN
)


def detect_language(path: str) -> LanguageClass:
    """Return the :class:`LanguageClass` for *path* using a case-sensitive suffix match."""

    for language in ANALYZED_LANGUAGES:
        if path.endswith(LANGUAGE_EXTENSIONS[language.value]):
            return language
    return LanguageClass.UNKNOWN


def detect_languages(paths: Iterable[str]) -> set[LanguageClass]:
    """Infer the analyzed languages present in *paths*."""

    detected = {detect_language(path) for path in paths}
    detected.discard(LanguageClass.UNKNOWN)
    return detected


__all__ = ["ANALYZED_LANGUAGES", "LanguageClass", "detect_language", "detect_languages"]
