# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser for Checkstyle XML reports."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, fromstring

from ..constants import CHECKSTYLE_SUGGESTION
from ..errors import OutputParseError
from ..models import Issue, RawToolOutput
from ..severity import normalize_severity
from .base import TRANSFORM_ERRORS, ParseContext, coerce_int, coerce_str

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element  # nosec B405

LOGGER = logging.getLogger(__name__)

_DOCUMENT_STARTS: Final[tuple[str, ...]] = ("<?xml", "<checkstyle")
_DOCUMENT_END: Final[str] = "</checkstyle>"


def locate_checkstyle_document(text: str) -> str | None:
    """Return the ``<checkstyle>`` document embedded in *text*, if any.

    Checkstyle prints audit banners and error counts around the report when
    stdout and stderr are combined.
    """

    starts = [index for index in (text.find(marker) for marker in _DOCUMENT_STARTS) if index >= 0]
    if not starts:
        return None
    start = min(starts)
    end = text.rfind(_DOCUMENT_END)
    if end < start:
        return text[start:].strip()
    return text[start : end + len(_DOCUMENT_END)]


def rule_name(source: str) -> str:
    """Return the short check name from a fully qualified Checkstyle source."""

    tail = source.strip().replace("/", ".").rsplit(".", 1)[-1]
    return tail


@dataclass(frozen=True, slots=True)
class CheckstyleParser:
    """Parse ``checkstyle -f xml`` output into issues."""

    def parse(self, output: RawToolOutput, *, context: ParseContext) -> Sequence[Issue]:
        text = output.combined.strip()
        if not text:
            LOGGER.info("%s output is empty", context.tool)
            return ()
        document = locate_checkstyle_document(text)
        if document is None:
            raise OutputParseError(context.tool, "no <checkstyle> document found")
        try:
            root = fromstring(document.encode("utf-8"))
        except (ParseError, DefusedXmlException) as exc:
            raise OutputParseError(context.tool, f"malformed XML: {exc}") from exc
        try:
            return parse_checkstyle_tree(root, context)
        except TRANSFORM_ERRORS as exc:
            raise OutputParseError(context.tool, f"unexpected report shape: {exc}") from exc


def parse_checkstyle_tree(root: Element, context: ParseContext) -> list[Issue]:
    """Convert every ``<file>/<error>`` pair below *root* into an issue."""

    issues: list[Issue] = []
    for file_node in root.iter("file"):
        path = context.resolve_path(coerce_str(file_node.get("name")))
        for error in file_node.findall("error"):
            message = coerce_str(error.get("message")).strip()
            rule = rule_name(coerce_str(error.get("source"))) or message
            issues.append(
                Issue(
                    path=path,
                    line=coerce_int(error.get("line")),
                    column=coerce_int(error.get("column")),
                    severity=normalize_severity(error.get("severity")),
                    title=f"{context.source} Issue: {rule}",
                    description=message,
                    suggestion=CHECKSTYLE_SUGGESTION,
                    source=context.source,
                ),
            )
    return issues


__all__ = ["CheckstyleParser", "locate_checkstyle_document", "parse_checkstyle_tree", "rule_name"]
