# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the Checkstyle XML parser."""

from __future__ import annotations

import pytest

from prlint.constants import CHECKSTYLE_SUGGESTION
from prlint.errors import OutputParseError
from prlint.models import RawToolOutput
from prlint.parsers import CheckstyleParser, ParseContext, locate_checkstyle_document, rule_name
from prlint.severity import Severity

CONTEXT = ParseContext(tool="checkstyle", source="Checkstyle")

REPORT = """<?xml version="1.0" encoding="UTF-8"?>
<checkstyle version="10.12.0">
<file name="Foo.java">
<error line="10" column="2" severity="error" message="bad" source="com.pkg.RuleX"/>
</file>
</checkstyle>"""


def _parse(stdout: str, stderr: str = "") -> list:
    output = RawToolOutput(tool="checkstyle", stdout=stdout, stderr=stderr)
    return list(CheckstyleParser().parse(output, context=CONTEXT))


def test_single_error_maps_to_issue() -> None:
    (issue,) = _parse(REPORT)

    assert issue.path == "Foo.java"
    assert issue.line == 10
    assert issue.column == 2
    assert issue.severity is Severity.ERROR
    assert issue.title == "Checkstyle Issue: RuleX"
    assert issue.description == "bad"
    assert issue.suggestion == CHECKSTYLE_SUGGESTION
    assert issue.source == "Checkstyle"


def test_report_surrounded_by_audit_noise() -> None:
    noisy = f"Starting audit...\n{REPORT}\nAudit done.\nCheckstyle ends with 1 errors."

    issues = _parse(noisy)

    assert [issue.title for issue in issues] == ["Checkstyle Issue: RuleX"]


def test_multiple_files_and_warning_severity() -> None:
    report = """<checkstyle>
<file name="/ws/A.java">
<error line="1" severity="warning" message="Using the '.*' form of import should be avoided"
 source="com.puppycrawl.tools.checkstyle.checks.imports.AvoidStarImportCheck"/>
</file>
<file name="/ws/B.java"/>
<file name="/ws/C.java">
<error line="3" column="7" severity="info" message="m1" source="x.y.First"/>
<error line="4" column="8" severity="ignore" message="m2" source="x.y.Second"/>
</file>
</checkstyle>"""

    issues = _parse(report)

    assert [(issue.path, issue.severity) for issue in issues] == [
        ("/ws/A.java", Severity.WARNING),
        ("/ws/C.java", Severity.INFO),
        ("/ws/C.java", Severity.INFO),
    ]
    assert issues[0].title == "Checkstyle Issue: AvoidStarImportCheck"
    assert issues[0].column == 0


def test_empty_output_is_clean() -> None:
    assert _parse("") == []


def test_malformed_xml_raises_parse_error() -> None:
    with pytest.raises(OutputParseError):
        _parse("<checkstyle><file name='a.java'><error line='1'</checkstyle>")


def test_output_without_report_raises_parse_error() -> None:
    with pytest.raises(OutputParseError):
        _parse("Exception in thread main java.lang.NoClassDefFoundError")


def test_entity_declarations_are_rejected() -> None:
    hostile = """<?xml version="1.0"?>
<!DOCTYPE checkstyle [<!ENTITY boom "boom">]>
<checkstyle><file name="a.java"><error line="1" message="&boom;" source="x.Y"/></file></checkstyle>"""

    with pytest.raises(OutputParseError):
        _parse(hostile)


def test_locate_document_and_rule_name_helpers() -> None:
    assert locate_checkstyle_document("no xml here") is None
    assert locate_checkstyle_document("x <checkstyle></checkstyle> y") == "<checkstyle></checkstyle>"
    assert rule_name("com.pkg.RuleX") == "RuleX"
    assert rule_name("RuleY") == "RuleY"


def test_tree_mapping_errors_become_parse_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def explode(root, context):
        raise TypeError("unexpected node")

    monkeypatch.setattr("prlint.parsers.checkstyle.parse_checkstyle_tree", explode)

    with pytest.raises(OutputParseError) as excinfo:
        CheckstyleParser().parse(RawToolOutput(tool="checkstyle", stdout=REPORT), context=CONTEXT)

    assert "unexpected node" in excinfo.value.reason
