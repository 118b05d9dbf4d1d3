# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the tool table, executable resolution and exit-code policies."""

from __future__ import annotations

from pathlib import Path

import pytest

from prlint.languages import ANALYZED_LANGUAGES, LanguageClass
from prlint.models import ExitCategory
from prlint.tools import ExitCodePolicy, ResolvedExecutable
from prlint.tools.builtin import BUILTIN_TOOLS, CHECKSTYLE, ESLINT, FLAKE8, GOLANGCI_LINT, tools_for_language


@pytest.mark.parametrize(
    ("tool", "returncode", "expected"),
    [
        (GOLANGCI_LINT, 0, ExitCategory.SUCCESS),
        (GOLANGCI_LINT, 1, ExitCategory.DIAGNOSTIC),
        (GOLANGCI_LINT, 3, ExitCategory.TOOL_FAILURE),
        (GOLANGCI_LINT, 42, ExitCategory.UNKNOWN),
        (ESLINT, 1, ExitCategory.DIAGNOSTIC),
        (ESLINT, 2, ExitCategory.TOOL_FAILURE),
        (FLAKE8, 1, ExitCategory.DIAGNOSTIC),
        (CHECKSTYLE, 0, ExitCategory.SUCCESS),
        (CHECKSTYLE, 17, ExitCategory.DIAGNOSTIC),
    ],
)
def test_exit_code_policy_table(tool, returncode: int, expected: ExitCategory) -> None:
    assert tool.exit_codes.classify(returncode) is expected


def test_exit_code_policy_coerces_scalars() -> None:
    policy = ExitCodePolicy(success=0, diagnostic=["1"], tool_failure=None)

    assert policy.success == (0,)
    assert policy.diagnostic == (1,)
    assert policy.tool_failure == ()


def test_one_tool_per_analyzed_language() -> None:
    for language in ANALYZED_LANGUAGES:
        assert len(tools_for_language(language)) == 1
    assert tools_for_language(LanguageClass.UNKNOWN) == []
    assert [tool.language for tool in BUILTIN_TOOLS] == list(ANALYZED_LANGUAGES)


def test_golangci_falls_back_to_snap_location() -> None:
    found = {"/snap/bin/golangci-lint"}

    resolved = GOLANGCI_LINT.resolve(lambda name: name if name in found else None)

    assert resolved == ResolvedExecutable(path="/snap/bin/golangci-lint")


def test_eslint_prefers_npx_launcher() -> None:
    resolved = ESLINT.resolve(lambda name: f"/usr/bin/{name}")

    assert resolved == ResolvedExecutable(path="/usr/bin/npx", prefix=("eslint",))


def test_override_inherits_launcher_prefix() -> None:
    resolved = ESLINT.resolve(lambda name: name, override="/opt/node/bin/npx")

    assert resolved == ResolvedExecutable(path="/opt/node/bin/npx", prefix=("eslint",))
    assert ESLINT.candidate_names("/opt/node/bin/npx") == ("/opt/node/bin/npx",)


def test_unresolvable_tool_returns_none() -> None:
    assert CHECKSTYLE.resolve(lambda name: None) is None
    assert CHECKSTYLE.candidate_names() == ("checkstyle",)


def test_build_command_substitutes_config_and_appends_files() -> None:
    files = (Path("/ws/a.go"), Path("/ws/b.go"))

    command = GOLANGCI_LINT.build_command(
        ResolvedExecutable(path="/usr/bin/golangci-lint"),
        config_path=Path("/ws/.golangci.yml"),
        files=files,
    )

    assert command == (
        "/usr/bin/golangci-lint",
        "run",
        "--config",
        "/ws/.golangci.yml",
        "--output.json.path",
        "stdout",
        "/ws/a.go",
        "/ws/b.go",
    )


def test_eslint_command_includes_launcher_prefix() -> None:
    command = ESLINT.build_command(
        ResolvedExecutable(path="/usr/bin/npx", prefix=("eslint",)),
        config_path=Path("/ws/eslint.config.js"),
        files=(Path("/ws/app.ts"),),
    )

    assert command == ("/usr/bin/npx", "eslint", "--format", "json", "--config", "/ws/eslint.config.js", "/ws/app.ts")
