# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in tool table: one analyzer per supported language."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from ..languages import LanguageClass
from ..parsers import CheckstyleParser, JsonParser, parse_lint_issues
from ..tool_config import CHECKSTYLE_CONFIG, ESLINT_CONFIG, ESLINT_PACKAGE_JSON, FLAKE8_CONFIG, GOLANGCI_CONFIG
from .base import CONFIG_PLACEHOLDER, ConfigArtifact, Executable, ExitCodePolicy, ToolDefinition

_LINT_JSON = JsonParser(parse_lint_issues)

GOLANGCI_LINT: Final[ToolDefinition] = ToolDefinition(
    name="golangci-lint",
    source="GolangCILint",
    language=LanguageClass.GO,
    executables=(Executable(name="golangci-lint"), Executable(name="/snap/bin/golangci-lint")),
    config=(ConfigArtifact(name=".golangci.yml", content=GOLANGCI_CONFIG),),
    args=("run", "--config", CONFIG_PLACEHOLDER, "--output.json.path", "stdout"),
    exit_codes=ExitCodePolicy(success=(0,), diagnostic=(1,), tool_failure=(2, 3, 4, 5, 6, 7)),
    parser=_LINT_JSON,
    description="Go meta-linter with JSON output.",
)

ESLINT: Final[ToolDefinition] = ToolDefinition(
    name="eslint",
    source="ESLint",
    language=LanguageClass.TYPESCRIPT,
    executables=(Executable(name="npx", prefix=("eslint",)), Executable(name="eslint")),
    config=(
        ConfigArtifact(name="eslint.config.js", content=ESLINT_CONFIG),
        ConfigArtifact(name="package.json", content=ESLINT_PACKAGE_JSON),
    ),
    args=("--format", "json", "--config", CONFIG_PLACEHOLDER),
    exit_codes=ExitCodePolicy(success=(0,), diagnostic=(1,), tool_failure=(2,)),
    parser=_LINT_JSON,
    preparer="eslint-plugins",
    description="TypeScript linting via the ESLint flat config.",
)

FLAKE8: Final[ToolDefinition] = ToolDefinition(
    name="flake8",
    source="Flake8",
    language=LanguageClass.PYTHON,
    executables=(Executable(name="flake8"),),
    config=(ConfigArtifact(name=".flake8", content=FLAKE8_CONFIG),),
    args=("--format=json", "--config", CONFIG_PLACEHOLDER),
    exit_codes=ExitCodePolicy(success=(0,), diagnostic=(1,)),
    parser=_LINT_JSON,
    description="Python style and error checks (JSON formatter plugin).",
)

CHECKSTYLE: Final[ToolDefinition] = ToolDefinition(
    name="checkstyle",
    source="Checkstyle",
    language=LanguageClass.JAVA,
    executables=(Executable(name="checkstyle"),),
    config=(ConfigArtifact(name="checkstyle.xml", content=CHECKSTYLE_CONFIG),),
    args=("-f", "xml", "-c", CONFIG_PLACEHOLDER),
    # Checkstyle exits with the number of errors found.
    exit_codes=ExitCodePolicy(success=(0,), unlisted="diagnostic"),
    parser=CheckstyleParser(),
    description="Java style checks with XML output.",
)

BUILTIN_TOOLS: Final[tuple[ToolDefinition, ...]] = (GOLANGCI_LINT, ESLINT, FLAKE8, CHECKSTYLE)


def tools_for_language(language: LanguageClass, tools: Iterable[ToolDefinition] = BUILTIN_TOOLS) -> list[ToolDefinition]:
    """Return the tools that analyse *language*, in table order."""

    return [tool for tool in tools if tool.language is language]


__all__ = [
    "BUILTIN_TOOLS",
    "CHECKSTYLE",
    "ESLINT",
    "FLAKE8",
    "GOLANGCI_LINT",
    "tools_for_language",
]
