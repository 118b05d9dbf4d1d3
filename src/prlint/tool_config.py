# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Synthesise the per-tool configuration files inside a staged workspace."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Final

from .errors import ToolExecutionError
from .tools.base import ConfigArtifact, ToolDefinition

LOGGER = logging.getLogger(__name__)

GOLANGCI_CONFIG: Final[str] = """\
version: "2"
linters:
  enable:
    - govet
    - staticcheck
    - errcheck
    - ineffassign
    - unused
    - misspell
    - gocritic
"""

ESLINT_CONFIG: Final[str] = """\
export default [
  {
    files: ["**/*.ts", "**/*.tsx", "**/*.js", "**/*.jsx"],
    languageOptions: {
      ecmaVersion: "latest",
      sourceType: "module",
    },
    rules: {
      "no-unused-vars": "warn",
      "no-console": "warn",
    },
  },
];
"""

ESLINT_PACKAGE_JSON: Final[str] = '{\n  "type": "module"\n}\n'

FLAKE8_CONFIG: Final[str] = """\
[flake8]
max-line-length = 120
extend-ignore = E203, W503
"""

CHECKSTYLE_CONFIG: Final[str] = """\
<?xml version="1.0"?>
<!DOCTYPE module PUBLIC
    "-//Checkstyle//DTD Checkstyle Configuration 1.3//EN"
    "https://checkstyle.org/dtds/configuration_1_3.dtd">
<module name="Checker">
  <module name="TreeWalker">
    <module name="AvoidStarImport"/>
    <module name="ConstantName"/>
    <module name="UnusedImports"/>
  </module>
</module>
"""


def ensure_tool_config(workspace: Path, tool: ToolDefinition, *, override: Path | None = None) -> Path:
    """Write the config artifacts *tool* needs into *workspace* and return the primary one.

    Artifacts that already exist are left untouched so a file staged by the
    caller, or written by an earlier run of the same tool, wins over the
    built-in defaults. When *override* names a config file on the host, it is
    copied in place of the built-in primary artifact.

    Args:
        workspace: Root of the staged workspace.
        tool: Tool whose configuration is required.
        override: Optional caller-provided config file.

    Returns:
        Path: Location of the primary config file passed to the tool.

    Raises:
        ToolExecutionError: If a config file cannot be written.
    """

    primary = workspace / tool.config_name
    try:
        if override is not None and not primary.exists():
            shutil.copyfile(override, primary)
            LOGGER.debug("%s: copied config override %s", tool.name, override)
        for artifact in tool.config:
            _write_artifact(workspace, artifact)
    except OSError as exc:
        raise ToolExecutionError(tool.name, f"unable to write configuration: {exc}") from exc
    return primary


def _write_artifact(workspace: Path, artifact: ConfigArtifact) -> None:
    target = workspace / artifact.name
    if target.exists():
        LOGGER.debug("keeping existing %s", target.name)
        return
    target.write_text(artifact.content, encoding="utf-8")


__all__ = [
    "CHECKSTYLE_CONFIG",
    "ESLINT_CONFIG",
    "ESLINT_PACKAGE_JSON",
    "FLAKE8_CONFIG",
    "GOLANGCI_CONFIG",
    "ensure_tool_config",
]
