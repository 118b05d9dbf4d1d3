# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tool definitions and the built-in tool table."""

from __future__ import annotations

from .base import (
    CONFIG_PLACEHOLDER,
    ConfigArtifact,
    Executable,
    ExitCodePolicy,
    ResolvedExecutable,
    ToolDefinition,
    WhichCallable,
)

__all__ = [
    "CONFIG_PLACEHOLDER",
    "ConfigArtifact",
    "Executable",
    "ExitCodePolicy",
    "ResolvedExecutable",
    "ToolDefinition",
    "WhichCallable",
]
