# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run language linters over pull-request files and normalise their findings."""

from __future__ import annotations

from .analyzer import analyze
from .config import Config, ConfigError, ExecutionConfig, OutputConfig, ToolSettings
from .context import AnalysisContext
from .errors import (
    CommandCancelledError,
    CommandTimeoutError,
    OutputParseError,
    PrlintError,
    StagingError,
    ToolExecutionError,
    ToolUnavailableError,
)
from .languages import LanguageClass
from .models import AnalysisResult, Issue, SourceFile, ToolReport, ToolStatus
from .severity import Severity

__all__ = [
    "AnalysisContext",
    "AnalysisResult",
    "CommandCancelledError",
    "CommandTimeoutError",
    "Config",
    "ConfigError",
    "ExecutionConfig",
    "Issue",
    "LanguageClass",
    "OutputConfig",
    "OutputParseError",
    "PrlintError",
    "Severity",
    "SourceFile",
    "StagingError",
    "ToolExecutionError",
    "ToolReport",
    "ToolSettings",
    "ToolStatus",
    "ToolUnavailableError",
    "analyze",
]
