# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised while staging, running and parsing analysis tools."""

from __future__ import annotations


class PrlintError(RuntimeError):
    """Base class for errors raised by prlint."""


class StagingError(PrlintError):
    """Raised when the scratch workspace cannot be created or populated.

    This is the only error that escapes :func:`prlint.analyze`; partial staging
    would silently drop analysis coverage.
    """


class ToolUnavailableError(PrlintError):
    """Raised when the executable backing a tool cannot be resolved."""

    def __init__(self, tool: str, candidates: tuple[str, ...]) -> None:
        tried = ", ".join(candidates) or "<none>"
        super().__init__(f"{tool} is not installed (tried: {tried})")
        self.tool = tool
        self.candidates = candidates


class ToolExecutionError(PrlintError):
    """Raised when a tool cannot be started, is cancelled, or times out."""

    def __init__(self, tool: str, reason: str) -> None:
        super().__init__(f"{tool}: {reason}")
        self.tool = tool
        self.reason = reason


class CommandTimeoutError(ToolExecutionError):
    """Raised when a child process outlives its deadline and is killed."""


class CommandCancelledError(ToolExecutionError):
    """Raised when the analysis context is cancelled while a child process runs."""


class OutputParseError(PrlintError):
    """Raised when tool output holds no recoverable structured payload."""

    def __init__(self, tool: str, reason: str) -> None:
        super().__init__(f"unable to parse {tool} output: {reason}")
        self.tool = tool
        self.reason = reason


__all__ = [
    "CommandCancelledError",
    "CommandTimeoutError",
    "OutputParseError",
    "PrlintError",
    "StagingError",
    "ToolExecutionError",
    "ToolUnavailableError",
]
