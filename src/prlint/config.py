# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the prlint analysis engine."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_TOOL_TIMEOUT_S


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class ExecutionConfig(BaseModel):
    """Execution behaviour shared by every tool invocation."""

    model_config = ConfigDict(validate_assignment=True)

    jobs: int = Field(default=1, ge=1)
    tool_timeout: float | None = Field(default=DEFAULT_TOOL_TIMEOUT_S, gt=0)
    prepare_environment: bool = True


class ToolSettings(BaseModel):
    """Per-tool overrides keyed by tool name in :attr:`Config.tools`."""

    model_config = ConfigDict(validate_assignment=True)

    enabled: bool = True
    executable: str | None = None
    config_file: Path | None = None
    timeout: float | None = Field(default=None, gt=0)


class OutputConfig(BaseModel):
    """Console presentation preferences."""

    model_config = ConfigDict(validate_assignment=True)

    emoji: bool = True
    color: bool = True
    verbose: bool = False


class Config(BaseModel):
    """Top-level configuration for an analysis run."""

    model_config = ConfigDict(validate_assignment=True)

    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
    tools: dict[str, ToolSettings] = Field(default_factory=dict)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("tools", mode="before")
    @classmethod
    def _coerce_tools(cls, value: object) -> object:
        """Accept ``None`` for an empty ``[tool.prlint.tools]`` table."""
        return {} if value is None else value

    def settings_for(self, tool: str) -> ToolSettings:
        """Return the overrides configured for *tool*, or defaults."""
        return self.tools.get(tool) or ToolSettings()

    def timeout_for(self, tool: str) -> float | None:
        """Return the per-tool timeout falling back to the execution default."""
        override = self.settings_for(tool).timeout
        return override if override is not None else self.execution.tool_timeout

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="python")


__all__ = ["Config", "ConfigError", "ExecutionConfig", "OutputConfig", "ToolSettings"]
