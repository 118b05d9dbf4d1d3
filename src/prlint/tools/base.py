# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Definitions for the external analyzers and how their exits are read."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..languages import LanguageClass
from ..models import ExitCategory
from ..parsers.base import Parser

CONFIG_PLACEHOLDER = "{config}"

WhichCallable = Callable[[str], "str | None"]


class ExitCodePolicy(BaseModel):
    """Categorise exit codes reported by a tool.

    Most linters exit non-zero when they find issues; listing those codes
    under ``diagnostic`` keeps them apart from genuine tool failures.
    """

    model_config = ConfigDict(frozen=True)

    success: tuple[int, ...] = (0,)
    diagnostic: tuple[int, ...] = ()
    tool_failure: tuple[int, ...] = ()
    unlisted: ExitCategory = ExitCategory.UNKNOWN

    @field_validator("success", "diagnostic", "tool_failure", mode="before")
    @classmethod
    def _coerce_codes(
        cls,
        value: Sequence[int | str] | int | str | None,
    ) -> tuple[int, ...]:
        """Return validated integer exit codes from ``value``.

        Raises:
            TypeError: If ``value`` is neither ``None`` nor an integer sequence.
        """

        if value is None:
            return ()
        if isinstance(value, (list, tuple, set)):
            return tuple(int(item) for item in value)
        if isinstance(value, (int, str)):
            return (int(value),)
        raise TypeError("exit code collections must contain integers")

    def classify(self, returncode: int) -> ExitCategory:
        if returncode in self.success:
            return ExitCategory.SUCCESS
        if returncode in self.diagnostic:
            return ExitCategory.DIAGNOSTIC
        if returncode in self.tool_failure:
            return ExitCategory.TOOL_FAILURE
        return self.unlisted


class Executable(BaseModel):
    """Candidate binary for a tool plus the arguments that select the tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    prefix: tuple[str, ...] = ()


class ConfigArtifact(BaseModel):
    """A file synthesised into the workspace before a tool runs."""

    model_config = ConfigDict(frozen=True)

    name: str
    content: str


class ResolvedExecutable(BaseModel):
    """Executable located on the host for one run."""

    model_config = ConfigDict(frozen=True)

    path: str
    prefix: tuple[str, ...] = ()


class ToolDefinition(BaseModel):
    """Static description of one external analyzer."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str
    source: str
    language: LanguageClass
    executables: tuple[Executable, ...]
    config: tuple[ConfigArtifact, ...]
    args: tuple[str, ...] = Field(default_factory=tuple)
    exit_codes: ExitCodePolicy = Field(default_factory=ExitCodePolicy)
    parser: Parser
    preparer: str | None = None
    description: str = ""

    @field_validator("config")
    @classmethod
    def _require_config(cls, value: tuple[ConfigArtifact, ...]) -> tuple[ConfigArtifact, ...]:
        if not value:
            raise ValueError("a tool needs at least one config artifact")
        return value

    @property
    def config_name(self) -> str:
        """Return the file name of the primary config artifact passed to the tool."""
        return self.config[0].name

    def resolve(self, which: WhichCallable, *, override: str | None = None) -> ResolvedExecutable | None:
        """Return the first candidate executable that *which* can locate.

        An *override* replaces the candidate list; it inherits the prefix of
        the candidate sharing its base name (e.g. a custom ``npx``).
        """

        candidates = self.executables
        if override:
            base = Path(override).name
            prefix = next((item.prefix for item in self.executables if Path(item.name).name == base), ())
            candidates = (Executable(name=override, prefix=prefix),)
        for candidate in candidates:
            located = which(candidate.name)
            if located:
                return ResolvedExecutable(path=located, prefix=candidate.prefix)
        return None

    def candidate_names(self, override: str | None = None) -> tuple[str, ...]:
        if override:
            return (override,)
        return tuple(item.name for item in self.executables)

    def build_command(
        self,
        executable: ResolvedExecutable,
        *,
        config_path: Path,
        files: Sequence[Path],
    ) -> tuple[str, ...]:
        """Return the argument vector running this tool over *files*."""

        args = [str(config_path) if arg == CONFIG_PLACEHOLDER else arg for arg in self.args]
        return (executable.path, *executable.prefix, *args, *(str(path) for path in files))


__all__ = [
    "CONFIG_PLACEHOLDER",
    "ConfigArtifact",
    "Executable",
    "ExitCodePolicy",
    "ResolvedExecutable",
    "ToolDefinition",
    "WhichCallable",
]
