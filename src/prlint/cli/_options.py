# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reusable typer option declarations shared by prlint commands."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer


class OutputFormat(str, Enum):
    """Renderers available to ``prlint analyze``."""

    TEXT = "text"
    JSON = "json"


PATHS_ARGUMENT = Annotated[
    list[Path],
    typer.Argument(help="Changed files to analyse, relative to --root."),
]
ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Repository root used to read files and configuration."),
]
TIMEOUT_OPTION = Annotated[
    float | None,
    typer.Option("--timeout", min=0.0, help="Overall deadline for the run in seconds."),
]
JOBS_OPTION = Annotated[
    int | None,
    typer.Option("--jobs", "-j", min=1, help="Number of tools to run concurrently."),
]
FORMAT_OPTION = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", case_sensitive=False, help="Output format."),
]
NO_PREPARE_OPTION = Annotated[
    bool,
    typer.Option("--no-prepare", help="Skip tool environment preparation such as npm installs."),
]
EMOJI_OPTION = Annotated[
    bool | None,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
COLOR_OPTION = Annotated[
    bool | None,
    typer.Option("--color/--no-color", help="Toggle ANSI colour output."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Emit debug logging on stderr."),
]

__all__ = [
    "COLOR_OPTION",
    "EMOJI_OPTION",
    "FORMAT_OPTION",
    "JOBS_OPTION",
    "NO_PREPARE_OPTION",
    "OutputFormat",
    "PATHS_ARGUMENT",
    "ROOT_OPTION",
    "TIMEOUT_OPTION",
    "VERBOSE_OPTION",
]
