# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``prlint analyze``: run the analyzers over changed files."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import typer

from ...analyzer import analyze
from ...config import Config, ConfigError
from ...config_loader import load_config
from ...context import AnalysisContext
from ...errors import StagingError
from ...logging import configure_logging, fail
from ...models import SourceFile
from .._options import (
    COLOR_OPTION,
    EMOJI_OPTION,
    FORMAT_OPTION,
    JOBS_OPTION,
    NO_PREPARE_OPTION,
    PATHS_ARGUMENT,
    ROOT_OPTION,
    TIMEOUT_OPTION,
    VERBOSE_OPTION,
    OutputFormat,
)
from .._rendering import render_json, render_text

EXIT_OK = 0
EXIT_ERRORS_FOUND = 1
EXIT_USAGE = 2


def analyze_command(
    paths: PATHS_ARGUMENT,
    root: ROOT_OPTION = Path("."),
    timeout: TIMEOUT_OPTION = None,
    jobs: JOBS_OPTION = None,
    output_format: FORMAT_OPTION = OutputFormat.TEXT,
    no_prepare: NO_PREPARE_OPTION = False,
    use_emoji: EMOJI_OPTION = None,
    use_color: COLOR_OPTION = None,
    verbose: VERBOSE_OPTION = False,
) -> None:
    """Analyse changed files and report the issues found.

    Exits 1 when any issue has ``error`` severity and 2 when the
    configuration is invalid or the files cannot be staged.
    """

    root_path = root.resolve()
    try:
        config = load_config(root_path)
    except ConfigError as exc:
        fail(str(exc), use_emoji=use_emoji is not False, use_color=use_color)
        raise typer.Exit(code=EXIT_USAGE) from exc
    _apply_overrides(
        config,
        jobs=jobs,
        no_prepare=no_prepare,
        use_emoji=use_emoji,
        use_color=use_color,
        verbose=verbose,
    )
    output = config.output
    configure_logging(verbose=output.verbose, use_color=output.color)

    try:
        sources = read_sources(paths, root_path)
    except OSError as exc:
        fail(f"unable to read input: {exc}", use_emoji=output.emoji, use_color=output.color)
        raise typer.Exit(code=EXIT_USAGE) from exc

    try:
        result = analyze(sources, context=AnalysisContext.with_timeout(timeout), config=config)
    except StagingError as exc:
        fail(str(exc), use_emoji=output.emoji, use_color=output.color)
        raise typer.Exit(code=EXIT_USAGE) from exc

    if output_format is OutputFormat.JSON:
        render_json(result)
    else:
        render_text(result, output)
    raise typer.Exit(code=EXIT_ERRORS_FOUND if result.has_errors() else EXIT_OK)


def _apply_overrides(
    config: Config,
    *,
    jobs: int | None,
    no_prepare: bool,
    use_emoji: bool | None,
    use_color: bool | None,
    verbose: bool,
) -> None:
    if jobs is not None:
        config.execution.jobs = jobs
    if no_prepare:
        config.execution.prepare_environment = False
    if use_emoji is not None:
        config.output.emoji = use_emoji
    if use_color is not None:
        config.output.color = use_color
    if verbose:
        config.output.verbose = True


def read_sources(paths: Sequence[Path], root: Path) -> list[SourceFile]:
    """Read *paths* into :class:`SourceFile` records keyed by their root-relative path.

    Raises:
        OSError: If a file cannot be read.
    """

    sources: list[SourceFile] = []
    for path in paths:
        absolute = path if path.is_absolute() else root / path
        try:
            display = absolute.resolve().relative_to(root).as_posix()
        except ValueError:
            display = absolute.as_posix()
        sources.append(SourceFile(path=display, content=absolute.read_bytes()))
    return sources


__all__ = ["analyze_command", "read_sources"]
