# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public entry point running every applicable analyzer over a set of changed files."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable, Mapping
from pathlib import Path

from .config import Config
from .context import AnalysisContext
from .execution import ExecutionEnvironment, ToolRunner, aggregate, schedule_tools
from .languages import ANALYZED_LANGUAGES, detect_languages
from .models import AnalysisResult, SourceFile
from .process_utils import CommandRunner, run_command
from .tool_env import EnvironmentPreparer
from .tools.base import ToolDefinition, WhichCallable
from .tools.builtin import BUILTIN_TOOLS
from .workspace import stage_workspace

LOGGER = logging.getLogger(__name__)


def analyze(
    files: Iterable[SourceFile],
    *,
    context: AnalysisContext | None = None,
    config: Config | None = None,
    runner: CommandRunner | None = None,
    which: WhichCallable | None = None,
    preparers: Mapping[str, EnvironmentPreparer] | None = None,
    tools: Iterable[ToolDefinition] | None = None,
    base_dir: Path | None = None,
) -> AnalysisResult:
    """Stage *files*, run the analyzer for each language present and merge the findings.

    A tool that is missing, fails to start, times out, is cancelled or emits
    unparseable output contributes zero issues; the other tools are unaffected
    and the reason is recorded in :attr:`AnalysisResult.reports`.

    Args:
        files: Changed files with their content.
        context: Deadline and cancellation carrier for the run.
        config: Run configuration; defaults apply when omitted.
        runner: Command runner used for every child process.
        which: Executable lookup used to resolve tool binaries.
        preparers: Environment preparers keyed by name.
        tools: Tool table to consult instead of the built-in one.
        base_dir: Parent directory for the scratch workspace.

    Returns:
        AnalysisResult: Issues in invocation order plus missing languages.

    Raises:
        StagingError: If the scratch workspace cannot be created or populated.
    """

    sources = list(files)
    if not detect_languages(source.path for source in sources):
        LOGGER.info("no analyzable files among %d input(s)", len(sources))
        return AnalysisResult(missing_languages=ANALYZED_LANGUAGES)

    cfg = config if config is not None else Config()
    table = tuple(tools) if tools is not None else BUILTIN_TOOLS
    with stage_workspace(sources, base_dir=base_dir) as workspace:
        environment = ExecutionEnvironment(
            workspace=workspace,
            config=cfg,
            context=context if context is not None else AnalysisContext(),
            runner=runner if runner is not None else run_command,
            which=which if which is not None else shutil.which,
            preparers=preparers,
        )
        schedule = schedule_tools(workspace, cfg, table)
        outcomes = ToolRunner(environment).run_all(schedule)
        return aggregate(outcomes, workspace.missing_languages)


__all__ = ["analyze"]
