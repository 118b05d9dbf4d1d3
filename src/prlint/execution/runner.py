# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the analyzers for each staged language and capture their outcomes."""

from __future__ import annotations

import logging
import shlex
import shutil
from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from textwrap import shorten
from typing import TYPE_CHECKING

from ..config import Config
from ..context import AnalysisContext
from ..errors import CommandCancelledError, CommandTimeoutError, ToolExecutionError, ToolUnavailableError
from ..models import ExitCategory, Issue, RawToolOutput, ToolInvocation, ToolReport, ToolStatus
from ..parsers import ParseContext, normalize_output
from ..process_utils import CommandRunner, run_command
from ..tool_config import ensure_tool_config
from ..tool_env import EnvironmentPreparer, PreparationRequest, prepare_environment
from ..tools.base import ToolDefinition, WhichCallable
from ..tools.builtin import BUILTIN_TOOLS, tools_for_language
from ..workspace import StagedWorkspace

if TYPE_CHECKING:
    from subprocess import CompletedProcess  # nosec B404

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ExecutionEnvironment:
    """Collaborators shared by every tool run of one analysis."""

    workspace: StagedWorkspace
    config: Config = field(default_factory=Config)
    context: AnalysisContext = field(default_factory=AnalysisContext)
    runner: CommandRunner = run_command
    which: WhichCallable = shutil.which
    preparers: Mapping[str, EnvironmentPreparer] | None = None


@dataclass(frozen=True, slots=True)
class ScheduledTool:
    """Tool queued to run over one language's staged files."""

    order: int
    tool: ToolDefinition
    files: tuple[Path, ...]


@dataclass(frozen=True, slots=True)
class ToolOutcome:
    """Issues contributed by one tool plus the report describing the run."""

    order: int
    issues: tuple[Issue, ...]
    report: ToolReport


def schedule_tools(
    workspace: StagedWorkspace,
    config: Config,
    tools: Iterable[ToolDefinition] = BUILTIN_TOOLS,
) -> list[ScheduledTool]:
    """Return the enabled tools for every staged language, in invocation order."""

    available = tuple(tools)
    scheduled: list[ScheduledTool] = []
    for language in workspace.languages:
        for tool in tools_for_language(language, available):
            if not config.settings_for(tool.name).enabled:
                LOGGER.info("%s disabled by configuration", tool.name)
                continue
            scheduled.append(ScheduledTool(order=len(scheduled), tool=tool, files=workspace.files_for(language)))
    return scheduled


class ToolRunner:
    """Execute scheduled tools, degrading each failure to an empty contribution."""

    def __init__(self, environment: ExecutionEnvironment) -> None:
        self._env = environment

    def run_all(self, schedule: Sequence[ScheduledTool]) -> list[ToolOutcome]:
        """Run every scheduled tool and return outcomes in schedule order.

        Tools run on a thread pool when ``execution.jobs`` exceeds one; the
        outcomes are re-ordered so the result matches a sequential run.
        """

        jobs = self._env.config.execution.jobs
        if jobs <= 1 or len(schedule) <= 1:
            return [self.run(scheduled) for scheduled in schedule]
        outcomes: list[ToolOutcome] = []
        with ThreadPoolExecutor(max_workers=min(jobs, len(schedule))) as executor:
            futures = [executor.submit(self.run, scheduled) for scheduled in schedule]
            for future in as_completed(futures):
                outcomes.append(future.result())
        return sorted(outcomes, key=lambda outcome: outcome.order)

    def run(self, scheduled: ScheduledTool) -> ToolOutcome:
        """Run one tool; failures are logged and reported, never raised."""

        tool = scheduled.tool
        try:
            invocation = self._prepare_invocation(scheduled)
            completed = self._env.runner(
                invocation.command,
                cwd=invocation.cwd,
                check=False,
                timeout=invocation.timeout,
                context=self._env.context,
            )
        except ToolUnavailableError as exc:
            LOGGER.info("%s skipped: %s", tool.name, exc)
            return self._degraded(scheduled, ToolStatus.UNAVAILABLE, str(exc))
        except ToolExecutionError as exc:
            LOGGER.warning("%s failed: %s", tool.name, exc.reason)
            return self._degraded(scheduled, ToolStatus.FAILED, exc.reason)
        except OSError as exc:
            LOGGER.warning("%s could not be started: %s", tool.name, exc)
            return self._degraded(scheduled, ToolStatus.FAILED, str(exc))
        return self._collect(scheduled, invocation, completed)

    def _prepare_invocation(self, scheduled: ScheduledTool) -> ToolInvocation:
        tool = scheduled.tool
        env = self._env
        context = env.context
        if context.done():
            if context.cancelled:
                raise CommandCancelledError(tool.name, "analysis cancelled before start")
            raise CommandTimeoutError(tool.name, "deadline expired before start")

        settings = env.config.settings_for(tool.name)
        executable = tool.resolve(env.which, override=settings.executable)
        if executable is None:
            raise ToolUnavailableError(tool.name, tool.candidate_names(settings.executable))

        timeout = env.config.timeout_for(tool.name)
        root = env.workspace.root
        config_path = ensure_tool_config(root, tool, override=settings.config_file)
        if env.config.execution.prepare_environment:
            request = PreparationRequest(
                tool=tool.name,
                workspace=root,
                context=context,
                runner=env.runner,
                timeout=timeout,
            )
            prepare_environment(tool.preparer, request, env.preparers)
        return ToolInvocation(
            tool=tool.name,
            language=tool.language,
            files=scheduled.files,
            config_path=config_path,
            timeout=timeout,
            command=tool.build_command(executable, config_path=config_path, files=scheduled.files),
            cwd=root,
        )

    def _collect(
        self,
        scheduled: ScheduledTool,
        invocation: ToolInvocation,
        completed: CompletedProcess[str],
    ) -> ToolOutcome:
        tool = scheduled.tool
        output = RawToolOutput(
            tool=tool.name,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            exit_code=completed.returncode,
        )
        category = tool.exit_codes.classify(completed.returncode)
        if category is ExitCategory.TOOL_FAILURE:
            _log_tool_failure(invocation, output)
        elif category is ExitCategory.UNKNOWN:
            LOGGER.info("%s exited with unlisted status %d", tool.name, completed.returncode)

        context = ParseContext(tool=tool.name, source=tool.source, resolve_path=self._env.workspace.original_path)
        normalized = normalize_output(tool.parser, output, context)
        status = ToolStatus.UNPARSEABLE if normalized.error is not None else ToolStatus.COMPLETED
        detail = normalized.error.reason if normalized.error is not None else ""
        if not detail and category is ExitCategory.TOOL_FAILURE:
            detail = f"exit {completed.returncode}: {_tail(output) or 'no output'}"
        report = ToolReport(
            tool=tool.name,
            language=tool.language,
            status=status,
            exit_code=completed.returncode,
            exit_category=category,
            issue_count=len(normalized.issues),
            detail=detail,
        )
        return ToolOutcome(order=scheduled.order, issues=normalized.issues, report=report)

    @staticmethod
    def _degraded(scheduled: ScheduledTool, status: ToolStatus, detail: str) -> ToolOutcome:
        report = ToolReport(
            tool=scheduled.tool.name,
            language=scheduled.tool.language,
            status=status,
            detail=detail,
        )
        return ToolOutcome(order=scheduled.order, issues=(), report=report)


def _log_tool_failure(invocation: ToolInvocation, output: RawToolOutput) -> None:
    """Emit a structured warning describing a tool that reported its own failure."""

    details = [
        f"command: {shlex.join(invocation.command)}",
        f"cwd: {invocation.cwd}",
    ]
    tail = _tail(output)
    if tail:
        details.append(f"output: {tail}")
    LOGGER.warning(
        "%s failed (exit %d)\n  %s",
        invocation.tool,
        output.exit_code,
        "\n  ".join(details),
    )


def _tail(output: RawToolOutput) -> str | None:
    """Return the last non-empty line of stderr, falling back to stdout."""

    for stream in (output.stderr, output.stdout):
        for raw_line in reversed(stream.splitlines()):
            hint = raw_line.strip()
            if hint:
                return shorten(hint, width=160, placeholder="…")
    return None


__all__ = [
    "ExecutionEnvironment",
    "ScheduledTool",
    "ToolOutcome",
    "ToolRunner",
    "schedule_tools",
]
