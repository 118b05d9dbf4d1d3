# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import os
import shutil

# Bandit: subprocess usage is intentional; we provide a controlled wrapper around
# external tool execution, normalising arguments and disabling ``shell=True``.
import subprocess  # nosec B404
import time
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from .constants import CANCEL_POLL_INTERVAL_S
from .context import AnalysisContext
from .errors import CommandCancelledError, CommandTimeoutError

if TYPE_CHECKING:
    # Bandit: type-only import of subprocess metadata is part of the safe wrapper.
    from subprocess import CompletedProcess as _CompletedProcess  # nosec B404


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class CommandRunner(Protocol):
    """Callable signature shared by :func:`run_command` and test doubles."""

    def __call__(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        check: bool = True,
        timeout: float | None = None,
        context: AnalysisContext | None = None,
    ) -> _CompletedProcess[str]: ...


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def _terminate(process: subprocess.Popen[str]) -> None:
    """Kill *process* and reap it so no zombie outlives the run."""

    process.kill()
    try:
        process.communicate(timeout=CANCEL_POLL_INTERVAL_S * 10)
    except subprocess.TimeoutExpired:  # pragma: no cover - kernel did not deliver SIGKILL yet
        process.wait()


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    check: bool = True,
    timeout: float | None = None,
    context: AnalysisContext | None = None,
    discard_stdin: bool = True,
) -> _CompletedProcess[str]:
    """Execute *args* bound to *timeout* and the optional cancellation *context*.

    Args:
        args: Command and arguments; the executable is resolved on ``PATH``.
        cwd: Working directory for the child process.
        env: Variables layered over the current process environment.
        check: Raise :class:`SubprocessExecutionError` on a non-zero exit.
        timeout: Seconds the child may run; tightened by the context deadline.
        context: Deadline and cancellation carrier polled while waiting.
        discard_stdin: Attach ``/dev/null`` to the child's stdin.

    Returns:
        CompletedProcess[str]: Completed process with captured stdout and stderr.

    Raises:
        FileNotFoundError: If the executable cannot be resolved.
        OSError: If the process cannot be started.
        CommandTimeoutError: If the child outlives the effective timeout.
        CommandCancelledError: If the context is cancelled while the child runs.
    """
    normalized = _normalize_args(args)
    name = Path(normalized[0]).name
    effective_timeout = context.bound_timeout(timeout) if context is not None else timeout
    if context is not None and context.cancelled:
        raise CommandCancelledError(name, "analysis cancelled before start")
    if effective_timeout is not None and effective_timeout <= 0:
        raise CommandTimeoutError(name, "deadline expired before start")

    # Bandit: commands originate from the built-in tool table; we pass
    # argument lists directly without shell expansion.
    process = subprocess.Popen(  # nosec B603
        normalized,
        cwd=str(cwd) if cwd is not None else None,
        env={**os.environ, **env} if env is not None else None,
        stdin=subprocess.DEVNULL if discard_stdin else None,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        errors="replace",
    )
    started = time.monotonic()
    while True:
        wait_for = CANCEL_POLL_INTERVAL_S if context is not None else None
        if effective_timeout is not None:
            left = effective_timeout - (time.monotonic() - started)
            if left <= 0:
                _terminate(process)
                raise CommandTimeoutError(name, f"timed out after {effective_timeout:.1f}s")
            wait_for = left if wait_for is None else min(wait_for, left)
        try:
            stdout, stderr = process.communicate(timeout=wait_for)
            break
        except subprocess.TimeoutExpired:
            if context is not None and context.cancelled:
                _terminate(process)
                raise CommandCancelledError(name, "analysis cancelled") from None

    completed: _CompletedProcess[str] = subprocess.CompletedProcess(
        args=normalized,
        returncode=process.returncode,
        stdout=stdout or "",
        stderr=stderr or "",
    )
    if check and completed.returncode != 0:
        raise SubprocessExecutionError(normalized, completed.returncode, completed.stdout, completed.stderr)
    return completed


__all__ = ["CommandRunner", "SubprocessExecutionError", "run_command"]
