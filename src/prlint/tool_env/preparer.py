# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Prepare tool runtimes inside a staged workspace before the tool runs."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..context import AnalysisContext
from ..errors import ToolExecutionError
from ..process_utils import CommandRunner, run_command

if TYPE_CHECKING:
    from subprocess import CompletedProcess  # nosec B404

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PreparationRequest:
    """Inputs required to prepare one tool's environment."""

    tool: str
    workspace: Path
    context: AnalysisContext
    runner: CommandRunner = run_command
    timeout: float | None = None


class EnvironmentPreparer(Protocol):
    """Make the runtime a tool depends on available in the workspace."""

    def prepare(self, request: PreparationRequest) -> None:
        """Prepare the environment described by *request*.

        Raises:
            ToolExecutionError: If preparation fails; the tool is then skipped.
        """

        raise NotImplementedError


class NullPreparer:
    """Preparer for tools that need nothing beyond their executable."""

    def prepare(self, request: PreparationRequest) -> None:
        del request


@dataclass(frozen=True, slots=True)
class NpmPackagePreparer:
    """Install npm packages into the workspace when ``npm list`` reports them missing."""

    packages: tuple[str, ...]
    npm: str = "npm"

    def prepare(self, request: PreparationRequest) -> None:
        for package in self.packages:
            if self._installed(package, request):
                LOGGER.debug("%s: %s already available", request.tool, package)
                continue
            LOGGER.info("%s: installing %s", request.tool, package)
            completed = self._run([self.npm, "install", "--save-dev", package], request)
            if completed.returncode != 0:
                tail = _tail(completed.stderr) or _tail(completed.stdout)
                raise ToolExecutionError(request.tool, f"failed to install {package}: {tail or 'no output'}")

    def _installed(self, package: str, request: PreparationRequest) -> bool:
        return self._run([self.npm, "list", package], request).returncode == 0

    @staticmethod
    def _run(args: list[str], request: PreparationRequest) -> CompletedProcess[str]:
        try:
            return request.runner(
                args,
                cwd=request.workspace,
                check=False,
                timeout=request.timeout,
                context=request.context,
            )
        except FileNotFoundError as exc:
            raise ToolExecutionError(request.tool, f"npm is unavailable: {exc}") from exc
        except OSError as exc:
            raise ToolExecutionError(request.tool, f"unable to run npm: {exc}") from exc


def _tail(text: str | None) -> str:
    lines = [line for line in (text or "").splitlines() if line.strip()]
    return lines[-1].strip() if lines else ""


def default_preparers() -> Mapping[str, EnvironmentPreparer]:
    """Return the preparers referenced by name from the built-in tool table."""

    return {"eslint-plugins": NpmPackagePreparer(packages=("@eslint/js",))}


def prepare_environment(
    name: str | None,
    request: PreparationRequest,
    preparers: Mapping[str, EnvironmentPreparer] | None = None,
) -> None:
    """Run the preparer registered as *name*; unknown names are ignored with a warning."""

    if name is None:
        return
    registry = default_preparers() if preparers is None else preparers
    preparer = registry.get(name)
    if preparer is None:
        LOGGER.warning("%s: no environment preparer named %s", request.tool, name)
        preparer = NullPreparer()
    preparer.prepare(request)


__all__ = [
    "EnvironmentPreparer",
    "NpmPackagePreparer",
    "NullPreparer",
    "PreparationRequest",
    "default_preparers",
    "prepare_environment",
]
