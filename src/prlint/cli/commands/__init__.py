# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command registry."""

from __future__ import annotations

import typer

from .analyze import analyze_command
from .tools import tools_command


def register_commands(app: typer.Typer) -> None:
    """Register the built-in commands on ``app``."""

    app.command("analyze")(analyze_command)
    app.command("tools")(tools_command)


__all__ = ["register_commands"]
