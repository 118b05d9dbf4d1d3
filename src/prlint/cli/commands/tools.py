# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``prlint tools``: show the tool table and which binaries resolve."""

from __future__ import annotations

import shutil
from pathlib import Path

import typer
from rich.table import Table

from ...config import ConfigError
from ...config_loader import load_config
from ...logging import fail
from ...runtime.console import get_console_manager
from ...tools.builtin import BUILTIN_TOOLS
from .._options import COLOR_OPTION, ROOT_OPTION


def tools_command(
    root: ROOT_OPTION = Path("."),
    use_color: COLOR_OPTION = None,
) -> None:
    """List the built-in analyzers and the executable each one resolves to."""

    try:
        config = load_config(root.resolve())
    except ConfigError as exc:
        fail(str(exc), use_emoji=True, use_color=use_color)
        raise typer.Exit(code=2) from exc
    color = config.output.color if use_color is None else use_color

    table = Table()
    for column in ("Tool", "Language", "Enabled", "Executable"):
        table.add_column(column)
    for tool in BUILTIN_TOOLS:
        settings = config.settings_for(tool.name)
        resolved = tool.resolve(shutil.which, override=settings.executable)
        location = resolved.path if resolved is not None else "missing"
        table.add_row(
            tool.name,
            tool.language.display_name,
            "yes" if settings.enabled else "no",
            location,
        )
    get_console_manager().get(color=color, emoji=config.output.emoji).print(table)


__all__ = ["tools_command"]
