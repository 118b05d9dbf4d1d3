# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tool execution and outcome aggregation."""

from __future__ import annotations

from .aggregate import aggregate
from .runner import ExecutionEnvironment, ScheduledTool, ToolOutcome, ToolRunner, schedule_tools

__all__ = [
    "ExecutionEnvironment",
    "ScheduledTool",
    "ToolOutcome",
    "ToolRunner",
    "aggregate",
    "schedule_tools",
]
