# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from helpers.runners import RecordingRunner


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def which_all() -> Callable[[str], str | None]:
    """Resolve every executable to a fake absolute path."""

    def _which(name: str) -> str | None:
        return name if name.startswith("/") else f"/usr/bin/{name}"

    return _which


@pytest.fixture
def which_none() -> Callable[[str], str | None]:
    def _which(name: str) -> str | None:
        del name
        return None

    return _which
