# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tool environment preparation facade."""

from __future__ import annotations

from .preparer import (
    EnvironmentPreparer,
    NpmPackagePreparer,
    NullPreparer,
    PreparationRequest,
    default_preparers,
    prepare_environment,
)

__all__ = [
    "EnvironmentPreparer",
    "NpmPackagePreparer",
    "NullPreparer",
    "PreparationRequest",
    "default_preparers",
    "prepare_environment",
]
