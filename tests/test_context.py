# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for :class:`prlint.context.AnalysisContext`."""

from __future__ import annotations

from prlint.context import AnalysisContext


def test_context_without_deadline_never_expires() -> None:
    context = AnalysisContext()

    assert context.remaining() is None
    assert not context.expired()
    assert context.bound_timeout(5.0) == 5.0
    assert context.bound_timeout(None) is None


def test_bound_timeout_uses_tighter_limit() -> None:
    context = AnalysisContext.with_timeout(100)

    assert context.bound_timeout(1.0) == 1.0
    bounded = context.bound_timeout(None)
    assert bounded is not None and 0 < bounded <= 100
    assert context.bound_timeout(500) <= 100


def test_cancel_marks_context_done() -> None:
    context = AnalysisContext()
    assert not context.done()

    context.cancel()

    assert context.cancelled
    assert context.done()


def test_zero_timeout_is_immediately_expired() -> None:
    context = AnalysisContext.with_timeout(0)

    assert context.expired()
    assert context.remaining() == 0.0
