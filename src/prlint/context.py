# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Cancellation and deadline carrier shared by every suspension point of a run."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field


@dataclass(slots=True)
class AnalysisContext:
    """Caller-supplied deadline and cancellation signal for one analysis run.

    ``deadline`` is an absolute :func:`time.monotonic` timestamp. Child processes
    started under the context are killed once it expires or :meth:`cancel` is
    called, and the owning tool contributes no issues.
    """

    deadline: float | None = None
    _cancelled: threading.Event = field(default_factory=threading.Event, repr=False)

    @classmethod
    def with_timeout(cls, seconds: float | None) -> AnalysisContext:
        """Return a context expiring *seconds* from now (``None`` never expires)."""

        if seconds is None:
            return cls()
        return cls(deadline=time.monotonic() + max(0.0, seconds))

    def cancel(self) -> None:
        """Signal every in-flight child process to stop."""

        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def remaining(self) -> float | None:
        """Return seconds until the deadline, ``0.0`` once expired, ``None`` without one."""

        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def expired(self) -> bool:
        remaining = self.remaining()
        return remaining is not None and remaining <= 0.0

    def done(self) -> bool:
        """Return ``True`` when the run has been cancelled or its deadline has passed."""

        return self.cancelled or self.expired()

    def bound_timeout(self, timeout: float | None) -> float | None:
        """Return the tighter of *timeout* and the remaining deadline."""

        remaining = self.remaining()
        if remaining is None:
            return timeout
        if timeout is None:
            return remaining
        return min(timeout, remaining)


__all__ = ["AnalysisContext"]
