"""Deadline and cancellation token passed through a probe run."""

from __future__ import annotations

import threading
import time
from typing import Optional

from .errors import CheckCancelled, DeadlineExceeded, DeadlineMissingError, ProbeError


class CheckContext:
    """Carry an absolute deadline and a cancellation flag for one check.

    The deadline is a wall-clock timestamp (``time.time()`` seconds) so it can
    be handed to dnspython expiration arguments unchanged. ``cancel()`` is safe
    to call from another thread.
    """

    def __init__(self, deadline: Optional[float] = None) -> None:
        """Initialize a context.

        Args:
            deadline (Optional[float]): Absolute expiry timestamp, or None for no deadline.
        """
        self._deadline = deadline
        self._cancelled = threading.Event()

    @classmethod
    def with_timeout(cls, seconds: float) -> "CheckContext":
        """Build a context that expires ``seconds`` from now.

        Args:
            seconds (float): Time budget in seconds.

        Returns:
            CheckContext: Context with an absolute deadline.

        Raises:
            ValueError: If the timeout is not positive.
        """
        if seconds <= 0:
            raise ValueError("Check timeout must be a positive number")
        return cls(time.time() + seconds)

    @classmethod
    def background(cls) -> "CheckContext":
        """Build a context without a deadline.

        Returns:
            CheckContext: Context that never expires on its own.
        """
        return cls()

    @property
    def deadline(self) -> Optional[float]:
        """Return the absolute deadline, if any."""
        return self._deadline

    @property
    def cancelled(self) -> bool:
        """Return whether cancel() was called."""
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Cancel the context; in-flight queries abort at their next check."""
        self._cancelled.set()

    def remaining(self) -> float:
        """Return the seconds left before the deadline, never negative.

        Returns:
            float: Remaining time budget.

        Raises:
            DeadlineMissingError: If the context has no deadline.
        """
        if self._deadline is None:
            raise DeadlineMissingError()
        return max(0.0, self._deadline - time.time())

    def err(self) -> Optional[ProbeError]:
        """Return why the context is done, or None while it is still live.

        Returns:
            Optional[ProbeError]: CheckCancelled, DeadlineExceeded, or None.
        """
        if self._cancelled.is_set():
            return CheckCancelled()
        if self._deadline is not None and time.time() >= self._deadline:
            return DeadlineExceeded()
        return None

    def raise_if_done(self) -> None:
        """Raise the context error when cancelled or expired.

        Raises:
            CheckCancelled: If the context was cancelled.
            DeadlineExceeded: If the deadline has elapsed.
        """
        error = self.err()
        if error is not None:
            raise error


__all__ = ["CheckContext"]
