"""
Cancellation context passed through source calls
"""

import threading
import time
from typing import Optional

from .errors import ContextCancelled


class Context:
    """
    Cancellation token with an optional deadline.

    Sources call check() before doing work and may use remaining()
    to bound their own I/O timeouts.
    """

    def __init__(self, timeout: Optional[float] = None):
        self._cancelled = threading.Event()
        self.deadline = time.monotonic() + timeout if timeout is not None else None

    def cancel(self):
        """Cancel the context"""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        if self._cancelled.is_set():
            return True
        return self.deadline is not None and time.monotonic() >= self.deadline

    def remaining(self) -> Optional[float]:
        """Seconds left until the deadline, or None without one"""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def check(self):
        """Raise ContextCancelled if cancelled or past the deadline"""
        if self._cancelled.is_set():
            raise ContextCancelled("context cancelled")
        if self.deadline is not None and time.monotonic() >= self.deadline:
            raise ContextCancelled("context deadline exceeded")


def background() -> Context:
    """A context that is never cancelled unless cancel() is called"""
    return Context()
