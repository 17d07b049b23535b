"""
Abstract base class for endpoint sources
"""

from abc import ABC, abstractmethod
from typing import Callable

from ..context import Context
from ..models import Endpoint


EventHandler = Callable[[], None]


class Source(ABC):
    """Abstract base class for endpoint sources"""

    @abstractmethod
    def endpoints(self, ctx: Context) -> list[Endpoint]:
        """
        Produce the current list of endpoints.

        Args:
            ctx: Cancellation context

        Returns:
            List of endpoints, owned by the caller
        """
        pass

    @abstractmethod
    def add_event_handler(self, ctx: Context, handler: EventHandler):
        """
        Register a callback invoked when the source's state changes.

        Args:
            ctx: Cancellation context
            handler: No-argument callback
        """
        pass
