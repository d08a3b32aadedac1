from abc import ABC, abstractmethod
from typing import Any

from .models import CoachReply, CoachRequest


class CoachService(ABC):
    """Abstract base class for coaching services.

    This module hides the design decision of where replies come from.
    Implementations must handle:
    - Transport and authentication
    - Request/response format conversion
    - Mapping failures onto CoachStatusError / CoachTransportError

    Supports async context manager protocol for proper resource cleanup:
        async with service:
            reply = await service.send(request)
    """

    def __init__(self) -> None:
        self._debug_callback: Any | None = None

    @abstractmethod
    async def send(self, request: CoachRequest) -> CoachReply:
        """Send one message and wait for the reply.

        Args:
            request: Message text and session identity

        Returns:
            CoachReply, whose ``reply`` may be None

        Raises:
            CoachStatusError: Non-success response status
            CoachTransportError: Transport-level failure
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Short provider identifier shown in the UI."""

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for request logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    async def __aenter__(self) -> "CoachService":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors raised by httpx/anyio
        during cleanup.
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
