"""Errors raised at the coaching-service boundary.

None of these are retried by the service itself; retry is user-initiated
through the conversation controller.
"""


class CoachServiceError(Exception):
    """Base class for coaching-service failures."""


class CoachStatusError(CoachServiceError):
    """The service answered with a non-success status."""

    def __init__(self, status_code: int):
        super().__init__(f"Request failed ({status_code})")
        self.status_code = status_code


class CoachTransportError(CoachServiceError):
    """The request never produced a response (connection, timeout, DNS)."""

    def __init__(self, message: str):
        super().__init__(message or "Network error")
