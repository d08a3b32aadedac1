from typing import Any

import httpx

from ..base import CoachService
from ..errors import CoachStatusError, CoachTransportError
from ..models import CoachReply, CoachRequest


class WebhookCoachService(CoachService):
    """Coaching service reached through a JSON webhook.

    Hidden design decisions:
    - HTTP client setup (httpx.AsyncClient, timeout)
    - Wire format: POST {"message", "sessionId"} -> {"reply"}
    - Mapping of status codes and transport failures onto the error taxonomy
    """

    def __init__(
        self,
        url: str,
        timeout: float = 60.0,
        **client_kwargs: Any
    ):
        """Initialize webhook service.

        Args:
            url: Webhook endpoint URL
            timeout: Request timeout in seconds
            **client_kwargs: Additional kwargs for httpx.AsyncClient
        """
        super().__init__()
        self._url = url
        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            **client_kwargs
        )

    @property
    def url(self) -> str:
        return self._url

    @property
    def provider_name(self) -> str:
        return "webhook"

    async def send(self, request: CoachRequest) -> CoachReply:
        self._debug("info", "Coach", f"POST {self._url} ({len(request.message)} chars)")
        try:
            response = await self._client.post(self._url, json=request.to_payload())
        except httpx.HTTPError as e:
            self._debug("error", "Coach", f"Transport failure: {e!r}")
            raise CoachTransportError(str(e)) from e

        if not response.is_success:
            self._debug("warning", "Coach", f"Status {response.status_code}")
            raise CoachStatusError(response.status_code)

        try:
            data = response.json()
        except ValueError:
            self._debug("warning", "Coach", "Reply body is not JSON")
            return CoachReply()

        return CoachReply.from_payload(data)

    async def close(self) -> None:
        await self._client.aclose()
