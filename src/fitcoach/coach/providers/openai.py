from typing import Any

from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from ...prompts import get_coach_prompt
from ..base import CoachService
from ..errors import CoachStatusError, CoachTransportError
from ..models import CoachReply, CoachRequest


class OpenAICoachService(CoachService):
    """Coaching service answered directly by an OpenAI chat model.

    Hidden design decisions:
    - OpenAI API client initialization
    - Coach persona (system prompt loaded from prompts/coach.txt)
    - Session identity forwarded as the ``user`` field
    - Mapping of API errors onto the error taxonomy
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: str | None = None,
        temperature: float = 0.7,
        system_prompt: str | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenAI coach.

        Args:
            api_key: OpenAI API key
            model: Chat model to use
            base_url: Optional custom API base URL
            temperature: Sampling temperature
            system_prompt: Coach persona (None loads the packaged prompt)
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        super().__init__()
        self._model = model
        self._temperature = temperature
        self._system_prompt = system_prompt
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        return self._model

    @property
    def provider_name(self) -> str:
        return f"openai:{self._model}"

    def _build_messages(self, request: CoachRequest) -> list[dict[str, str]]:
        system_prompt = self._system_prompt or get_coach_prompt()
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": request.message},
        ]

    async def send(self, request: CoachRequest) -> CoachReply:
        self._debug("info", "Coach", f"Calling {self._model} ({len(request.message)} chars)")
        try:
            completion = await self._client.chat.completions.create(
                model=self._model,
                messages=self._build_messages(request),
                temperature=self._temperature,
                user=request.session_id,
            )
        except APIStatusError as e:
            self._debug("warning", "Coach", f"Status {e.status_code}")
            raise CoachStatusError(e.status_code) from e
        except APIConnectionError as e:
            self._debug("error", "Coach", f"Transport failure: {e!r}")
            raise CoachTransportError(str(e)) from e

        if not completion.choices:
            return CoachReply()
        return CoachReply(reply=completion.choices[0].message.content)

    async def close(self) -> None:
        await self._client.close()
