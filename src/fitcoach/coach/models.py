from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CoachRequest(BaseModel):
    """One outbound message to the coaching service."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    message: str = Field(description="User message text")
    session_id: str = Field(alias="sessionId", description="Stable client session identity")

    def to_payload(self) -> dict[str, str]:
        """Wire body: ``{"message": ..., "sessionId": ...}``."""
        return self.model_dump(by_alias=True)


class CoachReply(BaseModel):
    """Reply from the coaching service. ``reply`` may be missing."""

    model_config = ConfigDict(frozen=True)

    reply: str | None = Field(default=None, description="Coach reply text")

    @classmethod
    def from_payload(cls, data: Any) -> "CoachReply":
        """Build a reply from a decoded response body.

        Anything other than an object with a string ``reply`` yields an empty
        reply rather than an error.
        """
        if isinstance(data, dict) and isinstance(data.get("reply"), str):
            return cls(reply=data["reply"])
        return cls()
