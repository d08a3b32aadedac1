"""Data models for user progress.

Hides the stored representation of progress: camelCase JSON keys and
empty strings for unset dates, as written by earlier clients.
"""

import json
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer, field_validator


class Progress(BaseModel):
    """Persisted progress counters.

    Level and experience are derived from ``total_messages`` and never stored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_messages: int = Field(default=0, ge=0, alias="totalMessages")
    sessions_count: int = Field(default=0, ge=0, alias="sessionsCount")
    last_session_date: date | None = Field(default=None, alias="lastSessionDate")
    first_session_date: date | None = Field(default=None, alias="firstSessionDate")

    @field_validator("last_session_date", "first_session_date", mode="before")
    @classmethod
    def _empty_date_is_none(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    @field_serializer("last_session_date", "first_session_date")
    def _serialize_date(self, value: date | None) -> str:
        return value.isoformat() if value else ""

    def to_json(self) -> str:
        """Serialize using the stored key names."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, raw: str | None) -> "Progress":
        """Deserialize stored progress, defaulting anything unusable.

        Fields are recovered one at a time: an invalid field falls back to its
        default without discarding the valid ones. Absent, non-JSON or
        non-object input yields a fresh record.
        """
        if not raw:
            return cls()
        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            return cls()
        if not isinstance(data, dict):
            return cls()

        recovered: dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            key = field.alias or name
            if key not in data:
                continue
            try:
                single = cls.model_validate({key: data[key]})
            except ValidationError:
                continue
            recovered[name] = getattr(single, name)
        return cls(**recovered)
