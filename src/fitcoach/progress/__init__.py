from .models import Progress
from .tracker import (
    XP_PER_LEVEL,
    ReplyOutcome,
    apply_reply,
    level_of,
    member_since,
    motivation_text,
    track_session,
    xp_of,
    xp_to_next_level,
)

__all__ = [
    "XP_PER_LEVEL",
    "Progress",
    "ReplyOutcome",
    "apply_reply",
    "level_of",
    "member_since",
    "motivation_text",
    "track_session",
    "xp_of",
    "xp_to_next_level",
]
