"""Progress tracking.

Pure functions mapping conversation activity to progress:
- session counting keyed on calendar date
- message counting with derived level and experience
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from .models import Progress

XP_PER_LEVEL = 10


class ReplyOutcome(BaseModel):
    """Result of counting one completed round-trip."""

    model_config = ConfigDict(frozen=True)

    progress: Progress = Field(description="Updated progress record")
    leveled_up: bool = Field(description="True if the reply crossed a level boundary")
    new_level: int = Field(description="Level after the reply")


def level_of(total_messages: int) -> int:
    """Level derived from the total message count (starts at 1)."""
    return total_messages // XP_PER_LEVEL + 1


def xp_of(total_messages: int) -> int:
    """Experience within the current level."""
    return total_messages % XP_PER_LEVEL


def xp_to_next_level(total_messages: int) -> int:
    """Messages still needed to reach the next level."""
    return XP_PER_LEVEL - xp_of(total_messages)


def track_session(current: Progress, today: date) -> Progress:
    """Count today's session once.

    Args:
        current: Progress as loaded from storage
        today: Calendar date of the activity

    Returns:
        ``current`` unchanged if today was already counted, otherwise a copy
        with the session counted and dates updated
    """
    if current.last_session_date == today:
        return current
    return current.model_copy(update={
        "sessions_count": current.sessions_count + 1,
        "last_session_date": today,
        "first_session_date": current.first_session_date or today,
    })


def apply_reply(tracked: Progress) -> ReplyOutcome:
    """Count one successfully completed round-trip."""
    prev_level = level_of(tracked.total_messages)
    updated = tracked.model_copy(update={"total_messages": tracked.total_messages + 1})
    new_level = level_of(updated.total_messages)
    return ReplyOutcome(
        progress=updated,
        leveled_up=new_level > prev_level,
        new_level=new_level,
    )


def motivation_text(level: int) -> str:
    """Short encouragement line for the progress panel."""
    if level < 3:
        return "Every session counts. Keep showing up."
    if level < 5:
        return "Building momentum. Consistency is key."
    if level < 10:
        return "Dedicated. Your commitment is showing."
    return "Elite consistency. You’re in the top tier."


def member_since(progress: Progress) -> str:
    """Month and year of the first session, or "Today" if none yet."""
    if progress.first_session_date is None:
        return "Today"
    return progress.first_session_date.strftime("%b %Y")
