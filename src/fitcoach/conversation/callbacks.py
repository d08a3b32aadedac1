"""Observer interface for conversation updates.

Hides how a front end learns about controller changes. Every hook is a no-op
here; front ends override the ones they render.
"""

from ..progress import Progress
from .models import ConversationState, Message


class ConversationCallback:
    """Receives controller updates in the order they happen."""

    def on_message(self, message: Message) -> None:
        """A message was appended to the transcript."""

    def on_state_changed(self, state: ConversationState) -> None:
        """The request state changed."""

    def on_progress(self, progress: Progress) -> None:
        """Progress was loaded or updated."""

    def on_level_up(self, level: int) -> None:
        """A reply crossed a level boundary; front ends show a short pulse."""

    def on_progress_error(self, message: str) -> None:
        """Progress could not be saved; the reply was still shown."""

    def on_error(self, message: str) -> None:
        """A request failed; ``message`` is shown next to a retry affordance."""
