"""Conversation state machine.

Owns the transcript and the single outbound request:

    IDLE --submit--> AWAITING_REPLY --success--> IDLE
                          |
                          +--failure--> ERRORED --retry--> AWAITING_REPLY

Submission mutates state synchronously (the user message is appended before
any await), and ``dispatch`` performs the request and the remaining
mutations. Only one request is ever outstanding.
"""

from collections.abc import Callable
from datetime import date, datetime, timezone
from typing import Any

from ..coach import CoachRequest, CoachService, CoachServiceError
from ..progress import Progress, ReplyOutcome, apply_reply, level_of, track_session, xp_of
from ..storage import ProgressRepository
from .callbacks import ConversationCallback
from .models import ConversationState, Message, MessageRole

WELCOME_MESSAGE_ID = "welcome"

WELCOME_TEXT = (
    "Welcome! I’m your AI fitness coach. I can help with weightlifting programs, "
    "yoga guidance, stretching & mobility routines, and nutrition advice.\n\n"
    "What are you working on today?"
)

FALLBACK_REPLY = "I couldn’t generate a response. Please try again."

GENERIC_ERROR = "Something went wrong"


def utc_today() -> date:
    """Calendar date used as the session boundary (UTC)."""
    return datetime.now(timezone.utc).date()


def level_up_text(level: int) -> str:
    return f"Level up! You’ve reached Level {level}"


class ConversationController:
    """Drives one conversation view.

    Example:
        controller = ConversationController(coach, ProgressRepository(store))
        controller.start()
        if controller.submit(text):   # appends the user message immediately
            await controller.dispatch()
    """

    def __init__(
        self,
        coach: CoachService,
        repository: ProgressRepository,
        callback: ConversationCallback | None = None,
        today: Callable[[], date] = utc_today,
    ) -> None:
        self._coach = coach
        self._repository = repository
        self._callback = callback or ConversationCallback()
        self._today = today
        self._debug_callback: Any | None = None

        self._messages: list[Message] = []
        self._state = ConversationState.IDLE
        self._pending_text: str | None = None
        self._last_attempted_text: str | None = None
        self._error: str | None = None
        self._progress = Progress()
        self._session_id: str | None = None

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def state(self) -> ConversationState:
        return self._state

    @property
    def error(self) -> str | None:
        """Message of the last failure while ERRORED, else None."""
        return self._error

    @property
    def last_attempted_text(self) -> str | None:
        """Text of the most recent outbound request (what retry re-sends)."""
        return self._last_attempted_text

    @property
    def progress(self) -> Progress:
        """In-memory progress snapshot used for display."""
        return self._progress

    @property
    def level(self) -> int:
        return level_of(self._progress.total_messages)

    @property
    def xp(self) -> int:
        return xp_of(self._progress.total_messages)

    @property
    def session_id(self) -> str:
        if self._session_id is None:
            self._session_id = self._repository.load_session_id()
        return self._session_id

    @property
    def can_retry(self) -> bool:
        return self._state == ConversationState.ERRORED and self._last_attempted_text is not None

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for detailed logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'

        The callback is propagated to the coaching service.
        """
        self._debug_callback = callback
        self._coach.set_debug_callback(callback)

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def start(self) -> None:
        """Load identity and progress, then greet the user."""
        session_id = self.session_id
        self._progress = self._repository.load_progress()
        self._debug(
            "info", "Session",
            f"Session {session_id[:8]}, {self._progress.total_messages} messages, "
            f"{self._progress.sessions_count} sessions"
        )
        self._callback.on_progress(self._progress)
        self._append(Message(id=WELCOME_MESSAGE_ID, role=MessageRole.COACH, content=WELCOME_TEXT))

    def submit(self, text: str) -> bool:
        """Accept user text for sending.

        Returns:
            True if the user message was appended and a request is now pending
            (the caller clears its input); False if the text is empty or a
            request is already outstanding (the caller keeps its input).
        """
        text = text.strip()
        if not text:
            return False
        if self._state == ConversationState.AWAITING_REPLY:
            self._debug("debug", "Conversation", "Submission ignored: reply pending")
            return False

        self._append(Message(role=MessageRole.USER, content=text))
        self._begin_request(text)
        return True

    def retry(self) -> bool:
        """Re-arm the failed request without appending another user message."""
        if not self.can_retry:
            return False
        self._debug("info", "Conversation", "Retrying last message")
        self._begin_request(self._last_attempted_text)
        return True

    async def dispatch(self) -> None:
        """Perform the pending request and resolve it.

        Only a failed coach call leads to ERRORED. Once a reply has arrived the
        controller ends IDLE, even if an observer raises (the exception then
        propagates); a progress save failure goes to ``on_progress_error``.

        Raises:
            RuntimeError: If no request is pending
        """
        if self._state != ConversationState.AWAITING_REPLY or self._pending_text is None:
            raise RuntimeError("No request is pending")

        text = self._pending_text
        request = CoachRequest(message=text, session_id=self.session_id)

        try:
            reply = await self._coach.send(request)
        except CoachServiceError as e:
            self._fail(str(e))
            return
        except Exception as e:
            self._debug("error", "Conversation", f"Unexpected failure: {e!r}")
            self._fail(str(e))
            return

        self._resolve(reply.reply)

    async def send(self, text: str) -> bool:
        """Submit and dispatch in one call. Returns False if not accepted."""
        if not self.submit(text):
            return False
        await self.dispatch()
        return True

    async def retry_last(self) -> bool:
        """Retry and dispatch in one call. Returns False if nothing to retry."""
        if not self.retry():
            return False
        await self.dispatch()
        return True

    def _append(self, message: Message) -> None:
        self._messages.append(message)
        self._callback.on_message(message)

    def _set_state(self, state: ConversationState) -> None:
        if state != self._state:
            self._debug("debug", "Conversation", f"{self._state.value} -> {state.value}")
        self._state = state
        self._callback.on_state_changed(state)

    def _begin_request(self, text: str) -> None:
        self._error = None
        self._pending_text = text
        self._last_attempted_text = text
        self._set_state(ConversationState.AWAITING_REPLY)

    def _record_reply(self) -> ReplyOutcome | None:
        """Count the completed round-trip in storage.

        Returns None if progress could not be read or written; the reply is
        still shown and the request is not re-armed.
        """
        try:
            # Re-read from storage: another client may have written since start()
            current = self._repository.load_progress()
            outcome = apply_reply(track_session(current, self._today()))
            self._repository.save_progress(outcome.progress)
        except Exception as e:
            self._debug("error", "Progress", f"Could not save progress: {e!r}")
            self._callback.on_progress_error(str(e) or GENERIC_ERROR)
            return None

        self._progress = outcome.progress
        self._callback.on_progress(outcome.progress)
        return outcome

    def _resolve(self, reply_text: str | None) -> None:
        # A received reply always ends IDLE and is never re-sent
        try:
            outcome = self._record_reply()

            if not reply_text:
                self._debug("warning", "Conversation", "Empty reply, using fallback text")
            self._append(Message(role=MessageRole.COACH, content=reply_text or FALLBACK_REPLY))

            if outcome is not None and outcome.leveled_up:
                self._debug("info", "Progress", f"Level up to {outcome.new_level}")
                self._append(Message(role=MessageRole.SYSTEM, content=level_up_text(outcome.new_level)))
                self._callback.on_level_up(outcome.new_level)
        finally:
            self._pending_text = None
            self._set_state(ConversationState.IDLE)

    def _fail(self, message: str) -> None:
        self._error = message or GENERIC_ERROR
        self._pending_text = None
        self._debug("error", "Conversation", self._error)
        self._set_state(ConversationState.ERRORED)
        self._callback.on_error(self._error)
