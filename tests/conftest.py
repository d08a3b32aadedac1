"""Pytest configuration and shared fixtures."""
import asyncio
from datetime import date

import pytest

from fitcoach.coach import CoachReply, CoachRequest, CoachService
from fitcoach.conversation import ConversationCallback, ConversationController
from fitcoach.storage import PROGRESS_KEY, InMemoryKeyValueStore, ProgressRepository


class FakeCoachService(CoachService):
    """Coach that replays queued outcomes.

    Each outcome is a reply string, a CoachReply, or an exception to raise.
    With nothing queued it answers "ok".
    """

    def __init__(self) -> None:
        super().__init__()
        self.requests: list[CoachRequest] = []
        self.closed = False
        self._outcomes: list = []

    def queue(self, *outcomes) -> None:
        self._outcomes.extend(outcomes)

    async def send(self, request: CoachRequest) -> CoachReply:
        self.requests.append(request)
        outcome = self._outcomes.pop(0) if self._outcomes else "ok"
        if isinstance(outcome, BaseException):
            raise outcome
        if isinstance(outcome, CoachReply):
            return outcome
        return CoachReply(reply=outcome)

    async def close(self) -> None:
        self.closed = True

    @property
    def provider_name(self) -> str:
        return "fake"


class GatedCoachService(FakeCoachService):
    """Fake coach that holds every reply until released."""

    def __init__(self) -> None:
        super().__init__()
        self.release = asyncio.Event()

    async def send(self, request: CoachRequest) -> CoachReply:
        await self.release.wait()
        return await super().send(request)


class FailingWriteStore(InMemoryKeyValueStore):
    """In-memory store whose writes to one key fail a set number of times."""

    def __init__(self, key: str, failures: int = 1) -> None:
        super().__init__()
        self.key = key
        self.failures = failures

    def set(self, key: str, value: str) -> None:
        if key == self.key and self.failures > 0:
            self.failures -= 1
            raise OSError(28, "No space left on device")
        super().set(key, value)


class RecordingCallback(ConversationCallback):
    """Collects controller notifications as (event, payload) pairs."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    def on_message(self, message):
        self.events.append(("message", message))

    def on_state_changed(self, state):
        self.events.append(("state", state))

    def on_progress(self, progress):
        self.events.append(("progress", progress))

    def on_level_up(self, level):
        self.events.append(("level_up", level))

    def on_progress_error(self, message):
        self.events.append(("progress_error", message))

    def on_error(self, message):
        self.events.append(("error", message))

    def of(self, kind: str) -> list:
        return [payload for event, payload in self.events if event == kind]


@pytest.fixture
def today():
    """Fixed calendar date for session tracking."""
    return date(2026, 3, 14)


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def repository(store):
    return ProgressRepository(store)


@pytest.fixture
def coach():
    return FakeCoachService()


@pytest.fixture
def gated_coach():
    return GatedCoachService()


@pytest.fixture
def callback():
    return RecordingCallback()


@pytest.fixture
def controller(coach, repository, callback, today):
    """A started controller wired to in-memory fakes."""
    ctrl = ConversationController(
        coach=coach,
        repository=repository,
        callback=callback,
        today=lambda: today,
    )
    ctrl.start()
    return ctrl


@pytest.fixture
def failing_store():
    """Store whose first progress write fails with a disk-full error."""
    return FailingWriteStore(PROGRESS_KEY)
