"""Main Textual TUI application.

Orchestrates the UI components and routes user interaction to the
ConversationController.
"""

import asyncio
import contextlib

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Button, Footer, Header

from ..coach import CoachService
from ..conversation import ConversationController
from ..storage import KeyValueStore, ProgressRepository
from .callbacks import TUICallback
from .config import LogLevel
from .styles import APP_CSS
from .themes import COACH_DARK
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, ProgressPanel, copy_text


class FitCoachApp(App):
    """Textual TUI for the fitness coach chat."""

    CSS = APP_CSS
    TITLE = "Fitness Coach"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+r", "retry", "Retry"),
        Binding("ctrl+y", "copy_last_reply", "Copy Reply"),
        Binding("ctrl+p", "copy_progress", "Copy Progress"),
        Binding("ctrl+b", "toggle_maximize_chat", "Max Chat"),
        Binding("ctrl+d", "toggle_debug", "Debug"),
    ]

    def __init__(
        self,
        coach: CoachService,
        store: KeyValueStore,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._coach = coach
        self._store = store
        self._log_level = log_level
        self._controller: ConversationController | None = None

    @property
    def controller(self) -> ConversationController | None:
        return self._controller

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        with Vertical(id="side-panel"):
            yield ProgressPanel(id="progress-panel")
            yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(COACH_DARK)
        self.theme = "coach-dark"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.parse(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        callback = TUICallback(
            chat=self.query_one("#chat-history", ChatHistoryWidget),
            input_bar=self.query_one("#chat-input-bar", ChatInputBar),
            progress_panel=self.query_one("#progress-panel", ProgressPanel),
            app=self,
        )
        self._controller = ConversationController(
            coach=self._coach,
            repository=ProgressRepository(self._store),
            callback=callback,
        )
        self._controller.set_debug_callback(log_panel.route)
        self._controller.start()

        self.sub_title = f"{self._coach.provider_name} | {self._store.backend_type} store"
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission.

        A submission made while a reply is pending is ignored and the input
        keeps its text.
        """
        if self._controller is None:
            return
        if self._controller.submit(event.value):
            self.query_one("#chat-input-bar", ChatInputBar).clear_input()
            self._dispatch()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "retry-btn":
            event.stop()
            self.action_retry()

    @work(exclusive=True, group="coach")
    async def _dispatch(self) -> None:
        """Resolve the pending request as a background async worker."""
        await self._controller.dispatch()

    def action_retry(self) -> None:
        """Re-send the last failed message."""
        if self._controller is not None and self._controller.retry():
            self._dispatch()

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_toggle_maximize_chat(self) -> None:
        """Toggle maximize for chat panel."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        side = self.query_one("#side-panel", Vertical)
        if chat.has_class("-maximized"):
            chat.remove_class("-maximized")
            side.display = True
        else:
            chat.add_class("-maximized")
            side.display = False

    def action_copy_last_reply(self) -> None:
        """Copy last coach reply to clipboard."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        reply = chat.get_last_reply()
        if reply:
            copy_text(chat, reply, "Reply")
        else:
            self.notify("No reply to copy", severity="warning")

    def action_copy_progress(self) -> None:
        """Copy progress summary to clipboard."""
        panel = self.query_one("#progress-panel", ProgressPanel)
        copy_text(panel, panel.get_plain_text(), "Progress")


async def run_textual_tui(
    coach: CoachService,
    store: KeyValueStore,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        coach: Coaching service to send messages to
        store: Key-value store holding progress and session identity
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = FitCoachApp(coach=coach, store=store, log_level=log_level)
    with contextlib.suppress(KeyboardInterrupt, asyncio.CancelledError):
        await app.run_async()
