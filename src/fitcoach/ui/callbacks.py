"""Conversation callback for the TUI.

Hides the details of how controller updates reach the widgets. The
controller runs in an async worker on the app's event loop, so widgets are
updated directly.
"""

from typing import TYPE_CHECKING

from ..conversation import ConversationCallback, ConversationState, Message
from ..progress import Progress

if TYPE_CHECKING:
    from textual.app import App

    from .widgets import ChatHistoryWidget, ChatInputBar, ProgressPanel


class TUICallback(ConversationCallback):
    """Routes conversation updates to the chat, input bar and progress panel."""

    def __init__(
        self,
        chat: "ChatHistoryWidget",
        input_bar: "ChatInputBar",
        progress_panel: "ProgressPanel",
        app: "App | None" = None,
    ) -> None:
        self.chat = chat
        self.input_bar = input_bar
        self.progress_panel = progress_panel
        self.app = app

    def on_message(self, message: Message) -> None:
        self.chat.add_message(message)

    def on_state_changed(self, state: ConversationState) -> None:
        if state == ConversationState.AWAITING_REPLY:
            self.chat.clear_error()
            self.chat.show_typing()
            self.input_bar.set_busy(True)
        else:
            self.chat.hide_typing()
            self.input_bar.set_busy(False)

    def on_progress(self, progress: Progress) -> None:
        self.progress_panel.update_progress(progress)

    def on_level_up(self, level: int) -> None:
        self.progress_panel.pulse()
        if self.app is not None:
            self.app.notify(f"Level {level} reached", severity="information", timeout=3)

    def on_progress_error(self, message: str) -> None:
        if self.app is not None:
            self.app.notify(f"Progress not saved: {message[:50]}", severity="warning", timeout=5)

    def on_error(self, message: str) -> None:
        self.chat.show_error(message)
        if self.app is not None:
            self.app.notify(message[:50], severity="error", timeout=5)
