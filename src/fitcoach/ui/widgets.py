"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Transcript rendering (user, coach and system messages)
- Typing indicator and retry affordance
- Progress panel and level-up pulse
- Input history management
- Debug log rendering and filtering
"""

from datetime import datetime

from rich.text import Text
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message as TextualMessage
from textual.widget import Widget
from textual.widgets import Button, RichLog, Static, TextArea

from ..conversation import Message, MessageRole
from ..progress import (
    XP_PER_LEVEL,
    Progress,
    level_of,
    member_since,
    motivation_text,
    xp_of,
    xp_to_next_level,
)
from .config import (
    INPUT_HISTORY_MAX_SIZE,
    LEVEL_UP_PULSE_SECONDS,
    LOG_TIMESTAMP_FORMAT,
    TYPING_INDICATOR_TEXT,
    XP_BAR_COLOR,
    LogLevel,
)
from .formatting import format_xp_bar, render_message_body


def copy_text(widget: Widget, text: str, label: str) -> None:
    """Copy text to the system clipboard, falling back to OSC 52."""
    try:
        import pyperclip
        pyperclip.copy(text)
        widget.app.notify(f"{label} copied", timeout=2)
    except Exception:
        widget.app.copy_to_clipboard(text)
        widget.app.notify(f"{label} copied (terminal)", timeout=2)


class MessageBubble(Vertical):
    """One transcript message. Clicking it copies the raw content."""

    def __init__(self, message: Message, *args, **kwargs) -> None:
        super().__init__(*args, classes=f"chat-message {message.role.value}-message", **kwargs)
        self.message = message

    def compose(self):
        role = self.message.role
        if role == MessageRole.SYSTEM:
            yield Static(Text(self.message.content, justify="center"), classes="message-content")
            return

        header = "You" if role == MessageRole.USER else "Coach"
        timestamp = datetime.now().strftime("%H:%M")
        yield Static(f"{header} [dim]{timestamp}[/]", classes="message-header")

        if role == MessageRole.USER:
            # User text is shown as typed, without markup
            yield Static(Text(self.message.content), classes="message-content")
        else:
            yield Static(render_message_body(self.message.content), classes="message-content")

    def on_click(self, event: Click) -> None:
        event.stop()
        copy_text(self, self.message.content, "Message")


class ErrorLine(Horizontal):
    """Failure message with a Retry button."""

    def __init__(self, error: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._error = error

    def compose(self):
        yield Static(Text(self._error), id="error-text")
        yield Button("Retry", id="retry-btn", variant="error").with_tooltip("Send the message again (Ctrl+R)")


class ChatHistoryWidget(VerticalScroll):
    """Scrollable transcript with typing indicator and error line."""

    BORDER_TITLE = "Fitness Coach"
    BORDER_SUBTITLE = "Conversation"
    ALLOW_MAXIMIZE = True
    ALLOW_SELECT = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._messages: list[Message] = []
        self._typing: Static | None = None
        self._error_line: ErrorLine | None = None

    @property
    def messages(self) -> list[Message]:
        return list(self._messages)

    def add_message(self, message: Message) -> None:
        """Render a message below the existing ones."""
        self._messages.append(message)
        bubble = MessageBubble(message)
        # Keep the typing indicator and error line last
        anchor = self._typing or self._error_line
        if anchor is not None:
            self.mount(bubble, before=anchor)
        else:
            self.mount(bubble)
        self.border_subtitle = f"{len(self._messages)} messages"
        self.scroll_end(animate=False)

    def get_last_reply(self) -> str | None:
        """Get the last coach reply."""
        for msg in reversed(self._messages):
            if msg.role == MessageRole.COACH:
                return msg.content
        return None

    def show_typing(self) -> None:
        if self._typing is None:
            self._typing = Static(TYPING_INDICATOR_TEXT, id="typing-indicator")
            self.mount(self._typing)
            self.scroll_end(animate=False)

    def hide_typing(self) -> None:
        if self._typing is not None:
            self._typing.remove()
            self._typing = None

    def show_error(self, error: str) -> None:
        self.clear_error()
        self._error_line = ErrorLine(error, id="error-line")
        self.mount(self._error_line)
        self.scroll_end(animate=False)

    def clear_error(self) -> None:
        if self._error_line is not None:
            self._error_line.remove()
            self._error_line = None


class ChatInputBar(Horizontal):
    """Chat input bar with TextArea and Send button.

    The input is cleared by the app only once a submission is accepted.
    """

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1

    def compose(self):
        text_area = TextArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        yield text_area
        yield Button("Send", id="send-btn", variant="primary").with_tooltip(
            "Send message (Ctrl+J)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        text_area.highlight_cursor_line = False
        text_area.focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_key(self, event) -> None:
        """Handle keyboard shortcuts.

        Terminals do not pass modifiers with Enter, so ctrl+j submits.
        Up/down at the edges of the text walk the input history.
        """
        if event.key == "ctrl+j":
            self._submit()
        elif event.key == "up" and self._text_area.cursor_location == (0, 0):
            self._navigate_history(-1)
        elif event.key == "down" and self._text_area.cursor_location == self._text_area.document.end:
            self._navigate_history(1)
        else:
            return
        event.prevent_default()
        event.stop()

    @property
    def _text_area(self) -> TextArea:
        return self.query_one("#chat-input", TextArea)

    def _navigate_history(self, direction: int) -> None:
        if not self._history:
            return
        if direction < 0:
            if self._history_index == -1:
                self._history_index = len(self._history) - 1
            elif self._history_index > 0:
                self._history_index -= 1
        elif self._history_index == -1:
            return
        elif self._history_index < len(self._history) - 1:
            self._history_index += 1
        else:
            self._history_index = -1
            self._text_area.text = ""
            return
        self._text_area.text = self._history[self._history_index]

    def _submit(self) -> None:
        value = self._text_area.text.strip()
        if value:
            self.post_message(self.Submitted(value))

    def clear_input(self) -> None:
        """Clear the text after an accepted submission and remember it."""
        value = self._text_area.text.strip()
        if value and (not self._history or self._history[-1] != value):
            self._history.append(value)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        self._text_area.text = ""

    def set_busy(self, busy: bool) -> None:
        """Disable sending while a reply is pending."""
        self.query_one("#send-btn", Button).disabled = busy

    def focus_input(self) -> None:
        """Focus the text input."""
        self._text_area.focus()


class ProgressPanel(Static):
    """Level, experience and session statistics."""

    BORDER_TITLE = "Progress"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._progress = Progress()

    def on_mount(self) -> None:
        self._update_display()

    def update_progress(self, progress: Progress) -> None:
        self._progress = progress
        self._update_display()

    def pulse(self) -> None:
        """Highlight the panel briefly after a level-up."""
        self.add_class("level-up")
        self.set_timer(LEVEL_UP_PULSE_SECONDS, lambda: self.remove_class("level-up"))

    def _update_display(self) -> None:
        total = self._progress.total_messages
        level = level_of(total)
        xp = xp_of(total)

        lines = [
            f"[dim]LEVEL[/]  [bold]{level}[/]",
            f"[{XP_BAR_COLOR}]{format_xp_bar(xp, XP_PER_LEVEL)}[/] {xp}/{XP_PER_LEVEL}",
            f"[dim]{xp_to_next_level(total)} to go[/]",
            "",
            f"[dim]Total Messages[/]  {total}",
            f"[dim]Sessions[/]        {self._progress.sessions_count}",
            f"[dim]Member Since[/]    {member_since(self._progress)}",
            "",
            f"[italic dim]{motivation_text(level)}[/]",
        ]
        self.update("\n".join(lines))
        self.border_subtitle = f"Lvl {level}"

    def get_plain_text(self) -> str:
        """Get progress as plain text for clipboard."""
        total = self._progress.total_messages
        return (
            f"Level: {level_of(total)}  "
            f"XP: {xp_of(total)}/{XP_PER_LEVEL}  "
            f"Messages: {total}  "
            f"Sessions: {self._progress.sessions_count}  "
            f"Member since: {member_since(self._progress)}"
        )


class DebugPanel(RichLog):
    """Trace of controller, coach and UI events.

    Entries below the panel threshold are dropped. Starts hidden; the
    --log-level option shows it at launch and Ctrl+D toggles it.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Session": "green",
        "Conversation": "bright_blue",
        "Coach": "magenta",
        "Progress": "bright_yellow",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel(self._log_level).name}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def log(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Write one timestamped entry tagged with its component."""
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        line = Text.from_markup(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel(level).name:<5}[/] "
            f"[{comp_color}]\\[{component}][/] "
        )
        line.append(message)
        self.write(line)

    def info(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.INFO)

    def route(self, level: str, component: str, message: str) -> None:
        """Debug-callback entry point: ``callback(level, component, message)``."""
        self.log(component, message, LogLevel.parse(level))

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Flip visibility and return whether the panel is now shown."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True

    def get_plain_text(self) -> str:
        return "\n".join(line.text for line in self.lines)

    def on_click(self, event: Click) -> None:
        event.stop()
        text = self.get_plain_text()
        if not text.strip():
            self.app.notify("Log is empty", timeout=2)
            return
        copy_text(self, text, "Debug log")
