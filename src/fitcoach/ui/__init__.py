"""Terminal UI module for fitcoach.

Provides a Textual-based TUI for chatting with the coach.

Module structure (each module hides a design decision):
- formatting.py: Block nodes to Rich text
- widgets.py: Custom widgets (transcript, progress panel, input, log)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette and theme configuration
- callbacks.py: Controller integration (how the TUI receives updates)
- app.py: Application orchestration (user interaction flow)
"""

from .app import FitCoachApp, run_textual_tui
from .callbacks import TUICallback
from .config import LogLevel
from .formatting import render_blocks, render_message_body
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, ProgressPanel

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "FitCoachApp",
    "LogLevel",
    "ProgressPanel",
    "TUICallback",
    "render_blocks",
    "render_message_body",
    "run_textual_tui",
]
