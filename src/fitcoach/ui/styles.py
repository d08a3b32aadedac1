"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout
   chat | progress
   input (full width)
   ============================================ */
Screen {
    layout: grid;
    grid-size: 2 2;
    grid-columns: 1fr 34;
    grid-rows: 1fr auto;
    background: $background;
}

/* ============================================
   Chat Transcript
   ============================================ */
#chat-history {
    height: 100%;
    border: round $border;
    border-title-color: $foreground;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary 60%;
    }

    &.-maximized {
        column-span: 2;
    }
}

.chat-message {
    height: auto;
    margin: 1 0 0 0;
    padding: 0 1;
}

.user-message {
    margin-left: 12;
    background: $primary 15%;
    border-left: tall $primary;
}

.coach-message {
    margin-right: 12;
    background: $surface;
    border-left: tall $border;
}

.system-message {
    margin: 1 8 0 8;
    background: $accent 10%;
    color: $accent;
    text-style: bold;
}

.message-header {
    color: $text-muted;
    text-style: bold;
}

.message-content {
    height: auto;
}

#typing-indicator {
    margin: 1 0 0 0;
    color: $text-muted;
    text-style: italic;
}

#error-line {
    height: auto;
    margin: 1 0 0 0;

    #error-text {
        width: 1fr;
        color: $error;
        padding: 1 1 0 0;
    }

    #retry-btn {
        min-width: 9;
    }
}

/* ============================================
   Side Column: Progress + Debug Log
   ============================================ */
#side-panel {
    height: 100%;
}

#progress-panel {
    height: auto;
    border: round $border;
    border-title-color: $foreground;
    border-subtitle-color: $primary;
    padding: 1 2;
    background: $panel;

    &.level-up {
        border: double $accent;
        background: $accent 15%;
    }
}

#debug-panel {
    height: 1fr;
    border: round $border;
    border-title-color: $warning;
    border-subtitle-color: $text-muted;
    background: $panel;
}

/* ============================================
   Input Bar
   ============================================ */
#chat-input-bar {
    column-span: 2;
    height: auto;
    max-height: 8;
    padding: 0 0 0 0;

    #chat-input {
        width: 1fr;
        height: auto;
        min-height: 3;
        max-height: 7;
        border: round $border;

        &:focus {
            border: round $primary;
        }
    }

    #send-btn {
        min-width: 8;
        margin: 0 0 0 1;
    }
}
"""
