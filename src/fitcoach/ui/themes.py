"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Dark slate palette with a blue accent
COACH_DARK = Theme(
    name="coach-dark",
    primary="#3b82f6",      # Blue - accent, xp bar, user bubbles
    secondary="#10b981",    # Emerald - online indicator, success
    accent="#60a5fa",       # Light blue - level-up highlight
    foreground="#e4e4e7",   # Main text
    background="#0a0a0f",   # Deepest background
    success="#10b981",
    warning="#f59e0b",
    error="#f87171",        # Error line and Retry
    surface="#1e1e2e",      # Coach bubbles
    panel="#12121a",        # Side panel
    dark=True,
    variables={
        "border": "#27273a",
        "border-blurred": "#1e1e2e",

        "scrollbar": "#27273a",
        "scrollbar-hover": "#3f3f5a",
        "scrollbar-active": "#3b82f6",
        "scrollbar-background": "#12121a",

        "footer-foreground": "#a1a1aa",
        "footer-background": "#0a0a0f",
        "footer-key-foreground": "#60a5fa",

        "text-muted": "#71717a",
        "text-disabled": "#3f3f46",

        "input-cursor-background": "#e4e4e7",
        "input-selection-background": "#3b82f6 30%",
    },
)
