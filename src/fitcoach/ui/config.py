"""UI constants for the coach TUI.

Layout sizes, glyphs and timings live here so widgets stay free of literals.
"""

from enum import IntEnum


class LogLevel(IntEnum):
    """Log panel threshold; entries below the threshold are dropped."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Level named by ``value`` (case-insensitive), DEBUG if unknown."""
        return cls.__members__.get(value.upper(), cls.DEBUG)


# Level-up pulse on the progress panel
LEVEL_UP_PULSE_SECONDS = 0.65

# Progress bar
XP_BAR_WIDTH = 20
XP_BAR_FILLED = "█"
XP_BAR_EMPTY = "░"
XP_BAR_COLOR = "#3b82f6"

# Message rendering
BULLET = "•"
TYPING_INDICATOR_TEXT = "Coach is typing..."

# Input history configuration
INPUT_HISTORY_MAX_SIZE = 100

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
