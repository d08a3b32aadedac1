"""
fitcoach: a terminal chat client for an AI fitness coach.

Renders coach replies from lightweight markup into structured blocks and
tracks level, experience and sessions from conversation activity.
Each sub-package hides one design decision.
"""

__version__ = "0.1.0"

from .conversation import (
    ConversationCallback,
    ConversationController,
    ConversationState,
    Message,
    MessageRole,
)
from .markup import BlockKind, BlockNode, InlineSpan, SpanKind, parse_blocks, parse_inline
from .progress import Progress, apply_reply, track_session

__all__ = [
    "BlockKind",
    "BlockNode",
    "ConversationCallback",
    "ConversationController",
    "ConversationState",
    "InlineSpan",
    "Message",
    "MessageRole",
    "Progress",
    "SpanKind",
    "apply_reply",
    "parse_blocks",
    "parse_inline",
    "track_session",
]
