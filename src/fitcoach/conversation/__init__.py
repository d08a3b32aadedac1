from .callbacks import ConversationCallback
from .controller import (
    FALLBACK_REPLY,
    GENERIC_ERROR,
    WELCOME_MESSAGE_ID,
    WELCOME_TEXT,
    ConversationController,
    level_up_text,
    utc_today,
)
from .models import ConversationState, Message, MessageRole

__all__ = [
    "FALLBACK_REPLY",
    "GENERIC_ERROR",
    "WELCOME_MESSAGE_ID",
    "WELCOME_TEXT",
    "ConversationCallback",
    "ConversationController",
    "ConversationState",
    "Message",
    "MessageRole",
    "level_up_text",
    "utc_today",
]
