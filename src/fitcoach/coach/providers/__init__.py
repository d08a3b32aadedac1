from .openai import OpenAICoachService
from .webhook import WebhookCoachService

__all__ = ["OpenAICoachService", "WebhookCoachService"]
