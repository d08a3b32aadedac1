from .base import CoachService
from .errors import CoachServiceError, CoachStatusError, CoachTransportError
from .factory import create_coach_service
from .models import CoachReply, CoachRequest
from .providers import OpenAICoachService, WebhookCoachService

__all__ = [
    "CoachService",
    "create_coach_service",
    "CoachReply",
    "CoachRequest",
    "CoachServiceError",
    "CoachStatusError",
    "CoachTransportError",
    "OpenAICoachService",
    "WebhookCoachService",
]
