from typing import Any

from .base import CoachService
from .providers import OpenAICoachService, WebhookCoachService


def create_coach_service(provider: str, **config: Any) -> CoachService:
    """Create a coaching service instance.

    This factory function hides the instantiation logic for different providers.

    Args:
        provider: Provider type ('webhook', 'openai')
        **config: Provider-specific configuration
            For webhook:
                - url: str (required)
                - timeout: float (default: 60.0)
            For OpenAI:
                - api_key: str (required)
                - model: str (default: 'gpt-4o-mini')
                - base_url: str | None

    Returns:
        Initialized coaching service

    Raises:
        ValueError: If provider type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> service = create_coach_service(
        ...     "webhook",
        ...     url="https://example.com/webhook/coach"
        ... )
    """
    provider_lower = provider.lower()

    if provider_lower == "webhook":
        if not config.get("url"):
            raise TypeError("Webhook provider requires 'url' in config")
        return WebhookCoachService(**config)

    if provider_lower == "openai":
        if "api_key" not in config:
            raise TypeError("OpenAI provider requires 'api_key' in config")
        return OpenAICoachService(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'webhook', 'openai'"
    )
