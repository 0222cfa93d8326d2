"""OpenAI integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class OpenAISettings(IntegrationSettings):
    """OpenAI translation client configuration.

    Environment Variables:
        OPENAI_API_KEY: API key used for AI translation (required to translate)
        OPENAI_BASE_URL: Optional base URL for OpenAI-compatible endpoints
        LANGO_AI_MODEL: Chat model used for translation (default: gpt-4o)
        LANGO_AI_TIMEOUT: Request timeout in seconds (default: 60)
        LANGO_AI_BATCH_SIZE: Strings sent per batch request (default: 50)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.openai.is_configured:
            model = settings.openai.MODEL
        ```
    """

    API_KEY: str | None = Field(default=None, alias="OPENAI_API_KEY")
    BASE_URL: str | None = Field(default=None, alias="OPENAI_BASE_URL")
    MODEL: str = Field(default="gpt-4o", alias="LANGO_AI_MODEL")
    TIMEOUT: float = Field(default=60.0, alias="LANGO_AI_TIMEOUT")
    BATCH_SIZE: int = Field(default=50, alias="LANGO_AI_BATCH_SIZE", ge=1)

    @property
    def is_configured(self) -> bool:
        """Check whether an API key is available.

        Returns:
            True if OPENAI_API_KEY is set to a non-empty value.
        """
        return bool(self.API_KEY)
