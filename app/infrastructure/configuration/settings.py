"""Lango configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import OpenAISettings

# Feature settings
from infrastructure.configuration.features import ProjectSettings

# Infrastructure settings
from infrastructure.configuration.infrastructure import ServerSettings


class Settings(BaseSettings):
    """Lango configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Integrations**: External service configurations (OpenAI)
    - **Features**: Feature module configurations (project file location)
    - **Infrastructure**: Core system configurations (HTTP server)

    Environment Variables:
        PREFIX: Environment prefix; empty means production rendering of logs
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA reported by the /version endpoint

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        api_key = settings.openai.API_KEY
        port = settings.server.PORT
        config_path = settings.project.CONFIG_PATH
        ```
    """

    # Application-level settings
    PREFIX: str = "dev"
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Integration settings
    openai: OpenAISettings

    # Feature settings
    project: ProjectSettings

    # Infrastructure settings
    server: ServerSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "openai": OpenAISettings,
            # Features
            "project": ProjectSettings,
            # Infrastructure
            "server": ServerSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
