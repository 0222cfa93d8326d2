"""Server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """HTTP server runtime configuration.

    Environment Variables:
        LANGO_HOST: Interface the API server binds to (default: 127.0.0.1)
        LANGO_PORT: Port the API server listens on (default: 4400)
        LANGO_CORS_ORIGINS: Origins allowed to call the API in development

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        port = settings.server.PORT
        ```
    """

    HOST: str = Field(default="127.0.0.1", alias="LANGO_HOST")
    PORT: int = Field(default=4400, alias="LANGO_PORT")
    CORS_ORIGINS: list[str] = Field(
        default=["http://localhost:4400", "http://127.0.0.1:4400"],
        alias="LANGO_CORS_ORIGINS",
    )
