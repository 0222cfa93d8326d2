"""Project feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class ProjectSettings(FeatureSettings):
    """Location of the project configuration file.

    The project file (YAML) declares languages, the source root, the store
    path, group rules and output sets. See
    ``modules.translations.config.ProjectConfig``.

    Environment Variables:
        LANGO_CONFIG_PATH: Path to the project file (default: lango.config.yml)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        config_path = settings.project.CONFIG_PATH
        ```
    """

    CONFIG_PATH: str = Field(default="lango.config.yml", alias="LANGO_CONFIG_PATH")
