"""Base Pydantic model configurations for infrastructure.

Defines the base model configuration shared by validated configuration
objects (for example the project file model).
"""

from pydantic import BaseModel, ConfigDict


class InfrastructureModel(BaseModel):
    """Base model for validated configuration components.

    Provides standard Pydantic configuration for:
    - Accepting both field names and aliases
    - Validation on assignment
    - Whitespace stripping on strings
    - Rejecting unknown fields so typos in config files surface early
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        str_strip_whitespace=True,
        extra="forbid",
    )
