"""Settings schema validation using Pydantic."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Settings(BaseModel):
    """Process-wide phrasebind settings."""

    model_config = ConfigDict(extra="allow")  # Allow extra fields for flexibility

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    default_locale: str = Field(default="en", min_length=1)
    state_key: str = Field(default="polyglot", min_length=1)
    warn_missing_scope: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper()
        return v


def validate_settings(settings_dict: dict[str, Any]) -> Settings:
    """Validate settings dictionary.

    Args:
        settings_dict: Raw settings dictionary from YAML

    Returns:
        Validated Settings object

    Raises:
        ValidationError: If settings are invalid
    """
    return Settings(**settings_dict)
