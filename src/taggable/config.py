"""Configuration management for taggable."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from TAGGABLE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TAGGABLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "postgresql://localhost:5432/taggable"
    db_pool_min_size: int = 2
    db_pool_max_size: int = 10
    db_command_timeout: float = 30.0

    # Normalization
    default_separator: str = " "
    min_tag_length: int = Field(default=4, ge=1)

    # Pluggable collaborators
    text_utilities: str = "spacy"
    spacy_model: str = "en_core_web_sm"
    aggregation_strategy: str | None = None  # None = unconfigured

    # Logging
    log_level: str = "INFO"

    @field_validator("default_separator")
    @classmethod
    def default_separator_to_space(cls, v: str | None) -> str:
        """An empty separator means a single space."""
        return v or " "

    @field_validator("text_utilities")
    @classmethod
    def validate_text_utilities(cls, v: str) -> str:
        """Validate text utilities provider is one of the supported options."""
        valid_providers = {"spacy", "simple"}
        if v.lower() not in valid_providers:
            raise ValueError(
                f"Invalid TEXT_UTILITIES: '{v}'. "
                f"Must be one of: {', '.join(sorted(valid_providers))}"
            )
        return v.lower()

    @field_validator("aggregation_strategy")
    @classmethod
    def validate_aggregation_strategy(cls, v: str | None) -> str | None:
        """Validate aggregation strategy name, empty string means unconfigured."""
        if not v:
            return None

        valid_strategies = {"postgres"}
        if v.lower() not in valid_strategies:
            raise ValueError(
                f"Invalid AGGREGATION_STRATEGY: '{v}'. "
                f"Must be one of: {', '.join(sorted(valid_strategies))}"
            )
        return v.lower()


# Lazy settings initialization
_settings = None


def get_settings() -> Settings:
    """Get the settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None


# This will be accessed as a property
class SettingsProxy:
    """Proxy to provide attribute access to settings."""

    def __getattr__(self, name):
        return getattr(get_settings(), name)

    def __setattr__(self, name, value):
        setattr(get_settings(), name, value)


settings = SettingsProxy()
