"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field, ValidationError

from webdoc_qa.configs.base import BaseSettings
from webdoc_qa.configs.ingestion import IngestionSettings
from webdoc_qa.configs.providers import ProviderSettings
from webdoc_qa.configs.workflow import WorkflowSettings
from webdoc_qa.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    providers: ProviderSettings = Field(default_factory=ProviderSettings)
    ingestion: IngestionSettings = Field(default_factory=IngestionSettings)
    workflow: WorkflowSettings = Field(default_factory=WorkflowSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables and .env loaded once, on first call.

    Returns:
        Settings: Application settings instance

    Raises:
        ConfigurationError: When any setting fails validation
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
