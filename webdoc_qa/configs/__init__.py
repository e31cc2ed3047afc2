"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from webdoc_qa.configs.ingestion import IngestionSettings
from webdoc_qa.configs.providers import ProviderSettings
from webdoc_qa.configs.settings import Settings, get_settings
from webdoc_qa.configs.workflow import WorkflowSettings

__all__ = [
    "IngestionSettings",
    "ProviderSettings",
    "Settings",
    "WorkflowSettings",
    "get_settings",
]
