"""
Model provider configuration settings.

Credentials and model identifiers for the chat model and the embedding
model. Both keys fall back to GOOGLE_API_KEY when the dedicated variable
is unset.

Dependencies: pydantic, pydantic_settings
System role: External model provider configuration
"""

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderSettings(BaseSettings):
    """Chat and embedding provider configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PROVIDER_",
        populate_by_name=True,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    chat_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("CHAT_API_KEY", "GOOGLE_API_KEY"),
        description="API key for the chat model provider",
    )
    embeddings_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("EMBEDDINGS_API_KEY", "GOOGLE_API_KEY"),
        description="API key for the embeddings provider",
    )

    chat_model: str = Field(
        default="gemini-2.5-flash",
        description="Google Gemini chat model ID",
    )
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Chat model temperature (0.0 for deterministic)",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Gemini embedding model ID",
    )
