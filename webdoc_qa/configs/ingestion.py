"""
Configuration settings for the ingestion pipeline.

Dependencies: pydantic, pydantic_settings
System role: Source document and chunking configuration
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SOURCE_URL = "https://lilianweng.github.io/posts/2023-06-23-agent/"
DEFAULT_USER_AGENT = "webdoc-qa/0.1.0"


class IngestionSettings(BaseSettings):
    """Settings for loading and chunking the source document."""

    model_config = SettingsConfigDict(
        env_prefix="INGESTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    source_url: str = Field(
        default=DEFAULT_SOURCE_URL,
        description="Web page to load and index",
    )
    selector: str = Field(
        default="p",
        min_length=1,
        description="HTML tag whose text content is extracted",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="User-Agent header sent when fetching the page",
    )

    # Chunking settings
    chunk_size: int = Field(
        default=1000,
        gt=0,
        description="Maximum chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=200,
        ge=0,
        description="Overlap between consecutive chunks",
    )

    @model_validator(mode="after")
    def _check_overlap(self) -> "IngestionSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunk_overlap must be smaller than chunk_size")
        return self
