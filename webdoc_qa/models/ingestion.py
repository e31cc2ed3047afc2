"""
Ingestion result model.

Represents the outcome of loading, chunking and indexing the source page.

Dependencies: pydantic
System role: Return type for IngestionPipeline.aingest()
"""

from pydantic import BaseModel, Field

from webdoc_qa.models.chunk import Chunk


class IngestionResult(BaseModel):
    """Result of ingestion pipeline execution."""

    source_url: str = Field(description="URL the document was loaded from")
    chunks: list[Chunk] = Field(default_factory=list, description="Indexed chunks in order")
    section_counts: dict[str, int] = Field(
        default_factory=dict,
        description="Number of chunks per section label",
    )
    processing_time_ms: float = Field(description="Total processing time in milliseconds")

    @property
    def chunk_count(self) -> int:
        """Number of chunks indexed."""
        return len(self.chunks)
