"""
Chunk domain model.

Represents an immutable document chunk with source and section metadata,
plus the positional section labeling rule applied at ingestion.

Dependencies: pydantic, langchain_core.documents
System role: Document chunk data structure
"""

import hashlib
from enum import Enum

from langchain_core.documents import Document
from pydantic import BaseModel, ConfigDict, Field


class Section(str, Enum):
    """Coarse position of a chunk within the source document."""

    BEGINNING = "beginning"
    MIDDLE = "middle"
    END = "end"


def section_for_index(index: int, total: int) -> Section:
    """
    Label a chunk by its ordinal position among all chunks.

    The first floor(total / 3) chunks are the beginning, the next
    floor(total / 3) the middle, and the remainder the end.

    Args:
        index: Zero-based chunk position
        total: Total number of chunks

    Returns:
        Section: Section label for the chunk

    Raises:
        ValueError: When index is outside [0, total)
    """
    if not 0 <= index < total:
        raise ValueError(f"index {index} out of range for {total} chunks")

    third = total // 3
    if index < third:
        return Section.BEGINNING
    if index < third * 2:
        return Section.MIDDLE
    return Section.END


def generate_chunk_id(content: str, source: str, start_index: int) -> str:
    """
    Generate deterministic chunk ID from content and position.

    Args:
        content: Chunk text content
        source: Source URL of the chunk
        start_index: Character offset within the source record

    Returns:
        str: SHA-256 hash prefix (16 chars)
    """
    hash_input = f"{content}:{source}:{start_index}"
    return hashlib.sha256(hash_input.encode()).hexdigest()[:16]


class ChunkMetadata(BaseModel):
    """Metadata attached to each chunk and stored alongside its vector."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(description="Source URL of the document")
    section: Section = Field(description="Positional section label")
    start_index: int = Field(default=0, description="Character offset within the source record")


class Chunk(BaseModel):
    """Document chunk model."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Deterministic chunk identifier (hash)")
    content: str = Field(description="Chunk text content")
    metadata: ChunkMetadata = Field(description="Chunk metadata (source, section)")

    def to_document(self) -> Document:
        """Convert to a LangChain Document for indexing."""
        return Document(
            id=self.id,
            page_content=self.content,
            metadata={
                "chunk_id": self.id,
                "source": self.metadata.source,
                "section": self.metadata.section.value,
                "start_index": self.metadata.start_index,
            },
        )
