"""
Vector database schemas.

Pydantic models for vector search results. Used for type-safe vector
store interactions.

Dependencies: pydantic, langchain_core.documents
System role: Type definitions for vector operations
"""

from langchain_core.documents import Document
from pydantic import BaseModel, Field

from webdoc_qa.models.chunk import ChunkMetadata


class VectorSearchResult(BaseModel):
    """Single result from vector search."""

    chunk_id: str = Field(description="Chunk identifier")
    content: str = Field(description="Chunk text content")
    metadata: ChunkMetadata = Field(description="Chunk metadata")
    similarity_score: float = Field(description="Cosine similarity to the query")

    @classmethod
    def from_document(cls, doc: Document, score: float) -> "VectorSearchResult":
        """Build a result from an indexed LangChain Document and its score."""
        metadata = doc.metadata
        return cls(
            chunk_id=metadata.get("chunk_id") or doc.id or "",
            content=doc.page_content,
            metadata=ChunkMetadata(
                source=metadata.get("source", ""),
                section=metadata["section"],
                start_index=metadata.get("start_index", 0),
            ),
            similarity_score=float(score),
        )

    def to_document(self) -> Document:
        """Convert back to a LangChain Document (used as tool artifact)."""
        return Document(
            id=self.chunk_id,
            page_content=self.content,
            metadata={
                "chunk_id": self.chunk_id,
                "source": self.metadata.source,
                "section": self.metadata.section.value,
                "start_index": self.metadata.start_index,
            },
        )
