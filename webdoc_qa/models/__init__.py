"""
Domain models.

Pydantic models and enums shared across ingestion and orchestration.
"""

from webdoc_qa.models.chunk import Chunk, ChunkMetadata, Section, section_for_index
from webdoc_qa.models.ingestion import IngestionResult
from webdoc_qa.models.search import SearchSpec
from webdoc_qa.models.workflow import PromptStyle, StreamMode, Workflow

__all__ = [
    "Chunk",
    "ChunkMetadata",
    "IngestionResult",
    "PromptStyle",
    "SearchSpec",
    "Section",
    "StreamMode",
    "Workflow",
    "section_for_index",
]
