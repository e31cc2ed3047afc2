"""
Vector database boundary.

In-memory vector store and search result schemas.
"""

from webdoc_qa.boundary.vdb.memory_store import MemoryVectorsStore
from webdoc_qa.boundary.vdb.vector_schemas import VectorSearchResult

__all__ = ["MemoryVectorsStore", "VectorSearchResult"]
