"""
Agent retrieval tool.

Defines the retrieve tool the chat model can call. Returns serialized
context as the tool message content and the retrieved chunks as its
artifact.

Dependencies: langchain_core.tools, webdoc_qa.boundary.vdb
System role: Retrieval tool for the tool-calling agents
"""

import logging
from typing import TYPE_CHECKING

from langchain_core.documents import Document
from langchain_core.tools import BaseTool, tool

if TYPE_CHECKING:
    from webdoc_qa.boundary.vdb.memory_store import MemoryVectorsStore

logger = logging.getLogger(__name__)

NO_RESULTS = "No relevant documents found."


def create_retrieve_tool(vector_store: "MemoryVectorsStore", k: int = 2) -> BaseTool:
    """
    Create a retrieve tool bound to a vector store.

    Args:
        vector_store: Store to search
        k: Number of chunks returned per call

    Returns:
        BaseTool: Async tool named "retrieve"
    """

    @tool(response_format="content_and_artifact")
    async def retrieve(query: str) -> tuple[str, list[Document]]:
        """Retrieve information related to a query."""
        logger.info(f"{__name__}:retrieve - START query_len={len(query)}, k={k}")

        results = await vector_store.asimilarity_search(query, k=k)
        if not results:
            logger.warning(f"{__name__}:retrieve - No results found")
            return NO_RESULTS, []

        serialized = "\n\n".join(
            f"Source: {result.metadata.source}\nContent: {result.content}"
            for result in results
        )
        logger.info(f"{__name__}:retrieve - END results={len(results)} output_len={len(serialized)}")
        return serialized, [result.to_document() for result in results]

    return retrieve
