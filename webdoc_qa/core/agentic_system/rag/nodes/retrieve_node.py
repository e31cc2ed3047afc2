"""Retrieval node for the retrieve-then-generate graphs.

Dependencies: logging, webdoc_qa.boundary.vdb
System role: Context retrieval stage
"""

import logging
from typing import TYPE_CHECKING

from webdoc_qa.core.agentic_system.rag.rag_schema import RAGState

if TYPE_CHECKING:
    from webdoc_qa.boundary.vdb.memory_store import MemoryVectorsStore

logger = logging.getLogger(__name__)


async def retrieve_node(
    state: RAGState,
    vector_store: "MemoryVectorsStore",
    k: int = 2,
    section_filter: bool = False,
) -> dict:
    """Retrieve the chunks most similar to the question or analyzed query.

    Uses state["search"] when query analysis ran, else the raw question.
    The section restriction applies only when section_filter is set and a
    search spec is present; fewer than k results is not an error.

    Args:
        state: Graph state with question and optional search
        vector_store: Vector store for similarity search
        k: Number of chunks to retrieve
        section_filter: Restrict results to search.section

    Returns:
        dict: State update with context
    """
    search = state.get("search")
    query = search.query if search is not None else state["question"]
    section = search.section if (search is not None and section_filter) else None

    logger.info(
        f"{__name__}:retrieve_node - START k={k} "
        f"section={section.value if section else None}"
    )
    context = await vector_store.asimilarity_search(query, k=k, section=section)
    logger.info(f"{__name__}:retrieve_node - END retrieved={len(context)}")

    return {"context": context}
