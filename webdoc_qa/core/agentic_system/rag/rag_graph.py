"""LangGraph definition for the retrieve-then-generate workflows.

Builds two linear graphs over RAGState:
1. Plain RAG: retrieve -> generate
2. Query-analyzed RAG: analyze_query -> retrieve -> generate

Dependencies: langgraph, node functions, schema, prompts
System role: Graph orchestration for plain and query-analyzed RAG
"""

import logging
from typing import TYPE_CHECKING

from langgraph.graph import END, StateGraph

from webdoc_qa.core.agentic_system.rag.nodes import (
    analyze_query_node,
    generate_node,
    retrieve_node,
)
from webdoc_qa.core.agentic_system.rag.rag_prompt import get_rag_prompt
from webdoc_qa.core.agentic_system.rag.rag_schema import RAGState
from webdoc_qa.models.search import SearchSpec
from webdoc_qa.models.workflow import PromptStyle

if TYPE_CHECKING:
    from langchain_core.language_models import BaseChatModel
    from langgraph.graph.state import CompiledStateGraph

    from webdoc_qa.boundary.vdb.memory_store import MemoryVectorsStore

logger = logging.getLogger(__name__)


def create_rag_graph(
    chat_model: "BaseChatModel",
    vector_store: "MemoryVectorsStore",
    analyze_query: bool = False,
    section_filter: bool = True,
    k: int = 2,
    prompt_style: PromptStyle = PromptStyle.DEFAULT,
) -> "CompiledStateGraph":
    """Create the retrieve-then-generate graph.

    Args:
        chat_model: Chat model for query analysis and generation
        vector_store: Vector store for retrieval
        analyze_query: Prepend the structured query analysis step
        section_filter: Restrict retrieval to the analyzed section (query analysis only)
        k: Number of chunks to retrieve
        prompt_style: Answer prompt template

    Returns:
        CompiledStateGraph: Compiled and runnable graph
    """
    try:
        logger.info(
            f"{__name__}:create_rag_graph - Building graph "
            f"analyze_query={analyze_query} section_filter={section_filter}"
        )
        prompt = get_rag_prompt(prompt_style)
        graph = StateGraph(RAGState)

        async def retrieve_wrapper(state):
            return await retrieve_node(
                state,
                vector_store,
                k=k,
                section_filter=analyze_query and section_filter,
            )

        async def generate_wrapper(state):
            return await generate_node(state, chat_model, prompt)

        if analyze_query:
            structured_model = chat_model.with_structured_output(SearchSpec, include_raw=True)

            async def analyze_query_wrapper(state):
                return await analyze_query_node(state, structured_model)

            graph.add_node("analyze_query", analyze_query_wrapper)

        graph.add_node("retrieve", retrieve_wrapper)
        graph.add_node("generate", generate_wrapper)

        if analyze_query:
            graph.set_entry_point("analyze_query")
            graph.add_edge("analyze_query", "retrieve")
        else:
            graph.set_entry_point("retrieve")
        graph.add_edge("retrieve", "generate")
        graph.add_edge("generate", END)

        compiled_graph = graph.compile()
        logger.info(f"{__name__}:create_rag_graph - Graph created successfully")
        return compiled_graph

    except Exception as e:
        logger.error(f"{__name__}:create_rag_graph - {type(e).__name__}: {e}")
        raise
