"""Query-or-respond node for the tool-calling graph.

Lets the model either answer directly or request the retrieve tool.

Dependencies: logging, langchain_core, langgraph
System role: Entry node of the tool-calling graph
"""

import logging

from langchain_core.runnables import Runnable
from langgraph.graph import MessagesState

from webdoc_qa.core.exceptions import ProviderError

logger = logging.getLogger(__name__)


async def query_or_respond_node(state: MessagesState, model_with_tools: Runnable) -> dict:
    """Generate a tool call for retrieval or respond directly.

    Args:
        state: Graph state with the conversation so far
        model_with_tools: Chat model bound to the retrieve tool

    Returns:
        dict: State update appending the model response

    Raises:
        ProviderError: When the model call fails
    """
    logger.info(f"{__name__}:query_or_respond_node - START messages={len(state['messages'])}")
    try:
        response = await model_with_tools.ainvoke(state["messages"])
    except Exception as e:
        logger.error(f"{__name__}:query_or_respond_node - FAILED: {type(e).__name__}: {e}")
        raise ProviderError(f"Tool-calling model failed: {e}", operation="query_or_respond") from e

    logger.info(
        f"{__name__}:query_or_respond_node - END tool_calls={len(getattr(response, 'tool_calls', []) or [])}"
    )
    return {"messages": [response]}
