"""LangGraph definition for the tool-calling agent.

Builds a three-node graph over MessagesState:
query_or_respond -> (tools -> generate)? -> END

Compiled with a checkpointer it becomes the stateful multi-turn agent:
each invocation on a thread_id resumes that thread's messages.

Dependencies: langgraph, node functions, retrieve tool, routing
System role: Graph orchestration for the tool-calling agents
"""

import logging
from typing import TYPE_CHECKING

from langgraph.graph import END, MessagesState, StateGraph
from langgraph.prebuilt import ToolNode

from webdoc_qa.core.agentic_system.agent.agent_routing import NodeId, route_after_query
from webdoc_qa.core.agentic_system.agent.nodes import (
    agent_generate_node,
    query_or_respond_node,
)

if TYPE_CHECKING:
    from langchain_core.language_models import BaseChatModel
    from langchain_core.tools import BaseTool
    from langgraph.checkpoint.base import BaseCheckpointSaver
    from langgraph.graph.state import CompiledStateGraph

logger = logging.getLogger(__name__)


def create_agent_graph(
    chat_model: "BaseChatModel",
    retrieve_tool: "BaseTool",
    checkpointer: "BaseCheckpointSaver | None" = None,
) -> "CompiledStateGraph":
    """Create the tool-calling graph.

    Args:
        chat_model: Chat model; bound to the retrieve tool for query_or_respond
        retrieve_tool: Tool executed by the tools node
        checkpointer: Conversation memory; None for a stateless graph

    Returns:
        CompiledStateGraph: Compiled and runnable graph
    """
    try:
        logger.info(
            f"{__name__}:create_agent_graph - Building graph "
            f"stateful={checkpointer is not None}"
        )
        model_with_tools = chat_model.bind_tools([retrieve_tool])
        graph = StateGraph(MessagesState)

        async def query_or_respond_wrapper(state):
            return await query_or_respond_node(state, model_with_tools)

        async def generate_wrapper(state):
            return await agent_generate_node(state, chat_model)

        graph.add_node(NodeId.QUERY_OR_RESPOND.value, query_or_respond_wrapper)
        # Tool failures abort the run instead of becoming error messages
        graph.add_node(NodeId.TOOLS.value, ToolNode([retrieve_tool], handle_tool_errors=False))
        graph.add_node(NodeId.GENERATE.value, generate_wrapper)

        graph.set_entry_point(NodeId.QUERY_OR_RESPOND.value)
        graph.add_conditional_edges(
            NodeId.QUERY_OR_RESPOND.value,
            route_after_query,
            {NodeId.TOOLS: NodeId.TOOLS.value, NodeId.END: END},
        )
        graph.add_edge(NodeId.TOOLS.value, NodeId.GENERATE.value)
        graph.add_edge(NodeId.GENERATE.value, END)

        compiled_graph = graph.compile(checkpointer=checkpointer)
        logger.info(f"{__name__}:create_agent_graph - Graph created successfully")
        return compiled_graph

    except Exception as e:
        logger.error(f"{__name__}:create_agent_graph - {type(e).__name__}: {e}")
        raise
