"""
Transition function for the tool-calling graph.

Dependencies: langgraph.graph, langchain_core.messages
System role: Conditional edge after query_or_respond
"""

from enum import Enum

from langchain_core.messages import AIMessage
from langgraph.graph import END, MessagesState


class NodeId(str, Enum):
    """Nodes of the tool-calling graph."""

    QUERY_OR_RESPOND = "query_or_respond"
    TOOLS = "tools"
    GENERATE = "generate"
    END = END


def route_after_query(state: MessagesState) -> NodeId:
    """
    Choose the step after query_or_respond.

    Args:
        state: Graph state whose last message is the model response

    Returns:
        NodeId: TOOLS when the response requests tool calls, else END
    """
    last_message = state["messages"][-1]
    if isinstance(last_message, AIMessage) and last_message.tool_calls:
        return NodeId.TOOLS
    return NodeId.END
