"""
React agent.

Prebuilt model/tool loop that keeps calling tools until the model stops
requesting them. Bounded at run time by the graph recursion limit.

Dependencies: langchain.agents, langgraph
System role: Autonomous variant of the stateful agent
"""

import logging
from typing import TYPE_CHECKING

from langchain.agents import create_agent

from webdoc_qa.core.agentic_system.agent.agent_prompt import REACT_SYSTEM_PROMPT

if TYPE_CHECKING:
    from langchain_core.language_models import BaseChatModel
    from langchain_core.tools import BaseTool
    from langgraph.checkpoint.base import BaseCheckpointSaver
    from langgraph.graph.state import CompiledStateGraph

logger = logging.getLogger(__name__)


def recursion_limit_for(max_iterations: int) -> int:
    """
    Translate a model/tool round bound into a LangGraph recursion limit.

    Each round is a model step plus a tools step; the final answer is one
    more model step.

    Args:
        max_iterations: Maximum number of tool rounds

    Returns:
        int: Recursion limit for the run config
    """
    return max_iterations * 2 + 1


def create_react_agent_graph(
    chat_model: "BaseChatModel",
    retrieve_tool: "BaseTool",
    checkpointer: "BaseCheckpointSaver | None" = None,
) -> "CompiledStateGraph":
    """
    Create the react agent.

    Args:
        chat_model: Chat model driving the loop
        retrieve_tool: Tool available to the model
        checkpointer: Conversation memory

    Returns:
        CompiledStateGraph: Compiled agent graph
    """
    logger.info(f"{__name__}:create_react_agent_graph - Building agent")
    return create_agent(
        model=chat_model,
        tools=[retrieve_tool],
        system_prompt=REACT_SYSTEM_PROMPT,
        checkpointer=checkpointer,
    )
