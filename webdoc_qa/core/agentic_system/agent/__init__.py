"""
Tool-calling agents.

Explicit query_or_respond/tools/generate graph (stateless or with memory)
and the prebuilt react agent.
"""

from webdoc_qa.core.agentic_system.agent.agent_graph import create_agent_graph
from webdoc_qa.core.agentic_system.agent.agent_routing import NodeId, route_after_query
from webdoc_qa.core.agentic_system.agent.agent_tool import create_retrieve_tool
from webdoc_qa.core.agentic_system.agent.react_agent import (
    create_react_agent_graph,
    recursion_limit_for,
)

__all__ = [
    "NodeId",
    "create_agent_graph",
    "create_react_agent_graph",
    "create_retrieve_tool",
    "recursion_limit_for",
    "route_after_query",
]
