"""Nodes for the tool-calling graph."""

from webdoc_qa.core.agentic_system.agent.nodes.generate_node import agent_generate_node
from webdoc_qa.core.agentic_system.agent.nodes.query_or_respond_node import (
    query_or_respond_node,
)

__all__ = ["agent_generate_node", "query_or_respond_node"]
