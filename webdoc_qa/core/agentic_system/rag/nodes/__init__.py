"""Nodes for the retrieve-then-generate graphs."""

from webdoc_qa.core.agentic_system.rag.nodes.analyze_query_node import (
    analyze_query_node,
    parse_search_spec,
)
from webdoc_qa.core.agentic_system.rag.nodes.generate_node import generate_node
from webdoc_qa.core.agentic_system.rag.nodes.retrieve_node import retrieve_node

__all__ = [
    "analyze_query_node",
    "generate_node",
    "parse_search_spec",
    "retrieve_node",
]
