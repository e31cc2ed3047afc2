"""
Agentic system.

Orchestration graphs for the rag, query-analysis, agent, conversational
and react workflows, plus stream rendering.
"""

from webdoc_qa.core.agentic_system.streaming import SEPARATOR, format_chunk, format_message
from webdoc_qa.core.agentic_system.workflows import build_config, build_inputs, build_workflow

__all__ = [
    "SEPARATOR",
    "build_config",
    "build_inputs",
    "build_workflow",
    "format_chunk",
    "format_message",
]
