"""
Workflow selection enums.

Dependencies: enum (stdlib)
System role: Closed option sets shared by settings, CLI and graph builders
"""

from enum import Enum


class Workflow(str, Enum):
    """Available orchestration graph shapes."""

    RAG = "rag"
    QUERY_ANALYSIS = "query-analysis"
    AGENT = "agent"
    CONVERSATIONAL = "conversational"
    REACT = "react"

    @property
    def is_message_based(self) -> bool:
        """Whether the workflow state is a message list rather than named fields."""
        return self in (Workflow.AGENT, Workflow.CONVERSATIONAL, Workflow.REACT)

    @property
    def uses_memory(self) -> bool:
        """Whether the workflow is compiled against conversation memory."""
        return self in (Workflow.CONVERSATIONAL, Workflow.REACT)


class StreamMode(str, Enum):
    """What each streamed chunk carries."""

    VALUES = "values"
    UPDATES = "updates"


class PromptStyle(str, Enum):
    """Answer prompt template for the retrieve-then-generate workflows."""

    DEFAULT = "default"
    CUSTOM = "custom"
