"""
Query analysis schema.

Structured output the chat model must produce when turning a question
into a section-scoped search.

Dependencies: pydantic
System role: Structured output schema for query analysis
"""

from pydantic import BaseModel, Field

from webdoc_qa.models.chunk import Section


class SearchSpec(BaseModel):
    """Search query to run against the document index."""

    query: str = Field(description="Search query to run.")
    section: Section = Field(
        description="Section of the document to query: beginning, middle or end.",
    )
