"""
State schema for the retrieve-then-generate graphs.

Dependencies: typing, webdoc_qa.models, webdoc_qa.boundary.vdb
System role: LangGraph state for plain and query-analyzed RAG
"""

from typing import TypedDict

from webdoc_qa.boundary.vdb.vector_schemas import VectorSearchResult
from webdoc_qa.models.search import SearchSpec


class RAGState(TypedDict, total=False):
    """LangGraph state for the rag and query-analysis workflows.

    Each field is written by exactly one node: search by analyze_query,
    context by retrieve, answer by generate.
    """

    question: str
    search: SearchSpec
    context: list[VectorSearchResult]
    answer: str
