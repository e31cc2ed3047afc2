"""Retrieve-then-generate graphs (plain and query-analyzed RAG)."""

from webdoc_qa.core.agentic_system.rag.rag_graph import create_rag_graph
from webdoc_qa.core.agentic_system.rag.rag_schema import RAGState

__all__ = ["RAGState", "create_rag_graph"]
