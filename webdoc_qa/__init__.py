"""
webdoc-qa: retrieval-augmented question answering over a single web page.

Loads and indexes one document, then answers questions through one of
several LangGraph workflows (plain RAG, query-analyzed RAG, tool-calling
agent, stateful agent, react agent).
"""

__version__ = "0.1.0"
