"""
Model provider boundary.

Factories for the chat model and embeddings clients.
"""

from webdoc_qa.boundary.llm.chat_model import create_chat_model
from webdoc_qa.boundary.llm.embeddings import create_embeddings

__all__ = ["create_chat_model", "create_embeddings"]
