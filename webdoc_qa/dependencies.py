"""
Dependency injection container.

Constructs provider clients once at process start and hands them to the
ingestion pipeline and graph builders.

Dependencies: webdoc_qa.configs, webdoc_qa.boundary
System role: DI container for provider construction
"""

import logging
from dataclasses import dataclass, field

from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseChatModel

from webdoc_qa.boundary.llm import create_chat_model, create_embeddings
from webdoc_qa.boundary.memory.conversation_memory import ConversationMemory
from webdoc_qa.boundary.vdb.memory_store import MemoryVectorsStore
from webdoc_qa.configs.providers import ProviderSettings

logger = logging.getLogger(__name__)


@dataclass
class Providers:
    """Process-wide provider clients and shared stores."""

    chat_model: BaseChatModel
    embeddings: Embeddings
    vector_store: MemoryVectorsStore
    memory: ConversationMemory = field(default_factory=ConversationMemory)


def build_providers(settings: ProviderSettings) -> Providers:
    """
    Construct all provider clients.

    Args:
        settings: Provider settings with credentials

    Returns:
        Providers: Chat model, embeddings, empty vector store and memory

    Raises:
        ConfigurationError: When a credential is missing or a client cannot be built
    """
    chat_model = create_chat_model(settings)
    embeddings = create_embeddings(settings)
    logger.info(f"{__name__}:build_providers - Providers initialized")
    return Providers(
        chat_model=chat_model,
        embeddings=embeddings,
        vector_store=MemoryVectorsStore(embeddings),
    )
