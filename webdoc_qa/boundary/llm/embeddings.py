"""
Embeddings factory.

Builds the Google Gemini embeddings client used by the vector store.

Dependencies: langchain_google_genai, webdoc_qa.configs
System role: Embedding provider adapter
"""

import logging

from langchain_core.embeddings import Embeddings
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from webdoc_qa.configs.providers import ProviderSettings
from webdoc_qa.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def create_embeddings(settings: ProviderSettings) -> Embeddings:
    """
    Construct the embeddings client.

    Args:
        settings: Provider settings with credentials and model ID

    Returns:
        Embeddings: Configured embeddings provider

    Raises:
        ConfigurationError: When the API key is missing or the client rejects the configuration
    """
    if settings.embeddings_api_key is None or not settings.embeddings_api_key.get_secret_value():
        raise ConfigurationError(
            "Embeddings API key is not set (EMBEDDINGS_API_KEY or GOOGLE_API_KEY)",
            setting="EMBEDDINGS_API_KEY",
        )

    try:
        embeddings = GoogleGenerativeAIEmbeddings(
            model=settings.embedding_model,
            google_api_key=settings.embeddings_api_key,
        )
    except Exception as e:
        raise ConfigurationError(
            f"Failed to construct embeddings client: {e}",
            setting="PROVIDER_EMBEDDING_MODEL",
            details={"model": settings.embedding_model},
        ) from e

    logger.info(
        f"{__name__}:create_embeddings - Initialized model={settings.embedding_model}"
    )
    return embeddings
