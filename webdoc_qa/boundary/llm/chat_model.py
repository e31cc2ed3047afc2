"""
Chat model factory.

Builds the Google Gemini chat model used for query analysis, tool
calling and answer generation.

Dependencies: langchain_google_genai, webdoc_qa.configs
System role: Chat model provider adapter
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from webdoc_qa.configs.providers import ProviderSettings
from webdoc_qa.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def create_chat_model(settings: ProviderSettings) -> BaseChatModel:
    """
    Construct the chat model client.

    Args:
        settings: Provider settings with credentials and model ID

    Returns:
        BaseChatModel: Configured chat model

    Raises:
        ConfigurationError: When the API key is missing or the client rejects the configuration
    """
    if settings.chat_api_key is None or not settings.chat_api_key.get_secret_value():
        raise ConfigurationError(
            "Chat model API key is not set (CHAT_API_KEY or GOOGLE_API_KEY)",
            setting="CHAT_API_KEY",
        )

    try:
        model = ChatGoogleGenerativeAI(
            model=settings.chat_model,
            temperature=settings.temperature,
            google_api_key=settings.chat_api_key,
        )
    except Exception as e:
        raise ConfigurationError(
            f"Failed to construct chat model: {e}",
            setting="PROVIDER_CHAT_MODEL",
            details={"model": settings.chat_model},
        ) from e

    logger.info(f"{__name__}:create_chat_model - Initialized model={settings.chat_model}")
    return model
