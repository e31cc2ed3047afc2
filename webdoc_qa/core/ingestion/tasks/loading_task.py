"""
Web page loading task using WebBaseLoader.

Fetches the source page and keeps only the text of elements matching a
tag selector.

Dependencies: langchain_community.document_loaders, bs4
System role: First stage of document ingestion pipeline
"""

import asyncio
import logging
import os

import bs4

from webdoc_qa.configs.ingestion import DEFAULT_USER_AGENT
from webdoc_qa.core.exceptions import IngestionError

# web_base reads USER_AGENT at import time and warns when it is unset
os.environ.setdefault("USER_AGENT", DEFAULT_USER_AGENT)

from langchain_community.document_loaders import WebBaseLoader  # noqa: E402
from langchain_core.documents import Document  # noqa: E402

logger = logging.getLogger(__name__)


class LoadingTask:
    """Load a web page into text records with source metadata."""

    def __init__(self, selector: str = "p", user_agent: str = DEFAULT_USER_AGENT) -> None:
        """
        Initialize loading task.

        Args:
            selector: HTML tag name to extract (e.g. "p")
            user_agent: User-Agent header for the page request

        Raises:
            ValueError: When selector is empty
        """
        if not selector:
            raise ValueError("selector cannot be empty")
        self._selector = selector
        self._user_agent = user_agent

    def load(self, source_url: str) -> list[Document]:
        """
        Fetch and parse the page.

        Args:
            source_url: Page URL

        Returns:
            list[Document]: Text records, each with metadata["source"] = source_url

        Raises:
            IngestionError: When the fetch or parse fails or no text is found
        """
        loader = WebBaseLoader(
            web_paths=(source_url,),
            bs_kwargs={"parse_only": bs4.SoupStrainer(self._selector)},
            header_template={"User-Agent": self._user_agent},
        )

        try:
            documents = loader.load()
        except Exception as e:
            raise IngestionError(
                f"Failed to load document: {e}",
                source_url=source_url,
                details={"selector": self._selector},
            ) from e

        documents = [doc for doc in documents if doc.page_content.strip()]
        if not documents:
            raise IngestionError(
                f"No text found for selector '{self._selector}'",
                source_url=source_url,
            )

        for doc in documents:
            doc.metadata["source"] = source_url

        logger.info(
            f"{__name__}:load - Loaded {len(documents)} records, "
            f"chars={sum(len(doc.page_content) for doc in documents)}"
        )
        return documents

    async def aload(self, source_url: str) -> list[Document]:
        """Async version of load; runs the blocking fetch in a worker thread."""
        return await asyncio.to_thread(self.load, source_url)
