"""
Chunking task for loaded page records.

Each record is split on its own, so a chunk never spans two records;
chunks keep document order across records and carry the character
offset they start at.

Dependencies: langchain_text_splitters
System role: Second stage of document ingestion pipeline
"""

import logging

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

logger = logging.getLogger(__name__)


class ChunkingTask:
    """Split page records into overlapping, size-bounded chunks."""

    def __init__(self, chunk_size: int = 1000, chunk_overlap: int = 200) -> None:
        """
        Args:
            chunk_size: Maximum chunk length in characters
            chunk_overlap: Characters shared by consecutive chunks of one record
        """
        self._chunk_size = chunk_size
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            add_start_index=True,
        )

    def chunk(self, documents: list[Document]) -> list[Document]:
        """
        Split records into chunks in document order.

        Args:
            documents: Loaded page records

        Returns:
            list[Document]: Chunks with the record metadata plus start_index

        Raises:
            ValueError: When there are no records
        """
        if not documents:
            raise ValueError("No documents to chunk")

        chunks: list[Document] = []
        for record in documents:
            pieces = self._splitter.split_documents([record])
            chunks.extend(piece for piece in pieces if piece.page_content.strip())

        logger.info(
            f"{__name__}:chunk - records={len(documents)} chunks={len(chunks)} "
            f"chunk_size={self._chunk_size}"
        )
        return chunks
