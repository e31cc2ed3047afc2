"""
Section labeling task.

Turns split documents into immutable chunks, labeling each with its
positional section (beginning, middle, end) across the whole document.

Dependencies: webdoc_qa.models.chunk
System role: Third stage of document ingestion pipeline
"""

from langchain_core.documents import Document

from webdoc_qa.models.chunk import (
    Chunk,
    ChunkMetadata,
    generate_chunk_id,
    section_for_index,
)


class LabelingTask:
    """Assign section labels by global ordinal position."""

    def label(self, documents: list[Document]) -> list[Chunk]:
        """
        Convert split documents into labeled chunks.

        Args:
            documents: Split documents in document order

        Returns:
            list[Chunk]: Chunks with section metadata, same order
        """
        total = len(documents)
        chunks = []
        for index, doc in enumerate(documents):
            source = doc.metadata.get("source", "")
            start_index = doc.metadata.get("start_index", 0)
            chunks.append(
                Chunk(
                    id=generate_chunk_id(doc.page_content, source, start_index),
                    content=doc.page_content,
                    metadata=ChunkMetadata(
                        source=source,
                        section=section_for_index(index, total),
                        start_index=start_index,
                    ),
                )
            )
        return chunks
