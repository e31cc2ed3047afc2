"""
In-memory vector store.

Wraps LangChain InMemoryVectorStore with a chunk-oriented interface and
optional section filtering. Nothing is persisted across runs.

Dependencies: langchain_core.vectorstores, langchain_core.embeddings
System role: Vector index for chunk storage and similarity search
"""

import logging

from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings
from langchain_core.vectorstores import InMemoryVectorStore

from webdoc_qa.boundary.vdb.vector_schemas import VectorSearchResult
from webdoc_qa.core.exceptions import ProviderError
from webdoc_qa.models.chunk import Chunk, Section

logger = logging.getLogger(__name__)


class MemoryVectorsStore:
    """
    Process-local vector store for document chunks.

    Embeds chunk text through the injected embeddings provider and ranks
    by cosine similarity. Section filtering is applied inside the search,
    so a filtered query may return fewer than k results.
    """

    def __init__(self, embeddings: Embeddings) -> None:
        """
        Initialize an empty store.

        Args:
            embeddings: Embeddings provider used for chunks and queries
        """
        self._embeddings = embeddings
        self._index = InMemoryVectorStore(embedding=embeddings)
        self._chunk_ids: list[str] = []

    def __len__(self) -> int:
        return len(self._chunk_ids)

    async def aadd_chunks(self, chunks: list[Chunk]) -> list[str]:
        """
        Embed and add chunks to the index.

        Args:
            chunks: Chunks to index

        Returns:
            list[str]: IDs of the stored chunks

        Raises:
            ProviderError: When embedding or storage fails
        """
        if not chunks:
            return []

        documents = [chunk.to_document() for chunk in chunks]
        ids = [chunk.id for chunk in chunks]

        try:
            stored_ids = await self._index.aadd_documents(documents, ids=ids)
        except Exception as e:
            logger.error(f"{__name__}:aadd_chunks - FAILED: {type(e).__name__}: {e}")
            raise ProviderError(
                f"Failed to index chunks: {e}",
                operation="add_documents",
                details={"chunk_count": len(chunks)},
            ) from e

        self._chunk_ids.extend(stored_ids)
        logger.info(f"{__name__}:aadd_chunks - Indexed {len(stored_ids)} chunks")
        return stored_ids

    async def asimilarity_search(
        self,
        query: str,
        k: int = 2,
        section: Section | None = None,
    ) -> list[VectorSearchResult]:
        """
        Search for the chunks most similar to a query.

        Args:
            query: Search query text
            k: Number of results to return
            section: Only consider chunks labeled with this section

        Returns:
            list[VectorSearchResult]: Results ordered by descending similarity

        Raises:
            ProviderError: When embedding the query or searching fails
        """
        search_filter = None
        if section is not None:
            wanted = Section(section).value

            def search_filter(doc: Document) -> bool:
                return doc.metadata.get("section") == wanted

        try:
            results = await self._index.asimilarity_search_with_score(
                query,
                k=k,
                filter=search_filter,
            )
        except Exception as e:
            logger.error(f"{__name__}:asimilarity_search - FAILED: {type(e).__name__}: {e}")
            raise ProviderError(
                f"Similarity search failed: {e}",
                operation="similarity_search",
                details={"k": k, "section": section.value if section else None},
            ) from e

        return [VectorSearchResult.from_document(doc, score) for doc, score in results]
