"""
Ingestion pipeline orchestrator.

Coordinates loading, chunking, section labeling and indexing of the
source page. The vector store handles embedding internally.

Dependencies: All task modules, configs, boundary.vdb
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time
from collections import Counter

from webdoc_qa.boundary.vdb.memory_store import MemoryVectorsStore
from webdoc_qa.configs.ingestion import IngestionSettings
from webdoc_qa.core.exceptions import IngestionError, ProviderError
from webdoc_qa.core.ingestion.tasks import ChunkingTask, LabelingTask, LoadingTask
from webdoc_qa.models.chunk import Section
from webdoc_qa.models.ingestion import IngestionResult

logger = logging.getLogger(__name__)


class IngestionPipeline:
    """Orchestrate ingestion: load -> chunk -> label -> embed+index."""

    def __init__(
        self,
        vector_store: MemoryVectorsStore,
        settings: IngestionSettings | None = None,
        loading_task: LoadingTask | None = None,
    ) -> None:
        """
        Initialize pipeline with configuration.

        Args:
            vector_store: Store receiving the labeled chunks
            settings: Ingestion settings (uses defaults if None)
            loading_task: Loader override (built from settings if None)
        """
        self._settings = settings or IngestionSettings()
        self._vector_store = vector_store
        self._loading_task = loading_task or LoadingTask(
            selector=self._settings.selector,
            user_agent=self._settings.user_agent,
        )
        self._chunking_task = ChunkingTask(
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
        )
        self._labeling_task = LabelingTask()

    async def aingest(self, source_url: str | None = None) -> IngestionResult:
        """
        Ingest the source page into the vector store.

        Args:
            source_url: Page URL (settings.source_url if None)

        Returns:
            IngestionResult: Indexed chunks and section counts

        Raises:
            IngestionError: When loading, chunking or indexing fails
        """
        url = source_url or self._settings.source_url
        start_time = time.perf_counter()
        logger.info(f"{__name__}:aingest - START source_url={url}")

        documents = await self._loading_task.aload(url)

        try:
            split_documents = self._chunking_task.chunk(documents)
        except ValueError as e:
            raise IngestionError(f"Failed to chunk document: {e}", source_url=url) from e
        if not split_documents:
            raise IngestionError("Document produced no chunks", source_url=url)

        chunks = self._labeling_task.label(split_documents)

        try:
            await self._vector_store.aadd_chunks(chunks)
        except ProviderError as e:
            raise IngestionError(
                f"Failed to index chunks: {e.message}",
                source_url=url,
                details=e.details,
            ) from e

        counts = Counter(chunk.metadata.section.value for chunk in chunks)
        section_counts = {section.value: counts.get(section.value, 0) for section in Section}
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            f"{__name__}:aingest - END chunks={len(chunks)} sections={section_counts} "
            f"elapsed_ms={elapsed_ms:.0f}"
        )
        return IngestionResult(
            source_url=url,
            chunks=chunks,
            section_counts=section_counts,
            processing_time_ms=elapsed_ms,
        )
