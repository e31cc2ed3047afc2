"""
Question answering service.

Coordinates ingestion and workflow streaming for one process run.

Dependencies: webdoc_qa.core, webdoc_qa.dependencies, langgraph.errors
System role: Application service between the CLI and the core graphs
"""

import logging
from collections.abc import AsyncGenerator
from typing import Any

from langgraph.errors import GraphRecursionError

from webdoc_qa.configs.ingestion import IngestionSettings
from webdoc_qa.configs.workflow import WorkflowSettings
from webdoc_qa.core.agentic_system import build_config, build_inputs, build_workflow
from webdoc_qa.core.exceptions import ProviderError
from webdoc_qa.core.ingestion import IngestionPipeline
from webdoc_qa.core.ingestion.tasks import LoadingTask
from webdoc_qa.dependencies import Providers
from webdoc_qa.models.ingestion import IngestionResult
from webdoc_qa.models.workflow import StreamMode, Workflow
from webdoc_qa.observability.log_utils import preview

logger = logging.getLogger(__name__)


class QuestionAnsweringService:
    """Ingest the source page once, then stream answers through a workflow."""

    def __init__(
        self,
        providers: Providers,
        ingestion_settings: IngestionSettings,
        workflow_settings: WorkflowSettings,
        loading_task: LoadingTask | None = None,
    ) -> None:
        """
        Initialize service with injected providers.

        Args:
            providers: Provider clients and shared stores
            ingestion_settings: Source page and chunking settings
            workflow_settings: Workflow selection and retrieval settings
            loading_task: Loader override for the ingestion pipeline
        """
        self.providers = providers
        self.workflow_settings = workflow_settings
        self._pipeline = IngestionPipeline(
            vector_store=providers.vector_store,
            settings=ingestion_settings,
            loading_task=loading_task,
        )
        self._graph = None

    @property
    def workflow(self) -> Workflow:
        return Workflow(self.workflow_settings.workflow)

    async def aingest(self) -> IngestionResult:
        """
        Load and index the source page.

        Returns:
            IngestionResult: Indexed chunks and section counts

        Raises:
            IngestionError: When the page cannot be loaded or indexed
        """
        return await self._pipeline.aingest()

    def _get_graph(self):
        if self._graph is None:
            self._graph = build_workflow(self.providers, self.workflow_settings)
        return self._graph

    async def astream(
        self,
        question: str,
        thread_id: str | None = None,
    ) -> AsyncGenerator[Any, None]:
        """
        Stream the workflow for one question.

        Args:
            question: User question
            thread_id: Thread for memory-backed workflows (settings default if None)

        Yields:
            Chunks from graph.astream in the configured stream mode

        Raises:
            ProviderError: When a provider call fails or the react agent exceeds its bound
        """
        settings = self.workflow_settings
        logger.info(
            f"{__name__}:astream - START workflow={self.workflow.value} "
            f"question={preview(question)!r}"
        )

        graph = self._get_graph()
        inputs = build_inputs(self.workflow, question)
        config = build_config(settings, thread_id)

        try:
            async for chunk in graph.astream(
                inputs,
                config=config,
                stream_mode=StreamMode(settings.stream_mode).value,
            ):
                yield chunk
        except GraphRecursionError as e:
            raise ProviderError(
                f"Agent did not finish within {settings.max_iterations} iterations",
                operation="react_agent",
                details={"max_iterations": settings.max_iterations},
            ) from e

        logger.info(f"{__name__}:astream - END workflow={self.workflow.value}")
