"""
Ingestion pipeline tasks.

Each task handles one stage: load, chunk, label.
"""

from webdoc_qa.core.ingestion.tasks.chunking_task import ChunkingTask
from webdoc_qa.core.ingestion.tasks.labeling_task import LabelingTask
from webdoc_qa.core.ingestion.tasks.loading_task import LoadingTask

__all__ = ["ChunkingTask", "LabelingTask", "LoadingTask"]
