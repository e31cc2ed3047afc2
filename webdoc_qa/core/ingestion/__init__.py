"""
Document ingestion.

Loads the source page, chunks it, labels sections and indexes the chunks.
"""

from webdoc_qa.core.ingestion.pipeline import IngestionPipeline

__all__ = ["IngestionPipeline"]
