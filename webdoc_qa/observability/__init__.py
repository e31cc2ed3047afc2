"""
Observability module.

Provides logging configuration and log formatting helpers.
"""

from webdoc_qa.observability.log_utils import preview
from webdoc_qa.observability.logger import configure_logging

__all__ = ["configure_logging", "preview"]
