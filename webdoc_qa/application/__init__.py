"""
Application services.
"""

from webdoc_qa.application.qa_service import QuestionAnsweringService

__all__ = ["QuestionAnsweringService"]
