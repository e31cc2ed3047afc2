"""
Exception hierarchy for the web document Q&A pipeline.

Provides layered exception structure for configuration, ingestion and
provider failures. All exceptions include context for logging and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class WebDocQAException(Exception):
    """Base exception for all web document Q&A errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(WebDocQAException):
    """Raised when credentials or settings are missing or invalid."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            setting: Name of the offending setting or environment variable
            details: Additional context
        """
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)


class IngestionError(WebDocQAException):
    """Raised when the source document cannot be fetched, parsed or indexed."""

    def __init__(
        self,
        message: str,
        source_url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize ingestion error.

        Args:
            message: Error message
            source_url: URL of the document that failed
            details: Additional context
        """
        details = details or {}
        if source_url:
            details["source_url"] = source_url
        super().__init__(message, details)


class ProviderError(WebDocQAException):
    """Raised when a chat, embedding or vector search call fails during a step."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            message: Error message
            operation: Operation that failed (generate, similarity_search, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class SchemaError(ProviderError):
    """Raised when structured model output does not match the expected schema."""

    def __init__(
        self,
        message: str,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize schema error.

        Args:
            message: Error message
            reason: Validation failure reported by the parser
            details: Additional context
        """
        details = details or {}
        if reason:
            details["reason"] = reason
        super().__init__(message, operation="analyze_query", details=details)
