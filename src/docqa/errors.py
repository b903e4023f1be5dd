"""
DocQA Error Classification System.

This module provides a hierarchy of exceptions for the ingestion and query
paths of the retrieval pipeline.

Error Categories:
-----------------
1. Caller Errors: the request itself is malformed and is reported back
   - Blank or non-string questions
   - Invalid ``top_k`` values

2. Component Errors: a pipeline stage failed
   - Embedding failures
   - Vector store misuse (chunks without embeddings)
   - Extraction failures inside a collaborator

3. Lifecycle Errors: illegal document state transitions

Only caller errors are expected to reach the user. Everything else is caught
at the service boundary and degraded into a placeholder answer or a document
in the ``error`` state.

Usage:
------
    from docqa.errors import DocQAError, InvalidQueryError

    try:
        result = service.query(question)
    except InvalidQueryError as e:
        logger.warning(f"Rejected query: {e}")
"""

from typing import Any


class DocQAError(Exception):
    """
    Base exception for all DocQA errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error (optional)
        original_error: The underlying exception that caused this error (optional)
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def __str__(self) -> str:
        base = self.message
        if self.details:
            base += f" | Details: {self.details}"
        if self.original_error:
            base += f" | Caused by: {type(self.original_error).__name__}: {self.original_error}"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None
        }


# =============================================================================
# Caller Errors
# =============================================================================

class InvalidQueryError(DocQAError):
    """
    Raised when a query cannot be served as given.

    Common causes:
    - Empty or whitespace-only question
    - Question is not a string
    - ``top_k`` smaller than 1
    """

    def __init__(
        self,
        message: str = "Invalid query",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class ConfigurationError(DocQAError):
    """
    Raised when there's a configuration problem.

    Common causes:
    - Unknown component type
    - Invalid parameter values for a component
    """

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


# =============================================================================
# Domain-Specific Errors
# =============================================================================

class EmbeddingError(DocQAError):
    """Raised when embedding operation fails."""
    pass


class RetrievalError(DocQAError):
    """Raised when retrieval operation fails."""
    pass


class IndexingError(DocQAError):
    """Raised when indexing operation fails."""
    pass


class VectorStoreError(DocQAError):
    """Raised when vector store operation fails."""
    pass


class ExtractionError(DocQAError):
    """Raised inside extractors; never propagated past the extractor boundary."""
    pass


class DocumentStateError(DocQAError):
    """
    Raised on an illegal document lifecycle transition.

    Documents move ``pending -> processing -> completed | error`` and the
    last two states are terminal.
    """

    def __init__(
        self,
        current: str,
        target: str,
        details: dict[str, Any] | None = None
    ):
        details = details or {}
        details["current"] = current
        details["target"] = target
        super().__init__(f"Cannot move document from '{current}' to '{target}'", details)
        self.current = current
        self.target = target


# =============================================================================
# Helper Functions
# =============================================================================

def wrap_exception(error: Exception, context: str = "") -> DocQAError:
    """
    Wrap a generic exception in an appropriate DocQAError.

    Args:
        error: The original exception
        context: Additional context about where the error occurred
            ("embedding", "retrieval", "indexing", "extraction")

    Returns:
        DocQAError instance wrapping the original error

    Example:
        try:
            vector = embedder.embed_text(text)
        except Exception as e:
            raise wrap_exception(e, context="embedding")
    """
    if isinstance(error, DocQAError):
        return error

    message = f"{context}: {error}" if context else str(error)
    context_lower = context.lower()

    if "embed" in context_lower:
        return EmbeddingError(message, original_error=error)
    if "retriev" in context_lower or "search" in context_lower:
        return RetrievalError(message, original_error=error)
    if "index" in context_lower or "ingest" in context_lower:
        return IndexingError(message, original_error=error)
    if "extract" in context_lower:
        return ExtractionError(message, original_error=error)

    return DocQAError(message, original_error=error)
