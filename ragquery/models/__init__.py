"""Pydantic models for API requests and responses.

Provides type safety and validation for the payloads exchanged with
the RAG service.

Models:
    - QueryRequest: Outgoing question payload
    - DocumentFile: File selected for upload
    - TextAnswer / ResponseAnswer / MessageAnswer: Known answer shapes
    - ErrorPayload: Error body with a message field
    - OperationResult: Outcome of an upload or query attempt
"""

from ragquery.models.schemas import (
    DocumentFile,
    ErrorPayload,
    MessageAnswer,
    OperationResult,
    QueryRequest,
    ResponseAnswer,
    TextAnswer,
    answer_adapter,
)

__all__ = [
    "DocumentFile",
    "ErrorPayload",
    "MessageAnswer",
    "OperationResult",
    "QueryRequest",
    "ResponseAnswer",
    "TextAnswer",
    "answer_adapter",
]
