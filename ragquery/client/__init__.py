"""HTTP client and session logic for the RAG service.

Responsibilities:
    - Posting questions and PDF uploads to the service
    - Normalizing loosely-shaped answers into display text
    - Turning failures into user-facing messages
    - Tracking busy flags, answer and error text per page session

Contains no rendering code. The UI layer only reads SessionState.
"""

from ragquery.client.api import RagApiClient
from ragquery.client.errors import (
    ClientError,
    EmptyResponseError,
    QueryValidationError,
    RemoteServiceError,
    UploadValidationError,
)
from ragquery.client.session import QASession, SessionState

__all__ = [
    "ClientError",
    "EmptyResponseError",
    "QASession",
    "QueryValidationError",
    "RagApiClient",
    "RemoteServiceError",
    "SessionState",
    "UploadValidationError",
]
