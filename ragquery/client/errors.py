"""Error types raised by the RAG API client."""

from typing import Any

QUERY_VALIDATION_MESSAGE = "Please enter a query before submitting."
UPLOAD_VALIDATION_MESSAGE = "Please select a PDF file to upload."
EMPTY_RESPONSE_MESSAGE = "Empty response received"


class ClientError(Exception):
    """Base class for failures surfaced to the user.

    Attributes:
        message: Display text for the error banner.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class QueryValidationError(ClientError):
    """Raised when a query is empty before any network call."""

    def __init__(self, message: str = QUERY_VALIDATION_MESSAGE) -> None:
        super().__init__(message)


class UploadValidationError(ClientError):
    """Raised when no document was selected for upload."""

    def __init__(self, message: str = UPLOAD_VALIDATION_MESSAGE) -> None:
        super().__init__(message)


class EmptyResponseError(ClientError):
    """Raised when a successful call returns no payload."""

    def __init__(self, message: str = EMPTY_RESPONSE_MESSAGE) -> None:
        super().__init__(message)


class RemoteServiceError(ClientError):
    """Raised when the HTTP call fails or returns an error status.

    Attributes:
        status_code: HTTP status, or None when no response arrived.
        payload: Decoded error body, if any.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload
