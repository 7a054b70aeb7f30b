"""Async HTTP client for the RAG service endpoints.

Wraps the two calls the interface makes:

- POST /api/rag/chat: JSON question, answer normalized to text
- POST /api/documents/upload: multipart PDF upload

Each call is a single attempt. Failures are raised as ClientError
subclasses carrying display-ready messages.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ragquery.client.decoding import (
    QUERY_FALLBACK_MESSAGE,
    UPLOAD_FALLBACK_MESSAGE,
    decode_answer,
    query_error_message,
    read_payload,
    transport_error_message,
    upload_error_message,
)
from ragquery.client.errors import (
    QueryValidationError,
    RemoteServiceError,
    UploadValidationError,
)
from ragquery.config import ClientConfig, get_client_config
from ragquery.models.schemas import DocumentFile, QueryRequest

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def make_query_request(query: str | None) -> QueryRequest:
    """Validate user input into a QueryRequest.

    Raises:
        QueryValidationError: If the query is empty or whitespace-only.
    """
    try:
        return QueryRequest(query=query or "")
    except ValidationError as e:
        raise QueryValidationError() from e


def require_document(document: DocumentFile | None) -> DocumentFile:
    """Check that a document was selected.

    Raises:
        UploadValidationError: If no document is given.
    """
    if document is None:
        raise UploadValidationError()
    return document


class RagApiClient:
    """Client for the RAG service's chat and upload endpoints.

    A fresh httpx.AsyncClient is opened per call, so instances hold no
    connections and can be shared between concurrent operations.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, used to route calls
                       somewhere other than the network.
        """
        self._config = config or get_client_config()
        self._transport = transport

    def _http_client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {"follow_redirects": True}
        if self._transport is not None:
            kwargs["transport"] = self._transport
        if self._config.request_timeout is not None:
            kwargs["timeout"] = self._config.request_timeout
        return httpx.AsyncClient(**kwargs)

    async def ask(self, request: QueryRequest) -> str:
        """Submit a question and return the answer text.

        Args:
            request: The validated question.

        Returns:
            Normalized answer text.

        Raises:
            RemoteServiceError: If the call fails or returns an error status.
            EmptyResponseError: If the service answers with an empty body.
        """
        logger.info(f"Sending request with query: {request.query!r}")

        async with self._http_client() as client:
            try:
                response = await client.post(
                    self._config.chat_url,
                    json=request.model_dump(),
                    headers=JSON_HEADERS,
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.debug(f"Error response body: {e.response.text!r}")
                raise RemoteServiceError(
                    query_error_message(e),
                    status_code=e.response.status_code,
                    payload=read_payload(e.response),
                ) from e
            except httpx.RequestError as e:
                raise RemoteServiceError(
                    transport_error_message(e, QUERY_FALLBACK_MESSAGE)
                ) from e

        payload = read_payload(response)
        logger.debug(f"Raw response: {payload!r}")
        return decode_answer(payload)

    async def upload(self, document: DocumentFile) -> Any:
        """Upload a document as multipart form data.

        Args:
            document: The file to send.

        Returns:
            The decoded response body (not interpreted).

        Raises:
            RemoteServiceError: If the call fails or returns an error status.
        """
        logger.info(f"Uploading file: {document.filename} ({document.size} bytes)")

        files = {
            self._config.upload_field: (
                document.filename,
                document.content,
                document.content_type,
            )
        }
        async with self._http_client() as client:
            try:
                response = await client.post(self._config.upload_url, files=files)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise RemoteServiceError(
                    upload_error_message(e),
                    status_code=e.response.status_code,
                    payload=read_payload(e.response),
                ) from e
            except httpx.RequestError as e:
                # Only a server-supplied body is shown for uploads.
                logger.debug(f"Upload transport error: {e!r}")
                raise RemoteServiceError(UPLOAD_FALLBACK_MESSAGE) from e

        payload = read_payload(response)
        logger.debug(f"Upload response: {payload!r}")
        return payload
