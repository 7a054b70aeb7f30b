"""Session state and operations for the document Q&A page.

The page state is an immutable record that only changes through named
transitions. Each operation moves independently through
idle -> busy -> success | error, and the two operations share a
single error slot.
"""

import logging
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from ragquery.client.api import RagApiClient, make_query_request, require_document
from ragquery.client.decoding import QUERY_FALLBACK_MESSAGE, UPLOAD_FALLBACK_MESSAGE
from ragquery.client.errors import (
    ClientError,
    QueryValidationError,
    UploadValidationError,
)
from ragquery.models.schemas import DocumentFile, OperationResult

logger = logging.getLogger(__name__)

UPLOAD_SUCCESS_MESSAGE = "File uploaded successfully"
QUERY_IN_PROGRESS_MESSAGE = "A query is already being processed."
UPLOAD_IN_PROGRESS_MESSAGE = "An upload is already in progress."


class SessionState(BaseModel):
    """Snapshot of everything the page displays.

    Attributes:
        query_busy: A query call is outstanding.
        upload_busy: An upload call is outstanding.
        response: Text of the last answer.
        error: Shared error banner text.
        upload_status: Confirmation shown after a successful upload.
    """

    model_config = ConfigDict(frozen=True)

    query_busy: bool = False
    upload_busy: bool = False
    response: str = ""
    error: str = ""
    upload_status: str = ""

    def start_query(self) -> "SessionState":
        return self.model_copy(update={"query_busy": True, "response": "", "error": ""})

    def query_succeeded(self, answer: str) -> "SessionState":
        return self.model_copy(update={"query_busy": False, "response": answer})

    def query_failed(self, message: str) -> "SessionState":
        return self.model_copy(update={"query_busy": False, "error": message})

    def start_upload(self) -> "SessionState":
        return self.model_copy(
            update={"upload_busy": True, "error": "", "upload_status": ""}
        )

    def upload_succeeded(self, status: str = UPLOAD_SUCCESS_MESSAGE) -> "SessionState":
        return self.model_copy(update={"upload_busy": False, "upload_status": status})

    def upload_failed(self, message: str) -> "SessionState":
        return self.model_copy(update={"upload_busy": False, "error": message})

    def rejected(self, message: str) -> "SessionState":
        """Show a validation error without touching either operation."""
        return self.model_copy(update={"error": message})


class QASession:
    """Runs uploads and queries for one page session.

    Holds the current SessionState and notifies a listener after every
    transition so the interface can re-render.
    """

    def __init__(
        self,
        client: RagApiClient | None = None,
        on_change: Callable[[SessionState], None] | None = None,
    ) -> None:
        self._client = client or RagApiClient()
        self._state = SessionState()
        self._on_change = on_change

    @property
    def state(self) -> SessionState:
        return self._state

    def subscribe(self, on_change: Callable[[SessionState], None] | None) -> None:
        self._on_change = on_change

    def _apply(self, state: SessionState) -> None:
        self._state = state
        if self._on_change is not None:
            self._on_change(state)

    async def submit_query(self, query: str | None) -> OperationResult:
        """Send a question and record the answer or error.

        Args:
            query: Raw text from the question box.

        Returns:
            OperationResult with the answer or the error text.
        """
        if self._state.query_busy:
            logger.info("Query already in progress, ignoring submission")
            return OperationResult(success=False, message=QUERY_IN_PROGRESS_MESSAGE)

        try:
            request = make_query_request(query)
        except QueryValidationError as e:
            logger.info(f"Query rejected: {e.message}")
            self._apply(self._state.rejected(e.message))
            return OperationResult(success=False, message=e.message)

        self._apply(self._state.start_query())
        try:
            answer = await self._client.ask(request)
        except ClientError as e:
            logger.warning(f"Query failed: {e.message}")
            self._apply(self._state.query_failed(e.message))
            return OperationResult(success=False, message=e.message)
        except Exception:
            logger.exception("Unexpected error while processing query")
            self._apply(self._state.query_failed(QUERY_FALLBACK_MESSAGE))
            return OperationResult(success=False, message=QUERY_FALLBACK_MESSAGE)

        self._apply(self._state.query_succeeded(answer))
        return OperationResult(success=True, message=answer)

    async def upload_document(self, document: DocumentFile | None) -> OperationResult:
        """Upload the selected document and record the outcome.

        Args:
            document: The selected file, or None if nothing was chosen.

        Returns:
            OperationResult with the confirmation or the error text.
        """
        if self._state.upload_busy:
            logger.info("Upload already in progress, ignoring submission")
            return OperationResult(success=False, message=UPLOAD_IN_PROGRESS_MESSAGE)

        try:
            document = require_document(document)
        except UploadValidationError as e:
            logger.info(f"Upload rejected: {e.message}")
            self._apply(self._state.rejected(e.message))
            return OperationResult(success=False, message=e.message)

        self._apply(self._state.start_upload())
        try:
            await self._client.upload(document)
        except ClientError as e:
            logger.warning(f"Upload of {document.filename} failed: {e.message}")
            self._apply(self._state.upload_failed(e.message))
            return OperationResult(success=False, message=e.message)
        except Exception:
            logger.exception(f"Unexpected error while uploading {document.filename}")
            self._apply(self._state.upload_failed(UPLOAD_FALLBACK_MESSAGE))
            return OperationResult(success=False, message=UPLOAD_FALLBACK_MESSAGE)

        logger.info(f"Uploaded {document.filename}")
        self._apply(self._state.upload_succeeded())
        return OperationResult(success=True, message=UPLOAD_SUCCESS_MESSAGE)
