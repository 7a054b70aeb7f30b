"""Normalization of RAG service payloads into display text.

The service is loosely typed: an answer may come back as a bare
string or as an object carrying ``text``, ``response`` or ``message``.
Answers are decoded against those shapes in priority order, falling
back to an indented JSON rendering of whatever arrived.
"""

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ragquery.client.errors import EmptyResponseError
from ragquery.models.schemas import (
    ErrorPayload,
    MessageAnswer,
    ResponseAnswer,
    TextAnswer,
    answer_adapter,
)

logger = logging.getLogger(__name__)

QUERY_FALLBACK_MESSAGE = "An error occurred while processing your request."
SERVER_ERROR_MESSAGE = "Server error occurred"
UPLOAD_FALLBACK_MESSAGE = "Error uploading file"


def read_payload(response: httpx.Response) -> Any:
    """Decode a response body.

    JSON bodies are parsed whatever their declared content type; anything
    else is returned as text. An empty body yields None.
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def is_empty(payload: Any) -> bool:
    return payload is None or payload == ""


def render_payload(payload: Any) -> str:
    """Render a payload for display: strings verbatim, anything else as JSON."""
    if isinstance(payload, str):
        return payload
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


def decode_answer(payload: Any) -> str:
    """Extract the display text from a chat response payload.

    Args:
        payload: Decoded response body.

    Returns:
        The answer text.

    Raises:
        EmptyResponseError: If the payload is absent or empty.
    """
    if is_empty(payload):
        raise EmptyResponseError()

    try:
        answer = answer_adapter.validate_python(payload)
    except ValidationError:
        logger.warning(
            f"Response matched no known answer shape, displaying raw JSON "
            f"({type(payload).__name__})"
        )
        return render_payload(payload)

    if isinstance(answer, TextAnswer):
        return render_payload(answer.text)
    if isinstance(answer, ResponseAnswer):
        return render_payload(answer.response)
    if isinstance(answer, MessageAnswer):
        return render_payload(answer.message)
    return answer


def query_error_message(error: httpx.HTTPStatusError) -> str:
    """Build display text for a failed chat call.

    Prefers the server's ``message`` field, then the raw error body,
    then the transport's own description.
    """
    payload = read_payload(error.response)
    try:
        return render_payload(ErrorPayload.model_validate(payload).message)
    except ValidationError:
        pass
    if not is_empty(payload):
        return render_payload(payload)
    return str(error) or SERVER_ERROR_MESSAGE


def upload_error_message(error: httpx.HTTPStatusError) -> str:
    """Build display text for a failed upload: the error body verbatim."""
    payload = read_payload(error.response)
    if is_empty(payload):
        return UPLOAD_FALLBACK_MESSAGE
    return render_payload(payload)


def transport_error_message(error: httpx.RequestError, fallback: str) -> str:
    """Describe a failure where no response was received."""
    return str(error) or fallback
