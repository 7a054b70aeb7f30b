"""Integration tests for question submission.

Runs QASession and RagApiClient against the in-process fake service,
covering answer normalization, error surfacing and the busy flag.
"""

import asyncio
import json
from collections.abc import Callable

import httpx
import pytest
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from ragquery.client.api import RagApiClient
from ragquery.client.errors import QUERY_VALIDATION_MESSAGE, RemoteServiceError
from ragquery.client.session import QUERY_IN_PROGRESS_MESSAGE, QASession
from ragquery.config import ClientConfig
from ragquery.models.schemas import DocumentFile, QueryRequest
from tests.conftest import FakeRagService


async def wait_until(predicate: Callable[[], bool], attempts: int = 200) -> None:
    """Yield to the event loop until predicate holds."""
    for _ in range(attempts):
        if predicate():
            return
        await asyncio.sleep(0.01)
    raise AssertionError("condition not reached")


class TestQueryRequest:
    """Tests for the outgoing request."""

    async def test_posts_json_query(
        self, session: QASession, fake_service: FakeRagService
    ) -> None:
        """Query is sent as a JSON body with JSON negotiation headers."""
        await session.submit_query("What is in the report?")

        assert fake_service.chat_calls == [{"query": "What is in the report?"}]
        headers = fake_service.chat_headers[0]
        assert headers["content-type"] == "application/json"
        assert headers["accept"] == "application/json"

    @pytest.mark.parametrize("query", ["", "   ", "\n\t"])
    async def test_blank_query_makes_no_call(
        self, session: QASession, fake_service: FakeRagService, query: str
    ) -> None:
        result = await session.submit_query(query)

        assert result.success is False
        assert session.state.error == QUERY_VALIDATION_MESSAGE
        assert fake_service.chat_calls == []


class TestQueryAnswers:
    """Tests for normalizing the service's answer shapes."""

    @pytest.mark.parametrize(
        ("reply", "expected"),
        [
            (lambda: JSONResponse({"text": "T"}), "T"),
            (lambda: JSONResponse({"response": "R"}), "R"),
            (lambda: JSONResponse({"message": "M"}), "M"),
            (lambda: JSONResponse({"text": 5, "foo": 1}), "5"),
            (lambda: JSONResponse("S"), "S"),
            (lambda: PlainTextResponse("S"), "S"),
        ],
    )
    async def test_known_shapes(
        self,
        session: QASession,
        fake_service: FakeRagService,
        reply: Callable[[], Response],
        expected: str,
    ) -> None:
        fake_service.chat_reply = reply

        result = await session.submit_query("question")

        assert result.success is True
        assert session.state.response == expected
        assert session.state.error == ""

    async def test_unknown_object_shown_as_json(
        self, session: QASession, fake_service: FakeRagService
    ) -> None:
        fake_service.chat_reply = lambda: JSONResponse({"foo": 1})

        await session.submit_query("question")

        assert session.state.response == json.dumps({"foo": 1}, indent=2)

    @pytest.mark.parametrize(
        "reply",
        [lambda: JSONResponse(None), lambda: Response(status_code=200)],
    )
    async def test_empty_response_is_an_error(
        self,
        session: QASession,
        fake_service: FakeRagService,
        reply: Callable[[], Response],
    ) -> None:
        fake_service.chat_reply = reply

        result = await session.submit_query("question")

        assert result.success is False
        assert session.state.error == "Empty response received"
        assert session.state.response == ""

    async def test_new_query_clears_previous_answer(
        self, session: QASession, fake_service: FakeRagService
    ) -> None:
        await session.submit_query("first")
        fake_service.chat_reply = lambda: JSONResponse({"message": "bad"}, status_code=500)

        await session.submit_query("second")

        assert session.state.response == ""
        assert session.state.error == "bad"


class TestQueryErrors:
    """Tests for surfacing failed calls."""

    async def test_server_message_field(
        self, session: QASession, fake_service: FakeRagService
    ) -> None:
        fake_service.chat_reply = lambda: JSONResponse({"message": "bad"}, status_code=500)

        result = await session.submit_query("question")

        assert result.success is False
        assert result.message == "bad"
        assert session.state.error == "bad"
        assert session.state.query_busy is False

    async def test_raw_error_body(
        self, session: QASession, fake_service: FakeRagService
    ) -> None:
        fake_service.chat_reply = lambda: PlainTextResponse(
            "index not ready", status_code=503
        )

        await session.submit_query("question")

        assert session.state.error == "index not ready"

    async def test_client_raises_with_status(
        self, api_client: RagApiClient, fake_service: FakeRagService
    ) -> None:
        fake_service.chat_reply = lambda: JSONResponse({"message": "bad"}, status_code=400)

        with pytest.raises(RemoteServiceError) as exc_info:
            await api_client.ask(QueryRequest(query="question"))

        assert exc_info.value.status_code == 400
        assert exc_info.value.payload == {"message": "bad"}

    async def test_transport_failure(self, client_config: ClientConfig) -> None:
        """Connection errors surface the transport's description."""

        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        client = RagApiClient(config=client_config, transport=httpx.MockTransport(refuse))
        session = QASession(client=client)

        result = await session.submit_query("question")

        assert result.success is False
        assert session.state.error == "Connection refused"
        assert session.state.query_busy is False


class TestQueryBusyFlag:
    """Tests for duplicate-submission prevention."""

    async def test_second_query_refused_while_outstanding(
        self, session: QASession, fake_service: FakeRagService
    ) -> None:
        fake_service.chat_gate = asyncio.Event()

        first = asyncio.create_task(session.submit_query("first"))
        await wait_until(lambda: len(fake_service.chat_calls) == 1)

        assert session.state.query_busy is True
        second = await session.submit_query("second")

        assert second.success is False
        assert second.message == QUERY_IN_PROGRESS_MESSAGE
        assert len(fake_service.chat_calls) == 1

        fake_service.chat_gate.set()
        result = await first

        assert result.success is True
        assert session.state.query_busy is False

        # Once settled, a new query goes through.
        await session.submit_query("third")
        assert len(fake_service.chat_calls) == 2

    async def test_upload_allowed_while_query_outstanding(
        self,
        session: QASession,
        fake_service: FakeRagService,
        sample_document: DocumentFile,
    ) -> None:
        fake_service.chat_gate = asyncio.Event()

        query = asyncio.create_task(session.submit_query("question"))
        await wait_until(lambda: session.state.query_busy)

        upload = await session.upload_document(sample_document)

        assert upload.success is True
        assert session.state.query_busy is True

        fake_service.chat_gate.set()
        await query
        assert session.state.response == "ok"
        assert session.state.upload_status == "File uploaded successfully"
