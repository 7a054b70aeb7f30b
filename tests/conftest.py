"""Pytest fixtures and shared test configuration.

Fixtures:
    - client_config: Config pointing at the fake service host
    - fake_service: In-process FastAPI stand-in for the RAG service
    - api_client: RagApiClient routed to the fake service
    - session: QASession using that client
    - sample_document: Small PDF-like DocumentFile
"""

import asyncio
from collections.abc import Callable

import httpx
import pytest
from fastapi import FastAPI, Request, UploadFile
from fastapi.responses import JSONResponse, Response

from ragquery.client.api import RagApiClient
from ragquery.client.session import QASession
from ragquery.config import ClientConfig
from ragquery.models.schemas import DocumentFile

FAKE_BASE_URL = "http://rag.test"


class FakeRagService:
    """Records calls and replies with configurable responses.

    Attributes:
        chat_reply: Builds the response for each chat call.
        upload_reply: Builds the response for each upload call.
        chat_gate: When set, chat calls wait on it before replying.
        upload_gate: When set, upload calls wait on it before replying.
    """

    def __init__(self) -> None:
        self.chat_calls: list[dict] = []
        self.chat_headers: list[dict[str, str]] = []
        self.uploads: list[tuple[str | None, bytes, str | None]] = []
        self.chat_reply: Callable[[], Response] = lambda: JSONResponse({"text": "ok"})
        self.upload_reply: Callable[[], Response] = lambda: JSONResponse(
            {"status": "stored"}
        )
        self.chat_gate: asyncio.Event | None = None
        self.upload_gate: asyncio.Event | None = None
        self.app = FastAPI()

        @self.app.post("/api/rag/chat")
        async def chat(request: Request) -> Response:
            self.chat_calls.append(await request.json())
            self.chat_headers.append(dict(request.headers))
            if self.chat_gate is not None:
                await self.chat_gate.wait()
            return self.chat_reply()

        @self.app.post("/api/documents/upload")
        async def upload(file: UploadFile) -> Response:
            self.uploads.append((file.filename, await file.read(), file.content_type))
            if self.upload_gate is not None:
                await self.upload_gate.wait()
            return self.upload_reply()


@pytest.fixture
def client_config() -> ClientConfig:
    """Return config targeting the fake service host."""
    return ClientConfig(api_base_url=FAKE_BASE_URL, request_timeout=None)


@pytest.fixture
def fake_service() -> FakeRagService:
    return FakeRagService()


@pytest.fixture
def api_client(client_config: ClientConfig, fake_service: FakeRagService) -> RagApiClient:
    """Create a client whose requests are served by the fake service."""
    return RagApiClient(
        config=client_config,
        transport=httpx.ASGITransport(app=fake_service.app),
    )


@pytest.fixture
def session(api_client: RagApiClient) -> QASession:
    return QASession(client=api_client)


@pytest.fixture
def sample_document() -> DocumentFile:
    """Return a minimal PDF-like document for upload tests."""
    return DocumentFile(
        filename="report.pdf",
        content=b"%PDF-1.4\n%minimal test content\n%%EOF",
    )
