"""Test package for RagQuery.

Structure:
    - unit/: Config, payload decoding and state transitions in isolation
    - integration/: Client and session against a fake RAG service

The fake service is a real FastAPI app reached through httpx's ASGI
transport, so requests are encoded and decoded exactly as on the wire.
Leverages pytest with pytest-check for soft assertions.
"""
