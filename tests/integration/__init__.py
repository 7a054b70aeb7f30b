"""Integration tests for the client and session against a fake RAG service.

No network access: the service runs in-process behind httpx.ASGITransport.
"""
