"""RagQuery - web client for a retrieval-augmented document Q&A service.

Uploads PDF documents and submits questions to a remote RAG API over HTTP,
rendering the returned answer or an error message. Built on httpx for
transport, Pydantic for payload validation and NiceGUI for the interface.

Components:
    - client: HTTP calls, response normalization and session state
    - models: Request/response schemas
    - ui: Web interface for uploads and questions
"""

__version__ = "0.1.0"
