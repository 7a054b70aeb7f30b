"""Client configuration with environment variable loading.

Pydantic-based configuration for the RAG API client. The endpoint
address is read from the environment (or a .env file) so the same
build can target any deployment of the service.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "http://localhost:8084"


def _timeout_from_env() -> str | None:
    return os.getenv("RAG_API_TIMEOUT", "").strip() or None


class ClientConfig(BaseModel):
    """Configuration for the RAG API client.

    Attributes:
        api_base_url: Scheme and host of the RAG service.
        chat_path: Path of the question endpoint.
        upload_path: Path of the document upload endpoint.
        upload_field: Multipart field name carrying the file.
        request_timeout: Seconds before a request is abandoned (None uses httpx's default).
    """

    # Environment values arrive as defaults and must pass the same checks.
    model_config = ConfigDict(validate_default=True)

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("RAG_API_BASE_URL", DEFAULT_BASE_URL),
        description="Base URL of the RAG service",
    )
    chat_path: str = Field(
        default_factory=lambda: os.getenv("RAG_CHAT_PATH", "/api/rag/chat"),
        description="Path of the chat/query endpoint",
    )
    upload_path: str = Field(
        default_factory=lambda: os.getenv("RAG_UPLOAD_PATH", "/api/documents/upload"),
        description="Path of the document upload endpoint",
    )
    upload_field: str = Field(
        default="file",
        min_length=1,
        description="Multipart field name for the uploaded file",
    )
    request_timeout: float | None = Field(
        default_factory=_timeout_from_env,
        gt=0,
        description="Request timeout in seconds (None for the transport default)",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                "RAG_API_BASE_URL must start with http:// or https://"
            )
        return v.rstrip("/")

    @field_validator("chat_path", "upload_path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Ensure endpoint paths are absolute."""
        v = v.strip()
        return v if v.startswith("/") else f"/{v}"

    @property
    def chat_url(self) -> str:
        return f"{self.api_base_url}{self.chat_path}"

    @property
    def upload_url(self) -> str:
        return f"{self.api_base_url}{self.upload_path}"


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValidationError: If the base URL or timeout is invalid.
    """
    return ClientConfig()
