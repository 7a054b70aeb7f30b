from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
)


class QueryRequest(BaseModel):
    """Request payload for the chat endpoint.

    Attributes:
        query: The user's question, whitespace-trimmed.
    """

    query: str = Field(..., min_length=1)

    @field_validator("query", mode="before")
    @classmethod
    def strip_query(cls, v: str) -> str:
        """Strip whitespace from query before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class DocumentFile(BaseModel):
    """A file selected for upload.

    Attributes:
        filename: Original file name, sent as the multipart filename.
        content: Raw file bytes.
        content_type: MIME type sent with the multipart part.
    """

    filename: str = Field(..., min_length=1)
    content: bytes
    content_type: str = "application/pdf"

    @property
    def size(self) -> int:
        return len(self.content)


def _require_present(value: Any) -> Any:
    """Reject null, empty string, zero and false; any other value counts."""
    if value is None or value == "" or (isinstance(value, int | float) and not value):
        raise ValueError("answer field is empty")
    return value


PresentValue = Annotated[Any, AfterValidator(_require_present)]


class TextAnswer(BaseModel):
    text: PresentValue


class ResponseAnswer(BaseModel):
    response: PresentValue


class MessageAnswer(BaseModel):
    message: PresentValue


# Known answer shapes in priority order; the first that validates wins.
AnswerShape = Annotated[
    str | TextAnswer | ResponseAnswer | MessageAnswer,
    Field(union_mode="left_to_right"),
]

answer_adapter = TypeAdapter(AnswerShape)


class ErrorPayload(BaseModel):
    """Error body carrying a human-readable message."""

    model_config = ConfigDict(extra="allow")

    message: PresentValue


class OperationResult(BaseModel):
    """Outcome of a single upload or query attempt.

    Attributes:
        success: Whether the operation completed successfully.
        message: Display text (answer, confirmation or error).
    """

    success: bool
    message: str
