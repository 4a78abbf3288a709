"""
Chat Models
Request and response schemas for POST /api/chat
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..utils.errors import ClientInputError

MESSAGE_REQUIRED = "Message is required"
MESSAGE_NOT_STRING = "Message must be a string"
MODEL_NOT_STRING = "Model must be a string"


class ChatRequest(BaseModel):
    """Validated chat request body"""

    model_config = ConfigDict(strict=True, extra="ignore")

    message: str = Field(min_length=1)
    model: Optional[str] = None

    @classmethod
    def from_body(cls, body: Any) -> "ChatRequest":
        """
        Validate a parsed request body

        Raises:
            ClientInputError: describing the first violated constraint
        """
        if not isinstance(body, dict):
            raise ClientInputError(MESSAGE_REQUIRED)

        try:
            return cls.model_validate(body)
        except ValidationError as e:
            raise ClientInputError(_describe_error(e)) from None

    def resolved_model(self, default_model: str) -> str:
        return self.model or default_model


class ChatResponse(BaseModel):
    """Chat reply returned to the client"""

    response: str
    model: str
    timestamp: str


def _describe_error(error: ValidationError) -> str:
    first = error.errors()[0]
    field = first["loc"][0] if first["loc"] else "message"

    if field == "model":
        return MODEL_NOT_STRING

    if first["type"] in ("missing", "string_too_short") or first.get("input") is None:
        return MESSAGE_REQUIRED
    return MESSAGE_NOT_STRING
