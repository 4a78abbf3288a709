"""Chat provider interface and the placeholder provider."""

from abc import ABC, abstractmethod

from ..models.chat import ChatRequest

PLACEHOLDER_TEMPLATE = 'This is a placeholder response from the backend. You said: "{message}"'


class ChatProvider(ABC):
    """Abstract base class for chat providers."""

    name: str = "base"

    @abstractmethod
    async def complete(self, chat_request: ChatRequest, model: str) -> str:
        """Produce the reply text for a chat request against the given model."""


class PlaceholderProvider(ChatProvider):
    """Deterministic stand-in used until real provider clients exist."""

    name = "placeholder"

    async def complete(self, chat_request: ChatRequest, model: str) -> str:
        return PLACEHOLDER_TEMPLATE.format(message=chat_request.message)
