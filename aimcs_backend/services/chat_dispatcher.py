"""
Chat dispatcher

Resolves the model a chat request targets, picks the provider serving that
model and runs the provider call under a per-request timeout.
"""

import asyncio
from typing import Dict, Optional, Tuple

import structlog

from ..models.catalog import MODEL_CATALOG, ModelDescriptor, find_model
from ..models.chat import ChatRequest, ChatResponse
from ..utils.clock import utc_timestamp
from ..utils.errors import UpstreamTimeoutError
from .providers import ChatProvider, PlaceholderProvider

logger = structlog.get_logger(__name__)


class ChatDispatcher:
    """
    Routes chat requests to providers.

    Providers are keyed by the catalog's provider name ("OpenAI",
    "Anthropic", ...). Models outside the catalog, or whose provider has no
    registered client, are answered by the fallback provider.
    """

    def __init__(
        self,
        default_model: str,
        timeout_seconds: float,
        providers: Optional[Dict[str, ChatProvider]] = None,
        catalog: Tuple[ModelDescriptor, ...] = MODEL_CATALOG,
        fallback: Optional[ChatProvider] = None,
    ):
        self.default_model = default_model
        self.timeout_seconds = timeout_seconds
        self.providers = dict(providers or {})
        self.catalog = catalog
        self.fallback = fallback or PlaceholderProvider()

    def provider_for(self, model: str) -> ChatProvider:
        descriptor = find_model(model, self.catalog)
        if descriptor is None:
            return self.fallback
        return self.providers.get(descriptor.provider, self.fallback)

    async def dispatch(self, chat_request: ChatRequest) -> ChatResponse:
        """
        Answer a chat request

        Raises:
            UpstreamTimeoutError: if the provider does not answer in time
        """
        model = chat_request.resolved_model(self.default_model)
        provider = self.provider_for(model)

        try:
            reply = await asyncio.wait_for(
                provider.complete(chat_request, model),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Provider call timed out",
                provider=provider.name,
                model=model,
                timeout_seconds=self.timeout_seconds,
            )
            raise UpstreamTimeoutError(model)

        return ChatResponse(response=reply, model=model, timestamp=utc_timestamp())
