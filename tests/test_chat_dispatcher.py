"""
Tests for the chat dispatcher
"""

import asyncio

import pytest

from aimcs_backend.models import ChatRequest
from aimcs_backend.services import ChatDispatcher, ChatProvider, PlaceholderProvider
from aimcs_backend.utils.errors import ClientInputError, UpstreamTimeoutError


class RecordingProvider(ChatProvider):
    name = "recording"

    def __init__(self, delay: float = 0.0):
        self.delay = delay
        self.calls = []

    async def complete(self, chat_request, model):
        self.calls.append((chat_request.message, model))
        await asyncio.sleep(self.delay)
        return f"{model}: {chat_request.message}"


def make_dispatcher(**kwargs) -> ChatDispatcher:
    kwargs.setdefault("default_model", "gpt-4o-mini")
    kwargs.setdefault("timeout_seconds", 1.0)
    return ChatDispatcher(**kwargs)


class TestChatDispatcher:
    @pytest.mark.asyncio
    async def test_placeholder_reply(self):
        dispatcher = make_dispatcher()

        reply = await dispatcher.dispatch(ChatRequest(message="hello"))
        assert reply.response == (
            'This is a placeholder response from the backend. You said: "hello"'
        )
        assert reply.model == "gpt-4o-mini"

    @pytest.mark.asyncio
    async def test_routes_by_catalog_provider(self):
        anthropic = RecordingProvider()
        dispatcher = make_dispatcher(providers={"Anthropic": anthropic})

        reply = await dispatcher.dispatch(ChatRequest(message="hi", model="claude-3-haiku"))
        assert reply.response == "claude-3-haiku: hi"
        assert anthropic.calls == [("hi", "claude-3-haiku")]

        # gpt-4o-mini belongs to OpenAI, which has no client registered
        reply = await dispatcher.dispatch(ChatRequest(message="hi"))
        assert "You said" in reply.response
        assert len(anthropic.calls) == 1

    def test_unknown_model_uses_fallback(self):
        fallback = RecordingProvider()
        dispatcher = make_dispatcher(fallback=fallback)
        assert dispatcher.provider_for("mystery-model") is fallback

    def test_default_fallback_is_placeholder(self):
        assert isinstance(make_dispatcher().provider_for("gpt-4o-mini"), PlaceholderProvider)

    @pytest.mark.asyncio
    async def test_timeout_raises_upstream_error(self):
        dispatcher = make_dispatcher(
            timeout_seconds=0.01,
            providers={"OpenAI": RecordingProvider(delay=0.5)},
        )

        with pytest.raises(UpstreamTimeoutError) as exc_info:
            await dispatcher.dispatch(ChatRequest(message="hi"))
        assert exc_info.value.status_code == 504
        assert exc_info.value.to_dict() == {
            "error": "Upstream provider timed out",
            "model": "gpt-4o-mini",
        }

    @pytest.mark.asyncio
    async def test_concurrent_requests_are_independent(self):
        dispatcher = make_dispatcher(providers={"OpenAI": RecordingProvider(delay=0.01)})

        replies = await asyncio.gather(*[
            dispatcher.dispatch(ChatRequest(message=f"m{i}")) for i in range(5)
        ])
        assert [r.response for r in replies] == [f"gpt-4o-mini: m{i}" for i in range(5)]


class TestChatRequest:
    def test_from_body(self):
        chat_request = ChatRequest.from_body({"message": "hi", "model": "claude-3-haiku"})
        assert chat_request.message == "hi"
        assert chat_request.resolved_model("gpt-4o-mini") == "claude-3-haiku"

    def test_resolved_model_defaults(self):
        assert ChatRequest.from_body({"message": "hi"}).resolved_model("gpt-4o-mini") == "gpt-4o-mini"

    @pytest.mark.parametrize("body,error", [
        ({}, "Message is required"),
        ({"message": ""}, "Message is required"),
        (None, "Message is required"),
        ({"message": 1.5}, "Message must be a string"),
        ({"message": "hi", "model": 3}, "Model must be a string"),
    ])
    def test_from_body_errors(self, body, error):
        with pytest.raises(ClientInputError) as exc_info:
            ChatRequest.from_body(body)
        assert exc_info.value.message == error
        assert exc_info.value.status_code == 400
