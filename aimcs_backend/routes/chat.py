"""
Chat routes
"""

import structlog
from fastapi import APIRouter, Depends

from ..models.chat import ChatRequest
from ..services.chat_dispatcher import ChatDispatcher
from ..utils.dependencies import get_chat_dispatcher, get_request_body

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("/api/chat")
async def chat(
    body=Depends(get_request_body),
    dispatcher: ChatDispatcher = Depends(get_chat_dispatcher),
):
    """Answer a chat message with the provider serving the requested model"""
    chat_request = ChatRequest.from_body(body)
    chat_response = await dispatcher.dispatch(chat_request)

    logger.info(
        "Chat request answered",
        model=chat_response.model,
        message_length=len(chat_request.message),
    )
    return chat_response.model_dump()
