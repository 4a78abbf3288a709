from .catalog import MODEL_CATALOG, ModelDescriptor, ModelStatus, find_model
from .chat import ChatRequest, ChatResponse

__all__ = [
    "MODEL_CATALOG",
    "ModelDescriptor",
    "ModelStatus",
    "find_model",
    "ChatRequest",
    "ChatResponse",
]
