from .chat_dispatcher import ChatDispatcher
from .providers import ChatProvider, PlaceholderProvider

__all__ = ["ChatDispatcher", "ChatProvider", "PlaceholderProvider"]
