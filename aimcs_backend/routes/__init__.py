"""
API routes for the gateway
"""

from . import api, chat, health

__all__ = ["api", "chat", "health"]
