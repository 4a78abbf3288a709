"""
FastAPI Dependencies
Access to the settings and services created at startup
"""

from fastapi import Request

from ..config import Settings
from ..services.chat_dispatcher import ChatDispatcher


def get_app_settings(request: Request) -> Settings:
    """Settings the application was built with"""
    return request.app.state.settings


def get_chat_dispatcher(request: Request) -> ChatDispatcher:
    """Chat dispatcher shared by all requests"""
    return request.app.state.chat_dispatcher


def get_request_body(request: Request):
    """Body decoded by the body parser middleware"""
    return getattr(request.state, "body", {})
