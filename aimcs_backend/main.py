"""
AIMCS Backend API - Main Application
Gateway for the AIMCS frontend: health, model catalog and chat endpoints
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings
from .middleware import build_middleware
from .routes import api, chat, health
from .services.chat_dispatcher import ChatDispatcher
from .utils.errors import EndpointNotFoundError, GatewayError, error_response
from .utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events"""
    settings: Settings = app.state.settings
    base_url = f"http://localhost:{settings.port}"

    logger.info(
        f"{settings.service_name} running",
        port=settings.port,
        environment=settings.node_env,
        health_check=f"{base_url}/health",
        api_docs=f"{base_url}/api",
    )
    settings.log_config()

    yield

    logger.info(f"{settings.service_name} shutdown complete")


def _request_target(request: Request) -> str:
    if request.url.query:
        return f"{request.url.path}?{request.url.query}"
    return request.url.path


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the gateway application"""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.logging_config_path)

    app = FastAPI(
        title=settings.service_name,
        description="Gateway for the AIMCS frontend",
        version=settings.service_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        middleware=build_middleware(settings),
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.chat_dispatcher = ChatDispatcher(
        default_model=settings.default_model,
        timeout_seconds=settings.chat_timeout_seconds,
    )

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        """Typed client-visible errors"""
        return error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Routing misses, including a known path with an unlisted method"""
        if exc.status_code in (404, 405):
            return error_response(EndpointNotFoundError(_request_target(request)))
        return error_response(GatewayError(str(exc.detail), status_code=exc.status_code))

    # Register routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(api.router, tags=["API"])
    app.include_router(chat.router, tags=["Chat"])

    return app


app = create_app()


def run() -> None:
    """Console entry point"""
    import uvicorn

    settings = app.state.settings
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        server_header=False,
    )


if __name__ == "__main__":
    run()
