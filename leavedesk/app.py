"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""
import logging
from typing import Optional

from fastapi import FastAPI

from .api.http import router as http_router
from .api.mcp_transport import build_mcp_server, mount_sse
from .config import SERVER_NAME, SERVER_VERSION
from .dispatch import Dispatcher
from .registry import ToolRegistry
from .tools import build_default_registry

logger = logging.getLogger(__name__)


def create_app(registry: Optional[ToolRegistry] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        registry: Tools to serve. Defaults to the built-in tool list.

    Returns:
        Configured FastAPI instance

    Raises:
        ToolError: A tool definition is invalid (duplicate name, signature
            mismatch). Startup must not continue with a partial registry.
    """
    if registry is None:
        registry = build_default_registry()
    dispatcher = Dispatcher(registry)

    app = FastAPI(
        title=f"{SERVER_NAME} API",
        description="MCP tool server for leave management",
        version=SERVER_VERSION,
    )
    app.state.registry = registry
    app.state.dispatcher = dispatcher

    # Register HTTP REST routes (e.g., /api/health, /api/tools)
    app.include_router(http_router)

    # Register the MCP SSE transport (/sse + /messages/)
    app.state.mcp_server = build_mcp_server(dispatcher)
    mount_sse(app, app.state.mcp_server)

    logger.info("Ready: %d tool(s) available", len(registry))
    return app


# Create the app instance for uvicorn (uvicorn leavedesk.app:app)
app = create_app()
