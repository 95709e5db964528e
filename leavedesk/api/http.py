"""
HTTP REST API endpoints.

Plain-JSON mirror of the MCP tool operations, for health checks and callers
that do not speak MCP:
- Health check
- Tool listing
- Tool invocation
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

from ..core.thread_pool import run_in_thread
from ..dispatch import Dispatcher


router = APIRouter(prefix="/api")


def _dispatcher(request: Request) -> Dispatcher:
    return request.app.state.dispatcher


# ============================================
# Health Check
# ============================================


@router.get("/health")
async def health_check(request: Request):
    """Check if the server is running and how many tools it serves."""
    return {"status": "healthy", "tools": len(_dispatcher(request).registry)}


# ============================================
# Tools API
# ============================================


class ToolCallRequest(BaseModel):
    """Request body for invoking a tool."""

    # Any JSON value: null means no arguments, a non-object is reported
    # by the dispatcher in the error envelope
    arguments: Any = None


@router.get("/tools")
async def list_tools(request: Request) -> List[dict]:
    """
    List every registered tool with its parameter schema.

    Order is registration order and never changes while the process runs.
    """
    return _dispatcher(request).list_tools()


@router.post("/tools/{name}/call")
async def call_tool(
    name: str, request: Request, body: Optional[ToolCallRequest] = None
) -> dict:
    """
    Invoke a tool by name.

    Always answers 200: failures (unknown tool, bad arguments, tool fault)
    come back as ``{"status": "error", "message": ...}``.
    """
    result = await run_in_thread(
        _dispatcher(request).call_tool, name, body.arguments if body else None
    )
    return result.to_dict()
