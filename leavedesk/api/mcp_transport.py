"""
MCP transport.

Exposes the dispatcher through the MCP Python SDK's low-level server and binds
it to the SSE transport:

    GET  /sse         long-lived event stream, server -> client
    POST /messages/   client -> server JSON-RPC messages (?session_id=...)

Framing, session handling and request/response correlation are the SDK's job.
This module only maps tools/list and tools/call onto the dispatcher.
"""

import logging
from typing import Any, Dict, List

import mcp.types as types
from fastapi import FastAPI
from mcp.server.lowlevel import Server
from mcp.server.sse import SseServerTransport
from starlette.requests import Request
from starlette.responses import Response

from ..config import MESSAGES_PATH, SERVER_NAME, SERVER_VERSION, SSE_PATH
from ..core.thread_pool import run_in_thread
from ..dispatch import Dispatcher, Failure

logger = logging.getLogger(__name__)


class ToolCallFailed(Exception):
    """Raised from the call_tool handler so the SDK reports ``isError=True``."""


def build_mcp_server(dispatcher: Dispatcher) -> Server:
    """Create a low-level MCP server whose tool handlers delegate to *dispatcher*."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=descriptor.name,
                description=descriptor.description,
                inputSchema=descriptor.input_schema(),
            )
            for descriptor in dispatcher.registry.list_all()
        ]

    # The dispatcher validates and coerces arguments itself (e.g. "3" for an
    # integer), so the SDK's JSON-schema check is switched off.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
        result = await run_in_thread(dispatcher.call_tool, name, arguments)
        if isinstance(result, Failure):
            raise ToolCallFailed(result.message)
        return [types.TextContent(type="text", text=str(result.value))]

    return server


def mount_sse(app: FastAPI, server: Server) -> SseServerTransport:
    """Attach the SSE stream and message endpoints for *server* to *app*."""
    sse = SseServerTransport(MESSAGES_PATH)

    async def handle_sse(request: Request) -> Response:
        client = request.client.host if request.client else "unknown"
        logger.info("SSE client connected from %s", client)
        async with sse.connect_sse(
            request.scope, request.receive, request._send
        ) as (read_stream, write_stream):
            await server.run(
                read_stream, write_stream, server.create_initialization_options()
            )
        logger.info("SSE client from %s disconnected", client)
        return Response()

    app.add_route(SSE_PATH, handle_sse, methods=["GET"])
    app.mount(MESSAGES_PATH, app=sse.handle_post_message)
    return sse
