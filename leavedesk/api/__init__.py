"""
API module for the MCP transport and HTTP endpoints.
"""
from .http import router
from .mcp_transport import build_mcp_server, mount_sse

__all__ = ['router', 'build_mcp_server', 'mount_sse']
