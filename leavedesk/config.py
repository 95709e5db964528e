"""
Application configuration module.

Centralizes all configuration values and constants.
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Project paths
PROJECT_ROOT = Path(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
PACKAGE_DIR = Path(os.path.dirname(os.path.abspath(__file__)))

# Load environment variables from .env file
load_dotenv(os.path.join(PROJECT_ROOT, ".env"))


def _int_env(
    var_name: str,
    default: int,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> int:
    """
    Read an integer environment variable, falling back to *default*.

    Raises
    ------
    RuntimeError
        If the variable is set but is not an integer, or lies outside
        ``minimum``..``maximum``.
    """
    raw = os.environ.get(var_name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise RuntimeError(
            f"Environment variable '{var_name}' must be an integer, got {raw!r}."
        ) from exc
    if (minimum is not None and value < minimum) or (
        maximum is not None and value > maximum
    ):
        bounds = f"{'' if minimum is None else minimum}..{'' if maximum is None else maximum}"
        raise RuntimeError(
            f"Environment variable '{var_name}' must be in range {bounds}, got {value}."
        )
    return value


# Server configuration
SERVER_NAME = "LeaveDesk"
SERVER_VERSION = "0.1.0"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
MAX_PORT_ATTEMPTS = 10

HOST = os.environ.get("LEAVEDESK_HOST", DEFAULT_HOST)
MAX_PORT = 65535
PORT = _int_env("LEAVEDESK_PORT", DEFAULT_PORT, minimum=1, maximum=MAX_PORT)

# MCP SSE transport paths
SSE_PATH = "/sse"
MESSAGES_PATH = "/messages/"

# Logging
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_LEVEL = os.environ.get("LEAVEDESK_LOG_LEVEL", "INFO").strip().upper()
if LOG_LEVEL not in LOG_LEVELS:
    raise RuntimeError(
        f"LEAVEDESK_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {LOG_LEVEL!r}."
    )

# Tool execution
TOOL_WORKERS = _int_env("LEAVEDESK_TOOL_WORKERS", 4, minimum=1)

# GetCurrentDate reports local time at this fixed offset from UTC
UTC_OFFSET_HOURS = _int_env("LEAVEDESK_UTC_OFFSET_HOURS", 8)
