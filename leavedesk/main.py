"""
Server entry point.

    python -m leavedesk
    leavedesk            (console script)

Configures logging, builds the app (which fails fast on a bad tool
definition) and serves it with uvicorn.
"""
import logging
import socket

import uvicorn

from .config import HOST, LOG_LEVEL, MAX_PORT, MAX_PORT_ATTEMPTS, PORT, SSE_PATH
from .core.log import configure_logging

logger = logging.getLogger(__name__)


def find_available_port(host: str, start_port: int = 8000, max_attempts: int = 10) -> int:
    """Find an available port starting from start_port."""
    last_port = min(start_port + max_attempts - 1, MAX_PORT)
    for port in range(start_port, last_port + 1):
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
                s.bind((host, port))
                return port
        except OSError:
            continue
    raise RuntimeError(f"Could not find an available port in range {start_port}-{last_port}")


def main():
    configure_logging(LOG_LEVEL)

    # Imported here so registry logging goes through the configured handlers
    from .app import app

    port = find_available_port(HOST, PORT, MAX_PORT_ATTEMPTS)
    if port != PORT:
        logger.warning("Port %d is busy, using %d instead", PORT, port)
    logger.info("MCP SSE endpoint: http://%s:%d%s", HOST, port, SSE_PATH)

    uvicorn.run(app, host=HOST, port=port, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
