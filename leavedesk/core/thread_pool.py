"""
Worker pool for tool calls.

Tool callables are plain synchronous functions. The MCP handlers and REST
endpoints run on the event loop, so they hand each call to this pool::

    from leavedesk.core.thread_pool import run_in_thread
    result = await run_in_thread(dispatcher.call_tool, name, arguments)

The pool is owned by the app rather than borrowed from ``asyncio.to_thread``
so it outlives any one event loop (uvicorn restarts, test loops).
"""

import asyncio
import concurrent.futures
import functools

from ..config import TOOL_WORKERS

_tool_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=TOOL_WORKERS, thread_name_prefix="tool-worker"
)


async def run_in_thread(func, *args, **kwargs):
    """Await *func(*args, **kwargs)* on the tool worker pool."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        _tool_executor, functools.partial(func, *args, **kwargs)
    )
