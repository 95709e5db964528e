"""
Core application components.
"""
from .log import configure_logging
from .thread_pool import run_in_thread

__all__ = ['configure_logging', 'run_in_thread']
