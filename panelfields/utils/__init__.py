"""
Helpers shared by the dependency engine.
"""

from .async_safe import run_async_safe, call_maybe_async
from .log_safe import log_safe_output

__all__ = ['run_async_safe', 'call_maybe_async', 'log_safe_output']
