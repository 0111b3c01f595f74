"""
Async-Safe Execution Utility

Single Responsibility: Run dependency callbacks that may be coroutine functions.

Callbacks often need I/O (loading options from a database or an API). A callback
declared with `async def` is run to completion here so the resolver itself stays
synchronous, whether it is called from a sync view or from inside a running
event loop.
"""

import asyncio
import concurrent.futures
import inspect
from typing import Any, Callable, TypeVar

from asgiref.sync import async_to_sync

T = TypeVar('T')


def run_async_safe(async_func: Callable[..., Any], *args: Any, timeout: float = 30, **kwargs: Any) -> Any:
    """
    Run an async function from either sync or async context.

    - In sync context: uses async_to_sync directly
    - In async context: runs in a separate thread with its own event loop,
      because async_to_sync refuses to run inside a running loop

    Args:
        async_func: The async function to execute
        *args: Positional arguments to pass to the function
        timeout: Maximum time to wait when a loop is already running (seconds)
        **kwargs: Keyword arguments to pass to the function

    Returns:
        The result of the async function

    Raises:
        concurrent.futures.TimeoutError: If execution exceeds the timeout
        Exception: Any exception raised by the async function
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        # No running event loop - we're in sync context
        return async_to_sync(async_func)(*args, **kwargs)

    def run_in_thread():
        new_loop = asyncio.new_event_loop()
        asyncio.set_event_loop(new_loop)
        try:
            return new_loop.run_until_complete(async_func(*args, **kwargs))
        finally:
            new_loop.close()

    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(run_in_thread)
        return future.result(timeout=timeout)


def call_maybe_async(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Call `func`; coroutine functions are run through run_async_safe."""
    if inspect.iscoroutinefunction(func):
        return run_async_safe(func, *args, **kwargs)
    return func(*args, **kwargs)
