"""Async-to-sync bridge for synchronous callers such as registry threads."""

import asyncio
import concurrent.futures
from collections.abc import Coroutine
from typing import Any, TypeVar

T = TypeVar("T")


def _run_sync(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine to completion in a new event loop.

    When the calling thread is already running an event loop (e.g., an ASGI
    app rendering the exposition), the coroutine runs on a worker thread and
    the caller blocks until it finishes.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
        return executor.submit(asyncio.run, coro).result()


run_sync = _run_sync
