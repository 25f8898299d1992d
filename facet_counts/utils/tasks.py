# facet_counts/utils/tasks.py
import asyncio
from typing import Any, Awaitable, List


async def gather_or_cancel(*aws: Awaitable[Any]) -> List[Any]:
    """Run awaitables concurrently and return their results in order.

    All of them are awaited (join, not race). If one fails, its exception
    is raised and the ones still running are cancelled; if the caller is
    cancelled, every child is cancelled with it.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        # let the cancelled siblings unwind before propagating
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
