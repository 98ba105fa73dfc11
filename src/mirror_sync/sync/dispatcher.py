"""Hand the entries of a work set to concurrent workers one task at a time."""

import asyncio

from loguru import logger

from mirror_sync.models import SyncTask, WorkSet

# end-of-sequence marker; never a valid SyncTask
_END = object()


class TaskStream:
    """
    Single-pass stream of SyncTasks shared by several consumers.

    A producer task feeds a bounded queue with one SyncTask per work set
    entry and then an end marker. Any number of workers may iterate the
    stream concurrently with ``async for``; each task is delivered to exactly
    one of them, in no particular order. Once the end marker is seen it is
    put back so that every remaining consumer also stops.
    """

    def __init__(self, work_set: WorkSet, maxsize: int = 0):
        self._size = len(work_set)
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self._producer = asyncio.create_task(self._produce(dict(work_set)))

    def __len__(self) -> int:
        return self._size

    async def _produce(self, work_set: WorkSet) -> None:
        for source, destination in work_set.items():
            await self._queue.put(SyncTask(source=source, destination=destination))
        await self._queue.put(_END)
        logger.debug(f"Dispatched {len(work_set)} tasks")

    def __aiter__(self) -> "TaskStream":
        return self

    async def __anext__(self) -> SyncTask:
        item = await self._queue.get()
        if item is _END:
            # only re-posted markers follow the end, so there is always room
            self._queue.put_nowait(_END)
            raise StopAsyncIteration
        return item


def dispatch(work_set: WorkSet, maxsize: int = 0) -> TaskStream:
    """
    Start dispatching a work set.

    Must be called from a running event loop.

    Args:
        work_set: Mapping of source path to destination path (empty for deletes)
        maxsize: Bound on tasks buffered ahead of the workers, 0 for unbounded

    Returns:
        TaskStream that yields one SyncTask per entry, then ends
    """
    return TaskStream(work_set, maxsize=maxsize)
