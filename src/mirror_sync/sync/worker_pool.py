"""Fixed-size pool of workers draining a TaskStream."""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import AsyncIterator, Callable

from loguru import logger

from mirror_sync.models import SyncOutcome, SyncTask
from mirror_sync.sync.dispatcher import TaskStream

Operation = Callable[[SyncTask], None]

_DONE = object()


async def run_pool(
    stream: TaskStream, operation: Operation, workers: int
) -> AsyncIterator[SyncOutcome]:
    """
    Apply an operation to every task of a stream with bounded parallelism.

    Each worker pulls the next task, runs the blocking ``operation`` on a
    thread of the pool's own executor and emits a SyncOutcome. The executor
    has one thread per worker, so ``workers`` operations run at once
    regardless of the event loop's default executor. An exception raised by
    the operation is recorded in that task's outcome and does not affect
    sibling tasks. No more workers are started than there are tasks. The
    outcome stream ends only after every worker has seen the end of the task
    stream.

    Args:
        stream: Tasks to process
        operation: Blocking callable performing one task, raising on failure
        workers: Number of concurrent workers, at least 1

    Yields:
        One SyncOutcome per task, in completion order

    Raises:
        ValueError: If workers is less than 1
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    count = min(workers, len(stream))
    loop = asyncio.get_running_loop()
    executor = ThreadPoolExecutor(max_workers=max(count, 1), thread_name_prefix="mirror-sync")
    outcomes: asyncio.Queue = asyncio.Queue(maxsize=workers)

    async def worker() -> None:
        async for task in stream:
            try:
                await loop.run_in_executor(executor, operation, task)
                outcome = SyncOutcome(task=task)
            except Exception as e:
                outcome = SyncOutcome(task=task, error=e)
            await outcomes.put(outcome)

    async def join() -> None:
        logger.debug(f"Starting {count} workers for {len(stream)} tasks")
        await asyncio.gather(*(worker() for _ in range(count)))
        await outcomes.put(_DONE)

    joiner = asyncio.create_task(join())
    try:
        while (outcome := await outcomes.get()) is not _DONE:
            yield outcome
        await joiner
    finally:
        # consumer stopped early: release workers blocked on a full outcome queue
        joiner.cancel()
        executor.shutdown(wait=False, cancel_futures=True)
