"""Pattern delete engine - scan-driven concurrent batch deletion."""

import asyncio

from kvcache.core.entities.deletion_tally import DeletionTally, PatternDeleteState
from kvcache.core.exceptions import ScanError
from kvcache.core.interfaces.logger import ILogger
from kvcache.core.interfaces.store import IKeyValueStore
from kvcache.utils.log import SafeLogger

DEFAULT_BATCH_SIZE = 100


class PatternDeleteEngine:
    """Deletes every key matching a glob pattern.

    Batches produced by the store's scan are handed to concurrently
    running batch deletes as soon as they arrive, so deletion overlaps
    with enumeration. A call only returns once every batch delete it
    issued has finished, and the result counts deletions acknowledged
    by the store rather than keys observed by the scan.

    Failure handling:
        A failing batch delete is logged and counts zero; the other
        batches are unaffected. A failing scan means the keyspace was
        not fully enumerated, so the call raises ScanError after the
        already issued deletes have drained.

    Cancellation:
        Batch deletes are irrevocable once sent. Cancelling a call stops
        the scan but leaves the issued deletes running; ``join`` waits
        for them.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        logger: ILogger | None = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
        max_in_flight: int | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            store: The store to scan and delete from.
            logger: Optional logger. Uses the library logger if not provided.
            batch_size: Default upper bound on keys per batch.
            max_in_flight: Optional cap on concurrently running batch
                deletes. None means unbounded.
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")
        if max_in_flight is not None and max_in_flight < 1:
            raise ValueError(f"max_in_flight must be None or >= 1, got {max_in_flight}")

        self._store = store
        self._logger = logger if isinstance(logger, SafeLogger) else SafeLogger(logger)
        self._batch_size = batch_size
        self._max_in_flight = max_in_flight

        # Strong references to running batch deletes. The event loop only
        # keeps weak ones, and a cancelled call no longer holds its own.
        self._in_flight: set[asyncio.Task[int | None]] = set()

    @property
    def batch_size(self) -> int:
        """Get the default batch size."""
        return self._batch_size

    @property
    def in_flight(self) -> int:
        """Get the number of batch deletes still running."""
        return len(self._in_flight)

    async def delete_pattern(self, pattern: str, batch_size: int | None = None) -> int:
        """Delete keys matching pattern.

        Args:
            pattern: Store-native glob pattern.
            batch_size: Optional per-call batch size.

        Returns:
            Number of keys deleted.

        Raises:
            ScanError: If the scan failed.
        """
        tally = await self.run(pattern, batch_size)
        return tally.deleted

    async def run(self, pattern: str, batch_size: int | None = None) -> DeletionTally:
        """Delete keys matching pattern and return the full tally.

        Args:
            pattern: Store-native glob pattern.
            batch_size: Optional per-call batch size.

        Returns:
            The finished DeletionTally.

        Raises:
            ScanError: If the scan failed.
        """
        size = self._batch_size if batch_size is None else batch_size
        if size < 1:
            raise ValueError(f"batch_size must be >= 1, got {size}")

        tally = DeletionTally(pattern=pattern)
        issued: list[asyncio.Task[int | None]] = []
        limiter = (
            asyncio.Semaphore(self._max_in_flight)
            if self._max_in_flight is not None
            else None
        )

        try:
            async for keys in self._store.scan(pattern, size):
                if not keys:
                    continue
                if limiter is not None:
                    await limiter.acquire()
                tally.batches += 1
                tally.observed += len(keys)
                issued.append(self._spawn(pattern, keys, limiter))
        except Exception as e:
            tally.state = PatternDeleteState.FAILED
            self._logger.error("Error scanning pattern %s: %s", pattern, e)
            await self._drain(issued, tally)
            raise ScanError(pattern) from e

        tally.state = PatternDeleteState.DRAINING
        await self._drain(issued, tally)
        tally.state = PatternDeleteState.DONE

        self._logger.info("Deleted %d keys matching pattern: %s", tally.deleted, pattern)
        return tally

    async def join(self) -> None:
        """Wait for every outstanding batch delete, including orphaned ones."""
        while self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)

    def _spawn(
        self,
        pattern: str,
        keys: list[str],
        limiter: asyncio.Semaphore | None,
    ) -> "asyncio.Task[int | None]":
        task = asyncio.create_task(self._delete_batch(pattern, keys, limiter))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task

    async def _delete_batch(
        self,
        pattern: str,
        keys: list[str],
        limiter: asyncio.Semaphore | None,
    ) -> int | None:
        """Run one batch delete.

        Returns:
            Keys deleted, or None if the batch failed.
        """
        try:
            deleted = await self._store.batch_delete(keys)
        except Exception as e:
            self._logger.error(
                "Error deleting batch of %d keys for pattern %s: %s",
                len(keys),
                pattern,
                e,
            )
            return None
        finally:
            if limiter is not None:
                limiter.release()

        self._logger.debug(
            "Deleted %d of %d keys in batch for pattern %s",
            deleted,
            len(keys),
            pattern,
        )
        return deleted

    async def _drain(
        self,
        issued: list["asyncio.Task[int | None]"],
        tally: DeletionTally,
    ) -> None:
        """Await every issued batch delete and fold its result into tally."""
        if not issued:
            return

        # Shielded so that cancelling the caller does not cancel the deletes.
        results = await asyncio.shield(asyncio.gather(*issued, return_exceptions=True))

        for result in results:
            if isinstance(result, int):
                tally.deleted += result
            else:
                tally.failed_batches += 1
