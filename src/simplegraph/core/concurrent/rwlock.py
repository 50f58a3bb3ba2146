"""
Multi-reader, single-writer lock.

Any number of threads may hold the lock in shared (read) mode as long as no
thread holds it in exclusive (write) mode. A writer excludes every reader and
every other writer.

Two admission policies are available:

* Non-fair (default): a waiting writer takes precedence over newly arriving
  readers, so a steady stream of readers cannot starve writers. Among waiting
  threads, wake-up order is left to the scheduler.
* Fair: threads are admitted in arrival order. Readers that are next in line
  together are admitted together.

The lock is not reentrant: a thread must not acquire it again, in either mode,
while it already holds it.
"""

import logging
import threading
from collections import deque
from contextlib import contextmanager
from typing import Deque, Generator, Optional

logger = logging.getLogger(__name__)


class _Waiter:
    """Queue ticket of a thread waiting in fair mode."""

    __slots__ = ("exclusive",)

    def __init__(self, exclusive: bool):
        self.exclusive = exclusive


class ReadWriteLock:
    """
    Reader/writer lock built on a single condition variable.

    Attributes:
        fair (bool): Whether threads are admitted in arrival order
    """

    def __init__(self, fair: bool = False):
        self.fair = fair
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer: Optional[int] = None
        self._waiting_writers = 0
        self._queue: Deque[_Waiter] = deque()

    def acquire_read(self, timeout: Optional[float] = None) -> bool:
        """
        Acquire the lock in shared mode.

        Args:
            timeout (Optional[float]): Seconds to wait; None blocks forever

        Returns:
            bool: False if the timeout expired before the lock was granted
        """
        with self._condition:
            if self.fair:
                waiter = _Waiter(exclusive=False)
                self._queue.append(waiter)
                granted = self._condition.wait_for(
                    lambda: self._queue[0] is waiter and self._writer is None, timeout
                )
                if not granted:
                    self._withdraw(waiter)
                    return False
                self._queue.popleft()
                # The next reader in line may now be at the head
                self._condition.notify_all()
            else:
                granted = self._condition.wait_for(
                    lambda: self._writer is None and self._waiting_writers == 0, timeout
                )
                if not granted:
                    logger.debug("Read acquisition timed out after %ss", timeout)
                    return False
            self._readers += 1
            return True

    def acquire_write(self, timeout: Optional[float] = None) -> bool:
        """
        Acquire the lock in exclusive mode.

        Args:
            timeout (Optional[float]): Seconds to wait; None blocks forever

        Returns:
            bool: False if the timeout expired before the lock was granted
        """
        with self._condition:
            if self.fair:
                waiter = _Waiter(exclusive=True)
                self._queue.append(waiter)
                granted = self._condition.wait_for(
                    lambda: self._queue[0] is waiter and self._is_free(), timeout
                )
                if not granted:
                    self._withdraw(waiter)
                    return False
                self._queue.popleft()
            else:
                self._waiting_writers += 1
                try:
                    granted = self._condition.wait_for(self._is_free, timeout)
                finally:
                    self._waiting_writers -= 1
                if not granted:
                    logger.debug("Write acquisition timed out after %ss", timeout)
                    # Readers held back by this writer may proceed
                    self._condition.notify_all()
                    return False
            self._writer = threading.get_ident()
            return True

    def release_read(self) -> None:
        """
        Release a shared hold.

        Raises:
            RuntimeError: If no thread holds the lock in shared mode
        """
        with self._condition:
            if self._readers == 0:
                raise RuntimeError("release_read called on a lock not held for reading")
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def release_write(self) -> None:
        """
        Release the exclusive hold.

        Raises:
            RuntimeError: If the calling thread does not hold the lock for writing
        """
        with self._condition:
            if self._writer != threading.get_ident():
                raise RuntimeError("release_write called by a thread not holding the write lock")
            self._writer = None
            self._condition.notify_all()

    @contextmanager
    def read_locked(self) -> Generator[None, None, None]:
        """Hold the lock in shared mode for the duration of the block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Generator[None, None, None]:
        """Hold the lock in exclusive mode for the duration of the block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

    @property
    def readers(self) -> int:
        """Number of shared holds currently granted."""
        with self._condition:
            return self._readers

    @property
    def write_locked_by_current_thread(self) -> bool:
        with self._condition:
            return self._writer == threading.get_ident()

    def _is_free(self) -> bool:
        return self._writer is None and self._readers == 0

    def _withdraw(self, waiter: _Waiter) -> None:
        """Drop a timed-out waiter from the fair queue. Caller holds the condition."""
        kind = "Write" if waiter.exclusive else "Read"
        logger.debug("%s acquisition timed out, leaving the queue", kind)
        self._queue.remove(waiter)
        # Whoever was queued behind the waiter may now be at the head
        self._condition.notify_all()
