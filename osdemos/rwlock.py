"""A reader-writer lock built from semaphores."""

import re
import sys
import threading
import types
from collections.abc import Iterator
from contextlib import contextmanager

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


class RWLock:
    """Many readers or one writer; the first reader in locks writers out."""

    def __init__(self) -> None:
        self._readers = 0
        self._lock = threading.Semaphore(1)
        self._writelock = threading.BoundedSemaphore(1)

    @property
    def readers(self) -> int:
        with self._lock:
            return self._readers

    def acquire_readlock(self) -> None:
        """Enter as a reader, blocking writers while any reader is inside."""
        with self._lock:
            self._readers += 1
            if self._readers == 1:
                self._writelock.acquire()

    def release_readlock(self) -> None:
        """Leave as a reader; the last one out lets writers in."""
        with self._lock:
            if self._readers == 0:
                raise RuntimeError("release of a read lock that is not held")
            self._readers -= 1
            if self._readers == 0:
                self._writelock.release()

    def acquire_writelock(self) -> None:
        """Enter as the sole writer."""
        self._writelock.acquire()

    def release_writelock(self) -> None:
        """Leave as the writer; raises ValueError if the lock is not held."""
        self._writelock.release()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_readlock()
        try:
            yield
        finally:
            self.release_readlock()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_writelock()
        try:
            yield
        finally:
            self.release_writelock()


def run_reader_writer(read_loops: int, write_loops: int) -> tuple[list[int], int]:
    """One reader and one writer share a counter.

    Returns the values the reader saw, in order, and the final counter.
    """
    lock = RWLock()
    state = types.SimpleNamespace(counter=0)
    seen: list[int] = []

    def reader() -> None:
        local = 0
        for _ in range(read_loops):
            with lock.read_locked():
                local = state.counter
            seen.append(local)
            print(f"read {local}")
        print(f"read done: {local}")

    def writer() -> None:
        for _ in range(write_loops):
            with lock.write_locked():
                state.counter += 1
        print("write done")

    threads = [threading.Thread(target=reader), threading.Thread(target=writer)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return seen, state.counter


def main(argv=None) -> int:
    """Run a reader and a writer for the given numbers of loops."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("usage: rwlock readloops writeloops", file=sys.stderr)
        return 1
    run_reader_writer(_atoi(args[0]), _atoi(args[1]))
    print("all done")
    return 0