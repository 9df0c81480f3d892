"""Introductory demos: CPU virtualisation, file I/O, memory, threads, address space."""

import itertools
import os
import re
import sys
import threading
import types
from collections.abc import Iterator

from osdemos.common import spin

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way, yielding 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _args(argv):
    return sys.argv[1:] if argv is None else list(argv)


def repeat_string(text: str, limit: int | None = None) -> Iterator[str]:
    """Yield ``text`` repeatedly, forever or ``limit`` times."""
    steps = itertools.count() if limit is None else range(limit)
    for _ in steps:
        yield text


def cpu_main(argv=None) -> int:
    """Print the given string over and over."""
    args = _args(argv)
    if len(args) != 1:
        print("usage: cpu <string>", file=sys.stderr)
        return 1
    for line in repeat_string(args[0]):
        print(line)
    return 0


def write_hello(path: str = "/tmp/file") -> int:
    """Write ``hello world`` to ``path``, force it to disk and return the byte count."""
    data = b"hello world\n"
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    try:
        written = os.write(fd, data)
        if written != len(data):
            raise OSError(f"short write to {path}: {written} of {len(data)} bytes")
        os.fsync(fd)
    finally:
        os.close(fd)
    return written


def io_main(argv=None) -> int:
    """Write the greeting to /tmp/file."""
    write_hello()
    return 0


def increment_forever(
    value: int, limit: int | None = None, interval: float = 1.0
) -> Iterator[int]:
    """Spin for ``interval`` seconds, then yield the incremented value; repeat."""
    steps = itertools.count() if limit is None else range(limit)
    for _ in steps:
        spin(interval)
        value += 1
        yield value


def mem_main(argv=None) -> int:
    """Keep incrementing a heap value once a second, showing its address."""
    args = _args(argv)
    if len(args) != 1:
        print("usage: mem <value>", file=sys.stderr)
        return 1
    cell = [_atoi(args[0])]
    pid = os.getpid()
    print(f"({pid}) addr pointed to by p: {id(cell):#x}")
    for value in increment_forever(cell[0]):
        cell[0] = value
        print(f"({pid}) value of p: {value}")
    return 0


def count_concurrently(loops: int) -> int:
    """Let two threads bump a shared counter ``loops`` times each, unsynchronised."""
    state = types.SimpleNamespace(counter=0)

    def worker() -> None:
        for _ in range(loops):
            state.counter = state.counter + 1

    workers = [threading.Thread(target=worker) for _ in range(2)]
    for thread in workers:
        thread.start()
    for thread in workers:
        thread.join()
    return state.counter


def threads_main(argv=None) -> int:
    """Show how unsynchronised updates from two threads can be lost."""
    args = _args(argv)
    if len(args) != 1:
        print("usage: threads <loops>", file=sys.stderr)
        return 1
    loops = _atoi(args[0])
    print("Initial value : 0")
    print(f"Final value   : {count_concurrently(loops)}")
    return 0


def va_main(argv=None) -> int:
    """Print where code, heap and stack objects live."""
    heap = bytes(100_000_000)
    local = [3]
    print(f"location of code : {id(va_main):#x}")
    print(f"location of heap : {id(heap):#x}")
    print(f"location of stack: {id(local):#x}")
    return 0