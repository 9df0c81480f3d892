"""Producer/consumer over a bounded buffer, with condition variables or semaphores."""

import re
import sys
import threading
from collections.abc import Callable
from enum import Enum

CMAX = 10
END_OF_PRODUCTION = -1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


class Variant(str, Enum):
    """How producers and consumers synchronise."""

    TWO_CV = "cv"
    SINGLE_CV = "single_cv"
    SEMAPHORE = "semaphore"


class BoundedBuffer:
    """A fixed-capacity ring buffer of integers; not synchronised by itself."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"buffer capacity must be at least 1, not {capacity}")
        self.capacity = capacity
        self._slots = [0] * capacity
        self._fill_ptr = 0
        self._use_ptr = 0
        self._count = 0

    def __len__(self) -> int:
        return self._count

    @property
    def full(self) -> bool:
        return self._count == self.capacity

    @property
    def empty(self) -> bool:
        return self._count == 0

    def fill(self, value: int) -> None:
        """Store ``value`` in the next free slot."""
        if self.full:
            raise IndexError("fill into a full buffer")
        self._slots[self._fill_ptr] = value
        self._fill_ptr = (self._fill_ptr + 1) % self.capacity
        self._count += 1

    def get(self) -> int:
        """Remove and return the oldest value."""
        if self.empty:
            raise IndexError("get from an empty buffer")
        value = self._slots[self._use_ptr]
        self._use_ptr = (self._use_ptr + 1) % self.capacity
        self._count -= 1
        return value


def _channel(
    buf: BoundedBuffer, variant: Variant
) -> tuple[Callable[[int], None], Callable[[], int]]:
    """Build blocking put/take operations on ``buf`` for the chosen variant."""
    if variant is Variant.SEMAPHORE:
        empty_slots = threading.Semaphore(buf.capacity)
        full_slots = threading.Semaphore(0)
        mutex = threading.Lock()

        def put(value: int) -> None:
            empty_slots.acquire()
            with mutex:
                buf.fill(value)
            full_slots.release()

        def take() -> int:
            full_slots.acquire()
            with mutex:
                value = buf.get()
            empty_slots.release()
            return value

        return put, take

    lock = threading.Lock()
    empty_cv = threading.Condition(lock)
    fill_cv = empty_cv if variant is Variant.SINGLE_CV else threading.Condition(lock)

    def put(value: int) -> None:
        with lock:
            while buf.full:
                empty_cv.wait()
            buf.fill(value)
            fill_cv.notify()

    def take() -> int:
        with lock:
            while buf.empty:
                fill_cv.wait()
            value = buf.get()
            empty_cv.notify()
            return value

    return put, take


def produce_consume(
    buffer_size: int,
    loops: int,
    consumers: int = 1,
    variant: Variant | str = Variant.TWO_CV,
) -> list[list[int]]:
    """Produce ``0..loops-1`` then one end marker per consumer.

    Returns, for each consumer, the values it received in order, ending with
    the end marker.
    """
    variant = Variant(variant)
    if variant is Variant.SEMAPHORE and consumers > CMAX:
        raise ValueError(f"at most {CMAX} consumers, not {consumers}")
    buf = BoundedBuffer(buffer_size)
    put, take = _channel(buf, variant)
    received: list[list[int]] = [[] for _ in range(consumers)]

    def producer() -> None:
        for value in range(loops):
            put(value)
        for _ in range(consumers):
            put(END_OF_PRODUCTION)

    def consumer(ident: int, values: list[int]) -> None:
        value = 0
        while value != END_OF_PRODUCTION:
            value = take()
            values.append(value)
            if variant is Variant.SEMAPHORE:
                print(f"{ident} {value}")

    threads = [threading.Thread(target=producer)]
    threads += [
        threading.Thread(target=consumer, args=(ident, values))
        for ident, values in enumerate(received)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return received


def main(argv=None) -> int:
    """Run a producer and consumers over a bounded buffer."""
    args = sys.argv[1:] if argv is None else list(argv)
    choices = "|".join(v.value for v in Variant)
    usage = f"usage: pc <buffersize> <loops> <consumers> [{choices}]"
    if len(args) not in (3, 4):
        print(usage, file=sys.stderr)
        return 1
    try:
        variant = Variant(args[3]) if len(args) == 4 else Variant.TWO_CV
        produce_consume(_atoi(args[0]), _atoi(args[1]), _atoi(args[2]), variant)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        print(usage, file=sys.stderr)
        return 1
    return 0