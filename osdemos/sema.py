"""Semaphores as locks, as a join, and as a throttle."""

import re
import sys
import threading
import time
import types

BINARY_LOOPS = 10_000_000

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def binary_counter(loops: int = BINARY_LOOPS) -> int:
    """Two threads each increment a counter ``loops`` times under a binary semaphore."""
    mutex = threading.Semaphore(1)
    state = types.SimpleNamespace(counter=0)

    def child() -> None:
        for _ in range(loops):
            with mutex:
                state.counter += 1

    threads = [threading.Thread(target=child) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return state.counter


def sema_join(delay: float = 2.0) -> float:
    """Parent waits on a semaphore the child posts when done; returns seconds waited."""
    sem = threading.Semaphore(0)

    def child() -> None:
        time.sleep(delay)
        print("child")
        sem.release()

    print("parent: begin")
    start = time.monotonic()
    thread = threading.Thread(target=child)
    thread.start()
    sem.acquire()
    elapsed = time.monotonic() - start
    print("parent: end")
    thread.join()
    return elapsed


def throttle(num_threads: int, sem_value: int, hold: float = 1.0) -> int:
    """Let at most ``sem_value`` of ``num_threads`` threads hold the semaphore at once.

    Each thread holds it for ``hold`` seconds. Returns the most threads seen
    holding it at the same time.
    """
    sem = threading.Semaphore(sem_value)
    tally = threading.Lock()
    state = types.SimpleNamespace(active=0, peak=0)

    def child(ident: int) -> None:
        with sem:
            with tally:
                state.active += 1
                state.peak = max(state.peak, state.active)
            print(f"child {ident}")
            time.sleep(hold)
            with tally:
                state.active -= 1

    print("parent: begin")
    threads = [threading.Thread(target=child, args=(i,)) for i in range(num_threads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    print("parent: end")
    return state.peak


def main(argv=None) -> int:
    """Run ``binary``, ``join`` or ``throttle <num_threads> <sem_value>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    command, rest = (args[0], args[1:]) if args else ("", [])
    if command == "binary" and not rest:
        result = binary_counter()
        print(f"result: {result} (should be {2 * BINARY_LOOPS})")
    elif command == "join" and not rest:
        sema_join()
    elif command == "throttle" and len(rest) == 2:
        throttle(_atoi(rest[0]), _atoi(rest[1]))
    else:
        print(
            "usage: sema binary | sema join | sema throttle <num_threads> <sem_value>",
            file=sys.stderr,
        )
        return 1
    return 0