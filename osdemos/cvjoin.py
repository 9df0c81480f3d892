"""Joining a child thread with condition variables, and the ways it goes wrong."""

import sys
import threading
import time
import types
from collections.abc import Callable


class Synchronizer:
    """A one-shot signal: ``wait`` blocks until ``signal``, then re-arms."""

    def __init__(self) -> None:
        self._done = False
        self._cond = threading.Condition(threading.Lock())

    @property
    def done(self) -> bool:
        with self._cond:
            return self._done

    def signal(self) -> None:
        """Mark done and wake one waiter."""
        with self._cond:
            self._done = True
            self._cond.notify()

    def wait(self) -> None:
        """Block until signalled, then reset for the next use."""
        with self._cond:
            while not self._done:
                self._cond.wait()
            self._done = False


def join_with_cv(delay: float = 1.0) -> float:
    """Parent waits on a done flag guarded by a condition variable; returns seconds waited."""
    state = types.SimpleNamespace(done=False)
    cond = threading.Condition()

    def child() -> None:
        print("child")
        time.sleep(delay)
        with cond:
            state.done = True
            cond.notify()

    print("parent: begin")
    start = time.monotonic()
    thread = threading.Thread(target=child)
    thread.start()
    with cond:
        while not state.done:
            cond.wait()
    elapsed = time.monotonic() - start
    print("parent: end")
    thread.join()
    return elapsed


def join_modular(delay: float = 1.0) -> float:
    """The same join through a Synchronizer; returns seconds waited."""
    sync = Synchronizer()

    def child() -> None:
        print("child")
        time.sleep(delay)
        sync.signal()

    print("parent: begin")
    start = time.monotonic()
    thread = threading.Thread(target=child)
    thread.start()
    sync.wait()
    elapsed = time.monotonic() - start
    print("parent: end")
    thread.join()
    return elapsed


def join_no_lock(
    child_delay: float = 1.0, parent_delay: float = 2.0, timeout: float | None = None
) -> bool:
    """The child sets the flag and signals without the parent's lock.

    Returns True if the parent was woken by the signal, False if the signal
    was lost and the wait timed out. With ``timeout`` None a lost signal
    blocks forever.
    """
    state = types.SimpleNamespace(done=False)
    mutex = threading.Lock()
    cond = threading.Condition()

    def child() -> None:
        print("child: begin")
        time.sleep(child_delay)
        state.done = True
        print("child: signal")
        with cond:
            cond.notify()

    print("parent: begin")
    thread = threading.Thread(target=child)
    thread.start()
    signalled = True
    with mutex:
        print("parent: check condition")
        while not state.done:
            time.sleep(parent_delay)
            print("parent: wait to be signalled...")
            with cond:
                mutex.release()
                try:
                    woke = cond.wait(timeout)
                finally:
                    mutex.acquire()
            if not woke:
                signalled = False
                break
    print("parent: end" if signalled else "parent: signal was lost")
    thread.join()
    return signalled


def join_no_state_var(parent_delay: float = 2.0, timeout: float | None = None) -> bool:
    """The parent waits with no flag to check.

    Returns True if the signal arrived while waiting, False if it came before
    and the wait timed out. With ``timeout`` None that blocks forever.
    """
    cond = threading.Condition()

    def child() -> None:
        print("child: begin")
        with cond:
            print("child: signal")
            cond.notify()

    print("parent: begin")
    thread = threading.Thread(target=child)
    thread.start()
    time.sleep(parent_delay)
    print("parent: wait to be signalled...")
    with cond:
        woke = cond.wait(timeout)
    print("parent: end" if woke else "parent: signal was lost")
    thread.join()
    return woke


def join_spin(delay: float = 5.0) -> float:
    """Parent busy-waits on a flag the child sets; returns seconds spent spinning."""
    state = types.SimpleNamespace(done=False)

    def child() -> None:
        print("child")
        time.sleep(delay)
        state.done = True

    print("parent: begin")
    start = time.monotonic()
    thread = threading.Thread(target=child)
    thread.start()
    while not state.done:
        pass
    elapsed = time.monotonic() - start
    print("parent: end")
    thread.join()
    return elapsed


_DEMOS: dict[str, Callable[[], object]] = {
    "join": join_with_cv,
    "join_modular": join_modular,
    "join_no_lock": join_no_lock,
    "join_no_state_var": join_no_state_var,
    "join_spin": join_spin,
}


def main(argv=None) -> int:
    """Run one of the join demos by name."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1 or args[0] not in _DEMOS:
        print(f"usage: cvjoin <{'|'.join(_DEMOS)}>", file=sys.stderr)
        return 1
    _DEMOS[args[0]]()
    return 0