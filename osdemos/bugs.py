"""Classic concurrency bugs: atomicity violations, deadlock and ordering violations."""

import contextlib
import sys
import threading
import time
import types
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

PR_STATE_INIT = 0

_T2_ATOMICITY = " " * 17
_T2_DEADLOCK = " " * 27


class PrThread:
    """A started thread together with its state; errors surface on ``wait``."""

    def __init__(self, start_routine: Callable[[], object]) -> None:
        self.state = PR_STATE_INIT
        self._error: BaseException | None = None
        self._thread = threading.Thread(target=self._run, args=(start_routine,))
        self._thread.start()

    def _run(self, start_routine: Callable[[], object]) -> None:
        try:
            start_routine()
        except BaseException as exc:
            self._error = exc

    def wait(self) -> None:
        """Join the thread, re-raising anything its routine raised."""
        self._thread.join()
        if self._error is not None:
            raise self._error


def create_thread(start_routine: Callable[[], object], delay: float = 1.0) -> PrThread:
    """Start ``start_routine`` on a new thread, then pause for ``delay`` seconds."""
    thread = PrThread(start_routine)
    time.sleep(delay)
    return thread


@dataclass
class _ProcInfo:
    pid: int


@dataclass
class _ThreadInfo:
    proc_info: _ProcInfo | None


def atomicity_demo(
    fixed: bool = False, use_delay: float = 2.0, clear_delay: float = 1.0
) -> int | None:
    """One thread checks then uses a field another thread clears.

    Returns the pid the first thread used, or None if the field was already
    cleared at the check. Without the lock, clearing it between check and use
    raises RuntimeError.
    """
    info = _ThreadInfo(_ProcInfo(100))
    guard = threading.Lock() if fixed else contextlib.nullcontext()

    def thread1() -> int | None:
        print("t1: before check")
        with guard:
            if info.proc_info is not None:
                print("t1: after check")
                time.sleep(use_delay)
                print("t1: use!")
                proc = info.proc_info
                if proc is None:
                    raise RuntimeError("t1: proc_info was cleared between check and use")
                print(proc.pid)
                return proc.pid
        return None

    def thread2() -> None:
        print(f"{_T2_ATOMICITY}t2: begin")
        time.sleep(clear_delay)
        with guard:
            print(f"{_T2_ATOMICITY}t2: set to NULL")
            info.proc_info = None

    print("main: begin")
    with ThreadPoolExecutor(max_workers=2) as pool:
        first = pool.submit(thread1)
        second = pool.submit(thread2)
        pid = first.result()
        second.result()
    print("main: end")
    return pid


def deadlock_demo(timeout: float | None = None) -> bool:
    """Two threads take two locks in opposite orders.

    Returns True when a deadlock occurred. With ``timeout`` None a deadlock
    blocks forever; otherwise a thread gives up its second lock after
    ``timeout`` seconds.
    """
    lock1 = threading.Lock()
    lock2 = threading.Lock()
    wait_for = -1 if timeout is None else timeout

    def worker(prefix: str, first: threading.Lock, first_name: str,
               second: threading.Lock, second_name: str) -> bool:
        print(f"{prefix}: begin")
        print(f"{prefix}: try to acquire {first_name}...")
        first.acquire()
        try:
            print(f"{prefix}: {first_name} acquired")
            print(f"{prefix}: try to acquire {second_name}...")
            if not second.acquire(timeout=wait_for):
                return False
            print(f"{prefix}: {second_name} acquired")
            second.release()
            return True
        finally:
            first.release()

    print("main: begin")
    with ThreadPoolExecutor(max_workers=2) as pool:
        one = pool.submit(worker, "t1", lock1, "L1", lock2, "L2")
        two = pool.submit(worker, f"{_T2_DEADLOCK}t2", lock2, "L2", lock1, "L1")
        completed = one.result() and two.result()
    print("main: end")
    return not completed


def ordering_demo(fixed: bool = False, delay: float = 1.0) -> int:
    """A new thread reads a handle its creator has not stored yet.

    Returns the state the thread read. Unfixed, reading the handle before it
    is stored raises RuntimeError.
    """
    shared = types.SimpleNamespace(thread=None, initialized=False, state=None)
    cond = threading.Condition()

    def m_main() -> None:
        print("mMain: begin")
        if fixed:
            with cond:
                while not shared.initialized:
                    cond.wait()
        thread = shared.thread
        if thread is None:
            raise RuntimeError("mMain: thread handle used before it was initialised")
        shared.state = thread.state
        print(f"mMain: state is {shared.state}")

    print("ordering: begin")
    shared.thread = create_thread(m_main, delay)
    if fixed:
        with cond:
            shared.initialized = True
            cond.notify()
    shared.thread.wait()
    print("ordering: end")
    return shared.state


_DEMOS: dict[str, Callable[[], object]] = {
    "atomicity": lambda: atomicity_demo(False),
    "atomicity_fixed": lambda: atomicity_demo(True),
    "deadlock": deadlock_demo,
    "ordering": lambda: ordering_demo(False),
    "ordering_fixed": lambda: ordering_demo(True),
}


def main(argv=None) -> int:
    """Run one of the bug demos by name."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1 or args[0] not in _DEMOS:
        print(f"usage: bugs <{'|'.join(_DEMOS)}>", file=sys.stderr)
        return 1
    try:
        _DEMOS[args[0]]()
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0