"""Thread creation demos: passing arguments, returning values, sharing a counter."""

import re
import sys
import threading
import types
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

_T = TypeVar("_T")

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _args(argv):
    return sys.argv[1:] if argv is None else list(argv)


def _start_and_join(routine: Callable[..., _T], *args) -> _T:
    """Run ``routine`` on a new thread, wait for it and hand back its result."""
    with ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(routine, *args).result()


def run_with_args(a: int = 10, b: int = 20) -> None:
    """Hand two values to a thread that prints them, then wait for it."""

    def mythread(first: int, second: int) -> None:
        print(f"{first} {second}")

    _start_and_join(mythread, a, b)
    print("done")


def run_simple(value: int = 100) -> int:
    """Pass one value to a thread, which prints it and returns it plus one."""

    def mythread(arg: int) -> int:
        print(arg)
        return arg + 1

    returned = _start_and_join(mythread, value)
    print(f"returned {returned}")
    return returned


def run_with_return(a: int = 10, b: int = 20) -> tuple[int, int]:
    """Pass two values to a thread and collect the pair it builds and returns."""

    def mythread(first: int, second: int) -> tuple[int, int]:
        print(f"args {first} {second}")
        return 1, 2

    x, y = _start_and_join(mythread, a, b)
    print(f"returned {x} {y}")
    return x, y


def t0_main(argv=None) -> int:
    """Start two threads that print ``A`` and ``B`` and wait for both."""
    if _args(argv):
        print("usage: main", file=sys.stderr)
        return 1

    def mythread(text: str) -> None:
        print(text)

    print("main: begin")
    threads = [threading.Thread(target=mythread, args=(name,)) for name in ("A", "B")]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    print("main: end")
    return 0


def _run_counters(state: types.SimpleNamespace, loops: int) -> int:
    def mythread(letter: str) -> None:
        marker = object()
        print(f"{letter}: begin [addr of i: {id(marker):#x}]")
        for _ in range(loops):
            state.counter = state.counter + 1
        print(f"{letter}: done")

    threads = [threading.Thread(target=mythread, args=(name,)) for name in ("A", "B")]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return state.counter


def shared_count(loops: int) -> int:
    """Two threads each add one to a shared counter ``loops`` times, unlocked."""
    return _run_counters(types.SimpleNamespace(counter=0), loops)


def t1_main(argv=None) -> int:
    """Show the shared counter and what it should have reached."""
    args = _args(argv)
    if len(args) != 1:
        print("usage: main-first <loopcount>", file=sys.stderr)
        return 1
    loops = _atoi(args[0])
    state = types.SimpleNamespace(counter=0)
    print(f"main: begin [counter = {state.counter}] [{id(state):x}]")
    counter = _run_counters(state, loops)
    print(f"main: done\n [counter: {counter}]\n [should: {loops * 2}]")
    return 0