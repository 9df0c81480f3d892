"""Process creation demos: fork, wait, exec and output redirection."""

import os
import sys
import time
from collections.abc import Callable
from typing import NoReturn


def _fork() -> int:
    sys.stdout.flush()
    sys.stderr.flush()
    return os.fork()


def _run_child(body: Callable[[], None]) -> NoReturn:
    """Run ``body`` in a forked child and leave the process without unwinding."""
    code = 0
    try:
        body()
    except BaseException:
        code = 1
    try:
        sys.stdout.flush()
        sys.stderr.flush()
    finally:
        os._exit(code)


def fork_hello() -> int:
    """Fork once; the child and parent each say hello. Returns the child's pid."""
    print(f"hello world (pid:{os.getpid()})", flush=True)
    rc = _fork()
    if rc == 0:

        def body() -> None:
            print(f"hello, I am child (pid:{os.getpid()})", flush=True)

        _run_child(body)
    print(f"hello, I am parent of {rc} (pid:{os.getpid()})")
    return rc


def fork_wait() -> tuple[int, int]:
    """Fork, let the child sleep, and wait for it. Returns (child pid, waited pid)."""
    print(f"hello world (pid:{os.getpid()})", flush=True)
    rc = _fork()
    if rc == 0:

        def body() -> None:
            print(f"hello, I am child (pid:{os.getpid()})", flush=True)
            time.sleep(1)

        _run_child(body)
    wc, _ = os.wait()
    print(f"hello, I am parent of {rc} (wc:{wc}) (pid:{os.getpid()})")
    return rc, wc


def fork_exec(path: str = "p3.c") -> tuple[int, int]:
    """Fork and run ``wc`` on ``path`` in the child. Returns (child pid, waited pid)."""
    print(f"hello world (pid:{os.getpid()})", flush=True)
    rc = _fork()
    if rc == 0:

        def body() -> None:
            print(f"hello, I am child (pid:{os.getpid()})", flush=True)
            try:
                os.execvp("wc", ["wc", path])
            except OSError:
                print("this shouldn't print out", end="")

        _run_child(body)
    wc, _ = os.wait()
    print(f"hello, I am parent of {rc} (wc:{wc}) (pid:{os.getpid()})")
    return rc, wc


def fork_redirect(path: str = "p4.c", output: str = "./p4.output") -> int:
    """Fork, send the child's standard output to ``output`` and run ``wc`` on ``path``."""
    rc = _fork()
    if rc == 0:

        def body() -> None:
            sys.stdout.flush()
            fd = os.open(output, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o700)
            if fd != 1:
                os.dup2(fd, 1)
                os.close(fd)
            try:
                os.execvp("wc", ["wc", path])
            except OSError:
                pass

        _run_child(body)
    wc, _ = os.wait()
    return wc


_DEMOS: dict[str, Callable[[], object]] = {
    "p1": fork_hello,
    "p2": fork_wait,
    "p3": fork_exec,
    "p4": fork_redirect,
}


def main(argv=None) -> int:
    """Run one of the demos by name."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1 or args[0] not in _DEMOS:
        print("usage: process <p1|p2|p3|p4>", file=sys.stderr)
        return 1
    try:
        _DEMOS[args[0]]()
    except OSError:
        print("fork failed", file=sys.stderr)
        return 1
    return 0