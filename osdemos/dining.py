"""Dining philosophers with semaphores as forks, with and without deadlock."""

import re
import sys
import threading

PHILOSOPHERS = 5

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def left(p: int) -> int:
    """The fork on philosopher ``p``'s left."""
    return p % PHILOSOPHERS


def right(p: int) -> int:
    """The fork on philosopher ``p``'s right."""
    return (p + 1) % PHILOSOPHERS


class Table:
    """Five forks; ``ordered`` makes the last philosopher reach right first."""

    def __init__(self, ordered: bool = True, verbose: bool = False) -> None:
        self.ordered = ordered
        self.verbose = verbose
        self.forks = tuple(threading.BoundedSemaphore(1) for _ in range(PHILOSOPHERS))
        self._print_lock = threading.Semaphore(1)

    def say(self, p: int, text: str) -> None:
        """Print ``text`` indented by philosopher, when verbose."""
        if self.verbose:
            with self._print_lock:
                print(" " * (p * 10) + text)

    def _take(self, p: int, fork: int) -> None:
        if not self.ordered:
            self.say(p, f"{p}: try {fork}")
        elif p == PHILOSOPHERS - 1:
            self.say(p, f"{p} try {fork}")
        else:
            self.say(p, f"try {fork}")
        self.forks[fork].acquire()

    def get_forks(self, p: int) -> None:
        """Pick up both forks of philosopher ``p``."""
        if self.ordered and p == PHILOSOPHERS - 1:
            order = (right(p), left(p))
        else:
            order = (left(p), right(p))
        for fork in order:
            self._take(p, fork)

    def put_forks(self, p: int) -> None:
        """Put down both forks of philosopher ``p``; ValueError if not held."""
        self.forks[left(p)].release()
        self.forks[right(p)].release()


def dine(num_loops: int, ordered: bool = True, verbose: bool = False) -> list[int]:
    """Let each philosopher eat ``num_loops`` times; returns meals eaten by each.

    With ``ordered`` False every philosopher takes the left fork first, which
    can deadlock.
    """
    table = Table(ordered, verbose)
    meals = [0] * PHILOSOPHERS

    def philosopher(p: int) -> None:
        table.say(p, f"{p}: start")
        for _ in range(num_loops):
            table.say(p, f"{p}: think")
            table.get_forks(p)
            table.say(p, f"{p}: eat")
            meals[p] += 1
            table.put_forks(p)
            table.say(p, f"{p}: done")

    threads = [threading.Thread(target=philosopher, args=(p,)) for p in range(PHILOSOPHERS)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return meals


def main(argv=None) -> int:
    """Run the philosophers: ``<num_loops> [--deadlock] [--print]``."""
    args = sys.argv[1:] if argv is None else list(argv)
    flags = set(args[1:])
    if not args or len(flags) != len(args) - 1 or not flags <= {"--deadlock", "--print"}:
        print("usage: dining_philosophers <num_loops> [--deadlock] [--print]", file=sys.stderr)
        return 1
    print("dining: started")
    dine(_atoi(args[0]), ordered="--deadlock" not in flags, verbose="--print" in flags)
    print("dining: finished")
    return 0