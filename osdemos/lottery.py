"""Lottery scheduling: pick a winning job proportionally to its tickets."""

import random
import re
import sys
from collections import deque
from collections.abc import Iterable, Iterator

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


class Lottery:
    """Jobs holding tickets; the most recently inserted job comes first."""

    def __init__(self, tickets: Iterable[int] = ()) -> None:
        self._jobs: deque[int] = deque()
        self.total = 0
        for count in tickets:
            self.insert(count)

    def __iter__(self) -> Iterator[int]:
        return iter(self._jobs)

    def __len__(self) -> int:
        return len(self._jobs)

    def insert(self, tickets: int) -> None:
        """Add a job with ``tickets`` tickets at the front of the list."""
        self._jobs.appendleft(tickets)
        self.total += tickets

    def pick(self, winner: int) -> int:
        """Return the ticket count of the job holding ticket number ``winner``."""
        counter = 0
        for tickets in self._jobs:
            counter += tickets
            if counter > winner:
                return tickets
        raise ValueError(f"no job holds ticket {winner} (total {self.total})")

    def format_list(self) -> str:
        """Render the job list as ``List: [a] [b] ...``."""
        return "List: " + "".join(f"[{tickets}] " for tickets in self._jobs)

    def run(self, rng: random.Random, loops: int) -> Iterator[tuple[int, int]]:
        """Draw ``loops`` winners, yielding (winning ticket, job's tickets)."""
        for _ in range(loops):
            winner = rng.randrange(self.total)
            yield winner, self.pick(winner)


def main(argv=None) -> int:
    """Run a seeded lottery over three jobs."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("usage: lottery <seed> <loops>", file=sys.stderr)
        return 1
    seed = _atoi(args[0])
    loops = _atoi(args[1])
    rng = random.Random(seed)

    lottery = Lottery((50, 100, 25))
    print(lottery.format_list())
    for winner, tickets in lottery.run(rng, loops):
        print(lottery.format_list())
        print(f"winner: {winner} {tickets}\n")
    return 0