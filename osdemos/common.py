"""Timing helpers shared by the demos."""

import time


def get_time() -> float:
    """Return the current wall-clock time in seconds."""
    return time.time()


def spin(howlong: float) -> None:
    """Busy-wait, without sleeping, for ``howlong`` seconds."""
    start = get_time()
    while get_time() - start < howlong:
        pass