"""Compare-and-swap on a shared integer."""

import sys
import threading


class AtomicInt:
    """An integer whose compare-and-swap happens atomically."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def compare_and_swap(self, old: int, new: int) -> bool:
        """Set the value to ``new`` if it equals ``old``; report whether it did."""
        with self._lock:
            if self._value != old:
                return False
            self._value = new
            return True


def main(argv=None) -> int:
    """Show one successful and one failing compare-and-swap."""
    shared = AtomicInt(0)
    print(f"before successful cas: {shared.value}")
    success = shared.compare_and_swap(0, 100)
    print(f"after successful cas: {shared.value} (success: {int(success)})")

    print(f"before failing cas: {shared.value}")
    success = shared.compare_and_swap(0, 200)
    print(f"after failing cas: {shared.value} (old: {int(success)})")
    return 0