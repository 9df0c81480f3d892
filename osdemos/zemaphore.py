"""A counting semaphore built from a lock and a condition variable."""

import threading
import time


class Zemaphore:
    """Counting semaphore; ``wait`` blocks while the value is not positive."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._cond = threading.Condition(threading.Lock())

    @property
    def value(self) -> int:
        with self._cond:
            return self._value

    def wait(self) -> None:
        """Block until the value is positive, then decrement it."""
        with self._cond:
            while self._value <= 0:
                self._cond.wait()
            self._value -= 1

    def post(self) -> None:
        """Increment the value and wake one waiter."""
        with self._cond:
            self._value += 1
            self._cond.notify()

    def __enter__(self) -> "Zemaphore":
        self.wait()
        return self

    def __exit__(self, *exc_info) -> None:
        self.post()


def main(argv=None) -> int:
    """Parent waits on a semaphore that a child thread posts after four seconds."""
    sem = Zemaphore(0)
    print("parent: begin")

    def child() -> None:
        time.sleep(4)
        print("child")
        sem.post()

    thread = threading.Thread(target=child)
    thread.start()
    sem.wait()
    print("parent: end")
    thread.join()
    return 0