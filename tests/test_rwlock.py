import threading

import pytest

from osdemos.rwlock import RWLock, main, run_reader_writer


def test_readers_share_the_lock():
    lock = RWLock()
    lock.acquire_readlock()
    lock.acquire_readlock()
    assert lock.readers == 2
    lock.release_readlock()
    lock.release_readlock()
    assert lock.readers == 0


def test_writer_waits_for_readers():
    lock = RWLock()
    lock.acquire_readlock()
    assert lock.readers == 1
    entered = threading.Event()

    def writer():
        lock.acquire_writelock()
        entered.set()
        lock.release_writelock()

    thread = threading.Thread(target=writer)
    thread.start()
    assert not entered.wait(0.1)
    lock.release_readlock()
    assert entered.wait(2)
    thread.join()
    assert lock.readers == 0


def test_reader_waits_for_writer():
    lock = RWLock()
    lock.acquire_writelock()
    entered = threading.Event()
    seen = []

    def reader():
        with lock.read_locked():
            seen.append(lock.readers)
            entered.set()

    thread = threading.Thread(target=reader)
    thread.start()
    assert not entered.wait(0.1)
    lock.release_writelock()
    assert entered.wait(2)
    thread.join()
    assert seen == [1]
    assert lock.readers == 0


def test_release_readlock_not_held_raises():
    with pytest.raises(RuntimeError):
        RWLock().release_readlock()


def test_release_writelock_not_held_raises():
    with pytest.raises(ValueError):
        RWLock().release_writelock()


def test_run_reader_writer_invariants():
    seen, counter = run_reader_writer(50, 100)
    assert counter == 100
    assert len(seen) == 50
    assert seen == sorted(seen)
    assert all(0 <= value <= 100 for value in seen)


def test_main_prints_all_done(capsys):
    assert main(["2", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "all done"
    assert "write done" in lines


def test_main_usage():
    assert main(["1"]) == 1