import threading

from osdemos.cvjoin import (
    Synchronizer,
    join_modular,
    join_no_lock,
    join_no_state_var,
    join_spin,
    join_with_cv,
    main,
)

JOIN_LINES = ["parent: begin", "child", "parent: end"]


def test_synchronizer_signal_then_wait_resets():
    sync = Synchronizer()
    sync.signal()
    assert sync.done is True
    sync.wait()
    assert sync.done is False


def test_synchronizer_wakes_waiting_thread():
    sync = Synchronizer()
    woke = []

    def waiter():
        sync.wait()
        woke.append(True)

    thread = threading.Thread(target=waiter)
    thread.start()
    sync.signal()
    thread.join(timeout=5)
    assert woke == [True]
    assert sync.done is False


def test_join_with_cv(capsys):
    elapsed = join_with_cv(0.1)
    assert elapsed >= 0.1
    assert capsys.readouterr().out.splitlines() == JOIN_LINES


def test_join_modular(capsys):
    elapsed = join_modular(0.1)
    assert elapsed >= 0.1
    assert capsys.readouterr().out.splitlines() == JOIN_LINES


def test_join_spin(capsys):
    elapsed = join_spin(0.1)
    assert elapsed >= 0.1
    assert capsys.readouterr().out.splitlines() == JOIN_LINES


def test_join_no_lock_loses_signal(capsys):
    assert join_no_lock(0.05, 0.3, timeout=0.3) is False
    assert "parent: end" not in capsys.readouterr().out


def test_join_no_lock_signal_arrives_while_waiting(capsys):
    assert join_no_lock(0.3, 0.0, timeout=5) is True
    assert capsys.readouterr().out.splitlines()[-1] == "parent: end"


def test_join_no_state_var_loses_early_signal(capsys):
    assert join_no_state_var(0.2, timeout=0.2) is False
    out = capsys.readouterr().out
    assert out.index("child: signal") < out.index("parent: wait to be signalled...")


def test_main_usage(capsys):
    assert main(["unknown"]) == 1
    assert "usage: cvjoin" in capsys.readouterr().err