import pytest

from osdemos.sema import binary_counter, main, sema_join, throttle


def test_binary_counter_loses_no_updates():
    assert binary_counter(20000) == 40000


def test_binary_counter_zero_loops():
    assert binary_counter(0) == 0


def test_sema_join_waits_for_child(capsys):
    elapsed = sema_join(0.1)
    assert elapsed >= 0.09
    assert capsys.readouterr().out.splitlines() == ["parent: begin", "child", "parent: end"]


@pytest.mark.parametrize("sem_value", [1, 2, 3])
def test_throttle_never_exceeds_semaphore_value(sem_value):
    peak = throttle(6, sem_value, 0.05)
    assert 1 <= peak <= sem_value


def test_throttle_with_one_slot_is_serial():
    assert throttle(4, 1, 0.01) == 1


def test_throttle_prints_each_child(capsys):
    throttle(3, 2, 0.01)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "parent: begin"
    assert lines[-1] == "parent: end"
    assert sorted(lines[1:-1]) == ["child 0", "child 1", "child 2"]


def test_main_throttle(capsys):
    assert main(["throttle", "2", "1"]) == 0
    assert "parent: end" in capsys.readouterr().out


def test_main_rejects_unknown_command():
    assert main(["nope"]) == 1


def test_main_rejects_missing_throttle_arguments():
    assert main(["throttle", "2"]) == 1