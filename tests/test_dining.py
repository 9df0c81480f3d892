import pytest

from osdemos.dining import PHILOSOPHERS, Table, dine, left, main, right


def test_forks_around_the_table():
    assert [left(p) for p in range(PHILOSOPHERS)] == list(range(PHILOSOPHERS))
    assert [right(p) for p in range(PHILOSOPHERS)] == [1, 2, 3, 4, 0]


def test_get_forks_holds_both_forks():
    table = Table()
    table.get_forks(1)
    assert not table.forks[1].acquire(blocking=False)
    assert not table.forks[2].acquire(blocking=False)
    assert table.forks[0].acquire(blocking=False)
    table.forks[0].release()
    table.put_forks(1)
    assert all(fork.acquire(blocking=False) for fork in table.forks)


def test_put_forks_not_held_raises():
    with pytest.raises(ValueError):
        Table().put_forks(0)


def test_ordered_last_philosopher_reaches_right_first(capsys):
    table = Table(ordered=True, verbose=True)
    table.get_forks(4)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [" " * 40 + "4 try 0", " " * 40 + "4 try 4"]
    table.put_forks(4)


def test_unordered_philosopher_reaches_left_first(capsys):
    table = Table(ordered=False, verbose=True)
    table.get_forks(4)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [" " * 40 + "4: try 4", " " * 40 + "4: try 0"]
    table.put_forks(4)


def test_ordered_non_last_philosopher_message(capsys):
    table = Table(ordered=True, verbose=True)
    table.get_forks(0)
    assert capsys.readouterr().out.splitlines() == ["try 0", "try 1"]


def test_quiet_table_prints_nothing(capsys):
    table = Table(verbose=False)
    table.get_forks(2)
    table.put_forks(2)
    assert capsys.readouterr().out == ""


def test_dine_ordered_every_philosopher_eats():
    assert dine(50, ordered=True) == [50] * PHILOSOPHERS


def test_dine_verbose_reports_each_meal(capsys):
    dine(2, ordered=True, verbose=True)
    lines = [line.strip() for line in capsys.readouterr().out.splitlines()]
    for p in range(PHILOSOPHERS):
        assert lines.count(f"{p}: eat") == 2
        assert lines.count(f"{p}: start") == 1


def test_main_runs(capsys):
    assert main(["3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["dining: started", "dining: finished"]


def test_main_usage():
    assert main([]) == 1
    assert main(["3", "--bogus"]) == 1