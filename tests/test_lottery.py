import random

import pytest

from osdemos.lottery import Lottery, main


@pytest.fixture
def lottery():
    jobs = Lottery()
    jobs.insert(50)
    jobs.insert(100)
    jobs.insert(25)
    return jobs


def test_insert_prepends(lottery):
    assert list(lottery) == [25, 100, 50]
    assert len(lottery) == 3


def test_total_is_sum_of_tickets(lottery):
    assert lottery.total == sum(lottery)


def test_constructor_matches_inserts(lottery):
    assert list(Lottery((50, 100, 25))) == list(lottery)


def test_format_list(lottery):
    assert lottery.format_list() == "List: [25] [100] [50] "


def test_format_empty_list():
    assert Lottery().format_list() == "List: "


@pytest.mark.parametrize(
    "winner, expected",
    [(0, 25), (24, 25), (25, 100), (124, 100), (125, 50), (174, 50)],
)
def test_pick_boundaries(lottery, winner, expected):
    assert lottery.pick(winner) == expected


def test_pick_out_of_range(lottery):
    with pytest.raises(ValueError):
        lottery.pick(lottery.total)


def test_run_winners_are_consistent(lottery):
    draws = list(lottery.run(random.Random(7), 50))
    assert len(draws) == 50
    for winner, tickets in draws:
        assert 0 <= winner < lottery.total
        assert lottery.pick(winner) == tickets


def test_run_is_deterministic_for_seed(lottery):
    first = list(lottery.run(random.Random(3), 20))
    second = list(lottery.run(random.Random(3), 20))
    assert first == second


def test_run_zero_loops(lottery):
    assert list(lottery.run(random.Random(0), 0)) == []


def test_run_without_tickets_fails():
    with pytest.raises(ValueError):
        list(Lottery().run(random.Random(0), 1))


def test_main_output(capsys):
    assert main(["1", "4"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("List: [25] [100] [50] \n")
    assert out.count("winner: ") == 4


def test_main_usage(capsys):
    assert main(["1"]) == 1
    assert "usage: lottery <seed> <loops>" in capsys.readouterr().err