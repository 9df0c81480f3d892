import os
from pathlib import Path

from osdemos.intro import (
    count_concurrently,
    cpu_main,
    increment_forever,
    io_main,
    mem_main,
    repeat_string,
    threads_main,
    va_main,
    write_hello,
)


def test_repeat_string_with_limit():
    assert list(repeat_string("hi", 3)) == ["hi", "hi", "hi"]


def test_repeat_string_zero_limit_is_empty():
    assert list(repeat_string("hi", 0)) == []


def test_repeat_string_unbounded_keeps_going():
    gen = repeat_string("x")
    assert [next(gen) for _ in range(5)] == ["x"] * 5


def test_cpu_main_usage(capsys):
    assert cpu_main([]) == 1
    assert "usage: cpu <string>" in capsys.readouterr().err


def test_cpu_main_too_many_args(capsys):
    assert cpu_main(["a", "b"]) == 1
    assert "usage: cpu" in capsys.readouterr().err


def test_write_hello_contents_and_size(tmp_path):
    target = tmp_path / "file"
    written = write_hello(str(target))
    assert target.read_bytes() == b"hello world\n"
    assert written == len(target.read_bytes())


def test_write_hello_is_owner_only(tmp_path):
    target = tmp_path / "file"
    write_hello(str(target))
    assert os.stat(target).st_mode & 0o077 == 0


def test_write_hello_truncates(tmp_path):
    target = tmp_path / "file"
    target.write_bytes(b"x" * 100)
    write_hello(str(target))
    assert target.read_bytes() == b"hello world\n"


def test_io_main_writes_tmp_file():
    assert io_main([]) == 0
    assert Path("/tmp/file").read_bytes() == b"hello world\n"


def test_increment_forever_counts_up():
    assert list(increment_forever(5, limit=3, interval=0)) == [6, 7, 8]


def test_increment_forever_negative_start():
    assert list(increment_forever(-2, limit=2, interval=0)) == [-1, 0]


def test_mem_main_usage(capsys):
    assert mem_main([]) == 1
    assert "usage: mem <value>" in capsys.readouterr().err


def test_count_concurrently_zero():
    assert count_concurrently(0) == 0


def test_count_concurrently_bounded():
    result = count_concurrently(1000)
    assert 1 <= result <= 2000


def test_threads_main_output(capsys):
    assert threads_main(["1000"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Initial value : 0"
    assert lines[1].startswith("Final value   : ")
    assert 0 <= int(lines[1].split(":")[1]) <= 2000


def test_threads_main_non_numeric_counts_zero(capsys):
    assert threads_main(["abc"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "Final value   : 0"


def test_threads_main_usage(capsys):
    assert threads_main([]) == 1
    assert "usage: threads <loops>" in capsys.readouterr().err


def test_va_main_prints_three_locations(capsys):
    assert va_main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(":")[0] for line in lines] == [
        "location of code ",
        "location of heap ",
        "location of stack",
    ]
    assert all(line.split(": ")[1].startswith("0x") for line in lines)