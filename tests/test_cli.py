import pytest

from aoc2024 import q01, q09, q11
from aoc2024.cli import main

Q01_TEXT = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def _write(root, day, text):
    folder = root / day
    folder.mkdir(parents=True)
    (folder / "main.txt").write_text(text)


def test_default_part_is_one(tmp_path, capsys):
    _write(tmp_path, "q01", Q01_TEXT)
    assert main(["--inputs", str(tmp_path), "q01"]) == 0
    assert capsys.readouterr().out == f"Part 1 answer: {q01.part1(Q01_TEXT)}\n"


def test_part_two(tmp_path, capsys):
    _write(tmp_path, "q01", Q01_TEXT)
    assert main(["--inputs", str(tmp_path), "q01", "--part", "2"]) == 0
    assert capsys.readouterr().out == f"Part 2 answer: {q01.part2(Q01_TEXT)}\n"


def test_any_other_part_runs_part_two(tmp_path, capsys):
    _write(tmp_path, "q01", Q01_TEXT)
    assert main(["--inputs", str(tmp_path), "q01", "--part", "7"]) == 0
    assert capsys.readouterr().out.startswith("Part 2 answer: ")


def test_inputs_from_environment(tmp_path, capsys, monkeypatch):
    _write(tmp_path, "q01", Q01_TEXT)
    monkeypatch.setenv("AOC2024_INPUTS", str(tmp_path))
    assert main(["q01"]) == 0
    assert capsys.readouterr().out == f"Part 1 answer: {q01.part1(Q01_TEXT)}\n"


def test_q09_part1_prints_bare_number(tmp_path, capsys):
    text = "2333133121414131402\n"
    _write(tmp_path, "q09", text)
    assert main(["--inputs", str(tmp_path), "q09"]) == 0
    assert capsys.readouterr().out == f"{q09.part1(text)}\n"


def test_q11_part2_label(tmp_path, capsys):
    text = "125 17\n"
    _write(tmp_path, "q11", text)
    assert main(["--inputs", str(tmp_path), "q11", "--part", "2"]) == 0
    assert capsys.readouterr().out == f"Part 1 answer: {q11.part2(text)}\n"


def test_q12_part2_prints_nothing(tmp_path, capsys):
    _write(tmp_path, "q12", "AB\nBA\n")
    assert main(["--inputs", str(tmp_path), "q12", "--part", "2"]) == 0
    assert capsys.readouterr().out == ""


def test_missing_input_fails(tmp_path, capsys):
    assert main(["--inputs", str(tmp_path), "q02"]) == 1
    assert "Error" in capsys.readouterr().err


def test_bad_input_fails(tmp_path, capsys):
    _write(tmp_path, "q02", "1 x 3\n")
    assert main(["--inputs", str(tmp_path), "q02"]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage: aoc2024" in capsys.readouterr().out


def test_unknown_day_is_rejected():
    with pytest.raises(SystemExit) as info:
        main(["q08"])
    assert info.value.code == 2


def test_non_integer_part_is_rejected():
    with pytest.raises(SystemExit) as info:
        main(["q01", "--part", "one"])
    assert info.value.code == 2