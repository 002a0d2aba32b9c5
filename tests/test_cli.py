import pytest

from aoc2025.cli import main, run_day

DAY01 = "L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82"
DAY02 = (
    "11-22,95-115,998-1012,1188511880-1188511890,222220-222224,"
    "1698522-1698528,446443-446449,38593856-38593862,565653-565659,"
    "824824821-824824827,2121212118-2121212124"
)
DAY05 = "3-5\n10-14\n16-20\n12-18\n\n1\n5\n8\n11\n17\n32\n"


def test_run_day_one():
    assert run_day(1, DAY01) == (3, 6)


def test_run_day_two_uses_generator():
    assert run_day(2, DAY02) == (1227775554, 4174379265)


def test_run_day_five():
    assert run_day(5, DAY05) == (3, 14)


def test_run_day_unknown_raises():
    with pytest.raises(ValueError):
        run_day(42, "")


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "day01.txt"
    path.write_text(DAY01 + "\n")
    assert main(["1", "--input", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["day01 part 1: 3", "day01 part 2: 6"]


def test_main_missing_file_returns_error(tmp_path):
    assert main(["3", "--input", str(tmp_path / "absent.txt")]) == 1


def test_main_rejects_unknown_day():
    with pytest.raises(SystemExit) as info:
        main(["9"])
    assert info.value.code == 2