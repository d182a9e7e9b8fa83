import time

import pytest

from aocdays.utils import Timer, read_lines, split_string, trim


def test_trim_removes_surrounding_whitespace():
    assert trim("  a b \t\n") == "a b"


def test_trim_all_whitespace_gives_empty():
    assert trim(" \t\r\n\v\f ") == ""


def test_trim_keeps_inner_text_untouched():
    text = "x  y"
    assert trim(text) == text


def test_split_string_drops_empty_parts():
    assert split_string(",a,,b,", ",") == ["a", "b"]


def test_split_string_empty_input():
    assert split_string("", ",") == []


def test_split_string_without_separator():
    assert split_string("abc", "~") == ["abc"]


def test_split_string_rejoin_round_trip():
    parts = ["one", "two", "three"]
    assert split_string(" ".join(parts), " ") == parts


def test_read_lines_with_trailing_newline(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("a\nb\n", encoding="utf-8")
    assert read_lines(path) == ["a", "b"]


def test_read_lines_without_trailing_newline(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("a\nb", encoding="utf-8")
    assert read_lines(path) == ["a", "b"]


def test_read_lines_keeps_blank_lines_in_the_middle(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("a\n\nb\n", encoding="utf-8")
    assert read_lines(str(path)) == ["a", "", "b"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.txt")


def test_timer_measures_and_resets():
    timer = Timer()
    time.sleep(0.02)
    before = timer.elapsed()
    assert before >= 0.02
    timer.reset()
    assert 0.0 <= timer.elapsed() < before