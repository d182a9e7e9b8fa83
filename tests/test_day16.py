import pytest

from aocdays.day16 import (
    Direction,
    Tile,
    energized_count,
    main,
    parse_board,
    part1,
    part2,
)

EXAMPLE = [
    r".|...\....",
    r"|.-.\.....",
    r".....|-...",
    r"........|.",
    r"..........",
    r".........\ ".rstrip(),
    r"..../.\\..",
    r".-.-/..|..",
    r".|....-|.\ ".rstrip(),
    r"..//.|....",
]


def test_example_part1():
    assert part1(EXAMPLE) == 46


def test_example_part2():
    assert part2(EXAMPLE) == 51


def test_parse_board_maps_characters():
    board = parse_board(["./\\|-"])
    assert board == (
        (Tile.EMPTY, Tile.SLASH_RIGHT, Tile.SLASH_LEFT, Tile.VERTICAL, Tile.HORIZONTAL),
    )


def test_parse_board_rejects_unknown_character():
    with pytest.raises(ValueError):
        parse_board(["..x"])


def test_straight_row_energizes_whole_row():
    row = "......."
    assert energized_count(parse_board([row]), 0, 0, Direction.RIGHT) == len(row)


def test_vertical_splitter_energizes_whole_column():
    lines = [".", ".", "|", ".", "."]
    assert energized_count(parse_board(lines), 2, 0, Direction.RIGHT) == len(lines)


def test_horizontal_splitter_energizes_whole_row():
    line = "..-.."
    board = parse_board([line])
    assert energized_count(board, 0, 2, Direction.DOWN) == len(line)


def test_mirror_loop_terminates_within_board():
    lines = ["/\\", "\\/"]
    board = parse_board(lines)
    count = energized_count(board, 0, 0, Direction.RIGHT)
    assert 1 <= count <= len(lines) * len(lines[0])


def test_part2_at_least_part1_and_bounded():
    best = part2(EXAMPLE)
    assert part1(EXAMPLE) <= best <= len(EXAMPLE) * len(EXAMPLE[0])


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.split()
    assert out == [str(part1(EXAMPLE)), str(part2(EXAMPLE))]