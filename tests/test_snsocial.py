import pytest

from cpkit.snsocial import main, spread_days


def _transpose(grid):
    return [list(column) for column in zip(*grid)]


SAMPLE_GRIDS = [
    [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
    [[3, 1, 1, 1, 1], [1, 1, 1, 1, 1]],
    [[1, 1, 1, 1], [1, 7, 1, 1], [1, 1, 1, 1], [1, 1, 1, 7]],
    [[2, 2], [2, 2]],
]


def test_uniform_grid_needs_no_days():
    assert spread_days([[4, 4, 4], [4, 4, 4]]) == 0


def test_single_cell():
    assert spread_days([[9]]) == 0


def test_empty_grid():
    assert spread_days([]) == -1
    assert spread_days([[]]) == -1


def test_line_with_peak_at_one_end():
    row = [1] * 6 + [5]
    assert spread_days([row]) == len(row) - 1
    assert spread_days([[value] for value in row]) == len(row) - 1


@pytest.mark.parametrize("grid", SAMPLE_GRIDS)
def test_transpose_does_not_change_answer(grid):
    assert spread_days(grid) == spread_days(_transpose(grid))


@pytest.mark.parametrize("grid", SAMPLE_GRIDS)
def test_answer_is_bounded_by_grid_size(grid):
    days = spread_days(grid)
    assert 0 <= days <= max(len(grid), len(grid[0])) - 1


def test_ragged_grid_is_rejected():
    with pytest.raises(ValueError):
        spread_days([[1, 2], [3]])


def test_main_prints_one_answer_per_case(tmp_path, capsys):
    lines = [str(len(SAMPLE_GRIDS))]
    for grid in SAMPLE_GRIDS:
        lines.append(f"{len(grid)} {len(grid[0])}")
        lines.extend(" ".join(str(v) for v in row) for row in grid)
    source = tmp_path / "input.txt"
    source.write_text("\n".join(lines) + "\n", encoding="utf-8")

    assert main([str(source)]) == 0
    printed = capsys.readouterr().out.split()
    assert printed == [str(spread_days(grid)) for grid in SAMPLE_GRIDS]


def test_main_rejects_truncated_input(tmp_path):
    source = tmp_path / "input.txt"
    source.write_text("1\n2 2\n1 1\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        main([str(source)])