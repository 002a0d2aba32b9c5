import pytest

from aoc2025.shared import Grid


def _grid(rows):
    return Grid(
        width=len(rows[0]),
        height=len(rows),
        content=[c for row in rows for c in row],
    )


def test_getitem_is_row_major():
    grid = _grid(["abc", "def"])
    assert grid[(0, 0)] == "a"
    assert grid[(2, 0)] == "c"
    assert grid[(0, 1)] == "d"
    assert grid[(2, 1)] == "f"


@pytest.mark.parametrize("pos", [(0, 2), (-1, 0)])
def test_getitem_outside_raises(pos):
    grid = _grid(["ab", "cd"])
    with pytest.raises(IndexError) as excinfo:
        value = grid[pos]
        assert value not in grid.content
    assert excinfo.type is IndexError


def test_full_grid_neighbour_counts():
    grid = _grid(["###", "###", "###"])
    assert grid.count_all_neighbours(1, 1, "#") == 8
    assert grid.count_all_neighbours(0, 0, "#") == 3


def test_cell_itself_is_not_counted():
    grid = _grid(["#"])
    assert grid.count_all_neighbours(0, 0, "#") == 0


def test_neighbour_relation_is_symmetric():
    grid = _grid(["#..#", ".##.", "#.#."])
    total = sum(
        grid.count_all_neighbours(x, y, "#")
        for x in range(grid.width)
        for y in range(grid.height)
        if grid[(x, y)] == "#"
    )
    assert total % 2 == 0