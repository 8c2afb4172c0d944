import copy

import pytest

from dsakit.grids import (
    capture_surrounded_regions,
    count_distinct_islands,
    count_enclaves,
    flood_fill,
    oranges_rotting,
)


def test_flood_fill_sample():
    image = [[1, 1, 1], [1, 1, 0], [1, 0, 1]]
    assert flood_fill(image, 1, 1, 2) == [[2, 2, 2], [2, 2, 0], [2, 0, 1]]


def test_flood_fill_does_not_mutate_input():
    image = [[1, 1, 0], [0, 1, 0]]
    before = copy.deepcopy(image)
    flood_fill(image, 0, 0, 7)
    assert image == before


def test_flood_fill_same_colour_returns_equal_copy():
    image = [[3, 3], [3, 4]]
    result = flood_fill(image, 0, 0, 3)
    assert result == image
    assert result is not image


def test_flood_fill_uniform_image():
    image = [[5] * 4 for _ in range(3)]
    assert flood_fill(image, 2, 3, 9) == [[9] * 4 for _ in range(3)]


def test_flood_fill_changes_only_original_colour():
    image = [[1, 2, 1], [1, 2, 1], [1, 1, 1]]
    result = flood_fill(image, 0, 0, 8)
    for row_in, row_out in zip(image, result):
        for a, b in zip(row_in, row_out):
            assert b == a or (a == 1 and b == 8)
    assert result[0][1] == image[0][1]


def test_distinct_islands_no_land():
    assert count_distinct_islands([[0, 0], [0, 0]]) == 0


def test_distinct_islands_translated_copies_count_once():
    single = [[1, 1, 0, 0, 0], [0, 1, 0, 0, 0], [0, 0, 0, 0, 0]]
    double = [[1, 1, 0, 0, 0], [0, 1, 0, 1, 1], [0, 0, 0, 0, 1]]
    assert count_distinct_islands(double) == count_distinct_islands(single)
    assert count_distinct_islands(single) == 1


def test_distinct_islands_different_shapes():
    grid = [[1, 1, 0, 1], [0, 0, 0, 1], [1, 0, 0, 0]]
    assert count_distinct_islands(grid) == 3


def test_enclaves_all_land_is_zero():
    assert count_enclaves([[1] * 4 for _ in range(4)]) == 0


@pytest.mark.parametrize(
    "inner",
    [
        [[1]],
        [[1, 0, 1], [1, 1, 0]],
        [[1, 1], [1, 1]],
        [[0, 0], [0, 1]],
    ],
)
def test_enclaves_in_water_ring_all_count(inner):
    cols = len(inner[0]) + 2
    grid = [[0] * cols] + [[0, *row, 0] for row in inner] + [[0] * cols]
    land = sum(sum(row) for row in inner)
    assert count_enclaves(grid) == land


def test_enclaves_connected_to_border_do_not_count():
    grid = [[0, 0, 0, 0], [1, 0, 1, 0], [0, 1, 1, 0], [0, 0, 0, 0]]
    assert count_enclaves(grid) == 3
    grid[1][3] = 1
    grid[1][2] = 1
    assert count_enclaves(grid) == 0


def test_oranges_sample():
    assert oranges_rotting([[2, 1, 1], [1, 1, 0], [0, 1, 1]]) == 4


def test_oranges_unreachable_fresh():
    assert oranges_rotting([[2, 1, 1], [0, 1, 1], [1, 0, 1]]) == -1


def test_oranges_no_fresh():
    assert oranges_rotting([[0, 2]]) == 0
    assert oranges_rotting([[0, 0]]) == 0


def test_oranges_fresh_without_rotten():
    assert oranges_rotting([[1, 1]]) == -1


@pytest.mark.parametrize("length", [2, 3, 6])
def test_oranges_line_takes_one_minute_per_cell(length):
    row = [2] + [1] * (length - 1)
    assert oranges_rotting([row]) == length - 1


def test_oranges_does_not_mutate_input():
    grid = [[2, 1], [1, 1]]
    before = copy.deepcopy(grid)
    oranges_rotting(grid)
    assert grid == before


def test_surrounded_interior_region_captured():
    board = [list(row) for row in ["XXXX", "XOOX", "XXOX", "XOXX"]]
    capture_surrounded_regions(board)
    assert ["".join(row) for row in board] == ["XXXX", "XXXX", "XXXX", "XOXX"]


def test_surrounded_all_o_unchanged():
    board = [["O"] * 3 for _ in range(3)]
    capture_surrounded_regions(board)
    assert board == [["O"] * 3 for _ in range(3)]


def test_surrounded_region_linked_to_border_kept():
    rows = ["XXXXX", "XOOOX", "XXXOX", "XXXOX"]
    board = [list(row) for row in rows]
    capture_surrounded_regions(board)
    assert ["".join(row) for row in board] == rows