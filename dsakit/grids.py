"""Breadth-first searches over rectangular grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dr, dc in _DIRECTIONS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _border_cells(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for r in range(rows):
        yield r, 0
        yield r, cols - 1
    for c in range(cols):
        yield 0, c
        yield rows - 1, c


def flood_fill(image: Sequence[Sequence[int]], sr: int, sc: int, color: int) -> list[list[int]]:
    """Return a copy of ``image`` with the region around (sr, sc) recoloured."""
    result = [list(row) for row in image]
    original = result[sr][sc]
    if original == color:
        return result
    rows, cols = len(result), len(result[0])
    result[sr][sc] = color
    queue = deque([(sr, sc)])
    while queue:
        row, col = queue.popleft()
        for r, c in _neighbours(row, col, rows, cols):
            if result[r][c] == original:
                result[r][c] = color
                queue.append((r, c))
    return result


def count_distinct_islands(grid: Sequence[Sequence[int]]) -> int:
    """Number of island shapes of 1-cells, equal up to translation."""
    if not grid:
        return 0
    rows, cols = len(grid), len(grid[0])
    seen = [[False] * cols for _ in range(rows)]
    shapes: set[tuple[tuple[int, int], ...]] = set()
    for i in range(rows):
        for j in range(cols):
            if seen[i][j] or grid[i][j] != 1:
                continue
            seen[i][j] = True
            queue = deque([(i, j)])
            shape: list[tuple[int, int]] = []
            while queue:
                row, col = queue.popleft()
                shape.append((row - i, col - j))
                for r, c in _neighbours(row, col, rows, cols):
                    if not seen[r][c] and grid[r][c] == 1:
                        seen[r][c] = True
                        queue.append((r, c))
            shapes.add(tuple(shape))
    return len(shapes)


def count_enclaves(grid: Sequence[Sequence[int]]) -> int:
    """Number of land cells from which the grid's edge cannot be reached."""
    rows, cols = len(grid), len(grid[0])
    reached = [[False] * cols for _ in range(rows)]
    for sr, sc in _border_cells(rows, cols):
        if reached[sr][sc] or not grid[sr][sc]:
            continue
        reached[sr][sc] = True
        queue = deque([(sr, sc)])
        while queue:
            row, col = queue.popleft()
            for r, c in _neighbours(row, col, rows, cols):
                if grid[r][c] == 1 and not reached[r][c]:
                    reached[r][c] = True
                    queue.append((r, c))
    return sum(
        1
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell and not reached[r][c]
    )


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh orange (1) remains, or -1 if some never rot."""
    state = [list(row) for row in grid]
    rows, cols = len(state), len(state[0])
    queue = deque((r, c) for r in range(rows) for c in range(cols) if state[r][c] == 2)
    fresh = sum(row.count(1) for row in state)
    if not fresh:
        return 0
    if not queue:
        return -1
    minutes = -1
    while queue:
        for _ in range(len(queue)):
            row, col = queue.popleft()
            for r, c in _neighbours(row, col, rows, cols):
                if state[r][c] == 1:
                    state[r][c] = 2
                    fresh -= 1
                    queue.append((r, c))
        minutes += 1
    return -1 if fresh else minutes


def capture_surrounded_regions(board: list[list[str]]) -> None:
    """Flip, in place, every 'O' region not connected to the border into 'X'."""
    rows, cols = len(board), len(board[0])
    safe = [[False] * cols for _ in range(rows)]
    for sr, sc in _border_cells(rows, cols):
        if board[sr][sc] != "O" or safe[sr][sc]:
            continue
        safe[sr][sc] = True
        queue = deque([(sr, sc)])
        while queue:
            row, col = queue.popleft()
            for r, c in _neighbours(row, col, rows, cols):
                if board[r][c] == "O" and not safe[r][c]:
                    safe[r][c] = True
                    queue.append((r, c))
    for r in range(1, rows - 1):
        for c in range(1, cols - 1):
            if board[r][c] == "O" and not safe[r][c]:
                board[r][c] = "X"