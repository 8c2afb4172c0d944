"""Backtracking searches: combinations, partitions, placements and puzzles."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product

_KEYPAD = {
    "0": "",
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

_MOVES = (("D", 1, 0), ("R", 0, 1), ("U", -1, 0), ("L", 0, -1))

_DIGITS = "123456789"


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Combinations of candidates, each usable repeatedly, summing to ``target``.

    Raises ValueError if a candidate is not positive.
    """
    values = list(candidates)
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")
    result: list[list[int]] = []
    chosen: list[int] = []

    def search(index: int, remaining: int) -> None:
        if remaining == 0:
            result.append(list(chosen))
            return
        if remaining < 0 or index >= len(values):
            return
        chosen.append(values[index])
        search(index, remaining - values[index])
        chosen.pop()
        search(index + 1, remaining)

    search(0, target)
    return result


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Distinct combinations using each candidate at most once, summing to ``target``."""
    values = sorted(candidates)
    result: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            result.append(list(chosen))
            return
        if start >= len(values) or remaining < 0:
            return
        for j in range(start, len(values)):
            if j > start and values[j] == values[j - 1]:
                continue
            chosen.append(values[j])
            search(j + 1, remaining - values[j])
            chosen.pop()

    search(0, target)
    return result


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """Sets of ``k`` distinct digits 1..9 summing to ``n``, in increasing order."""
    result: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int, remaining: int) -> None:
        if len(chosen) == k:
            if remaining == 0:
                result.append(list(chosen))
            return
        for digit in range(start, 10):
            if digit > remaining:
                break
            chosen.append(digit)
            search(digit + 1, remaining - digit)
            chosen.pop()

    search(1, n)
    return result


def letter_combinations(digits: str) -> list[str]:
    """Every letter string a phone keypad can spell for ``digits``.

    Raises ValueError if ``digits`` holds a character that is not a digit.
    """
    if not digits:
        return []
    try:
        letters = [_KEYPAD[d] for d in digits]
    except KeyError as exc:
        raise ValueError(f"not a keypad digit: {exc.args[0]!r}") from None
    return ["".join(combo) for combo in product(*letters)]


def graph_coloring(v: int, edges: Sequence[Sequence[int]], m: int) -> bool:
    """Whether the undirected graph can be coloured with at most ``m`` colours."""
    adj: list[list[int]] = [[] for _ in range(v)]
    for a, b, *_ in edges:
        adj[a].append(b)
        adj[b].append(a)
    colours = [0] * v

    def assign(node: int) -> bool:
        if node == v:
            return True
        for colour in range(1, m + 1):
            if all(colours[nb] != colour for nb in adj[node]):
                colours[node] = colour
                if assign(node + 1):
                    return True
                colours[node] = 0
        return False

    return assign(0)


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, as rows of '.' and 'Q'."""
    board = [["."] * n for _ in range(n)]
    rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()
    result: list[list[str]] = []

    def place(col: int) -> None:
        if col == n:
            result.append(["".join(row) for row in board])
            return
        for row in range(n):
            if row in rows or row - col in diagonals or row + col in anti_diagonals:
                continue
            rows.add(row)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            board[row][col] = "Q"
            place(col + 1)
            board[row][col] = "."
            rows.discard(row)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    place(0)
    return result


def palindrome_partitions(s: str) -> list[list[str]]:
    """Every way to split ``s`` into palindromic pieces."""
    result: list[list[str]] = []
    path: list[str] = []

    def split(start: int) -> None:
        if start == len(s):
            result.append(list(path))
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece == piece[::-1]:
                path.append(piece)
                split(end)
                path.pop()

    split(0)
    return result


def permutations(nums: Sequence[int]) -> list[list[int]]:
    """Every ordering of ``nums``, generated by successive swaps."""
    items = list(nums)
    result: list[list[int]] = []

    def arrange(index: int) -> None:
        if index == len(items):
            result.append(list(items))
            return
        for i in range(index, len(items)):
            items[i], items[index] = items[index], items[i]
            arrange(index + 1)
            items[i], items[index] = items[index], items[i]

    arrange(0)
    return result


def rat_in_maze(maze: Sequence[Sequence[int]]) -> list[str]:
    """Sorted move strings (D, R, U, L) from the top-left to the bottom-right of a square maze."""
    n = len(maze)
    if n == 0 or not maze[0][0]:
        return []
    cols = len(maze[0])
    visited = {(0, 0)}
    path: list[str] = []
    result: list[str] = []

    def walk(row: int, col: int) -> None:
        if row == n - 1 and col == n - 1:
            result.append("".join(path))
            return
        for letter, dr, dc in _MOVES:
            r, c = row + dr, col + dc
            if 0 <= r < n and 0 <= c < cols and maze[r][c] and (r, c) not in visited:
                visited.add((r, c))
                path.append(letter)
                walk(r, c)
                path.pop()
                visited.discard((r, c))

    walk(0, 0)
    return sorted(result)


def subset_sums(arr: Sequence[int]) -> list[int]:
    """Sums of all subsets of ``arr``, in ascending order."""
    sums = [0]
    for value in arr:
        sums += [total + value for total in sums]
    return sorted(sums)


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """All distinct sub-multisets of ``nums``, each sorted."""
    values = sorted(nums)
    result: list[list[int]] = []
    chosen: list[int] = []

    def build(start: int) -> None:
        result.append(list(chosen))
        for i in range(start, len(values)):
            if i > start and values[i] == values[i - 1]:
                continue
            chosen.append(values[i])
            build(i + 1)
            chosen.pop()

    build(0)
    return result


def _fits(board: Sequence[Sequence[str]], row: int, col: int, ch: str) -> bool:
    box_row, box_col = 3 * (row // 3), 3 * (col // 3)
    for i in range(9):
        if board[i][col] == ch or board[row][i] == ch:
            return False
        if board[box_row + i // 3][box_col + i % 3] == ch:
            return False
    return True


def solve_sudoku(board: list[list[str]]) -> bool:
    """Fill the '.' cells of a 9x9 board in place; return whether a solution was found."""
    for row in range(9):
        for col in range(9):
            if board[row][col] != ".":
                continue
            for ch in _DIGITS:
                if _fits(board, row, col, ch):
                    board[row][col] = ch
                    if solve_sudoku(board):
                        return True
                    board[row][col] = "."
            return False
    return True