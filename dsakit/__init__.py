"""Graph, grid, ordering, greedy, interval, backtracking and trie algorithms as plain functions."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "combinatorics",
    "greedy",
    "grids",
    "intervals",
    "ordering",
    "traversal",
    "trie",
]