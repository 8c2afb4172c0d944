# dsakit

A small library of textbook algorithms: graph traversals, grid searches,
topological ordering, greedy scheduling, interval handling, backtracking
searches and prefix trees. Each algorithm is a plain function that takes
Python lists (or other sequences) and returns Python values. There are no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `dsakit.traversal`: `bfs`, `dfs`, `connected_components`, `is_bipartite`,
  `has_undirected_cycle`, `count_provinces`
- `dsakit.grids`: `flood_fill`, `count_distinct_islands`, `count_enclaves`,
  `oranges_rotting`, `capture_surrounded_regions`
- `dsakit.ordering`: `alien_order`, `course_order`, `has_directed_cycle`,
  `eventual_safe_nodes`, `kahn_topo_sort`, `dfs_topo_sort`, `can_finish_tasks`
- `dsakit.trie`: `Trie` (`insert`, `search`, `starts_with`) and `CountingTrie`
  (`insert`, `count_words_equal_to`, `count_words_starting_with`, `erase`)
- `dsakit.intervals`: `insert_interval`, `erase_overlap_intervals`,
  `merge_intervals`, `min_platforms`, `max_meetings`
- `dsakit.greedy`: `assign_cookies`, `fractional_knapsack`, `job_sequencing`,
  `can_jump`, `min_jumps`, `lemonade_change`, `min_coin_change` (using the
  coins in `DENOMINATIONS`), `average_waiting_time`, `check_valid_string`,
  `distribute_candy`
- `dsakit.combinatorics`: `inversion_count`, `kth_permutation`
- `dsakit.backtracking`: `combination_sum`, `combination_sum2`,
  `combination_sum3`, `letter_combinations`, `graph_coloring`,
  `solve_n_queens`, `palindrome_partitions`, `permutations`, `rat_in_maze`,
  `subset_sums`, `subsets_with_dup`, `solve_sudoku`

## Examples

```python
from dsakit.traversal import bfs
from dsakit.ordering import kahn_topo_sort
from dsakit.intervals import merge_intervals
from dsakit.greedy import min_coin_change
from dsakit.trie import Trie

bfs([[1, 2], [0], [0]])                       # [0, 1, 2]
kahn_topo_sort(3, [[0, 1], [1, 2]])           # [0, 1, 2]
merge_intervals([[1, 3], [2, 6], [8, 10]])    # [[1, 6], [8, 10]]
min_coin_change(43)                           # [20, 20, 2, 1]

trie = Trie()
trie.insert("apple")
trie.search("apple")      # True
trie.starts_with("app")   # True
```

## Conventions

- Graphs are given either as adjacency lists (a list of neighbour lists
  indexed by vertex) or as a vertex count plus a list of `[u, v]` edges.
  Grids are lists of lists.
- Most functions return new values and leave their input alone. Two work in
  place: `capture_surrounded_regions` rewrites the board it is given, and
  `solve_sudoku` fills the board's `'.'` cells and returns whether it found
  a solution.
- `job_sequencing` returns a `(count, total_profit)` tuple.
- Where an answer does not exist some functions return an empty value:
  `alien_order` returns `""` and `course_order` returns `[]`;
  `kahn_topo_sort` returns a partial order when the graph has a cycle.
- Others raise `ValueError` on input they cannot handle: `min_jumps` when the
  last index cannot be reached, `average_waiting_time` for an empty list,
  `kth_permutation` for `n < 1` or `k` outside `1..n!`,
  `letter_combinations` for a character that is not a digit, and
  `combination_sum` for a candidate that is not positive.

## What it does not do

dsakit is a library only: it has no command-line interface, reads no files
and keeps no state between calls apart from the trie objects you create.