# algocollection

Classic algorithms and data structures in plain Python, using only the
standard library. Every function returns its result; sorting functions
return a new list and leave their input unchanged.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algocollection.searching`: `binary_search` and `binary_search_descending`
  return the index of the target in a sorted sequence, or `None`;
  `linear_search` returns every index at which the target occurs.
- `algocollection.sorting`: `heap_sort`, `quick_sort` (first element as
  pivot), `lomuto_quick_sort` (last element as pivot), `radix_sort`
  (non-negative integers), `bucket_sort` (values in `[0, 1)`),
  `counting_sort` (integers), `insertion_sort`, `merge_sort`, `bubble_sort`,
  `selection_sort`, and `reverse_array`.
- `algocollection.expressions`: `evaluate_postfix` (single-digit operands,
  integer division truncating toward zero), `evaluate_prefix` (single-digit
  operands, float result), `precedence`, `infix_to_postfix` (single-letter
  operands), `is_balanced` (parentheses), `roman_to_int`.
- `algocollection.containers`: `BoundedStack` and `BoundedQueue` of fixed
  capacity, raising `ContainerFullError` or `ContainerEmptyError`. A
  `BoundedQueue` does not reuse the slots freed by dequeuing, so at most
  `capacity` items can ever be enqueued.
- `algocollection.array_problems`: `reverse_stack`, `nearest_greater_to_right`,
  `nearest_smaller_to_left` (both give `None` where there is no such item),
  `daily_temperatures`, `k_largest`, `top_k_frequent`, `max_sum_subarray`.
- `algocollection.linked_lists`: `SinglyLinkedList`; `DoublyLinkedList` of
  `(key, data)` pairs with unique keys; `DayLists`, one list per day; and
  `Timetable`, per-day `(subject, slot)` entries kept ordered by slot, with
  `busiest_day`.
- `algocollection.sparse_matrix`: `SparseMatrix.from_dense`, `entries`,
  `row_counts`, `densest_row`.
- `algocollection.regression`: `fit_line` returns a `RegressionResult` with
  intercept, slope, R² and the sums used to compute them.
- `algocollection.binary_tree`: `TreeNode`, `insert_level_order`,
  `build_from_level_order`, `preorder`, `inorder`, `postorder`,
  `level_order`, `height`, `count_nodes`, `count_leaves`, `find_path`,
  `lowest_common_ancestor`, `lca_by_paths`.
- `algocollection.bst`: `bst_insert`, `bst_from_values`, `bst_min`,
  `bst_delete` on `TreeNode` trees; equal values go to the left.
- `algocollection.avl`: `AVLTree`, which rejects duplicate keys unless
  created with `allow_duplicates=True`.
- `algocollection.heaps`: `MinHeap` with optional capacity, raising
  `HeapFullError` when full.
- `algocollection.threaded_tree`: `ThreadedBST`, walked in order through its
  threads.
- `algocollection.graphs`: `Graph` with `add_edge`, `bfs` and `dfs`.
- `algocollection.aho_corasick`: `AhoCorasick` and `find_all`, giving the
  start indices of every pattern's occurrences.
- `algocollection.des_keys`: the DES key schedule: `hex_to_bin`, `bin_to_hex`,
  `permute_pc1`, `permute_pc2`, `shift_left`, `split_halves`, `round_keys`.
- `algocollection.dynamic`: `knapsack` (0/1), `longest_common_subsequence`
  (length).
- `algocollection.number_theory`: `sieve_of_eratosthenes`, and `add_by_width`,
  which adds two positive numbers by measuring the width of padded fields.
- `algocollection.puzzles`: `tower_of_hanoi`, returning a list of moves
  `(disk, source, target)`.

## Examples

```python
from algocollection.sorting import merge_sort
from algocollection.searching import binary_search
from algocollection.expressions import infix_to_postfix, evaluate_postfix
from algocollection.graphs import Graph
from algocollection.dynamic import knapsack

merge_sort([10, 11, 13, 8, 6, 17])        # [6, 8, 10, 11, 13, 17]
binary_search([2, 3, 4, 10, 40], 10)      # 3
infix_to_postfix("a+b*c")                 # "abc*+"
evaluate_postfix("231*+9-")               # -4

g = Graph()
for source, target in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(source, target)
g.bfs(2)                                  # [2, 0, 3, 1]

knapsack(50, [10, 20, 30], [60, 100, 120])  # 220
```

```python
from algocollection.avl import AVLTree

tree = AVLTree()
for key in (10, 20, 30, 40, 50, 25):
    tree.insert(key)
tree.preorder()                           # [30, 20, 10, 25, 40, 50]
```

## What this package does not do

It is a library only. There is no command-line program and no interactive
menu: nothing reads from standard input or prints results. Call the functions
and classes from your own code and use the values they return.