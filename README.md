# algonotes

A small library of classic algorithms written as plain Python functions
and classes. It has no runtime dependencies.

## What is in it

### Dynamic programming and backtracking

- `algonotes.knapsack`
  - `Item(weight, benefit)`: a frozen dataclass.
  - `knapsack_table(items, capacity)`: the 0/1 knapsack benefit table, with
    one row per item plus a leading row of zeros, and columns for capacities
    `0..capacity`. Raises `ValueError` for a negative capacity or weight.
  - `chosen_items(table, items, capacity)`: traces the table back and
    returns one `bool` per item, `True` where the item is taken.
  - `format_table(table)`: the table as text, each cell followed by a tab,
    one row per line.
- `algonotes.queens`
  - `n_queens(n)`: a generator of every solution to the N-queens puzzle,
    each a tuple of 1-based column numbers, one per row.
  - `can_place(columns, row, column)`: whether a queen fits at a 1-based
    row and column given the queens in earlier rows.
  - `format_solution(number, columns)`: a readable report of one solution.
- `algonotes.matrix_chain`
  - `matrix_chain_order(dims)`: the cost and split tables (indexed from 1)
    for multiplying matrices `A1..An`, where `Ai` is `dims[i-1] x dims[i]`.
    Raises `ValueError` for fewer than two dimensions.
  - `optimal_parens(split, i, j)`: the parenthesization of `Ai..Aj`.
  - `optimal_parenthesization(dims)`: the full line, such as
    `A15 = ((A1*A2)*((A3*A4)*A5))`.

### Searching and structures

- `algonotes.search`: on a sorted sequence, `binary_search` returns an
  index holding the key or `-1`; `lower_bound` and `upper_bound` return the
  first index whose value is not less than, or greater than, the key
  (`len(values)` when there is none).
- `algonotes.brackets`: `is_balanced(text)` checks that `()`, `{}` and `[]`
  nest properly. Other characters are ignored, and so is a closing bracket
  met while nothing is open.
- `algonotes.graph_height`: `build_adjacency(edges)` builds an undirected
  adjacency list; `height(edges, source)` returns the deepest breadth-first
  level reachable from `source`.
- `algonotes.bst`: `BinarySearchTree` of `Node` objects, with `insert`,
  `delete` (raises `KeyError` when the value is absent), the generators
  `pre_order`, `in_order` and `post_order`, a read-only `root`, and
  iteration in sorted order. Equal values go to the right subtree.
- `algonotes.hanoi`: `hanoi_moves(n, source=1, spare=2, target=3)` yields
  `Move(disk, source, target)` records; `format_move` renders one as
  `disk: source -> target`.

### Sorting

- `algonotes.sorting`: each function takes any iterable and returns a new
  list.
  - `binary_insertion_sort` (ascending), using `insertion_position` to find
    where each element goes.
  - `insertion_sort_descending` and `selection_sort_descending`.
  - `merge(left, right)` merges two ascending sequences, left first on ties.
  - `merge_sort` (stable, ascending) and `quick_sort` (ascending, first
    element of each range as pivot).
- `algonotes.students`
  - `Student(id, name, cgpa)`: a frozen dataclass.
  - `parse_student(line)` reads `"id name cgpa"` (raises `ValueError` when
    malformed); `format_student(student)` writes it back.
  - `merge_sort_students` and `quick_sort_students` sort by ascending CGPA.
  - `name_sort(students)` puts each run of equal CGPA in name order.

## Examples

```python
from algonotes.brackets import is_balanced
from algonotes.search import binary_search, lower_bound

is_balanced("[{()}]")            # True
is_balanced("[}()]{")            # False

binary_search([1, 3, 5, 7], 5)   # 2
lower_bound([1, 3, 5, 7], 4)     # 2
```

```python
from algonotes.knapsack import Item, chosen_items, knapsack_table

items = [Item(2, 3), Item(3, 4), Item(4, 5), Item(5, 6)]
table = knapsack_table(items, 5)
table[-1][-1]                    # 7
chosen_items(table, items, 5)    # [True, True, False, False]
```

```python
from algonotes.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (100, 50, 200, 150, 300, 250, 270, 320):
    tree.insert(value)
tree.delete(300)
list(tree.in_order())   # [50, 100, 150, 200, 250, 270, 320]
```

```python
from algonotes.matrix_chain import optimal_parenthesization

optimal_parenthesization([10, 5, 1, 10, 2, 10])
# 'A15 = ((A1*A2)*((A3*A4)*A5))'
```

## What it does not do

The package is a library only. It has no command-line program and does not
read input from the terminal; call the functions from your own code and
print their results as you like (the `format_*` helpers give ready-made
text for the knapsack table, N-queens solutions, Hanoi moves and student
records).

## Tests

The test suite uses pytest and hypothesis, available through the `test`
extra of the package.