# algostudy

Small, readable implementations of classic algorithms and data structures,
meant for study. Each module covers one topic. Every module can be imported
as a library, and all but `algostudy.linked_list` also come with a console
command.

## Topics

| Module | What it covers |
| --- | --- |
| `algostudy.search` | Binary search that counts the items of a sorted sequence greater than a point |
| `algostudy.fibonacci` | Fibonacci numbers, by plain recursion and by memoised recursion |
| `algostudy.sorting` | Merge sort, quick sort (Hoare partition) and counting sort over a fixed range |
| `algostudy.hashing` | A byte-sum hash, a 64-bit polynomial string hash and a light Rabin–Karp search |
| `algostudy.graph` | Depth-first and breadth-first traversal of a graph given as an adjacency matrix |
| `algostudy.dynarray` | `DynamicArray`, which doubles its capacity when full and shrinks when sparse |
| `algostudy.linked_list` | `LinkedList`, a singly linked list with insertion at both ends and lookup |
| `algostudy.pyramid` | A binary heap ("pyramid") stored in an array: describing it and walking through it |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from algostudy.search import count_greater
from algostudy.fibonacci import fibonacci, fibonacci_memo, fibonacci_table
from algostudy.hashing import simple_string_hash, polynomial_hash, find_pattern

count_greater([14, 16, 19, 32, 32, 32, 56, 69, 72], 32)   # 3
fibonacci(10)                                             # 55
fibonacci_memo(10)                                        # 55
fibonacci_table(5)                                        # [0, 1, 1, 2, 3, 5]
simple_string_hash("abc")                                 # 294
find_pattern("abcabc", "cab")                             # 2
```

`simple_string_hash` sums the UTF-8 bytes of the text read as signed 8-bit
values. `polynomial_hash(text, p, n)` computes the sum of `c_i * p**i` in
64-bit unsigned arithmetic and reduces it modulo `n`; a non-positive `n`
raises `ValueError`. `find_pattern` returns the first index of the pattern,
or `-1` when it is absent or empty.

### Sorting

`merge_sort`, `quick_sort` and `count_sort` each return a new sorted list.
`count_sort(values, min_value=10, max_value=24)` raises `ValueError` when a
value lies outside the range. `format_array` renders values the way the
command prints them, each wrapped in green terminal colour codes.

### Graphs

The traversals take an adjacency matrix and a zero-based start vertex (0 by
default) and return the visited vertices in order, neighbours taken in
ascending order. A start outside the matrix raises `ValueError`.

```python
from algostudy.graph import dfs_order, bfs_order, parse_matrix

matrix = parse_matrix("3  0 1 1  1 0 0  1 0 0")
dfs_order(matrix, 0)   # [0, 1, 2]
bfs_order(matrix, 0)   # [0, 1, 2]
```

`parse_matrix` reads a vertex count n followed by the n × n entries;
`load_matrix` does the same for a file.

### Data structures

`DynamicArray(capacity, items=())` keeps a capacity separate from its length.
`append` doubles the capacity when it is full (from 0 it grows to 1).
`remove_head` removes and returns the first item, shrinking the capacity to a
third (at least 1) when the remaining items fit into that third; on an empty
array it raises `IndexError`. `render()` shows the items followed by one `_`
per unused slot. It supports `len()` and iteration.

`LinkedList` offers `insert_back`, `insert_front`, `find`, `is_empty`,
iteration, the `in` operator and `render()`.

`algostudy.pyramid` provides `calc_level`, `describe_node`, `pyramid_lines`,
`child_index`, `parent_index` and `parse_command`, plus `PyramidNavigator`,
whose `move` takes a `Command` (`UP`, `LEFT`, `RIGHT`) and raises
`NavigationError` when the move leads outside the pyramid, or `ValueError`
for any other command.

## Commands

Prompts and messages are in Russian.

| Command | What it does |
| --- | --- |
| `algostudy-search [point]` | Counts values of a built-in sorted sample greater than the point; asks for it if omitted |
| `algostudy-fibonacci [n] [--memo]` | Prints the Fibonacci numbers 0..n (n defaults to 10) |
| `algostudy-sort [merge\|quick\|count] [values ...]` | Prints an array before and after sorting; uses a built-in example when no values are given |
| `algostudy-hash [simple\|poly\|find]` | Interactive hashing or substring search until `exit` or end of input |
| `algostudy-graph [dfs\|bfs] [--file PATH]` | Reads a matrix (default `input.txt`) and prints the traversal order; `bfs` asks for the start vertex (1-based) |
| `algostudy-dynarray [print\|append\|remove]` | Builds a dynamic array from input, then appends items and removes the head, stopping at the chosen stage |
| `algostudy-pyramid [values ...] [--walk]` | Prints a pyramid; with `--walk`, navigates it with `up`, `left`, `right`, `exit` |

## Limitations

`LinkedList` has no removal and no command of its own. Graph traversal
treats only cells equal to 1 as edges and reports vertices reachable from the
start only.