# algokit

A small collection of classic algorithms written as plain Python functions
and classes:

- **Graphs** (`algokit.graphs`): breadth- and depth-first traversal,
  Dijkstra, Bellman–Ford with negative-cycle detection and recovery,
  Floyd–Warshall with path reconstruction, topological sorting, directed
  cycle detection, node depths in a rooted tree and tree diameter.
- **Grids** (`algokit.grid`): counting rooms, which are connected regions of
  non-wall cells, in a map of walls (`#`) and floor (any other character).
- **Linked lists** (`algokit.linked_list`): singly and doubly linked lists.
  The singly linked list supports insertion and deletion at either end or at
  a 1-based position; the doubly linked list supports appending and walking
  in both directions.
- **Sorting** (`algokit.sorting`): counting, insertion, selection, merge,
  quick and radix sort, plus counting distinct values.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

### Sorting

Every sort returns a new ascending list and leaves its input untouched.

```python
from algokit.sorting import counting_sort, merge_sort, count_distinct

counting_sort([-4, -4, -2, -22, -11])   # [-22, -11, -4, -4, -2]
merge_sort([4, 5, 1, 0, 56, 2])         # [0, 1, 2, 4, 5, 56]
count_distinct([2, 3, 2, 2, 3])         # 2
```

`counting_sort` and `radix_sort` accept integers only and raise `TypeError`
otherwise; `radix_sort` also raises `ValueError` for negative numbers.
`insertion_sort`, `selection_sort`, `merge_sort` and `quick_sort` work on any
mutually comparable values.

### Graphs

Numbered graphs use the nodes `1..n`. Weighted edges are `(u, v, w)` triples
and unweighted edges are `(u, v)` pairs; an edge naming a node outside
`1..n` raises `ValueError`.

```python
from algokit.graphs import CycleError, has_cycle, topological_sort, tree_diameter

topological_sort(4, [(1, 2), (1, 3), (3, 4)])       # [1, 2, 3, 4]
has_cycle(3, [(1, 2), (2, 3), (3, 1)])              # True
tree_diameter(5, [(1, 2), (1, 3), (3, 4), (3, 5)])  # 3

try:
    topological_sort(3, [(1, 2), (2, 3), (3, 1)])
except CycleError:
    print("no topological order exists")
```

- `bfs(adjacency, start)` and `dfs(adjacency, start)` take a mapping from a
  node to its neighbours and return the reachable nodes in visiting order.
- `dijkstra(n, edges, source)` treats edges as undirected with non-negative
  weights and returns `(distances, parents)`; unreachable nodes have
  distance `math.inf`. `shortest_path(parents, source, target)` turns the
  parent map into a list of nodes.
- `bellman_ford(n, edges, source)` treats edges as directed, allows negative
  weights, and raises `NegativeCycleError` when a negative cycle can be
  reached from the source. `find_negative_cycle(n, edges, source)` returns
  such a cycle, starting and ending on the same node, or `None`.
- `floyd_warshall(n, edges)` returns all-pairs `(distances, next_hop)` over
  directed edges; `floyd_path(next_hop, source, target)` rebuilds a path.
- `node_depths(n, edges, root)` gives each node's depth in a tree, the root
  having depth 1 and nodes not connected to the root depth 0.
- `tree_diameter(n, edges)` counts the edges on the longest path of the tree
  containing node 1.

### Grids

```python
from algokit.grid import count_rooms

count_rooms([
    "########",
    "#..#...#",
    "####.#.#",
    "#..#...#",
    "########",
])  # 3
```

Rows of different lengths raise `ValueError`.

### Linked lists

```python
from algokit.linked_list import DoublyLinkedList, SinglyLinkedList, delete_node

items = SinglyLinkedList([1, 2, 3, 4, 5])
items.delete_at(4)       # returns 4
list(items)              # [1, 2, 3, 5]
items.insert(1, 30)
list(items)              # [30, 1, 2, 3, 5]

delete_node(items.find(2))
list(items)              # [30, 1, 3, 5]

both_ways = DoublyLinkedList([1, 2, 3])
list(reversed(both_ways))  # [3, 2, 1]
```

`SinglyLinkedList` also offers `append`, `prepend`, `pop_first` and
`pop_last`. Positions out of range and pops from an empty list raise
`IndexError`. `delete_node` removes a node without the head by copying the
next node's value into it, so it raises `ValueError` for the last node.

## Command line

Installing the package provides the `algokit` command. It reads its input
from standard input and prints one answer.

```
algokit rooms < map.txt
algokit distinct < numbers.txt
```

- `rooms` expects the height and width of the map followed by its rows,
  e.g. `3 4` and then three rows of four characters, and prints the number
  of rooms.
- `distinct` expects a count `n` followed by `n` integers and prints how
  many different values there are.

Malformed input is reported on standard error with exit status 1. See the
built-in help for details:

```
algokit --help
```

The command covers only these two tasks; the other algorithms are used
from Python.