# arbortools

Classic binary tree algorithms in plain Python with no runtime dependencies:
traversals, structural checks, tree construction, searching and binary search
tree operations. A small weighted directed graph with shortest-path search and
a cheapest-collection helper are included as well.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Building trees

Trees are made of `arbortools.node.Node` objects, a dataclass with `value`,
`left` and `right`. Nodes compare by identity, not by value.

`from_level_order(values)` builds a tree from a level-order listing in which
`None` marks a missing child. An empty listing gives `None`; values left over
with no node to hang from raise `ValueError`.

```python
from arbortools.node import from_level_order

root = from_level_order([1, 2, 3, None, 5, 6, 7])
```

`arbortools.construction` offers other ways in:

- `tree_from_parent_array(parents)`: node `i` has parent `parents[i]`, `-1` marks
  the root, and node values are their indices. The first child of a parent goes
  left, the second right. Malformed arrays raise `ValueError`.
- `tree_from_inorder_preorder(inorder, preorder)`: rebuilds a tree of distinct
  values; inconsistent listings raise `ValueError`.
- `can_represent_bst(preorder)`: whether a sequence can be the pre-order listing
  of a binary search tree.
- `bst_from_preorder(preorder)`: rebuilds that tree, raising `ValueError` when
  the sequence is not such a listing.
- `insert_level_order(root, value)`: fills the first free child slot breadth-first.
- `delete_level_order(root, value)`: overwrites the matching node with the
  deepest, rightmost value and detaches that node.
- `count_unique_bsts(n, modulus=1_000_000_007)`: the Catalan number of `n`,
  reduced by `modulus`.

## Traversals

`arbortools.traversal` returns lists of values:

- `inorder`, `preorder`, `postorder` and the explicit-stack versions
  `inorder_iterative`, `preorder_iterative`, `postorder_iterative`.
- `level_order` (one list per depth), `zigzag_level_order`, `zigzag_traversal`
  (the zigzag levels flattened) and `zigzag_extremes` (rightmost value on even
  depths, leftmost on odd ones).
- `vertical_order`: columns by horizontal distance, leftmost first.
- `boundary`: root, left edge, leaves, then the right edge bottom-up.
- `height` counts nodes on the longest path (0 when empty); `height_iterative`
  counts levels breadth-first (-1 when empty).

```python
from arbortools.traversal import boundary, inorder, level_order

inorder(root)
level_order(root)
boundary(root)
```

## Tree properties

`arbortools.properties`:

- `is_balanced`, `is_symmetric`, and `diameter` (nodes on the longest path).
- `is_sum_tree` (single pass), `is_sum_tree_naive` and `has_children_sum_property`.
- `count_single_valued_subtrees` and `largest_bst_size`.
- `are_identical` (shape and values), `are_identical_level_order` (compares only
  the breadth-first value sequence), `are_identical_by_traversals`, and
  `preorder_with_markers` (pre-order with `None` for each missing child).
- `is_subtree(root, candidate)`.
- `mirror(root)`: swaps children throughout the tree in place.

`arbortools.metrics`:

- `edge_height` (edges on the longest path, -1 when empty), `level_depth` and
  `largest_per_level`.
- `mirror_level_order`, `is_symmetric_iterative`, and `same_shape_level_order`
  (an empty tree on either side counts as a mismatch).
- `circular_inorder(root)`: a fresh circular doubly linked list of the in-order
  values, `right` pointing forward and `left` back; the tree is not changed.

## Searching

`arbortools.search`:

- `contains(root, value)` and `find_path(root, value)` (values from the root
  down, `[]` when absent).
- `lowest_common_ancestor(root, first, second)` returns the ancestor node;
  `lca_by_paths` returns its value. Both raise `ValueError` for absent values.
- `depth_of(root, value)` and `distance_between(root, first, second)`, in edges.
- `leaf_values` (breadth-first) and `max_root_to_leaf_sum`.
- `max_sibling_gcd(root)` and `max_sibling_gcd_from_pairs(pairs)` with
  `(parent, child)` edges; both give 0 when there are no siblings.
- `inorder_successor(root, node)` takes a node of the tree and returns the next
  node in order, or `None` when it is last.
- `kth_largest(root, k)` and `kth_smallest(root, k)`, 1-based.
- `has_pair_with_sum(root, target)`: whether two values of a binary search tree
  add up to `target`.

## Binary search trees

`arbortools.bst`:

- `insert` and `insert_iterative` (duplicates are ignored) and `delete`.
- `find_min` and `validate_bst` (strict ordering).
- `sorted_to_bst(values)`: a height-balanced tree from sorted values.
- `greater_sum_tree(root)`: replaces each value with the sum of all greater values.
- `trim_to_range(root, low, high)`: drops every node outside `[low, high]`.

## Shortest paths

```python
from arbortools.graph import Graph

graph = Graph(6)
graph.add_edge(0, 1, 2)
graph.add_edge(1, 2, 3)
graph.add_edge(1, 5, 4)
graph.add_edge(2, 3, 1)
graph.shortest_paths(0)
graph.shortest_paths_ordered(0)
```

`Graph(nodes)` is directed on nodes `0 .. nodes - 1`. `add_edge` raises
`IndexError` for unknown nodes and `ValueError` for negative weights.
`shortest_paths` uses a binary heap and `shortest_paths_ordered` an ordered
frontier; both return a list of distances with `math.inf` for unreachable nodes.

## Antique collection

`arbortools.antiques.cheapest_collection_cost(items, prices)` adds up the lowest
price offered for each distinct item kind. Listings of different lengths raise
`ValueError`.

## What it does not do

The package is a library only: it has no command-line program, and trees and
graphs live in memory with no way to save or load them.