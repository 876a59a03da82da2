# arboreto

Small, readable implementations of three classic data structures for
coursework and self-study, each with a console demo:

- `arboreto.maxheap.MaxHeap` — an array-backed max-heap of integers with
  insertion, root access and removal, heapsort and value search, plus the
  helpers `is_min_heap(values)` and `heapify_max(values)`.
- `arboreto.bst.BinarySearchTree` — an unbalanced binary search tree
  (equal values go to the right) with sums, means, range queries, shape
  checks (full, complete, strictly binary), per-level means and node
  heights.
- `arboreto.avl.AVLTree` — a self-balancing AVL tree of distinct integers
  with insertion, removal, search and in-order traversal.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Max-heap

```python
from arboreto.maxheap import MaxHeap, is_min_heap, heapify_max

heap = MaxHeap()
for value in (32, 11, 15, 20, 76, 23, 17, 50, 33, 80):
    heap.insert(value)

heap.root()          # 80; raises IndexError on an empty heap
heap.remove_root()   # removes the largest value; no-op when empty
heap.heapsort()      # values in ascending order; the heap is unchanged
heap.find(50)        # index of 50 in the heap's array, or None
heap.as_list()       # copy of the array in heap order
print(heap.format_list())   # "76, 50, ..." in heap order
print(heap.format_tree())   # pre-order drawing, "--" per level

is_min_heap([1, 3, 6, 5, 9, 8])   # True

values = [5, 10, 15, 20, 25, 30]
heapify_max(values)               # rearranges the list in place
```

`len(heap)` and `heap.is_empty()` report the number of stored values.

## Binary search tree

```python
from arboreto.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (50, 30, 70, 20, 40):
    tree.insert(value)

tree.total()                  # 210
tree.mean()                   # 42.0 (0.0 for an empty tree)
tree.values_in_range(25, 60)  # [30, 40, 50]
tree.is_full()                # True
tree.is_complete()            # True
tree.is_strictly_binary()     # True
tree.count_greater(35)        # 3
tree.level_mean(1)            # 50.0, mean of the values at depth 1
tree.compute_heights()        # [(value, height), ...] in post-order, leaves 0
40 in tree                    # True
tree.find(40)                 # the BSTNode holding 40, or None
tree.remove(30)               # absent values are ignored
```

## AVL tree

```python
from arboreto.avl import AVLTree

tree = AVLTree()
for value in (30, 20, 40, 10, 25, 35, 50, 5, 15):
    tree.insert(value)     # inserting a value already present does nothing
tree.remove(40)

list(tree)                 # values in ascending order, same as tree.in_order()
tree.height()              # 0 when empty, 1 for a single node
tree.find(25)              # the AVLNode holding 25, or None; node.balance()
print(tree.format_tree())  # sideways drawing, right subtree on top
print(tree.format_in_order())
```

An empty tree formats as `Árvore vazia.`

## Demos

Three console programs are installed; their prompts and messages are in
Portuguese.

- `arboreto-heap` — a menu-driven session over a max-heap preloaded with
  ten values: insert, view or remove the root, print as list or tree,
  heapsort, search, check whether a fixed array is a min-heap, and turn a
  fixed array into a max-heap. Option 10 or end of input ends the session.
- `arboreto-bst` — reads a count and that many integers, builds a binary
  search tree and reports its sum, mean and shape checks, then reads a
  reference value, a level and an interval and reports on each, and
  finally prints the height of every node. A missing or malformed number
  ends the program with a message on standard error and exit status 1.
- `arboreto-avl` — inserts a fixed sequence into an AVL tree, printing the
  tree after each step, then removes 40 and 30 and prints the values in
  order. It reads no input.

Each demo can also be started with `python -m`, for example
`python -m arboreto.avl_cli`.

## What it does not do

The structures live in memory only: nothing is saved to or loaded from
files. The binary search tree performs no rebalancing.