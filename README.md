# dsbox

Classic data structures and algorithms in plain Python, with no
third-party dependencies: sorting routines, linked lists, deques, queues,
stacks, search trees, a trie, an open-addressing hash table, polynomial
and sparse-matrix arithmetic, a Cantor set generator and a radix sort over
fixed-width digit keys.

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

| Module | Contents |
| --- | --- |
| `dsbox.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `shell_sort`, `merge_sort`, `heap_sort`, `radix_sort` |
| `dsbox.quicksort` | `median`, `median_quick_sort`, `hoare_quick_sort`, `random_quick_sort`, `first_pivot_quick_sort` |
| `dsbox.linked_list` | `SinglyLinkedList`, `Student` |
| `dsbox.doubly_linked_list` | `DoublyLinkedList` |
| `dsbox.deque` | `BoundedDeque`, `LinkedDeque`, `DequeFullError`, `DequeEmptyError` |
| `dsbox.queues` | `ArrayQueue`, `LinkedQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsbox.stacks` | `ArrayStack`, `LinkedStack`, `QueueStack`, `StackFullError`, `StackEmptyError` |
| `dsbox.bst` | `KeyedBST`, `IntBST`, `DuplicateKeyError` |
| `dsbox.rbtree` | `RedBlackTree`, `RBNode`, `Color` |
| `dsbox.trie` | `Trie` |
| `dsbox.hashing` | `OpenAddressingTable` |
| `dsbox.polynomial` | `add_sparse_terms`, `add_term_lists`, `add_dense`, `multiply_dense` |
| `dsbox.sparse` | `SparseMatrix` |
| `dsbox.cantor` | `propagate`, `cantor_levels`, `format_level`, `main` |
| `dsbox.radix_words` | `encode_ascii`, `build_keys`, `radix_sort_strings` |

## Sorting

Every sort takes any iterable and returns a new ascending list; the input
is left untouched.

```python
import random
from dsbox.sorting import merge_sort, radix_sort
from dsbox.quicksort import random_quick_sort, median

merge_sort([67, 23, 65, 10, 9, -12, 0])        # [-12, 0, 9, 10, 23, 65, 67]
radix_sort([170, 45, 75, 90, 802, 24, 2, 66])  # [2, 24, 45, 66, 75, 90, 170, 802]
random_quick_sort([5, 3, 8, 1], random.Random(0))
median(3, 1, 2)                                # 2
```

`radix_sort` accepts only non-negative integers and raises `ValueError`
otherwise. `random_quick_sort` draws pivots from the `random.Random` it is
given, or from a fresh one when none is passed.

## Lists, deques, queues and stacks

```python
from dsbox.linked_list import SinglyLinkedList

items = SinglyLinkedList([1, 2, 3, 4, 5, 6, 7])
items.swap(4, 3)       # relinks the nodes; does nothing if either is missing
items.reverse()
list(items)            # [7, 6, 5, 3, 4, 2, 1]
3 in items             # True
```

`SinglyLinkedList` also offers `push_front`, `append`, `insert_at`,
`insert_after`, `pop_front`, `pop_back`, `remove`, `remove_where`, `sort`,
`max`, `union` and `intersection`. `Student` is a frozen record of
`rollno` and `name`, handy with `remove_where`.
`DoublyLinkedList` can be walked forwards and with `reversed()`, and has
`insert_after_position`, `delete_after` and `index`.

```python
from dsbox.stacks import ArrayStack
from dsbox.deque import LinkedDeque

stack = ArrayStack()   # capacity 5 unless given
stack.push(11)
stack.peek()           # 11

deque = LinkedDeque()
deque.push_back(1)
deque.push_front(0)
deque.front(), deque.back()   # (0, 1)
```

Fixed-capacity containers raise `DequeFullError`, `QueueFullError` or
`StackFullError` when full; reading from an empty one raises
`DequeEmptyError`, `QueueEmptyError` or `StackEmptyError` (all subclasses
of `IndexError`). `ArrayQueue` reclaims slots freed by dequeuing only once
it has been emptied completely, so it can report full while holding fewer
than `capacity` values. `QueueStack` is a stack kept in a queue with the
newest value at the front.

## Trees, trie and hash table

```python
from dsbox.rbtree import RedBlackTree
from dsbox.trie import Trie
from dsbox.hashing import OpenAddressingTable

tree = RedBlackTree()
for value in (15, 41, 22, 50, 33, 28, 11, 37):
    tree.insert(value)
tree.inorder()         # [11, 15, 22, 28, 33, 37, 41, 50]

trie = Trie()
for word in ("the", "a", "there", "answer", "any", "by", "bye", "their"):
    trie.insert(word)
"their" in trie        # True
trie.search("thaw")    # False

table = OpenAddressingTable()   # 20 slots unless given
table.insert(37, 97)
table.search(37)       # 97
table.delete(37)
```

- `KeyedBST` maps keys to elements, keeps duplicates, and raises
  `KeyError` for missing keys in `find` and `remove`.
- `IntBST` holds distinct values: inserting one already present raises
  `DuplicateKeyError`. It provides `inorder`, `preorder`, `postorder`
  and `maximum`.
- `Trie` accepts only lower-case letters `a`-`z`; `insert` and `search`
  raise `ValueError` for any other character.
- `OpenAddressingTable` hashes integer keys by `key % size`, probes
  linearly, leaves a tombstone on deletion, raises `KeyError` for missing
  keys and `OverflowError` when every slot is taken. `display()` returns
  the slots as text.

## Polynomials and sparse matrices

```python
from dsbox.polynomial import add_dense, multiply_dense
from dsbox.sparse import SparseMatrix

add_dense([1, 2], [3, 4, 5])        # [4, 6, 5]
multiply_dense([1, 1], [1, 1])      # [1, 2, 1]

a = SparseMatrix(2, 2, [(0, 0, 1)])
b = SparseMatrix(2, 2, [(1, 1, 2)])
print((a + b).render())
```

`add_sparse_terms` adds lists of `(exponent, coefficient)` pairs in
ascending exponent order; `add_term_lists` adds lists of
`(coefficient, exponent)` pairs given in descending exponent order and
returns them in ascending order. Adding sparse matrices of different
shapes raises `ValueError`.

## Radix-sorted keys

`dsbox.radix_words` turns each word into three-digit ASCII codes
(`encode_ascii`), joins it to a date string and pads it with zeros to 26
digits (`build_keys`), and sorts equal-length digit strings with a stable
LSD radix sort (`radix_sort_strings`).

## Command line

```
dsbox-cantor 0 1 3
```

prints levels 0 to 3 of the Cantor set built on the interval from 0 to 1,
one line per level listing the remaining intervals. Without arguments the
command reads the three integers from standard input. Invalid input gives
an error message and exit status 2.

## What it does not do

This is a library of in-memory structures. Apart from `dsbox-cantor`
there is no command or interactive menu, and nothing is saved to disk.