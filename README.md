# algolab

A small collection of classic data structures and algorithms written in plain
Python, with no runtime dependencies.

## Installation

```
pip install algolab
```

To run the test suite:

```
pip install "algolab[test]"
pytest
```

## What is inside

### Data structures

- `algolab.linked_list.LinkedList` is a doubly linked list closed into a ring
  by a sentinel node. It supports `append`, `appendleft`, `insert` (with
  `list.insert` semantics for out-of-range indices), indexing and item
  assignment (negative indices too), iteration in both directions, equality,
  `reverse` (in place), `middle` (the value `len // 2` steps from the front),
  `swap` with another list, `copy`, and loop detection: `create_loop` links the
  fourth node back to the first and `has_loop` reports such a cycle.
- `algolab.fifo_queue.Queue` is a first-in first-out queue with `push`, `pop`,
  `front`, `back`, `empty`, `clear` and `copy`. `pop` on an empty queue returns
  `None`; `front` and `back` raise `IndexError`.
- `algolab.stack.Stack` is a last-in first-out stack with `push`, `pop`,
  `top`, `empty`, `clear` and `copy`. It iterates from top to bottom; `pop` on
  an empty stack returns `None` and `top` raises `IndexError`.
- `algolab.hash_table.HashTable` is a separately chained hash table for `int`
  and `str` keys. Its capacity is 101 by default, or the next prime from a
  requested size, and it grows to the next prime above twice its capacity once
  more than half of its capacity is filled. It works as a mapping
  (`table[key] = value`, `table[key]`, `del table[key]`, `key in table`,
  `len`, iteration over keys) and also offers `insert`, `remove` (which
  ignores missing keys), `items`, `empty`, `capacity`, `clear`, `copy`,
  `buckets` and `render` (a text listing of every bucket). The module also
  exposes `is_prime`, `next_prime`, `int_key_hash` and `key_hash`.
- `algolab.text_string.CharString` is a mutable character string supporting
  concatenation with another `CharString` or a `str`, equality, indexing and
  single-character item assignment, `len`, `set_text` and `text`. Text given to
  it ends at the first NUL character.
- `algolab.heap.MaxHeap` and `algolab.heap.MinHeap` are list-backed binary
  heaps with `insert`, `extract`, `peek` and `sort`. `sort` returns a new
  heap-sorted list (ascending for `MaxHeap`, descending for `MinHeap`) and
  leaves the heap itself unchanged.

### Algorithms

- `algolab.sorting` provides `is_sorted`, `bubble_sort`, `insertion_sort`,
  `selection_sort`, `merge_sort`, `hybrid_merge_sort` (insertion sort for runs
  of at most `threshold` elements, default 4), `quick_sort` (Lomuto
  partition), `hybrid_quick_sort` (insertion sort for ranges shorter than
  `threshold`, default 5), `hoare_quick_sort`, `counting_sort` for integers,
  `radix_sort` for strings and `bogo_sort`. Every sort returns a new list and
  leaves its input untouched.
- `algolab.heap.heap_sort` sorts values in ascending order with a max-heap.
- `algolab.searching` provides `binary_search` (membership in an ascending
  sequence), `maximum` and `bogo_max`.
- `algolab.mathematics` provides binary exponentiation (`bin_pow_recursive`,
  `bin_pow_iterative`), `gcd`, `lcm`, `matrix_mul` and the sieve
  `get_primes`, which returns 2 followed by every odd prime below `n`.

`bogo_sort` and `bogo_max` take an optional `random.Random` instance so runs
can be made repeatable.

## Example

```python
from algolab.hash_table import HashTable
from algolab.linked_list import LinkedList
from algolab.mathematics import gcd, get_primes
from algolab.sorting import merge_sort

table = HashTable()
table["apple"] = "red"
table["banana"] = "yellow"
assert "banana" in table
del table["banana"]

items = LinkedList([3, 1, 4, 1, 5])
items.reverse()
print(list(items))                # [5, 1, 4, 1, 3]

print(merge_sort([5, 2, 9, 1]))   # [1, 2, 5, 9]
print(gcd(12, 20))                # 4
print(get_primes(20))             # [2, 3, 5, 7, 11, 13, 17, 19]
```

## What it does not do

algolab is a library only. It installs no command-line programs: there is
nothing that prompts for array sizes or elements, fills arrays with random
numbers, or prints results to the terminal. Callers pass their own data to the
functions and classes above and get the results back as Python values.