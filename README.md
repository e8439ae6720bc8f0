# dsbasics

Small, self-contained implementations of classic data structures and
algorithms, with no dependencies outside the standard library.

## Contents

- `dsbasics.priority_queue.PriorityQueue`: a binary min-heap ordered by `<`.
  `push(item)`, `pop()` (does nothing when empty), `top()` (raises
  `IndexError` when empty), `remove(item)` (removes the last stored item
  equal to `item`, raises `ValueError` if there is none), `is_empty()` and
  `len()`.
- `dsbasics.date.Date`: a frozen day/month/year date without leap years
  (February always has 28 days). `is_valid()`, ordering with `<`, `str()` as
  `day/month/year`, and `date + days`, which raises `ValueError` when adding
  a positive number of days to an invalid date.
- `dsbasics.task.Task`: a task with `code`, `priority` and `date`. Tasks are
  ordered by priority, then by date, and are equal when their codes match.
- `dsbasics.person.Person`: a `name` and an `age`, shown as `(name, age)`.
  `a > b` holds only when the ages are equal and `a`'s name sorts after `b`'s.
- `dsbasics.hashtable.HashTable`: a string dictionary with open addressing
  and quadratic probing. The table doubles in capacity once the load factor
  is reached and raises `HashTableFullError` when no free slot can be found.
  - `insert(key, description)` adds a key; a key already stored is left as it is.
  - `find(key)` returns the description, or `None`.
  - `remove(key)` returns whether the key was stored.
  - `lookup(key)` / `table[key]` return the key itself when it is stored,
    otherwise the default description.
  - `slot(index)` / `table[index]` return the `(key, description)` pair at a slot.
  - `str(table)` lists the occupied slots; `capacity` and `len()` report size.
- `dsbasics.rbtree.RedBlackTree`: a red-black tree ordered by `<` that
  stores equal values once. `insert`, `search` (returns the stored value or
  `None`), `is_empty`, `is_leaf`, `copy`, and `render()` / `str()`, which
  draw the tree in preorder, one node per line with its colour.
  `RedBlackTree.load(path, parse)` builds a tree from a whitespace-separated
  preorder description: the height, a 0/1 flag for the root, then for every
  node a token converted with `parse` followed by flags for its subtrees.
- `dsbasics.treemap.TreeMap`: an ordered map on top of the red-black tree,
  holding `KeyValue` entries compared by key. `add(key, value)` inserts or
  replaces, `map[key]` returns the value or `None`, plus `is_empty()`,
  `copy()` and `str()`.
- `dsbasics.sorting`: in-place `selection_sort` and `quicksort` over an
  inclusive index range (the whole list by default), the helpers
  `position_of_min` and `partition`, and `max_element`, which returns the
  largest value or `0` for an empty or all-negative input.

## Installation

```
pip install .
```

## Example

```python
from dsbasics.priority_queue import PriorityQueue
from dsbasics.task import Task
from dsbasics.date import Date

queue = PriorityQueue()
queue.push(Task("T1", 5, Date(1, 1, 2018)))
queue.push(Task("T2", 1, Date(1, 1, 2017)))
print(queue.top().code)   # T2

from dsbasics.sorting import quicksort

values = [3, 1, 2]
quicksort(values)
print(values)             # [1, 2, 3]

from dsbasics.treemap import TreeMap
from dsbasics.person import Person

people = TreeMap()
people.add("NOM_A", Person("NOM_A", 10))
print(people["NOM_A"])    # (NOM_A, 10)
```

## Limitations

This is a library only; it has no command-line program. The red-black tree
and the tree map cannot delete entries, and `HashTable.insert` never changes
the description of a key that is already stored.

## Running the tests

```
pip install .[test]
pytest
```