"""Basic data structures and algorithms: a heap priority queue, a hash table, a red-black tree map and sorts."""

__version__ = "0.1.0"
__all__ = [
    "date",
    "hashtable",
    "person",
    "priority_queue",
    "rbtree",
    "sorting",
    "task",
    "treemap",
]