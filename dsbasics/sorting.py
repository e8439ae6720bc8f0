"""Recursive-style sorting and searching over lists of numbers."""


def position_of_min(values, start, end):
    """Index of the first smallest value in ``values[start..end]`` (inclusive)."""
    return min(range(start, end + 1), key=values.__getitem__)


def selection_sort(values, start=0, end=None):
    """Sort ``values[start..end]`` (inclusive) in place by selection."""
    if end is None:
        end = len(values) - 1
    for pos in range(start, end):
        smallest = position_of_min(values, pos, end)
        values[pos], values[smallest] = values[smallest], values[pos]


def max_element(values):
    """Largest value, counting from zero: empty or all-negative input gives 0."""
    return max((0, *values))


def partition(values, start, end):
    """Partition ``values[start..end]`` around ``values[end]``; return the pivot's final index."""
    pivot = values[end]
    pos = start
    for index in range(start, end):
        if values[index] < pivot:
            values[pos], values[index] = values[index], values[pos]
            pos += 1
    values[end], values[pos] = values[pos], values[end]
    return pos


def quicksort(values, start=0, end=None):
    """Sort ``values[start..end]`` (inclusive) in place with quicksort."""
    if end is None:
        end = len(values) - 1
    while start < end:
        pivot = partition(values, start, end)
        if pivot - start < end - pivot:
            quicksort(values, start, pivot - 1)
            start = pivot + 1
        else:
            quicksort(values, pivot + 1, end)
            end = pivot - 1