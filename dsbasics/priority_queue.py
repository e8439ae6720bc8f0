"""A binary min-heap priority queue."""


class PriorityQueue:
    """Priority queue whose top is the smallest item by ``<``."""

    def __init__(self):
        self._items = []

    def is_empty(self):
        """True when the queue holds no items."""
        return not self._items

    def __len__(self):
        return len(self._items)

    def top(self):
        """Return the smallest item without removing it."""
        if not self._items:
            raise IndexError("top of an empty priority queue")
        return self._items[0]

    def push(self, item):
        """Add an item and restore the heap order above it."""
        items = self._items
        items.append(item)
        pos = len(items) - 1
        while pos != 0:
            parent = (pos - 1) // 2
            if not items[pos] < items[parent]:
                break
            items[pos], items[parent] = items[parent], items[pos]
            pos = parent

    def pop(self):
        """Remove the top item; does nothing on an empty queue."""
        if self._items:
            self._take_out(0)

    def remove(self, item):
        """Remove the last stored item equal to ``item``.

        The last item takes its place and the heap is then repaired from
        the root only.
        """
        matches = [index for index, stored in enumerate(self._items) if stored == item]
        if not matches:
            raise ValueError(f"{item!r} is not in the priority queue")
        self._take_out(matches[-1])

    def _take_out(self, pos):
        items = self._items
        items[pos], items[-1] = items[-1], items[pos]
        items.pop()
        self._sift_down(0)

    def _sift_down(self, pos):
        items = self._items
        size = len(items)
        while True:
            left, right = 2 * pos + 1, 2 * pos + 2
            smallest = pos
            if left < size and items[left] < items[pos]:
                smallest = left
            if right < size and items[right] < items[smallest]:
                smallest = right
            if smallest == pos:
                return
            items[pos], items[smallest] = items[smallest], items[pos]
            pos = smallest