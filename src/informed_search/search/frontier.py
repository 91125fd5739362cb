"""Frontier (open list) implementations.

All frontiers share the ``insert(priority, node)`` / ``pop_min()`` interface so
the engine can drive them the same way. Ties are broken first-in-first-out in
every implementation; this decides which of several equally ranked nodes is
expanded first and therefore affects solution paths and node counts.
"""

import heapq
import itertools
from collections import deque
from typing import Deque, Dict, List, Tuple

from informed_search.core.errors import EmptyFrontier
from informed_search.search.node import SearchNode


class FIFOFrontier:
    """Plain first-in-first-out queue. The priority argument is ignored."""

    def __init__(self):
        self._queue: Deque[SearchNode] = deque()

    def insert(self, priority, node: SearchNode) -> None:
        self._queue.append(node)

    def pop_min(self) -> SearchNode:
        if not self._queue:
            raise EmptyFrontier("pop from an empty FIFO frontier")
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)


class PriorityFrontier:
    """Bucket queue keyed by integer priority.

    Each distinct priority owns a FIFO bucket; a min-heap holds the priorities
    that currently have a non-empty bucket. Insertion costs O(log B) when a new
    bucket is opened and O(1) otherwise, where B is the number of distinct
    priorities held. Extraction always takes the oldest node of the smallest
    priority and drops the bucket as soon as it empties.
    """

    def __init__(self):
        self._buckets: Dict[int, Deque[SearchNode]] = {}
        self._keys: List[int] = []
        self._size = 0

    def insert(self, priority: int, node: SearchNode) -> None:
        """Append a node to the bucket for ``priority``."""
        if not isinstance(priority, int) or isinstance(priority, bool):
            raise TypeError(f"Priority must be an int, got {type(priority).__name__}")

        bucket = self._buckets.get(priority)
        if bucket is None:
            bucket = deque()
            self._buckets[priority] = bucket
            heapq.heappush(self._keys, priority)
        bucket.append(node)
        self._size += 1

    def pop_min(self) -> SearchNode:
        """Remove and return the first node at the smallest priority.

        Raises:
            EmptyFrontier: If no nodes are held
        """
        if not self._keys:
            raise EmptyFrontier("pop from an empty priority frontier")

        key = self._keys[0]
        bucket = self._buckets[key]
        node = bucket.popleft()
        if not bucket:
            heapq.heappop(self._keys)
            del self._buckets[key]
        self._size -= 1
        return node

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0


class ExactPriorityFrontier:
    """Min-heap keyed by real-valued priority, FIFO among equal priorities.

    Used by the exact A* variant, where ``g + h`` is compared without
    truncation to an integer bucket.
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, SearchNode]] = []
        self._counter = itertools.count()  # insertion order tie-breaker

    def insert(self, priority: float, node: SearchNode) -> None:
        heapq.heappush(self._heap, (float(priority), next(self._counter), node))

    def pop_min(self) -> SearchNode:
        if not self._heap:
            raise EmptyFrontier("pop from an empty exact priority frontier")
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
