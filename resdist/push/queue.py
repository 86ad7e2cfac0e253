"""FIFO work set with at-most-one membership per node."""

from collections import deque

import numpy as np


class WorkQueue:
    """FIFO queue of node ids paired with a membership flag per node.

    Pushing a node that is already queued is a no-op; popping a node clears
    its flag so it may be queued again later.
    """

    def __init__(self, n: int):
        self._queue: deque[int] = deque()
        self._queued = np.zeros(n, dtype=bool)

    def push(self, node: int) -> None:
        if not self._queued[node]:
            self._queue.append(node)
            self._queued[node] = True

    def pop(self) -> int:
        node = self._queue.popleft()
        self._queued[node] = False
        return node

    def __contains__(self, node: int) -> bool:
        return bool(self._queued[node])

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)
