"""Tests for the at-most-one-membership FIFO work set."""

import pytest

from resdist.push.queue import WorkQueue


class TestFifoOrder:
    def test_pops_in_insertion_order(self) -> None:
        q = WorkQueue(5)
        for node in (3, 1, 4):
            q.push(node)
        assert [q.pop(), q.pop(), q.pop()] == [3, 1, 4]

    def test_empty_queue_is_falsy(self) -> None:
        q = WorkQueue(2)
        assert not q
        q.push(0)
        assert q
        q.pop()
        assert not q

    def test_pop_empty_raises(self) -> None:
        with pytest.raises(IndexError):
            WorkQueue(1).pop()


class TestMembership:
    """Enqueueing a queued node is a no-op; dequeue clears membership."""

    def test_duplicate_push_is_noop(self) -> None:
        q = WorkQueue(3)
        q.push(2)
        q.push(2)
        q.push(2)
        assert len(q) == 1

    def test_duplicate_does_not_change_position(self) -> None:
        q = WorkQueue(3)
        q.push(0)
        q.push(1)
        q.push(0)
        assert [q.pop(), q.pop()] == [0, 1]
        assert not q

    def test_requeue_after_pop(self) -> None:
        q = WorkQueue(3)
        q.push(1)
        assert q.pop() == 1
        assert 1 not in q
        q.push(1)
        assert 1 in q
        assert len(q) == 1
