import random

import pytest

from hsearchiver.priority_queue import PriorityQueue


class _OnlyLess:
    def __init__(self, key):
        self.key = key

    def __lt__(self, other):
        return self.key < other.key


def test_pops_in_sorted_order():
    values = [random.Random(seed).randint(-100, 100) for seed in range(60)]
    queue = PriorityQueue()
    for value in values:
        queue.push(value)
    assert [queue.pop() for _ in range(len(values))] == sorted(values)


def test_len_tracks_pushes_and_pops():
    queue = PriorityQueue()
    for value in (5, 3, 9):
        queue.push(value)
    assert len(queue) == 3
    queue.pop()
    assert len(queue) == 2


def test_peek_returns_minimum_without_removing():
    queue = PriorityQueue()
    for value in (7, 2, 4):
        queue.push(value)
    assert queue.peek() == 2
    assert len(queue) == 3


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue().peek()


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue().pop()


def test_items_with_only_less_than():
    keys = [9, 1, 8, 2, 7, 3, 6, 4, 5, 0]
    queue = PriorityQueue()
    for key in keys:
        queue.push(_OnlyLess(key))
    assert [queue.pop().key for _ in keys] == sorted(keys)


def test_interleaved_push_and_pop():
    queue = PriorityQueue()
    queue.push(10)
    queue.push(4)
    assert queue.pop() == 4
    queue.push(1)
    queue.push(12)
    assert [queue.pop() for _ in range(3)] == [1, 10, 12]
    assert len(queue) == 0