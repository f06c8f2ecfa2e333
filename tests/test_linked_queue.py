import pytest

from dsbasics.linked_queue import LinkedQueue

NUMS = [11, 22, 33, 44, 55]


def filled():
    queue = LinkedQueue()
    for value in NUMS:
        queue.push(value)
    return queue


def test_size_after_pushes():
    assert len(filled()) == 5


def test_fifo_drain():
    queue = filled()
    out = []
    while not queue.is_empty():
        out.append(queue.front())
        queue.pop()
    assert out == NUMS
    assert len(queue) == 0


def test_pop_returns_front():
    queue = filled()
    assert queue.pop() == NUMS[0]
    assert queue.front() == NUMS[1]
    assert len(queue) == len(NUMS) - 1


def test_front_and_rear():
    queue = filled()
    assert queue.front() == NUMS[0]
    assert queue.rear() == NUMS[-1]


def test_rear_follows_push():
    queue = filled()
    queue.push(66)
    assert queue.rear() == 66
    assert queue.front() == NUMS[0]


def test_empty_queue_errors():
    queue = LinkedQueue()
    assert queue.is_empty() is True
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.front()
    with pytest.raises(IndexError):
        queue.rear()


def test_reuse_after_drain():
    queue = filled()
    for _ in NUMS:
        queue.pop()
    queue.push("x")
    assert queue.front() == queue.rear() == "x"
    assert queue.is_empty() is False