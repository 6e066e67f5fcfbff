import pytest

from algobox.structures import MinStack, MyCircularDeque, MyQueue, MyStack, StockSpanner


# StockSpanner

def test_stock_spanner_example():
    spanner = StockSpanner()
    spans = [spanner.next(p) for p in [100, 80, 60, 70, 60, 75, 85]]
    assert spans == [1, 1, 1, 2, 1, 4, 6]


def test_stock_spanner_rising_prices_span_whole_history():
    spanner = StockSpanner()
    prices = [3, 5, 8, 13, 21]
    assert [spanner.next(p) for p in prices] == list(range(1, len(prices) + 1))


def test_stock_spanner_falling_prices_span_one_day():
    spanner = StockSpanner()
    assert [spanner.next(p) for p in [50, 40, 30, 20]] == [1, 1, 1, 1]


def test_stock_spanner_equal_prices_accumulate():
    spanner = StockSpanner()
    spans = [spanner.next(7) for _ in range(4)]
    assert spans == list(range(1, 5))


# MyCircularDeque

def test_circular_deque_fills_and_refuses():
    dq = MyCircularDeque(3)
    assert dq.insert_last(1) is True
    assert dq.insert_last(2) is True
    assert dq.insert_front(3) is True
    assert dq.insert_front(4) is False
    assert dq.is_full() is True
    assert dq.get_front() == 3
    assert dq.get_rear() == 2
    assert dq.delete_last() is True
    assert dq.insert_front(4) is True
    assert dq.get_front() == 4
    assert len(dq) == 3


def test_circular_deque_empty_behaviour():
    dq = MyCircularDeque(2)
    assert dq.is_empty() is True
    assert dq.get_front() == -1
    assert dq.get_rear() == -1
    assert dq.delete_front() is False
    assert dq.delete_last() is False


def test_circular_deque_order_round_trip():
    dq = MyCircularDeque(5)
    values = [10, 20, 30, 40, 50]
    for v in values:
        assert dq.insert_last(v)
    drained = []
    while not dq.is_empty():
        drained.append(dq.get_front())
        dq.delete_front()
    assert drained == values


def test_circular_deque_front_inserts_reverse():
    dq = MyCircularDeque(4)
    values = [1, 2, 3, 4]
    for v in values:
        dq.insert_front(v)
    drained = []
    while not dq.is_empty():
        drained.append(dq.get_rear())
        dq.delete_last()
    assert drained == values


def test_circular_deque_zero_capacity():
    dq = MyCircularDeque(0)
    assert dq.insert_last(1) is False
    assert dq.is_full() and dq.is_empty()


def test_circular_deque_negative_capacity():
    with pytest.raises(ValueError):
        MyCircularDeque(-1)


# MyQueue

def test_queue_is_first_in_first_out():
    queue = MyQueue()
    values = [4, 8, 15, 16, 23, 42]
    for v in values:
        queue.push(v)
    assert queue.peek() == values[0]
    assert [queue.pop() for _ in values] == values
    assert queue.empty() is True


def test_queue_interleaved_operations():
    queue = MyQueue()
    queue.push(1)
    queue.push(2)
    assert queue.pop() == 1
    queue.push(3)
    assert queue.peek() == 2
    assert queue.pop() == 2
    assert queue.pop() == 3
    assert queue.empty() is True


def test_queue_empty_errors():
    queue = MyQueue()
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.peek()


# MyStack

def test_stack_is_last_in_first_out():
    stack = MyStack()
    values = [4, 8, 15, 16, 23, 42]
    for v in values:
        stack.push(v)
    assert stack.top() == values[-1]
    assert [stack.pop() for _ in values] == values[::-1]
    assert stack.empty() is True


def test_stack_empty_errors():
    stack = MyStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()


# MinStack

def test_min_stack_tracks_minimum_through_pushes_and_pops():
    stack = MinStack()
    values = [5, 3, 7, 3, 2, 8, -4, 10, -4]
    for i, v in enumerate(values):
        stack.push(v)
        assert stack.top() == v
        assert stack.get_min() == min(values[: i + 1])
    for i in range(len(values) - 1, 0, -1):
        stack.pop()
        assert stack.top() == values[i - 1]
        assert stack.get_min() == min(values[:i])


def test_min_stack_handles_extreme_values():
    stack = MinStack()
    stack.push(2**31 - 1)
    stack.push(-(2**31))
    assert stack.get_min() == -(2**31)
    stack.pop()
    assert stack.get_min() == 2**31 - 1
    assert stack.top() == 2**31 - 1


def test_min_stack_empty_behaviour():
    stack = MinStack()
    assert stack.top() == -1
    stack.pop()
    with pytest.raises(IndexError):
        stack.get_min()