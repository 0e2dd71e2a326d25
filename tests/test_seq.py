from collections import deque

import pytest

from kelib.seq import erase_if, insert_at, move_extend, pop_back, pop_front, remove_at


def test_vector_ints():
    vector = []
    vector.extend([1, 2, 3, 4, 5])
    assert vector == [1, 2, 3, 4, 5]

    assert pop_back(vector) == 5
    assert pop_back(vector) == 4
    assert len(vector) == 3

    insert_at(vector, 0, 88)
    insert_at(vector, 0, 99)
    insert_at(vector, 4, 111)
    assert vector == [99, 88, 1, 2, 111, 3]

    remove_at(vector, 5)
    assert vector[4] == 111
    remove_at(vector, 0)
    assert vector[0] == 88
    assert vector[3] == 111
    assert len(vector) == 4


def test_insert_at_end():
    vector = []
    insert_at(vector, 0, 555)
    assert vector == [555]


def test_erase_if():
    items = [1, 2, 3, 4, 5]
    removed = erase_if(items, lambda item: item % 2 == 0)
    assert items == [1, 3, 5]
    assert removed == 2


def test_erase_if_on_deque():
    dq = deque(range(6))
    erase_if(dq, lambda item: item > 3)
    assert list(dq) == [0, 1, 2, 3]


def test_move_extend():
    dest = [1, 2]
    src = [3, 4]
    move_extend(dest, src)
    assert dest == [1, 2, 3, 4]
    assert src == []

    empty = []
    other = [7]
    move_extend(empty, other)
    assert empty == [7]
    assert other == []


def test_index_errors():
    vector = [1, 2, 3]
    with pytest.raises(IndexError):
        remove_at(vector, 3)
    with pytest.raises(IndexError):
        remove_at(vector, -1)
    with pytest.raises(IndexError):
        insert_at(vector, 4, 0)
    with pytest.raises(IndexError):
        pop_back([])
    with pytest.raises(IndexError):
        pop_front(deque())
    assert vector == [1, 2, 3]


def test_deque_basic():
    dq = deque()
    for i in range(4):
        dq.append(i)
        assert len(dq) == i + 1
    for i in range(4):
        dq.appendleft(i + 4)
        assert len(dq) == i + 5

    assert dq[-1] == 3
    assert dq[0] == 7
    dq.pop()
    dq.popleft()
    assert pop_front(dq) == 6
    assert pop_back(dq) == 2
    assert len(dq) == 4

    while dq:
        pop_back(dq)
    assert len(dq) == 0


def test_deque_prepend_empty():
    dq = deque()
    for i in range(8):
        if i % 2 == 0:
            dq.appendleft(i)
        else:
            dq.append(i)
        assert len(dq) == i + 1
    while dq:
        pop_front(dq)
    assert len(dq) == 0


def test_deque_resize():
    dq = deque()
    for i in range(387):
        dq.appendleft(i)
    for i in range(293):
        dq.append(i)
    assert len(dq) == 293 + 387

    for i in range(292, -1, -1):
        assert pop_back(dq) == i
    for i in range(386, -1, -1):
        assert pop_front(dq) == i

    dq.append(5)
    assert pop_front(dq) == 5
    dq.append(6)
    assert pop_back(dq) == 6
    dq.appendleft(7)
    assert pop_back(dq) == 7
    dq.appendleft(8)
    assert pop_front(dq) == 8


def test_deque_move():
    dq1 = deque([10])
    dq2 = deque()
    move_extend(dq2, dq1)
    assert len(dq2) == 1
    assert pop_front(dq2) == 10
    assert len(dq1) == 0
    dq1.append(11)
    assert pop_front(dq1) == 11


def test_pop_front_on_list():
    items = [4, 5, 6]
    assert pop_front(items) == 4
    assert items == [5, 6]