import pytest

from zastavky.implicit_sequence import CyclicImplicitSequence, ImplicitSequence

N = 10


def _fill(seq, n=N):
    for i in range(n):
        seq.insert_last(i)
    return seq


def test_index_of_relative():
    seq = _fill(ImplicitSequence())
    assert seq.index_of_next(0) == 1
    assert seq.index_of_previous(5) == 4
    assert seq.index_of_previous(0) is None
    assert seq.index_of_next(N - 1) is None


def test_cyclic_index_of_relative():
    seq = _fill(CyclicImplicitSequence())
    assert seq.index_of_next(0) == 1
    assert seq.index_of_previous(5) == 4
    assert seq.index_of_previous(0) == N - 1
    assert seq.index_of_next(N - 1) == 0


def test_cyclic_empty_has_no_neighbours():
    seq = CyclicImplicitSequence()
    assert seq.index_of_next(0) is None
    assert seq.index_of_previous(0) is None


def test_insert_last_and_iterate():
    seq = _fill(ImplicitSequence())
    assert len(seq) == N
    assert list(seq) == list(range(N))
    assert seq.access_first() == 0
    assert seq.access_last() == N - 1


def test_insert_positions():
    seq = ImplicitSequence()
    seq.insert_last(2)
    seq.insert_first(0)
    seq.insert(1, 1)
    seq.insert(3, 3)
    assert list(seq) == [0, 1, 2, 3]


def test_insert_out_of_range():
    seq = _fill(ImplicitSequence(), 3)
    with pytest.raises(IndexError):
        seq.insert(5, 99)


def test_access_and_set():
    seq = _fill(ImplicitSequence())
    seq.set(4, 40)
    assert seq.access(4) == 40
    with pytest.raises(IndexError):
        seq.access(N)
    with pytest.raises(IndexError):
        seq.set(-1, 0)


def test_empty_access_raises():
    seq = ImplicitSequence()
    with pytest.raises(IndexError):
        seq.access_first()
    with pytest.raises(IndexError):
        seq.access_last()
    with pytest.raises(IndexError):
        seq.remove_last()
    with pytest.raises(IndexError):
        seq.remove_first()


def test_removals():
    seq = _fill(ImplicitSequence())
    seq.remove_last()
    seq.remove_first()
    seq.remove(2)
    assert list(seq) == [1, 2, 4, 5, 6, 7, 8]


def test_swap_reverses():
    seq = _fill(ImplicitSequence())
    for i in range(N // 2):
        seq.swap(i, N - i - 1)
    assert list(seq) == list(range(N - 1, -1, -1))


def test_clear():
    seq = _fill(ImplicitSequence())
    seq.clear()
    assert len(seq) == 0
    assert list(seq) == []


def test_equality():
    assert _fill(ImplicitSequence()) == _fill(ImplicitSequence())
    other = _fill(ImplicitSequence())
    other.set(4, 10)
    assert not (_fill(ImplicitSequence()) == other)


def test_init_blocks():
    seq = ImplicitSequence(5, True)
    assert len(seq) == 5
    assert list(seq) == [None] * 5


def test_capacity_grows_and_reserve():
    seq = ImplicitSequence(2)
    for i in range(5):
        seq.insert_last(i)
    assert seq.capacity >= 5
    seq.reserve_capacity(100)
    assert seq.capacity == 100
    seq.reserve_capacity(1)
    assert seq.capacity == len(seq)
    with pytest.raises(ValueError):
        seq.reserve_capacity(-1)