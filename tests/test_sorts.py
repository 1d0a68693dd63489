import random

import pytest

from zastavky.implicit_sequence import ImplicitSequence
from zastavky.sorts import ShellSort, shell_sort


@pytest.mark.parametrize("size", [0, 1, 2, 5, 10, 11, 57, 100, 101, 350])
def test_shell_sort_list_matches_sorted(size):
    rng = random.Random(size)
    values = [rng.randint(-50, 50) for _ in range(size)]
    expected = sorted(values)
    shell_sort(values)
    assert values == expected


def test_shell_sort_implicit_sequence():
    rng = random.Random(7)
    data = [rng.randint(0, 1000) for _ in range(150)]
    seq = ImplicitSequence()
    for value in data:
        seq.insert_last(value)
    ShellSort().sort(seq, lambda a, b: a < b)
    assert list(seq) == sorted(data)


def test_shell_sort_descending_comparator():
    values = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5, 8, 9, 7]
    expected = sorted(values, reverse=True)
    shell_sort(values, lambda a, b: a > b)
    assert values == expected


def test_shell_sort_keeps_elements():
    rng = random.Random(3)
    words = ["".join(rng.choice("abcdef") for _ in range(4)) for _ in range(40)]
    original = list(words)
    ShellSort().sort(words, lambda a, b: a.lower() < b.lower())
    assert sorted(original) == sorted(words)
    assert all(a <= b for a, b in zip(words, words[1:]))


def test_shell_sort_by_key_on_objects():
    records = [("b", 2), ("a", 3), ("c", 1), ("d", 0)]
    shell_sort(records, lambda x, y: x[1] < y[1])
    assert [r[1] for r in records] == [0, 1, 2, 3]


def test_shell_sort_already_sorted_unchanged():
    values = list(range(30))
    shell_sort(values)
    assert values == list(range(30))