import pytest
from types import SimpleNamespace
from underbar.core.types import ABSENT
from underbar.functional.derived import (
    contains,
    every,
    filter,
    first,
    last,
    map,
    pluck,
    reduce,
    reject,
    some,
    uniq,
)


def is_even(x):
    return x % 2 == 0


@pytest.fixture
def numbers():
    return [1, 2, 3, 4, 5, 6]


def test_filter_keeps_order(numbers):
    assert filter(numbers, is_even) == [2, 4, 6]
    assert numbers == [1, 2, 3, 4, 5, 6]


def test_filter_calls_predicate_once_per_element(numbers):
    calls = []

    def predicate(x):
        calls.append(x)
        return True

    filter(numbers, predicate)
    assert calls == numbers


def test_filter_over_mapping_values():
    assert filter({"a": 1, "b": 2, "c": 4}, is_even) == [2, 4]


def test_filter_reject_partition(numbers):
    kept = filter(numbers, is_even)
    dropped = reject(numbers, is_even)

    assert reject(numbers, is_even) == [1, 3, 5]
    assert sorted(kept + dropped) == numbers
    assert not set(kept) & set(dropped)


def test_uniq():
    assert uniq([1, 2, 2, 3, 1]) == [1, 2, 3]
    assert uniq([]) == []
    assert uniq([[1], [1], [2]]) == [[1], [2]]


def test_map_identity_and_transform(numbers):
    assert map(numbers, lambda x: x) == numbers
    assert map(numbers, lambda x: x * 10) == [10, 20, 30, 40, 50, 60]
    assert map({"a": 1, "b": 2}, str) == ["1", "2"]


def test_pluck():
    people = [{"name": "ann", "age": 30}, {"name": "bo"}, SimpleNamespace(age=5)]
    assert pluck(people, "age") == [30, ABSENT, 5]


def test_reduce_with_seed():
    assert reduce([1, 2, 3], lambda total, x: total + x, 0) == 6


def test_reduce_without_seed_uses_first_element():
    calls = []

    def add_square(total, x):
        calls.append((total, x))
        return total + x * x

    assert reduce([5], add_square) == 5
    assert calls == []

    assert reduce([1, 2, 3], add_square) == 1 + 4 + 9
    assert calls == [(1, 2), (5, 3)]


def test_reduce_empty():
    assert reduce([], lambda a, b: a + b) is ABSENT
    assert reduce([], lambda a, b: a + b, 10) == 10


def test_reduce_absent_result_keeps_accumulator():
    def keep_odds(total, x):
        return total + x if x % 2 else ABSENT

    assert reduce([1, 2, 3, 4, 5], keep_odds, 0) == 9


def test_reduce_none_is_ordinary_data():
    assert reduce([1, 2], lambda total, x: None, 0) is None
    assert reduce([1, 2], lambda total, x: total, None) is None


def test_reduce_over_mapping():
    assert reduce({"a": 1, "b": 2, "c": 3}, lambda total, x: total + x) == 6


def test_contains():
    assert contains([1, 2, 3], 2)
    assert not contains([1, 2, 3], 4)
    assert not contains([], None)
    assert contains({"a": "x"}, "x")
    assert not contains([0, False, ""], None)


def test_every():
    assert every([2, 4, 6], is_even)
    assert not every([2, 3, 6], is_even)
    assert every([], is_even)
    assert every([1, "a", True])
    assert not every([1, 0, True])


def test_every_stops_consulting_predicate_after_failure():
    calls = []

    def predicate(x):
        calls.append(x)
        return x < 2

    assert not every([1, 2, 3, 4], predicate)
    assert calls == [1, 2]


def test_some():
    assert some([1, 3, 4], is_even)
    assert not some([1, 3, 5], is_even)
    assert not some([], is_even)
    assert some([0, None, "x"])
    assert not some([0, None, ""])


def test_some_short_circuits():
    calls = []

    def predicate(x):
        calls.append(x)
        return x == 2

    assert some([1, 2, 3, 4], predicate)
    assert calls == [1, 2]


def test_first():
    assert first([1, 2, 3]) == 1
    assert first([1, 2, 3], 2) == [1, 2]
    assert first([1, 2, 3], 0) == []
    assert first([1, 2, 3], 5) == [1, 2, 3]
    assert first([]) is ABSENT


def test_last():
    assert last([1, 2, 3]) == 3
    assert last([1, 2, 3], 2) == [2, 3]
    assert last([1, 2, 3], 0) == []
    assert last([1, 2, 3], 5) == [1, 2, 3]
    assert last([]) is ABSENT


def test_first_last_reject_negative_count():
    with pytest.raises(ValueError):
        first([1, 2], -1)
    with pytest.raises(ValueError):
        last([1, 2], -1)
