from underbar.core.types import ABSENT
from underbar.functional.objects import defaults, extend


def test_extend_returns_destination():
    destination = {"a": 1}
    assert extend(destination, {"b": 2}) is destination
    assert destination == {"a": 1, "b": 2}


def test_extend_later_sources_win():
    destination = {"a": "a", "b": "keep"}
    extend(destination, {"a": "b", "c": 2}, {"a": "f", "e": 4})
    assert destination == {"a": "f", "b": "keep", "c": 2, "e": 4}


def test_extend_key_order():
    destination = {}
    extend(destination, {"z": 1, "y": 2}, {"x": 3})
    assert list(destination) == ["z", "y", "x"]


def test_extend_skips_non_mappings():
    destination = {"a": 1}
    extend(destination, None, {"b": 2})
    assert destination == {"a": 1, "b": 2}


def test_extend_with_itself():
    destination = {"a": 1}
    extend(destination, destination)
    assert destination == {"a": 1}


def test_defaults_never_overwrites():
    destination = {"a": 1, "b": None}
    assert defaults(destination, {"a": 10, "b": 20, "c": 30}) is destination
    assert destination == {"a": 1, "b": None, "c": 30}


def test_defaults_earliest_source_wins():
    destination = {}
    defaults(destination, {"a": "first"}, {"a": "second", "b": "second"})
    assert destination == {"a": "first", "b": "second"}


def test_defaults_fills_absent_values():
    destination = {"a": ABSENT}
    defaults(destination, {"a": 1})
    assert destination == {"a": 1}


def test_merges_skip_sequence_sources():
    destination = {"a": 1}
    extend(destination, [10, 20], ("x",), {"b": 2})
    assert destination == {"a": 1, "b": 2}

    destination = {"a": 1}
    defaults(destination, [10, 20], {"c": 3})
    assert destination == {"a": 1, "c": 3}
