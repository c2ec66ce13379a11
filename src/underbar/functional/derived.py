"""Collection operations derived from :func:`each` and :func:`reduce`.

All operations accept sequences and mappings (visiting mapping values) and
return plain lists, never mutating their input.

Examples:
    >>> from underbar.functional.derived import filter, reduce
    >>> filter([1, 2, 3, 4], lambda x: x % 2 == 0)
    [2, 4]
    >>> reduce([1, 2, 3], lambda total, x: total + x, 0)
    6
"""

import typing as tp

from underbar.core.types import ABSENT, Combine, Predicate, lookup, same_value
from underbar.functional.iteration import each, identity

__all__ = [
    "filter",
    "reject",
    "uniq",
    "map",
    "pluck",
    "reduce",
    "contains",
    "every",
    "some",
    "first",
    "last",
]


def filter(collection: tp.Any, predicate: Predicate) -> tp.List[tp.Any]:
    """Elements for which ``predicate`` is truthy, in iteration order.

    The predicate is called exactly once per element.
    """
    result = []

    def visit(element, *_):
        if predicate(element):
            result.append(element)

    each(collection, visit)
    return result


def reject(collection: tp.Any, predicate: Predicate) -> tp.List[tp.Any]:
    """Elements for which ``predicate`` is falsy, in iteration order."""
    return filter(collection, lambda element: not predicate(element))


def uniq(sequence: tp.Any) -> tp.List[tp.Any]:
    """Drop repeated values, keeping the first occurrence of each.

    Membership is checked against the result built so far, so unhashable
    values are supported at quadratic cost.
    """
    result = []

    def visit(element, *_):
        if not contains(result, element):
            result.append(element)

    each(sequence, visit)
    return result


def map(collection: tp.Any, transform: tp.Callable[[tp.Any], tp.Any]) -> tp.List[tp.Any]:
    """Apply ``transform`` to every element, in iteration order."""
    result = []
    each(collection, lambda element, *_: result.append(transform(element)))
    return result


def pluck(collection: tp.Any, name: tp.Any) -> tp.List[tp.Any]:
    """Value of key/attribute ``name`` for every element (``ABSENT`` if missing)."""
    return map(collection, lambda element: lookup(element, name))


def reduce(collection: tp.Any, combine: Combine, seed: tp.Any = ABSENT) -> tp.Any:
    """Fold the collection into a single value.

    Without a seed the first visited element becomes the accumulator and is
    never passed to ``combine``. Each later element calls
    ``combine(accumulator, element)``; a result of ``ABSENT`` leaves the
    accumulator unchanged instead of replacing it. ``None`` is an ordinary
    result and does replace the accumulator.

    Args:
        collection: Sequence or mapping to fold.
        combine: Reducer ``(accumulator, element) -> accumulator``.
        seed: Initial accumulator. Defaults to ``ABSENT`` (no seed).

    Returns:
        The final accumulator; ``ABSENT`` for an empty collection without seed.
    """
    accumulator = seed
    seeded = seed is not ABSENT

    def visit(element, *_):
        nonlocal accumulator, seeded
        if not seeded:
            accumulator = element
            seeded = True
            return

        combined = combine(accumulator, element)
        if combined is not ABSENT:
            accumulator = combined

    each(collection, visit)
    return accumulator


def contains(collection: tp.Any, target: tp.Any) -> bool:
    """Whether any element equals ``target`` (identity or ``==``)."""
    return reduce(
        collection,
        lambda was_found, element: was_found or same_value(element, target),
        False,
    )


def every(collection: tp.Any, predicate: Predicate = identity) -> bool:
    """Whether ``predicate`` holds for all elements. True on empty input.

    The predicate is not consulted again after the first failure.
    """
    return reduce(
        collection,
        lambda all_passed, element: all_passed and bool(predicate(element)),
        True,
    )


def some(collection: tp.Any, predicate: Predicate = identity) -> bool:
    """Whether ``predicate`` holds for at least one element. False on empty input.

    The predicate is not consulted again after the first success.
    """
    return reduce(
        collection,
        lambda any_passed, element: any_passed or bool(predicate(element)),
        False,
    )


def first(sequence: tp.Sequence[tp.Any], n: tp.Any = ABSENT) -> tp.Any:
    """First element, or a list of the first ``n`` elements when ``n`` is given.

    Args:
        sequence: Sequence to read from.
        n: Optional count. ``ABSENT`` selects single-element mode.

    Returns:
        The first element (``ABSENT`` if the sequence is empty) or a list.
    """
    if n is ABSENT:
        return sequence[0] if len(sequence) else ABSENT
    if n < 0:
        raise ValueError(f"Count must be non-negative, got {n}.")
    return list(sequence[:n])


def last(sequence: tp.Sequence[tp.Any], n: tp.Any = ABSENT) -> tp.Any:
    """Last element, or a list of the last ``n`` elements when ``n`` is given.

    ``n`` larger than the sequence is clamped to its length; ``n == 0`` gives
    an empty list.
    """
    if n is ABSENT:
        return sequence[-1] if len(sequence) else ABSENT
    if n < 0:
        raise ValueError(f"Count must be non-negative, got {n}.")
    n = min(n, len(sequence))
    return list(sequence[len(sequence) - n :])
