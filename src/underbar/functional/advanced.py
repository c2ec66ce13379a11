"""Higher-level sequence algorithms composed from the derived operations.

    - **shuffle**: uniform random permutation of a copy
    - **invoke**: call a function or named method on every element
    - **sort_by**: stable ascending sort by a derived key, missing keys last
    - **zip**: transpose sequences, padding short ones with ``ABSENT``
    - **flatten**: depth-first collection of leaves from nested sequences
    - **intersection** / **difference**: order-preserving set logic on the first sequence

Note:
    These algorithms are defined for sequences. Mappings are accepted where
    the derived operations accept them (their values are used), but no
    particular result is promised for them.
"""

import typing as tp

import numpy as np

from underbar.core.config import settings
from underbar.core.enums import Shape
from underbar.core.types import ABSENT, lookup
from underbar.functional.derived import contains, every, map, reduce, some
from underbar.functional.iteration import each

__all__ = [
    "shuffle",
    "invoke",
    "sort_by",
    "zip",
    "flatten",
    "intersection",
    "difference",
]

_default_rng: tp.Optional[np.random.Generator] = None


def default_rng() -> np.random.Generator:
    """Package-wide generator, created on first use from ``settings.RANDOM_SEED``.

    A seeded process replays the same sequence of shuffles, while successive
    calls still draw fresh permutations.
    """
    global _default_rng

    if _default_rng is None:
        _default_rng = np.random.default_rng(settings.RANDOM_SEED)
    return _default_rng


def shuffle(
    sequence: tp.Sequence[tp.Any], rng: tp.Optional[np.random.Generator] = None
) -> tp.List[tp.Any]:
    """Return the elements of ``sequence`` in uniformly random order.

    Elements are drawn one at a time, uniformly and without replacement, from
    a working copy. The input is never modified.

    Args:
        sequence: Sequence to shuffle.
        rng: Source of randomness. Defaults to the shared generator from
            :func:`default_rng`.

    Returns:
        A new list holding a permutation of the input.
    """
    rng = rng if rng is not None else default_rng()
    remaining = map(sequence, lambda element: element)
    result = []

    while remaining:
        index = int(rng.integers(0, len(remaining)))
        result.append(remaining.pop(index))

    return result


def invoke(
    collection: tp.Any,
    method_or_fn: tp.Union[str, tp.Callable[..., tp.Any]],
    args: tp.Sequence[tp.Any] = (),
) -> tp.List[tp.Any]:
    """Call a function or a named method on every element.

    If ``method_or_fn`` is callable it is called as ``method_or_fn(element,
    *args)``, with the element in the receiver position. Otherwise it names a
    method that is looked up on each element and called without arguments.

    Raises:
        AttributeError: If an element has no method of the given name.
    """
    if callable(method_or_fn):
        return map(collection, lambda element: method_or_fn(element, *args))
    return map(collection, lambda element: getattr(element, method_or_fn)())


def _missing(key: tp.Any) -> bool:
    return key is ABSENT or key is None


def sort_by(
    sequence: tp.Sequence[tp.Any],
    key: tp.Union[str, tp.Callable[[tp.Any], tp.Any]],
) -> tp.List[tp.Any]:
    """Stable ascending sort by a derived key.

    Args:
        sequence: Sequence to sort. It is copied, not sorted in place.
        key: Function computing the key, or the key/attribute name to read.

    Returns:
        A new sorted list. Elements whose key is ``ABSENT`` or ``None`` come
        last, in their original relative order.
    """
    derive = key if callable(key) else (lambda element: lookup(element, key))
    # Keys are derived once and travel with their elements.
    pairs = map(sequence, lambda element: (derive(element), element))

    # Bubble sort: swap only on strictly greater, or on a missing key before a
    # present one, so equal keys never trade places.
    for i in range(len(pairs)):
        swapped = False
        for j in range(len(pairs) - i - 1):
            left, right = pairs[j][0], pairs[j + 1][0]
            if _missing(left):
                should_swap = not _missing(right)
            else:
                should_swap = not _missing(right) and left > right
            if should_swap:
                pairs[j], pairs[j + 1] = pairs[j + 1], pairs[j]
                swapped = True
        if not swapped:
            break

    return map(pairs, lambda pair: pair[1])


def zip(*sequences: tp.Sequence[tp.Any]) -> tp.List[tp.Tuple[tp.Any, ...]]:
    """Group the i-th elements of every sequence into tuples.

    Shorter sequences are padded with ``ABSENT``; the result is as long as the
    longest input.

    Examples:
        >>> zip(["a", "b"], [1])
        [('a', 1), ('b', ABSENT)]
    """
    longest = reduce(
        map(sequences, len), lambda best, length: length if length > best else best, 0
    )
    result = []

    for index in range(longest):
        result.append(
            tuple(
                map(
                    sequences,
                    lambda seq: seq[index] if index < len(seq) else ABSENT,
                )
            )
        )

    return result


def flatten(nested: tp.Any) -> tp.List[tp.Any]:
    """Collect every non-sequence leaf, depth first and left to right.

    Strings count as leaves. Nesting depth is unbounded.
    """
    if Shape.of(nested) is not Shape.SEQUENCE:
        return [nested]

    result = []
    # Explicit (sequence, next index) frames instead of recursion
    stack = [(nested, 0)]

    while stack:
        sequence, index = stack.pop()
        if index >= len(sequence):
            continue

        stack.append((sequence, index + 1))
        item = sequence[index]
        if Shape.of(item) is Shape.SEQUENCE:
            stack.append((item, 0))
        else:
            result.append(item)

    return result


def intersection(*sequences: tp.Sequence[tp.Any]) -> tp.List[tp.Any]:
    """Elements of the first sequence found in every other sequence.

    Duplicates and order of the first sequence are kept.
    """
    if not sequences:
        return []

    head, rest = sequences[0], sequences[1:]
    result = []

    def visit(element, *_):
        if every(rest, lambda other: contains(other, element)):
            result.append(element)

    each(head, visit)
    return result


def difference(*sequences: tp.Sequence[tp.Any]) -> tp.List[tp.Any]:
    """Elements of the first sequence found in none of the other sequences.

    Duplicates and order of the first sequence are kept.
    """
    if not sequences:
        return []

    head, rest = sequences[0], sequences[1:]
    result = []

    def visit(element, *_):
        if not some(rest, lambda other: contains(other, element)):
            result.append(element)

    each(head, visit)
    return result
