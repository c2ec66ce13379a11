"""Uniform traversal over sequences and mappings.

Everything else in :mod:`underbar.functional` is built on :func:`each`.
"""

import logging
import typing as tp

from underbar.core.enums import Shape
from underbar.core.types import Collection, Visitor, same_value

__all__ = [
    "identity",
    "each",
    "index_of",
]

NOT_FOUND = -1

logger = logging.getLogger(__name__)


def identity(value: tp.Any) -> tp.Any:
    """Return the argument unchanged."""
    return value


def each(collection: tp.Any, visitor: Visitor) -> None:
    """Call ``visitor(value, key_or_index, collection)`` for every element.

    Sequences are visited in ascending index order, mappings in their own
    enumeration order. Values that are neither are not visited at all.

    Args:
        collection: A sequence, a mapping or a :class:`Collection`.
        visitor: Callback invoked for its side effects only.
    """
    tagged = Collection.of(collection)
    data = tagged.data

    if tagged.shape is Shape.SEQUENCE:
        for index in range(len(data)):
            visitor(data[index], index, data)
    elif tagged.shape is Shape.MAPPING:
        for key, value in list(data.items()):
            visitor(value, key, data)
    else:
        logger.debug(f"each: nothing to visit in {type(data).__name__}")


def index_of(sequence: tp.Any, target: tp.Any) -> tp.Any:
    """Position of the first element equal to ``target``.

    Args:
        sequence: Sequence to search.
        target: Value to look for, compared by identity or equality.

    Returns:
        Smallest matching index, or -1 if there is none.
    """
    found = False
    result = NOT_FOUND

    def visit(item, index, _):
        nonlocal found, result
        if not found and same_value(item, target):
            found = True
            result = index

    each(sequence, visit)
    return result
