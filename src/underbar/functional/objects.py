"""Helpers for merging key-mappings."""

import typing as tp

from underbar.core.enums import Shape
from underbar.core.types import ABSENT
from underbar.functional.iteration import each

__all__ = ["extend", "defaults"]


def _merge(source: tp.Any, visitor) -> None:
    # Only mappings contribute entries; sequences and scalars are skipped.
    if Shape.of(source) is Shape.MAPPING:
        each(source, visitor)


def extend(destination: tp.MutableMapping, *sources: tp.Mapping) -> tp.MutableMapping:
    """Copy every entry of each source into ``destination``.

    Sources are applied in call order and later sources win ties.

    Args:
        destination: Mapping to update in place.
        *sources: Mappings whose own entries are copied. Non-mappings
            (sequences included) are skipped.

    Returns:
        ``destination`` itself.
    """

    def assign(value, key, _):
        destination[key] = value

    each(sources, lambda source, *_: _merge(source, assign))
    return destination


def defaults(destination: tp.MutableMapping, *sources: tp.Mapping) -> tp.MutableMapping:
    """Fill in keys that ``destination`` does not have yet.

    A key bound to ``ABSENT`` counts as missing. Among several sources the
    earliest one supplying a key wins.

    Returns:
        ``destination`` itself.
    """

    def fill(value, key, _):
        if destination.get(key, ABSENT) is ABSENT:
            destination[key] = value

    each(sources, lambda source, *_: _merge(source, fill))
    return destination
