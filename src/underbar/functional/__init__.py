"""Functional primitives for underbar.

This package provides the collection and function utilities of the project:
uniform iteration over sequences and mappings, operations derived from it,
mapping merges, stateful decorators and higher-level sequence algorithms.
Collection utilities never mutate their input, except the merge helpers
which update their destination by contract.
"""

from underbar.functional.iteration import each, identity, index_of
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
from underbar.functional.objects import defaults, extend
from underbar.functional.decorators import (
    Memoize,
    Once,
    Throttle,
    delay,
    memoize,
    once,
    throttle,
)
from underbar.functional.advanced import (
    difference,
    flatten,
    intersection,
    invoke,
    shuffle,
    sort_by,
    zip,
)

__all__ = [
    "identity",
    "each",
    "index_of",
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
    "extend",
    "defaults",
    "Once",
    "Memoize",
    "Throttle",
    "once",
    "memoize",
    "delay",
    "throttle",
    "shuffle",
    "invoke",
    "sort_by",
    "zip",
    "flatten",
    "intersection",
    "difference",
]
