"""Reusable type definitions for underbar.

This module provides the absent sentinel and the tagged collection variant
used across the package.

Type Aliases:
    Visitor: Callback receiving ``(value, key_or_index, collection)``.
    Predicate: Single-argument truth test.
    Combine: Two-argument reducer ``(accumulator, element) -> accumulator``.
"""

import typing as tp

from pydantic import BaseModel, ConfigDict, Field

from .enums import Shape

__all__ = [
    "ABSENT",
    "AbsentType",
    "Collection",
    "Visitor",
    "Predicate",
    "Combine",
    "is_absent",
    "lookup",
    "same_value",
]

Visitor = tp.Callable[[tp.Any, tp.Any, tp.Any], None]
Predicate = tp.Callable[[tp.Any], tp.Any]
Combine = tp.Callable[[tp.Any, tp.Any], tp.Any]


class AbsentType:
    """Type of the ``ABSENT`` sentinel.

    ``ABSENT`` means "not supplied" or "not produced". It is distinct from
    every data value, ``None`` included, and there is only ever one instance.
    """

    _instance: tp.Optional["AbsentType"] = None

    def __new__(cls) -> "AbsentType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"

    def __copy__(self) -> "AbsentType":
        return self

    def __deepcopy__(self, memo: dict) -> "AbsentType":
        return self


ABSENT = AbsentType()


def is_absent(value: tp.Any) -> bool:
    return value is ABSENT


def same_value(left: tp.Any, right: tp.Any) -> bool:
    """Value/identity equality used by every membership test."""
    return left is right or left == right


def lookup(element: tp.Any, name: tp.Any) -> tp.Any:
    """Named-property lookup over mappings, sequences and plain objects.

    Args:
        element: A mapping, a sequence or any object.
        name: Key (for mappings), integer position (for sequences, negative
            positions count from the end) or attribute name.

    Returns:
        The bound value, or ``ABSENT`` if the element has no such
        key/position/attribute.
    """
    shape = Shape.of(element)
    if shape is Shape.MAPPING:
        return element.get(name, ABSENT)
    if shape is Shape.SEQUENCE and isinstance(name, int) and not isinstance(name, bool):
        if -len(element) <= name < len(element):
            return element[name]
        return ABSENT
    if isinstance(name, str):
        return getattr(element, name, ABSENT)
    return ABSENT


class Collection(BaseModel):
    """A collection tagged with its shape.

    The tag is computed once, when the value enters the toolkit, and the
    iteration core dispatches on it. ``data`` is held by reference so visitors
    see the caller's own object.

    Attributes:
        shape: SEQUENCE, MAPPING or SCALAR.
        data: The wrapped object.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    shape: Shape = Field(..., description="Shape tag used for dispatch.")
    data: tp.Any = Field(..., description="The wrapped sequence, mapping or value.")

    @classmethod
    def of(cls, value: tp.Any) -> "Collection":
        if isinstance(value, Collection):
            return value
        return cls(shape=Shape.of(value), data=value)

    def __len__(self) -> int:
        return len(self.data) if self.shape.is_iterable else 0
