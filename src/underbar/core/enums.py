"""Enumerations for collection shapes and decorator states."""

from collections.abc import Mapping, Sequence
from enum import Enum
import typing as tp

__all__ = ["Shape", "CallState"]

# Text is index-addressable in Python but is treated as a single leaf value.
TEXT_TYPES = (str, bytes, bytearray)


class Shape(Enum):
    """Collection shapes the iteration core knows how to traverse."""

    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SCALAR = "scalar"

    @classmethod
    def of(cls, value: tp.Any) -> "Shape":
        """Classify a value by its collection shape.

        Args:
            value: Any object.

        Returns:
            MAPPING for mappings, SEQUENCE for non-text sequences and SCALAR
            for everything else.
        """
        if isinstance(value, Mapping):
            return cls.MAPPING
        if isinstance(value, Sequence) and not isinstance(value, TEXT_TYPES):
            return cls.SEQUENCE
        return cls.SCALAR

    @property
    def is_iterable(self) -> bool:
        return self is not Shape.SCALAR


class CallState(Enum):
    """Lifecycle of a call-once wrapper."""

    NOT_CALLED = "not_called"
    CALLED = "called"
