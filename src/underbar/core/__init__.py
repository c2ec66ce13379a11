"""Core data model: shape tags, the tagged collection and the absent sentinel."""

from underbar.core.enums import CallState, Shape
from underbar.core.types import ABSENT, AbsentType, Collection, is_absent, lookup

__all__ = [
    "ABSENT",
    "AbsentType",
    "CallState",
    "Collection",
    "Shape",
    "is_absent",
    "lookup",
]
