"""underbar: functional primitives over sequences and mappings."""

from underbar.logger.logger import logger
from underbar.core import ABSENT, AbsentType, Collection, Shape, is_absent, lookup
from underbar.functional import *  # noqa: F401,F403
from underbar.functional import __all__ as _functional_all

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "AbsentType",
    "Collection",
    "Shape",
    "is_absent",
    "lookup",
    "logger",
    *_functional_all,
]
