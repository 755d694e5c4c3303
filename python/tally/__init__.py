"""Multiset counters with ranking and intersection-keyed subtraction."""

from .counter import Countable, Counter
from .errors import InsufficientDistinctKeys, InvalidCount, TallyError

__all__ = [
    "Countable",
    "Counter",
    "InsufficientDistinctKeys",
    "InvalidCount",
    "TallyError",
]
