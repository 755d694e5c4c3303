"""A multiset of hashable items, counting how often each one occurs."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from itertools import chain
from typing import Any, Protocol

from .errors import InsufficientDistinctKeys, InvalidCount

logger = logging.getLogger(__name__)


class Countable(Protocol):
    """What a Counter key must support: hashing, equality and ordering."""

    def __hash__(self) -> int: ...

    def __eq__(self, other: object, /) -> bool: ...

    def __lt__(self, other: Any, /) -> bool: ...


def _check_count(count: object) -> int:
    # bool is an int subclass but never a meaningful count
    if not isinstance(count, int) or isinstance(count, bool) or count < 0:
        raise InvalidCount(count)
    return count


class Counter[T: Countable](dict[T, int]):
    """An ordered Counter implementation that counts hashable items.

    Keys that were never recorded read as zero. A key may still be stored
    explicitly with a zero count through `update`; such an entry is a distinct
    key but contributes nothing to `elements` or `total`.
    """

    def __init__(self, counts: Mapping[T, int] | None = None) -> None:
        super().__init__()
        if counts is not None:
            for key, count in counts.items():
                self[key] = count

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> "Counter[T]":
        return cls().build_from(iterable)

    @classmethod
    def fromkeys(cls, iterable: Iterable[T], value: int = 0) -> "Counter[T]":  # type: ignore[override]
        return cls(dict.fromkeys(iterable, value))

    def __missing__(self, key: T) -> int:
        "The count of elements not in the Counter is zero."
        # Needed so that self[missing_item] does not raise KeyError
        return 0

    def __setitem__(self, key: T, count: int) -> None:
        super().__setitem__(key, _check_count(count))

    def __repr__(self) -> str:
        if not self:
            return f"{self.__class__.__name__}()"
        return f"{self.__class__.__name__}({dict(self)!r})"

    def build_from(self, iterable: Iterable[T]) -> "Counter[T]":
        """Count every item of `iterable` into this Counter and return it.

        Returning `self` lets construction chain: `Counter().build_from(items)`."""
        for item in iterable:
            self[item] += 1
        return self

    def get(self, key: T, default: int = 0) -> int:  # type: ignore[override]
        return super().get(key, default)

    def setdefault(self, key: T, default: int = 0) -> int:  # type: ignore[override]
        if key not in self:
            self[key] = default
        return super().__getitem__(key)

    def update(self, key: T, count: int) -> None:  # type: ignore[override]
        """Set the count of `key`, replacing any previous value. This does not add."""
        self[key] = count

    def elements(self) -> list[T]:
        """Every key repeated as many times as its count, in table order."""
        return list(chain.from_iterable([key] * count for key, count in self.items()))

    def iter(self) -> Iterator[tuple[T, int]]:
        """Iterates over each stored `(key, count)` pair exactly once."""
        return iter(self.items())

    def most_common(self, n: int) -> list[tuple[T, int]]:
        """The `n` entries with the highest counts, highest first.

        Equal counts keep table order since `sorted` is stable. Asking for more
        entries than there are distinct keys raises `InsufficientDistinctKeys`."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        if n > len(self):
            logger.debug(f"most_common({n}) requested with only {len(self)} keys")
            raise InsufficientDistinctKeys(n, len(self))

        ranked = sorted(self.items(), key=lambda item: item[1], reverse=True)
        return ranked[:n]

    def subtract(self, other: Mapping[T, int]) -> "Counter[T]":
        """Absolute count differences over the keys both counters share.

        Keys present on only one side are dropped, so the result is the same
        whichever operand comes first. See `difference` for the usual multiset
        subtraction."""
        result = Counter[T]()
        for key, count in self.items():
            if key in other:
                result[key] = abs(count - other[key])
        return result

    def difference(self, other: Mapping[T, int]) -> "Counter[T]":
        """Keys of `self` with `other`'s counts taken away, dropping anything at or below zero."""
        result = Counter[T]()
        for key, count in self.items():
            new_count = count - other.get(key, 0)
            if new_count > 0:
                result[key] = new_count
        return result

    def total(self) -> int:
        return sum(self.values())

    def copy(self) -> "Counter[T]":
        return self.__class__(self)

    __copy__ = copy

    def __add__(self, other: "Counter[T]") -> "Counter[T]":
        if not isinstance(other, Mapping):
            return NotImplemented
        result = Counter[T]()
        # dict.fromkeys keeps the keys ordered by first occurrence
        for key in dict.fromkeys(chain(self, other)):
            new_count = self.get(key, 0) + other.get(key, 0)
            if new_count != 0:
                result[key] = new_count
        return result

    def __iadd__(self, other: "Counter[T]") -> "Counter[T]":
        if not isinstance(other, Mapping):
            return NotImplemented
        # every new count is validated by __add__ before self changes
        summed = self + other
        super().clear()
        super().update(summed)
        return self

    def __ior__(self, other: Mapping[T, int]) -> "Counter[T]":
        if not isinstance(other, Mapping):
            return NotImplemented
        checked = {key: _check_count(count) for key, count in other.items()}
        super().update(checked)
        return self

    def __mul__(self, other: int) -> "Counter[T]":
        if not isinstance(other, int):
            return NotImplemented
        factor = _check_count(other)
        result = Counter[T]()
        for key in self:
            new_count = self[key] * factor
            if new_count > 0:
                result[key] = new_count
        return result

    __rmul__ = __mul__
