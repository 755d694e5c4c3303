"""Exceptions raised by tally counters."""


class TallyError(Exception):
    """Base class for every error raised by this package."""


class InsufficientDistinctKeys(TallyError, ValueError):
    """Raised by `Counter.most_common` when more entries are requested than exist."""

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"{requested} exceeds the number of distinct keys in the Counter ({available})"
        )


class InvalidCount(TallyError, ValueError):
    """Raised when a count or scale factor is not a non-negative integer."""

    def __init__(self, count: object) -> None:
        self.count = count
        super().__init__(f"Counts must be non-negative integers, got {count!r}")
