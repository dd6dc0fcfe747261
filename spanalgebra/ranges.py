"""Generic range shapes that spans convert to and from.

These are the plain range flavours calendar and timeseries code passes
around: half-open ``Range``, closed ``RangeInclusive``, the one-sided
``RangeFrom``/``RangeTo``/``RangeToInclusive``, and ``RangeFull``. They carry
no algebra of their own; convert to a span to combine or query them.

A bound on its own is ``Included(p)``, ``Excluded(p)`` or None for
unbounded, the same convention a ``slice`` uses for a missing start or stop.
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Included(Generic[T]):
    p: T


@dataclass(frozen=True, slots=True)
class Excluded(Generic[T]):
    p: T


Bound: TypeAlias = Included[T] | Excluded[T] | None


@dataclass(frozen=True, slots=True)
class Range(Generic[T]):
    """``start <= x < stop``"""

    start: T
    stop: T

    def __str__(self) -> str:
        return f"{self.start}..{self.stop}"


@dataclass(frozen=True, slots=True)
class RangeInclusive(Generic[T]):
    """``start <= x <= end``"""

    start: T
    end: T

    def __str__(self) -> str:
        return f"{self.start}..={self.end}"


@dataclass(frozen=True, slots=True)
class RangeFrom(Generic[T]):
    """``start <= x``"""

    start: T

    def __str__(self) -> str:
        return f"{self.start}.."


@dataclass(frozen=True, slots=True)
class RangeTo(Generic[T]):
    """``x < stop``"""

    stop: T

    def __str__(self) -> str:
        return f"..{self.stop}"


@dataclass(frozen=True, slots=True)
class RangeToInclusive(Generic[T]):
    """``x <= end``"""

    end: T

    def __str__(self) -> str:
        return f"..={self.end}"


@dataclass(frozen=True, slots=True)
class RangeFull:
    """Every value."""

    def __str__(self) -> str:
        return ".."


AnyRange: TypeAlias = (
    Range[T]
    | RangeInclusive[T]
    | RangeFrom[T]
    | RangeTo[T]
    | RangeToInclusive[T]
    | RangeFull
)
