"""Span endpoints: one boundary of a span, closed, open or unbounded.

Endpoints compare by *position* on the number line rather than by value.
An open lower endpoint at ``p`` sits just above ``p`` and an open upper
endpoint at ``p`` sits just below it, so the usual ``max``/``min`` of the
endpoints of two spans gives the tighter bound of their intersection.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Side(Enum):
    """Which end of a span an endpoint sits on."""

    LEFT = "left"
    RIGHT = "right"


class Endpoint(ABC, Generic[T]):
    """Base class for the three endpoint variants."""

    __slots__ = ()

    def _rank(self) -> int:
        """-1 below every value, 1 above every value, 0 at a point."""
        return 0

    def _nudge(self) -> int:
        """Offset from the point itself: -1 just below, 1 just above."""
        return 0

    @property
    def point(self) -> T | None:
        """The boundary value, or None for an unbounded endpoint."""
        return None

    def compare(self, other: "Endpoint[T]") -> int:
        """Return -1, 0 or 1 as ``self`` sits below, at or above ``other``.

        Points that do not order against each other (NaN, say) are treated
        as level, and the open/closed offset alone decides.
        """
        if not isinstance(other, Endpoint):
            raise TypeError(
                f"Endpoints only compare with other endpoints.\n"
                f"Got {type(other).__name__!r}: {other!r}\n"
                f"Hint: wrap plain values with Closed(value)"
            )
        rank, other_rank = self._rank(), other._rank()
        if rank or other_rank:
            return (rank > other_rank) - (rank < other_rank)
        p, q = self.point, other.point
        if p < q:  # type: ignore[operator]
            return -1
        if q < p:  # type: ignore[operator]
            return 1
        nudge, other_nudge = self._nudge(), other._nudge()
        return (nudge > other_nudge) - (nudge < other_nudge)

    def __lt__(self, other: "Endpoint[T]") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "Endpoint[T]") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "Endpoint[T]") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "Endpoint[T]") -> bool:
        return self.compare(other) >= 0

    def shift(self, delta: Any) -> "Endpoint[T]":
        """Move the boundary by ``delta``. Unbounded endpoints stay put."""
        return self

    def __add__(self, delta: Any) -> "Endpoint[T]":
        return self.shift(delta)

    def __sub__(self, delta: Any) -> "Endpoint[T]":
        return self.shift(-delta)

    @abstractmethod
    def render(self, side: Side) -> str:
        """Text for this endpoint as the ``side`` bound, ``[2`` or ``5)`` say."""
        pass


@dataclass(frozen=True, slots=True)
class Closed(Endpoint[T]):
    """Boundary that includes ``p``."""

    p: T

    @property
    def point(self) -> T:
        return self.p

    def shift(self, delta: Any) -> "Closed[T]":
        return Closed(self.p + delta)

    def render(self, side: Side) -> str:
        return f"[{self.p}" if side is Side.LEFT else f"{self.p}]"


@dataclass(frozen=True, slots=True)
class Open(Endpoint[T]):
    """Boundary that excludes ``p``.

    ``side`` records which end of a span the boundary belongs to. An open
    lower bound at 5 admits everything above 5, an open upper bound at 5
    everything below it; the two are different endpoints.
    """

    p: T
    side: Side

    def _nudge(self) -> int:
        return 1 if self.side is Side.LEFT else -1

    @property
    def point(self) -> T:
        return self.p

    def shift(self, delta: Any) -> "Open[T]":
        return Open(self.p + delta, self.side)

    def render(self, side: Side) -> str:
        return f"({self.p}" if side is Side.LEFT else f"{self.p})"


@dataclass(frozen=True, slots=True)
class Unbounded(Endpoint[Any]):
    """No constraint. ``side`` says which way the span runs off to infinity."""

    side: Side

    def _rank(self) -> int:
        return -1 if self.side is Side.LEFT else 1

    def render(self, side: Side) -> str:
        return "(-inf" if self.side is Side.LEFT else "+inf)"


def admits(endpoint: Endpoint[T], value: T, side: Side) -> bool:
    """True if ``value`` satisfies ``endpoint`` used as the ``side`` bound."""
    position = endpoint.compare(Closed(value))
    return position <= 0 if side is Side.LEFT else position >= 0
