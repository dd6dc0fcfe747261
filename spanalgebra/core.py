import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, overload

from typing_extensions import override

from spanalgebra.conversion import (
    closed_point,
    is_unbounded,
    normalize,
    open_point,
    to_closed,
    to_open,
)
from spanalgebra.endpoint import Closed, Endpoint, Open, Side, Unbounded, admits
from spanalgebra.ranges import (
    AnyRange,
    Bound,
    Excluded,
    Included,
    Range,
    RangeFrom,
    RangeFull,
    RangeInclusive,
    RangeTo,
    RangeToInclusive,
)

T = TypeVar("T")

LEFT = Side.LEFT
RIGHT = Side.RIGHT

# Lower bound above every value, upper bound below every value.
_VOID: tuple[Endpoint[Any], Endpoint[Any]] = (Unbounded(RIGHT), Unbounded(LEFT))


def _to_bound(endpoint: Endpoint[T], share: bool) -> Bound[T]:
    if isinstance(endpoint, Closed):
        return Included(endpoint.p if share else copy.copy(endpoint.p))
    if isinstance(endpoint, Open):
        return Excluded(endpoint.p if share else copy.copy(endpoint.p))
    return None


def _from_bound(bound: Bound[T], side: Side) -> Endpoint[T]:
    if bound is None:
        return Unbounded(side)
    if isinstance(bound, Included):
        return Closed(bound.p)
    if isinstance(bound, Excluded):
        return Open(bound.p, side)
    raise TypeError(
        f"Span bounds must be Included(p), Excluded(p) or None (unbounded).\n"
        f"Got {type(bound).__name__!r}: {bound!r}"
    )


def _check_slice(s: slice) -> None:
    if s.step is not None:
        raise ValueError(
            f"Spans are built from slices without a step.\n"
            f"Got step={s.step!r} in {s!r}\n"
            f"Hint: span.from_slice(slice(start, stop))"
        )


class SpanOps(ABC, Generic[T]):
    """Operations shared by every span shape.

    Each shape only has to say where its two endpoints sit; emptiness,
    containment, intersection, cover and every conversion are defined here
    in terms of that endpoint pair.
    """

    @abstractmethod
    def endpoints(self) -> tuple[Endpoint[T], Endpoint[T]]:
        """Return ``(lower, upper)``.

        An empty marker reports a lower endpoint above every value and an
        upper endpoint below every value.
        """
        pass

    @abstractmethod
    def shift(self, delta: Any) -> "SpanOps[T]":
        """Return the span moved by ``delta`` (a timedelta, a relativedelta...)."""
        pass

    def _is_void(self) -> bool:
        lower, upper = self.endpoints()
        return is_unbounded(lower, RIGHT) or is_unbounded(upper, LEFT)

    def _normalized_endpoints(self) -> tuple[Endpoint[T], Endpoint[T]]:
        lower, upper = self.endpoints()
        return normalize(lower, LEFT), normalize(upper, RIGHT)

    def is_empty(self) -> bool:
        """True if no value satisfies both endpoints.

        Open endpoints are first replaced by their closed equivalents where
        the value type has them, so ``(5, 6)`` over integers is empty while
        ``(5.0, 6.0)`` over floats is not.
        """
        lower, upper = self._normalized_endpoints()
        return lower > upper

    def is_unbounded(self) -> bool:
        """True for the span covering every value."""
        lower, upper = self.endpoints()
        return is_unbounded(lower, LEFT) and is_unbounded(upper, RIGHT)

    def contains(self, point: T) -> bool:
        lower, upper = self.endpoints()
        return admits(lower, point, LEFT) and admits(upper, point, RIGHT)

    def __contains__(self, point: T) -> bool:
        return self.contains(point)

    def contains_span(self, other: "SpanOps[T]") -> bool:
        """True if every value in ``other`` is also in this span.

        The empty span is contained by every span, itself included.
        """
        if other.is_empty():
            return True
        if self.is_empty():
            return False
        lower, upper = self._normalized_endpoints()
        other_lower, other_upper = other._normalized_endpoints()
        return lower <= other_lower and upper >= other_upper

    def cover(self, other: "SpanOps[T]") -> "Span[T]":
        """Smallest span holding every value of both spans, gaps included.

        At a shared boundary value the inclusive endpoint wins.
        """
        if self.is_empty():
            return other.to_span()
        if other.is_empty():
            return self.to_span()
        lower, upper = self.endpoints()
        other_lower, other_upper = other.endpoints()
        return Span(min(lower, other_lower), max(upper, other_upper))

    def intersect(self, other: "SpanOps[T]") -> "Span[T]":
        """Values in both spans; ``Span.empty()`` if there are none.

        At a shared boundary value the exclusive endpoint wins.
        """
        lower, upper = self.endpoints()
        other_lower, other_upper = other.endpoints()
        span = Span(max(lower, other_lower), min(upper, other_upper))
        return Span.empty() if span.is_empty() else span

    def __and__(self, other: "SpanOps[T]") -> "SpanOps[T]":
        return self.intersect(other)

    def __or__(self, other: "SpanOps[T]") -> "SpanOps[T]":
        return self.cover(other)

    def __add__(self, delta: Any) -> "SpanOps[T]":
        return self.shift(delta)

    def __sub__(self, delta: Any) -> "SpanOps[T]":
        return self.shift(-delta)

    def normalized(self) -> "Span[T]":
        """Return the general span with open points closed where possible.

        Every empty span normalizes to ``Span.empty()``.
        """
        if self.is_empty():
            return Span.empty()
        return Span(*self._normalized_endpoints())

    def to_bounds(self) -> tuple[Bound[T], Bound[T]] | None:
        """Return ``(lower, upper)`` as ``Included``/``Excluded``/None bounds.

        The points are copied. None for an empty marker, which has no
        boundary values to report.
        """
        if self._is_void():
            return None
        lower, upper = self.endpoints()
        return _to_bound(lower, share=False), _to_bound(upper, share=False)

    def to_bounds_ref(self) -> tuple[Bound[T], Bound[T]] | None:
        """Like ``to_bounds`` but the bounds share this span's point objects."""
        if self._is_void():
            return None
        lower, upper = self.endpoints()
        return _to_bound(lower, share=True), _to_bound(upper, share=True)

    def to_span(self) -> "Span[T]":
        return Span(*self.endpoints())

    def to_inc(self) -> "SpanInc[T] | None":
        """Return the closed form, or None if a bound has no closed equivalent."""
        if self.is_empty():
            return SpanInc.empty()
        lower, upper = self.endpoints()
        lo, hi = closed_point(lower, LEFT), closed_point(upper, RIGHT)
        if lo is None or hi is None:
            return None
        return SpanInc(lo, hi)

    def to_exc(self) -> "SpanExc[T] | None":
        """Return the half-open form, or None if it cannot be represented."""
        if self.is_empty():
            return SpanExc.empty()
        lower, upper = self.endpoints()
        lo, hi = closed_point(lower, LEFT), open_point(upper, RIGHT)
        if lo is None or hi is None:
            return None
        return SpanExc(lo, hi)

    def to_range(self) -> Range[T] | None:
        lower, upper = self.endpoints()
        lo, hi = closed_point(lower, LEFT), open_point(upper, RIGHT)
        if lo is None or hi is None:
            return None
        return Range(lo, hi)

    def to_range_inclusive(self) -> RangeInclusive[T] | None:
        lower, upper = self.endpoints()
        lo, hi = closed_point(lower, LEFT), closed_point(upper, RIGHT)
        if lo is None or hi is None:
            return None
        return RangeInclusive(lo, hi)

    def to_range_from(self) -> RangeFrom[T] | None:
        lower, upper = self.endpoints()
        if not is_unbounded(upper, RIGHT):
            return None
        lo = closed_point(lower, LEFT)
        return None if lo is None else RangeFrom(lo)

    def to_range_to(self) -> RangeTo[T] | None:
        lower, upper = self.endpoints()
        if not is_unbounded(lower, LEFT):
            return None
        hi = open_point(upper, RIGHT)
        return None if hi is None else RangeTo(hi)

    def to_range_to_inclusive(self) -> RangeToInclusive[T] | None:
        lower, upper = self.endpoints()
        if not is_unbounded(lower, LEFT):
            return None
        hi = closed_point(upper, RIGHT)
        return None if hi is None else RangeToInclusive(hi)

    def to_range_full(self) -> RangeFull | None:
        return RangeFull() if self.is_unbounded() else None

    def to_slice(self) -> slice | None:
        """Return ``slice(lo, hi)`` for the half-open form, None marking an open-ended side."""
        lower, upper = self.endpoints()
        if self._is_void():
            return None
        lo = hi = None
        if not is_unbounded(lower, LEFT):
            lo = closed_point(lower, LEFT)
            if lo is None:
                return None
        if not is_unbounded(upper, RIGHT):
            hi = open_point(upper, RIGHT)
            if hi is None:
                return None
        return slice(lo, hi)

    def size(self) -> Any | None:
        """Length of the half-open form (``hi - lo``).

        None when the span is empty, unbounded, or has no half-open form.
        """
        span = self.to_exc()
        if span is None or span.is_empty():
            return None
        return span.hi - span.lo

    def __str__(self) -> str:
        if self._is_void():
            return "empty"
        lower, upper = self.endpoints()
        return f"{lower.render(LEFT)},{upper.render(RIGHT)}"


@dataclass(frozen=True)
class Span(SpanOps[T]):
    """Span with an arbitrary endpoint on each side.

    Construction never checks ``lower <= upper``; an inverted span is simply
    empty.
    """

    lower: Endpoint[T]
    upper: Endpoint[T]

    def __post_init__(self) -> None:
        for name in ("lower", "upper"):
            value = getattr(self, name)
            if not isinstance(value, Endpoint):
                raise TypeError(
                    f"Span {name} must be an Endpoint (Closed, Open or Unbounded).\n"
                    f"Got {type(value).__name__!r}: {value!r}\n"
                    f"Hint: build spans from plain values with Span.exc(lo, hi) or Span.inc(lo, hi)"
                )
        if (self.lower, self.upper) == _VOID:
            return
        for name, endpoint, side in (("lower", self.lower, LEFT), ("upper", self.upper, RIGHT)):
            if isinstance(endpoint, (Open, Unbounded)) and endpoint.side is not side:
                raise ValueError(
                    f"Span {name} endpoint must be tagged Side.{side.name}.\n"
                    f"Got {endpoint!r}\n"
                    f"Hint: use Span.empty() for the empty span, or the "
                    f"Span.exc_exc/unb_inc/... constructors"
                )

    @classmethod
    def exc(cls, lo: T, hi: T) -> "Span[T]":
        """``[lo, hi)``"""
        return cls(Closed(lo), Open(hi, RIGHT))

    @classmethod
    def inc(cls, lo: T, hi: T) -> "Span[T]":
        """``[lo, hi]``"""
        return cls(Closed(lo), Closed(hi))

    @classmethod
    def exc_exc(cls, lo: T, hi: T) -> "Span[T]":
        """``(lo, hi)``"""
        return cls(Open(lo, LEFT), Open(hi, RIGHT))

    @classmethod
    def exc_inc(cls, lo: T, hi: T) -> "Span[T]":
        """``(lo, hi]``"""
        return cls(Open(lo, LEFT), Closed(hi))

    @classmethod
    def unb_exc(cls, hi: T) -> "Span[T]":
        return cls(Unbounded(LEFT), Open(hi, RIGHT))

    @classmethod
    def unb_inc(cls, hi: T) -> "Span[T]":
        return cls(Unbounded(LEFT), Closed(hi))

    @classmethod
    def exc_unb(cls, lo: T) -> "Span[T]":
        return cls(Open(lo, LEFT), Unbounded(RIGHT))

    @classmethod
    def inc_unb(cls, lo: T) -> "Span[T]":
        return cls(Closed(lo), Unbounded(RIGHT))

    @classmethod
    def unb(cls) -> "Span[Any]":
        return cls(Unbounded(LEFT), Unbounded(RIGHT))

    @classmethod
    def point(cls, p: T) -> "Span[T]":
        return cls(Closed(p), Closed(p))

    @classmethod
    def empty(cls) -> "Span[Any]":
        return cls(*_VOID)

    @classmethod
    def from_bounds(cls, lower: Bound[T], upper: Bound[T]) -> "Span[T]":
        return cls(_from_bound(lower, LEFT), _from_bound(upper, RIGHT))

    @classmethod
    def from_range(cls, r: AnyRange[T]) -> "Span[T]":
        """Build a span from any of the generic range shapes, exactly."""
        if isinstance(r, Range):
            return cls.exc(r.start, r.stop)
        if isinstance(r, RangeInclusive):
            return cls.inc(r.start, r.end)
        if isinstance(r, RangeFrom):
            return cls.inc_unb(r.start)
        if isinstance(r, RangeTo):
            return cls.unb_exc(r.stop)
        if isinstance(r, RangeToInclusive):
            return cls.unb_inc(r.end)
        if isinstance(r, RangeFull):
            return cls.unb()
        if isinstance(r, slice):
            return cls.from_slice(r)
        raise TypeError(
            f"Span.from_range() expects Range, RangeInclusive, RangeFrom, RangeTo, "
            f"RangeToInclusive, RangeFull or slice.\n"
            f"Got {type(r).__name__!r}: {r!r}"
        )

    @classmethod
    def from_slice(cls, s: slice) -> "Span[T]":
        """``slice(lo, hi)`` as ``[lo, hi)``; a None start or stop is unbounded."""
        _check_slice(s)
        return cls(
            Unbounded(LEFT) if s.start is None else Closed(s.start),
            Unbounded(RIGHT) if s.stop is None else Open(s.stop, RIGHT),
        )

    @override
    def endpoints(self) -> tuple[Endpoint[T], Endpoint[T]]:
        return self.lower, self.upper

    @override
    def shift(self, delta: Any) -> "Span[T]":
        return Span(self.lower + delta, self.upper + delta)

    @override
    def to_span(self) -> "Span[T]":
        return self

    def __repr__(self) -> str:
        return f"Span({self})"


@dataclass(frozen=True)
class SpanExc(SpanOps[T]):
    """Half-open span ``[lo, hi)``.

    Every empty request (``hi <= lo``) is stored as the one empty marker,
    ``lo = hi = None``, so equal spans compare equal.
    """

    lo: T | None = None
    hi: T | None = None

    def __post_init__(self) -> None:
        if (self.lo is None) != (self.hi is None):
            raise ValueError(
                f"SpanExc needs both bounds, got lo={self.lo!r}, hi={self.hi!r}.\n"
                f"Half-open spans cannot leave a side unbounded.\n"
                f"Hint: use Span.inc_unb(lo) or Span.unb_exc(hi) for one-sided spans"
            )
        if self.lo is not None and not self.lo < self.hi:
            object.__setattr__(self, "lo", None)
            object.__setattr__(self, "hi", None)

    @classmethod
    def new(cls, lo: T, hi: T) -> "SpanExc[T]":
        return cls(lo, hi)

    @classmethod
    def inc(cls, lo: T, hi: T) -> "SpanExc[T] | None":
        """``[lo, hi]`` in half-open form; None if ``hi`` has no successor."""
        stop = to_open(hi, RIGHT)
        return None if stop is None else cls(lo, stop)

    @classmethod
    def point(cls, p: T) -> "SpanExc[T] | None":
        return cls.inc(p, p)

    @classmethod
    def empty(cls) -> "SpanExc[Any]":
        return cls()

    @classmethod
    def from_range(cls, r: Range[T]) -> "SpanExc[T]":
        return cls(r.start, r.stop)

    @classmethod
    def from_range_inclusive(cls, r: RangeInclusive[T]) -> "SpanExc[T] | None":
        return cls.inc(r.start, r.end)

    @classmethod
    def from_slice(cls, s: slice) -> "SpanExc[T]":
        _check_slice(s)
        if s.start is None or s.stop is None:
            raise ValueError(
                f"SpanExc needs a bounded slice, got {s!r}.\n"
                f"Hint: Span.from_slice() accepts open-ended slices"
            )
        return cls(s.start, s.stop)

    @override
    def is_empty(self) -> bool:
        return self.lo is None

    @override
    def endpoints(self) -> tuple[Endpoint[T], Endpoint[T]]:
        if self.lo is None:
            return _VOID
        return Closed(self.lo), Open(self.hi, RIGHT)

    @override
    def contains(self, point: T) -> bool:
        return self.lo is not None and self.lo <= point < self.hi

    @override
    def shift(self, delta: Any) -> "SpanExc[T]":
        if self.lo is None:
            return self
        return SpanExc(self.lo + delta, self.hi + delta)

    @overload
    def cover(self, other: "SpanExc[T]") -> "SpanExc[T]": ...

    @overload
    def cover(self, other: SpanOps[T]) -> "Span[T]": ...

    @override
    def cover(self, other: SpanOps[T]) -> "SpanExc[T] | Span[T]":
        if not isinstance(other, SpanExc):
            return super().cover(other)
        if self.lo is None:
            return other
        if other.lo is None:
            return self
        return SpanExc(min(self.lo, other.lo), max(self.hi, other.hi))

    @overload
    def intersect(self, other: "SpanExc[T]") -> "SpanExc[T]": ...

    @overload
    def intersect(self, other: SpanOps[T]) -> "Span[T]": ...

    @override
    def intersect(self, other: SpanOps[T]) -> "SpanExc[T] | Span[T]":
        if not isinstance(other, SpanExc):
            return super().intersect(other)
        if self.lo is None or other.lo is None:
            return SpanExc.empty()
        return SpanExc(max(self.lo, other.lo), min(self.hi, other.hi))

    @override
    def to_exc(self) -> "SpanExc[T]":
        return self

    def as_range(self) -> Range[T] | None:
        """The half-open ``Range``; None only for the empty marker."""
        if self.lo is None:
            return None
        return Range(self.lo, self.hi)

    def __repr__(self) -> str:
        return f"SpanExc({self})"


@dataclass(frozen=True)
class SpanInc(SpanOps[T]):
    """Closed span ``[lo, hi]``.

    Every empty request (``hi < lo``) is stored as the one empty marker,
    ``lo = hi = None``.
    """

    lo: T | None = None
    hi: T | None = None

    def __post_init__(self) -> None:
        if (self.lo is None) != (self.hi is None):
            raise ValueError(
                f"SpanInc needs both bounds, got lo={self.lo!r}, hi={self.hi!r}.\n"
                f"Closed spans cannot leave a side unbounded.\n"
                f"Hint: use Span.inc_unb(lo) or Span.unb_inc(hi) for one-sided spans"
            )
        if self.lo is not None and not self.lo <= self.hi:
            object.__setattr__(self, "lo", None)
            object.__setattr__(self, "hi", None)

    @classmethod
    def new(cls, lo: T, hi: T) -> "SpanInc[T]":
        return cls(lo, hi)

    @classmethod
    def exc(cls, lo: T, hi: T) -> "SpanInc[T] | None":
        """``[lo, hi)`` in closed form; None if ``hi`` has no predecessor.

        This holds even when ``[lo, hi)`` is empty: ``exc(p, p)`` needs the
        value below ``p`` just like any other request.
        """
        end = to_closed(hi, RIGHT)
        return None if end is None else cls(lo, end)

    @classmethod
    def point(cls, p: T) -> "SpanInc[T]":
        return cls(p, p)

    @classmethod
    def empty(cls) -> "SpanInc[Any]":
        return cls()

    @classmethod
    def from_range_inclusive(cls, r: RangeInclusive[T]) -> "SpanInc[T]":
        return cls(r.start, r.end)

    @classmethod
    def from_range(cls, r: Range[T]) -> "SpanInc[T] | None":
        return cls.exc(r.start, r.stop)

    @override
    def is_empty(self) -> bool:
        return self.lo is None

    @override
    def endpoints(self) -> tuple[Endpoint[T], Endpoint[T]]:
        if self.lo is None:
            return _VOID
        return Closed(self.lo), Closed(self.hi)

    @override
    def contains(self, point: T) -> bool:
        return self.lo is not None and self.lo <= point <= self.hi

    @override
    def shift(self, delta: Any) -> "SpanInc[T]":
        if self.lo is None:
            return self
        return SpanInc(self.lo + delta, self.hi + delta)

    @overload
    def cover(self, other: "SpanInc[T]") -> "SpanInc[T]": ...

    @overload
    def cover(self, other: SpanOps[T]) -> "Span[T]": ...

    @override
    def cover(self, other: SpanOps[T]) -> "SpanInc[T] | Span[T]":
        if not isinstance(other, SpanInc):
            return super().cover(other)
        if self.lo is None:
            return other
        if other.lo is None:
            return self
        return SpanInc(min(self.lo, other.lo), max(self.hi, other.hi))

    @overload
    def intersect(self, other: "SpanInc[T]") -> "SpanInc[T]": ...

    @overload
    def intersect(self, other: SpanOps[T]) -> "Span[T]": ...

    @override
    def intersect(self, other: SpanOps[T]) -> "SpanInc[T] | Span[T]":
        if not isinstance(other, SpanInc):
            return super().intersect(other)
        if self.lo is None or other.lo is None:
            return SpanInc.empty()
        return SpanInc(max(self.lo, other.lo), min(self.hi, other.hi))

    @override
    def to_inc(self) -> "SpanInc[T]":
        return self

    def as_range_inclusive(self) -> RangeInclusive[T] | None:
        """The closed ``RangeInclusive``; None only for the empty marker."""
        if self.lo is None:
            return None
        return RangeInclusive(self.lo, self.hi)

    def __repr__(self) -> str:
        return f"SpanInc({self})"
