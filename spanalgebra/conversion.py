"""Open/closed interchange of boundary points, per value type.

For a discrete type the closed upper bound 5 and the open upper bound 6
describe the same span, so a bound can move between the two forms. For a
continuous type (floats, decimals, timestamps) there is no neighbouring
value and no such move exists.

Both directions are ``functools.singledispatch`` functions keyed on the
type of the point. The fallback implementation returns None, so a type
only supports the interchange once an implementation has been registered
for it. None always means "not representable", never a failure.
"""

import logging
from collections.abc import Callable
from datetime import date, datetime, timedelta
from functools import singledispatch
from typing import Any, TypeVar

from spanalgebra.endpoint import Closed, Endpoint, Open, Side, Unbounded

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DAY = timedelta(days=1)


@singledispatch
def to_open(p: Any, side: Side) -> Any | None:
    """Return the open point equivalent to closed point ``p`` on ``side``.

    For integers the closed lower bound 5 becomes the open lower bound 4 and
    the closed upper bound 5 becomes the open upper bound 6.
    """
    return None


@singledispatch
def to_closed(p: Any, side: Side) -> Any | None:
    """Return the closed point equivalent to open point ``p`` on ``side``."""
    return None


@to_open.register
def _int_to_open(p: int, side: Side) -> int:
    return p - 1 if side is Side.LEFT else p + 1


@to_closed.register
def _int_to_closed(p: int, side: Side) -> int:
    return p + 1 if side is Side.LEFT else p - 1


# bool subclasses int, but its range stops at False and True.
@to_open.register
def _bool_to_open(p: bool, side: Side) -> bool | None:
    if side is Side.LEFT:
        return False if p else None
    return None if p else True


@to_closed.register
def _bool_to_closed(p: bool, side: Side) -> bool | None:
    if side is Side.LEFT:
        return None if p else True
    return False if p else None


def _step_date(p: date, forward: bool) -> date | None:
    try:
        return p + _DAY if forward else p - _DAY
    except OverflowError:
        return None


@to_open.register
def _date_to_open(p: date, side: Side) -> date | None:
    return _step_date(p, forward=side is Side.RIGHT)


@to_closed.register
def _date_to_closed(p: date, side: Side) -> date | None:
    return _step_date(p, forward=side is Side.LEFT)


# datetime subclasses date; timestamps are continuous and must not pick up
# the whole-day stepping registered above.
@to_open.register
def _datetime_to_open(p: datetime, side: Side) -> None:
    return None


@to_closed.register
def _datetime_to_closed(p: datetime, side: Side) -> None:
    return None


def register_conversion(
    cls: type[T],
    *,
    to_open_fn: Callable[[T, Side], T | None],
    to_closed_fn: Callable[[T, Side], T | None],
) -> None:
    """Opt ``cls`` into open/closed interchange.

    Both callables receive a point and the side it bounds, and return the
    equivalent point in the other form, or None where no such point exists
    (at the edge of a bounded type, for example). Subclasses of ``cls``
    inherit the registration unless they are registered themselves.

    Example:
        >>> register_conversion(
        ...     Weekday,
        ...     to_open_fn=lambda d, side: d.previous() if side is Side.LEFT else d.next(),
        ...     to_closed_fn=lambda d, side: d.next() if side is Side.LEFT else d.previous(),
        ... )
    """
    if not isinstance(cls, type):
        raise TypeError(
            f"register_conversion() expects a type as its first argument.\n"
            f"Got {type(cls).__name__!r}: {cls!r}\n"
            f"Example: register_conversion(MyTick, to_open_fn=..., to_closed_fn=...)"
        )
    to_open.register(cls, to_open_fn)
    to_closed.register(cls, to_closed_fn)
    logger.debug("Registered open/closed endpoint conversion for %s", cls.__qualname__)


def unregister_conversion(cls: type) -> None:
    """Make ``cls`` explicitly unsupported, shadowing any inherited registration."""
    to_open.register(cls, _unsupported)
    to_closed.register(cls, _unsupported)
    logger.debug("Marked %s as having no open/closed endpoint conversion", cls.__qualname__)


def _unsupported(p: Any, side: Side) -> None:
    return None


def closed_point(endpoint: Endpoint[T], side: Side) -> T | None:
    """The closed point equivalent to ``endpoint`` used as the ``side`` bound."""
    if isinstance(endpoint, Closed):
        return endpoint.p
    if isinstance(endpoint, Open):
        return to_closed(endpoint.p, side)
    return None


def open_point(endpoint: Endpoint[T], side: Side) -> T | None:
    """The open point equivalent to ``endpoint`` used as the ``side`` bound."""
    if isinstance(endpoint, Open):
        return endpoint.p
    if isinstance(endpoint, Closed):
        return to_open(endpoint.p, side)
    return None


def normalize(endpoint: Endpoint[T], side: Side) -> Endpoint[T]:
    """Replace an open endpoint with its closed equivalent where one exists."""
    if isinstance(endpoint, Open):
        p = to_closed(endpoint.p, side)
        if p is not None:
            return Closed(p)
    return endpoint


def is_unbounded(endpoint: Endpoint[Any], side: Side) -> bool:
    """True if ``endpoint`` runs off to infinity on ``side``."""
    return isinstance(endpoint, Unbounded) and endpoint.side is side
