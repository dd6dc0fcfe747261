from .conversion import register_conversion, to_closed, to_open, unregister_conversion
from .core import Span, SpanExc, SpanInc, SpanOps
from .endpoint import Closed, Endpoint, Open, Side, Unbounded
from .ranges import (
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

__all__ = [
    "Span",
    "SpanExc",
    "SpanInc",
    "SpanOps",
    "Endpoint",
    "Closed",
    "Open",
    "Unbounded",
    "Side",
    "to_open",
    "to_closed",
    "register_conversion",
    "unregister_conversion",
    "Bound",
    "Included",
    "Excluded",
    "Range",
    "RangeInclusive",
    "RangeFrom",
    "RangeTo",
    "RangeToInclusive",
    "RangeFull",
]
