"""Spans over calendar values, the way calendar and timeseries code uses them."""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

from spanalgebra import Range, RangeInclusive, Span, SpanExc, SpanInc

NY = ZoneInfo("America/New_York")


def test_days_are_discrete():
    """A closed run of days converts to the half-open form and back."""
    january = SpanInc(date(2024, 1, 1), date(2024, 1, 31))
    half_open = january.to_exc()
    assert half_open == SpanExc(date(2024, 1, 1), date(2024, 2, 1))
    assert half_open.to_inc() == january
    assert january.size() == timedelta(days=31)


def test_open_days_normalize_to_closed_days():
    span = Span.exc_exc(date(2024, 1, 1), date(2024, 1, 3))
    assert span.normalized() == Span.point(date(2024, 1, 2))
    assert Span.exc_exc(date(2024, 1, 1), date(2024, 1, 2)).is_empty()


def test_timestamps_are_continuous():
    """There is no next instant, so timestamp spans never change shape."""
    start = datetime(2024, 3, 8, 9, 30, tzinfo=NY)
    end = datetime(2024, 3, 8, 16, 0, tzinfo=NY)
    session = SpanInc(start, end)
    assert session.to_exc() is None
    assert session.to_range() is None
    assert session.as_range_inclusive() == RangeInclusive(start, end)
    assert Span.exc_exc(start, end).normalized() == Span.exc_exc(start, end)
    assert SpanExc(start, end).size() == timedelta(hours=6, minutes=30)


def test_sessions_intersect_and_cover():
    day = date(2024, 3, 8)
    regular = SpanExc(datetime(2024, 3, 8, 9, 30, tzinfo=NY), datetime(2024, 3, 8, 16, tzinfo=NY))
    morning = SpanExc(datetime(2024, 3, 8, 4, tzinfo=NY), datetime(2024, 3, 8, 12, tzinfo=NY))
    after_hours = SpanExc(datetime(2024, 3, 8, 16, tzinfo=NY), datetime(2024, 3, 8, 20, tzinfo=NY))

    assert regular & morning == SpanExc(
        datetime(2024, 3, 8, 9, 30, tzinfo=NY), datetime(2024, 3, 8, 12, tzinfo=NY)
    )
    assert (regular & after_hours).is_empty()
    extended = morning | after_hours
    assert extended == SpanExc(datetime(2024, 3, 8, 4, tzinfo=NY), datetime(2024, 3, 8, 20, tzinfo=NY))
    assert datetime(2024, 3, 8, 13, tzinfo=NY) in extended
    assert extended.contains_span(regular)
    assert datetime.combine(day, datetime.min.time(), tzinfo=NY) not in extended


def test_shift_by_calendar_months():
    quarter = SpanExc(date(2024, 1, 1), date(2024, 4, 1))
    assert quarter + relativedelta(months=3) == SpanExc(date(2024, 4, 1), date(2024, 7, 1))
    assert quarter - relativedelta(years=1) == SpanExc(date(2023, 1, 1), date(2023, 4, 1))
    assert Span.inc_unb(date(2024, 1, 31)) + relativedelta(months=1) == Span.inc_unb(
        date(2024, 2, 29)
    )


def test_month_end_spans():
    month = SpanInc(date(2024, 1, 31), date(2024, 1, 31) + relativedelta(months=1))
    assert month == SpanInc(date(2024, 1, 31), date(2024, 2, 29))
    assert date(2024, 2, 15) in month
    assert month.to_range() == Range(date(2024, 1, 31), date(2024, 3, 1))


def test_calendar_edges_have_no_neighbour():
    assert SpanInc(date(2024, 1, 1), date.max).to_exc() is None
    assert Span.exc_unb(date.max).to_range_from() is None
    assert Span.exc(date.min, date(2000, 1, 1)).to_inc() == SpanInc(date.min, date(1999, 12, 31))
    assert Span.exc_inc(date.min, date(2000, 1, 1)).to_inc() == SpanInc(date(1, 1, 2), date(2000, 1, 1))
