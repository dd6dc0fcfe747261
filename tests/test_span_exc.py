import pytest

from spanalgebra import Range, RangeInclusive, Span, SpanExc, SpanInc


def test_contains_half_open():
    span = SpanExc(2, 5)
    for p in (2, 3, 4):
        assert span.contains(p)
    assert not span.contains(5)
    assert not span.contains(1)
    assert not span.is_empty()


def test_equal_bounds_are_empty():
    assert SpanExc(5, 5).is_empty()
    assert not SpanExc(5, 5).contains(5)


def test_every_empty_request_is_one_value():
    assert SpanExc(5, 5) == SpanExc.empty()
    assert SpanExc(9, 1) == SpanExc.empty()
    assert SpanExc(1.5, 1.5) == SpanExc()
    assert SpanExc.empty().lo is None
    assert SpanExc.empty().hi is None


def test_new_is_the_direct_constructor():
    assert SpanExc.new(2, 5) == SpanExc(2, 5)


def test_one_sided_construction_is_rejected():
    with pytest.raises(ValueError, match="Span.inc_unb"):
        SpanExc(1, None)
    with pytest.raises(ValueError, match="both bounds"):
        SpanExc(None, 1)


def test_inc_needs_a_successor():
    assert SpanExc.inc(2, 5) == SpanExc(2, 6)
    assert SpanExc.inc(2.0, 5.0) is None
    assert SpanExc.inc(False, True) is None
    assert SpanExc.inc(False, False) == SpanExc(False, True)


def test_point():
    assert SpanExc.point(3) == SpanExc(3, 4)
    assert SpanExc.point(3.0) is None


def test_intersect_stays_half_open():
    assert SpanExc(0, 10).intersect(SpanExc(5, 15)) == SpanExc(5, 10)
    assert (SpanExc(0, 10) & SpanExc(5, 15)) == SpanExc(5, 10)


def test_intersect_at_shared_boundary_is_empty():
    result = SpanExc(0, 5).intersect(SpanExc(5, 10))
    assert result.is_empty()
    assert result == SpanExc.empty()


def test_intersect_with_empty():
    assert SpanExc(0, 5).intersect(SpanExc.empty()) == SpanExc.empty()
    assert SpanExc.empty().intersect(SpanExc(0, 5)) == SpanExc.empty()


def test_intersect_with_other_shapes_is_general():
    assert SpanExc(0, 5).intersect(SpanInc(3, 7)) == Span.exc(3, 5)
    assert SpanExc(0, 5).intersect(Span.inc_unb(4)) == Span.exc(4, 5)
    assert SpanExc(0, 5).intersect(SpanInc(5, 7)) == Span.empty()


def test_cover():
    assert SpanExc(0, 2).cover(SpanExc(5, 7)) == SpanExc(0, 7)
    assert (SpanExc(0, 2) | SpanExc(1, 3)) == SpanExc(0, 3)
    assert SpanExc(0, 2).cover(SpanExc.empty()) == SpanExc(0, 2)
    assert SpanExc.empty().cover(SpanExc(0, 2)) == SpanExc(0, 2)
    assert SpanExc.empty().cover(SpanExc.empty()) == SpanExc.empty()
    assert SpanExc(0, 2).cover(SpanInc(1, 2)) == Span.inc(0, 2)


def test_contains_span():
    assert SpanExc(0, 10).contains_span(SpanExc(2, 5))
    assert not SpanExc(2, 5).contains_span(SpanExc(0, 10))
    assert SpanExc(0, 10).contains_span(SpanInc(0, 9))
    assert not SpanExc(0, 10).contains_span(SpanInc(0, 10))
    assert SpanExc(0, 10).contains_span(SpanExc.empty())
    assert SpanExc.empty().contains_span(SpanExc.empty())
    assert not SpanExc.empty().contains_span(SpanExc(0, 1))


def test_conversions():
    assert SpanExc(2, 6).to_inc() == SpanInc(2, 5)
    assert SpanExc(2.0, 6.0).to_inc() is None
    assert SpanExc.empty().to_inc() == SpanInc.empty()
    assert SpanExc(2, 6).to_exc() == SpanExc(2, 6)
    assert SpanExc(2, 6).to_span() == Span.exc(2, 6)
    assert SpanExc.empty().to_span() == Span.empty()


def test_ranges():
    assert SpanExc(2, 6).as_range() == Range(2, 6)
    assert SpanExc.empty().as_range() is None
    assert SpanExc(2, 6).to_range_inclusive() == RangeInclusive(2, 5)
    assert SpanExc(2.0, 6.0).to_range_inclusive() is None
    assert SpanExc.from_range(Range(2, 6)) == SpanExc(2, 6)
    assert SpanExc.from_range_inclusive(RangeInclusive(2, 5)) == SpanExc(2, 6)
    assert SpanExc.from_range_inclusive(RangeInclusive(2.0, 5.0)) is None


def test_slices():
    assert SpanExc.from_slice(slice(2, 6)) == SpanExc(2, 6)
    assert SpanExc(2, 6).to_slice() == slice(2, 6)
    assert SpanExc.empty().to_slice() is None
    with pytest.raises(ValueError, match="bounded slice"):
        SpanExc.from_slice(slice(2, None))


def test_size_and_shift():
    assert SpanExc(2, 6).size() == 4
    assert SpanExc.empty().size() is None
    assert SpanExc(2, 6) + 10 == SpanExc(12, 16)
    assert SpanExc(2, 6) - 2 == SpanExc(0, 4)
    assert SpanExc.empty() + 10 == SpanExc.empty()


def test_str():
    assert str(SpanExc(2, 5)) == "[2,5)"
    assert str(SpanExc.empty()) == "empty"
    assert repr(SpanExc(2, 5)) == "SpanExc([2,5))"
