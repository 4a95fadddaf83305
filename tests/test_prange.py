import pytest

from pslister.prange import Interval, PageRange, PageRangeError


def make_range(spec):
    page_range = PageRange()
    page_range.set_string(spec)
    return page_range


def test_interval_str_closed_and_open():
    assert str(Interval(2, 4)) == "2-4"
    assert str(Interval(7, 0)) == "7-"
    assert str(Interval(0, 9)) == "-9"


def test_interval_contains():
    closed = Interval(2, 4)
    assert closed.contains(2) and closed.contains(4)
    assert not closed.contains(1) and not closed.contains(5)
    assert Interval(5, 0).contains(1000)
    assert not Interval(5, 0).contains(4)
    assert Interval(0, 3).contains(1)
    assert not Interval(0, 3).contains(4)


def test_interval_to_text_without_offset():
    assert Interval(2, 4).to_text(0) == "2-4"
    assert Interval(5, 5).to_text(0) == "5"
    assert Interval(20, 0).to_text(0) == "20-"


def test_interval_open_low_bound_gets_one():
    assert Interval(0, 10).to_text(0) == "1-10"


def test_interval_passed_gives_nothing():
    assert Interval(2, 4).to_text(10) == ""


def test_interval_applies_above():
    assert not Interval(2, 0).applies_above(5)
    assert Interval(2, 4).applies_above(5)
    assert Interval(8, 0).applies_above(5)


def test_set_string_selects_pages():
    page_range = make_range("-2, 4, 10-15, 20-")
    selected = [n for n in range(1, 25) if page_range.should_print(n)]
    assert selected == [1, 2, 4, 10, 11, 12, 13, 14, 15,
                        20, 21, 22, 23, 24]


def test_colon_is_a_separator_too():
    page_range = make_range("3:5")
    assert page_range.intervals == [Interval(3, 5)]


def test_tabs_and_commas_separate():
    page_range = make_range("1,\t3")
    assert page_range.intervals == [Interval(1, 1), Interval(3, 3)]


def test_toc_only():
    page_range = make_range("toc")
    assert page_range.toc
    assert page_range.intervals == []
    assert page_range.should_print(5, is_toc=True)
    assert not page_range.should_print(5, is_toc=False)


def test_no_range_prints_everything():
    page_range = PageRange()
    assert all(page_range.should_print(n) for n in (1, 50, 999))


def test_none_resets():
    page_range = make_range("2-3, toc")
    page_range.set_string(None)
    assert page_range.intervals == []
    assert not page_range.toc


@pytest.mark.parametrize("spec", ["abc", "5-3", "4x", "tocx", "1-2x", "t"])
def test_invalid_specifications(spec):
    with pytest.raises(PageRangeError, match="invalid interval"):
        make_range(spec)


def test_to_buffer_round_trip():
    for spec in ("2,5", "1-10", "20-", "2-4,6-"):
        assert make_range(spec).to_buffer(0) == spec


def test_to_buffer_open_start():
    assert make_range("-10").to_buffer(0) == "1-10"


def test_to_buffer_skips_unrestricting_intervals():
    assert make_range("20-").to_buffer(25) == ""


def test_applies_above():
    assert make_range("2,5,10-20").applies_above(21)
    assert not make_range("20-").applies_above(21)
    assert not PageRange().applies_above(3)


def test_str_round_trip():
    assert str(make_range("2-4,6-")) == "2-4,6-"