"""Pagination — offset arithmetic and look-ahead trimming."""

from wordbank.core.pagination import page_offset, trim_to_page


def test_first_page_offset_is_zero():
    assert page_offset(1, 10) == 0


def test_offset_advances_by_page_size():
    assert page_offset(3, 10) == 20


def test_lookahead_row_signals_more():
    items, meta = trim_to_page(list(range(11)), 1, 10)
    assert items == list(range(10))
    assert meta.has_more is True


def test_short_page_has_no_more():
    items, meta = trim_to_page([1, 2], 2, 10)
    assert items == [1, 2]
    assert meta.has_more is False
    assert meta.page == 2
