"""Tests for search summaries and thread id lookup."""

from pathlib import Path

import pytest

from notmuch_view.errors import DecodeError, NotFound
from notmuch_view.search import (
    decode_search_summaries,
    decode_thread_ids,
    is_thread_id,
    render_search_results,
)

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def summaries():
    return decode_search_summaries((FIXTURES / "search.json").read_bytes())


def test_decode_summaries(summaries):
    assert len(summaries) == 2
    first = summaries[0]
    assert first.thread == "0000000000000001"
    assert (first.matched, first.total) == (3, 4)
    assert first.tags == ["inbox", "unread"]
    assert summaries[1].query[1] is None


def test_render_search_results(summaries):
    lines = render_search_results(summaries).split("\n")
    assert lines[0] == "0000000000000001\t(3/4)\tPlanning the offsite\t[inbox unread]"
    thread, counts, subject, tags = lines[1].split("\t")
    assert thread == "00000000000000a2"
    assert counts == "(1/1)"
    assert subject == summaries[1].subject[:60] + "..."
    assert tags == "[inbox newsletter]"


def test_empty_results():
    assert decode_search_summaries(b"[]") == []
    assert render_search_results([]) == ""


def test_summary_with_wrong_types():
    with pytest.raises(DecodeError):
        decode_search_summaries(b'[{"thread": "0000000000000001", "matched": "many"}]')


def test_invalid_json():
    with pytest.raises(DecodeError):
        decode_search_summaries(b"[{")


@pytest.mark.parametrize(
    "selection,expected",
    [
        ("0000000000000001", True),
        (" 00000000000000a2\n", True),
        ("thread:0000000000000001", True),
        ("msg_3", False),
        ("00000000000001", False),
        ("000000000000000G", False),
    ],
)
def test_is_thread_id(selection, expected):
    assert is_thread_id(selection) is expected


def test_decode_thread_ids():
    assert decode_thread_ids(b'["0000000000000001"]', query="id:a@b") == "0000000000000001"


def test_no_thread_ids():
    with pytest.raises(NotFound) as exc_info:
        decode_thread_ids(b"[]", query="id:missing@example.com")
    assert exc_info.value.key == "id:missing@example.com"


def test_many_thread_ids():
    with pytest.raises(DecodeError):
        decode_thread_ids(b'["0000000000000001", "0000000000000002"]')
