"""Tests for pre-order flattening and next-unread lookup."""

from pathlib import Path

import pytest

from notmuch_view.errors import NoNextUnread, NotFound
from notmuch_view.models.thread import TagSet
from notmuch_view.thread.decode import decode_thread
from notmuch_view.thread.traversal import (
    count_messages,
    find_next_unread,
    next_unread_in_thread,
    pre_order,
)

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def thread():
    return decode_thread((FIXTURES / "thread.json").read_bytes())


def entry(message_id, *tags):
    return TagSet(message_id=message_id, tags=frozenset(tags))


def test_pre_order_entries(thread):
    entries = pre_order(thread)
    assert [e.message_id for e in entries] == [
        "offsite-1@example.com",
        "offsite-2@example.org",
        "offsite-3@example.net",
        "offsite-4@example.net",
    ]
    assert [e.unread for e in entries] == [False, True, False, True]
    assert count_messages(thread) == len(entries)


@pytest.mark.parametrize(
    "current,expected",
    [
        ("offsite-1@example.com", "offsite-2@example.org"),
        ("offsite-2@example.org", "offsite-4@example.net"),
        ("offsite-3@example.net", "offsite-4@example.net"),
    ],
)
def test_next_unread_in_thread(thread, current, expected):
    assert next_unread_in_thread(thread, current) == expected


def test_last_unread_has_no_successor(thread):
    with pytest.raises(NoNextUnread) as exc_info:
        next_unread_in_thread(thread, "offsite-4@example.net")
    assert exc_info.value.message_id == "offsite-4@example.net"


def test_unknown_message_is_not_found(thread):
    with pytest.raises(NotFound):
        next_unread_in_thread(thread, "nobody@example.com")


def test_only_messages_after_current_count():
    entries = [entry("a", "unread"), entry("b"), entry("c")]
    with pytest.raises(NoNextUnread):
        find_next_unread(entries, "b")


def test_duplicates_of_current_are_skipped():
    """A message stored twice appears twice; its copies are never the answer."""
    entries = [entry("a"), entry("a", "unread"), entry("b", "unread")]
    assert find_next_unread(entries, "a") == "b"


def test_custom_tag():
    entries = [entry("a"), entry("b", "unread"), entry("c", "flagged")]
    assert find_next_unread(entries, "a", tag="flagged") == "c"


def test_empty_entries():
    with pytest.raises(NotFound):
        find_next_unread([], "a")
