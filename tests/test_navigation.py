"""Tests for next-unread navigation through a notmuch source."""

import shutil
from pathlib import Path

import pytest

from notmuch_view.errors import DecodeError, NoNextUnread, NotFound
from notmuch_view.notmuch import FixtureSource, find_next_unread_message, fixture_name

FIXTURES = Path(__file__).resolve().parent / "fixtures"

THREAD_ID = "0000000000000001"
MESSAGE_IDS = [
    "offsite-1@example.com",
    "offsite-2@example.org",
    "offsite-3@example.net",
    "offsite-4@example.net",
]


@pytest.fixture
def fixture_dir(tmp_path):
    """Recorded payloads for the offsite thread, as `notmuch` would return them."""
    shutil.copy(FIXTURES / "thread.json", tmp_path / fixture_name("thread", THREAD_ID))
    for message_id in MESSAGE_IDS:
        (tmp_path / fixture_name("threads", f"id:{message_id}")).write_text(f'["{THREAD_ID}"]')
    return tmp_path


class InMemorySource:
    """Payloads keyed by command and argument."""

    def __init__(self, threads, thread_payloads):
        self.threads = threads
        self.thread_payloads = thread_payloads
        self.calls = []

    def show_message(self, message_id):
        raise NotImplementedError

    def show_thread(self, thread_id):
        self.calls.append(("show_thread", thread_id))
        return self.thread_payloads[thread_id]

    def search_threads(self, query):
        self.calls.append(("search_threads", query))
        return self.threads[query]

    def search_summary(self, query):
        raise NotImplementedError


def test_fixture_name_is_filesystem_safe():
    assert fixture_name("thread", THREAD_ID) == "thread-0000000000000001.json"
    assert fixture_name("threads", "id:a b/c@x.org") == "threads-id_a_b_c@x.org.json"


@pytest.mark.parametrize(
    "current,expected",
    [
        ("offsite-1@example.com", "offsite-2@example.org"),
        ("offsite-2@example.org", "offsite-4@example.net"),
        ("offsite-3@example.net", "offsite-4@example.net"),
    ],
)
def test_find_next_unread_message(fixture_dir, current, expected):
    assert find_next_unread_message(FixtureSource(fixture_dir), current) == expected


def test_no_next_unread(fixture_dir):
    with pytest.raises(NoNextUnread):
        find_next_unread_message(FixtureSource(fixture_dir), "offsite-4@example.net")


def test_missing_recording(fixture_dir):
    with pytest.raises(NotFound):
        find_next_unread_message(FixtureSource(fixture_dir), "elsewhere@example.com")


def test_fixture_source_reads_bytes(fixture_dir):
    source = FixtureSource(fixture_dir)
    assert source.search_threads("id:offsite-1@example.com") == f'["{THREAD_ID}"]'.encode()
    with pytest.raises(NotFound):
        source.show_message("offsite-1@example.com")


def test_queries_issued_in_order():
    source = InMemorySource(
        threads={"id:a@x.org": b'["00000000000000ff"]'},
        thread_payloads={"00000000000000ff": b'[[{"id": "a@x.org"}, [{"id": "b@x.org", "tags": ["unread"]}]]]'},
    )
    assert find_next_unread_message(source, "a@x.org") == "b@x.org"
    assert source.calls == [("search_threads", "id:a@x.org"), ("show_thread", "00000000000000ff")]


def test_message_without_thread():
    source = InMemorySource(threads={"id:a@x.org": b"[]"}, thread_payloads={})
    with pytest.raises(NotFound):
        find_next_unread_message(source, "a@x.org")


def test_ambiguous_thread():
    source = InMemorySource(
        threads={"id:a@x.org": b'["00000000000000ff", "00000000000000fe"]'}, thread_payloads={}
    )
    with pytest.raises(DecodeError):
        find_next_unread_message(source, "a@x.org")


def test_message_missing_from_its_thread():
    source = InMemorySource(
        threads={"id:a@x.org": b'["00000000000000ff"]'},
        thread_payloads={"00000000000000ff": b'[[{"id": "b@x.org", "tags": ["unread"]}, []]]'},
    )
    with pytest.raises(NotFound):
        find_next_unread_message(source, "a@x.org")
