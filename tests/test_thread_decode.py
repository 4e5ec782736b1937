"""Tests for thread decoding: shape dispatch, order, errors."""

from pathlib import Path

import pytest

from notmuch_view.errors import DecodeError
from notmuch_view.models.thread import SubThread, ThreadMessage
from notmuch_view.thread.decode import decode_thread, decode_thread_node
from notmuch_view.thread.traversal import count_messages, iter_messages

FIXTURES = Path(__file__).resolve().parent / "fixtures"


def test_decode_fixture_structure():
    """Objects become messages, arrays become sub-threads, order is kept."""
    root = decode_thread((FIXTURES / "thread.json").read_bytes())

    assert isinstance(root, SubThread)
    assert len(root.children) == 1
    thread = root.children[0]
    assert isinstance(thread, SubThread)
    pair = thread.children[0]
    first, replies = pair.children
    assert isinstance(first, ThreadMessage)
    assert first.id == "offsite-1@example.com"
    assert first.matched is True
    assert first.subject == "Planning the offsite"
    assert isinstance(replies, SubThread)
    assert len(replies.children) == 2

    assert [m.id for m in iter_messages(root)] == [
        "offsite-1@example.com",
        "offsite-2@example.org",
        "offsite-3@example.net",
        "offsite-4@example.net",
    ]
    assert count_messages(root) == 4


def test_message_fields():
    root = decode_thread((FIXTURES / "thread.json").read_bytes())
    second = list(iter_messages(root))[1]
    assert second.tags == ["inbox", "unread"]
    assert second.timestamp == 1578229200
    assert second.date_relative == "2020-01-05"
    assert len(second.filenames) == 2
    assert second.excluded is False
    third = list(iter_messages(root))[2]
    assert third.matched is False


def test_empty_thread():
    root = decode_thread(b"[]")
    assert root.children == []
    assert count_messages(root) == 0


def test_mixed_shapes_at_one_level():
    root = decode_thread(b'[{"id": "a"}, [{"id": "b"}, []], {"id": "c"}]')
    kinds = [type(child).__name__ for child in root.children]
    assert kinds == ["ThreadMessage", "SubThread", "ThreadMessage"]
    assert [m.id for m in iter_messages(root)] == ["a", "b", "c"]


@pytest.mark.parametrize("element", ["1", '"text"', "null", "true"])
def test_scalar_element_is_decode_error(element):
    """Anything but an object or array is rejected, with its path."""
    with pytest.raises(DecodeError) as exc_info:
        decode_thread(f'[[{{"id": "a"}}, {element}]]')
    assert exc_info.value.path == "$[0][1]"


def test_root_must_be_array():
    with pytest.raises(DecodeError):
        decode_thread(b'{"id": "a"}')


def test_invalid_json():
    with pytest.raises(DecodeError) as exc_info:
        decode_thread(b"[[{")
    assert "invalid JSON" in str(exc_info.value)


def test_bad_leaf_fails_whole_tree():
    """A leaf with a mistyped field aborts decoding; no partial tree."""
    with pytest.raises(DecodeError) as exc_info:
        decode_thread(b'[[{"id": "a"}, [{"id": "b", "tags": "unread"}]]]')
    assert exc_info.value.path == "$[0][1][0]"


def test_decode_thread_node_shapes():
    assert isinstance(decode_thread_node({"id": "x"}), ThreadMessage)
    assert isinstance(decode_thread_node([]), SubThread)
    with pytest.raises(DecodeError):
        decode_thread_node("x")
