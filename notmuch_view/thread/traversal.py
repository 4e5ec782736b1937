"""Pre-order flattening of thread trees and next-unread navigation."""

from typing import Iterator

from notmuch_view.errors import NoNextUnread, NotFound
from notmuch_view.models.thread import SubThread, TagSet, ThreadMessage, ThreadNode

UNREAD_TAG = "unread"


def iter_messages(node: ThreadNode) -> Iterator[ThreadMessage]:
    """Yield leaf messages depth-first, parent before children."""
    if isinstance(node, ThreadMessage):
        yield node
        return
    for child in node.children:
        yield from iter_messages(child)


def pre_order(node: ThreadNode) -> list[TagSet]:
    """One (message id, tags) entry per leaf; sub-threads add no entries of their own."""
    return [TagSet(message_id=m.id, tags=frozenset(m.tags)) for m in iter_messages(node)]


def count_messages(node: ThreadNode) -> int:
    return sum(1 for _ in iter_messages(node))


def find_next_unread(entries: list[TagSet], message_id: str, tag: str = UNREAD_TAG) -> str:
    """Return the id of the first entry after message_id carrying `tag`.

    Raises NotFound if message_id is not in entries, NoNextUnread if nothing follows.
    """
    found = False
    for entry in entries:
        if entry.message_id == message_id:
            found = True
            continue
        if found and tag in entry.tags:
            return entry.message_id

    if not found:
        raise NotFound(message_id, what="message")
    raise NoNextUnread(message_id)


def next_unread_in_thread(thread: SubThread, message_id: str) -> str:
    return find_next_unread(pre_order(thread), message_id)
