"""Navigation across notmuch queries: jump to the next unread message of a thread."""

from notmuch_view.notmuch.protocol import NotmuchSource
from notmuch_view.search import decode_thread_ids
from notmuch_view.thread.decode import decode_thread
from notmuch_view.thread.traversal import find_next_unread, pre_order
from notmuch_view.utils.logger import get_logger

logger = get_logger("notmuch_view.notmuch.navigation")


def find_next_unread_message(source: NotmuchSource, message_id: str) -> str:
    """Id of the next unread message after message_id in its own thread.

    Raises NotFound (no thread, or message missing from it) or NoNextUnread.
    """
    query = f"id:{message_id}"
    thread_id = decode_thread_ids(source.search_threads(query), query=query)
    thread = decode_thread(source.show_thread(thread_id))

    entries = pre_order(thread)
    log = logger.bind(message_id=message_id, thread_id=thread_id)
    log.debug("navigation.pre_order", entries=[e.message_id for e in entries])

    next_id = find_next_unread(entries, message_id)
    log.info("navigation.next_unread", next_message_id=next_id)
    return next_id
