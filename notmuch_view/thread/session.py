"""Thread view session: one decoded tree, its token map and its rendered text."""

from typing import Optional

from notmuch_view.config import ID_PREFIX
from notmuch_view.errors import NotFound
from notmuch_view.models.thread import SubThread, TagSet
from notmuch_view.thread.decode import decode_thread
from notmuch_view.thread.id_map import IdentifierMap
from notmuch_view.thread.render import render_thread
from notmuch_view.thread.traversal import find_next_unread, pre_order
from notmuch_view.utils.logger import get_logger

logger = get_logger("notmuch_view.thread.session")


class ThreadView:
    """State of one displayed thread. Sessions never share their IdentifierMap."""

    def __init__(self, thread: SubThread, prefix: str = ID_PREFIX, thread_id: Optional[str] = None):
        self.thread = thread
        self.thread_id = thread_id
        self.id_map = IdentifierMap(prefix)
        self.text = render_thread(thread, self.id_map)
        logger.debug("thread.view.rendered", thread_id=thread_id, messages=len(self.id_map))

    @classmethod
    def from_payload(
        cls,
        payload: bytes | str,
        prefix: str = ID_PREFIX,
        thread_id: Optional[str] = None,
    ) -> "ThreadView":
        return cls(decode_thread(payload), prefix=prefix, thread_id=thread_id)

    def resolve(self, selection: str) -> Optional[str]:
        """Full message id for a selected token, or None if it is not a navigation target."""
        token = selection.strip(" \r\t\n")
        if not token.startswith(self.id_map.prefix):
            return None
        try:
            return self.id_map.get(token)
        except NotFound:
            logger.debug("thread.view.unknown_token", thread_id=self.thread_id, token=token)
            return None

    def entries(self) -> list[TagSet]:
        return pre_order(self.thread)

    def next_unread(self, message_id: str) -> str:
        return find_next_unread(self.entries(), message_id)
