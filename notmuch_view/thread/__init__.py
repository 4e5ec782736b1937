"""Thread decoding, rendering and navigation."""

from notmuch_view.thread.decode import decode_thread, decode_thread_node
from notmuch_view.thread.id_map import IdentifierMap
from notmuch_view.thread.render import display_name, parse_address, render_thread
from notmuch_view.thread.session import ThreadView
from notmuch_view.thread.traversal import find_next_unread, iter_messages, pre_order

__all__ = [
    "decode_thread",
    "decode_thread_node",
    "IdentifierMap",
    "display_name",
    "parse_address",
    "render_thread",
    "ThreadView",
    "find_next_unread",
    "iter_messages",
    "pre_order",
]
