"""Render a thread tree as indented, tab-aligned lines, one per message."""

import re
from email.utils import getaddresses

from notmuch_view.config import MAX_SUBJECT_LEN
from notmuch_view.errors import AddressParseError
from notmuch_view.models.thread import SubThread, ThreadMessage, ThreadNode
from notmuch_view.thread.id_map import IdentifierMap
from notmuch_view.utils.logger import get_logger

logger = get_logger("notmuch_view.thread.render")

# Quoted display names may hold brackets, commas and spaces
_QUOTED_STRING = re.compile(r'"(?:\\.|[^"\\])*"')


def truncate_subject(subject: str, max_len: int = MAX_SUBJECT_LEN) -> str:
    if len(subject) > max_len:
        return subject[:max_len] + "..."
    return subject


def format_tags(tags: list[str]) -> str:
    return "[" + " ".join(tags) + "]"


def parse_address(value: str) -> tuple[str, str]:
    """Parse a header holding exactly one address into (display name, address).

    Raises AddressParseError for empty headers, lists, unbalanced angle brackets and
    values without a well-formed addr-spec.
    """
    unquoted = _QUOTED_STRING.sub("", value)
    if unquoted.count("<") != unquoted.count(">"):
        raise AddressParseError(value, "unbalanced angle brackets")

    pairs = getaddresses([value])
    if len(pairs) != 1:
        raise AddressParseError(value, f"expected a single address, got {len(pairs)}")
    name, address = pairs[0]
    local, _, domain = address.rpartition("@")
    if not local or not domain or "@" in local:
        raise AddressParseError(value, "no addr-spec found")
    if any(ch.isspace() for ch in address):
        raise AddressParseError(value, "whitespace in addr-spec")
    return name, address


def display_name(from_header: str) -> str:
    """Display name of the sender, else the bare address."""
    name, address = parse_address(from_header)
    return name or address


def render_message_line(message: ThreadMessage, depth: int, id_map: IdentifierMap) -> str:
    token = id_map.put(message.id)
    sender = display_name(message.headers.get("From", ""))
    subject = truncate_subject(message.subject)
    logger.debug("thread.render.message", token=token, message_id=message.id, depth=depth)
    return f"{token}\t{' ' * depth}{subject}\t({sender})\t{format_tags(message.tags)}"


def render_tree(node: ThreadNode, depth: int, id_map: IdentifierMap) -> list[str]:
    """Lines for node in pre-order. Sub-threads only indent their children."""
    if isinstance(node, ThreadMessage):
        return [render_message_line(node, depth, id_map)]
    lines: list[str] = []
    for child in node.children:
        lines.extend(render_tree(child, depth + 1, id_map))
    return lines


def render_thread(thread: SubThread, id_map: IdentifierMap) -> str:
    """Render the root's children starting at depth 1.

    An unparseable From header fails the whole render (AddressParseError propagates).
    """
    return "\n".join(render_tree(thread, 0, id_map))
