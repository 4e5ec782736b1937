"""Single-message decoding and rendering."""

from notmuch_view.message.decode import decode_message_document, decode_part
from notmuch_view.message.render import (
    render_content,
    render_crypto,
    render_document,
    render_part,
    select_alternative,
)
from notmuch_view.message.view import render_message_view

__all__ = [
    "decode_message_document",
    "decode_part",
    "render_content",
    "render_crypto",
    "render_document",
    "render_part",
    "select_alternative",
    "render_message_view",
]
