"""Show mode: render a single-message payload (headers, tags, crypto, body)."""

import typer

from notmuch_view.errors import NotmuchViewError
from notmuch_view.message.decode import decode_message_document
from notmuch_view.message.view import render_message_view
from notmuch_view.utils.logger import bind_context, clear_context

from .shared import STDIN_MARKER, emit, fail, logger, read_payload


def show(
    payload: str = typer.Argument(STDIN_MARKER, help="`notmuch show --format=json --entire-thread=false` output, or - for stdin"),
) -> None:
    """Render one message as text."""
    log = logger.bind(command="show", payload=payload)
    data = read_payload(payload)
    try:
        document = decode_message_document(data)
        bind_context(command="show", message_id=document.id)
        text = render_message_view(document)
    except NotmuchViewError as e:
        fail(log, "show.render_failed", e)

    emit(text)
    log.info("show.complete", message_id=document.id)
    clear_context()
