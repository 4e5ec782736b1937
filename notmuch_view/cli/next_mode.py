"""Next-unread mode: first unread message after a given one in a thread payload."""

import typer

from notmuch_view.errors import NotmuchViewError
from notmuch_view.thread.decode import decode_thread
from notmuch_view.thread.traversal import next_unread_in_thread

from .shared import emit, fail, logger, read_payload


def next_unread(
    payload: str = typer.Argument(..., help="Thread payload file, or - for stdin"),
    message_id: str = typer.Argument(..., help="Current message id"),
) -> None:
    """Print the id of the next unread message after MESSAGE_ID."""
    log = logger.bind(command="next-unread", message_id=message_id)
    data = read_payload(payload)
    try:
        next_id = next_unread_in_thread(decode_thread(data), message_id)
    except NotmuchViewError as e:
        fail(log, "next_unread.failed", e)

    emit(next_id)
    log.info("next_unread.complete", next_message_id=next_id)
