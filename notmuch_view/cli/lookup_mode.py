"""Lookup mode: resolve a token selected in a rendered thread back to its message id."""

import typer
from rich.markup import escape

from notmuch_view.config import ID_PREFIX
from notmuch_view.errors import NotmuchViewError
from notmuch_view.thread.session import ThreadView

from .shared import err_console, emit, fail, logger, read_payload


def lookup(
    payload: str = typer.Argument(..., help="Thread payload file, or - for stdin"),
    token: str = typer.Argument(..., help="Token as shown in the thread view, e.g. msg_3"),
    prefix: str = typer.Option(ID_PREFIX, "--prefix", "-p", help="Token prefix"),
) -> None:
    """Render the thread in a fresh view and print the message id behind token."""
    log = logger.bind(command="lookup", token=token)
    data = read_payload(payload)
    try:
        view = ThreadView.from_payload(data, prefix=prefix)
    except NotmuchViewError as e:
        fail(log, "lookup.render_failed", e)

    message_id = view.resolve(token)
    if message_id is None:
        err_console.print(f"[yellow]Not a message token: {escape(token)}[/yellow]", soft_wrap=True)
        log.info("lookup.not_a_target")
        raise typer.Exit(1)
    emit(message_id)
    log.info("lookup.complete", message_id=message_id)
