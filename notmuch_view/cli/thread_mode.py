"""Thread mode: render a thread payload as an indented token list."""

import typer
from rich.table import Table

from notmuch_view.config import ID_PREFIX
from notmuch_view.errors import NotmuchViewError
from notmuch_view.thread.session import ThreadView
from notmuch_view.utils.logger import bind_context, clear_context

from .shared import STDIN_MARKER, console, emit, fail, logger, read_payload


def thread(
    payload: str = typer.Argument(STDIN_MARKER, help="`notmuch show --body=false --format=json` output, or - for stdin"),
    prefix: str = typer.Option(ID_PREFIX, "--prefix", "-p", help="Token prefix"),
    show_map: bool = typer.Option(False, "--show-map", help="Also print the token table"),
) -> None:
    """Render a thread: one line per message, indented by reply depth."""
    log = logger.bind(command="thread", payload=payload)
    data = read_payload(payload)
    bind_context(command="thread")
    try:
        view = ThreadView.from_payload(data, prefix=prefix)
    except NotmuchViewError as e:
        fail(log, "thread.render_failed", e)

    emit(view.text)
    if show_map:
        table = Table(title="Tokens")
        table.add_column("Token", style="cyan")
        table.add_column("Message ID", style="green")
        for token, message_id in view.id_map.items():
            table.add_row(token, message_id)
        console.print(table)
    log.info("thread.complete", messages=len(view.id_map))
    clear_context()
