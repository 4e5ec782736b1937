"""Search mode: render `notmuch search --output=summary` results, one thread per line."""

import typer

from notmuch_view.config import DEFAULT_QUERY
from notmuch_view.errors import NotmuchViewError
from notmuch_view.search import decode_search_summaries, render_search_results

from .shared import STDIN_MARKER, console, emit, fail, logger, read_payload


def search(
    payload: str = typer.Argument(STDIN_MARKER, help="`notmuch search --format=json --output=summary` output, or - for stdin"),
    show_query: bool = typer.Option(False, "--show-query", help="Print the default query first"),
) -> None:
    """Render search summaries: thread id, matched/total, subject, tags."""
    log = logger.bind(command="search", payload=payload)
    data = read_payload(payload)
    try:
        summaries = decode_search_summaries(data)
    except NotmuchViewError as e:
        fail(log, "search.decode_failed", e)

    if show_query:
        console.print(f"[dim]Query: {DEFAULT_QUERY}[/dim]", markup=True, highlight=False)
    emit(render_search_results(summaries))
    log.info("search.complete", threads=len(summaries))
