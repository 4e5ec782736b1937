"""CLI commands: one module per mode (thread, show, next-unread, lookup, search, navigate)."""

from typer import Typer

from notmuch_view.cli import (
    lookup_mode,
    message_mode,
    navigate_mode,
    next_mode,
    search_mode,
    thread_mode,
)

app = Typer(help="Render notmuch JSON output as navigable text")


def register_commands() -> None:
    """Register all CLI commands on the global app."""
    app.command()(thread_mode.thread)
    app.command()(message_mode.show)
    app.command(name="next-unread")(next_mode.next_unread)
    app.command()(lookup_mode.lookup)
    app.command()(search_mode.search)
    app.command()(navigate_mode.navigate)


register_commands()
