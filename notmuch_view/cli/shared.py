"""Shared CLI helpers: consoles, logger, payload input, error reporting."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from notmuch_view.errors import NotmuchViewError
from notmuch_view.utils.logger import BoundLogger, clear_context, get_logger

console = Console()
err_console = Console(stderr=True)
logger = get_logger("notmuch_view.cli")

STDIN_MARKER = "-"


def read_payload(source: str) -> bytes:
    """Read captured notmuch output from a file, or from stdin for `-`."""
    if source == STDIN_MARKER:
        data = typer.get_binary_stream("stdin").read()
        logger.debug("payload.read", source="stdin", size=len(data))
        return data
    path = Path(source)
    if not path.is_file():
        err_console.print(f"[red]No such payload file: {escape(source)}[/red]", soft_wrap=True)
        logger.warning("payload.missing", path=source)
        raise typer.Exit(1)
    data = path.read_bytes()
    logger.debug("payload.read", source=str(path), size=len(data))
    return data


def emit(text: str) -> None:
    """Write rendered text verbatim (tabs and brackets untouched)."""
    typer.echo(text)


def fail(log: BoundLogger, event: str, exc: NotmuchViewError) -> None:
    """Report a core error once and exit with status 1."""
    err_console.print(f"[red]{escape(str(exc))}[/red]", soft_wrap=True)
    log.warning(event, error=str(exc), error_type=type(exc).__name__)
    clear_context()
    raise typer.Exit(1) from exc
