"""Navigate mode: next unread message across recorded search and thread payloads."""

from pathlib import Path

import typer

from notmuch_view.config import FIXTURE_DIR
from notmuch_view.errors import NotmuchViewError
from notmuch_view.notmuch import FixtureSource, find_next_unread_message
from notmuch_view.utils.logger import bind_context, clear_context

from .shared import emit, fail, logger


def navigate(
    message_id: str = typer.Argument(..., help="Current message id"),
    fixtures: Path = typer.Option(FIXTURE_DIR, "--fixtures", "-f", help="Directory of recorded payloads"),
) -> None:
    """Look up the thread of MESSAGE_ID and print its next unread message."""
    log = logger.bind(command="navigate", message_id=message_id, fixtures=str(fixtures))
    source = FixtureSource(fixtures)
    bind_context(command="navigate", message_id=message_id)
    try:
        next_id = find_next_unread_message(source, message_id)
    except NotmuchViewError as e:
        fail(log, "navigate.failed", e)

    emit(next_id)
    log.info("navigate.complete", next_message_id=next_id)
    clear_context()
