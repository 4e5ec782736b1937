"""notmuch source protocol: where JSON payloads come from."""

from typing import Protocol


class NotmuchSource(Protocol):
    """Abstract interface for fetching notmuch JSON output."""

    def show_message(self, message_id: str) -> bytes:
        """`notmuch show --format=json --entire-thread=false --include-html id:<message_id>`."""
        ...

    def show_thread(self, thread_id: str) -> bytes:
        """`notmuch show --format=json --body=false thread:<thread_id>`."""
        ...

    def search_threads(self, query: str) -> bytes:
        """`notmuch search --format=json --output=threads <query>`."""
        ...

    def search_summary(self, query: str) -> bytes:
        """`notmuch search --format=json --output=summary <query>`."""
        ...
