"""notmuch boundary: payload source protocol, recorded payloads, navigation."""

from notmuch_view.notmuch.protocol import NotmuchSource
from notmuch_view.notmuch.fixture_source import FixtureSource, fixture_name
from notmuch_view.notmuch.navigation import find_next_unread_message

__all__ = [
    "NotmuchSource",
    "FixtureSource",
    "fixture_name",
    "find_next_unread_message",
]
