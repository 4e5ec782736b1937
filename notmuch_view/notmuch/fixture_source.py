"""File-backed notmuch source: serves recorded JSON payloads from a directory."""

import re
from pathlib import Path

from notmuch_view.errors import NotFound
from notmuch_view.utils.logger import get_logger

logger = get_logger("notmuch_view.notmuch.fixture_source")

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._@+=-]")


def fixture_name(kind: str, key: str) -> str:
    """File name for a recorded payload, e.g. `thread-0000000000000001.json`."""
    return f"{kind}-{_UNSAFE_CHARS.sub('_', key)}.json"


class FixtureSource:
    """Serve `message-*.json`, `thread-*.json`, `threads-*.json` and `summary-*.json`."""

    def __init__(self, fixture_dir: Path):
        self._fixture_dir = Path(fixture_dir)
        logger.info("notmuch_source.init", fixture_dir=str(self._fixture_dir))

    def _read(self, kind: str, key: str) -> bytes:
        path = self._fixture_dir / fixture_name(kind, key)
        if not path.exists():
            logger.debug("notmuch_source.miss", path=str(path))
            raise NotFound(key, what=f"recorded {kind} payload")
        data = path.read_bytes()
        logger.debug("notmuch_source.hit", path=str(path), size=len(data))
        return data

    def show_message(self, message_id: str) -> bytes:
        return self._read("message", message_id)

    def show_thread(self, thread_id: str) -> bytes:
        return self._read("thread", thread_id)

    def search_threads(self, query: str) -> bytes:
        return self._read("threads", query)

    def search_summary(self, query: str) -> bytes:
        return self._read("summary", query)
