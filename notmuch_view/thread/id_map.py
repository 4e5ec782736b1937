"""Short display tokens for full message ids."""

from notmuch_view.config import ID_PREFIX
from notmuch_view.errors import NotFound


class IdentifierMap:
    """Maps tokens (prefix + counter) to full message ids.

    Append-only. Owned by a single thread view; not safe for concurrent mutation.
    """

    def __init__(self, prefix: str = ID_PREFIX):
        self.prefix = prefix
        self.counter = 0
        self._forward: dict[str, str] = {}

    def put(self, full_id: str) -> str:
        """Store full_id and return a new token for it. Counters are never reused."""
        token = f"{self.prefix}{self.counter}"
        self.counter += 1
        self._forward[token] = full_id
        return token

    def get(self, token: str) -> str:
        """Return the full id for token. Raises NotFound if the token was never issued here."""
        if token not in self._forward:
            raise NotFound(token, what="token")
        return self._forward[token]

    def items(self) -> list[tuple[str, str]]:
        """(token, full id) pairs in allocation order."""
        return list(self._forward.items())

    def __contains__(self, token: object) -> bool:
        return token in self._forward

    def __len__(self) -> int:
        return len(self._forward)

    def __repr__(self) -> str:
        return f"IdentifierMap(prefix={self.prefix!r}, counter={self.counter})"
