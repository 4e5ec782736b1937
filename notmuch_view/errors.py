"""Exceptions raised while decoding, rendering and navigating notmuch payloads.

Exception Hierarchy
-------------------
- NotmuchViewError (base exception)

  - DecodeError (payload shape mismatch, carries a JSON context path)
    - MalformedEnvelope (no object borders in a single-message payload)
    - UnsupportedContentType (MIME type without a decoder)

  - AddressParseError (From header is not a single address)

  - NotFound (unknown token or message id)
  - NoNextUnread (no unread message after the current one)

"""


class NotmuchViewError(Exception):
    """Base class for all notmuch_view errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DecodeError(NotmuchViewError, ValueError):
    """A payload (or part of it) does not have the expected shape.

    ``path`` locates the offending node, e.g. ``$.body[0].content[2]``.
    """

    def __init__(self, message: str, path: str = "$"):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return f"{self.message} (at {self.path})"


class MalformedEnvelope(DecodeError):
    """The brace scan found no ``{`` ... ``}`` pair in a single-message payload."""

    def __init__(self, message: str = "can't find object borders", path: str = "$"):
        super().__init__(message, path)


class UnsupportedContentType(DecodeError):
    """A message part declares a content type with no decoder."""

    def __init__(self, content_type: str, path: str = "$"):
        super().__init__(f"unsupported content type: {content_type!r}", path)
        self.content_type = content_type


class AddressParseError(NotmuchViewError, ValueError):
    """A From header could not be parsed as a single address."""

    def __init__(self, value: str, reason: str):
        super().__init__(f"can't parse address {value!r}: {reason}")
        self.value = value
        self.reason = reason


class NotFound(NotmuchViewError, LookupError):
    """No entry for the given token or message id."""

    def __init__(self, key: str, what: str = "entry"):
        super().__init__(f"no {what} with ID {key!r}")
        self.key = key


class NoNextUnread(NotmuchViewError, LookupError):
    """The current message was found but nothing unread follows it."""

    def __init__(self, message_id: str):
        super().__init__(f"no unread message after {message_id!r}")
        self.message_id = message_id
