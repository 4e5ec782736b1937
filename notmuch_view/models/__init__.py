"""Pydantic models for decoded notmuch payloads."""

from notmuch_view.models.message import (
    ContentNode,
    CryptoState,
    DecryptedState,
    Envelope,
    ForwardedMessages,
    MessageDocument,
    MessagePart,
    MultipartAlternative,
    MultipartMixed,
    OpaqueContent,
    SignedState,
    TextContent,
)
from notmuch_view.models.thread import SubThread, TagSet, ThreadMessage, ThreadNode
from notmuch_view.models.search import SearchSummary

__all__ = [
    "ContentNode",
    "CryptoState",
    "DecryptedState",
    "Envelope",
    "ForwardedMessages",
    "MessageDocument",
    "MessagePart",
    "MultipartAlternative",
    "MultipartMixed",
    "OpaqueContent",
    "SignedState",
    "TextContent",
    "SubThread",
    "TagSet",
    "ThreadMessage",
    "ThreadNode",
    "SearchSummary",
]
