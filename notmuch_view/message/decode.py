"""Decode `notmuch show --format=json` output into MessagePart trees.

Usage:
    from notmuch_view.message.decode import decode_message_document

    document = decode_message_document(payload_bytes)

Part content is an untagged union keyed by the sibling `content-type` field, so decoding
dispatches on that string through _CONTENT_DECODERS. Any failure aborts the whole document.
"""

import json
from typing import Any, Callable

from pydantic import ValidationError

from notmuch_view.errors import DecodeError, MalformedEnvelope, UnsupportedContentType
from notmuch_view.models.message import (
    ContentNode,
    Envelope,
    ForwardedMessages,
    MessageDocument,
    MessagePart,
    MultipartAlternative,
    MultipartMixed,
    OpaqueContent,
    TextContent,
)
from notmuch_view.utils.logger import get_logger

logger = get_logger("notmuch_view.message.decode")

# Type alias for content decoders: (raw content, JSON path) -> node
ContentDecoder = Callable[[Any, str], ContentNode]

_PART_FIELDS = (
    "id",
    "content-type",
    "content-disposition",
    "filename",
    "content-length",
    "content-transfer-encoding",
    "content-charset",
)
_DOCUMENT_FIELDS = ("id", "tags", "crypto")

_JSON_TYPE_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "number",
    float: "number",
    type(None): "null",
}


# -----------------------------------------------------------------------------
# Shape helpers
# -----------------------------------------------------------------------------


def json_type_name(value: Any) -> str:
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def validation_message(exc: ValidationError) -> str:
    """First pydantic error as `loc: msg`."""
    first = exc.errors()[0]
    loc = ".".join(str(p) for p in first["loc"])
    return f"{loc}: {first['msg']}" if loc else first["msg"]


def expect_object(raw: Any, path: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise DecodeError(f"expected an object, got {json_type_name(raw)}", path)
    return raw


def expect_array(raw: Any, path: str) -> list[Any]:
    if not isinstance(raw, list):
        raise DecodeError(f"expected an array, got {json_type_name(raw)}", path)
    return raw


# -----------------------------------------------------------------------------
# Content decoders
# -----------------------------------------------------------------------------


def _decode_text(raw: Any, path: str) -> str:
    # notmuch omits content for empty or skipped parts
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise DecodeError(f"expected text content, got {json_type_name(raw)}", path)
    return raw


def decode_plain(raw: Any, path: str) -> TextContent:
    return TextContent(text=_decode_text(raw, path))


def decode_html(raw: Any, path: str) -> TextContent:
    return TextContent(text=_decode_text(raw, path), strip_html=True)


def decode_mixed(raw: Any, path: str) -> MultipartMixed:
    return MultipartMixed(parts=decode_parts(raw, path))


def decode_alternative(raw: Any, path: str) -> MultipartAlternative:
    parts = decode_parts(raw, path)
    if not parts:
        raise DecodeError("multipart/alternative has no parts", path)
    return MultipartAlternative(parts=parts)


def decode_forwarded(raw: Any, path: str) -> ForwardedMessages:
    items = expect_array(raw, path)
    return ForwardedMessages(
        envelopes=[decode_envelope(item, f"{path}[{i}]") for i, item in enumerate(items)]
    )


def decode_opaque(raw: Any, path: str) -> OpaqueContent:
    return OpaqueContent()


_CONTENT_DECODERS: dict[str, ContentDecoder] = {
    "multipart/mixed": decode_mixed,
    "multipart/signed": decode_mixed,
    "multipart/encrypted": decode_mixed,
    "multipart/related": decode_mixed,
    "multipart/alternative": decode_alternative,
    "text/plain": decode_plain,
    "text/rfc822-headers": decode_plain,
    "application/pkcs7-signature": decode_plain,
    "application/pgp-signature": decode_plain,
    "application/pgp-encrypted": decode_plain,
    "text/html": decode_html,
    "message/rfc822": decode_forwarded,
}

# Major types whose content is dropped on purpose
_OPAQUE_PREFIXES = ("image/",)


def get_content_decoder(content_type: str, path: str = "$") -> ContentDecoder:
    """Return the decoder for content_type. Raises UnsupportedContentType if there is none."""
    decoder = _CONTENT_DECODERS.get(content_type)
    if decoder is not None:
        return decoder
    if content_type.startswith(_OPAQUE_PREFIXES):
        return decode_opaque
    raise UnsupportedContentType(content_type, path)


def supported_content_types() -> list[str]:
    """Exact content types with a decoder (image/* is accepted on top of these)."""
    return list(_CONTENT_DECODERS.keys())


# -----------------------------------------------------------------------------
# Parts, envelopes, documents
# -----------------------------------------------------------------------------


def decode_part(raw: Any, path: str = "$") -> MessagePart:
    """Decode one part object and, recursively, its content."""
    obj = expect_object(raw, path)
    fields = {key: obj[key] for key in _PART_FIELDS if key in obj}
    try:
        part = MessagePart.model_validate(fields)
    except ValidationError as exc:
        raise DecodeError(validation_message(exc), path) from exc

    decoder = get_content_decoder(part.content_type, path)
    content = decoder(obj.get("content"), f"{path}.content")
    return part.model_copy(update={"content": content})


def decode_parts(raw: Any, path: str) -> list[MessagePart]:
    items = expect_array(raw, path)
    return [decode_part(item, f"{path}[{i}]") for i, item in enumerate(items)]


def decode_headers(raw: Any, path: str) -> dict[str, str]:
    if raw is None:
        return {}
    obj = expect_object(raw, path)
    for key, value in obj.items():
        if not isinstance(value, str):
            raise DecodeError(f"header {key!r}: expected a string, got {json_type_name(value)}", path)
    return dict(obj)


def decode_envelope(raw: Any, path: str = "$") -> Envelope:
    """Decode a `{headers, body}` object (embedded message or top-level message)."""
    obj = expect_object(raw, path)
    headers = decode_headers(obj.get("headers"), f"{path}.headers")
    body = decode_parts(obj.get("body", []), f"{path}.body")
    return Envelope(headers=headers, body=body)


def extract_envelope_object(payload: bytes | str) -> bytes:
    """Cut everything outside the first `{` and the last `}`.

    Single-message output is wrapped in the array layers of a whole-thread export, and
    holds exactly one message object. Brace-balanced garbage is not detected here.
    """
    data = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)
    first = data.find(b"{")
    last = data.rfind(b"}")
    if first == -1 or last == -1 or last < first:
        raise MalformedEnvelope()
    return data[first : last + 1]


def decode_message_document(payload: bytes | str) -> MessageDocument:
    """Decode `notmuch show --format=json --entire-thread=false id:...` output."""
    raw_object = extract_envelope_object(payload)
    try:
        obj = json.loads(raw_object)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"invalid JSON: {exc}", "$") from exc

    envelope = decode_envelope(obj, "$")
    fields = {key: obj[key] for key in _DOCUMENT_FIELDS if obj.get(key) is not None}
    try:
        document = MessageDocument.model_validate(fields)
    except ValidationError as exc:
        raise DecodeError(validation_message(exc), "$") from exc

    document = document.model_copy(update={"headers": envelope.headers, "body": envelope.body})
    logger.debug(
        "message.decode.done",
        message_id=document.id,
        parts=len(document.body),
        tags=document.tags,
    )
    return document
