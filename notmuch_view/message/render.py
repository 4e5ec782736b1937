"""Render decoded message trees as plain text for the display surface."""

from typing import Any

from notmuch_view.models.message import (
    ContentNode,
    CryptoState,
    Envelope,
    ForwardedMessages,
    MessageDocument,
    MessagePart,
    MultipartAlternative,
    MultipartMixed,
    OpaqueContent,
    TextContent,
)
from notmuch_view.utils.body_sanitizer import strip_html
from notmuch_view.utils.logger import get_logger

logger = get_logger("notmuch_view.message.render")

PREFERRED_ALTERNATIVE = "text/html"


def select_alternative(node: MultipartAlternative) -> MessagePart:
    """Pick the first text/html part, else the first part (not a text/plain search)."""
    for part in node.parts:
        if part.content_type == PREFERRED_ALTERNATIVE:
            return part
    logger.debug(
        "message.render.alternative_fallback",
        content_types=[p.content_type for p in node.parts],
    )
    return node.parts[0]


def render_envelope(envelope: Envelope) -> str:
    """`Key:\\tValue` header lines, an empty line, then the body parts."""
    lines = [f"{key}:\t{value}" for key, value in envelope.headers.items()]
    lines.append("")
    lines.extend(render_part(part) for part in envelope.body)
    return "\n".join(lines)


def _render_followed_by_blank(rendered: list[str]) -> str:
    lines: list[str] = []
    for text in rendered:
        lines.extend((text, ""))
    return "\n".join(lines)


def render_content(node: ContentNode) -> str:
    if isinstance(node, TextContent):
        return strip_html(node.text) if node.strip_html else node.text
    if isinstance(node, MultipartMixed):
        return _render_followed_by_blank([render_part(part) for part in node.parts])
    if isinstance(node, MultipartAlternative):
        return render_part(select_alternative(node))
    if isinstance(node, ForwardedMessages):
        return _render_followed_by_blank([render_envelope(env) for env in node.envelopes])
    if isinstance(node, OpaqueContent):
        return ""
    raise TypeError(f"unknown content node: {type(node).__name__}")


def render_part(part: MessagePart) -> str:
    """Attachments render as a single line and never show their content."""
    if part.is_attachment:
        return f"Attachment: {part.filename or ''}"
    if part.content is None:
        return ""
    return render_content(part.content)


def render_document(document: MessageDocument) -> str:
    """Body parts joined by newline. Tags and crypto are rendered by the caller."""
    return "\n".join(render_part(part) for part in document.body)


def format_signature_status(record: dict[str, Any]) -> str:
    return ", ".join(f"{key}={value}" for key, value in record.items())


def render_crypto(crypto: CryptoState) -> str:
    """Tab-indented crypto block, or "" when there is nothing to report."""
    lines: list[str] = []

    signed = crypto.signed
    if signed.encrypted:
        if signed.headers:
            lines.append("\tSigned Headers:\t" + ", ".join(signed.headers))
        for idx, record in enumerate(signed.statuses):
            lines.append(f"\tSignature Status {idx}: {format_signature_status(record)}")

    decrypted = crypto.decrypted
    if decrypted.status:
        lines.append(f"\tDecryption Status: {decrypted.status}")
        if decrypted.header_mask:
            lines.append("\tDecrypted Headers:")
            lines.extend(f"\t\t{key}:\t{value}" for key, value in decrypted.header_mask.items())

    return "\n".join(lines)
