"""Message view: header block with tag and crypto pseudo-headers, then the body."""

from notmuch_view.models.message import MessageDocument
from notmuch_view.message.render import render_crypto, render_document
from notmuch_view.utils.logger import get_logger

logger = get_logger("notmuch_view.message.view")

# Headers shown in the message view, in display order
VIEW_HEADERS = (
    "Date",
    "From",
    "To",
    "Cc",
    "Bcc",
    "Reply-To",
    "List-Id",
    "X-Bogosity",
    "Content-Type",
    "Subject",
)


def get_header(headers: dict[str, str], name: str) -> str:
    """Case-insensitive header lookup; "" when absent."""
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return ""


def render_header_block(document: MessageDocument) -> str:
    lines = []
    for name in VIEW_HEADERS:
        value = get_header(document.headers, name)
        if value:
            lines.append(f"{name}:\t{value}")

    lines.append("Tags:\t" + ", ".join(document.tags))

    crypto = render_crypto(document.crypto)
    if crypto:
        lines.append("Crypto:")
        lines.append(crypto)

    return "\n".join(lines)


def render_message_view(document: MessageDocument) -> str:
    """Full text of a message window."""
    text = render_header_block(document) + "\n\n" + render_document(document)
    logger.debug("message.view.rendered", message_id=document.id, length=len(text))
    return text
