"""Message models: the MIME part tree behind `notmuch show --format=json` (subset we render)."""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field


class TextContent(BaseModel):
    """Leaf text of a part; HTML parts are stripped at render time."""

    kind: Literal["text"] = "text"
    text: str = ""
    strip_html: bool = False

    model_config = {"frozen": True}


class MultipartMixed(BaseModel):
    """Ordered child parts rendered one after another (mixed, signed, encrypted, related)."""

    kind: Literal["multipart"] = "multipart"
    parts: list["MessagePart"] = Field(default_factory=list)

    model_config = {"frozen": True}


class MultipartAlternative(BaseModel):
    """Alternative renderings of the same content; only one is shown."""

    kind: Literal["alternative"] = "alternative"
    parts: list["MessagePart"] = Field(..., min_length=1)

    model_config = {"frozen": True}


class ForwardedMessages(BaseModel):
    """Content of a message/rfc822 part: one or more embedded messages."""

    kind: Literal["forwarded"] = "forwarded"
    envelopes: list["Envelope"] = Field(default_factory=list)

    model_config = {"frozen": True}


class OpaqueContent(BaseModel):
    """Content that is intentionally not decoded (images)."""

    kind: Literal["opaque"] = "opaque"

    model_config = {"frozen": True}


ContentNode = Annotated[
    Union[TextContent, MultipartMixed, MultipartAlternative, ForwardedMessages, OpaqueContent],
    Field(discriminator="kind"),
]


class MessagePart(BaseModel):
    """One MIME part. `content` is filled by the content-type dispatch in message.decode."""

    id: int = 0
    content_type: str = Field(..., alias="content-type")
    disposition: Optional[str] = Field(None, alias="content-disposition")
    filename: Optional[str] = None
    content_length: Optional[int] = Field(None, alias="content-length")
    transfer_encoding: Optional[str] = Field(None, alias="content-transfer-encoding")
    charset: Optional[str] = Field(None, alias="content-charset")
    content: Optional[ContentNode] = None

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    @property
    def is_attachment(self) -> bool:
        return self.disposition == "attachment"


class Envelope(BaseModel):
    """Headers and body parts of a (possibly embedded) message."""

    headers: dict[str, str] = Field(default_factory=dict)
    body: list[MessagePart] = Field(default_factory=list)

    model_config = {"frozen": True}


class SignedState(BaseModel):
    """notmuch `crypto.signed`."""

    encrypted: bool = False
    headers: list[str] = Field(default_factory=list)
    statuses: list[dict[str, Any]] = Field(default_factory=list, alias="status")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}


class DecryptedState(BaseModel):
    """notmuch `crypto.decrypted`."""

    status: str = ""
    header_mask: dict[str, str] = Field(default_factory=dict, alias="header-mask")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}


class CryptoState(BaseModel):
    """Signature and decryption metadata. Rendered, never verified."""

    signed: SignedState = Field(default_factory=SignedState)
    decrypted: DecryptedState = Field(default_factory=DecryptedState)

    model_config = {"frozen": True, "extra": "ignore"}


class MessageDocument(Envelope):
    """A single message as returned by `notmuch show --entire-thread=false`."""

    id: str = ""
    tags: list[str] = Field(default_factory=list)
    crypto: CryptoState = Field(default_factory=CryptoState)

    @property
    def tag_set(self) -> frozenset[str]:
        return frozenset(self.tags)


MultipartMixed.model_rebuild()
MultipartAlternative.model_rebuild()
ForwardedMessages.model_rebuild()
MessagePart.model_rebuild()
