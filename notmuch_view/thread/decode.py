"""Decode `notmuch show --body=false --format=json thread:...` output into a thread tree.

Each array element is either a message object (leaf) or a nested array (reply branch).
There is no discriminator field, so elements are dispatched on their JSON shape.
"""

import json
from typing import Any

from pydantic import ValidationError

from notmuch_view.errors import DecodeError
from notmuch_view.message.decode import expect_array, json_type_name, validation_message
from notmuch_view.models.thread import SubThread, ThreadMessage, ThreadNode
from notmuch_view.thread.traversal import count_messages
from notmuch_view.utils.logger import get_logger

logger = get_logger("notmuch_view.thread.decode")


def decode_thread_message(raw: dict[str, Any], path: str) -> ThreadMessage:
    try:
        return ThreadMessage.model_validate(raw)
    except ValidationError as exc:
        raise DecodeError(validation_message(exc), path) from exc


def decode_sub_thread(raw: list[Any], path: str) -> SubThread:
    return SubThread(
        children=[decode_thread_node(item, f"{path}[{i}]") for i, item in enumerate(raw)]
    )


def decode_thread_node(raw: Any, path: str = "$") -> ThreadNode:
    """Object -> leaf message, array -> sub-thread, anything else -> DecodeError."""
    if isinstance(raw, dict):
        return decode_thread_message(raw, path)
    if isinstance(raw, list):
        return decode_sub_thread(raw, path)
    raise DecodeError(
        f"expected a message object or a thread array, got {json_type_name(raw)}", path
    )


def decode_thread(payload: bytes | str) -> SubThread:
    """Decode a whole thread payload. The root is an array; order is kept as emitted."""
    try:
        raw = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"invalid JSON: {exc}", "$") from exc

    root = decode_sub_thread(expect_array(raw, "$"), "$")
    logger.debug("thread.decode.done", messages=count_messages(root))
    return root
