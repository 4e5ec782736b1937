"""Search results: `notmuch search --format=json` summaries and thread ids."""

import json
import re
from typing import Any

from pydantic import ValidationError

from notmuch_view.errors import DecodeError, NotFound
from notmuch_view.message.decode import expect_array, json_type_name, validation_message
from notmuch_view.models.search import SearchSummary
from notmuch_view.thread.render import format_tags, truncate_subject
from notmuch_view.utils.logger import get_logger

logger = get_logger("notmuch_view.search")

# Thread ID: sequence of 16 hex digits
THREAD_ID_RE = re.compile(r"[0-9a-f]{16}")


def _load(payload: bytes | str) -> Any:
    try:
        return json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"invalid JSON: {exc}", "$") from exc


def decode_search_summaries(payload: bytes | str) -> list[SearchSummary]:
    """Decode `notmuch search --output=summary --format=json` output."""
    summaries = []
    for i, item in enumerate(expect_array(_load(payload), "$")):
        try:
            summaries.append(SearchSummary.model_validate(item))
        except ValidationError as exc:
            raise DecodeError(validation_message(exc), f"$[{i}]") from exc
    logger.debug("search.decode.done", threads=len(summaries))
    return summaries


def render_summary(summary: SearchSummary) -> str:
    subject = truncate_subject(summary.subject)
    return f"{summary.thread}\t({summary.matched}/{summary.total})\t{subject}\t{format_tags(summary.tags)}"


def render_search_results(summaries: list[SearchSummary]) -> str:
    return "\n".join(render_summary(s) for s in summaries)


def is_thread_id(selection: str) -> bool:
    """True if the selected text looks like a notmuch thread id."""
    return THREAD_ID_RE.search(selection.strip(" \r\t\n")) is not None


def decode_thread_ids(payload: bytes | str, query: str = "") -> str:
    """Single thread id from `notmuch search --output=threads --format=json` output."""
    thread_ids = expect_array(_load(payload), "$")
    for i, thread_id in enumerate(thread_ids):
        if not isinstance(thread_id, str):
            raise DecodeError(f"expected a thread id string, got {json_type_name(thread_id)}", f"$[{i}]")

    if not thread_ids:
        raise NotFound(query, what="thread for query")
    if len(thread_ids) > 1:
        raise DecodeError(f"more than one thread id for {query!r}: {thread_ids}", "$")
    return thread_ids[0]
