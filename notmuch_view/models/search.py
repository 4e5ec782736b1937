"""Search summary model: one entry of `notmuch search --output=summary --format=json`."""

from typing import Optional

from pydantic import BaseModel, Field


class SearchSummary(BaseModel):
    """One matching thread."""

    thread: str
    timestamp: int = 0  # Unix
    date_relative: str = ""
    matched: int = 0  # messages in the thread matching the query
    total: int = 0
    authors: str = ""
    subject: str = ""
    query: list[Optional[str]] = Field(default_factory=list)  # [matched query, unmatched query]
    tags: list[str] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "ignore"}
