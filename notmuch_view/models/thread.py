"""Thread models: the conversation tree behind `notmuch show --body=false --format=json`."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class ThreadMessage(BaseModel):
    """Leaf of a thread tree: one physical email."""

    kind: Literal["message"] = "message"
    id: str = ""
    matched: bool = Field(False, alias="match")
    excluded: bool = False
    filenames: list[str] = Field(default_factory=list, alias="filename")  # duplicates share an id
    timestamp: int = 0  # Unix
    date_relative: str = ""
    tags: list[str] = Field(default_factory=list)
    headers: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    @property
    def subject(self) -> str:
        return self.headers.get("Subject", "")


class SubThread(BaseModel):
    """Reply branch: an ordered list of messages and further branches."""

    kind: Literal["thread"] = "thread"
    children: list["ThreadNode"] = Field(default_factory=list)

    model_config = {"frozen": True}


ThreadNode = Annotated[Union[ThreadMessage, SubThread], Field(discriminator="kind")]


class TagSet(BaseModel):
    """One pre-order traversal entry: message id and its tags."""

    message_id: str
    tags: frozenset[str] = frozenset()

    model_config = {"frozen": True}

    @property
    def unread(self) -> bool:
        return "unread" in self.tags


SubThread.model_rebuild()
