"""
Wiki events — the data flowing through the notification pipeline.

Each lifecycle occurrence the wiki reports (edit, creation, deletion, move,
new account, block) is captured as an immutable model tagged by ``kind``.
The formatter consumes these; nothing mutates them after construction.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from wikihubot.notifications.errors import MalformedEventError


class EventKind(str, Enum):
    PAGE_EDITED = "page_edited"
    PAGE_CREATED = "page_created"
    PAGE_DELETED = "page_deleted"
    PAGE_MOVED = "page_moved"
    USER_CREATED = "user_created"
    USER_BLOCKED = "user_blocked"
    FILE_UPLOADED = "file_uploaded"


class WikiEvent(BaseModel):
    """Fields shared by every event kind."""

    model_config = ConfigDict(frozen=True)

    kind: str
    user: str = Field(min_length=1)  # acting user

    @property
    def event_kind(self) -> EventKind:
        return EventKind(self.kind)


class PageEdited(WikiEvent):
    kind: Literal["page_edited"] = "page_edited"
    title: str = Field(min_length=1)
    summary: str = ""
    is_minor: bool = False
    is_new: bool = False
    revision_id: int
    parent_revision_id: int = 0


class PageCreated(WikiEvent):
    kind: Literal["page_created"] = "page_created"
    title: str = Field(min_length=1)
    namespace: str = ""


class PageDeleted(WikiEvent):
    kind: Literal["page_deleted"] = "page_deleted"
    title: str = Field(min_length=1)
    reason: str = ""


class PageMoved(WikiEvent):
    kind: Literal["page_moved"] = "page_moved"
    old_title: str = Field(min_length=1)
    new_title: str = Field(min_length=1)
    reason: Optional[str] = None


class UserCreated(WikiEvent):
    kind: Literal["user_created"] = "user_created"
    username: str = Field(min_length=1)


class UserBlocked(WikiEvent):
    """A block placed by ``user`` on ``target_user``."""

    kind: Literal["user_blocked"] = "user_blocked"
    target_user: str = Field(min_length=1)
    reason: Optional[str] = None

    @property
    def blocking_user(self) -> str:
        return self.user


class FileUploaded(WikiEvent):
    """Reserved kind. Accepted and gated, but never rendered to a message."""

    kind: Literal["file_uploaded"] = "file_uploaded"
    file_name: str = ""


Event = Annotated[
    Union[
        PageEdited,
        PageCreated,
        PageDeleted,
        PageMoved,
        UserCreated,
        UserBlocked,
        FileUploaded,
    ],
    Field(discriminator="kind"),
]

EVENT_CLASSES: dict[EventKind, type[WikiEvent]] = {
    EventKind.PAGE_EDITED: PageEdited,
    EventKind.PAGE_CREATED: PageCreated,
    EventKind.PAGE_DELETED: PageDeleted,
    EventKind.PAGE_MOVED: PageMoved,
    EventKind.USER_CREATED: UserCreated,
    EventKind.USER_BLOCKED: UserBlocked,
    EventKind.FILE_UPLOADED: FileUploaded,
}

_event_adapter: TypeAdapter[Any] = TypeAdapter(Event)


def parse_event(data: Mapping[str, Any]) -> WikiEvent:
    """Validate a raw mapping (must carry ``kind``) into its event model."""
    if not isinstance(data, Mapping):
        raise MalformedEventError(f"Event data must be a mapping, got {type(data).__name__}")
    try:
        return _event_adapter.validate_python(dict(data))
    except ValidationError as exc:
        raise MalformedEventError(f"Invalid event data: {exc}") from exc


def build_event(kind: EventKind | str, **fields: Any) -> WikiEvent:
    """Construct the event model for ``kind`` from keyword fields."""
    try:
        cls = EVENT_CLASSES[EventKind(kind)]
    except ValueError as exc:
        raise MalformedEventError(f"Unknown event kind: {kind!r}") from exc
    try:
        return cls(**fields)
    except ValidationError as exc:
        raise MalformedEventError(f"Invalid {cls.__name__} event: {exc}") from exc
