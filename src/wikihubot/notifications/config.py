"""
Configuration models for the notification pipeline.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wikihubot.notifications.events import EventKind


class TransportKind(str, Enum):
    HTTP_CLIENT = "http_client"
    BUFFERED_STREAM = "buffered_stream"


# Send-method names used by older PHP deployments
_TRANSPORT_ALIASES = {
    "curl": TransportKind.HTTP_CLIENT,
    "file_get_contents": TransportKind.BUFFERED_STREAM,
}


class WikiUrls(BaseModel):
    """Pieces used to build links embedded in messages."""

    model_config = ConfigDict(frozen=True)

    wiki_url: str = ""  # base URL incl. trailing /
    script_path: str = "index.php?title="

    user_page: str = "User:"
    block_list: str = "Special:BlockList"

    # Reserved: accepted and saved, not yet used by any message template
    user_talk_page: str = "User_talk:"
    user_rights: str = "Special%3AUserRights&user="
    block_user: str = "Special:Block/"
    user_contributions: str = "Special:Contributions/"
    edit_article: str = "action=edit"
    delete_article: str = "action=delete"
    history: str = "action=history"

    @property
    def base(self) -> str:
        return self.wiki_url + self.script_path


class EventToggles(BaseModel):
    """Per-kind enablement flags. Set one to false to silence that kind."""

    model_config = ConfigDict(frozen=True)

    edited: bool = True
    created: bool = True
    removed: bool = True
    moved: bool = True
    new_user: bool = True
    user_blocked: bool = True
    minor_edits: bool = True  # only consulted when ``edited`` is on
    file_uploaded: bool = False

    def is_enabled(self, kind: EventKind | str) -> bool:
        return bool(getattr(self, _TOGGLE_FIELDS[EventKind(kind)]))


_TOGGLE_FIELDS: dict[EventKind, str] = {
    EventKind.PAGE_EDITED: "edited",
    EventKind.PAGE_CREATED: "created",
    EventKind.PAGE_DELETED: "removed",
    EventKind.PAGE_MOVED: "moved",
    EventKind.USER_CREATED: "new_user",
    EventKind.USER_BLOCKED: "user_blocked",
    EventKind.FILE_UPLOADED: "file_uploaded",
}


class HubotConfig(BaseModel):
    """Top-level settings. Loaded once, read-only afterwards."""

    model_config = ConfigDict(frozen=True)

    webhook_url: str = ""
    room_name: str = ""
    transport: TransportKind = TransportKind.HTTP_CLIENT
    timeout: float = Field(default=5.0, gt=0)  # seconds per delivery attempt
    legacy_quotes: bool = True  # replace " with ' in messages
    urls: WikiUrls = Field(default_factory=WikiUrls)
    events: EventToggles = Field(default_factory=EventToggles)

    @field_validator("transport", mode="before")
    @classmethod
    def _map_legacy_transport(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _TRANSPORT_ALIASES.get(value.lower(), value)
        return value
