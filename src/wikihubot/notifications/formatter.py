"""
MessageFormatter — renders wiki events into chat-ready text.

One fixed template per event kind. Returns ``None`` when the event should
not be announced at all (kind disabled, edit of a brand-new page, file
page creation, reserved kinds).
"""

from __future__ import annotations

import logging
from typing import Callable, Optional
from urllib.parse import quote_plus

from wikihubot.notifications.config import EventToggles, WikiUrls
from wikihubot.notifications.events import (
    EventKind,
    PageCreated,
    PageDeleted,
    PageEdited,
    PageMoved,
    UserBlocked,
    UserCreated,
    WikiEvent,
)

logger = logging.getLogger(__name__)

FILE_NAMESPACE = "File"


class MessageFormatter:
    """Maps an event to its notification message."""

    def __init__(self, urls: WikiUrls, toggles: EventToggles) -> None:
        self.urls = urls
        self.toggles = toggles
        self._renderers: dict[EventKind, Callable[..., Optional[str]]] = {
            EventKind.PAGE_EDITED: self._page_edited,
            EventKind.PAGE_CREATED: self._page_created,
            EventKind.PAGE_DELETED: self._page_deleted,
            EventKind.PAGE_MOVED: self._page_moved,
            EventKind.USER_CREATED: self._user_created,
            EventKind.USER_BLOCKED: self._user_blocked,
        }

    def format(self, event: WikiEvent) -> Optional[str]:
        kind = event.event_kind
        if not self.toggles.is_enabled(kind):
            logger.debug("Skipping %s: disabled", kind.value)
            return None
        render = self._renderers.get(kind)
        if render is None:
            logger.debug("No message template for %s", kind.value)
            return None
        return render(event)

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    def _page_edited(self, event: PageEdited) -> Optional[str]:
        # New pages are announced by the creation event instead
        if event.is_new:
            return None
        if event.is_minor and not self.toggles.minor_edits:
            return None

        parts = [
            event.user,
            "made a minor edit to" if event.is_minor else "edited",
            event.title,
        ]
        summary = event.summary.strip()
        if summary:
            parts.append(f"({summary})")
        parts.append(
            f"{self.article_url(event.title)}"
            f"&diff={event.revision_id}&oldid={event.parent_revision_id}"
        )
        return " ".join(parts)

    def _page_created(self, event: PageCreated) -> Optional[str]:
        if event.namespace == FILE_NAMESPACE:
            return None
        return f"{event.user} created {event.title} {self.article_url(event.title)}"

    def _page_deleted(self, event: PageDeleted) -> str:
        return f"{event.user} deleted {event.title}. Reason: {event.reason}"

    def _page_moved(self, event: PageMoved) -> str:
        return (
            f"{event.user} moved {event.old_title} to {event.new_title}. "
            f"Reason: {event.reason or ''}"
        )

    def _user_created(self, event: UserCreated) -> str:
        return f"New wiki user created: {event.username} {self.user_page_url(event.username)}"

    def _user_blocked(self, event: UserBlocked) -> str:
        reason = f" with reason '{event.reason}'" if event.reason else ""
        return (
            f"{event.blocking_user} has blocked {event.target_user}{reason}. "
            f"All blocks: {self.urls.base}{self.urls.block_list}"
        )

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def article_url(self, title: str) -> str:
        return self.urls.base + quote_plus(title)

    def user_page_url(self, username: str) -> str:
        return self.urls.base + self.urls.user_page + quote_plus(username)
