"""
Host hook names and their dispatcher entry points.

The wiki calls extensions by hook name; ``register_hooks`` appends the
matching dispatcher methods to a host registry shaped like
``{"HookName": [callable, ...]}``.
"""

from __future__ import annotations

from typing import Any, Callable, MutableMapping

from wikihubot.notifications.dispatcher import Dispatcher
from wikihubot.notifications.events import EventKind

HOOK_PAGE_CONTENT_SAVE_COMPLETE = "PageContentSaveComplete"
HOOK_ARTICLE_INSERT_COMPLETE = "ArticleInsertComplete"
HOOK_ARTICLE_DELETE_COMPLETE = "ArticleDeleteComplete"
HOOK_TITLE_MOVE_COMPLETE = "TitleMoveComplete"
HOOK_ADD_NEW_ACCOUNT = "AddNewAccount"
HOOK_BLOCK_IP_COMPLETE = "BlockIpComplete"
HOOK_UPLOAD_COMPLETE = "UploadComplete"

HOOK_EVENTS: dict[str, EventKind] = {
    HOOK_PAGE_CONTENT_SAVE_COMPLETE: EventKind.PAGE_EDITED,
    HOOK_ARTICLE_INSERT_COMPLETE: EventKind.PAGE_CREATED,
    HOOK_ARTICLE_DELETE_COMPLETE: EventKind.PAGE_DELETED,
    HOOK_TITLE_MOVE_COMPLETE: EventKind.PAGE_MOVED,
    HOOK_ADD_NEW_ACCOUNT: EventKind.USER_CREATED,
    HOOK_BLOCK_IP_COMPLETE: EventKind.USER_BLOCKED,
    HOOK_UPLOAD_COMPLETE: EventKind.FILE_UPLOADED,
}


def handler_for(dispatcher: Dispatcher, hook: str) -> Callable[..., Any]:
    """Return the dispatcher method that serves ``hook``."""
    try:
        kind = HOOK_EVENTS[hook]
    except KeyError:
        raise KeyError(f"Unknown hook: {hook}") from None
    return getattr(dispatcher, kind.value)


def register_hooks(
    registry: MutableMapping[str, list[Callable[..., Any]]],
    dispatcher: Dispatcher,
    hooks: list[str] | None = None,
) -> None:
    """Append dispatcher handlers for ``hooks`` (default: all) to ``registry``."""
    for hook in hooks or list(HOOK_EVENTS):
        registry.setdefault(hook, []).append(handler_for(dispatcher, hook))
