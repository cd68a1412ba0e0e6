"""
Notification pipeline for wikihubot.

Turns wiki lifecycle events into chat messages and posts them to a
Hubot incoming-webhook endpoint.
"""

from wikihubot.notifications.config import EventToggles, HubotConfig, TransportKind, WikiUrls
from wikihubot.notifications.dispatcher import Dispatcher
from wikihubot.notifications.errors import (
    ConfigurationMissingError,
    DeliveryError,
    MalformedEventError,
    WikiHubotError,
)
from wikihubot.notifications.events import EventKind, WikiEvent, build_event, parse_event
from wikihubot.notifications.formatter import MessageFormatter
from wikihubot.notifications.payload import encode
from wikihubot.notifications.transport import DeliveryResult, DeliveryTransport

__all__ = [
    "ConfigurationMissingError",
    "DeliveryError",
    "DeliveryResult",
    "DeliveryTransport",
    "Dispatcher",
    "EventKind",
    "EventToggles",
    "HubotConfig",
    "MalformedEventError",
    "MessageFormatter",
    "TransportKind",
    "WikiEvent",
    "WikiHubotError",
    "WikiUrls",
    "build_event",
    "encode",
    "parse_event",
]
