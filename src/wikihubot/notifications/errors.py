"""
Exceptions raised by the notification pipeline.
"""

from __future__ import annotations


class WikiHubotError(Exception):
    """Base class for all wikihubot errors."""


class ConfigurationMissingError(WikiHubotError):
    """A required setting (usually the webhook URL) is not configured."""


class MalformedEventError(WikiHubotError):
    """The host handed over event data that does not fit any event kind."""


class DeliveryError(WikiHubotError):
    """The webhook POST failed at the transport level."""

    def __init__(self, endpoint: str, message: str) -> None:
        super().__init__(f"Delivery to {endpoint} failed: {message}")
        self.endpoint = endpoint
