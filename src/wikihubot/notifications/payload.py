"""
Payload encoder — wraps a message for hubot-incoming-webhook.

The bot expects ``{"message": ..., "room": ...}``. Double quotes in the
message are swapped for single quotes, matching what deployed bots have
always received; the JSON itself is produced by a real serializer so
backslashes and control characters can never break the document.
"""

from __future__ import annotations

import json


def escape_message(message: str, *, legacy_quotes: bool = True) -> str:
    return message.replace('"', "'") if legacy_quotes else message


def build_payload(message: str, room: str, *, legacy_quotes: bool = True) -> dict[str, str]:
    return {
        "message": escape_message(message, legacy_quotes=legacy_quotes),
        "room": room,
    }


def encode(message: str, room: str, *, legacy_quotes: bool = True) -> str:
    """Return the single-line JSON body for ``message`` posted to ``room``."""
    payload = build_payload(message, room, legacy_quotes=legacy_quotes)
    return json.dumps(payload, ensure_ascii=False)
