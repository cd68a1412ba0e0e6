"""Event model tests: construction, parsing and validation errors."""

import pytest
from pydantic import ValidationError

from wikihubot.notifications.errors import MalformedEventError
from wikihubot.notifications.events import (
    EventKind,
    PageEdited,
    PageMoved,
    UserBlocked,
    build_event,
    parse_event,
)


class TestEventModels:
    def test_kind_tag(self):
        event = PageEdited(user="Alice", title="Sandbox", revision_id=2, parent_revision_id=1)
        assert event.kind == "page_edited"
        assert event.event_kind is EventKind.PAGE_EDITED

    def test_events_are_frozen(self):
        event = PageMoved(user="Dan", old_title="A", new_title="B")
        with pytest.raises(ValidationError):
            event.reason = "changed"  # type: ignore[misc]

    def test_blocking_user_is_actor(self):
        event = UserBlocked(user="Admin", target_user="Spammer")
        assert event.blocking_user == "Admin"
        assert event.reason is None

    def test_empty_user_rejected(self):
        with pytest.raises(ValidationError):
            PageMoved(user="", old_title="A", new_title="B")


class TestParseEvent:
    def test_parses_by_kind(self):
        event = parse_event({"kind": "page_deleted", "user": "Bob", "title": "Old", "reason": "spam"})
        assert event.event_kind is EventKind.PAGE_DELETED
        assert event.reason == "spam"

    def test_unknown_kind(self):
        with pytest.raises(MalformedEventError):
            parse_event({"kind": "page_protected", "user": "Bob"})

    def test_missing_field(self):
        with pytest.raises(MalformedEventError):
            parse_event({"kind": "page_edited", "user": "Bob", "title": "X"})

    def test_not_a_mapping(self):
        with pytest.raises(MalformedEventError):
            parse_event(["page_edited"])  # type: ignore[arg-type]


class TestBuildEvent:
    def test_build(self):
        event = build_event(EventKind.USER_CREATED, user="Eve", username="Eve")
        assert event.username == "Eve"

    def test_build_from_string_kind(self):
        event = build_event("page_created", user="Carol", title="New")
        assert event.event_kind is EventKind.PAGE_CREATED

    def test_build_unknown_kind(self):
        with pytest.raises(MalformedEventError):
            build_event("nope", user="x")

    def test_build_bad_fields(self):
        with pytest.raises(MalformedEventError):
            build_event(EventKind.PAGE_MOVED, user="Dan", old_title="A")
