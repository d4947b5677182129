"""Test analytics event log"""

import pytest
from pydantic import ValidationError

from app.exceptions import ValidationException
from app.models.enums import Emotion, Situation
from app.models.event import EventLogDocument, SessionEndEvent, SessionStartEvent
from app.services.event_service import EVENTS_FILE, append_event, build_event, list_events


def test_append_then_list_preserves_order(store):
    for i in range(5):
        append_event(SessionEndEvent(ts=1000 + i, uid=f"u{i}"), store)

    events = list_events(store)
    assert [e.uid for e in events] == ["u0", "u1", "u2", "u3", "u4"]


def test_append_keeps_most_recent_records(store):
    for i in range(8):
        append_event(SessionEndEvent(ts=i, uid=f"u{i}"), store, max_events=5)

    events = list_events(store)
    assert len(events) == 5
    assert [e.ts for e in events] == [3, 4, 5, 6, 7]


def test_default_cap_is_fifty_thousand(store):
    store.save(EVENTS_FILE, EventLogDocument(
        events=[SessionEndEvent(ts=i, uid="bulk") for i in range(50_000)]
    ))

    append_event(SessionEndEvent(ts=50_000, uid="late"), store)
    append_event(SessionEndEvent(ts=50_001, uid="later"), store)

    events = list_events(store)
    assert len(events) == 50_000
    assert events[0].ts == 2
    assert [e.uid for e in events[-2:]] == ["late", "later"]


def test_list_empty_log(store):
    assert list_events(store) == []


def test_build_event_typed_payload():
    event = build_event("session_start", "u1", ts=10, meta={"emotion": "BURNOUT", "extra": "dropped"})
    assert isinstance(event, SessionStartEvent)
    assert event.meta.emotion == Emotion.BURNOUT
    assert not hasattr(event.meta, "extra")


def test_build_event_defaults_meta():
    event = build_event("checkout_started", "u1", ts=10)
    assert event.meta.provider == "stripe_payment_link"


def test_build_event_rejects_unknown_type():
    with pytest.raises(ValidationException):
        build_event("page_view", "u1", ts=10)


def test_build_event_rejects_bad_meta():
    with pytest.raises(ValidationException):
        build_event("session_start", "u1", ts=10, meta={"emotion": ["BURNOUT"]})


def test_build_event_keeps_unknown_emotion_tag():
    event = build_event("session_start", "u1", ts=10, meta={"emotion": "CALM"})
    assert event.meta.emotion == "CALM"
    assert event.meta.situation == Situation.GENERAL


def test_append_keeps_valid_records_around_a_bad_one(store):
    store.write(EVENTS_FILE, {"version": 1, "events": [
        {"ts": 1, "uid": "u1", "type": "session_start", "meta": {"emotion": "BURNOUT"}},
        {"ts": 2, "uid": "u2", "type": "session_start", "meta": {"emotion": 42}},
        {"ts": 3, "uid": "u3", "type": "session_start", "meta": {"emotion": "CALM"}},
    ]})

    append_event(SessionEndEvent(ts=4, uid="u1"), store)

    events = list_events(store)
    assert [e.uid for e in events] == ["u1", "u3", "u1"]
    assert events[1].meta.emotion == "CALM"


def test_events_are_immutable():
    event = SessionEndEvent(ts=1, uid="u1")
    with pytest.raises(ValidationError):
        event.ts = 2
