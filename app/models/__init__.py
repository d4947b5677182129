"""Typed documents persisted in the JSON store"""

from app.models.enums import EventType, Emotion, Situation, EMOTION_SEVERITY, severity_of
from app.models.event import (
    AnalyticsEvent,
    SessionStartEvent,
    SessionEndEvent,
    CheckoutClickedEvent,
    CheckoutStartedEvent,
    CheckoutSucceededEvent,
    EventLogDocument,
    parse_event,
)
from app.models.memory import MemoryTurn, UserProfile, UserMemory, MemoryDocument

__all__ = [
    "EventType",
    "Emotion",
    "Situation",
    "EMOTION_SEVERITY",
    "severity_of",
    "AnalyticsEvent",
    "SessionStartEvent",
    "SessionEndEvent",
    "CheckoutClickedEvent",
    "CheckoutStartedEvent",
    "CheckoutSucceededEvent",
    "EventLogDocument",
    "parse_event",
    "MemoryTurn",
    "UserProfile",
    "UserMemory",
    "MemoryDocument",
]
