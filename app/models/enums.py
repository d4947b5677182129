"""Shared enumerations"""

from enum import Enum


class EventType(str, Enum):
    """Analytics action tags"""
    SESSION_START = "session_start"
    SESSION_END = "session_end"
    CHECKOUT_CLICKED = "checkout_clicked"
    CHECKOUT_STARTED = "checkout_started"
    CHECKOUT_SUCCEEDED = "checkout_succeeded"


class Emotion(str, Enum):
    """Dominant emotion detected in user text"""
    ANXIETY = "ANXIETY"
    ANGER = "ANGER"
    SADNESS = "SADNESS"
    SHAME = "SHAME"
    BURNOUT = "BURNOUT"
    OVERWHELM = "OVERWHELM"
    NEUTRAL = "NEUTRAL"


class Situation(str, Enum):
    """Workplace situation detected in user text"""
    MEETING = "MEETING"
    OVERTIME = "OVERTIME"
    BOSS_CONFLICT = "BOSS_CONFLICT"
    DEADLINE = "DEADLINE"
    TEAM_CONFLICT = "TEAM_CONFLICT"
    PERFORMANCE_REVIEW = "PERFORMANCE_REVIEW"
    GENERAL = "GENERAL"


# Ordinal score per emotion, higher = more severe
EMOTION_SEVERITY = {
    Emotion.BURNOUT: 10,
    Emotion.OVERWHELM: 9,
    Emotion.ANXIETY: 8,
    Emotion.ANGER: 7,
    Emotion.SADNESS: 6,
    Emotion.SHAME: 5,
    Emotion.NEUTRAL: 2,
}
DEFAULT_SEVERITY = 5


def severity_of(emotion) -> int:
    """Severity for an emotion tag (enum member or raw string)"""
    try:
        return EMOTION_SEVERITY[Emotion(emotion)]
    except (ValueError, KeyError):
        return DEFAULT_SEVERITY
