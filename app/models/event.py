"""Analytics event models"""

import logging

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from app.models.enums import Emotion, Situation

logger = logging.getLogger(__name__)

# Stored tags outside the enums are kept as plain strings
EmotionTag = Annotated[Union[Emotion, str], Field(union_mode="left_to_right")]
SituationTag = Annotated[Union[Situation, str], Field(union_mode="left_to_right")]


class EventMeta(BaseModel):
    """Base payload; unknown keys are dropped"""
    model_config = ConfigDict(frozen=True, extra="ignore")


class SessionStartMeta(EventMeta):
    emotion: EmotionTag = Emotion.NEUTRAL
    situation: SituationTag = Situation.GENERAL


class SessionEndMeta(EventMeta):
    pass


class CheckoutClickedMeta(EventMeta):
    plan: Optional[str] = None


class CheckoutStartedMeta(EventMeta):
    provider: str = "stripe_payment_link"


class CheckoutSucceededMeta(EventMeta):
    source: Optional[str] = None


class BaseEvent(BaseModel):
    """Timestamped user action; immutable once created"""
    model_config = ConfigDict(frozen=True)

    ts: int = Field(..., description="Epoch milliseconds")
    uid: str = Field(..., min_length=1, description="Opaque user id")


class SessionStartEvent(BaseEvent):
    type: Literal["session_start"] = "session_start"
    meta: SessionStartMeta = Field(default_factory=SessionStartMeta)


class SessionEndEvent(BaseEvent):
    type: Literal["session_end"] = "session_end"
    meta: SessionEndMeta = Field(default_factory=SessionEndMeta)


class CheckoutClickedEvent(BaseEvent):
    type: Literal["checkout_clicked"] = "checkout_clicked"
    meta: CheckoutClickedMeta = Field(default_factory=CheckoutClickedMeta)


class CheckoutStartedEvent(BaseEvent):
    type: Literal["checkout_started"] = "checkout_started"
    meta: CheckoutStartedMeta = Field(default_factory=CheckoutStartedMeta)


class CheckoutSucceededEvent(BaseEvent):
    type: Literal["checkout_succeeded"] = "checkout_succeeded"
    meta: CheckoutSucceededMeta = Field(default_factory=CheckoutSucceededMeta)


AnalyticsEvent = Annotated[
    Union[
        SessionStartEvent,
        SessionEndEvent,
        CheckoutClickedEvent,
        CheckoutStartedEvent,
        CheckoutSucceededEvent,
    ],
    Field(discriminator="type"),
]

analytics_event_adapter = TypeAdapter(AnalyticsEvent)


def parse_event(raw: Dict[str, Any]) -> AnalyticsEvent:
    """Validate a raw {ts, uid, type, meta} mapping into a typed event"""
    data = dict(raw)
    if data.get("meta") is None:
        data.pop("meta", None)
    return analytics_event_adapter.validate_python(data)


class EventLogDocument(BaseModel):
    """Persisted event log (events.json)"""
    version: Literal[1] = 1
    events: List[AnalyticsEvent] = Field(default_factory=list)

    @field_validator("events", mode="before")
    @classmethod
    def drop_invalid_events(cls, v):
        """Skip records that fail validation instead of rejecting the log"""
        if not isinstance(v, list):
            return v
        kept = []
        for index, raw in enumerate(v):
            try:
                kept.append(analytics_event_adapter.validate_python(raw))
            except ValidationError as e:
                logger.warning(f"Skipping invalid event #{index}: {e.error_count()} error(s)")
        return kept
