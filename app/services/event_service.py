"""Analytics event log service"""

import logging
import time
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from app.config import settings
from app.database.json_store import JsonStore
from app.exceptions import ValidationException
from app.models.event import AnalyticsEvent, EventLogDocument, parse_event

logger = logging.getLogger(__name__)

EVENTS_FILE = "events.json"


def now_ms() -> int:
    """Current time in epoch milliseconds"""
    return int(time.time() * 1000)


def build_event(
    event_type: str,
    uid: str,
    ts: Optional[int] = None,
    meta: Optional[Dict[str, Any]] = None
) -> AnalyticsEvent:
    """
    Build a typed event from a raw type tag and payload

    Raises:
        ValidationException: unknown type or malformed payload
    """
    try:
        return parse_event({
            "ts": ts if ts is not None else now_ms(),
            "uid": uid,
            "type": event_type,
            "meta": meta,
        })
    except ValidationError as e:
        raise ValidationException(f"Invalid {event_type!r} event: {e.error_count()} error(s)") from e


def append_event(
    event: AnalyticsEvent,
    store: JsonStore,
    max_events: Optional[int] = None
) -> None:
    """
    Append an event, keeping only the most recent max_events records

    The whole log is loaded and written back on every call. Write failures
    propagate to the caller.
    """
    limit = max_events if max_events is not None else settings.EVENT_LOG_MAX_EVENTS
    log = store.load(EVENTS_FILE, EventLogDocument)
    log.events.append(event)
    overflow = len(log.events) - limit
    if overflow > 0:
        del log.events[:overflow]
        logger.info(f"Event log trimmed by {overflow} oldest record(s)")
    store.save(EVENTS_FILE, log)
    logger.debug(f"Logged {event.type} for {event.uid}")


def list_events(store: JsonStore) -> List[AnalyticsEvent]:
    """Load the full event log in insertion order"""
    return store.load(EVENTS_FILE, EventLogDocument).events
