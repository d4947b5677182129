"""Growth dashboard metrics computed from the analytics event log"""

import logging
from collections import Counter
from datetime import datetime, time, timedelta, timezone, tzinfo
from typing import Dict, Iterable, List, Optional, Set
from zoneinfo import ZoneInfo

from app.config import settings
from app.database.json_store import JsonStore
from app.models.enums import EventType, severity_of
from app.models.event import AnalyticsEvent
from app.schemas.metrics import (
    BurnoutMetrics,
    ConversionMetrics,
    DashboardMetrics,
    MetricsResponse,
    RetentionMetrics,
)
from app.services.event_service import list_events, now_ms

logger = logging.getLogger(__name__)

RETENTION_WINDOW_DAYS = 7
COHORT_WINDOW_DAYS = 14

# Added to the mean severity delta before clamping to [0, 1]
IMPROVEMENT_BASELINE = 0.5


def metrics_timezone() -> tzinfo:
    """Timezone whose midnight marks day boundaries"""
    name = settings.METRICS_TIMEZONE
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def start_of_day(ts: int, tz: tzinfo) -> int:
    """Midnight (epoch ms) of the day containing ts"""
    dt = datetime.fromtimestamp(ts / 1000, tz)
    midnight = dt.replace(hour=0, minute=0, second=0, microsecond=0)
    return int(midnight.timestamp() * 1000)


def days_ago(n: int, now: int, tz: tzinfo) -> int:
    """Midnight (epoch ms) n days before the day containing now"""
    today = datetime.fromtimestamp(now / 1000, tz).date()
    day = datetime.combine(today - timedelta(days=n), time.min, tzinfo=tz)
    return int(day.timestamp() * 1000)


def order_by_time(events: Iterable[AnalyticsEvent]) -> List[AnalyticsEvent]:
    """Sort by timestamp; equal timestamps keep insertion order"""
    return sorted(events, key=lambda e: e.ts)


def _rate(numerator: int, denominator: int) -> float:
    return numerator / denominator if denominator else 0.0


def compute_dashboard_metrics(
    events: List[AnalyticsEvent],
    now: Optional[int] = None
) -> DashboardMetrics:
    """
    Compute 7-day retention and conversion

    Retention cohort: users whose first session_start falls in
    (days_ago(14), days_ago(7)]. A cohort member is retained when any of
    their session days is on or after days_ago(7).

    Conversion: session_start / checkout_started / checkout_succeeded
    counts within [days_ago(7), now].
    """
    now = now if now is not None else now_ms()
    tz = metrics_timezone()
    window_start = days_ago(RETENTION_WINDOW_DAYS, now, tz)
    cohort_start = days_ago(COHORT_WINDOW_DAYS, now, tz)
    cohort_end = window_start

    first_session: Dict[str, int] = {}
    session_days: Dict[str, Set[int]] = {}
    counts = Counter()

    for event in order_by_time(events):
        in_window = window_start <= event.ts <= now
        if event.type == EventType.SESSION_START:
            first_session.setdefault(event.uid, event.ts)
            session_days.setdefault(event.uid, set()).add(start_of_day(event.ts, tz))
        if in_window:
            counts[event.type] += 1

    cohort_size = 0
    retained = 0
    for uid, first_ts in first_session.items():
        if cohort_start < first_ts <= cohort_end:
            cohort_size += 1
            if any(day >= cohort_end for day in session_days[uid]):
                retained += 1

    sessions = counts[EventType.SESSION_START.value]
    started = counts[EventType.CHECKOUT_STARTED.value]
    succeeded = counts[EventType.CHECKOUT_SUCCEEDED.value]

    return DashboardMetrics(
        retention_7d=RetentionMetrics(
            cohort_size=cohort_size,
            retained=retained,
            rate=_rate(retained, cohort_size)
        ),
        conversion_7d=ConversionMetrics(
            sessions=sessions,
            checkout_started=started,
            checkout_succeeded=succeeded,
            rate_by_session=_rate(succeeded, sessions),
            rate_by_checkout_started=_rate(succeeded, started)
        )
    )


def emotion_improvement(events: List[AnalyticsEvent]) -> float:
    """
    Average first-to-last severity drop across users with 2+ sessions

    Each user's delta is (severity(first) - severity(last)) / 10. The mean is
    shifted by IMPROVEMENT_BASELINE and clamped to [0, 1]. Returns 0 when no
    user has two session_start events.
    """
    sessions_by_user: Dict[str, List[AnalyticsEvent]] = {}
    for event in order_by_time(events):
        if event.type == EventType.SESSION_START:
            sessions_by_user.setdefault(event.uid, []).append(event)

    deltas = []
    for user_sessions in sessions_by_user.values():
        if len(user_sessions) < 2:
            continue
        first = severity_of(user_sessions[0].meta.emotion)
        last = severity_of(user_sessions[-1].meta.emotion)
        deltas.append((first - last) / 10)

    if not deltas:
        return 0.0
    average = sum(deltas) / len(deltas)
    return min(1.0, max(0.0, average + IMPROVEMENT_BASELINE))


def compute_burnout_metrics(events: List[AnalyticsEvent]) -> BurnoutMetrics:
    """Compute emotion distribution, improvement and engagement figures"""
    distribution: Dict[str, int] = {}
    session_starts = 0
    session_ends = 0
    users: Set[str] = set()

    for event in events:
        users.add(event.uid)
        if event.type == EventType.SESSION_START:
            session_starts += 1
            emotion = getattr(event.meta.emotion, "value", event.meta.emotion)
            distribution[emotion] = distribution.get(emotion, 0) + 1
        elif event.type == EventType.SESSION_END:
            session_ends += 1

    return BurnoutMetrics(
        avg_emotion_improvement=emotion_improvement(events),
        emotion_distribution=distribution,
        session_completion_rate=_rate(session_ends, session_starts),
        total_sessions=session_starts,
        unique_users=len(users),
        avg_sessions_per_user=_rate(session_starts, len(users))
    )


def compute_all_metrics(
    events: List[AnalyticsEvent],
    now: Optional[int] = None
) -> MetricsResponse:
    """Dashboard and burnout bundles merged into one payload"""
    dashboard = compute_dashboard_metrics(events, now)
    burnout = compute_burnout_metrics(events)
    return MetricsResponse(**dashboard.model_dump(), **burnout.model_dump())


def load_metrics(store: JsonStore, now: Optional[int] = None) -> MetricsResponse:
    """Reload the event log and compute every metric"""
    events = list_events(store)
    logger.info(f"Computing metrics over {len(events)} event(s)")
    return compute_all_metrics(events, now)
