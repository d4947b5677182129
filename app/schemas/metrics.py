"""Dashboard metrics schemas"""

from pydantic import Field
from typing import Dict

from app.schemas.response import CamelModel


class RetentionMetrics(CamelModel):
    """7-day retention of the 7~14 days-ago cohort"""
    cohort_size: int = 0
    retained: int = 0
    rate: float = 0.0


class ConversionMetrics(CamelModel):
    """Checkout funnel over the last 7 days"""
    sessions: int = 0
    checkout_started: int = 0
    checkout_succeeded: int = 0
    rate_by_session: float = 0.0
    rate_by_checkout_started: float = 0.0


class DashboardMetrics(CamelModel):
    retention_7d: RetentionMetrics = Field(default_factory=RetentionMetrics, alias="retention7d")
    conversion_7d: ConversionMetrics = Field(default_factory=ConversionMetrics, alias="conversion7d")


class BurnoutMetrics(CamelModel):
    avg_emotion_improvement: float = 0.0
    emotion_distribution: Dict[str, int] = Field(default_factory=dict)
    session_completion_rate: float = 0.0
    total_sessions: int = 0
    unique_users: int = 0
    avg_sessions_per_user: float = 0.0


class MetricsResponse(CamelModel):
    """Admin metrics payload (dashboard and burnout bundles merged)"""
    retention_7d: RetentionMetrics = Field(alias="retention7d")
    conversion_7d: ConversionMetrics = Field(alias="conversion7d")
    avg_emotion_improvement: float
    emotion_distribution: Dict[str, int]
    session_completion_rate: float
    total_sessions: int
    unique_users: int
    avg_sessions_per_user: float
