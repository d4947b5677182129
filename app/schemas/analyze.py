"""Analyze endpoint schemas"""

from pydantic import BaseModel, Field
from typing import Dict, Optional

from app.schemas.response import CamelModel


class AnalyzeRequest(BaseModel):
    """Free text submitted for a scripted reply"""
    text: Optional[str] = Field(None, description="What the user wants to talk about")
    name: Optional[str] = Field(None, description="Display name (optional)")


class Offer(CamelModel):
    """Upsell shown under the reply"""
    price_usd_monthly: float
    cta: str


class AnalyzeResponse(CamelModel):
    """Scripted reply"""
    reply: str
    voice_text: str
    meditation: str
    tags: Dict[str, str]
    offer: Offer
    resilience_score: int
