"""Checkout schemas"""

from pydantic import BaseModel, Field
from typing import Optional


class CheckoutRequest(BaseModel):
    plan: Optional[str] = Field("monthly", description="Requested plan")


class CheckoutResponse(BaseModel):
    """Payment page to redirect to"""
    url: str
