"""Analytics event schemas"""

from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


class EventRequest(BaseModel):
    """Client-reported analytics event"""
    type: Optional[str] = Field(None, description="Event kind")
    meta: Optional[Dict[str, Any]] = Field(None, description="Kind-specific payload")
