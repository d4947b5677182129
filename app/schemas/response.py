"""Generic response schemas"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Schema serialized with camelCase keys"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(BaseModel):
    """Health check response schema"""
    status: str
    timestamp: datetime = Field(default_factory=utcnow)
    dependencies: dict


class OkResponse(BaseModel):
    """Acknowledgement response schema"""
    ok: bool = True
