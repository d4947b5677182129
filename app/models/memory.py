"""User memory models"""

import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from typing import Dict, List, Literal, Optional

from app.models.enums import Emotion, Situation

logger = logging.getLogger(__name__)

MAX_TURNS = 30
MAX_STRESSORS = 30
MAX_STRESSOR_LENGTH = 60


class MemoryModel(BaseModel):
    """camelCase on disk, snake_case in code"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MemoryTurn(MemoryModel):
    """One analyze round-trip"""
    ts: int
    user_text: str
    ai_text: str
    emotion: Emotion = Emotion.NEUTRAL
    situation: Situation = Situation.GENERAL
    extracted_stressors: List[str] = Field(default_factory=list)


class UserProfile(MemoryModel):
    name: Optional[str] = None


class UserMemory(MemoryModel):
    """Per-user conversation history and remembered stressors"""
    uid: str
    created_at: int
    last_seen_at: int
    profile: UserProfile = Field(default_factory=UserProfile)
    stressors: List[str] = Field(default_factory=list)
    turns: List[MemoryTurn] = Field(default_factory=list)

    @field_validator("turns")
    @classmethod
    def keep_recent_turns(cls, v):
        return v[-MAX_TURNS:]

    @field_validator("stressors")
    @classmethod
    def cap_stressors(cls, v):
        return [s for s in v if len(s) <= MAX_STRESSOR_LENGTH][:MAX_STRESSORS]


class MemoryDocument(BaseModel):
    """Persisted memory map (memory.json)"""
    version: Literal[1] = 1
    users: Dict[str, UserMemory] = Field(default_factory=dict)

    @field_validator("users", mode="before")
    @classmethod
    def drop_invalid_users(cls, v):
        """Skip user records that fail validation instead of rejecting the map"""
        if not isinstance(v, dict):
            return v
        kept = {}
        for uid, raw in v.items():
            try:
                kept[uid] = UserMemory.model_validate(raw)
            except ValidationError as e:
                logger.warning(f"Skipping invalid memory for user {uid}: {e.error_count()} error(s)")
        return kept
