"""User memory service"""

import logging
from typing import Callable, Iterable, List, Optional

from app.coaching.analyzer import AnalysisResult
from app.database.json_store import JsonStore
from app.models.memory import (
    MAX_STRESSOR_LENGTH,
    MAX_STRESSORS,
    MAX_TURNS,
    MemoryDocument,
    MemoryTurn,
    UserMemory,
)
from app.services.event_service import now_ms

logger = logging.getLogger(__name__)

MEMORY_FILE = "memory.json"


def new_user_memory(uid: str, now: int) -> UserMemory:
    return UserMemory(uid=uid, created_at=now, last_seen_at=now)


def get_user_memory(uid: str, store: JsonStore, now: Optional[int] = None) -> UserMemory:
    """Get existing memory or create (and persist) an empty one"""
    db = store.load(MEMORY_FILE, MemoryDocument)
    existing = db.users.get(uid)
    if existing:
        return existing

    created = new_user_memory(uid, now if now is not None else now_ms())
    db.users[uid] = created
    store.save(MEMORY_FILE, db)
    logger.info(f"Created memory for user {uid}")
    return created


def upsert_user_memory(
    uid: str,
    patcher: Callable[[UserMemory], UserMemory],
    store: JsonStore,
    now: Optional[int] = None
) -> UserMemory:
    """
    Load-modify-store a user's memory

    The patcher receives a copy of the current record (a fresh one when the
    user is unknown) and returns the record to store. Last writer wins.
    """
    db = store.load(MEMORY_FILE, MemoryDocument)
    base = db.users.get(uid) or new_user_memory(uid, now if now is not None else now_ms())
    patched = patcher(base.model_copy(deep=True))
    # Re-validate so the turn/stressor caps hold whatever the patcher did
    patched = UserMemory.model_validate(patched.model_dump())
    db.users[uid] = patched
    store.save(MEMORY_FILE, db)
    return patched


def add_unique_stressors(existing: Iterable[str], incoming: Iterable[str]) -> List[str]:
    """
    Merge stressor keywords

    Blank entries and entries longer than 60 characters are skipped.
    First-seen order is kept and the result is capped at 30 entries.
    """
    merged = dict.fromkeys(existing)
    for stressor in incoming:
        s = stressor.strip()
        if not s or len(s) > MAX_STRESSOR_LENGTH:
            continue
        merged.setdefault(s)
    return list(merged)[:MAX_STRESSORS]


def last_memory_nudge(memory: UserMemory) -> Optional[str]:
    """Stressor to bring up again: oldest remembered, else latest turn's first"""
    if memory.stressors:
        return memory.stressors[0]
    if memory.turns and memory.turns[-1].extracted_stressors:
        return memory.turns[-1].extracted_stressors[0]
    return None


def remember_turn(
    uid: str,
    text: str,
    analysis: AnalysisResult,
    reply_text: str,
    store: JsonStore,
    name: Optional[str] = None,
    now: Optional[int] = None
) -> UserMemory:
    """Record one analyze round-trip in the user's memory"""
    ts = now if now is not None else now_ms()

    def patch(memory: UserMemory) -> UserMemory:
        memory.turns = (memory.turns + [MemoryTurn(
            ts=ts,
            user_text=text,
            ai_text=reply_text,
            emotion=analysis.emotion,
            situation=analysis.situation,
            extracted_stressors=list(analysis.stressors),
        )])[-MAX_TURNS:]
        memory.stressors = add_unique_stressors(memory.stressors, analysis.stressors)
        memory.last_seen_at = ts
        if name:
            memory.profile.name = name
        return memory

    return upsert_user_memory(uid, patch, store, now=ts)
