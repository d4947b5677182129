"""Analyze endpoint"""

from fastapi import APIRouter, Depends, HTTPException
import logging

from app.coaching.analyzer import analyze_text
from app.coaching.script_builder import build_personalized_script
from app.config import settings
from app.database.json_store import JsonStore, get_store
from app.models.event import SessionStartEvent, SessionStartMeta
from app.schemas.analyze import AnalyzeRequest, AnalyzeResponse, Offer
from app.security.identity import resolve_user_id
from app.services.event_service import append_event, now_ms
from app.services.memory_service import get_user_memory, last_memory_nudge, remember_turn

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    request: AnalyzeRequest,
    uid: str = Depends(resolve_user_id),
    store: JsonStore = Depends(get_store)
):
    """
    Return a scripted empathy reply for free text
    - Classifies emotion and situation by keyword
    - Personalizes with the remembered name and stressors
    - Records the turn in user memory and logs a session_start event
    """
    text = (request.text or "").strip()
    if not text:
        raise HTTPException(status_code=400, detail="text is required")

    memory = get_user_memory(uid, store)
    analysis = analyze_text(text)

    name = (
        (request.name or "").strip()
        or memory.profile.name
        or analysis.inferred_name
        or None
    )

    script = build_personalized_script(
        text=text,
        analysis=analysis,
        name=name,
        last_memory_nudge=last_memory_nudge(memory)
    )

    now = now_ms()
    remember_turn(uid, text, analysis, script.reply_text, store, name=name, now=now)
    append_event(
        SessionStartEvent(
            ts=now,
            uid=uid,
            meta=SessionStartMeta(emotion=analysis.emotion, situation=analysis.situation)
        ),
        store
    )

    logger.info(
        f"Analyzed message from {uid}: emotion={analysis.emotion.value} "
        f"situation={analysis.situation.value} stressors={analysis.stressors}"
    )

    return AnalyzeResponse(
        reply=script.reply_text,
        voice_text=script.voice_text,
        meditation=script.meditation_text,
        tags=script.tags,
        offer=Offer(
            price_usd_monthly=settings.OFFER_PRICE_USD_MONTHLY,
            cta=settings.OFFER_CTA
        ),
        resilience_score=script.resilience_score
    )
