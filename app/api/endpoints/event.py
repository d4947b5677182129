"""Analytics event endpoint"""

from fastapi import APIRouter, Depends, HTTPException
import logging

from app.database.json_store import JsonStore, get_store
from app.exceptions import ValidationException
from app.models.enums import EventType
from app.schemas.event import EventRequest
from app.schemas.response import OkResponse
from app.security.identity import resolve_user_id
from app.services.event_service import append_event, build_event

router = APIRouter()
logger = logging.getLogger(__name__)

# session_start and checkout_started are only ever logged by the server
CLIENT_EVENT_TYPES = {
    EventType.SESSION_END.value,
    EventType.CHECKOUT_CLICKED.value,
    EventType.CHECKOUT_SUCCEEDED.value,
}


@router.post("/event", response_model=OkResponse)
async def log_client_event(
    request: EventRequest,
    uid: str = Depends(resolve_user_id),
    store: JsonStore = Depends(get_store)
):
    """Record a client-side action (session end, checkout click / success)"""
    if not request.type or request.type not in CLIENT_EVENT_TYPES:
        raise HTTPException(status_code=400, detail="invalid event type")

    try:
        event = build_event(request.type, uid, meta=request.meta)
    except ValidationException as e:
        logger.warning(f"Rejected {request.type} event from {uid}: {str(e)}")
        raise HTTPException(status_code=400, detail="invalid event meta")

    append_event(event, store)
    logger.info(f"Logged {event.type} for {uid}")
    return OkResponse(ok=True)
