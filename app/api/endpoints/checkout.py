"""Checkout redirect endpoint"""

from fastapi import APIRouter, Depends
from typing import Optional
import logging

from app.config import settings
from app.database.json_store import JsonStore, get_store
from app.exceptions import ConfigurationException
from app.models.event import CheckoutStartedEvent, CheckoutStartedMeta
from app.schemas.checkout import CheckoutRequest, CheckoutResponse
from app.security.identity import resolve_user_id
from app.services.event_service import append_event, now_ms

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/stripe/checkout", response_model=CheckoutResponse)
async def start_checkout(
    request: Optional[CheckoutRequest] = None,
    uid: str = Depends(resolve_user_id),
    store: JsonStore = Depends(get_store)
):
    """
    Hand out the configured payment link
    - Logs a checkout_started event
    - 500 when STRIPE_PAYMENT_LINK_URL is not configured
    """
    payment_link_url = settings.STRIPE_PAYMENT_LINK_URL
    if not payment_link_url:
        raise ConfigurationException("STRIPE_PAYMENT_LINK_URL is not set")

    append_event(
        CheckoutStartedEvent(
            ts=now_ms(),
            uid=uid,
            meta=CheckoutStartedMeta(provider="stripe_payment_link")
        ),
        store
    )
    plan = request.plan if request else "monthly"
    logger.info(f"Checkout started for {uid} (plan={plan})")

    return CheckoutResponse(url=payment_link_url)
