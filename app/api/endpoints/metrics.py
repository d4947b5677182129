"""Admin metrics endpoint"""

from fastapi import APIRouter, Depends, HTTPException
import logging

from app.database.json_store import JsonStore, get_store
from app.schemas.metrics import MetricsResponse
from app.services.metrics_service import load_metrics

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/admin/metrics", response_model=MetricsResponse)
async def get_metrics(store: JsonStore = Depends(get_store)):
    """
    Get growth dashboard metrics

    Returns:
    - 7-day retention of the previous week's cohort
    - 7-day conversion funnel
    - Emotion distribution and average improvement
    - Session completion and engagement
    """
    try:
        return load_metrics(store)
    except Exception as e:
        logger.error(f"Failed to compute metrics: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")
