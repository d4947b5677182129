"""Health check endpoint"""

from fastapi import APIRouter, Depends, Response, status
import logging
import uuid

from app.database.json_store import JsonStore, get_store
from app.schemas.response import HealthResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health_check(response: Response, store: JsonStore = Depends(get_store)):
    """
    Health check endpoint
    Checks that the data directory accepts writes
    """
    health_status = {
        "status": "healthy",
        "dependencies": {}
    }

    scratch_name = f".health-{uuid.uuid4().hex}.json"
    try:
        store.write(scratch_name, {"ok": True})
        store.path_for(scratch_name).unlink()
        health_status["dependencies"]["storage"] = "writable"
    except Exception as e:
        health_status["dependencies"]["storage"] = f"error: {str(e)}"
        health_status["status"] = "unhealthy"
        logger.error(f"Storage health check failed: {str(e)}")

    # Set HTTP status code
    if health_status["status"] == "unhealthy":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(**health_status)
