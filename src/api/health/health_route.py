from datetime import datetime, timezone

from fastapi import APIRouter

from src.config.config import config

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", summary="API Health Check")
async def get_health():
    """Basic health check endpoint."""

    return {
        "message": "Tourism Agent API is running",
        "environment": config.environment,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": "1.0.0",
    }
