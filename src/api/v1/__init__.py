from fastapi import APIRouter

from src.api.v1.analyzer import analyzer_router
from src.api.v1.orchestrator import orchestrator_router

# Create main router
router = APIRouter(prefix="/api/v1")

# Include all sub-routers
router.include_router(analyzer_router)
router.include_router(orchestrator_router)
