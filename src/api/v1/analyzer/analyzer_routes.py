import structlog
from fastapi import APIRouter, Depends

from agent.query_analyzer import query_analyzer
from src.api.auth import verify_token
from src.models.orchestrator import IntentResponse, OrchestratorQueryRequest

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/analyzer", tags=["Analyzer"])


@router.post("/analyze", summary="Analyze Travel Query", response_model=IntentResponse)
async def analyze_query(
    request: OrchestratorQueryRequest,
    authenticated: bool = Depends(verify_token)
):
    """Show how a query would be interpreted, without running any lookup.

    Args:
        request: The request payload containing the user's query string.

    Returns:
        The extracted place, the raw keyword flags and the lookups the
        orchestrator would activate for them.
    """
    intent = query_analyzer.analyze(request.query)
    logger.info("Analyzed query", query=request.query, place=intent.place)

    return IntentResponse(
        place=intent.place,
        wants_weather=intent.wants_weather,
        wants_places=intent.wants_places,
        activate_weather=intent.activate_weather,
        activate_places=intent.activate_places,
    )
