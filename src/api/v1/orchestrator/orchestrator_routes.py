import structlog
from fastapi import APIRouter, Depends, HTTPException, Response, status

from agent.tourism_agent import tourism_agent
from src.api.auth import verify_token
from src.exceptions.orchestration import LookupFailedError, PlaceNotFoundError
from src.models.orchestrator import OrchestratorQueryRequest, QueryResponse

logger = structlog.get_logger(__name__)


# Create router
router = APIRouter(prefix="/orchestrator", tags=["Orchestrator"])


@router.post(
    "/query",
    summary="Query Tourism Orchestrator",
    response_model=QueryResponse,
    response_model_exclude_none=True,
    responses={
        204: {"description": "Blank query, nothing was looked up"},
        404: {"description": "The place in the query could not be found"},
        502: {"description": "A weather, places or geocoding lookup failed"},
    },
)
async def query_orchestrator(
    request: OrchestratorQueryRequest,
    authenticated: bool = Depends(verify_token)
):
    """Run a travel query through the Tourism Agent and return the result.

    The agent extracts the place and intent from the query, geocodes the
    place and fetches the current weather and/or nearby points of interest.

    Args:
        request: The request payload containing the user's query string.

    Returns:
        The aggregated result with only the activated sections present.

    Raises:
        HTTPException: 404 if the place is unknown, 502 if a lookup fails.
    """
    logger.info(
        "Processing request query",
        query=request.query
    )
    try:
        response = await tourism_agent.process_query(request.query)

    except PlaceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.user_message
        )

    except LookupFailedError as e:
        logger.error(
            "Orchestrator query failed",
            query=request.query,
            error=str(e.cause)
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.user_message
        )

    if response is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return response
