from src.exceptions.base import TourismAgentError


class OrchestrationServiceError(TourismAgentError):
    """Base exception for orchestration service errors."""

    pass
