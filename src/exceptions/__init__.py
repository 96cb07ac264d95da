from src.exceptions.base import TourismAgentError
from src.exceptions.lookup import (
    APIRequestError,
    InvalidResponseError,
    LookupServiceError,
    RateLimitError,
)
from src.exceptions.orchestration import (
    LookupFailedError,
    OrchestrationServiceError,
    PlaceNotFoundError,
)

__all__ = [
    "APIRequestError",
    "InvalidResponseError",
    "LookupFailedError",
    "LookupServiceError",
    "OrchestrationServiceError",
    "PlaceNotFoundError",
    "RateLimitError",
    "TourismAgentError",
]
