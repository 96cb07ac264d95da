from src.exceptions.orchestration.lookup_failed_error import LookupFailedError
from src.exceptions.orchestration.orchestration_service_error import OrchestrationServiceError
from src.exceptions.orchestration.place_not_found_error import PlaceNotFoundError

__all__ = [
    "LookupFailedError",
    "OrchestrationServiceError",
    "PlaceNotFoundError",
]
