from src.exceptions.orchestration.orchestration_service_error import OrchestrationServiceError


class LookupFailedError(OrchestrationServiceError):
    """Exception raised when any lookup of a request fails."""

    user_message = "An error occurred while processing your request. Please try again."

    def __init__(self, cause: Exception):
        super().__init__(f"Lookup failed: {cause}")
        self.cause = cause
