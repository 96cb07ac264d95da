from src.exceptions.lookup.lookup_service_error import LookupServiceError


class InvalidResponseError(LookupServiceError):
    """Exception for provider responses that cannot be parsed or validated."""

    pass
