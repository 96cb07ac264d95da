from src.exceptions.lookup.lookup_service_error import LookupServiceError


class APIRequestError(LookupServiceError):
    """Exception for non-successful responses from a lookup provider."""

    pass
