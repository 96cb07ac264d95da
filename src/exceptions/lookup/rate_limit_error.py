from src.exceptions.lookup.api_request_error import APIRequestError


class RateLimitError(APIRequestError):
    """Exception for provider rate limit responses."""

    pass
