from src.exceptions.lookup.api_request_error import APIRequestError
from src.exceptions.lookup.invalid_response_error import InvalidResponseError
from src.exceptions.lookup.lookup_service_error import LookupServiceError
from src.exceptions.lookup.rate_limit_error import RateLimitError

__all__ = [
    "APIRequestError",
    "InvalidResponseError",
    "LookupServiceError",
    "RateLimitError",
]
