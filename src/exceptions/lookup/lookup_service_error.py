from typing import Optional

from src.exceptions.base import TourismAgentError


class LookupServiceError(TourismAgentError):
    """Base exception for failed outbound lookups."""

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message)
        self.provider = provider
