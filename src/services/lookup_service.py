import asyncio
import inspect
from typing import Any, Dict, Optional

import httpx
import structlog

from src.config.config import config
from src.exceptions.lookup import (
    APIRequestError,
    InvalidResponseError,
    LookupServiceError,
    RateLimitError,
)
from src.utils.singleton import Singleton

logger = structlog.get_logger(__name__)


class LookupService(Singleton):
    """
    Shared HTTP plumbing for the third-party lookup services.

    Every lookup is a single attempt bounded by one overall deadline and
    sent with the configured identifying User-Agent. httpx timeouts apply
    per phase (connect, read, write, pool), so the deadline also covers a
    server that keeps trickling bytes. Failures are raised as
    LookupServiceError subclasses tagged with the provider name.
    """

    provider: str = "lookup"

    def __init__(self):
        super().__init__()

        if hasattr(self, "_lookup_initialized"):
            return

        self.deadline_seconds = config.lookup_timeout_seconds
        self.timeout = httpx.Timeout(self.deadline_seconds)
        self.headers = {"User-Agent": config.client_user_agent}

        self._lookup_initialized = True

    async def _send(
        self,
        url: str,
        params: Optional[Dict[str, Any]],
        content: Optional[str],
        method: str,
    ) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout, headers=self.headers) as client:
            logger.info(
                "Making API request",
                provider=self.provider,
                method=method,
                url=url,
                params=params,
            )

            if method == "POST":
                return await client.post(url, content=content)
            return await client.get(url, params=params)

    async def _make_request(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        content: Optional[str] = None,
        method: str = "GET",
    ) -> Any:
        """
        Make one HTTP request to a provider and return the decoded JSON body.

        Args:
            url: Provider endpoint
            params: Query parameters (GET)
            content: Raw request body (POST)
            method: "GET" or "POST"

        Returns:
            JSON response from the provider

        Raises:
            RateLimitError: If the provider answers 429
            APIRequestError: For any other non-200 status
            InvalidResponseError: If the body is not JSON
            LookupServiceError: On timeout or transport failure
        """
        try:
            response = await asyncio.wait_for(
                self._send(url, params, content, method), timeout=self.deadline_seconds
            )

        except (httpx.TimeoutException, asyncio.TimeoutError):
            logger.warning("Request timeout", provider=self.provider, timeout=self.deadline_seconds)
            raise LookupServiceError(
                f"{self.provider} request timed out after {self.deadline_seconds}s",
                provider=self.provider,
            )

        except httpx.RequestError as e:
            logger.warning("Request error", provider=self.provider, error=str(e))
            raise LookupServiceError(f"{self.provider} request failed: {str(e)}", provider=self.provider)

        if response.status_code == 429:
            raise RateLimitError(f"{self.provider} rate limit exceeded", provider=self.provider)
        if response.status_code != 200:
            logger.warning(
                "API request failed",
                provider=self.provider,
                status_code=response.status_code,
                response_text=response.text,
            )
            raise APIRequestError(
                f"{self.provider} responded with status {response.status_code}",
                provider=self.provider,
            )

        try:
            data = response.json()
            return await data if inspect.isawaitable(data) else data
        except ValueError as e:
            raise InvalidResponseError(
                f"{self.provider} returned a non-JSON body: {str(e)}", provider=self.provider
            )
