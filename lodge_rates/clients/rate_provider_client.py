"""Rates provider API client for property availability."""

from typing import Any, Optional

import httpx
from pydantic import ValidationError
from structlog import get_logger

from lodge_rates.config.settings import ProviderSettings
from lodge_rates.models.provider import (
    PropertyRatesResult,
    ProviderRatesResponse,
    RatePlan,
)

logger = get_logger(__name__)


class RateProviderError(Exception):
    """Base exception for rates provider client errors."""

    pass


class RateProviderNetworkError(RateProviderError):
    """Raised when the provider cannot be reached."""

    pass


class RateProviderTimeoutError(RateProviderNetworkError):
    """Raised when the provider does not answer within the request timeout."""

    pass


class RateProviderCancelledError(RateProviderNetworkError):
    """Raised when the outbound call is abandoned because the caller left."""

    pass


class RateProviderStatusError(RateProviderError):
    """Raised when the provider answers with a non-success status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class RateProviderDecodeError(RateProviderError):
    """Raised when the provider response does not match the rates schema."""

    pass


class RateProviderEmptyError(RateProviderError):
    """Raised when the provider returns no property results."""

    pass


class RateProviderClient:
    """Client for the provider's per-property rates.json endpoint.

    Each fetch issues exactly one GET; there are no retries and nothing is
    cached between calls.
    """

    def __init__(
        self,
        provider_settings: ProviderSettings,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client.

        Args:
            provider_settings: Base URL, property id and timeout
            http_client: Optional shared client; when omitted a client is
                opened and closed around every request
        """
        self.url = provider_settings.rates_url
        self.property_id = provider_settings.property_id
        self.timeout = provider_settings.request_timeout
        self.http_client = http_client

    async def __aenter__(self) -> "RateProviderClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the shared HTTP client, if one was given."""
        if self.http_client is not None and not self.http_client.is_closed:
            await self.http_client.aclose()
            logger.debug("Closed rates provider HTTP client", property_id=self.property_id)

    def _get_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": "LodgeRates/1.0",
        }

    async def _get(self, client: httpx.AsyncClient, params: dict[str, str]) -> httpx.Response:
        return await client.get(
            self.url,
            params=params,
            headers=self._get_headers(),
            timeout=self.timeout,
        )

    async def _request(self, params: dict[str, str]) -> httpx.Response:
        """Send the GET, translating transport failures.

        Raises:
            RateProviderTimeoutError: If the request times out
            RateProviderNetworkError: For connection and other transport errors
        """
        try:
            if self.http_client is not None:
                return await self._get(self.http_client, params)
            async with httpx.AsyncClient() as client:
                return await self._get(client, params)

        except httpx.TimeoutException as e:
            logger.error(
                "Rates provider request timeout",
                property_id=self.property_id,
                timeout=self.timeout,
            )
            raise RateProviderTimeoutError(
                f"Request to rates provider timed out after {self.timeout}s"
            ) from e

        except httpx.RequestError as e:
            logger.error(
                "Rates provider request error",
                property_id=self.property_id,
                error=str(e),
            )
            raise RateProviderNetworkError(
                f"Request to rates provider failed: {str(e)}"
            ) from e

    @staticmethod
    def _decode(response: httpx.Response) -> ProviderRatesResponse:
        try:
            payload: Any = response.json()
        except ValueError as e:
            raise RateProviderDecodeError(
                f"Rates provider returned invalid JSON: {str(e)}"
            ) from e

        try:
            return ProviderRatesResponse.model_validate(payload)
        except ValidationError as e:
            raise RateProviderDecodeError(
                f"Rates provider response does not match schema: {e.error_count()} error(s)"
            ) from e

    async def fetch(self, start_date: str, end_date: str) -> PropertyRatesResult:
        """Fetch rates for the configured property over a date window.

        Only the first property result is authoritative; any further
        elements are ignored.

        Args:
            start_date: First date of the window, forwarded as-is
            end_date: Last date of the window, forwarded as-is

        Returns:
            The first PropertyRatesResult of the response

        Raises:
            RateProviderNetworkError: On transport failure or timeout
            RateProviderStatusError: On a non-success HTTP status
            RateProviderDecodeError: If the body does not match the schema
            RateProviderEmptyError: If the provider returned an empty list
        """
        logger.info(
            "Fetching rates from provider",
            property_id=self.property_id,
            start_date=start_date,
            end_date=end_date,
        )
        response = await self._request({"start_date": start_date, "end_date": end_date})

        if not response.is_success:
            logger.error(
                "Rates provider returned error status",
                property_id=self.property_id,
                status_code=response.status_code,
                response_text=response.text[:200],
            )
            raise RateProviderStatusError(
                f"Rates provider responded with status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            rates_response = self._decode(response)
        except RateProviderDecodeError as e:
            logger.error(
                "Failed to decode rates provider response",
                property_id=self.property_id,
                error=str(e),
            )
            raise

        result = rates_response.first()
        if result is None:
            logger.warning(
                "Rates provider returned no property results",
                property_id=self.property_id,
                start_date=start_date,
                end_date=end_date,
            )
            raise RateProviderEmptyError(
                f"Rates provider returned no results for property {self.property_id}"
            )

        if len(rates_response.root) > 1:
            logger.debug(
                "Ignoring additional property results",
                property_id=self.property_id,
                result_count=len(rates_response.root),
            )

        logger.info(
            "Successfully fetched rates",
            property_id=self.property_id,
            property_name=result.name,
            rate_plan_count=len(result.rate_plans),
        )
        return result

    async def fetch_rate_plans(self, start_date: str, end_date: str) -> list[RatePlan]:
        """Fetch only the rate plans of the authoritative property result."""
        result = await self.fetch(start_date, end_date)
        return result.rate_plans
