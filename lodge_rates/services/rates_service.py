"""Rates service: resolves the window, fetches and maps provider rates."""

from typing import Optional

from structlog import get_logger

from lodge_rates.clients import RateProviderClient
from lodge_rates.models.lodge import LodgeRateSnapshot
from lodge_rates.models.provider import RatePlan
from lodge_rates.services.date_window import DateWindow, DateWindowResolver
from lodge_rates.transformers import RateMapper

logger = get_logger(__name__)


class RatesService:
    """Per-request rates flow for the configured property.

    Holds only read-only collaborators, so one instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        provider_client: RateProviderClient,
        date_window_resolver: DateWindowResolver,
    ):
        self.provider_client = provider_client
        self.date_window_resolver = date_window_resolver

    async def get_rate_plans(
        self,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> list[RatePlan]:
        """Raw provider rate plans for a caller-supplied window.

        Raises:
            RateProviderError: If the provider call fails
        """
        window = self.date_window_resolver.resolve_explicit(start_date, end_date)
        return await self.provider_client.fetch_rate_plans(window.start_date, window.end_date)

    async def get_snapshots(self, window: DateWindow) -> list[LodgeRateSnapshot]:
        """Mapped snapshots for an already resolved window.

        Raises:
            RateProviderError: If the provider call fails
            MappingError: If a rate plan has no dates
        """
        rate_plans = await self.provider_client.fetch_rate_plans(
            window.start_date, window.end_date
        )
        return RateMapper.map(rate_plans)

    async def get_tonights_rates(self) -> list[LodgeRateSnapshot]:
        """Snapshots for "today" in the property's timezone.

        Raises:
            RateProviderError: If the provider call fails
            MappingError: If a rate plan has no dates
        """
        window = self.date_window_resolver.local_today()
        snapshots = await self.get_snapshots(window)
        logger.info(
            "Resolved tonight's rates",
            local_date=window.start_date,
            snapshot_count=len(snapshots),
        )
        return snapshots
