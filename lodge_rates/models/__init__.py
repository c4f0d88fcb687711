"""Data models package."""

from lodge_rates.models.lodge import LodgeRateSnapshot
from lodge_rates.models.provider import (
    PropertyRatesResult,
    ProviderRatesResponse,
    RatePlan,
    RatePlanDate,
)
from lodge_rates.models.queries import HelloQuery, RatesQuery

__all__ = [
    "HelloQuery",
    "LodgeRateSnapshot",
    "PropertyRatesResult",
    "ProviderRatesResponse",
    "RatePlan",
    "RatePlanDate",
    "RatesQuery",
]
