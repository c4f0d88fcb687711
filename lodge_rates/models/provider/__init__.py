"""Rates provider API response models."""

from lodge_rates.models.provider.rates import (
    PropertyRatesResult,
    ProviderRatesResponse,
    RatePlan,
    RatePlanDate,
)

__all__ = [
    "PropertyRatesResult",
    "ProviderRatesResponse",
    "RatePlan",
    "RatePlanDate",
]
