"""API clients package."""

from lodge_rates.clients.rate_provider_client import (
    RateProviderCancelledError,
    RateProviderClient,
    RateProviderDecodeError,
    RateProviderEmptyError,
    RateProviderError,
    RateProviderNetworkError,
    RateProviderStatusError,
    RateProviderTimeoutError,
)

__all__ = [
    "RateProviderClient",
    "RateProviderError",
    "RateProviderNetworkError",
    "RateProviderTimeoutError",
    "RateProviderCancelledError",
    "RateProviderStatusError",
    "RateProviderDecodeError",
    "RateProviderEmptyError",
]
