"""Data transformation package."""

from lodge_rates.transformers.rate_mapper import (
    EmptyPlanDatesError,
    MappingError,
    RateMapper,
)

__all__ = [
    "RateMapper",
    "MappingError",
    "EmptyPlanDatesError",
]
