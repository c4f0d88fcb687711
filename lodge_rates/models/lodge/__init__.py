"""Public widget data format models."""

from lodge_rates.models.lodge.rate import LodgeRateSnapshot

__all__ = ["LodgeRateSnapshot"]
