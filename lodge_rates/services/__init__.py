"""Business services package."""

from lodge_rates.services.date_window import DateWindow, DateWindowResolver
from lodge_rates.services.rates_service import RatesService

__all__ = [
    "DateWindow",
    "DateWindowResolver",
    "RatesService",
]
