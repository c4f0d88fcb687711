"""Pydantic models for the rates provider's rates.json responses."""

from typing import Optional

from pydantic import BaseModel, Field, RootModel


class RatePlanDate(BaseModel):
    """Sellable state of one rate plan on one calendar date."""

    id: Optional[int] = None
    date: str  # Calendar date as sent by the provider, not parsed
    rate: int = Field(ge=0)
    min_stay: int
    max_stay: Optional[int] = None
    stop_online_sell: bool
    close_to_arrival: bool
    close_to_departure: bool
    available: int = Field(ge=0)

    class Config:
        extra = "allow"


class RatePlan(BaseModel):
    """A sellable rate product (e.g. "Standard Room") with its calendar.

    The provider names the calendar ``rate_plan_dates``; ``dates`` is accepted
    too. Dates keep the order the provider returned them in.
    """

    id: int
    name: str
    dates: list[RatePlanDate] = Field(alias="rate_plan_dates")

    class Config:
        extra = "allow"
        populate_by_name = True


class PropertyRatesResult(BaseModel):
    """Rates for one property, as one element of the provider response."""

    name: str
    rate_plans: list[RatePlan]

    class Config:
        extra = "allow"


class ProviderRatesResponse(RootModel[list[PropertyRatesResult]]):
    """Complete rates.json response: a list of per-property results."""

    def first(self) -> Optional[PropertyRatesResult]:
        """Authoritative result, or None when the provider returned nothing."""
        return self.root[0] if self.root else None
