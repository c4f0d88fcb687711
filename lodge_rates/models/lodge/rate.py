"""Pydantic models for the public widget rate format."""

from pydantic import BaseModel, Field


class LodgeRateSnapshot(BaseModel):
    """Current rate and availability for one rate plan.

    Built per request from the plan's first date entry and never stored.
    """

    name: str = Field(description="Rate plan name shown in the widget")
    rate: int = Field(description="Nightly rate in provider units")
    num_available: int = Field(description="Rooms still available to sell")
