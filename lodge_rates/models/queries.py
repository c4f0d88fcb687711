"""Query string models for the public endpoints."""

from pydantic import BaseModel, Field


class HelloQuery(BaseModel):
    """Query for GET /hello."""

    name: str = Field(default="world", description="Who to greet")


class RatesQuery(BaseModel):
    """Query for GET /rates.

    Both dates default to an empty string and are forwarded to the provider
    as-is; the provider decides what an empty bound means.
    """

    start_date: str = Field(default="", description="First date, YYYY-MM-DD")
    end_date: str = Field(default="", description="Last date, YYYY-MM-DD")
