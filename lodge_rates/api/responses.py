"""Response assembly for the public endpoints."""

from typing import Sequence

from fastapi.responses import JSONResponse, PlainTextResponse

from lodge_rates.models.lodge import LodgeRateSnapshot
from lodge_rates.models.provider import RatePlan


def hello_response(name: str) -> PlainTextResponse:
    return PlainTextResponse(f"Hello, {name}!")


def rate_plans_response(rate_plans: Sequence[RatePlan]) -> JSONResponse:
    """JSON array of rate plans in the provider's own shape.

    Only fields the provider actually sent are emitted.
    """
    return JSONResponse(
        content=[
            plan.model_dump(mode="json", by_alias=True, exclude_unset=True)
            for plan in rate_plans
        ],
        status_code=200,
    )


def snapshots_response(snapshots: Sequence[LodgeRateSnapshot]) -> JSONResponse:
    """JSON array of widget snapshots."""
    return JSONResponse(
        content=[snapshot.model_dump(mode="json") for snapshot in snapshots],
        status_code=200,
    )


def error_response(status_code: int, error: str, detail: str) -> JSONResponse:
    return JSONResponse(
        content={"error": error, "detail": detail},
        status_code=status_code,
    )
